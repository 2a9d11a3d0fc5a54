from __future__ import annotations

from ..instruction import Cluster, Formatter, RenderInstruction
from ..toolkit import MapperToolkit, RawProps

CLUSTER = Cluster.POSITION


def translate(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    kind = props.get("kind")
    value = props.get("wp") if kind == "wp" else props.get("boat")
    return toolkit.out(value, toolkit.cap(kind), toolkit.unit(kind), Formatter.LON_LATS, [])
