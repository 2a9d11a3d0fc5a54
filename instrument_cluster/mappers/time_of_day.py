from __future__ import annotations

from ..instruction import Cluster, Formatter, RenderInstruction
from ..toolkit import MapperToolkit, RawProps

CLUSTER = Cluster.TIME


def translate(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    # Time widgets are captionless.
    return toolkit.out(props.get("value"), None, props.get("unit"), Formatter.TIME, [])  # type: ignore[arg-type]
