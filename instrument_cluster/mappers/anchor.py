from __future__ import annotations

from ..instruction import EMPTY_INSTRUCTION, Cluster, Formatter, RenderInstruction
from ..toolkit import MapperToolkit, RawProps

CLUSTER = Cluster.ANCHOR


def translate(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    kind = props.get("kind")

    if kind in ("distance", "watch"):
        unit = toolkit.unit(kind)
        return toolkit.out(props.get(kind), toolkit.cap(kind), unit, Formatter.DISTANCE, [unit])
    if kind == "bearing":
        return toolkit.out(
            props.get("bearing"),
            toolkit.cap("bearing"),
            toolkit.unit("bearing"),
            Formatter.DIRECTION_360,
            [bool(props.get("leadingZero"))],
        )
    return EMPTY_INSTRUCTION
