from __future__ import annotations

from ..instruction import EMPTY_INSTRUCTION, Cluster, Formatter, RenderInstruction
from ..toolkit import MapperToolkit, RawProps

CLUSTER = Cluster.NAV

KIND_FORMATTERS: dict[str, Formatter] = {
    "eta": Formatter.TIME,
    "rteEta": Formatter.TIME,
    "clock": Formatter.TIME,
    "dst": Formatter.DISTANCE,
    "rteDistance": Formatter.DISTANCE,
    "positionBoat": Formatter.LON_LATS,
    "positionWp": Formatter.LON_LATS,
}


def translate(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    kind = props.get("kind")

    if kind == "vmg":
        unit = toolkit.unit("vmg")
        return toolkit.out(props.get("vmg"), toolkit.cap("vmg"), unit, Formatter.SPEED, [unit])

    formatter = KIND_FORMATTERS.get(kind) if isinstance(kind, str) else None
    if formatter is None:
        return EMPTY_INSTRUCTION
    return toolkit.out(props.get(kind), toolkit.cap(kind), toolkit.unit(kind), formatter, [])
