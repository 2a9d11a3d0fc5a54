from __future__ import annotations

from ..instruction import EMPTY_INSTRUCTION, Cluster, Formatter, RenderInstruction
from ..toolkit import MapperToolkit, RawProps

CLUSTER = Cluster.DISTANCE

# The distance formatter needs the unit to pick metric or nautical subdivision.
UNIT_AWARE_KINDS = frozenset({"anchor", "watch"})


def translate(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    kind = props.get("kind")
    if not isinstance(kind, str) or not kind:
        return EMPTY_INSTRUCTION

    unit = toolkit.unit(kind)
    params = [unit] if kind in UNIT_AWARE_KINDS else []
    return toolkit.out(props.get(kind), toolkit.cap(kind), unit, Formatter.DISTANCE, params)
