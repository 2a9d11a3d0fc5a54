from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from .angle_math import make_angle_formatter
from .instruction import FormatterRef, RenderInstruction

RawProps = Mapping[str, object]


def out(
    value: object | None = None,
    caption: str | None = None,
    unit: str | None = None,
    formatter: FormatterRef | None = None,
    formatter_parameters: list[object] | tuple[object, ...] | None = None,
) -> RenderInstruction:
    """Assemble a text instruction, leaving out every argument that is None."""

    params = (
        tuple(formatter_parameters)
        if isinstance(formatter_parameters, (list, tuple))
        else None
    )
    return RenderInstruction(
        value=value,
        caption=caption,
        unit=unit,
        formatter=formatter,
        formatter_parameters=params,
    )


def compact(**fields: object) -> dict[str, object]:
    """Renderer props without the keys whose value is None."""

    return {k: v for k, v in fields.items() if v is not None}


def num(value: object) -> float | None:
    """Finite float for ``value`` or None (bools and junk strings included)."""

    if value is None or isinstance(value, bool):
        return None
    try:
        n = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return n if math.isfinite(n) else None


@dataclass(frozen=True, slots=True)
class MapperToolkit:
    """Per-translate helper bundle handed to every mapper."""

    props: RawProps = field(default_factory=dict)

    def cap(self, kind: object) -> str | None:
        return self.props.get(f"caption_{kind}")  # type: ignore[return-value]

    def unit(self, kind: object) -> str | None:
        return self.props.get(f"unit_{kind}")  # type: ignore[return-value]

    def out(
        self,
        value: object | None = None,
        caption: str | None = None,
        unit: str | None = None,
        formatter: FormatterRef | None = None,
        formatter_parameters: list[object] | tuple[object, ...] | None = None,
    ) -> RenderInstruction:
        return out(value, caption, unit, formatter, formatter_parameters)

    def num(self, value: object) -> float | None:
        return num(value)

    def make_angle_formatter(
        self,
        is_direction: bool,
        leading_zero: bool,
        fallback: str | None = None,
    ) -> Callable[[object], str]:
        return make_angle_formatter(is_direction, leading_zero, fallback)


def create_toolkit(props: RawProps | None) -> MapperToolkit:
    return MapperToolkit(props=props if props is not None else {})
