from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum


class Cluster(StrEnum):
    COURSE_HEADING = "courseHeading"
    SPEED = "speed"
    POSITION = "position"
    DISTANCE = "distance"
    ENVIRONMENT = "environment"
    WIND = "wind"
    TIME = "time"
    NAV = "nav"
    ANCHOR = "anchor"
    VESSEL = "vessel"


class RendererKind(StrEnum):
    THREE_VALUE_TEXT = "ThreeValueTextWidget"
    COMPASS_GAUGE = "CompassGaugeWidget"
    WIND_DIAL = "WindDialWidget"
    SPEED_GAUGE = "SpeedGaugeWidget"
    DEPTH_GAUGE = "DepthGaugeWidget"
    TEMPERATURE_GAUGE = "TemperatureGaugeWidget"
    VOLTAGE_GAUGE = "VoltageGaugeWidget"
    POSITION_COORDINATE = "PositionCoordinateWidget"

    @classmethod
    def lookup(cls, name: object) -> RendererKind | None:
        """Return the member named by ``name`` or None for anything unknown."""

        if isinstance(name, RendererKind):
            return name
        try:
            return cls(str(name))
        except ValueError:
            return None


class Formatter(StrEnum):
    """Formatter tags understood by the formatter catalog."""

    DISTANCE = "formatDistance"
    DIRECTION_360 = "formatDirection360"
    DECIMAL = "formatDecimal"
    TIME = "formatTime"
    DATE_TIME = "formatDateTime"
    DATE = "formatDate"
    LON_LATS = "formatLonLats"
    SPEED = "formatSpeed"
    TEMPERATURE = "formatTemperature"
    PRESSURE = "formatPressure"


FormatterRef = Formatter | Callable[[object], str]


@dataclass(frozen=True, slots=True)
class RenderInstruction:
    """Canonical, renderer-agnostic result of translating one props bag.

    ``None`` means "absent": such fields are left out of ``to_dict()`` so a
    renderer can tell "use your own default" apart from a present falsy value.
    """

    value: object | None = None
    caption: str | None = None
    unit: str | None = None
    formatter: FormatterRef | None = None
    formatter_parameters: tuple[object, ...] | None = None
    renderer: RendererKind | None = None
    renderer_props: Mapping[str, object] | None = None

    @property
    def is_empty(self) -> bool:
        return not self.to_dict()

    def to_dict(self) -> dict[str, object]:
        fields = {
            "value": self.value,
            "caption": self.caption,
            "unit": self.unit,
            "formatter": self.formatter,
            "formatter_parameters": self.formatter_parameters,
            "renderer": self.renderer,
            "renderer_props": self.renderer_props,
        }
        return {k: v for k, v in fields.items() if v is not None}

    def merged_props(self) -> dict[str, object]:
        """Base fields overlaid with ``renderer_props``; later wins on collision."""

        merged = self.to_dict()
        overlay = merged.pop("renderer_props", None)
        if isinstance(overlay, Mapping):
            merged.update(overlay)
        return merged


EMPTY_INSTRUCTION = RenderInstruction()
