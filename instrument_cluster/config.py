from __future__ import annotations

import math
from dataclasses import dataclass

from .registry import DEFAULT_MAPPER_MODULES


@dataclass(frozen=True, slots=True)
class ClusterWidgetConfig:
    # Cluster used when a props bag carries no "cluster" key.
    default_cluster: str = ""
    mapper_modules: tuple[str, ...] = DEFAULT_MAPPER_MODULES


@dataclass(frozen=True, slots=True)
class GaugeDefaults:
    """Fallbacks a semicircle gauge uses for props the mapper left out."""

    unit: str
    min_value: float
    max_value: float
    ratio_threshold_normal: float
    ratio_threshold_flat: float
    # Dial degrees, 0 = north, clockwise. Default is the upper half circle.
    start_angle_deg: float = 270.0
    end_angle_deg: float = 450.0
    # "high" shades the top of the range (speed, temperature), "low" the bottom
    # (depth, voltage).
    sector_side: str = "high"
    default_warning_from: float | None = None
    default_alarm_from: float | None = None
    # How a store value becomes a scale value, see gauge_values.display_value.
    conversion: str = ""
    # (span limit, major, minor) rows, first matching row wins.
    tick_table: tuple[tuple[float, float, float], ...] = (
        (6.0, 1.0, 0.5),
        (12.0, 2.0, 1.0),
        (30.0, 5.0, 1.0),
        (60.0, 10.0, 2.0),
        (120.0, 20.0, 5.0),
    )

    def tick_steps(self, span: float) -> tuple[float, float]:
        if not math.isfinite(span) or span <= 0:
            return 10.0, 2.0
        for limit, major, minor in self.tick_table:
            if span <= limit:
                return major, minor
        return 50.0, 10.0


SPEED_GAUGE_DEFAULTS = GaugeDefaults(
    unit="kn",
    conversion="speed",
    min_value=0.0,
    max_value=30.0,
    ratio_threshold_normal=1.1,
    ratio_threshold_flat=3.5,
)
DEPTH_GAUGE_DEFAULTS = GaugeDefaults(
    unit="m",
    min_value=0.0,
    max_value=30.0,
    ratio_threshold_normal=1.1,
    ratio_threshold_flat=3.5,
    sector_side="low",
)
TEMPERATURE_GAUGE_DEFAULTS = GaugeDefaults(
    unit="\N{DEGREE SIGN}C",
    conversion="kelvin",
    min_value=0.0,
    max_value=35.0,
    ratio_threshold_normal=1.1,
    ratio_threshold_flat=3.5,
    tick_table=(
        (8.0, 1.0, 0.5),
        (20.0, 2.0, 1.0),
        (50.0, 5.0, 1.0),
        (100.0, 10.0, 2.0),
        (200.0, 20.0, 5.0),
    ),
)
VOLTAGE_GAUGE_DEFAULTS = GaugeDefaults(
    unit="V",
    min_value=10.0,
    max_value=15.0,
    ratio_threshold_normal=1.1,
    ratio_threshold_flat=3.5,
    sector_side="low",
    default_warning_from=12.2,
    default_alarm_from=11.6,
    tick_table=(
        (3.0, 0.5, 0.1),
        (6.0, 1.0, 0.2),
        (12.0, 2.0, 0.5),
        (30.0, 5.0, 1.0),
        (60.0, 10.0, 2.0),
        (120.0, 20.0, 5.0),
    ),
)


@dataclass(frozen=True, slots=True)
class TextDefaults:
    ratio_threshold_normal: float = 1.0
    ratio_threshold_flat: float = 3.0
    caption_unit_scale: float = 0.8


@dataclass(frozen=True, slots=True)
class DialDefaults:
    ratio_threshold_normal: float = 0.8
    ratio_threshold_flat: float = 2.2
    caption_unit_scale: float = 0.8
