from __future__ import annotations

import math
from dataclasses import dataclass

from .angle_math import value_to_angle
from .formatters import MISSING, format_speed
from .ticks import MAX_TICK_STEPS

Color = tuple[int, int, int]

WARNING_COLOR: Color = (231, 198, 106)
ALARM_COLOR: Color = (255, 122, 118)


@dataclass(frozen=True, slots=True)
class Arc:
    start_deg: float
    end_deg: float


@dataclass(frozen=True, slots=True)
class ValueRange:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


@dataclass(frozen=True, slots=True)
class Sector:
    a0: float
    a1: float
    color: Color


def _num(x: object) -> float:
    try:
        v = float(x)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return math.nan
    return v


def clamp(value: object, lo: float, hi: float) -> float:
    n = _num(value)
    if not math.isfinite(n):
        return float(lo)
    return max(float(lo), min(float(hi), n))


def normalize_range(
    min_raw: object,
    max_raw: object,
    default_min: float,
    default_max: float,
) -> ValueRange:
    """Usable gauge range: falls back to defaults and forces max > min."""

    lo = _num(min_raw)
    hi = _num(max_raw)
    if not math.isfinite(lo):
        lo = _num(default_min)
    if not math.isfinite(lo):
        lo = 0.0
    if not math.isfinite(hi):
        hi = _num(default_max)
    if not math.isfinite(hi):
        hi = lo + 1.0
    if hi <= lo:
        hi = lo + 1.0
    return ValueRange(min=lo, max=hi)


KELVIN_OFFSET = 273.15


def display_value(value: object, conversion: str = "", unit: object = None) -> float:
    """Store value (SI) as the number a gauge scale is drawn in.

    ``conversion`` is ``"speed"`` (m/s to ``unit``, rounded like the text
    reading), ``"kelvin"`` (to celsius) or empty for values already in
    display units. Unusable input gives NaN.
    """

    n = _num(value)
    if not math.isfinite(n):
        return math.nan
    if conversion == "speed":
        text = format_speed(n, unit)
        return math.nan if text == MISSING else float(text)
    if conversion == "kelvin":
        return n - KELVIN_OFFSET
    return n


def compute_layout_mode(ratio: float, threshold_normal: float, threshold_flat: float) -> str:
    if ratio < threshold_normal:
        return "high"
    if ratio > threshold_flat:
        return "flat"
    return "normal"


def _angle(value: float, rng: ValueRange, arc: Arc) -> float:
    return value_to_angle(
        value,
        min_value=rng.min,
        max_value=rng.max,
        start_deg=arc.start_deg,
        end_deg=arc.end_deg,
    )


def build_value_tick_angles(
    rng: ValueRange,
    major_step: object,
    minor_step: object,
    arc: Arc,
) -> tuple[list[float], list[float]]:
    """Tick angles for a value scale laid out on ``arc``.

    Both ends of the arc are always majors so the scale reads as closed.
    The walk visits at most ``MAX_TICK_STEPS`` values.
    """

    majors: list[float] = []
    minors: list[float] = []
    if rng.max <= rng.min:
        return majors, minors

    minor = abs(_num(minor_step))
    major = abs(_num(major_step))
    if not math.isfinite(minor) or minor <= 0:
        minor = rng.span / 20.0
    if not math.isfinite(major) or major <= 0:
        major = minor * 5.0

    count = rng.span / minor
    steps = MAX_TICK_STEPS - 1 if not math.isfinite(count) else max(1, min(MAX_TICK_STEPS - 1, round(count)))
    for i in range(steps + 1):
        v = min(rng.min + i * minor, rng.max)
        rel = (v - rng.min) / major
        target = majors if abs(rel - round(rel)) <= 1e-4 else minors
        target.append(_angle(v, rng, arc))
        if v == rng.max:
            break

    if not majors or not math.isclose(majors[0], arc.start_deg, abs_tol=1e-6):
        majors.insert(0, arc.start_deg)
    if not math.isclose(majors[-1], arc.end_deg, abs_tol=1e-6):
        majors.append(arc.end_deg)
    return majors, minors


def sector_angles(
    value_from: object,
    value_to: object,
    rng: ValueRange,
    arc: Arc,
) -> tuple[float, float] | None:
    f = _num(value_from)
    t = _num(value_to)
    if not (math.isfinite(f) and math.isfinite(t)):
        return None

    ff = clamp(f, rng.min, rng.max)
    tt = clamp(t, rng.min, rng.max)
    if abs(tt - ff) < 1e-9:
        return None

    a0, a1 = sorted((_angle(ff, rng, arc), _angle(tt, rng, arc)))
    if abs(a1 - a0) < 1e-6:
        return None
    return a0, a1


def high_end_sectors(
    warning_from: object,
    alarm_from: object,
    rng: ValueRange,
    arc: Arc,
) -> list[Sector]:
    """Warning band up to the alarm start, alarm band up to the range max."""

    warn = _num(warning_from)
    alarm = _num(alarm_from)
    warning_to = alarm if math.isfinite(alarm) and math.isfinite(warn) and alarm > warn else rng.max

    sectors: list[Sector] = []
    if math.isfinite(warn):
        span = sector_angles(warn, warning_to, rng, arc)
        if span is not None:
            sectors.append(Sector(span[0], span[1], WARNING_COLOR))
    if math.isfinite(alarm):
        span = sector_angles(alarm, rng.max, rng, arc)
        if span is not None:
            sectors.append(Sector(span[0], span[1], ALARM_COLOR))
    return sectors


def low_end_sectors(
    warning_from: object,
    alarm_from: object,
    rng: ValueRange,
    arc: Arc,
) -> list[Sector]:
    """Alarm band from the range min, warning band stacked above it."""

    warn = _num(warning_from)
    alarm = _num(alarm_from)
    alarm_to = clamp(alarm, rng.min, rng.max) if math.isfinite(alarm) else math.nan
    warning_to = clamp(warn, rng.min, rng.max) if math.isfinite(warn) else math.nan

    sectors: list[Sector] = []
    alarm_span = None
    if math.isfinite(alarm_to) and alarm_to > rng.min:
        alarm_span = sector_angles(rng.min, alarm_to, rng, arc)
    if alarm_span is not None:
        sectors.append(Sector(alarm_span[0], alarm_span[1], ALARM_COLOR))

    if math.isfinite(alarm_to) and math.isfinite(warning_to) and warning_to > alarm_to:
        span = sector_angles(alarm_to, warning_to, rng, arc)
        if span is not None:
            sectors.append(Sector(span[0], span[1], WARNING_COLOR))
    elif alarm_span is None and math.isfinite(warning_to) and warning_to > rng.min:
        span = sector_angles(rng.min, warning_to, rng, arc)
        if span is not None:
            sectors.append(Sector(span[0], span[1], WARNING_COLOR))
    return sectors
