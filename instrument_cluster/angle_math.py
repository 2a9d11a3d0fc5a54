from __future__ import annotations

import math
from collections.abc import Callable

DEFAULT_FALLBACK = "---"


def round_half_up(x: float) -> int:
    # Ties round towards +inf so 0.5 -> 1 and -0.5 -> 0, like a dial readout.
    return int(math.floor(x + 0.5))


def _is_finite(x: float) -> bool:
    return isinstance(x, (int, float)) and math.isfinite(x)


def normalize_360(deg: float) -> float:
    """Reduce ``deg`` into [0, 360). Non-finite input is returned unchanged."""

    if not _is_finite(deg):
        return deg
    r = math.fmod(deg, 360.0)
    if r < 0:
        r += 360.0
    if r >= 360.0:
        # -1e-14 + 360 rounds up to 360.0 in float arithmetic.
        r = 0.0
    return r


def normalize_180(deg: float) -> float:
    """Reduce ``deg`` into [-180, 180).

    The boundary is canonicalized to -180 so 180 and -180 never show up as two
    readings of the same angle. Non-finite input is returned unchanged.
    """

    if not _is_finite(deg):
        return deg
    r = normalize_360(deg + 180.0) - 180.0
    if r == 180.0:
        r = -180.0
    return r


def _to_float(raw: object) -> float:
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        try:
            return float(raw.strip())
        except ValueError:
            return math.nan
    return math.nan


def make_angle_formatter(
    is_direction: bool,
    leading_zero: bool,
    fallback: str | None = DEFAULT_FALLBACK,
) -> Callable[[object], str]:
    """Build a text formatter for a compass direction or a signed bearing.

    Directions render as 0..359 (optionally ``"005"``-style padded); bearings
    render as -180..179 with a minus sign and never padded.
    """

    missing = fallback or DEFAULT_FALLBACK

    def fmt(raw: object) -> str:
        n = _to_float(raw)
        if not math.isfinite(n):
            return missing

        if is_direction:
            out = round_half_up(normalize_360(n)) % 360
            text = str(out)
            if leading_zero:
                text = text.zfill(3)
            return text

        a = normalize_180(n)
        r = round_half_up(abs(a))
        out = -r if a < 0 else r
        if out == 180:
            out = -180
        return str(out)

    return fmt


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def rad_to_deg(rad: float) -> float:
    return rad * 180.0 / math.pi


def deg_to_canvas_rad(
    deg: float,
    *,
    zero_at: str = "north",
    clockwise: bool = True,
    rotation_deg: float = 0.0,
) -> float:
    """Map a dial angle onto the screen angle used by cos/sin drawing code.

    Screen angles start at east and grow clockwise (y points down). Non-finite
    input is treated as 0.
    """

    d = _to_float(deg)
    if not math.isfinite(d):
        d = 0.0
    rot = _to_float(rotation_deg)
    d += rot if math.isfinite(rot) else 0.0

    shift = 0.0 if zero_at == "east" else -90.0
    signed = d if clockwise else -d
    return deg_to_rad(normalize_360(signed + shift))


def value_to_angle(
    value: object,
    *,
    min_value: float,
    max_value: float,
    start_deg: float,
    end_deg: float,
    clamp: bool = True,
) -> float:
    bounds = [_to_float(x) for x in (min_value, max_value, start_deg, end_deg)]
    if not all(math.isfinite(x) for x in bounds):
        return math.nan
    lo, hi, start, end = bounds

    v = _to_float(value)
    if not math.isfinite(v):
        return math.nan
    if clamp:
        v = max(lo, min(hi, v))

    t = 0.0 if hi == lo else (v - lo) / (hi - lo)
    return start + (end - start) * t


def angle_to_value(
    angle_deg: object,
    *,
    min_value: float,
    max_value: float,
    start_deg: float,
    end_deg: float,
    clamp: bool = True,
) -> float:
    bounds = [_to_float(x) for x in (min_value, max_value, start_deg, end_deg)]
    if not all(math.isfinite(x) for x in bounds):
        return math.nan
    lo, hi, start, end = bounds

    a = _to_float(angle_deg)
    if not math.isfinite(a):
        return math.nan

    denom = end - start
    t = 0.0 if denom == 0 else (a - start) / denom
    v = lo + (hi - lo) * t
    if clamp:
        v = max(lo, min(hi, v))
    return v
