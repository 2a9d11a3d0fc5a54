"""Text formatting for instruction values.

Mappers only name a ``Formatter`` plus its ordered parameters; the renderers
resolve that tag here. Inputs follow the data store's SI conventions: metres,
metres per second, kelvin, pascal, radians for attitude, epoch seconds or
``datetime`` for time.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime, time, timezone

from .angle_math import make_angle_formatter
from .instruction import Formatter, FormatterRef

MISSING = "---"

METRES_PER_NM = 1852.0
METRES_PER_SM = 1609.344
METRES_PER_FT = 0.3048
METRES_PER_YD = 0.9144

_DISTANCE_FACTORS = {
    "nm": METRES_PER_NM,
    "km": 1000.0,
    "sm": METRES_PER_SM,
    "m": 1.0,
    "ft": METRES_PER_FT,
    "yd": METRES_PER_YD,
}
_SPEED_FACTORS = {
    "kn": 3600.0 / METRES_PER_NM,
    "km/h": 3.6,
    "kmh": 3.6,
    "mph": 3600.0 / METRES_PER_SM,
    "m/s": 1.0,
    "ms": 1.0,
}


def _number(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        n = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return n if math.isfinite(n) else None


def _scaled(x: float) -> str:
    a = abs(x)
    if a < 10:
        return f"{x:.2f}"
    if a < 100:
        return f"{x:.1f}"
    return f"{x:.0f}"


def format_distance(value: object, unit: object = None) -> str:
    metres = _number(value)
    if metres is None:
        return MISSING
    key = str(unit or "nm").strip().lower()
    factor = _DISTANCE_FACTORS.get(key, METRES_PER_NM)
    converted = metres / factor
    if factor <= 1.0:
        # Short units read as whole numbers.
        return f"{converted:.0f}"
    return _scaled(converted)


def format_direction_360(value: object, leading_zero: object = False) -> str:
    return make_angle_formatter(True, bool(leading_zero), MISSING)(value)


def format_decimal(value: object, int_digits: object = 3, frac_digits: object = 1, signed: object = False) -> str:
    """Fixed-width text: ``int_digits`` places before the point, right aligned.

    With ``signed`` one extra column is reserved for the sign so positive and
    negative readings line up.
    """

    n = _number(value)
    if n is None:
        return MISSING
    frac = max(0, int(frac_digits))  # type: ignore[call-overload]
    width = max(1, int(int_digits)) + (frac + 1 if frac else 0)  # type: ignore[call-overload]
    if signed:
        width += 1
    return f"{n:.{frac}f}".rjust(width)


def _as_datetime(value: object) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, time):
        return datetime.combine(date(1970, 1, 1), value)
    seconds = _number(value)
    if seconds is None:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def format_time(value: object) -> str:
    dt = _as_datetime(value)
    if dt is None:
        return MISSING
    return dt.strftime("%H:%M:%S")


def format_date(value: object) -> str:
    dt = _as_datetime(value)
    if dt is None:
        return MISSING
    return dt.strftime("%Y-%m-%d")


def format_date_time(value: object) -> str:
    dt = _as_datetime(value)
    if dt is None:
        return MISSING
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def _lat_lon(value: object) -> tuple[float, float] | None:
    if isinstance(value, Mapping):
        lat = _number(value.get("lat"))
        lon = _number(value.get("lon"))
    elif isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
        # Sequences are [lon, lat].
        lon = _number(value[0])
        lat = _number(value[1])
    else:
        return None
    if lat is None or lon is None:
        return None
    return lat, lon


def _dm(deg: float, width: int, pos: str, neg: str) -> str:
    hemi = pos if deg >= 0 else neg
    a = abs(deg)
    whole = int(a)
    minutes = (a - whole) * 60.0
    if round(minutes, 3) >= 60.0:
        whole += 1
        minutes = 0.0
    return f"{whole:0{width}d}\N{DEGREE SIGN}{minutes:06.3f}'{hemi}"


def format_lat(value: object) -> str:
    n = _number(value)
    return MISSING if n is None else _dm(n, 2, "N", "S")


def format_lon(value: object) -> str:
    n = _number(value)
    return MISSING if n is None else _dm(n, 3, "E", "W")


def format_lon_lats(value: object) -> str:
    pos = _lat_lon(value)
    if pos is None:
        return MISSING
    return f"{format_lat(pos[0])} {format_lon(pos[1])}"


def format_speed(value: object, unit: object = None) -> str:
    ms = _number(value)
    if ms is None:
        return MISSING
    factor = _SPEED_FACTORS.get(str(unit or "kn").strip().lower(), _SPEED_FACTORS["kn"])
    return f"{ms * factor:.1f}"


def format_temperature(value: object, unit: object = "celsius") -> str:
    kelvin = _number(value)
    if kelvin is None:
        return MISSING
    key = str(unit or "celsius").strip().lower()
    if key in ("kelvin", "k"):
        return f"{kelvin:.1f}"
    celsius = kelvin - 273.15
    if key in ("fahrenheit", "f"):
        return f"{celsius * 9.0 / 5.0 + 32.0:.1f}"
    return f"{celsius:.1f}"


def format_pressure(value: object, unit: object = "hPa") -> str:
    pascal = _number(value)
    if pascal is None:
        return MISSING
    key = str(unit or "hPa").strip().lower()
    if key == "pa":
        return f"{pascal:.0f}"
    if key == "bar":
        return f"{pascal / 100000.0:.3f}"
    return f"{pascal / 100.0:.1f}"


CATALOG: Mapping[Formatter, Callable[..., str]] = {
    Formatter.DISTANCE: format_distance,
    Formatter.DIRECTION_360: format_direction_360,
    Formatter.DECIMAL: format_decimal,
    Formatter.TIME: format_time,
    Formatter.DATE_TIME: format_date_time,
    Formatter.DATE: format_date,
    Formatter.LON_LATS: format_lon_lats,
    Formatter.SPEED: format_speed,
    Formatter.TEMPERATURE: format_temperature,
    Formatter.PRESSURE: format_pressure,
}


def apply_formatter(
    value: object,
    formatter: FormatterRef | str | None,
    parameters: Sequence[object] | None = None,
    *,
    default: str = MISSING,
) -> str:
    """Render ``value`` as display text; anything unformattable yields ``default``."""

    if value is None:
        return default
    params = tuple(parameters or ())

    if formatter is None:
        return str(value)
    if callable(formatter) and not isinstance(formatter, str):
        text = formatter(value)
    else:
        try:
            fn = CATALOG[Formatter(formatter)]
        except ValueError:
            return str(value)
        try:
            text = fn(value, *params)
        except (TypeError, ValueError):
            return default
    return default if text == MISSING else text
