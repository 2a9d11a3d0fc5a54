from __future__ import annotations

from datetime import datetime, timezone

import pytest

from instrument_cluster.formatters import (
    CATALOG,
    MISSING,
    apply_formatter,
    format_date,
    format_date_time,
    format_decimal,
    format_distance,
    format_lon_lats,
    format_pressure,
    format_speed,
    format_temperature,
    format_time,
)
from instrument_cluster.instruction import Formatter


def test_catalog_covers_every_formatter() -> None:
    assert set(CATALOG) == set(Formatter)


@pytest.mark.parametrize(
    "metres,unit,expected",
    [
        (1852.0, "nm", "1.00"),
        (18520.0, None, "10.0"),
        (185200.0, "nm", "100"),
        (1000.0, "km", "1.00"),
        (1500.4, "m", "1500"),
        (None, "nm", MISSING),
    ],
)
def test_format_distance(metres, unit, expected) -> None:
    assert format_distance(metres, unit) == expected


def test_format_decimal_is_fixed_width() -> None:
    assert format_decimal(12.34, 3, 1, True) == "  12.3"
    assert format_decimal(-12.34, 3, 1, True) == " -12.3"
    assert format_decimal(7, 2, 0) == " 7"
    assert format_decimal("junk") == MISSING


def test_time_and_date() -> None:
    assert format_time(0) == "00:00:00"
    assert format_date(0) == "1970-01-01"
    stamp = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    assert format_date_time(stamp) == "2024-05-06 07:08:09"
    assert format_time(None) == MISSING


def test_format_lon_lats() -> None:
    assert format_lon_lats({"lat": 54.5, "lon": -10.25}) == "54\N{DEGREE SIGN}30.000'N 010\N{DEGREE SIGN}15.000'W"
    # Sequences carry longitude first.
    assert format_lon_lats((-1.0, 2.0)) == "02\N{DEGREE SIGN}00.000'N 001\N{DEGREE SIGN}00.000'W"
    assert format_lon_lats({"lat": 54.5}) == MISSING


def test_format_speed_converts_from_metres_per_second() -> None:
    assert format_speed(10 * 1852.0 / 3600.0) == "10.0"
    assert format_speed(10.0, "m/s") == "10.0"
    assert format_speed(10.0, "km/h") == "36.0"


def test_format_temperature_and_pressure() -> None:
    assert format_temperature(293.15) == "20.0"
    assert format_temperature(293.15, "fahrenheit") == "68.0"
    assert format_temperature(300.0, "kelvin") == "300.0"
    assert format_pressure(101300.0) == "1013.0"
    assert format_pressure(100000.0, "bar") == "1.000"


def test_apply_formatter() -> None:
    assert apply_formatter(None, Formatter.TIME) == MISSING
    assert apply_formatter(None, Formatter.TIME, default="--:--") == "--:--"
    assert apply_formatter(5, Formatter.DIRECTION_360, (True,)) == "005"
    assert apply_formatter(5, "formatDirection360", [True]) == "005"
    assert apply_formatter(12, None) == "12"
    assert apply_formatter(12, lambda v: f"<{v}>") == "<12>"
    assert apply_formatter(12, "formatBogus") == "12"
    # Too many parameters for the catalog entry.
    assert apply_formatter(1, Formatter.TIME, ("x", "y"), default="?") == "?"
    assert apply_formatter(float("nan"), Formatter.DECIMAL, default="n/a") == "n/a"
