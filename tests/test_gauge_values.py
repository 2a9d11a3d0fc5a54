from __future__ import annotations

import math

import pytest

from instrument_cluster.config import SPEED_GAUGE_DEFAULTS, VOLTAGE_GAUGE_DEFAULTS
from instrument_cluster.ticks import MAX_TICK_STEPS
from instrument_cluster.gauge_values import (
    ALARM_COLOR,
    WARNING_COLOR,
    Arc,
    ValueRange,
    build_value_tick_angles,
    clamp,
    display_value,
    compute_layout_mode,
    high_end_sectors,
    low_end_sectors,
    normalize_range,
    sector_angles,
)

UPPER_HALF = Arc(start_deg=270.0, end_deg=450.0)


def test_normalize_range() -> None:
    assert normalize_range(None, None, 0, 30) == ValueRange(0.0, 30.0)
    assert normalize_range(5, 5, 0, 30) == ValueRange(5.0, 6.0)
    assert normalize_range("x", 10, 0, 30) == ValueRange(0.0, 10.0)
    assert normalize_range(10, 2, 0, 30) == ValueRange(10.0, 11.0)


def test_clamp() -> None:
    assert clamp(5, 0, 3) == 3.0
    assert clamp(-1, 0, 3) == 0.0
    assert clamp(None, 0.3, 3) == 0.3


@pytest.mark.parametrize(
    "ratio,expected",
    [(0.5, "high"), (1.0, "normal"), (2.0, "normal"), (3.0, "normal"), (3.5, "flat")],
)
def test_layout_mode(ratio: float, expected: str) -> None:
    assert compute_layout_mode(ratio, 1.0, 3.0) == expected


def test_value_ticks_on_arc() -> None:
    majors, minors = build_value_tick_angles(ValueRange(0.0, 30.0), 10, 5, UPPER_HALF)
    assert majors == pytest.approx([270.0, 330.0, 390.0, 450.0])
    assert minors == pytest.approx([300.0, 360.0, 420.0])


def test_value_ticks_force_arc_ends() -> None:
    majors, _ = build_value_tick_angles(ValueRange(1.0, 29.0), 10, 5, UPPER_HALF)
    assert majors[0] == pytest.approx(270.0)
    assert majors[-1] == pytest.approx(450.0)


def test_sector_angles() -> None:
    assert sector_angles(20, 25, ValueRange(0, 30), UPPER_HALF) == pytest.approx((390.0, 420.0))
    assert sector_angles(25, 20, ValueRange(0, 30), UPPER_HALF) == pytest.approx((390.0, 420.0))
    assert sector_angles(20, 20, ValueRange(0, 30), UPPER_HALF) is None
    assert sector_angles(math.nan, 20, ValueRange(0, 30), UPPER_HALF) is None
    # Both ends clamp to max, leaving nothing to paint.
    assert sector_angles(40, 50, ValueRange(0, 30), UPPER_HALF) is None


def test_high_end_sectors() -> None:
    warn, alarm = high_end_sectors(20, 25, ValueRange(0, 30), UPPER_HALF)
    assert (warn.a0, warn.a1) == pytest.approx((390.0, 420.0))
    assert warn.color == WARNING_COLOR
    assert (alarm.a0, alarm.a1) == pytest.approx((420.0, 450.0))
    assert alarm.color == ALARM_COLOR

    (only,) = high_end_sectors(20, None, ValueRange(0, 30), UPPER_HALF)
    assert (only.a0, only.a1) == pytest.approx((390.0, 450.0))


def test_low_end_sectors() -> None:
    alarm, warn = low_end_sectors(5, 2, ValueRange(0, 30), UPPER_HALF)
    assert alarm.color == ALARM_COLOR
    assert (alarm.a0, alarm.a1) == pytest.approx((270.0, 282.0))
    assert warn.color == WARNING_COLOR
    assert (warn.a0, warn.a1) == pytest.approx((282.0, 300.0))

    (only,) = low_end_sectors(5, None, ValueRange(0, 30), UPPER_HALF)
    assert only.color == WARNING_COLOR
    assert (only.a0, only.a1) == pytest.approx((270.0, 300.0))

    assert low_end_sectors(None, None, ValueRange(0, 30), UPPER_HALF) == []


def test_gauge_tick_tables() -> None:
    assert SPEED_GAUGE_DEFAULTS.tick_steps(30.0) == (5.0, 1.0)
    assert SPEED_GAUGE_DEFAULTS.tick_steps(500.0) == (50.0, 10.0)
    assert SPEED_GAUGE_DEFAULTS.tick_steps(math.nan) == (10.0, 2.0)
    assert VOLTAGE_GAUGE_DEFAULTS.tick_steps(5.0) == (1.0, 0.2)


def test_value_ticks_are_bounded_for_tiny_minor_step() -> None:
    majors, minors = build_value_tick_angles(ValueRange(0.0, 30.0), 5.0, 1e-6, UPPER_HALF)
    assert len(majors) + len(minors) <= MAX_TICK_STEPS + 2
    assert majors[0] == pytest.approx(270.0)
    assert majors[-1] == pytest.approx(450.0)

    majors, minors = build_value_tick_angles(ValueRange(0.0, 30.0), 5.0, 1e-300, UPPER_HALF)
    assert len(majors) + len(minors) <= MAX_TICK_STEPS + 2


def test_display_value() -> None:
    assert display_value(5.0, "speed", "kn") == pytest.approx(9.7)
    assert display_value(5.0, "speed", "km/h") == pytest.approx(18.0)
    assert display_value(293.15, "kelvin") == pytest.approx(20.0)
    assert display_value(12.4) == 12.4
    assert math.isnan(display_value(None, "speed", "kn"))
    assert math.isnan(display_value("x", "kelvin"))
