from __future__ import annotations

import math
from collections.abc import Callable

from ..instruction import EMPTY_INSTRUCTION, Cluster, Formatter, RenderInstruction, RendererKind
from ..toolkit import MapperToolkit, RawProps, compact

CLUSTER = Cluster.VESSEL

DATE_TIME_RATIO_THRESHOLD_NORMAL = 1.2
DATE_TIME_RATIO_THRESHOLD_FLAT = 4.0

GPS_OK = "\N{LARGE GREEN CIRCLE}"
GPS_LOST = "\N{LARGE RED CIRCLE}"


def _fallback_text(props: RawProps) -> str:
    if "default" in props:
        return str(props["default"])
    return "---"


def is_gps_valid(value: object) -> bool:
    if value is True:
        return True
    if value is False or value is None:
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value) and value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        return text not in ("", "0", "false", "off", "no")
    return bool(value)


def status_circle(value: object) -> str:
    return GPS_OK if is_gps_valid(value) else GPS_LOST


def make_attitude_formatter(fallback: str, toolkit: MapperToolkit) -> Callable[[object], str]:
    """Pitch/roll arrive in radians; display them as signed whole degrees."""

    angle_fmt = toolkit.make_angle_formatter(False, False, fallback)

    def fmt(raw: object) -> str:
        n = toolkit.num(raw)
        if n is None:
            return fallback
        return angle_fmt(math.degrees(n))

    return fmt


def _voltage_value(props: RawProps) -> object:
    value = props.get("value")
    return value if value is not None else props.get("voltage")


def _voltage_gauge(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    num = toolkit.num
    warn_enabled = bool(props.get("voltageWarningEnabled"))
    alarm_enabled = bool(props.get("voltageAlarmEnabled"))
    return RenderInstruction(
        value=_voltage_value(props),
        caption=toolkit.cap("voltageGraphic"),
        unit=toolkit.unit("voltageGraphic"),
        formatter=Formatter.DECIMAL,
        formatter_parameters=(3, 1, True),
        renderer=RendererKind.VOLTAGE_GAUGE,
        renderer_props=compact(
            min_value=num(props.get("voltageMinValue")),
            max_value=num(props.get("voltageMaxValue")),
            tick_major=num(props.get("voltageTickMajor")),
            tick_minor=num(props.get("voltageTickMinor")),
            show_end_labels=bool(props.get("voltageShowEndLabels")),
            warning_from=num(props.get("voltageWarningFrom")) if warn_enabled else None,
            alarm_from=num(props.get("voltageAlarmFrom")) if alarm_enabled else None,
            ratio_threshold_normal=num(props.get("voltageRatioThresholdNormal")),
            ratio_threshold_flat=num(props.get("voltageRatioThresholdFlat")),
            caption_unit_scale=num(props.get("captionUnitScale")),
        ),
    )


def _date_time(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    normal = toolkit.num(props.get("dateTimeRatioThresholdNormal"))
    flat = toolkit.num(props.get("dateTimeRatioThresholdFlat"))
    clock = props.get("clock")
    return RenderInstruction(
        value=(clock, clock),
        caption=toolkit.cap("dateTime"),
        unit=toolkit.unit("dateTime"),
        formatter=Formatter.DATE_TIME,
        formatter_parameters=(),
        renderer=RendererKind.POSITION_COORDINATE,
        renderer_props=compact(
            ratio_threshold_normal=DATE_TIME_RATIO_THRESHOLD_NORMAL if normal is None else normal,
            ratio_threshold_flat=DATE_TIME_RATIO_THRESHOLD_FLAT if flat is None else flat,
            coordinate_formatter_lat=Formatter.DATE,
            coordinate_formatter_lon=Formatter.TIME,
            coordinate_flat_from_axes=True,
            coordinate_raw_values=True,
            default=_fallback_text(props),
        ),
    )


def _time_status(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    return RenderInstruction(
        value=(props.get("clock"), props.get("gpsValid")),
        caption=toolkit.cap("timeStatus"),
        unit=toolkit.unit("timeStatus"),
        renderer=RendererKind.POSITION_COORDINATE,
        renderer_props=compact(
            coordinate_formatter_lat=status_circle,
            coordinate_formatter_lon=Formatter.TIME,
            coordinate_flat_from_axes=True,
            coordinate_raw_values=True,
            default=_fallback_text(props),
        ),
    )


def translate(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    kind = props.get("kind")

    if kind == "voltageGraphic":
        return _voltage_gauge(props, toolkit)
    if kind == "voltage":
        return toolkit.out(
            _voltage_value(props),
            toolkit.cap("voltage"),
            toolkit.unit("voltage"),
            Formatter.DECIMAL,
            [3, 1, True],
        )
    if kind == "clock":
        return toolkit.out(props.get("clock"), toolkit.cap("clock"), toolkit.unit("clock"), Formatter.TIME, [])
    if kind == "dateTime":
        return _date_time(props, toolkit)
    if kind == "timeStatus":
        return _time_status(props, toolkit)
    if kind in ("pitch", "roll"):
        return toolkit.out(
            props.get(kind),
            toolkit.cap(kind),
            toolkit.unit(kind),
            make_attitude_formatter(_fallback_text(props), toolkit),
            [],
        )
    return EMPTY_INSTRUCTION
