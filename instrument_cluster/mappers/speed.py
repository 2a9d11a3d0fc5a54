from __future__ import annotations

from ..instruction import EMPTY_INSTRUCTION, Cluster, Formatter, RenderInstruction, RendererKind
from ..toolkit import MapperToolkit, RawProps, compact

CLUSTER = Cluster.SPEED

TEXT_KINDS = frozenset({"sog", "stw"})
GRAPHIC_KINDS = {"sogGraphic": "sog", "stwGraphic": "stw"}


def translate(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    kind = props.get("kind")
    num = toolkit.num

    if kind in GRAPHIC_KINDS:
        # Sectors are shown unless the layout switched them off explicitly.
        warn_on = props.get("speedWarningEnabled") is not False
        alarm_on = props.get("speedAlarmEnabled") is not False
        return RenderInstruction(
            value=props.get(GRAPHIC_KINDS[kind]),
            caption=toolkit.cap(kind),
            unit=toolkit.unit(kind),
            renderer=RendererKind.SPEED_GAUGE,
            renderer_props=compact(
                min_value=num(props.get("minValue")),
                max_value=num(props.get("maxValue")),
                start_angle_deg=num(props.get("startAngleDeg")),
                end_angle_deg=num(props.get("endAngleDeg")),
                tick_major=num(props.get("tickMajor")),
                tick_minor=num(props.get("tickMinor")),
                show_end_labels=bool(props.get("showEndLabels")),
                warning_from=num(props.get("warningFrom")) if warn_on else None,
                alarm_from=num(props.get("alarmFrom")) if alarm_on else None,
                ratio_threshold_normal=num(props.get("speedRatioThresholdNormal")),
                ratio_threshold_flat=num(props.get("speedRatioThresholdFlat")),
                caption_unit_scale=num(props.get("captionUnitScale")),
            ),
        )

    if kind not in TEXT_KINDS:
        return EMPTY_INSTRUCTION
    unit = toolkit.unit(kind)
    return toolkit.out(props.get(kind), toolkit.cap(kind), unit, Formatter.SPEED, [unit])
