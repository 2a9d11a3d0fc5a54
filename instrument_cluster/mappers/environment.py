from __future__ import annotations

from ..instruction import Cluster, Formatter, RenderInstruction, RendererKind
from ..toolkit import MapperToolkit, RawProps, compact

CLUSTER = Cluster.ENVIRONMENT


def _depth_gauge(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    num = toolkit.num
    warn_on = props.get("depthWarningEnabled") is not False
    alarm_on = props.get("depthAlarmEnabled") is not False
    return RenderInstruction(
        value=props.get("depth"),
        caption=toolkit.cap("depthGraphic"),
        unit=toolkit.unit("depthGraphic"),
        renderer=RendererKind.DEPTH_GAUGE,
        renderer_props=compact(
            min_value=num(props.get("depthMinValue")),
            max_value=num(props.get("depthMaxValue")),
            tick_major=num(props.get("depthTickMajor")),
            tick_minor=num(props.get("depthTickMinor")),
            show_end_labels=bool(props.get("depthShowEndLabels")),
            alarm_from=num(props.get("depthAlarmFrom")) if alarm_on else None,
            warning_from=num(props.get("depthWarningFrom")) if warn_on else None,
            ratio_threshold_normal=num(props.get("depthRatioThresholdNormal")),
            ratio_threshold_flat=num(props.get("depthRatioThresholdFlat")),
            caption_unit_scale=num(props.get("captionUnitScale")),
        ),
    )


def _temperature_gauge(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    num = toolkit.num
    # Unlike depth, temperature sectors are opt-in.
    warn_on = props.get("tempWarningEnabled") is True
    alarm_on = props.get("tempAlarmEnabled") is True
    return RenderInstruction(
        value=props.get("temp"),
        caption=toolkit.cap("tempGraphic"),
        unit=toolkit.unit("tempGraphic"),
        renderer=RendererKind.TEMPERATURE_GAUGE,
        renderer_props=compact(
            min_value=num(props.get("tempMinValue")),
            max_value=num(props.get("tempMaxValue")),
            tick_major=num(props.get("tempTickMajor")),
            tick_minor=num(props.get("tempTickMinor")),
            show_end_labels=bool(props.get("tempShowEndLabels")),
            warning_from=num(props.get("tempWarningFrom")) if warn_on else None,
            alarm_from=num(props.get("tempAlarmFrom")) if alarm_on else None,
            ratio_threshold_normal=num(props.get("tempRatioThresholdNormal")),
            ratio_threshold_flat=num(props.get("tempRatioThresholdFlat")),
            caption_unit_scale=num(props.get("captionUnitScale")),
        ),
    )


def translate(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    kind = props.get("kind")

    if kind == "depthGraphic":
        return _depth_gauge(props, toolkit)
    if kind == "tempGraphic":
        return _temperature_gauge(props, toolkit)
    if kind == "temp":
        return toolkit.out(
            props.get("temp"), toolkit.cap("temp"), toolkit.unit("temp"), Formatter.TEMPERATURE, ["celsius"]
        )
    if kind == "pressure":
        return toolkit.out(
            props.get("value"), toolkit.cap("pressure"), toolkit.unit("pressure"), Formatter.PRESSURE, ["hPa"]
        )
    # Depth is the cluster's default reading.
    return toolkit.out(props.get("depth"), toolkit.cap("depth"), toolkit.unit("depth"), Formatter.DECIMAL, [3, 1, True])
