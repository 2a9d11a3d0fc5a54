from __future__ import annotations

from ..instruction import EMPTY_INSTRUCTION, Cluster, Formatter, RenderInstruction, RendererKind
from ..toolkit import MapperToolkit, RawProps, compact

CLUSTER = Cluster.WIND

# kind -> (value key, is_direction)
ANGLE_KINDS = {
    "angleTrue": ("twa", False),
    "angleApparent": ("awa", False),
    "angleTrueDirection": ("twd", True),
}
SPEED_KINDS = {"speedTrue": "tws", "speedApparent": "aws"}


def _dial(props: RawProps, toolkit: MapperToolkit, *, true_wind: bool) -> RenderInstruction:
    num = toolkit.num
    return RenderInstruction(
        renderer=RendererKind.WIND_DIAL,
        renderer_props=compact(
            angle=props.get("twa" if true_wind else "awa"),
            speed=props.get("tws" if true_wind else "aws"),
            angle_caption=props.get("angleCaption_TWA" if true_wind else "angleCaption_AWA"),
            speed_caption=props.get("speedCaption_TWS" if true_wind else "speedCaption_AWS"),
            angle_unit=props.get("angleUnitGraphic"),
            speed_unit=props.get("speedUnitGraphic"),
            lay_enabled=bool(props.get("windLayEnabled")),
            lay_min=num(props.get("layMin")),
            lay_max=num(props.get("layMax")),
            ratio_threshold_normal=num(props.get("dialRatioThresholdNormal")),
            ratio_threshold_flat=num(props.get("dialRatioThresholdFlat")),
            caption_unit_scale=num(props.get("captionUnitScale")),
            leading_zero=bool(props.get("leadingZero")),
        ),
    )


def translate(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    kind = props.get("kind")

    if kind == "angleTrueGraphic":
        return _dial(props, toolkit, true_wind=True)
    if kind == "angleApparentGraphic":
        return _dial(props, toolkit, true_wind=False)

    if kind in ANGLE_KINDS:
        key, is_direction = ANGLE_KINDS[kind]
        fmt = toolkit.make_angle_formatter(
            is_direction, bool(props.get("leadingZero")), props.get("default")  # type: ignore[arg-type]
        )
        return toolkit.out(props.get(key), toolkit.cap(kind), toolkit.unit(kind), fmt, [])

    if kind in SPEED_KINDS:
        unit = toolkit.unit(kind)
        return toolkit.out(props.get(SPEED_KINDS[kind]), toolkit.cap(kind), unit, Formatter.SPEED, [unit])
    return EMPTY_INSTRUCTION
