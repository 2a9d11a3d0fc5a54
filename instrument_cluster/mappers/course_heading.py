from __future__ import annotations

from ..instruction import EMPTY_INSTRUCTION, Cluster, Formatter, RenderInstruction, RendererKind
from ..toolkit import MapperToolkit, RawProps, compact

CLUSTER = Cluster.COURSE_HEADING

TEXT_KINDS = frozenset({"cog", "hdt", "hdm", "brg"})
# hdtGraphic/hdmGraphic are the names older layouts still store.
RADIAL_KINDS = {
    "hdtRadial": "hdt",
    "hdmRadial": "hdm",
    "hdtGraphic": "hdt",
    "hdmGraphic": "hdm",
}


def translate(props: RawProps, toolkit: MapperToolkit) -> RenderInstruction:
    kind = props.get("kind")
    leading_zero = bool(props.get("leadingZero"))

    if kind in RADIAL_KINDS:
        return RenderInstruction(
            caption=toolkit.cap(kind),
            unit=toolkit.unit(kind),
            renderer=RendererKind.COMPASS_GAUGE,
            renderer_props=compact(
                heading=props.get(RADIAL_KINDS[kind]),
                marker_course=props.get("brg"),
                leading_zero=leading_zero,
                caption_unit_scale=toolkit.num(props.get("captionUnitScale")),
                ratio_threshold_normal=toolkit.num(props.get("compRatioThresholdNormal")),
                ratio_threshold_flat=toolkit.num(props.get("compRatioThresholdFlat")),
            ),
        )

    if kind in TEXT_KINDS:
        return toolkit.out(
            props.get(kind),
            toolkit.cap(kind),
            toolkit.unit(kind),
            Formatter.DIRECTION_360,
            [leading_zero],
        )
    return EMPTY_INSTRUCTION
