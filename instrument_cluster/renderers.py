"""Pygame painters for the cluster widgets.

Each sub-renderer paints one instruction onto a ``pygame.Surface`` (the
canvas). Static dial faces are cached per size and dropped on ``finalize``.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Protocol

import pygame

from .angle_math import angle_to_value, deg_to_canvas_rad, make_angle_formatter, value_to_angle
from .config import (
    DEPTH_GAUGE_DEFAULTS,
    SPEED_GAUGE_DEFAULTS,
    TEMPERATURE_GAUGE_DEFAULTS,
    VOLTAGE_GAUGE_DEFAULTS,
    DialDefaults,
    GaugeDefaults,
    TextDefaults,
)
from .formatters import MISSING, apply_formatter, format_direction_360, format_lat, format_lon, format_speed
from .gauge_values import (
    Arc,
    clamp,
    compute_layout_mode,
    build_value_tick_angles,
    display_value,
    high_end_sectors,
    low_end_sectors,
    normalize_range,
)
from .instruction import RendererKind
from .ticks import build_tick_angles

Props = Mapping[str, object]
Point = tuple[int, int]

TEXT_COLOR = (236, 244, 255)
TICK_COLOR = (192, 202, 220)
RIM_COLOR = (198, 204, 214)
LUBBER_COLOR = (255, 43, 43)
MARKER_COLOR = (255, 180, 40)
NEEDLE_COLOR = (255, 96, 64)
PORT_COLOR = (220, 60, 60)
STARBOARD_COLOR = (60, 200, 90)

COMPASS_LABELS = {0: "N", 45: "NE", 90: "E", 135: "SE", 180: "S", 225: "SW", 270: "W", 315: "NW"}


class SubRenderer(Protocol):
    wants_hide_native_head: bool

    def render_canvas(self, canvas: pygame.Surface, props: Props) -> None:
        ...

    def finalize(self, *args: object) -> None:
        ...


def _number(value: object, fallback: float) -> float:
    try:
        n = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return fallback
    return n if math.isfinite(n) else fallback


def _text(value: object) -> str:
    return "" if value is None else str(value).strip()


def polar(cx: float, cy: float, radius: float, deg: float, rotation_deg: float = 0.0) -> Point:
    rad = deg_to_canvas_rad(deg, rotation_deg=rotation_deg)
    return int(round(cx + math.cos(rad) * radius)), int(round(cy + math.sin(rad) * radius))


def arc_points(cx: float, cy: float, radius: float, a0: float, a1: float) -> list[Point]:
    steps = max(2, int(abs(a1 - a0) / 3.0) + 1)
    return [polar(cx, cy, radius, a0 + (a1 - a0) * i / steps) for i in range(steps + 1)]


class _Painter:
    """Shared font cache and text helpers."""

    def __init__(self) -> None:
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}
        self._sprites: dict[tuple[object, ...], pygame.Surface] = {}

    def font(self, px: int, bold: bool = False) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        key = (max(6, int(px)), bold)
        cached = self._fonts.get(key)
        if cached is None:
            cached = pygame.font.Font(None, key[0])
            cached.set_bold(bold)
            self._fonts[key] = cached
        return cached

    def sprite(self, key: tuple[object, ...], builder: Callable[[], pygame.Surface]) -> pygame.Surface:
        cached = self._sprites.get(key)
        if cached is not None:
            return cached
        built = builder()
        self._sprites[key] = built
        return built

    def cached_sprites(self) -> int:
        return len(self._sprites)

    def fit_px(self, text: str, max_w: int, max_h: int, bold: bool = False) -> int:
        px = max(6, int(max_h))
        if not text:
            return px
        w, _ = self.font(px, bold).size(text)
        if w > max_w > 0:
            px = max(6, int(px * max_w / w))
        return px

    def draw_text(
        self,
        surface: pygame.Surface,
        text: str,
        rect: pygame.Rect,
        *,
        px: int | None = None,
        bold: bool = False,
        align: str = "center",
        color: tuple[int, int, int] = TEXT_COLOR,
    ) -> None:
        if not text or rect.w <= 0 or rect.h <= 0:
            return
        size = px if px is not None else self.fit_px(text, rect.w, rect.h, bold)
        surf = self.font(size, bold).render(text, True, color)
        if align == "left":
            pos = surf.get_rect(midleft=rect.midleft)
        elif align == "right":
            pos = surf.get_rect(midright=rect.midright)
        else:
            pos = surf.get_rect(center=rect.center)
        surface.blit(surf, pos)

    def draw_no_data(self, surface: pygame.Surface) -> None:
        w, h = surface.get_size()
        shade = pygame.Surface((w, h), pygame.SRCALPHA)
        shade.fill((*TEXT_COLOR, 51))
        surface.blit(shade, (0, 0))
        px = max(12, int(min(w, h) * 0.18))
        self.draw_text(surface, "NO DATA", surface.get_rect(), px=px, bold=True)

    def reset(self) -> None:
        self._fonts.clear()
        self._sprites.clear()


def _dial_geometry(surface: pygame.Surface) -> tuple[int, int, int, int]:
    w, h = surface.get_size()
    pad = max(6, int(min(w, h) * 0.04))
    radius = max(14, (min(w, h) - 2 * pad) // 2)
    return w // 2, h // 2, radius, pad


def _dial_layout_mode(props: Props, size: tuple[int, int], defaults: DialDefaults) -> str:
    w, h = size
    return compute_layout_mode(
        w / max(1, h),
        _number(props.get("ratio_threshold_normal"), defaults.ratio_threshold_normal),
        _number(props.get("ratio_threshold_flat"), defaults.ratio_threshold_flat),
    )


def _draw_ticks(
    surface: pygame.Surface,
    cx: int,
    cy: int,
    radius: int,
    majors: tuple[float, ...] | list[float],
    minors: tuple[float, ...] | list[float],
    *,
    rotation_deg: float = 0.0,
) -> None:
    major_len = max(6, int(radius * 0.10))
    minor_len = max(3, int(radius * 0.05))
    for a in majors:
        pygame.draw.line(
            surface,
            TICK_COLOR,
            polar(cx, cy, radius - major_len, a, rotation_deg),
            polar(cx, cy, radius, a, rotation_deg),
            2,
        )
    for a in minors:
        pygame.draw.line(
            surface,
            TICK_COLOR,
            polar(cx, cy, radius - minor_len, a, rotation_deg),
            polar(cx, cy, radius, a, rotation_deg),
            1,
        )


def _draw_needle(surface: pygame.Surface, cx: int, cy: int, length: int, deg: float) -> None:
    tip = polar(cx, cy, length, deg)
    tail = polar(cx, cy, max(5, int(length * 0.16)), deg + 180.0)
    pygame.draw.line(surface, NEEDLE_COLOR, tail, tip, 3)
    pygame.draw.circle(surface, NEEDLE_COLOR, (cx, cy), max(3, length // 14))


class ThreeValueTextRenderer:
    """Caption / value / unit text block, the default renderer."""

    wants_hide_native_head = False

    def __init__(self, defaults: TextDefaults | None = None) -> None:
        self._defaults = defaults or TextDefaults()
        self._painter = _Painter()

    def texts(self, props: Props) -> tuple[str, str, str]:
        value = apply_formatter(
            props.get("value"),
            props.get("formatter"),  # type: ignore[arg-type]
            props.get("formatter_parameters"),  # type: ignore[arg-type]
            default=str(props.get("default", MISSING)),
        )
        return _text(props.get("caption")), value.strip(), _text(props.get("unit"))

    def layout_mode(self, props: Props, size: tuple[int, int]) -> str:
        w, h = size
        caption, _, unit = self.texts(props)
        mode = compute_layout_mode(
            w / max(1, h),
            _number(props.get("ratio_threshold_normal"), self._defaults.ratio_threshold_normal),
            _number(props.get("ratio_threshold_flat"), self._defaults.ratio_threshold_flat),
        )
        if not caption:
            return "flat"
        if not unit and mode == "high":
            return "normal"
        return mode

    def render_canvas(self, canvas: pygame.Surface, props: Props) -> None:
        w, h = canvas.get_size()
        if not w or not h:
            return
        canvas.fill((0, 0, 0))

        caption, value, unit = self.texts(props)
        mode = self.layout_mode(props, (w, h))
        scale = clamp(props.get("caption_unit_scale", self._defaults.caption_unit_scale), 0.3, 3.0)
        pad = max(6, int(min(w, h) * 0.04))
        inner = canvas.get_rect().inflate(-2 * pad, -2 * pad)
        paint = self._painter

        if mode == "high":
            total = 1.0 + 2.0 * scale
            cap_h = int(inner.h * scale / total)
            val_h = inner.h - 2 * cap_h
            paint.draw_text(canvas, caption, pygame.Rect(inner.x, inner.y, inner.w, cap_h), bold=True)
            paint.draw_text(canvas, value, pygame.Rect(inner.x, inner.y + cap_h, inner.w, val_h), bold=True)
            paint.draw_text(canvas, unit, pygame.Rect(inner.x, inner.y + cap_h + val_h, inner.w, cap_h), bold=True)
        elif mode == "normal":
            cap_h = int(inner.h * scale / (1.0 + scale))
            paint.draw_text(canvas, caption, pygame.Rect(inner.x, inner.y, inner.w, cap_h), bold=True)
            row = pygame.Rect(inner.x, inner.y + cap_h, inner.w, inner.h - cap_h)
            unit_w = int(row.w * 0.25) if unit else 0
            paint.draw_text(canvas, value, pygame.Rect(row.x, row.y, row.w - unit_w, row.h), bold=True)
            paint.draw_text(canvas, unit, pygame.Rect(row.right - unit_w, row.y, unit_w, row.h), align="left")
        else:
            cap_w = int(inner.w * 0.25) if caption else 0
            unit_w = int(inner.w * 0.2) if unit else 0
            paint.draw_text(canvas, caption, pygame.Rect(inner.x, inner.y, cap_w, inner.h), align="left")
            paint.draw_text(
                canvas, value, pygame.Rect(inner.x + cap_w, inner.y, inner.w - cap_w - unit_w, inner.h), bold=True
            )
            paint.draw_text(canvas, unit, pygame.Rect(inner.right - unit_w, inner.y, unit_w, inner.h), align="right")

        if props.get("disconnect"):
            paint.draw_no_data(canvas)

    def finalize(self, *args: object) -> None:
        self._painter.reset()


class PositionCoordinateRenderer:
    """Two stacked readings, e.g. latitude over longitude or date over time."""

    wants_hide_native_head = False

    def __init__(self, defaults: TextDefaults | None = None) -> None:
        self._defaults = defaults or TextDefaults()
        self._painter = _Painter()

    def texts(self, props: Props) -> tuple[str, str, str, str]:
        fallback = str(props.get("default", MISSING))
        value = props.get("value")
        if isinstance(value, Mapping):
            pair: tuple[object, object] = (value.get("lat"), value.get("lon"))
        elif isinstance(value, (list, tuple)) and len(value) == 2:
            # [lon, lat]; the top line shows the second entry.
            pair = (value[1], value[0])
        else:
            pair = (None, None)

        fmt_top = props.get("coordinate_formatter_lat")
        fmt_bottom = props.get("coordinate_formatter_lon")
        if fmt_top is None and fmt_bottom is None:
            top = format_lat(pair[0])
            bottom = format_lon(pair[1])
            top = fallback if top == MISSING else top
            bottom = fallback if bottom == MISSING else bottom
        else:
            top = apply_formatter(pair[0], fmt_top, default=fallback)  # type: ignore[arg-type]
            bottom = apply_formatter(pair[1], fmt_bottom, default=fallback)  # type: ignore[arg-type]
        return _text(props.get("caption")), top, bottom, _text(props.get("unit"))

    def render_canvas(self, canvas: pygame.Surface, props: Props) -> None:
        w, h = canvas.get_size()
        if not w or not h:
            return
        canvas.fill((0, 0, 0))

        caption, top, bottom, unit = self.texts(props)
        mode = compute_layout_mode(
            w / max(1, h),
            _number(props.get("ratio_threshold_normal"), self._defaults.ratio_threshold_normal),
            _number(props.get("ratio_threshold_flat"), self._defaults.ratio_threshold_flat),
        )
        pad = max(6, int(min(w, h) * 0.04))
        inner = canvas.get_rect().inflate(-2 * pad, -2 * pad)
        paint = self._painter

        head_h = int(inner.h * 0.25) if caption or unit else 0
        if head_h:
            head = pygame.Rect(inner.x, inner.y, inner.w, head_h)
            paint.draw_text(canvas, caption, head, align="left", bold=True)
            paint.draw_text(canvas, unit, head, align="right")
        body = pygame.Rect(inner.x, inner.y + head_h, inner.w, inner.h - head_h)

        if mode == "flat" and props.get("coordinate_flat_from_axes"):
            paint.draw_text(canvas, f"{top} {bottom}", body, bold=True)
        else:
            half = body.h // 2
            paint.draw_text(canvas, top, pygame.Rect(body.x, body.y, body.w, half), bold=True)
            paint.draw_text(canvas, bottom, pygame.Rect(body.x, body.y + half, body.w, body.h - half), bold=True)

        if props.get("disconnect"):
            paint.draw_no_data(canvas)

    def finalize(self, *args: object) -> None:
        self._painter.reset()


class CompassGaugeRenderer:
    """Rotating compass card under a fixed lubber line, with an optional marker."""

    wants_hide_native_head = True

    def __init__(self, defaults: DialDefaults | None = None) -> None:
        self._defaults = defaults or DialDefaults()
        self._painter = _Painter()
        self._ticks = build_tick_angles(start_deg=0, end_deg=360, step_major=30, step_minor=10)

    def layout_mode(self, props: Props, size: tuple[int, int]) -> str:
        return _dial_layout_mode(props, size, self._defaults)

    def heading_text(self, props: Props) -> str:
        text = format_direction_360(props.get("heading"), bool(props.get("leading_zero")))
        return str(props.get("default", MISSING)) if text == MISSING else text

    def render_canvas(self, canvas: pygame.Surface, props: Props) -> None:
        w, h = canvas.get_size()
        if not w or not h:
            return
        canvas.fill((0, 0, 0))
        cx, cy, radius, _ = _dial_geometry(canvas)
        paint = self._painter

        heading = _number(props.get("heading"), math.nan)
        marker = _number(props.get("marker_course"), math.nan)
        rotation = -heading if math.isfinite(heading) else 0.0

        pygame.draw.circle(canvas, RIM_COLOR, (cx, cy), radius, 1)
        _draw_ticks(canvas, cx, cy, radius, self._ticks.majors, self._ticks.minors, rotation_deg=rotation)

        lubber = max(10, int(radius * 0.12))
        pygame.draw.polygon(
            canvas,
            LUBBER_COLOR,
            [polar(cx, cy, radius - 2 * lubber, 0), polar(cx, cy, radius, -4), polar(cx, cy, radius, 4)],
        )

        if math.isfinite(marker) and math.isfinite(heading):
            rel = marker - heading
            pygame.draw.line(
                canvas,
                MARKER_COLOR,
                polar(cx, cy, radius - lubber, rel),
                polar(cx, cy, radius + 2, rel),
                max(3, int(radius * 0.05)),
            )

        label_px = max(10, int(radius * 0.16))
        label_r = radius - max(16, int(radius * 0.2))
        for deg, label in COMPASS_LABELS.items():
            x, y = polar(cx, cy, label_r, deg, rotation)
            size = label_px if deg % 90 == 0 else int(label_px * 0.75)
            paint.draw_text(canvas, label, pygame.Rect(x - size, y - size // 2, 2 * size, size), px=size, bold=True)

        inner = max(10, int(label_r * 0.55))
        value_rect = pygame.Rect(cx - inner, cy - inner // 2, 2 * inner, inner)
        paint.draw_text(canvas, self.heading_text(props), value_rect, bold=True)
        caption = _text(props.get("caption"))
        if caption and self.layout_mode(props, (w, h)) != "flat":
            scale = clamp(props.get("caption_unit_scale", self._defaults.caption_unit_scale), 0.3, 3.0)
            cap_px = max(8, int(inner * 0.5 * scale))
            paint.draw_text(canvas, caption, pygame.Rect(cx - inner, cy - inner, 2 * inner, inner // 2), px=cap_px)

        if props.get("disconnect"):
            paint.draw_no_data(canvas)

    def finalize(self, *args: object) -> None:
        self._painter.reset()


class WindDialRenderer:
    """Full-circle apparent/true wind dial, bow up, with optional laylines."""

    wants_hide_native_head = True

    def __init__(self, defaults: DialDefaults | None = None) -> None:
        self._defaults = defaults or DialDefaults()
        self._painter = _Painter()

    @property
    def sprite_count(self) -> int:
        return self._painter.cached_sprites()

    def layout_mode(self, props: Props, size: tuple[int, int]) -> str:
        return _dial_layout_mode(props, size, self._defaults)

    def texts(self, props: Props) -> tuple[str, str]:
        fallback = str(props.get("default", MISSING))
        angle_fmt = make_angle_formatter(False, bool(props.get("leading_zero")), fallback)
        speed = format_speed(props.get("speed"), props.get("speed_unit"))
        return angle_fmt(props.get("angle")), fallback if speed == MISSING else speed

    def _face(self, size: tuple[int, int], cx: int, cy: int, radius: int, lay: tuple[float, float] | None) -> pygame.Surface:
        def build() -> pygame.Surface:
            face = pygame.Surface(size, pygame.SRCALPHA)
            pygame.draw.circle(face, RIM_COLOR, (cx, cy), radius, 1)
            ticks = build_tick_angles(start_deg=-180, end_deg=180, step_major=30, step_minor=10)
            _draw_ticks(face, cx, cy, radius, ticks.majors, ticks.minors)
            if lay is not None:
                lo, hi = lay
                band = max(3, int(radius * 0.06))
                r = radius - band
                pygame.draw.lines(face, STARBOARD_COLOR, False, arc_points(cx, cy, r, lo, hi), band)
                pygame.draw.lines(face, PORT_COLOR, False, arc_points(cx, cy, r, -hi, -lo), band)
            return face

        return self._painter.sprite(("wind_face", size, lay), build)

    def render_canvas(self, canvas: pygame.Surface, props: Props) -> None:
        w, h = canvas.get_size()
        if not w or not h:
            return
        canvas.fill((0, 0, 0))
        cx, cy, radius, pad = _dial_geometry(canvas)
        paint = self._painter

        lay = None
        if props.get("lay_enabled"):
            lo = clamp(props.get("lay_min", 0.0), 0.0, 180.0)
            hi = clamp(props.get("lay_max", 0.0), 0.0, 180.0)
            if hi > lo:
                lay = (lo, hi)
        canvas.blit(self._face((w, h), cx, cy, radius, lay), (0, 0))

        angle = _number(props.get("angle"), math.nan)
        if math.isfinite(angle):
            _draw_needle(canvas, cx, cy, int(radius * 0.85), angle)

        angle_text, speed_text = self.texts(props)
        box_w = max(10, int(radius * 0.7))
        box_h = max(10, int(radius * 0.3))
        left = pygame.Rect(pad, pad, box_w, box_h)
        right = pygame.Rect(w - pad - box_w, pad, box_w, box_h)
        paint.draw_text(canvas, angle_text, left, align="left", bold=True)
        paint.draw_text(canvas, speed_text, right, align="right", bold=True)
        scale = clamp(props.get("caption_unit_scale", self._defaults.caption_unit_scale), 0.3, 3.0)
        small = max(8, int(box_h * 0.6 * scale))
        if self.layout_mode(props, (w, h)) != "flat":
            paint.draw_text(canvas, _text(props.get("angle_caption")), left.move(0, box_h), px=small, align="left")
            paint.draw_text(canvas, _text(props.get("speed_caption")), right.move(0, box_h), px=small, align="right")

        if props.get("disconnect"):
            paint.draw_no_data(canvas)

    def finalize(self, *args: object) -> None:
        self._painter.reset()


class SemicircleGaugeRenderer:
    """Value needle over a scaled arc with warning/alarm sectors."""

    wants_hide_native_head = True

    def __init__(self, defaults: GaugeDefaults) -> None:
        self._defaults = defaults
        self._painter = _Painter()

    @property
    def defaults(self) -> GaugeDefaults:
        return self._defaults

    def arc(self, props: Props) -> Arc:
        d = self._defaults
        return Arc(
            start_deg=_number(props.get("start_angle_deg"), d.start_angle_deg),
            end_deg=_number(props.get("end_angle_deg"), d.end_angle_deg),
        )

    def sectors(self, props: Props):
        d = self._defaults
        rng = normalize_range(props.get("min_value"), props.get("max_value"), d.min_value, d.max_value)
        # An absent threshold falls back to the gauge default, if it has one.
        warning = props.get("warning_from", d.default_warning_from)
        alarm = props.get("alarm_from", d.default_alarm_from)
        build = low_end_sectors if d.sector_side == "low" else high_end_sectors
        return build(warning, alarm, rng, self.arc(props))

    def unit(self, props: Props) -> str:
        return _text(props.get("unit")) or self._defaults.unit

    def scale_value(self, props: Props) -> float:
        """Reading in scale units; NaN when there is nothing to show."""

        return display_value(props.get("value"), self._defaults.conversion, self.unit(props))

    def value_text(self, props: Props) -> str:
        fallback = str(props.get("default", MISSING))
        formatter = props.get("formatter")
        if formatter is None:
            n = self.scale_value(props)
            return f"{n:.1f}" if math.isfinite(n) else fallback
        return apply_formatter(
            props.get("value"),
            formatter,  # type: ignore[arg-type]
            props.get("formatter_parameters"),  # type: ignore[arg-type]
            default=fallback,
        ).strip()

    def render_canvas(self, canvas: pygame.Surface, props: Props) -> None:
        w, h = canvas.get_size()
        if not w or not h:
            return
        canvas.fill((0, 0, 0))
        d = self._defaults
        paint = self._painter

        rng = normalize_range(props.get("min_value"), props.get("max_value"), d.min_value, d.max_value)
        arc = self.arc(props)
        default_major, default_minor = d.tick_steps(rng.span)
        major = _number(props.get("tick_major"), default_major)
        minor = _number(props.get("tick_minor"), default_minor)

        mode = compute_layout_mode(
            w / h,
            _number(props.get("ratio_threshold_normal"), d.ratio_threshold_normal),
            _number(props.get("ratio_threshold_flat"), d.ratio_threshold_flat),
        )
        # Flat tiles keep the dial square on the left and put the reading beside it.
        gauge_w = min(w, 2 * h) if mode == "flat" else w
        pad = max(6, int(min(w, h) * 0.04))
        radius = max(14, min(gauge_w // 2 - pad, h - 2 * pad))
        cx = gauge_w // 2
        cy = pad + radius

        pygame.draw.lines(canvas, RIM_COLOR, False, arc_points(cx, cy, radius, arc.start_deg, arc.end_deg), 1)
        band = max(3, int(radius * 0.08))
        for sector in self.sectors(props):
            pygame.draw.lines(
                canvas, sector.color, False, arc_points(cx, cy, radius - band // 2, sector.a0, sector.a1), band
            )

        majors, minors = build_value_tick_angles(rng, major, minor, arc)
        _draw_ticks(canvas, cx, cy, radius, majors, minors)

        label_px = max(8, int(radius * 0.12))
        show_ends = bool(props.get("show_end_labels"))
        for i, a in enumerate(majors):
            if not show_ends and i in (0, len(majors) - 1):
                continue
            v = angle_to_value(a, min_value=rng.min, max_value=rng.max, start_deg=arc.start_deg, end_deg=arc.end_deg)
            x, y = polar(cx, cy, radius - 2.2 * label_px, a)
            label = f"{v:g}" if abs(v - round(v)) > 1e-6 else str(int(round(v)))
            paint.draw_text(canvas, label, pygame.Rect(x - label_px, y - label_px // 2, 2 * label_px, label_px), px=label_px)

        needle = value_to_angle(
            self.scale_value(props),
            min_value=rng.min,
            max_value=rng.max,
            start_deg=arc.start_deg,
            end_deg=arc.end_deg,
        )
        if math.isfinite(needle):
            _draw_needle(canvas, cx, cy, int(radius * 0.8), needle)

        text_h = max(10, int(radius * 0.35))
        if mode == "flat":
            value_rect = pygame.Rect(gauge_w, pad, w - gauge_w - pad, h - 2 * pad)
        else:
            value_rect = pygame.Rect(cx - radius // 2, cy - text_h - 4, radius, text_h)
        paint.draw_text(canvas, self.value_text(props), value_rect, bold=True)
        unit = self.unit(props)
        caption = _text(props.get("caption"))
        foot = pygame.Rect(pad, min(h - pad - text_h // 2, cy + 4), w - 2 * pad, max(8, text_h // 2))
        paint.draw_text(canvas, caption, foot, align="left")
        paint.draw_text(canvas, unit, foot, align="right")

        if props.get("disconnect"):
            paint.draw_no_data(canvas)

    def finalize(self, *args: object) -> None:
        self._painter.reset()


def default_sub_renderers() -> dict[RendererKind, SubRenderer]:
    """One instance per renderer kind, created once per widget."""

    return {
        RendererKind.THREE_VALUE_TEXT: ThreeValueTextRenderer(),
        RendererKind.WIND_DIAL: WindDialRenderer(),
        RendererKind.COMPASS_GAUGE: CompassGaugeRenderer(),
        RendererKind.SPEED_GAUGE: SemicircleGaugeRenderer(SPEED_GAUGE_DEFAULTS),
        RendererKind.DEPTH_GAUGE: SemicircleGaugeRenderer(DEPTH_GAUGE_DEFAULTS),
        RendererKind.TEMPERATURE_GAUGE: SemicircleGaugeRenderer(TEMPERATURE_GAUGE_DEFAULTS),
        RendererKind.VOLTAGE_GAUGE: SemicircleGaugeRenderer(VOLTAGE_GAUGE_DEFAULTS),
        RendererKind.POSITION_COORDINATE: PositionCoordinateRenderer(),
    }
