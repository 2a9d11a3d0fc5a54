from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass

import pygame

from .clock import Clock, RealClock
from .config import ClusterWidgetConfig
from .instruction import RenderInstruction
from .widget import ClusterWidget, build_cluster_widget

logger = logging.getLogger(__name__)

WINDOW_SIZE = (960, 600)
TARGET_FPS = 30
BACKGROUND = (10, 10, 14)
GRID = (3, 3)
GAP = 8

# Kelvin offset for the sample water temperature.
KELVIN = 273.15


@dataclass(frozen=True, slots=True)
class Tile:
    title: str
    props: Callable[[float], Mapping[str, object]]


def _wave(t: float, period: float, lo: float, hi: float) -> float:
    return lo + (hi - lo) * (0.5 + 0.5 * math.sin(2.0 * math.pi * t / period))


def sample_tiles() -> tuple[Tile, ...]:
    """Synthetic readings in store units (m/s, kelvin; degrees for angles)."""

    def heading(t: float) -> Mapping[str, object]:
        return {
            "cluster": "courseHeading",
            "kind": "hdtRadial",
            "hdt": (t * 6.0) % 360.0,
            "brg": 42.0,
            "caption_hdtRadial": "HDT",
            "leadingZero": True,
        }

    def wind(t: float) -> Mapping[str, object]:
        return {
            "cluster": "wind",
            "kind": "angleApparentGraphic",
            "awa": _wave(t, 20.0, -150.0, 150.0),
            "aws": _wave(t, 13.0, 2.0, 9.0),
            "angleCaption_AWA": "AWA",
            "speedCaption_AWS": "AWS",
            "speedUnitGraphic": "kn",
            "windLayEnabled": True,
            "layMin": 30.0,
            "layMax": 50.0,
        }

    def sog(t: float) -> Mapping[str, object]:
        return {
            "cluster": "speed",
            "kind": "sogGraphic",
            "sog": _wave(t, 17.0, 0.0, 7.2),
            "caption_sogGraphic": "SOG",
            "unit_sogGraphic": "kn",
            "warningFrom": 20.0,
            "alarmFrom": 25.0,
        }

    def depth(t: float) -> Mapping[str, object]:
        return {
            "cluster": "environment",
            "kind": "depthGraphic",
            "depth": _wave(t, 23.0, 1.0, 25.0),
            "caption_depthGraphic": "DEPTH",
            "unit_depthGraphic": "m",
            "depthAlarmFrom": 2.0,
            "depthWarningFrom": 5.0,
        }

    def water(t: float) -> Mapping[str, object]:
        return {
            "cluster": "environment",
            "kind": "tempGraphic",
            "temp": KELVIN + _wave(t, 60.0, 12.0, 18.0),
            "caption_tempGraphic": "WATER",
            "unit_tempGraphic": "\N{DEGREE SIGN}C",
        }

    def voltage(t: float) -> Mapping[str, object]:
        return {
            "cluster": "vessel",
            "kind": "voltageGraphic",
            "voltage": _wave(t, 40.0, 11.4, 13.8),
            "caption_voltageGraphic": "BATT",
            "unit_voltageGraphic": "V",
            "voltageWarningEnabled": True,
            "voltageWarningFrom": 12.2,
            "voltageAlarmEnabled": True,
            "voltageAlarmFrom": 11.6,
        }

    def position(t: float) -> Mapping[str, object]:
        return {
            "cluster": "position",
            "kind": "boat",
            "boat": {"lat": 54.2 + t * 1e-5, "lon": 10.13},
            "caption_boat": "POS",
        }

    def cog(t: float) -> Mapping[str, object]:
        return {
            "cluster": "courseHeading",
            "kind": "cog",
            "cog": _wave(t, 30.0, 350.0, 370.0),
            "caption_cog": "COG",
            "unit_cog": "\N{DEGREE SIGN}",
            "leadingZero": True,
        }

    def clock(t: float) -> Mapping[str, object]:
        return {"cluster": "time", "value": time.time()}

    return (
        Tile("Heading", heading),
        Tile("Wind", wind),
        Tile("SOG", sog),
        Tile("Depth", depth),
        Tile("Water", water),
        Tile("Battery", voltage),
        Tile("Position", position),
        Tile("COG", cog),
        Tile("Clock", clock),
    )


class ClusterPanel:
    """Grid of widget tiles repainted from the sample feed every frame."""

    def __init__(
        self,
        surface: pygame.Surface,
        *,
        clock: Clock,
        tiles: tuple[Tile, ...] | None = None,
        config: ClusterWidgetConfig | None = None,
    ) -> None:
        self._surface = surface
        self._clock = clock
        self._t0 = clock.now()
        self._tiles = tiles if tiles is not None else sample_tiles()
        # One widget per tile, so each owns its sub-renderer caches.
        self._widgets: list[ClusterWidget] = [build_cluster_widget(config=config) for _ in self._tiles]
        self._canvases: dict[int, pygame.Surface] = {}
        self.last_instructions: list[RenderInstruction] = []
        logger.debug("cluster panel with tiles %s", [tile.title for tile in self._tiles])

    def _cell(self, index: int) -> pygame.Rect:
        cols, rows = GRID
        w, h = self._surface.get_size()
        cw = max(1, (w - GAP * (cols + 1)) // cols)
        ch = max(1, (h - GAP * (rows + 1)) // rows)
        col, row = index % cols, index // cols
        return pygame.Rect(GAP + col * (cw + GAP), GAP + row * (ch + GAP), cw, ch)

    def _canvas(self, index: int, size: tuple[int, int]) -> pygame.Surface:
        canvas = self._canvases.get(index)
        if canvas is None or canvas.get_size() != size:
            canvas = pygame.Surface(size)
            self._canvases[index] = canvas
        return canvas

    def render(self) -> None:
        t = self._clock.now() - self._t0
        self._surface.fill(BACKGROUND)
        instructions: list[RenderInstruction] = []
        for i, (tile, widget) in enumerate(zip(self._tiles, self._widgets)):
            rect = self._cell(i)
            canvas = self._canvas(i, rect.size)
            instructions.append(widget.update(canvas, tile.props(t)))
            self._surface.blit(canvas, rect.topleft)
        self.last_instructions = instructions

    def close(self) -> None:
        for widget in self._widgets:
            widget.finalize()
        self._canvases.clear()


def run(*, max_frames: int | None = None) -> int:
    pygame.init()

    pygame.display.set_caption("Instrument Cluster")
    surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
    clock = pygame.time.Clock()

    panel = ClusterPanel(surface, clock=RealClock())

    frame = 0
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            panel.render()
            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            clock.tick(TARGET_FPS)
    finally:
        panel.close()
        pygame.quit()

    return 0
