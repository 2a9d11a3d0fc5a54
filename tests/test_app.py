from __future__ import annotations

import os
from dataclasses import dataclass

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from instrument_cluster.app import ClusterPanel, Tile, sample_tiles
from instrument_cluster.clock import RealClock
from instrument_cluster.instruction import RendererKind


@dataclass
class FakeClock:
    t: float = 0.0

    def now(self) -> float:
        return self.t

    def advance(self, dt: float) -> None:
        self.t += dt


def test_panel_renders_every_sample_tile() -> None:
    pygame.font.init()
    clock = FakeClock()
    panel = ClusterPanel(pygame.Surface((600, 400)), clock=clock)

    panel.render()
    clock.advance(1.5)
    panel.render()

    tiles = sample_tiles()
    assert len(panel.last_instructions) == len(tiles)
    assert all(not instr.is_empty for instr in panel.last_instructions)
    assert panel.last_instructions[0].renderer is RendererKind.COMPASS_GAUGE
    assert panel.last_instructions[0].renderer_props["heading"] == 9.0

    panel.close()


def test_panel_with_custom_tiles() -> None:
    pygame.font.init()
    tiles = (Tile("Depth", lambda t: {"cluster": "environment", "depth": 3.0 + t}),)
    clock = FakeClock(t=2.0)
    panel = ClusterPanel(pygame.Surface((300, 200)), clock=clock, tiles=tiles)

    clock.advance(1.0)
    panel.render()

    (instr,) = panel.last_instructions
    assert instr.value == 4.0
    panel.close()


def test_real_clock_is_monotonic() -> None:
    clock = RealClock()
    a = clock.now()
    b = clock.now()
    assert b >= a


def test_sample_speed_feed_is_in_metres_per_second() -> None:
    sog = next(tile for tile in sample_tiles() if tile.title == "SOG")
    # The gauge scale tops out at 30 kn, about 15.4 m/s.
    assert all(0.0 <= sog.props(t)["sog"] <= 7.2 for t in (0.0, 4.25, 8.5, 12.75))
