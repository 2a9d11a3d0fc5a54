"""Smoke test for the demo panel.

Runs the pygame main loop for a handful of frames with the SDL dummy video
driver, so every sample widget is translated and painted at least once.
"""

from __future__ import annotations

import os

# Use the dummy drivers before importing pygame or the application
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


def test_app_runs_headless() -> None:
    from instrument_cluster.app import run

    exit_code = run(max_frames=3)
    assert exit_code == 0
