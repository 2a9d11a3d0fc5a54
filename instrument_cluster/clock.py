from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Time source for the sample feed.

    The demo panel reads elapsed time through this so tests can step it.
    """

    def now(self) -> float:
        """Return monotonic seconds."""


class RealClock:
    """Clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()
