from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from .angle_math import round_half_up

# Upper bound on visited angles per call; a tiny step is truncated here
# instead of looping for millions of iterations.
MAX_TICK_STEPS = 5000

DEFAULT_STEP_MAJOR = 30.0
DEFAULT_STEP_MINOR = 10.0


class MajorMode(StrEnum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


@dataclass(frozen=True, slots=True)
class Sweep:
    start: float
    end: float
    sweep: float
    direction: int


@dataclass(frozen=True, slots=True)
class TickAngles:
    majors: tuple[float, ...]
    minors: tuple[float, ...]


def _finite(x: object) -> float | None:
    try:
        v = float(x)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def compute_sweep(start_deg: object, end_deg: object) -> Sweep:
    """Span and direction from ``start_deg`` to ``end_deg``.

    Equal endpoints mean a full turn, not a zero-length arc.
    """

    s = _finite(start_deg)
    e = _finite(end_deg)
    if s is None or e is None:
        return Sweep(start=0.0, end=0.0, sweep=0.0, direction=1)

    sweep = e - s
    if sweep == 0:
        sweep = 360.0
    return Sweep(start=s, end=e, sweep=sweep, direction=1 if sweep >= 0 else -1)


def _step(value: object, default: float) -> float:
    v = _finite(value)
    if v is None or v == 0:
        return default
    return abs(v)


def build_tick_angles(
    *,
    start_deg: float = 0.0,
    end_deg: float = 360.0,
    step_major: float = DEFAULT_STEP_MAJOR,
    step_minor: float = DEFAULT_STEP_MINOR,
    include_end: bool = False,
    major_mode: MajorMode | str = MajorMode.ABSOLUTE,
) -> TickAngles:
    """Walk the sweep in ``step_minor`` increments, splitting majors from minors.

    In absolute mode an angle is major when its rounded value is a multiple of
    ``step_major``; in relative mode its rounded offset from the start is.
    With ``include_end`` the exact end angle is appended once after the walk.
    At most ``MAX_TICK_STEPS`` angles are visited by the walk.
    """

    mode = MajorMode(major_mode)
    major = _step(step_major, DEFAULT_STEP_MAJOR)
    minor = _step(step_minor, DEFAULT_STEP_MINOR)

    info = compute_sweep(start_deg, end_deg)
    s, e, direction = info.start, info.end, info.direction
    if s == e and info.sweep != 0:
        # Full turn: walk one revolution from the start.
        e = s + direction * 360.0

    def is_major(a: float) -> bool:
        base = a - s if mode is MajorMode.RELATIVE else a
        return round_half_up(base) % major == 0

    def reached_end(a: float) -> bool:
        return a >= e if direction > 0 else a <= e

    majors: list[float] = []
    minors: list[float] = []

    a = s
    count = 0
    while not reached_end(a) and count < MAX_TICK_STEPS:
        (majors if is_major(a) else minors).append(a)
        count += 1
        a += direction * minor

    if include_end:
        (majors if is_major(e) else minors).append(e)

    return TickAngles(majors=tuple(majors), minors=tuple(minors))
