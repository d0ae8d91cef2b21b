"""Loop modes: folding unbounded elapsed time into one period.

Modes
-----
RESTART       Saw-tooth.  Time wraps to 0 after every period boundary;
              the boundary itself (elapsed > 0) reads as the period end.
YOYO          Ping-pong.  0 → 1 → 0 over each period.
INCREMENTAL   Plain remainder, no clamp.

Remainders are truncating (``math.fmod``), so the result carries the sign
of *elapsed*.  For negative elapsed time RESTART clamps to 0 while
INCREMENTAL returns a negative progress; for non-negative elapsed time the
two differ only at exact period boundaries, where INCREMENTAL reads 0.
"""

from __future__ import annotations

import math
from enum import Enum


class LoopMode(Enum):
    RESTART = "restart"
    YOYO = "yoyo"
    INCREMENTAL = "incremental"


class InvalidDurationError(ValueError):
    """Raised when a period of zero, negative or non-finite length is used."""


def _check(elapsed: float, duration: float) -> None:
    if not math.isfinite(duration) or duration <= 0:
        raise InvalidDurationError(
            f"duration must be a positive finite number, got {duration!r}"
        )
    if not math.isfinite(elapsed):
        raise ValueError(f"elapsed must be finite, got {elapsed!r}")


def _restart(elapsed: float, duration: float) -> float:
    folded = math.fmod(elapsed, duration)
    if folded == 0.0 and elapsed > 0:
        # A period that has just run out reads as complete, not as restarted.
        return duration
    return max(0.0, min(duration, folded))


def fold(mode: LoopMode, elapsed: float, duration: float) -> float:
    """Period-local time for *elapsed* under *mode* (not divided)."""
    _check(elapsed, duration)
    mode = LoopMode(mode)
    if mode == LoopMode.YOYO:
        return duration - abs(duration - 2.0 * _restart(elapsed, duration))
    if mode == LoopMode.INCREMENTAL:
        return math.fmod(elapsed, duration)
    return _restart(elapsed, duration)


def normalize(mode: LoopMode, elapsed: float, duration: float) -> float:
    """Progress through the current period, 0.0 → 1.0."""
    return fold(mode, elapsed, duration) / duration


def cycle_index(elapsed: float, duration: float) -> int:
    """How many whole periods fit into *elapsed*."""
    _check(elapsed, duration)
    return math.floor(elapsed / duration)
