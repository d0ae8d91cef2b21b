"""Timer package."""

from .engine import (
    Timer,
    TimerState,
    CountdownTimer,
    StopwatchTimer,
)
from .clock import FrameClock

__all__ = [
    "Timer",
    "TimerState",
    "CountdownTimer",
    "StopwatchTimer",
    "FrameClock",
]
