"""easeloop: easing curves, loop folding, tweens and frame-driven timers."""

from .easing import (
    CurveKind,
    LoopMode,
    InvalidDurationError,
    TweenPlayer,
    evaluate,
    normalize,
    tween,
)
from .timer import CountdownTimer, FrameClock, StopwatchTimer, Timer, TimerState

__version__ = "0.1.0"

__all__ = [
    "CurveKind",
    "LoopMode",
    "InvalidDurationError",
    "TweenPlayer",
    "evaluate",
    "normalize",
    "tween",
    "CountdownTimer",
    "StopwatchTimer",
    "FrameClock",
    "Timer",
    "TimerState",
]
