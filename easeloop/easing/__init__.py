"""Easing package."""

from .curves import CurveKind, evaluate, sample, lerp, ease
from .loops import LoopMode, InvalidDurationError, normalize, fold, cycle_index
from .tween import tween, TweenPlayer

__all__ = [
    "CurveKind",
    "evaluate",
    "sample",
    "lerp",
    "ease",
    "LoopMode",
    "InvalidDurationError",
    "normalize",
    "fold",
    "cycle_index",
    "tween",
    "TweenPlayer",
]
