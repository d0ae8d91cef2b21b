"""Easing curves.

Each curve maps a progress value ``t`` (conventionally 0 → 1) to a shaped
output.  Formulas are evaluated unclamped, so callers may pass values
outside ``[0, 1]`` and get the natural continuation of the curve.

Families
--------
quad, cubic, quart, quint   Polynomial acceleration.
sine                        Quarter / half cosine wave.
expo                        Power-of-two ramp, guarded at 0 and 1.
circ                        Quarter circle.
back                        Overshoots past the target, then settles.
elastic                     Decaying oscillation around the target.

The back overshoot (``BACK_OVERSHOOT``) and the elastic phase are part of
each curve's look.  Results must match the formulas below exactly.
"""

from __future__ import annotations

import math
from enum import Enum

import numpy as np


# ── constants ─────────────────────────────────────────────────────────────

BACK_OVERSHOOT = 1.70158
BACK_SCALE = 2.70158
ELASTIC_PHASE = 13.0 * math.pi / 2.0

_HALF_PI = math.pi / 2.0


def _pow2(x: float) -> float:
    """2 ** x, saturating to infinity instead of raising on overflow."""
    try:
        return 2.0 ** x
    except OverflowError:
        return math.inf


# ── enum ──────────────────────────────────────────────────────────────────


class CurveKind(Enum):
    LINEAR = "linear"
    IN_QUAD = "in_quad"
    OUT_QUAD = "out_quad"
    IN_OUT_QUAD = "in_out_quad"
    IN_CUBIC = "in_cubic"
    OUT_CUBIC = "out_cubic"
    IN_OUT_CUBIC = "in_out_cubic"
    IN_QUART = "in_quart"
    OUT_QUART = "out_quart"
    IN_OUT_QUART = "in_out_quart"
    IN_QUINT = "in_quint"
    OUT_QUINT = "out_quint"
    IN_OUT_QUINT = "in_out_quint"
    IN_SINE = "in_sine"
    OUT_SINE = "out_sine"
    IN_OUT_SINE = "in_out_sine"
    IN_EXPO = "in_expo"
    OUT_EXPO = "out_expo"
    IN_OUT_EXPO = "in_out_expo"
    IN_CIRC = "in_circ"
    OUT_CIRC = "out_circ"
    IN_OUT_CIRC = "in_out_circ"
    IN_BACK = "in_back"
    OUT_BACK = "out_back"
    IN_OUT_BACK = "in_out_back"
    IN_ELASTIC = "in_elastic"
    OUT_ELASTIC = "out_elastic"
    IN_OUT_ELASTIC = "in_out_elastic"


# ── curve formulas ────────────────────────────────────────────────────────


def _linear(t: float) -> float:
    return t


def _in_quad(t: float) -> float:
    return t * t


def _out_quad(t: float) -> float:
    return t * (2.0 - t)


def _in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return -1.0 + (4.0 - 2.0 * t) * t


def _in_cubic(t: float) -> float:
    return t * t * t


def _out_cubic(t: float) -> float:
    t -= 1.0
    return t * t * t + 1.0


def _in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4.0 * t * t * t
    return (t - 1.0) * (2.0 * t - 2.0) * (2.0 * t - 2.0) + 1.0


def _in_quart(t: float) -> float:
    return t * t * t * t


def _out_quart(t: float) -> float:
    t -= 1.0
    return 1.0 - t * t * t * t


def _in_out_quart(t: float) -> float:
    if t < 0.5:
        return 8.0 * t * t * t * t
    # Only the first factor is shifted, so the two halves do not meet at 0.5.
    return 1.0 - 8.0 * (t - 1.0) * t * t * t


def _in_quint(t: float) -> float:
    return t * t * t * t * t


def _out_quint(t: float) -> float:
    t -= 1.0
    return 1.0 + t * t * t * t * t


def _in_out_quint(t: float) -> float:
    if t < 0.5:
        return 16.0 * t * t * t * t * t
    return 1.0 + 16.0 * (t - 1.0) * t * t * t * t


def _in_sine(t: float) -> float:
    return 1.0 - math.cos(t * _HALF_PI)


def _out_sine(t: float) -> float:
    return math.sin(t * _HALF_PI)


def _in_out_sine(t: float) -> float:
    return -0.5 * (math.cos(math.pi * t) - 1.0)


def _in_expo(t: float) -> float:
    if t == 0.0:
        return 0.0
    return _pow2(10.0 * t - 10.0)


def _out_expo(t: float) -> float:
    if t == 1.0:
        return 1.0
    return 1.0 - _pow2(-10.0 * t)


def _in_out_expo(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    if t < 0.5:
        return 0.5 * _pow2(20.0 * t - 10.0)
    return 1.0 - 0.5 * _pow2(-20.0 * t + 10.0)


def _in_circ(t: float) -> float:
    return 1.0 - math.sqrt(1.0 - t * t)


def _out_circ(t: float) -> float:
    t -= 1.0
    return math.sqrt(1.0 - t * t)


def _in_out_circ(t: float) -> float:
    if t < 0.5:
        return 0.5 * (1.0 - math.sqrt(1.0 - 4.0 * t * t))
    return 0.5 * (math.sqrt(-((2.0 * t - 3.0) * (2.0 * t - 1.0))) + 1.0)


def _in_back(t: float) -> float:
    return t * t * (BACK_SCALE * t - BACK_OVERSHOOT)


def _out_back(t: float) -> float:
    t -= 1.0
    return 1.0 + t * t * (BACK_SCALE * t + BACK_OVERSHOOT)


def _in_out_back(t: float) -> float:
    # Each half is a back curve scaled by 2.70158 rather than 1.70158.
    if t < 0.5:
        u = 2.0 * t
        return 0.5 * (u * u * ((BACK_SCALE + 1.0) * u - BACK_SCALE))
    u = 2.0 * t - 2.0
    return 0.5 * (u * u * ((BACK_SCALE + 1.0) * u + BACK_SCALE) + 2.0)


def _in_elastic(t: float) -> float:
    return math.sin(ELASTIC_PHASE * t) * _pow2(10.0 * (t - 1.0))


def _out_elastic(t: float) -> float:
    return math.sin(-ELASTIC_PHASE * (t + 1.0)) * _pow2(-10.0 * t) + 1.0


def _in_out_elastic(t: float) -> float:
    if t < 0.5:
        return 0.5 * math.sin(ELASTIC_PHASE * t) * _pow2(10.0 * (2.0 * t - 1.0))
    u = 2.0 * t - 1.0
    return 0.5 * math.sin(-ELASTIC_PHASE * u) * _pow2(-10.0 * u) + 1.0


_CURVES = {
    CurveKind.LINEAR: _linear,
    CurveKind.IN_QUAD: _in_quad,
    CurveKind.OUT_QUAD: _out_quad,
    CurveKind.IN_OUT_QUAD: _in_out_quad,
    CurveKind.IN_CUBIC: _in_cubic,
    CurveKind.OUT_CUBIC: _out_cubic,
    CurveKind.IN_OUT_CUBIC: _in_out_cubic,
    CurveKind.IN_QUART: _in_quart,
    CurveKind.OUT_QUART: _out_quart,
    CurveKind.IN_OUT_QUART: _in_out_quart,
    CurveKind.IN_QUINT: _in_quint,
    CurveKind.OUT_QUINT: _out_quint,
    CurveKind.IN_OUT_QUINT: _in_out_quint,
    CurveKind.IN_SINE: _in_sine,
    CurveKind.OUT_SINE: _out_sine,
    CurveKind.IN_OUT_SINE: _in_out_sine,
    CurveKind.IN_EXPO: _in_expo,
    CurveKind.OUT_EXPO: _out_expo,
    CurveKind.IN_OUT_EXPO: _in_out_expo,
    CurveKind.IN_CIRC: _in_circ,
    CurveKind.OUT_CIRC: _out_circ,
    CurveKind.IN_OUT_CIRC: _in_out_circ,
    CurveKind.IN_BACK: _in_back,
    CurveKind.OUT_BACK: _out_back,
    CurveKind.IN_OUT_BACK: _in_out_back,
    CurveKind.IN_ELASTIC: _in_elastic,
    CurveKind.OUT_ELASTIC: _out_elastic,
    CurveKind.IN_OUT_ELASTIC: _in_out_elastic,
}


# ── public API ────────────────────────────────────────────────────────────


def resolve(kind) -> CurveKind:
    """Turn *kind* into a :class:`CurveKind`.

    Accepts members or their string values (``"out_back"``).  Anything
    unrecognised resolves to ``LINEAR``.
    """
    if isinstance(kind, CurveKind):
        return kind
    try:
        return CurveKind(kind)
    except (ValueError, TypeError):
        return CurveKind.LINEAR


def evaluate(kind: CurveKind | str, t: float, dtype=None) -> float:
    """Evaluate the easing curve *kind* at progress *t*.

    All arithmetic runs in double precision.  Pass a numpy float type as
    *dtype* (e.g. ``np.float32``) to narrow the result on the way out.
    """
    value = _CURVES.get(resolve(kind), _linear)(float(t))
    if dtype is None:
        return value
    return np.dtype(dtype).type(value)


def sample(kind: CurveKind | str, steps: int, dtype=np.float64) -> np.ndarray:
    """Evaluate *kind* at *steps* evenly spaced points over ``[0, 1]``.

    Both endpoints are included.  Handy for curve previews and lookup
    tables.
    """
    if steps < 2:
        raise ValueError(f"steps must be at least 2, got {steps}")
    fn = _CURVES.get(resolve(kind), _linear)
    ts = np.linspace(0.0, 1.0, steps)
    return np.array([fn(float(t)) for t in ts], dtype=dtype)


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation from *start* to *end* (unclamped)."""
    return start + (end - start) * t


def ease(kind: CurveKind | str, start: float, end: float, t: float) -> float:
    """Interpolate from *start* to *end* along the eased progress at *t*."""
    return lerp(start, end, evaluate(kind, t))
