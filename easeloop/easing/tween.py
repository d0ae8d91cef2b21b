"""Tweens: loop-mode folding composed with an easing curve.

``tween`` is the stateless form: fold the elapsed time into the current
period, then evaluate the curve on the resulting progress.

``TweenPlayer`` wraps the same computation in a tickable object with the
timer controls, for hosts that want "give me this frame's value" plus
notifications.
"""

from __future__ import annotations

import logging
import math

from PyQt6.QtCore import QObject, pyqtSignal

from ..timer.engine import TimerState, check_delta
from .curves import CurveKind, evaluate, resolve
from .loops import InvalidDurationError, LoopMode, cycle_index, normalize

logger = logging.getLogger(__name__)


def tween(
    kind: CurveKind | str,
    elapsed: float,
    duration: float,
    mode: LoopMode = LoopMode.RESTART,
    dtype=None,
) -> float:
    """Eased value for *elapsed* seconds into a looping *duration*."""
    return evaluate(kind, normalize(mode, elapsed, duration), dtype)


class TweenPlayer(QObject):
    """A tween advanced by ``tick(delta_time)``.

    Signals
    -------
    started()
        Emitted when ``start`` begins playback from the top.
    stopped()
        Emitted on ``stop``, including the automatic stop after
        ``repeat_count`` periods.
    updated(value: float)
        Emitted with the eased value after every tick that advances time,
        and once on ``start``.
    looped(index: int)
        Emitted when playback crosses into period *index* (1-based count
        of completed periods), including the last period before a
        ``repeat_count`` stop.
    state_changed(new_state: TimerState)
        Emitted on every state transition.
    """

    started = pyqtSignal()
    stopped = pyqtSignal()
    updated = pyqtSignal(float)
    looped = pyqtSignal(int)
    state_changed = pyqtSignal(object)

    def __init__(
        self,
        kind: CurveKind | str = CurveKind.LINEAR,
        duration: float = 1.0,
        mode: LoopMode = LoopMode.RESTART,
        *,
        repeat_count: int | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        if not (math.isfinite(duration) and duration > 0):
            raise InvalidDurationError(
                f"duration must be a positive finite number, got {duration!r}"
            )
        if repeat_count is not None and repeat_count < 1:
            raise ValueError(f"repeat_count must be >= 1, got {repeat_count}")

        self._kind: CurveKind = resolve(kind)
        self._duration: float = float(duration)
        self._mode: LoopMode = LoopMode(mode)
        self._repeat_count: int | None = repeat_count

        self._elapsed: float = 0.0
        self._cycle: int = 0
        self._state: TimerState = TimerState.STOPPED

    # ── properties ────────────────────────────────────────────────────

    @property
    def kind(self) -> CurveKind:
        return self._kind

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def mode(self) -> LoopMode:
        return self._mode

    @property
    def repeat_count(self) -> int | None:
        return self._repeat_count

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def progress(self) -> float:
        """Folded 0.0 → 1.0 progress before easing."""
        return normalize(self._mode, self._elapsed, self._duration)

    @property
    def value(self) -> float:
        return tween(self._kind, self._elapsed, self._duration, self._mode)

    # ── controls ──────────────────────────────────────────────────────

    def start(self) -> None:
        if self.is_running:
            return
        self._elapsed = 0.0
        self._cycle = 0
        self._set_state(TimerState.RUNNING)
        logger.debug(
            "tween %s started (%.3fs, %s)",
            self._kind.value, self._duration, self._mode.value,
        )
        self.started.emit()
        self.updated.emit(self.value)

    def stop(self) -> None:
        if not self.is_running:
            return
        self._set_state(TimerState.STOPPED)
        logger.debug("tween %s stopped at %.3fs", self._kind.value, self._elapsed)
        self.stopped.emit()

    def pause(self) -> None:
        self._set_state(TimerState.PAUSED)

    def resume(self) -> None:
        self._set_state(TimerState.RUNNING)

    def tick(self, delta_time: float) -> None:
        if not self.is_running:
            return
        self._elapsed += check_delta(delta_time)

        if self._repeat_count is not None:
            end = self._repeat_count * self._duration
            if self._elapsed >= end:
                # Park exactly on the end of the last period.
                self._elapsed = end
                if self._repeat_count > self._cycle:
                    self._cycle = self._repeat_count
                    self.looped.emit(self._cycle)
                self.updated.emit(self.value)
                self.stop()
                return

        cycle = cycle_index(self._elapsed, self._duration)
        if cycle > self._cycle:
            self._cycle = cycle
            self.looped.emit(cycle)
        self.updated.emit(self.value)

    # ── internal ──────────────────────────────────────────────────────

    def _set_state(self, new_state: TimerState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        self.state_changed.emit(new_state)
