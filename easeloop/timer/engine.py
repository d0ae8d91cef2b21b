"""Countdown and stopwatch timers driven by an external clock.

States
------
STOPPED   Not counting, waiting for ``start``.
RUNNING   Counting on every ``tick``.
PAUSED    Frozen; ``resume`` continues from the frozen time.

Transitions
-----------
STOPPED → RUNNING     (start: resets time, emits ``started``)
RUNNING → STOPPED     (stop, or countdown reaching 0: emits ``stopped``)
RUNNING → PAUSED      (pause, no signal)
PAUSED  → RUNNING     (resume, no signal)

``pause`` and ``resume`` are accepted from any state.  ``start`` while
running and ``stop`` while not running are no-ops.

Neither timer owns a clock: the host calls ``tick(delta_time)`` once per
step (see :class:`easeloop.timer.clock.FrameClock`).
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Protocol, runtime_checkable

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


# ── contract ──────────────────────────────────────────────────────────────


@runtime_checkable
class Timer(Protocol):
    """Anything a :class:`FrameClock` can drive."""

    @property
    def is_running(self) -> bool: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def pause(self) -> None: ...

    def resume(self) -> None: ...

    def tick(self, delta_time: float) -> None: ...


# ── validation ────────────────────────────────────────────────────────────


def check_duration(value: float) -> float:
    """Return *value* as a float, rejecting negative or non-finite input."""
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"duration must be a finite number >= 0, got {value!r}")
    return value


def check_delta(delta_time: float) -> float:
    """Return *delta_time* as a float, rejecting negative or non-finite input."""
    delta_time = float(delta_time)
    if not math.isfinite(delta_time) or delta_time < 0:
        raise ValueError(
            f"delta_time must be a finite number >= 0, got {delta_time!r}"
        )
    return delta_time


# ── countdown ─────────────────────────────────────────────────────────────


class CountdownTimer(QObject):
    """Counts down from ``initial_time`` and stops itself at zero.

    Signals
    -------
    started()
        Emitted once per ``start`` that actually starts the timer.
    stopped()
        Emitted once per ``stop`` that actually stops it, including the
        automatic stop when the countdown expires.
    state_changed(new_state: TimerState)
        Emitted on every state transition.
    """

    started = pyqtSignal()
    stopped = pyqtSignal()
    state_changed = pyqtSignal(object)

    def __init__(self, initial_time: float, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._initial_time: float = check_duration(initial_time)
        self._time: float = self._initial_time
        self._state: TimerState = TimerState.STOPPED

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def time(self) -> float:
        """Seconds left on the clock (may dip below 0 on the last tick)."""
        return self._time

    @property
    def initial_time(self) -> float:
        return self._initial_time

    @property
    def is_finished(self) -> bool:
        return self._time <= 0

    @property
    def progress(self) -> float:
        """0.0 → 1.0 progress through the countdown."""
        if self._initial_time <= 0:
            return 0.0
        return max(0.0, min(1.0, 1.0 - self._time / self._initial_time))

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        if self.is_running:
            return
        self._time = self._initial_time
        self._set_state(TimerState.RUNNING)
        logger.debug("countdown started from %.3fs", self._time)
        self.started.emit()

    def stop(self) -> None:
        if not self.is_running:
            return
        self._set_state(TimerState.STOPPED)
        logger.debug("countdown stopped at %.3fs", self._time)
        self.stopped.emit()

    def pause(self) -> None:
        self._set_state(TimerState.PAUSED)

    def resume(self) -> None:
        self._set_state(TimerState.RUNNING)

    def tick(self, delta_time: float) -> None:
        if not self.is_running:
            return
        self._time -= check_delta(delta_time)
        if self._time <= 0:
            self.stop()

    def reset_to_initial_time(self) -> None:
        """Put the full duration back on the clock without changing state."""
        self._time = self._initial_time

    def reset_to_new_time(self, new_time: float) -> None:
        """Replace the duration, then reset to it."""
        self._initial_time = check_duration(new_time)
        self.reset_to_initial_time()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _set_state(self, new_state: TimerState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        self.state_changed.emit(new_state)


# ── stopwatch ─────────────────────────────────────────────────────────────


class StopwatchTimer(QObject):
    """Counts up from zero for as long as it runs.  Never stops itself."""

    started = pyqtSignal()
    stopped = pyqtSignal()
    state_changed = pyqtSignal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._time: float = 0.0
        self._state: TimerState = TimerState.STOPPED

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def time(self) -> float:
        """Seconds counted so far."""
        return self._time

    def get_time(self) -> float:
        return self._time

    def start(self) -> None:
        if self.is_running:
            return
        self._time = 0.0
        self._set_state(TimerState.RUNNING)
        logger.debug("stopwatch started")
        self.started.emit()

    def stop(self) -> None:
        if not self.is_running:
            return
        self._set_state(TimerState.STOPPED)
        logger.debug("stopwatch stopped at %.3fs", self._time)
        self.stopped.emit()

    def pause(self) -> None:
        self._set_state(TimerState.PAUSED)

    def resume(self) -> None:
        self._set_state(TimerState.RUNNING)

    def tick(self, delta_time: float) -> None:
        if self.is_running:
            self._time += check_delta(delta_time)

    def reset_to_initial_time(self) -> None:
        self._time = 0.0

    def _set_state(self, new_state: TimerState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        self.state_changed.emit(new_state)
