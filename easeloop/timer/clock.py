"""A single frame clock that drives timers and tweens.

The clock measures the real time between ``QTimer`` timeouts with a
``QElapsedTimer`` and hands that delta to every registered driver, in
registration order.  Hosts that already run their own loop skip
``start`` and call ``advance(delta)`` directly.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QElapsedTimer, QObject, QTimer, pyqtSignal

from .engine import Timer, check_delta

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 16
DEFAULT_MAX_DELTA = 0.25  # seconds; longer hitches are clipped to this


class FrameClock(QObject):
    """Ticks every registered :class:`Timer` once per frame.

    Signals
    -------
    ticked(delta_time: float)
        Emitted after all drivers have been ticked for a step.
    """

    ticked = pyqtSignal(float)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        max_delta: float = DEFAULT_MAX_DELTA,
    ) -> None:
        super().__init__(parent)
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self._max_delta: float = check_delta(max_delta)
        self._drivers: list[Timer] = []

        self._elapsed = QElapsedTimer()
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)

    # ── properties ────────────────────────────────────────────────────

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    @interval_ms.setter
    def interval_ms(self, value: int) -> None:
        if value <= 0:
            raise ValueError(f"interval_ms must be positive, got {value}")
        self._qt_timer.setInterval(value)

    @property
    def max_delta(self) -> float:
        return self._max_delta

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def drivers(self) -> tuple[Timer, ...]:
        return tuple(self._drivers)

    # ── registration ──────────────────────────────────────────────────

    def add(self, driver: Timer) -> None:
        """Register *driver*; adding the same one twice is a no-op."""
        if not isinstance(driver, Timer):
            raise TypeError(f"{driver!r} does not implement the timer contract")
        if driver not in self._drivers:
            self._drivers.append(driver)

    def remove(self, driver: Timer) -> None:
        if driver in self._drivers:
            self._drivers.remove(driver)

    # ── controls ──────────────────────────────────────────────────────

    def start(self) -> None:
        if self._qt_timer.isActive():
            return
        self._elapsed.start()
        self._qt_timer.start()
        logger.debug("frame clock started (%d ms)", self._qt_timer.interval())

    def stop(self) -> None:
        if not self._qt_timer.isActive():
            return
        self._qt_timer.stop()
        self._elapsed.invalidate()
        logger.debug("frame clock stopped")

    def advance(self, delta_time: float) -> float:
        """Tick every driver by *delta_time* (clipped to ``max_delta``).

        Returns the delta actually applied.
        """
        delta_time = min(check_delta(delta_time), self._max_delta)
        # Copy so drivers may unregister themselves from a callback.
        for driver in list(self._drivers):
            driver.tick(delta_time)
        self.ticked.emit(delta_time)
        return delta_time

    # ── internal ──────────────────────────────────────────────────────

    def _on_timeout(self) -> None:
        delta_ms = self._elapsed.restart()
        self.advance(delta_ms / 1000.0)
