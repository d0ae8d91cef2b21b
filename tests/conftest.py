"""Shared pytest fixtures for easeloop tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from easeloop.easing.curves import CurveKind
from easeloop.easing.loops import LoopMode
from easeloop.easing.tween import TweenPlayer
from easeloop.timer.clock import FrameClock
from easeloop.timer.engine import CountdownTimer, StopwatchTimer


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def countdown(qapp):
    """Fresh five-second CountdownTimer, stopped."""
    return CountdownTimer(5.0)


@pytest.fixture
def stopwatch(qapp):
    """Fresh StopwatchTimer, stopped."""
    return StopwatchTimer()


@pytest.fixture
def player(qapp):
    """Linear two-second tween on RESTART, looping forever."""
    return TweenPlayer(CurveKind.LINEAR, 2.0, LoopMode.RESTART)


@pytest.fixture
def clock(qapp):
    """FrameClock that is never started; tests step it with advance()."""
    return FrameClock(interval_ms=16, max_delta=0.25)
