"""Engine settings with JSON persistence.

Settings are stored at:
    ~/.config/easeloop/settings.json

Usage::

    settings = load_settings()
    settings.tick_interval_ms = 8
    save_settings(settings)

    clock = FrameClock(**settings.clock_options())
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .easing.curves import CurveKind, resolve
from .easing.loops import LoopMode

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "easeloop"
SETTINGS_PATH = CONFIG_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable defaults."""

    # ── clock ─────────────────────────────────────────────────────────
    tick_interval_ms: int = 16
    max_delta: float = 0.25                # seconds

    # ── tweens ────────────────────────────────────────────────────────
    default_curve: str = CurveKind.LINEAR.value
    default_loop: str = LoopMode.RESTART.value

    @property
    def curve(self) -> CurveKind:
        return resolve(self.default_curve)

    @property
    def loop(self) -> LoopMode:
        try:
            return LoopMode(self.default_loop)
        except ValueError:
            return LoopMode.RESTART

    def clock_options(self) -> dict:
        """Keyword arguments for :class:`~easeloop.timer.clock.FrameClock`."""
        return {"interval_ms": self.tick_interval_ms, "max_delta": self.max_delta}


def _coerce(data: dict) -> dict:
    """Keep known keys, converted to the type of each field's default."""
    coerced = {}
    for f in fields(Settings):
        if f.name not in data:
            continue
        value = data[f.name]
        try:
            coerced[f.name] = type(f.default)(value)
        except (TypeError, ValueError):
            logger.warning(
                "ignoring bad value for setting %s: %r", f.name, value
            )
    return coerced


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            return Settings(**_coerce(data))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("ignoring unreadable settings file %s: %s", path, exc)
    return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
