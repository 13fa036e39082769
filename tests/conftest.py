from __future__ import annotations

import os
from typing import Any

import pytest

# Qt widgets in the presentation tests need no display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from droste.domain.models.geometry import Rect
from droste.domain.models.scene import Scene
from droste.domain.services.i_logger_service import ILoggerService


class RecordingLogger(ILoggerService):
    """Logger that keeps every record in memory."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []
        self.level = 0

    def _record(self, level: str, message: str, kwargs: dict[str, Any]) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("debug", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("info", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("warning", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("error", message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("critical", message, kwargs)

    def set_level(self, level: int) -> None:
        self.level = level

    def messages(self, level: str) -> list[str]:
        return [m for lvl, m, _ in self.records if lvl == level]


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def unit_screen_scene() -> Scene:
    """One screen covering the viewport, no patterns."""
    return Scene(screens=(Rect(0.0, 0.0, 1.0, 1.0),))
