from __future__ import annotations

import logging

import pytest

from droste.infrastructure.logging.logger_service import ConsoleLoggerService


def test_console_logger_appends_context(caplog: pytest.LogCaptureFixture) -> None:
    service = ConsoleLoggerService(level=logging.DEBUG, name="droste-test-console")
    with caplog.at_level(logging.DEBUG, logger="droste-test-console"):
        service.info("Screen created", screens=1, rect=(0.1, 0.1, 0.5, 0.5))
        service.debug("plain")

    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["Screen created [screens=1 rect=(0.1, 0.1, 0.5, 0.5)]", "plain"]


def test_set_level_filters_messages(caplog: pytest.LogCaptureFixture) -> None:
    service = ConsoleLoggerService(level=logging.DEBUG, name="droste-test-level")
    service.set_level(logging.WARNING)
    with caplog.at_level(logging.DEBUG):
        service.info("hidden")
        service.warning("shown")
    assert [r.getMessage() for r in caplog.records if r.name == "droste-test-level"] == ["shown"]
