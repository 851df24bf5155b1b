# tests\shared\test_logging_config.py
import io
import json
import sys

import structlog

from deinflector.adapters.tables.loader import JsonTableSource
from deinflector.core.domain.models import LanguageStatus
from deinflector.core.use_cases import LanguageRegistry
from deinflector.shared.config import Settings
from deinflector.shared.logging_config import configure_logging


def test_events_follow_replaced_stderr(monkeypatch):
    """
    Scenario: stderr is swapped after a logger has been cached.
    Expected: each event lands on the stream that is current when it is written.
    """
    configure_logging(Settings(LOG_FORMAT="json"))
    logger = structlog.get_logger()

    first, second = io.StringIO(), io.StringIO()
    monkeypatch.setattr(sys, "stderr", first)
    logger.info("first_event", lang="en")
    monkeypatch.setattr(sys, "stderr", second)
    logger.info("second_event")

    assert json.loads(first.getvalue())["event"] == "first_event"
    assert "second_event" in second.getvalue()
    assert "first_event" not in second.getvalue()


def test_registry_builds_after_stderr_was_closed(monkeypatch):
    """
    Scenario: logging was configured while stderr pointed at a stream that
    has since been closed (as after a captured CLI run).
    Expected: building languages logs to the current stderr and succeeds.
    """
    stale = io.StringIO()
    monkeypatch.setattr(sys, "stderr", stale)
    configure_logging(Settings(LOG_FORMAT="json"))
    structlog.get_logger().info("configured")
    stale.close()

    current = io.StringIO()
    monkeypatch.setattr(sys, "stderr", current)
    registry = LanguageRegistry(JsonTableSource(), languages=["en", "es"])

    assert [lang.status for lang in registry.report().languages] == [LanguageStatus.READY] * 2
    assert "language_loaded" in current.getvalue()


def test_level_filters_events(monkeypatch):
    configure_logging(Settings(LOG_FORMAT="console", LOG_LEVEL="WARNING"))
    stream = io.StringIO()
    monkeypatch.setattr(sys, "stderr", stream)

    logger = structlog.get_logger()
    logger.info("quiet")
    logger.warning("loud")

    assert "quiet" not in stream.getvalue()
    assert "loud" in stream.getvalue()
