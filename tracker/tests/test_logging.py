"""
Tests for structured logging setup.
"""

import json
import logging

import pytest

from tracker.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_json_format_emits_one_object_per_line(capsys, restore_root_logger):
    """JSON logs carry the renamed fields, trace_id and per-call extras."""
    setup_logging(level="INFO", fmt="json")

    get_logger("tracker.tests.logging", trace_id="todo").info("State reconstructed", extra={"matched": 3})

    line = capsys.readouterr().err.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["message"] == "State reconstructed"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tracker.tests.logging"
    assert payload["trace_id"] == "todo"
    assert payload["matched"] == 3
    assert "timestamp" in payload


def test_text_format_defaults_trace_id(capsys, restore_root_logger):
    """Records logged without an adapter still get trace_id=N/A."""
    setup_logging(level="DEBUG", fmt="text")

    logging.getLogger("tracker.tests.logging").debug("plain record")

    err = capsys.readouterr().err
    assert "plain record [trace_id=N/A]" in err
    assert " - DEBUG - " in err


def test_level_from_environment(monkeypatch, restore_root_logger):
    monkeypatch.setenv("TODOTRACK_LOG_LEVEL", "warning")

    setup_logging(fmt="json")

    assert logging.getLogger().level == logging.WARNING
