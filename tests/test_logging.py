"""Tests for logging configuration."""

import io
import json
import logging

import pytest

from gitdiffparse.diff.parser import parse_quick_diff
from gitdiffparse.logging import configure_logging, get_logger


@pytest.fixture
def reset_logging():
    """Restore the package logger after each test."""
    yield
    package_logger = logging.getLogger("gitdiffparse")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def test_json_events(reset_logging):
    """Parser debug events are rendered as JSON when enabled."""
    stream = io.StringIO()
    configure_logging("DEBUG", "json", stream=stream)

    parse_quick_diff("A\tnew.txt\n")

    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    parsed = [e for e in events if e["event"] == "quick_diff_parsed"]
    assert parsed
    assert parsed[0]["records"] == 1
    assert parsed[0]["level"] == "debug"
    assert parsed[0]["logger"] == "gitdiffparse.diff.parser"


def test_level_filters_debug(reset_logging):
    """Debug events are dropped at WARNING level."""
    stream = io.StringIO()
    configure_logging("WARNING", "console", stream=stream)

    parse_quick_diff("A\tnew.txt\n")

    assert stream.getvalue() == ""


def test_warning_console(reset_logging):
    """Warnings are rendered by the console renderer."""
    stream = io.StringIO()
    configure_logging("INFO", "console", stream=stream)

    get_logger("gitdiffparse.test").warning("something_odd", path="x.py")

    output = stream.getvalue()
    assert "something_odd" in output
    assert "path=x.py" in output
