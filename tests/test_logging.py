"""Tests for logging setup."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from polyskill.utils import get_logger, setup_logging
from polyskill.utils.logging import JSONFormatter


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(**extra) -> logging.LogRecord:
    logger = get_logger("polyskill.test")
    return logger.makeRecord(
        "polyskill.test", logging.WARNING, __file__, 1, "Skipping %s", ("kimi",), None,
        extra=extra,
    )


def test_json_formatter_includes_extra_fields():
    data = json.loads(JSONFormatter().format(make_record(skill="@a/b", tools=["x"])))

    assert data["level"] == "WARNING"
    assert data["logger"] == "polyskill.test"
    assert data["message"] == "Skipping kimi"
    assert data["skill"] == "@a/b"
    assert data["tools"] == ["x"]
    assert "msg" not in data
    assert "lineno" not in data


def test_json_formatter_stringifies_unknown_types(tmp_path):
    data = json.loads(JSONFormatter().format(make_record(path=tmp_path)))
    assert data["path"] == str(tmp_path)


def test_setup_logging_writes_to_stderr():
    setup_logging("debug", "json")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert root.handlers[0].stream is sys.stderr
    assert isinstance(root.handlers[0].formatter, JSONFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_setup_logging_unknown_level_falls_back_to_warning():
    setup_logging("chatty", "text")
    assert logging.getLogger().level == logging.WARNING
    assert not isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)
