"""Unit tests for JSON logging."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from agent_workflow.logging import JsonFormatter, configure_logging


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    package = logging.getLogger("agent_workflow")
    handlers, level, package_level = list(root.handlers), root.level, package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)


def _record(**extra: object) -> logging.LogRecord:
    record = logging.makeLogRecord(
        {"name": "agent_workflow.test", "levelname": "INFO", "msg": "hello %s", "args": ("x",)}
    )
    record.__dict__.update(extra)
    return record


def test_formats_message_and_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record(agent_id="A", path=Path("wf.yaml"))))

    assert payload["message"] == "hello x"
    assert payload["logger"] == "agent_workflow.test"
    assert payload["level"] == "INFO"
    assert payload["extra"] == {"agent_id": "A", "path": "wf.yaml"}


def test_standard_attributes_are_not_extra() -> None:
    payload = json.loads(JsonFormatter().format(_record()))

    assert "extra" not in payload


def test_exception_is_included() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))

    assert "ValueError: boom" in payload["exception"]


@pytest.mark.usefixtures("restore_logging")
def test_configure_logging_writes_json_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("warning", debug=True)

    logging.getLogger("agent_workflow.test").debug("visible", extra={"step": 1})
    logging.getLogger("other").info("hidden")

    captured = capsys.readouterr()
    assert captured.out == ""
    lines = [json.loads(line) for line in captured.err.splitlines()]
    assert [line["message"] for line in lines] == ["visible"]
    assert lines[0]["extra"] == {"step": 1}
    assert logging.getLogger("httpx").level == logging.WARNING
