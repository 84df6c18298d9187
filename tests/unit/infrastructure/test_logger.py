# tests/unit/infrastructure/test_logger.py
from __future__ import annotations

import json
import logging

import pytest

from arche_daterange.infrastructure.logging.logger import (
    _JsonFormatter,  # internal but importable
    configure_root_logging,
    get_json_logger,
)


def _render(record_msg: str, level: int = logging.INFO, **extra) -> dict:
    """Build a log record with ``extra`` attributes and return the parsed JSON payload."""
    logger = logging.getLogger("test.logger")
    record = logger.makeRecord(
        name=logger.name,
        level=level,
        fn="test_logger",
        lno=123,
        msg=record_msg,
        args=(),
        exc_info=None,
        extra=extra or None,
    )
    return json.loads(_JsonFormatter().format(record))


@pytest.fixture()
def _restore_root() -> logging.Logger:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _json_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if isinstance(h.formatter, _JsonFormatter)]


def test_configure_root_logging_uses_settings_level(
    monkeypatch: pytest.MonkeyPatch, _restore_root: logging.Logger
) -> None:
    """Root logger should get a JSON formatter and respect DATERANGE_LOG_LEVEL."""
    monkeypatch.setenv("DATERANGE_LOG_LEVEL", "DEBUG")
    # pytest installs its capture handlers after fixture setup; start bare here.
    _restore_root.handlers.clear()

    configure_root_logging()

    assert _restore_root.level == logging.DEBUG
    assert len(_restore_root.handlers) == 1
    assert len(_json_handlers(_restore_root)) == 1


def test_configure_root_logging_is_idempotent(_restore_root: logging.Logger) -> None:
    _restore_root.handlers.clear()

    configure_root_logging("INFO")
    configure_root_logging("WARNING")

    assert len(_restore_root.handlers) == 1
    assert len(_json_handlers(_restore_root)) == 1
    assert _restore_root.level == logging.WARNING


def test_configure_root_logging_keeps_existing_handlers(_restore_root: logging.Logger) -> None:
    _restore_root.addHandler(logging.NullHandler())
    before = _restore_root.handlers[:]

    configure_root_logging("ERROR")

    assert _restore_root.handlers == before
    assert not _json_handlers(_restore_root)
    assert _restore_root.level == logging.ERROR


def test_json_formatter_basic_fields() -> None:
    """Formatter should emit ts, level, logger and message."""
    payload = _render("hello-world")
    assert payload["message"] == "hello-world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert "ts" in payload


def test_json_formatter_merges_extra_fields() -> None:
    payload = _render("daterange.apply.formatted", cleared=True, picker_mode="absolute")

    assert payload["cleared"] is True
    assert payload["picker_mode"] == "absolute"
    assert "lineno" not in payload
    assert "args" not in payload


def test_json_formatter_includes_exception_info(caplog: pytest.LogCaptureFixture) -> None:
    """Formatter should add exc_type and exc_message for errors with exc_info."""
    logger = logging.getLogger("test.logger.exc")

    try:
        raise ValueError("boom")
    except ValueError:
        logger.exception("failure")

    payload = json.loads(_JsonFormatter().format(caplog.records[-1]))
    assert payload["level"] == "ERROR"
    assert payload["exc_type"] == "ValueError"
    assert "boom" in payload["exc_message"]


def test_get_json_logger_propagates_to_root() -> None:
    logger = get_json_logger("arche_daterange.test")

    assert logger.name == "arche_daterange.test"
    assert logger.propagate is True
