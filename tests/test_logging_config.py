# tests/test_logging_config.py

import json
import logging
import sys

from cleantext.logging_config import StructuredFormatter, configure_logging


def _record(**extra):
    logger = logging.getLogger("cleantext.test")
    return logger.makeRecord(
        logger.name, logging.INFO, __file__, 10, "filtered %s", ("text",), None, extra=extra
    )


def test_formatter_emits_json_with_extra_context():
    payload = json.loads(StructuredFormatter().format(_record(text_length=12, style="emoji")))

    assert payload["message"] == "filtered text"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "cleantext.test"
    assert payload["text_length"] == 12
    assert payload["style"] == "emoji"
    assert "args" not in payload


def test_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.getLogger("cleantext.test").makeRecord(
            "cleantext.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )

    payload = json.loads(StructuredFormatter().format(record))

    assert "ValueError: boom" in payload["exception"]


def test_configure_logging_installs_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("warning")

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
