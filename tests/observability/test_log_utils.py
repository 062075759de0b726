"""
Test suite for structured logging helpers.

System role: Verification of safe log context handling
"""

import logging

import pytest

from area_sessions.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)


class TestSafeLogValue:
    """Converting arbitrary values for log records."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, "None"),
            ("text", "text"),
            ([1, 2, 3], "list(3 items)"),
            ((1,), "tuple(1 items)"),
            ({"a": 1}, "dict(1 keys)"),
            (42, "42"),
        ],
    )
    def test_converts_values(self, value, expected) -> None:
        assert safe_log_value(value) == expected

    def test_truncates_long_values(self) -> None:
        result = safe_log_value("x" * 20, max_length=5)

        assert result == "xxxxx... (truncated, 20 total)"

    def test_unprintable_value(self) -> None:
        class Unprintable:
            def __str__(self) -> str:
                raise RuntimeError("nope")

        assert safe_log_value(Unprintable()) == "<unable to log: RuntimeError>"


class TestLogWithContext:
    """Attaching context to log records."""

    def test_context_is_attached_to_record(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.WARNING, logger="tests.log_utils"):
            log_with_context(logger, logging.WARNING, "failed", session_id="s1", points=[1, 2])

        record = caplog.records[-1]
        assert record.getMessage() == "failed"
        assert record.session_id == "s1"
        assert record.points == "list(2 items)"

    def test_reserved_keys_are_prefixed(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.INFO, logger="tests.log_utils"):
            log_with_context(logger, logging.INFO, "msg", name="Area 1", message="x")

        record = caplog.records[-1]
        assert record.name == "tests.log_utils"
        assert record.ctx_name == "Area 1"
        assert record.ctx_message == "x"

    def test_exception_is_logged_with_type(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")
        error = RuntimeError("boom")

        with caplog.at_level(logging.ERROR, logger="tests.log_utils"):
            log_exception_with_context(
                logger, "unexpected", error, operation="load_session", message="while loading"
            )

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.error_type == "RuntimeError"
        assert record.error_msg == "boom"
        assert record.operation == "load_session"
        assert record.ctx_message == "while loading"
