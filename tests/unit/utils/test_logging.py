"""Unit tests for structured logging.

Tests cover:
- get_logger returns a structlog logger
- JSON rendering with logger name and level
- Sanitization of sensitive fields
- Level filtering
"""

import json
import logging

import pytest

from literal_sql.utils.logging import (
    REDACTED_VALUE,
    get_logger,
    sanitization_processor,
    sanitize_for_logging,
)


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    logger = get_logger("literal_sql.tests")

    assert hasattr(logger, "bind")
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")


@pytest.mark.unit
def test_events_rendered_as_json(caplog: pytest.LogCaptureFixture) -> None:
    """Events are JSON with the event name, logger name and level."""
    caplog.set_level(logging.INFO, logger="literal_sql")

    get_logger("literal_sql.tests").info("query.built", clauses=3)

    log_data = json.loads(caplog.records[-1].getMessage())
    assert log_data["event"] == "query.built"
    assert log_data["logger"] == "literal_sql.tests"
    assert log_data["level"] == "info"
    assert log_data["clauses"] == 3
    assert "timestamp" in log_data


@pytest.mark.unit
def test_sensitive_fields_redacted_in_output(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="literal_sql")

    get_logger("literal_sql.tests").info("connect", db_password="hunter2", user="app")

    log_data = json.loads(caplog.records[-1].getMessage())
    assert log_data["db_password"] == REDACTED_VALUE
    assert log_data["user"] == "app"


@pytest.mark.unit
def test_debug_filtered_at_info_level(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="literal_sql")

    get_logger("literal_sql.tests").debug("too.verbose")

    assert not any("too.verbose" in r.getMessage() for r in caplog.records)


@pytest.mark.unit
def test_sanitize_for_logging_redacts_nested() -> None:
    data = {"auth": {"api_key": "k", "scheme": "bearer"}, "access_token": "t", "n": 1}

    sanitized = sanitize_for_logging(data)

    assert sanitized == {
        "auth": {"api_key": REDACTED_VALUE, "scheme": "bearer"},
        "access_token": REDACTED_VALUE,
        "n": 1,
    }
    assert data["access_token"] == "t"


@pytest.mark.unit
def test_sanitization_processor() -> None:
    event_dict = {"event": "x", "client_secret": "s"}

    result = sanitization_processor(logging.getLogger("t"), "info", event_dict)

    assert result == {"event": "x", "client_secret": REDACTED_VALUE}
