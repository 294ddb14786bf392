"""Structured logging, redaction and operation instrumentation."""

import json
import logging

import pytest

from models.taxonomy import WorkoutIntensity
from ride_app.logging_config import (
    CORRELATION_ID,
    JsonFormatter,
    correlation_context,
    redact_for_log,
)
from ride_app.observability import instrument_operation


def test_json_formatter_redacts_and_tags_correlation() -> None:
    record = logging.makeLogRecord(
        {
            "name": "advisor.test",
            "levelno": logging.INFO,
            "levelname": "INFO",
            "msg": "recommendation_generated",
            "event": "recommendation_generated",
            "user_id": "rider-1",
            "item_count": 7,
        }
    )
    with correlation_context("corr-123"):
        payload = json.loads(JsonFormatter().format(record))

    assert payload["correlation_id"] == "corr-123"
    assert payload["event"] == "recommendation_generated"
    assert payload["user_id"] == "[redacted]"
    assert payload["item_count"] == 7


def test_redact_for_log_handles_nested_values() -> None:
    scrubbed = redact_for_log(
        {"inputs": {"user_id": "rider-1", "temperature": 8.5}, "intensity": WorkoutIntensity.TEMPO, "items": ("cap",)}
    )

    assert scrubbed == {
        "inputs": {"user_id": "[redacted]", "temperature": 8.5},
        "intensity": "tempo",
        "items": ["cap"],
    }
    assert redact_for_log({"user_id": None}) == {"user_id": None}


def test_correlation_context_restores_previous_value() -> None:
    token = CORRELATION_ID.set("outer")
    try:
        with correlation_context("inner") as scoped:
            assert scoped == "inner"
        assert CORRELATION_ID.get() == "outer"
    finally:
        CORRELATION_ID.reset(token)


def test_instrumented_operation_logs_failure_and_reraises(caplog: pytest.LogCaptureFixture) -> None:
    @instrument_operation("test.failing")
    def failing() -> None:
        raise RuntimeError("boom")

    with caplog.at_level(logging.DEBUG):
        with pytest.raises(RuntimeError, match="boom"):
            failing()

    events = [(getattr(record, "event", None), getattr(record, "operation", None)) for record in caplog.records]
    assert ("operation_started", "test.failing") in events
    assert ("operation_failed", "test.failing") in events


def test_instrumented_operation_returns_result(caplog: pytest.LogCaptureFixture) -> None:
    @instrument_operation("test.adding")
    def add(left: int, right: int) -> int:
        return left + right

    with caplog.at_level(logging.DEBUG):
        assert add(2, 3) == 5

    completed = [record for record in caplog.records if getattr(record, "event", None) == "operation_completed"]
    assert completed and completed[0].duration_ms >= 0
