"""Logging helpers: context processors and the operation context manager."""

import pytest
import structlog
from structlog.testing import capture_logs

from fishfinder.utils.logging import (
    CorrelationIDProcessor,
    ElapsedTimeProcessor,
    OperationContextProcessor,
    clear_context,
    get_correlation_id,
    get_logger,
    operation_logger,
)


@pytest.fixture(autouse=True)
def clean_context():
    structlog.reset_defaults()
    clear_context()
    yield
    clear_context()


def test_processors_are_noops_without_context():
    event = {"event": "hello"}
    for processor in (
        CorrelationIDProcessor(),
        OperationContextProcessor(),
        ElapsedTimeProcessor(),
    ):
        processor(None, "info", event)
    assert event == {"event": "hello"}


def test_operation_context_is_applied_and_restored():
    with operation_logger("load_catalog", "abc-123", source="fish.json"):
        event = OperationContextProcessor()(None, "info", {"event": "x"})
        event = CorrelationIDProcessor()(None, "info", event)
        event = ElapsedTimeProcessor()(None, "info", event)

        assert event["operation"] == "load_catalog"
        assert event["source"] == "fish.json"
        assert event["correlation_id"] == "abc-123"
        assert "elapsed_ms" in event

    assert get_correlation_id() == ""
    assert OperationContextProcessor()(None, "info", {}) == {}


def test_operation_keeps_outer_correlation_id():
    get_logger(__name__).with_correlation_id("outer")
    with operation_logger("search"):
        assert get_correlation_id() == "outer"


def test_operation_failure_is_logged_and_reraised():
    with capture_logs() as logs:
        with pytest.raises(ValueError):
            with operation_logger("load_catalog"):
                raise ValueError("boom")

    failure = [log for log in logs if log["log_level"] == "error"]
    assert failure[0]["event"] == "Operation failed: load_catalog"
    assert failure[0]["error_type"] == "ValueError"


def test_operation_success_logs_duration():
    with capture_logs() as logs:
        with operation_logger("table_view"):
            pass

    completed = [log for log in logs if log.get("performance_metric")]
    assert completed[0]["event"] == "Operation completed: table_view"
    assert completed[0]["duration_ms"] >= 0


def test_audit_marks_event():
    with capture_logs() as logs:
        get_logger(__name__).audit("search", mode="name")

    assert logs[0]["audit"] is True
    assert logs[0]["action"] == "search"
    assert logs[0]["mode"] == "name"
