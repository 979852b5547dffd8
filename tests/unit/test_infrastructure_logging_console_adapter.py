"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception and string error fields
- Context binding
- JSON output in testing mode

Architecture:
- Unit tests with mocked structlog, except the JSON output test
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import structlog

from customer_service.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "customer_service.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def structlog_logger():
    with patch(STRUCTLOG) as mock_structlog:
        mock_logger = MagicMock()
        mock_structlog.get_logger.return_value = mock_logger
        yield mock_logger


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("method", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, structlog_logger, method):
        adapter = ConsoleAdapter()

        getattr(adapter, method)("Message", cache_key="customer:abc", operation="x")

        getattr(structlog_logger, method).assert_called_once_with(
            "Message", cache_key="customer:abc", operation="x"
        )

    def test_error_with_exception_adds_type_and_message(self, structlog_logger):
        adapter = ConsoleAdapter()

        adapter.error("Handler failed", error=ValueError("bad value"), event_id="1")

        structlog_logger.error.assert_called_once_with(
            "Handler failed",
            event_id="1",
            error_type="ValueError",
            error_message="bad value",
        )

    def test_error_with_string_logs_error_field(self, structlog_logger):
        adapter = ConsoleAdapter()

        adapter.error("Cache error - falling back to database", error="timeout")

        structlog_logger.error.assert_called_once_with(
            "Cache error - falling back to database", error="timeout"
        )

    def test_critical_without_error(self, structlog_logger):
        adapter = ConsoleAdapter()

        adapter.critical("Database unreachable", attempts=3)

        structlog_logger.critical.assert_called_once_with(
            "Database unreachable", attempts=3
        )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    def test_service_is_bound_at_construction(self, structlog_logger):
        ConsoleAdapter(service="CustomerService")

        structlog_logger.bind.assert_called_once_with(service="CustomerService")

    def test_bind_returns_new_adapter(self, structlog_logger):
        bound_logger = MagicMock()
        structlog_logger.bind.return_value = bound_logger
        adapter = ConsoleAdapter()

        bound = adapter.bind(request_id="r-1")
        bound.info("Bound message")

        assert bound is not adapter
        bound_logger.info.assert_called_once_with("Bound message")
        structlog_logger.info.assert_not_called()


@pytest.mark.unit
def test_json_output_in_testing_mode(capsys):
    adapter = ConsoleAdapter(use_json=True, level="DEBUG", service="CustomerService")

    adapter.info("Cache miss - loading customer from database", cache_key="k")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    entry = json.loads(line)
    assert entry["event"] == "Cache miss - loading customer from database"
    assert entry["cache_key"] == "k"
    assert entry["level"] == "info"
    assert entry["service"] == "CustomerService"


@pytest.mark.unit
def test_structlog_configuration_is_reset_after_json_output_test():
    # Runs after test_json_output_in_testing_mode configured structlog.
    assert not structlog.is_configured()
