"""Logging adapters implementing LoggerProtocol."""

from customer_service.infrastructure.logging.cloudwatch_adapter import CloudWatchAdapter
from customer_service.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["CloudWatchAdapter", "ConsoleAdapter"]
