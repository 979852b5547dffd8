"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the codebase while
remaining backend-agnostic. Implementations MUST ensure logs are structured
(key-value context) and safe (no secrets).

Log Levels:
    - DEBUG: Detailed diagnostic info (metric emitted)
    - INFO: Normal operational events (cache miss, invalidation)
    - WARNING: Degraded service (metric emission failed)
    - ERROR: Operation failed, system continues (cache read fell back)
    - CRITICAL: System-wide failure

Security:
    - NEVER log secrets
    - Customer email addresses are never logged; customer_id only where the
      event registry's PII policy allows it

Usage:
    logger: LoggerProtocol = get_logger()
    logger.info("Cache miss - loading customer from database", cache_key=key)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | str | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception (logged as error_type and
                error_message) or an already-rendered error string (logged
                as the error field).
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | str | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
