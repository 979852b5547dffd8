"""Console logging adapter (development/testing).

Writes structured logs to stdout through structlog.
- Development: colored key=value renderer
- Testing/CI: one JSON object per line

Does NOT inherit from LoggerProtocol (PEP 544 structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _exception_fields(
    error: Exception | str | None, context: dict[str, Any]
) -> dict[str, Any]:
    if isinstance(error, Exception):
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    elif error is not None:
        context["error"] = error
    return context


class ConsoleAdapter:
    """Console logger for development and testing environments.

    Args:
        use_json: JSON lines when True (CI/testing), colored text when False.
        level: Minimum level name (DEBUG, INFO, ...).
        service: Optional service name bound to every entry.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        service: str | None = None,
    ) -> None:
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer(default=str))
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        logger = structlog.get_logger()
        self._logger = logger.bind(service=service) if service else logger

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | str | None = None, **context: Any
    ) -> None:
        """Log an error message, adding error_type/error_message if given."""
        self._logger.error(message, **_exception_fields(error, context))

    def critical(
        self, message: str, /, *, error: Exception | str | None = None, **context: Any
    ) -> None:
        """Log a critical message, adding error_type/error_message if given."""
        self._logger.critical(message, **_exception_fields(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter sharing the structlog configuration.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter
