"""CloudWatch logging adapter (production).

Sends structured logs to AWS CloudWatch Logs. Events are queued in memory
and flushed in batches by a background thread to reduce API calls.

Notes:
- boto3 is synchronous; methods only enqueue, so log calls never block the
  event loop on network I/O.
- Created once per process (singleton via container.get_logger()).
"""

from __future__ import annotations

import atexit
import json
import logging
import threading
from collections import deque
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Deque

import boto3
from botocore.exceptions import ClientError
from mypy_boto3_logs.client import CloudWatchLogsClient
from mypy_boto3_logs.type_defs import InputLogEventTypeDef

from customer_service.infrastructure.logging.console_adapter import ConsoleAdapter

_LEVELS = logging.getLevelNamesMapping()


def _add_error_fields(error: Exception | str | None, context: dict[str, Any]) -> None:
    if isinstance(error, Exception):
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    elif error is not None:
        context["error"] = error


@dataclass(slots=True)
class _Event:
    ts: datetime
    level: str
    message: str
    context: dict[str, Any]


class _Sink:
    """Shared queue, flusher thread and CloudWatch client.

    Bound adapters created through bind() share one sink so a single
    background thread owns the sequence token.
    """

    def __init__(
        self,
        *,
        client: CloudWatchLogsClient,
        log_group: str,
        log_stream: str,
        batch_size: int,
        batch_interval: float,
    ) -> None:
        self.client = client
        self.group = log_group
        self.stream = log_stream
        self.batch_size = batch_size
        self.batch_interval = batch_interval
        self.seq_token: str | None = None
        self.queue: Deque[_Event] = deque()
        self.lock = threading.Lock()
        self.stop = threading.Event()
        self.fallback = ConsoleAdapter(use_json=True)


class CloudWatchAdapter:
    """CloudWatch logger with background batch flushing.

    Args:
        log_group: Log group name (e.g., /CustomerService/production/app).
        log_stream: Log stream name (e.g., hostname/2026-10-19).
        region: AWS region name.
        level: Minimum level name; lower levels are dropped.
        batch_size: Maximum events per PutLogEvents call.
        batch_interval: Seconds between automatic flush attempts.
        client: Optional preconfigured logs client (tests).
    """

    def __init__(
        self,
        *,
        log_group: str,
        log_stream: str,
        region: str = "us-east-1",
        level: str = "INFO",
        batch_size: int = 50,
        batch_interval: float = 5.0,
        client: CloudWatchLogsClient | None = None,
        start: bool = True,
    ) -> None:
        self._sink = _Sink(
            client=client or boto3.client("logs", region_name=region),
            log_group=log_group,
            log_stream=log_stream,
            batch_size=batch_size,
            batch_interval=batch_interval,
        )
        self._min_level = _LEVELS.get(level.upper(), logging.INFO)
        self._context: dict[str, Any] = {}

        if start:
            self._ensure_destination()
            threading.Thread(
                target=self._flush_loop, name="cw-logger", daemon=True
            ).start()
            atexit.register(self.close)

    def debug(self, message: str, /, **context: Any) -> None:
        self._enqueue("DEBUG", message, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._enqueue("INFO", message, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._enqueue("WARNING", message, context)

    def error(
        self, message: str, /, *, error: Exception | str | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception.

        Args:
            message: Message text.
            error: Optional exception instance.
            **context: Structured key-value context.
        """
        _add_error_fields(error, context)
        self._enqueue("ERROR", message, context)

    def critical(
        self, message: str, /, *, error: Exception | str | None = None, **context: Any
    ) -> None:
        _add_error_fields(error, context)
        self._enqueue("CRITICAL", message, context)

    def bind(self, **context: Any) -> CloudWatchAdapter:
        """Return new adapter with bound context sharing the same sink."""
        bound = CloudWatchAdapter.__new__(CloudWatchAdapter)
        bound._sink = self._sink
        bound._min_level = self._min_level
        bound._context = {**self._context, **context}
        return bound

    def pending(self) -> int:
        """Number of queued events not yet sent."""
        with self._sink.lock:
            return len(self._sink.queue)

    def _enqueue(self, level: str, message: str, context: dict[str, Any]) -> None:
        if _LEVELS[level] < self._min_level:
            return
        sink = self._sink
        ev = _Event(
            ts=datetime.now(UTC),
            level=level,
            message=message,
            context={**self._context, **context},
        )
        with sink.lock:
            sink.queue.append(ev)
            full = len(sink.queue) >= sink.batch_size
        if full:
            threading.Thread(target=self._flush_safe, daemon=True).start()

    def _flush_loop(self) -> None:
        while not self._sink.stop.is_set():
            self._sink.stop.wait(timeout=self._sink.batch_interval)
            self._flush_safe()

    def _flush_safe(self) -> None:
        """Flush queued events; failures go to the console fallback."""
        try:
            self._flush()
        except Exception as e:  # noqa: BLE001
            try:
                self._sink.fallback.error(
                    "CloudWatch flush failed", error=e, pending=self.pending()
                )
            except (ValueError, OSError):
                # stdout closed during shutdown
                pass

    def _ensure_destination(self) -> None:
        """Create log group and stream, tolerating ones that already exist.

        Raises:
            ClientError: For any AWS error other than
                ResourceAlreadyExistsException.
        """
        sink = self._sink
        try:
            sink.client.create_log_group(logGroupName=sink.group)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") != "ResourceAlreadyExistsException":
                raise
        try:
            sink.client.create_log_stream(
                logGroupName=sink.group, logStreamName=sink.stream
            )
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") != "ResourceAlreadyExistsException":
                raise

    def _flush(self) -> None:
        """Send one batch with PutLogEvents.

        On ClientError the batch is written to the console fallback so the
        entries are not lost entirely.
        """
        sink = self._sink
        events: list[_Event] = []
        with sink.lock:
            while sink.queue and len(events) < sink.batch_size:
                events.append(sink.queue.popleft())

        if not events:
            return

        payload: list[InputLogEventTypeDef] = [
            {
                "timestamp": int(ev.ts.timestamp() * 1000),
                "message": json.dumps(
                    {
                        "timestamp": ev.ts.isoformat(),
                        "level": ev.level.lower(),
                        "message": ev.message,
                        **ev.context,
                    },
                    separators=(",", ":"),
                    default=str,
                ),
            }
            for ev in events
        ]

        kwargs: dict[str, Any] = {
            "logGroupName": sink.group,
            "logStreamName": sink.stream,
            "logEvents": payload,
        }
        if sink.seq_token is not None:
            kwargs["sequenceToken"] = sink.seq_token
        try:
            resp = sink.client.put_log_events(**kwargs)
            sink.seq_token = resp.get("nextSequenceToken", sink.seq_token)
        except ClientError as e:
            for ev in events:
                sink.fallback.error(
                    "CloudWatch send failed",
                    error=e,
                    original_level=ev.level,
                    original_message=ev.message,
                    original_context=ev.context,
                )

    def close(self) -> None:
        """Stop the background flusher and send what is still queued."""
        self._sink.stop.set()
        self._flush_safe()
