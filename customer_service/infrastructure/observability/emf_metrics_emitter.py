"""CloudWatch Embedded Metric Format (EMF) emitter.

Renders each BusinessMetric as one EMF JSON document and writes it as a
single log line. CloudWatch Logs extracts the metric from the line; no
PutMetricData calls are made.

Document shape:
    {
        "_aws": {
            "Timestamp": <epoch ms>,
            "CloudWatchMetrics": [{
                "Namespace": "CustomerService",
                "Dimensions": [["Endpoint", "Operation"]],
                "Metrics": [{"Name": "CustomersCreated", "Unit": "Count"}]
            }]
        },
        "Endpoint": "Customer",
        "Operation": "create",
        "CustomersCreated": 1
    }
"""

import json
import sys
import time
from collections.abc import Callable, Sequence
from typing import Any

import structlog

from customer_service.application.observability.business_metric import BusinessMetric
from customer_service.core.errors import MetricsEmissionError

RESERVED_AWS_KEY = "_aws"
MAX_DIMENSIONS = 30
MAX_NAMESPACE_LENGTH = 255

LineWriter = Callable[[str], Any]


def _stdout_writer() -> LineWriter:
    return structlog.PrintLogger(file=sys.stdout).msg


class EmfMetricsEmitter:
    """Business metrics emitter writing EMF log lines.

    Note: Does NOT inherit from BusinessMetricsEmitterProtocol.

    Args:
        namespace: CloudWatch metric namespace.
        writer: Callable receiving each rendered line (defaults to a
            structlog PrintLogger on stdout).
        clock: Returns epoch seconds (for deterministic tests).

    Raises:
        ValueError: If namespace is empty or too long.
    """

    def __init__(
        self,
        namespace: str,
        *,
        writer: LineWriter | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not namespace.strip() or len(namespace) > MAX_NAMESPACE_LENGTH:
            raise ValueError(f"Invalid EMF namespace: {namespace!r}")
        self._namespace = namespace
        self._write = writer or _stdout_writer()
        self._clock = clock

    def emit(self, metric: BusinessMetric) -> None:
        """Write one EMF document for metric.

        Raises:
            MetricsEmissionError: If the document is invalid or the write fails.
        """
        self._write_line(self.render([metric]), metric.name)

    def emit_many(self, metrics: Sequence[BusinessMetric]) -> None:
        """Write one EMF document holding several metrics.

        All metrics share the dimensions of the first one. An empty sequence
        writes nothing.

        Raises:
            MetricsEmissionError: If the document is invalid or the write fails.
        """
        if not metrics:
            return
        self._write_line(self.render(metrics), metrics[0].name)

    def render(self, metrics: Sequence[BusinessMetric]) -> dict[str, Any]:
        """Build the EMF document for metrics (dimensions from the first).

        Raises:
            MetricsEmissionError: On key collisions or too many dimensions.
        """
        if not metrics:
            raise MetricsEmissionError("Cannot render EMF document without metrics")

        dimensions = metrics[0].dimensions.to_dict()
        if len(dimensions) > MAX_DIMENSIONS:
            raise MetricsEmissionError(
                f"EMF supports at most {MAX_DIMENSIONS} dimensions",
                metric_name=metrics[0].name,
            )

        values = {metric.name: metric.value for metric in metrics}
        collisions = sorted(set(dimensions) & set(values))
        if collisions:
            raise MetricsEmissionError(
                f"Metric names collide with dimension keys: {collisions}",
                metric_name=metrics[0].name,
            )
        if RESERVED_AWS_KEY in dimensions or RESERVED_AWS_KEY in values:
            raise MetricsEmissionError(
                f"'{RESERVED_AWS_KEY}' is reserved in EMF documents",
                metric_name=metrics[0].name,
            )

        return {
            RESERVED_AWS_KEY: {
                "Timestamp": int(self._clock() * 1000),
                "CloudWatchMetrics": [
                    {
                        "Namespace": self._namespace,
                        "Dimensions": [list(dimensions)],
                        "Metrics": [
                            {"Name": metric.name, "Unit": metric.unit.value}
                            for metric in metrics
                        ],
                    }
                ],
            },
            **dimensions,
            **values,
        }

    def _write_line(self, document: dict[str, Any], metric_name: str) -> None:
        try:
            self._write(json.dumps(document, separators=(",", ":")))
        except (OSError, ValueError, TypeError) as e:
            raise MetricsEmissionError(
                f"Failed to write EMF document: {e}", metric_name=metric_name
            ) from e
