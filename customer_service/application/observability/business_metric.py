"""Business metric value objects.

A BusinessMetric is a named numeric observation with a unit and a small set
of dimensions. Emitters turn it into a backend format (CloudWatch EMF).

Customer write metrics:
    CustomersCreated / CustomersUpdated / CustomersDeleted
    value 1, unit Count, dimensions Endpoint=Customer, Operation=<op>
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class MetricUnit(str, Enum):
    """CloudWatch metric units used by business metrics."""

    COUNT = "Count"
    SECONDS = "Seconds"
    MILLISECONDS = "Milliseconds"
    PERCENT = "Percent"
    NONE = "None"


@dataclass(frozen=True, slots=True)
class MetricDimension:
    """One dimension (key/value pair) of a metric.

    Raises:
        ValueError: If key or value is empty.
    """

    key: str
    value: str

    def __post_init__(self) -> None:
        if not self.key.strip():
            raise ValueError("Metric dimension key cannot be empty")
        if not self.value.strip():
            raise ValueError(f"Metric dimension '{self.key}' value cannot be empty")


@dataclass(frozen=True, slots=True)
class MetricDimensions:
    """Ordered, immutable collection of unique-key dimensions."""

    dimensions: tuple[MetricDimension, ...] = ()

    def __post_init__(self) -> None:
        keys = [d.key for d in self.dimensions]
        if len(keys) != len(set(keys)):
            raise ValueError(f"Duplicate metric dimension keys: {keys}")

    @classmethod
    def of(cls, **values: str) -> "MetricDimensions":
        """Build from keyword arguments, keeping argument order."""
        return cls(tuple(MetricDimension(k, v) for k, v in values.items()))

    def get(self, key: str) -> str | None:
        for dimension in self.dimensions:
            if dimension.key == key:
                return dimension.value
        return None

    def contains(self, key: str) -> bool:
        return self.get(key) is not None

    def keys(self) -> list[str]:
        return [d.key for d in self.dimensions]

    def to_dict(self) -> dict[str, str]:
        return {d.key: d.value for d in self.dimensions}

    def __len__(self) -> int:
        return len(self.dimensions)

    def __iter__(self) -> Iterator[MetricDimension]:
        return iter(self.dimensions)


@dataclass(frozen=True, slots=True)
class BusinessMetric:
    """A single business metric observation.

    Attributes:
        name: Metric name (e.g. "CustomersCreated").
        value: Numeric value (non-negative).
        unit: CloudWatch unit.
        dimensions: Metric dimensions.
    """

    name: str
    value: float
    unit: MetricUnit = MetricUnit.COUNT
    dimensions: MetricDimensions = field(default_factory=MetricDimensions)

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Metric name cannot be empty")
        if self.value < 0:
            raise ValueError(f"Metric '{self.name}' value cannot be negative")


CUSTOMER_ENDPOINT = "Customer"


def customer_operation_metric(name: str, operation: str) -> BusinessMetric:
    """Build a Count=1 metric for a customer write operation.

    Args:
        name: Metric name.
        operation: Operation dimension value (create, update, delete).
    """
    return BusinessMetric(
        name=name,
        value=1,
        unit=MetricUnit.COUNT,
        dimensions=MetricDimensions.of(Endpoint=CUSTOMER_ENDPOINT, Operation=operation),
    )


def customers_created_metric() -> BusinessMetric:
    return customer_operation_metric("CustomersCreated", "create")


def customers_updated_metric() -> BusinessMetric:
    return customer_operation_metric("CustomersUpdated", "update")


def customers_deleted_metric() -> BusinessMetric:
    return customer_operation_metric("CustomersDeleted", "delete")
