"""Business metric value objects and factories."""

from customer_service.application.observability.business_metric import (
    BusinessMetric,
    MetricDimension,
    MetricDimensions,
    MetricUnit,
    customer_operation_metric,
    customers_created_metric,
    customers_deleted_metric,
    customers_updated_metric,
)

__all__ = [
    "BusinessMetric",
    "MetricDimension",
    "MetricDimensions",
    "MetricUnit",
    "customer_operation_metric",
    "customers_created_metric",
    "customers_deleted_metric",
    "customers_updated_metric",
]
