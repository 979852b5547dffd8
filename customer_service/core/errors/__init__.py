"""Core errors package.

Usage:
    from customer_service.core.errors import DomainError, NotFoundError, CacheError
"""

from customer_service.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from customer_service.core.errors.domain_error import DomainError
from customer_service.core.errors.exceptions import CacheError, MetricsEmissionError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "CacheError",
    "MetricsEmissionError",
]
