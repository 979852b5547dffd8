"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    CUSTOMER_NOT_FOUND = "customer_not_found"
    CUSTOMER_TYPE_NOT_FOUND = "customer_type_not_found"
    CUSTOMER_STATUS_NOT_FOUND = "customer_status_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    RESOURCE_CONFLICT = "resource_conflict"

    # Infrastructure-facing errors
    CACHE_UNAVAILABLE = "cache_unavailable"
    PERSISTENCE_FAILED = "persistence_failed"
