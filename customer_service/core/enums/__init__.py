"""Core enums package.

Usage:
    from customer_service.core.enums import ErrorCode, Environment
"""

from customer_service.core.enums.environment import Environment
from customer_service.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
