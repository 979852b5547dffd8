"""Result types for railway-oriented programming.

Command handlers return ``Result`` values instead of raising for expected
business failures (customer not found, duplicate email). Infrastructure
failures that must abort a write (cache invalidation) are still raised.

Usage:
    result = await handler.handle(command)
    match result:
        case Success(value=customer):
            print(customer.ulid)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
