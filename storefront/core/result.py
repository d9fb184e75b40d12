"""Result types for railway-oriented programming.

Command handlers return Result values instead of raising for expected
failures (missing customer, invalid input). This keeps error handling
explicit and testable.

Usage:
    result = await handler.handle(command)
    match result:
        case Success(value=customer):
            print(customer.name)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

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


Result: TypeAlias = Union[Success[T], Failure[E]]
