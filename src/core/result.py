"""Result types for railway-oriented programming.

Operations that can fail in a well-defined way return a Result instead of
raising. Validators and services chain results left to right; the first
Failure stops the chain and is returned unchanged.

Usage:
    def parse_age(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Failure(error="Age must be numeric")
        return Success(value=int(raw))

    result = bind(parse_age("42"), check_adult)
    match result:
        case Success(value=age):
            print(f"Age: {age}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Chained success type


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


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]


def bind(result: Result[T, E], step: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Feed a successful value into the next step, short-circuit on failure.

    Args:
        result: Result of the previous step.
        step: Function producing the next Result from the success value.

    Returns:
        The step's Result, or the original Failure untouched.

    Example:
        >>> bind(Success(value=2), lambda v: Success(value=v * 10))
        Success(value=20)
        >>> bind(Failure(error="boom"), lambda v: Success(value=v * 10))
        Failure(error='boom')
    """
    match result:
        case Success(value=value):
            return step(value)
        case Failure():
            return result
