"""Three-state field update for partial modifications.

A partial update field is either:
    - Unchanged: the caller did not supply the field (raw value None)
    - Changed(value): the caller supplied a valid value
    - (a Failure at validation time when the supplied value is invalid)

Usage:
    result = validate_optional(raw.first_name, PersonName.create)
    match result:
        case Success(value=Changed(value=name)):
            ...
        case Success(value=Unchanged()):
            ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, Generic, TypeVar

from src.core.result import Failure, Result, Success

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Unchanged:
    """Field was not supplied; keep the current value."""


@dataclass(frozen=True, slots=True)
class Changed(Generic[T]):
    """Field was supplied and validated."""

    value: T


UNCHANGED: Final = Unchanged()

type FieldUpdate[T] = Unchanged | Changed[T]


def validate_optional(
    raw: str | None,
    factory: Callable[[str], Result[T, E]],
) -> Result[FieldUpdate[T], E]:
    """Validate an optional raw value into a FieldUpdate.

    Args:
        raw: Raw field value, None when the caller omitted it.
        factory: Value object `create` classmethod.

    Returns:
        Success(UNCHANGED) for None, Success(Changed(v)) for a valid value,
        or the factory's Failure.
    """
    if raw is None:
        return Success(value=UNCHANGED)
    match factory(raw):
        case Success(value=value):
            return Success(value=Changed(value=value))
        case Failure(error=error):
            return Failure(error=error)
