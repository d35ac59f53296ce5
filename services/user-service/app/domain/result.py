"""
Validation result type.

Entity factories return ``Ok(entity)`` or ``Err(error)`` so callers handle a
failed validation explicitly instead of relying on exceptions.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import DomainValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful validation carrying the built value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed validation carrying the first rule that was broken."""

    error: DomainValidationError

    def is_ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err]
