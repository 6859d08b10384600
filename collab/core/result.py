"""Success/failure values returned by the data-access helpers."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from collab.core.errors import OperationError, OperationFailure

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful operation and its value."""

    value: T


@dataclass(frozen=True)
class Err:
    """A failed operation."""

    error: OperationError

    @classmethod
    def of(cls, message: str, failure: OperationFailure = OperationFailure.STORAGE) -> "Err":
        return cls(OperationError(message, failure))


Result = Ok[T] | Err
