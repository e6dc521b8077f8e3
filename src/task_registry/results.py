from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


# PUBLIC_INTERFACE
class ErrorKind(str, Enum):
    """Kinds of soft failure a registry operation can report."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str = ""


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a mutating registry operation.

    - On success: value holds the payload (a snapshot, or None for plain updates)
    - On failure: error holds the Failure; registry state is unchanged

    A Result is truthy only when it succeeded, so callers can write
    ``if registry.complete_task(task_id): ...``.
    """

    value: Optional[T] = None
    error: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str = "") -> "Result[T]":
        return cls(error=Failure(kind=kind, message=message))
