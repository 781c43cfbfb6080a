from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Generic, Literal, TypeVar, Union

T = TypeVar("T")

LookupField = Literal["id", "date"]


@dataclass(frozen=True)
class DuplicateKey:
    id: str

    @property
    def message(self) -> str:
        return f"Record already exists with the given id ({self.id})"


@dataclass(frozen=True)
class NotFound:
    key: str | date
    field: LookupField = "id"

    @property
    def message(self) -> str:
        return f"No record exists with the given {self.field} ({self.key})"


StoreErrorKind = Union[DuplicateKey, NotFound]


class RecordStoreError(Exception):
    """Raised by ``Result.unwrap`` when the operation did not succeed."""

    def __init__(self, error: StoreErrorKind) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a store operation: a value or an error kind, never both."""

    value: T | None = None
    error: StoreErrorKind | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, error: StoreErrorKind) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise RecordStoreError(self.error)
        return self.value  # type: ignore[return-value]
