from __future__ import annotations

from collections.abc import Iterator
from datetime import date
from threading import Lock
from typing import Generic, Protocol, TypeVar

from haccp.results import DuplicateKey, NotFound, Result


class Record(Protocol):
    id: str
    date: date


RecordT = TypeVar("RecordT", bound=Record)


class InMemoryRecordStore(Generic[RecordT]):
    """Insertion-ordered records, unique by ``id``, searchable by ``date``.

    Every public method holds the store lock for its whole body, so the
    uniqueness check in ``add`` and the append that follows cannot
    interleave with another caller.
    """

    def __init__(self, name: str = "records") -> None:
        self.name = name
        self._items: list[RecordT] = []
        self._lock = Lock()

    def _find(self, record_id: str) -> RecordT | None:
        return next((item for item in self._items if item.id == record_id), None)

    def add(self, record: RecordT) -> Result[RecordT]:
        with self._lock:
            if self._find(record.id) is not None:
                return Result.fail(DuplicateKey(record.id))
            self._items.append(record)
            return Result.success(record)

    def get_by_id(self, record_id: str) -> Result[RecordT]:
        with self._lock:
            item = self._find(record_id)
            if item is None:
                return Result.fail(NotFound(record_id, "id"))
            return Result.success(item)

    def get_by_date(self, day: date) -> Result[RecordT]:
        with self._lock:
            # first match in insertion order wins
            item = next((item for item in self._items if item.date == day), None)
            if item is None:
                return Result.fail(NotFound(day, "date"))
            return Result.success(item)

    def delete(self, record_id: str) -> Result[RecordT]:
        with self._lock:
            item = self._find(record_id)
            if item is None:
                return Result.fail(NotFound(record_id, "id"))
            self._items = [x for x in self._items if x.id != record_id]
            return Result.success(item)

    def records(self) -> list[RecordT]:
        with self._lock:
            return list(self._items)

    @property
    def size(self) -> int:
        return len(self)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return any(item.id == record_id for item in self._items)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self.records())
