"""A thread-safe list wrapper."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class AnyArray(Generic[T]):
    """A list guarded by a lock for concurrent use."""

    def __init__(self, data: Iterable[T] | None = None) -> None:
        self._lock = threading.RLock()
        self._items: list[T] = list(data) if data is not None else []

    def append(self, item: T) -> None:
        with self._lock:
            self._items.append(item)

    def __getitem__(self, index: int) -> T:
        with self._lock:
            return self._items[index]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.array())

    def __contains__(self, item: object) -> bool:
        with self._lock:
            return any(existing == item for existing in self._items)

    def first(self) -> T:
        """Return the first element; IndexError if empty."""
        with self._lock:
            if not self._items:
                raise IndexError("first() on empty array")
            return self._items[0]

    def last(self) -> T:
        """Return the last element; IndexError if empty."""
        with self._lock:
            if not self._items:
                raise IndexError("last() on empty array")
            return self._items[-1]

    def array(self) -> list[T]:
        """Return a copy of the elements."""
        with self._lock:
            return list(self._items)

    def reverse(self) -> list[T]:
        """Return a new list with the elements in reverse order."""
        with self._lock:
            return self._items[::-1]

    def __repr__(self) -> str:
        return f"AnyArray({self.array()!r})"