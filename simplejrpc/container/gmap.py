"""A thread-safe dict with string keys."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from typing import Any

_MISSING = object()


class StrAnyMap:
    """A string-keyed dict guarded by a lock.

    A dict passed to the constructor is used as the backing store directly.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._lock = threading.RLock()
        self._data: dict[str, Any] = data if data is not None else {}

    def iterator(self, func: Callable[[str, Any], bool]) -> None:
        """Call ``func`` for each pair of a snapshot; stop when it returns False."""
        for key, value in self.to_dict().items():
            if not func(key, value):
                break

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the contents."""
        with self._lock:
            return dict(self._data)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value

    def sets(self, data: dict[str, Any]) -> None:
        with self._lock:
            self._data.update(data)

    def search(self, key: str) -> tuple[Any, bool]:
        """Return ``(value, found)`` for ``key``."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            return None, False

    def get(self, key: str) -> Any:
        with self._lock:
            return self._data.get(key)

    def get_string(self, key: str) -> str:
        """Return the string stored at ``key``, or "" when absent.

        Raises TypeError when the stored value is not a string.
        """
        value = self.get(key)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise TypeError(f"value for {key!r} is {type(value).__name__}, not str")
        return value

    def pop(self) -> tuple[str, Any]:
        """Remove and return one pair, or ``("", None)`` when empty."""
        with self._lock:
            if not self._data:
                return "", None
            return self._data.popitem()

    def pops(self, size: int) -> dict[str, Any]:
        """Remove and return up to ``size`` pairs; ``-1`` removes all."""
        if size < -1:
            raise ValueError(f"invalid size: {size}")
        with self._lock:
            if size == -1 or size > len(self._data):
                size = len(self._data)
            result: dict[str, Any] = {}
            for key in list(self._data)[:size]:
                result[key] = self._data.pop(key)
            return result

    def _set_if_absent(
        self,
        key: str,
        value: Any = None,
        factory: Callable[[], Any] | None = None,
    ) -> Any:
        with self._lock:
            existing = self._data.get(key, _MISSING)
            if existing is not _MISSING:
                return existing
            if factory is not None:
                value = factory()
            if value is not None:
                self._data[key] = value
            return value

    def set_if_not_exist_func(self, key: str, func: Callable[[], Any]) -> bool:
        """Set ``key`` to ``func()`` if absent; ``func`` runs outside the lock."""
        if key not in self:
            self._set_if_absent(key, value=func())
            return True
        return False

    def set_if_not_exist_func_lock(self, key: str, func: Callable[[], Any]) -> bool:
        """Set ``key`` to ``func()`` if absent; ``func`` runs under the lock."""
        if key not in self:
            self._set_if_absent(key, factory=func)
            return True
        return False

    def get_or_set_func_lock(self, key: str, func: Callable[[], Any]) -> Any:
        """Return the value at ``key``, setting it from ``func()`` if absent."""
        value, found = self.search(key)
        if found:
            return value
        return self._set_if_absent(key, factory=func)

    def removes(self, keys: Iterable[str]) -> None:
        with self._lock:
            for key in keys:
                self._data.pop(key, None)

    def remove(self, key: str) -> Any:
        """Delete ``key`` and return its value, or None if it was absent."""
        with self._lock:
            return self._data.pop(key, None)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data)

    def values(self) -> list[Any]:
        with self._lock:
            return list(self._data.values())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        return f"StrAnyMap({self.to_dict()!r})"