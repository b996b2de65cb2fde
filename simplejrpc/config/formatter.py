"""Typed access to nested configuration values using dot-separated paths."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from simplejrpc.config.base import ConfigError

_NOT_FOUND = "configuration item not found"


class Formatter(ABC):
    """Reads typed values from a selected configuration section."""

    @abstractmethod
    def get_value(self, section: str) -> Formatter:
        """Return a formatter positioned at the dot-separated ``section``."""

    @abstractmethod
    def string(self) -> str:
        """Return the value as a string; ConfigError if missing or mistyped."""

    @abstractmethod
    def int(self) -> int:
        """Return the numeric value truncated to an integer."""

    @abstractmethod
    def float64(self) -> float:
        """Return the numeric value as a float."""

    @abstractmethod
    def bool(self) -> bool:
        """Return the value as a boolean."""

    @abstractmethod
    def map(self) -> dict[str, Any]:
        """Return the value as a dict."""

    @abstractmethod
    def list(self) -> list[Any]:
        """Return the value as a list."""

    def string_without_err(self) -> str:
        return self.string_with_default("")

    def string_with_default(self, default: str) -> str:
        try:
            return self.string()
        except ConfigError:
            return default

    def int_without_err(self) -> int:
        return self.int_with_default(0)

    def int_with_default(self, default: int) -> int:
        try:
            return self.int()
        except ConfigError:
            return default

    def bool_without_err(self) -> bool:
        try:
            return self.bool()
        except ConfigError:
            return False

    def map_without_err(self) -> dict[str, Any]:
        try:
            return self.map()
        except ConfigError:
            return {}

    def list_without_err(self) -> list[Any]:
        try:
            return self.list()
        except ConfigError:
            return []


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigFormatter(Formatter):
    """Formatter over parsed JSON content.

    ``get_value`` returns a new formatter bound to the selected path; the
    original formatter is left unchanged.
    """

    def __init__(self, content: Any) -> None:
        self._content = content
        self._path: tuple[str, ...] = ()

    def get_value(self, section: str) -> ConfigFormatter:
        view = ConfigFormatter(self._content)
        view._path = tuple(section.split("."))
        return view

    def _lookup(self) -> Any:
        if not self._path:
            raise ConfigError("no configuration section selected")
        node = self._content
        for part in self._path:
            if not isinstance(node, dict) or part not in node:
                raise ConfigError(_NOT_FOUND)
            node = node[part]
        return node

    def string(self) -> str:
        value = self._lookup()
        if not isinstance(value, str):
            raise ConfigError(_NOT_FOUND)
        return value

    def float64(self) -> float:
        value = self._lookup()
        if not _is_number(value):
            raise ConfigError(_NOT_FOUND)
        return float(value)

    def int(self) -> int:
        value = self.float64()
        try:
            return int(value)
        except (OverflowError, ValueError) as exc:
            raise ConfigError(_NOT_FOUND) from exc

    def bool(self) -> bool:
        value = self._lookup()
        if not isinstance(value, bool):
            raise ConfigError(_NOT_FOUND)
        return value

    def map(self) -> dict[str, Any]:
        value = self._lookup()
        if not isinstance(value, dict):
            raise ConfigError(_NOT_FOUND)
        return value

    def list(self) -> list[Any]:
        value = self._lookup()
        if not isinstance(value, list):
            raise ConfigError(_NOT_FOUND)
        return value

    def __repr__(self) -> str:
        return f"ConfigFormatter(path={'.'.join(self._path)!r})"