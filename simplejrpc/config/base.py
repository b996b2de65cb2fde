"""Configuration sources and the configuration holder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from simplejrpc.config.formatter import Formatter


class ConfigError(Exception):
    """Raised when a configuration item is missing, malformed or unavailable."""


class Adapter(ABC):
    """A source that configuration data can be loaded from."""

    @abstractmethod
    def available(self) -> bool:
        """Return True when the configuration source can be read."""

    @abstractmethod
    def data(self) -> dict[str, Any]:
        """Load and return the configuration as a dict.

        Raises ConfigError, OSError or ValueError when loading fails.
        """


class Config:
    """Pairs an adapter that loads configuration with a formatter that reads it."""

    def __init__(self, adapter: Adapter | None, formatter: Formatter) -> None:
        self.adapter = adapter
        self._formatter = formatter

    def clone_with_formatter(self, formatter: Formatter) -> Config:
        """Replace the formatter and return this config."""
        self._formatter = formatter
        return self

    def set_formatter(self, formatter: Formatter) -> None:
        self._formatter = formatter

    def must_data(self) -> dict[str, Any]:
        """Return the raw configuration data, or an empty dict if loading fails."""
        if self.adapter is None:
            return {}
        try:
            return self.adapter.data()
        except (ConfigError, OSError, ValueError):
            return {}

    def cfg(self) -> Formatter:
        """Return the formatter used to read configuration values."""
        return self._formatter