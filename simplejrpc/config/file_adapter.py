"""Reading JSON configuration files from a set of conventional locations."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from simplejrpc.config.base import Adapter, Config, ConfigError
from simplejrpc.config.formatter import ConfigFormatter

DEFAULT_CONFIG_FILE_NAME = "config"
CONFIG_PATH_ENV = "CONFIG_PATH"

_SUPPORTED_FILE_TYPES = ("json",)
# Higher-priority locations come first.
_LOCAL_SYSTEM_TRY_FOLDERS = ("manifest/config",)
_RESOURCE_TRY_FOLDERS = ("", "/", "config/", "config", "/config", "/config/", "/config/config")

_NOT_FOUND = "configuration item not found"
_BAD_FORMAT = "configuration file parsing format error"


def _join(root: Path, relative: str) -> str:
    return os.path.normpath(os.path.join(root, relative.strip("/")))


class FileAdapter(Adapter):
    """Read-only access to a JSON configuration file.

    The file named by the ``CONFIG_PATH`` environment variable is tried first.
    Otherwise ``<root>/manifest/config.json``, ``<root>.json``,
    ``<root>/config.json`` and ``<root>/config/config.json`` are tried in turn.
    """

    def __init__(
        self,
        file_name_or_path: str | None = None,
        root_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self.file_name_or_path = file_name_or_path or DEFAULT_CONFIG_FILE_NAME
        self.root_path = Path(root_path) if root_path is not None else Path.cwd()
        self.search_paths: list[str] = []
        self._found = False
        self._scan(os.environ.get(CONFIG_PATH_ENV, ""))

    def _scan(self, special_path: str) -> None:
        if special_path:
            self.search_paths.append(special_path)
            if os.path.exists(special_path):
                self._found = True
                return

        root = self.root_path.resolve()
        for folder in (*_LOCAL_SYSTEM_TRY_FOLDERS, *_RESOURCE_TRY_FOLDERS):
            base = _join(root, folder)
            for file_type in _SUPPORTED_FILE_TYPES:
                candidate = f"{base}.{file_type}"
                self.search_paths.append(candidate)
                if os.path.exists(candidate):
                    self._found = True
                    return

    @property
    def path(self) -> str | None:
        """The configuration file that was found, or None."""
        return self.search_paths[-1] if self._found else None

    def available(self) -> bool:
        return self._found

    def data(self) -> dict[str, Any]:
        """Read and parse the configuration file.

        Raises ConfigError when no file was found or it is not a JSON object,
        OSError when it cannot be read and ValueError when it is not JSON.
        """
        path = self.path
        if path is None:
            raise ConfigError(_NOT_FOUND)
        content = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(content, dict):
            raise ConfigError("configuration file does not hold a JSON object")
        return content


def load_config(root_path: str | os.PathLike[str] | None = None) -> Config:
    """Locate, read and parse the configuration file into a Config.

    Raises ConfigError when the file is missing or cannot be parsed.
    """
    adapter = FileAdapter(root_path=root_path)
    if not adapter.available():
        raise ConfigError(_NOT_FOUND)
    try:
        content = adapter.data()
    except (ConfigError, OSError, ValueError) as exc:
        raise ConfigError(_BAD_FORMAT) from exc
    return Config(adapter, ConfigFormatter(content))