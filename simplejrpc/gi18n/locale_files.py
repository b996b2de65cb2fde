"""Discovery of translation files on disk."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from simplejrpc.gi18n.language import Language, new_language
from simplejrpc.gi18n.parser import FileType

I18N_PATH_ENV = "I18N_PATH"
DEFAULT_LANGUAGE_FOLDER = "i18n"

_SUPPORTED_FILE_TYPES = (FileType.INI,)
_RESOURCE_TRY_FOLDERS = ("i18n/",)


@dataclass(frozen=True)
class LocaleFile:
    """A translation file and its format."""

    path: str
    file_type: FileType


class I18nFileAdapter:
    """Finds translation files and maps each language to its file.

    The directory given as ``path`` is searched first, else the one named by
    the ``I18N_PATH`` environment variable; when neither exists, ``i18n/``
    under ``root_path`` (default: the working directory) is searched. A
    file's language comes from its name, e.g. ``zh-CN.ini``.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        root_path: str | os.PathLike[str] | None = None,
    ) -> None:
        special = os.fspath(path) if path is not None else os.environ.get(I18N_PATH_ENV, "")
        self.locale_path = os.fspath(path) if path is not None else DEFAULT_LANGUAGE_FOLDER
        self.root_path = Path(root_path) if root_path is not None else Path.cwd()
        self.search_paths: list[str] = []
        self.locales: dict[Language, LocaleFile] = {}
        self._found = False
        self._scan(special)

    def _scan(self, special: str) -> None:
        if special:
            self.search_paths.append(special)
            if os.path.exists(special):
                self._walk(special)
                return
        root = self.root_path.resolve()
        for folder in _RESOURCE_TRY_FOLDERS:
            self._walk(os.path.normpath(os.path.join(root, folder)))

    def _walk(self, path: str) -> None:
        if os.path.isfile(path):
            self._add(path)
            return
        try:
            names = sorted(os.listdir(path))
        except OSError:
            return
        for name in names:
            child = os.path.join(path, name)
            if os.path.isdir(child) and not os.path.islink(child):
                self._walk(child)
            else:
                self._add(child)

    def _add(self, path: str) -> None:
        for file_type in _SUPPORTED_FILE_TYPES:
            if path.endswith(str(file_type)):
                self.search_paths.append(path)
                stem = "".join(os.path.basename(path).split(".")[:-1])
                self.locales[new_language(stem)] = LocaleFile(path, file_type)
                self._found = True

    @property
    def path(self) -> str | None:
        """The last translation file found, or None."""
        return self.search_paths[-1] if self._found else None

    def available(self) -> bool:
        return self._found

    def data(self) -> dict[str, str]:
        """Read the last file found as a JSON object of strings.

        Raises FileNotFoundError when nothing was found, OSError when it cannot
        be read and ValueError when it is not a JSON object of strings.
        """
        path = self.path
        if path is None:
            raise FileNotFoundError("no translation files were found")
        content = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(content, dict) or not all(
            isinstance(value, str) for value in content.values()
        ):
            raise ValueError(f"{path} does not hold a JSON object of strings")
        return content