"""Parsers for translation files in INI, JSON and TOML formats."""

from __future__ import annotations

import configparser
import json
import os
import tomllib
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any

from simplejrpc.container.gmap import StrAnyMap

_DEFAULT_SECTION = "DEFAULT"
_QUOTES = ('"""', "'''", '"', "`")


class FileType(Enum):
    """Formats a translation file can be written in."""

    INI = "ini"
    JSON = "json"
    TOML = "toml"

    def __str__(self) -> str:
        return self.value


class Parser(ABC):
    """Reads a translation file into a string-keyed map."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path

    @abstractmethod
    def get_content(self) -> StrAnyMap:
        """Parse the file. Raises OSError when unreadable, ValueError when malformed."""

    def _read(self) -> str:
        return Path(self.path).read_text(encoding="utf-8-sig")


def _unquote(value: str) -> str:
    for quote in _QUOTES:
        if len(value) >= 2 * len(quote) and value.startswith(quote) and value.endswith(quote):
            return value[len(quote):-len(quote)]
    return value


def _as_object(content: Any, path: str | os.PathLike[str]) -> dict[str, Any]:
    if not isinstance(content, dict):
        raise ValueError(f"{os.fspath(path)} does not hold a table of keys")
    return content


class IniParser(Parser):
    """Reads the keys of an INI file's default section.

    Keys before the first section header belong to the default section, as
    do keys under an explicit ``[DEFAULT]`` header. Key case is preserved.
    """

    def get_content(self) -> StrAnyMap:
        text = self._read()
        parser = configparser.ConfigParser(
            interpolation=None,
            strict=False,
            inline_comment_prefixes=("#", ";"),
            default_section=_DEFAULT_SECTION,
        )
        parser.optionxform = str  # type: ignore[assignment, method-assign]
        try:
            parser.read_string(f"[{_DEFAULT_SECTION}]\n{text}", source=os.fspath(self.path))
        except configparser.Error as exc:
            raise ValueError(f"cannot parse {os.fspath(self.path)}: {exc}") from exc
        return StrAnyMap({key: _unquote(value) for key, value in parser.defaults().items()})


class JsonParser(Parser):
    """Reads a JSON file holding one object."""

    def get_content(self) -> StrAnyMap:
        return StrAnyMap(_as_object(json.loads(self._read()), self.path))


class TomlParser(Parser):
    """Reads a TOML file."""

    def get_content(self) -> StrAnyMap:
        try:
            content = tomllib.loads(self._read())
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"cannot parse {os.fspath(self.path)}: {exc}") from exc
        return StrAnyMap(_as_object(content, self.path))


def create_parser(file_type: FileType | Any, path: str | os.PathLike[str]) -> Parser:
    """Return the parser for ``file_type``; unknown types get the INI parser."""
    if file_type is FileType.JSON:
        return JsonParser(path)
    if file_type is FileType.TOML:
        return TomlParser(path)
    return IniParser(path)