"""Process-wide translation management on top of translation files."""

from __future__ import annotations

import functools
import os
import threading
from typing import Any

from simplejrpc.container.gmap import StrAnyMap
from simplejrpc.gi18n.language import Language, new_language
from simplejrpc.gi18n.locale_files import I18nFileAdapter
from simplejrpc.gi18n.message import I18nMessage
from simplejrpc.gi18n.parser import create_parser


class I18nManager:
    """Loads translation files and translates keys in the active language."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._adapter: I18nFileAdapter | None = None
        self.message = I18nMessage()

    @property
    def adapter(self) -> I18nFileAdapter:
        """The translation file adapter, scanning the default locations on first use."""
        with self._lock:
            if self._adapter is None:
                self._adapter = I18nFileAdapter()
            return self._adapter

    def _load(self, lang: str) -> StrAnyMap:
        locale = self.adapter.locales.get(new_language(lang))
        if locale is None:
            raise FileNotFoundError(f"no translation file for language {lang!r}")
        return create_parser(locale.file_type, locale.path).get_content()

    def set_path(self, path: str | os.PathLike[str]) -> None:
        """Search ``path`` for translation files and load the English ones.

        Raises FileNotFoundError when there is no English file, and OSError or
        ValueError when it cannot be read or parsed.
        """
        with self._lock:
            self._adapter = I18nFileAdapter(path)
            english = str(Language.ENGLISH)
            self.message.set_language_content(english, self._load(english))

    def set_language(self, lang: str) -> None:
        """Load the translations for ``lang`` and make it the active language.

        Raises FileNotFoundError when no file exists for ``lang``.
        """
        with self._lock:
            self.message.set_language_content(lang, self._load(lang))

    def translate(self, key: str) -> str:
        return self.message.translate(key)

    def t(self, key: str) -> str:
        return self.translate(key)

    def translate_format(self, key: str, *args: Any) -> str:
        """Translate ``key`` and fill its printf-style verbs with ``args``."""
        return self.message.translate_format(key, *args)

    def tf(self, key: str, *args: Any) -> str:
        return self.translate_format(key, *args)


@functools.cache
def instance() -> I18nManager:
    """Return the shared translation manager."""
    return I18nManager()


def set_path(path: str | os.PathLike[str]) -> None:
    instance().set_path(path)


def set_language(language: str) -> None:
    instance().set_language(language)


def t(content: str) -> str:
    return instance().t(content)


def tf(format: str, *args: Any) -> str:
    return instance().translate_format(format, *args)


def translate(content: str) -> str:
    return instance().translate(content)


def translate_format(format: str, *args: Any) -> str:
    return instance().translate_format(format, *args)