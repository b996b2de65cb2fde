"""Storage and lookup of translated messages."""

from __future__ import annotations

import json
import re
import threading
from typing import Any

from simplejrpc.container.gmap import StrAnyMap
from simplejrpc.gi18n.language import Language, new_language

_VERB = re.compile(r"%([-+# 0]*)(\d+)?(?:\.(\d*))?([a-zA-Z%])")


def _go_value(arg: Any) -> str:
    if arg is None:
        return "<nil>"
    if isinstance(arg, bool):
        return "true" if arg else "false"
    if isinstance(arg, float):
        if arg.is_integer() and abs(arg) < 1e21:
            return str(int(arg))
        return repr(arg)
    if isinstance(arg, (list, tuple)):
        return "[" + " ".join(_go_value(item) for item in arg) + "]"
    return str(arg)


def _go_type(arg: Any) -> str:
    if isinstance(arg, bool):
        return "bool"
    if isinstance(arg, int):
        return "int"
    if isinstance(arg, float):
        return "float64"
    if isinstance(arg, str):
        return "string"
    return type(arg).__name__


def _bad_verb(verb: str, arg: Any) -> str:
    if arg is None:
        return f"%!{verb}(<nil>)"
    return f"%!{verb}({_go_type(arg)}={_go_value(arg)})"


def _render(verb: str, flags: str, width: str | None, precision: str | None, arg: Any) -> str:
    spec = flags + (width or "")
    dot = f".{precision}" if precision is not None else ""
    is_number = isinstance(arg, (int, float)) and not isinstance(arg, bool)
    if verb in ("v", "s"):
        text = _go_value(arg)
        if precision is not None:
            text = text[: int(precision or 0)]
        return f"%{spec}s" % text
    if verb == "t" and isinstance(arg, bool):
        return f"%{spec}s" % _go_value(arg)
    if verb == "q" and isinstance(arg, str):
        return f"%{spec}s" % json.dumps(arg, ensure_ascii=False)
    if verb in "dxXo" and is_number and isinstance(arg, int):
        return f"%{spec}{dot}{verb}" % arg
    if verb == "b" and is_number and isinstance(arg, int):
        return f"%{spec}s" % format(arg, "b")
    if verb == "c" and is_number and isinstance(arg, int):
        return f"%{spec}s" % chr(arg)
    if verb in "eEfFgG" and is_number:
        return f"%{spec}{dot}{verb.replace('F', 'f')}" % float(arg)
    return _bad_verb(verb, arg)


def _sprintf(template: str, *args: Any) -> str:
    """Format ``template`` with printf-style verbs, never raising on mismatches.

    Missing arguments render as ``%!v(MISSING)``; unused ones are appended as
    ``%!(EXTRA type=value, ...)``; mistyped ones as ``%!d(type=value)``.
    """
    used = 0

    def replace(match: re.Match[str]) -> str:
        nonlocal used
        flags, width, precision, verb = match.groups()
        if verb == "%":
            return "%"
        if used >= len(args):
            return f"%!{verb}(MISSING)"
        arg = args[used]
        used += 1
        return _render(verb, flags, width, precision, arg)

    text = _VERB.sub(replace, template)
    if used < len(args):
        extra = ", ".join(
            "<nil>" if arg is None else f"{_go_type(arg)}={_go_value(arg)}"
            for arg in args[used:]
        )
        text = f"{text}%!(EXTRA {extra})"
    return text


class I18nMessage:
    """Translations for several languages, with one of them active."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._language = ""
        self.messages: dict[Language, StrAnyMap] = {}

    def set_language_content(self, lang: str, content: StrAnyMap) -> None:
        """Store ``content`` as the translations for ``lang`` and make it active."""
        with self._lock:
            self.set_language(lang)
            self.messages[new_language(lang)] = content

    def set_language(self, lang: str) -> None:
        with self._lock:
            self._language = lang

    def language(self) -> str:
        """Return the active language code, English when none is set."""
        with self._lock:
            return self._language or str(Language.ENGLISH)

    def translate(self, key: str) -> str:
        """Return the translation of ``key``.

        Returns "" when the active language has no translations loaded, and
        ``key`` itself when it has no translation.
        """
        with self._lock:
            content = self.messages.get(new_language(self.language()))
            if content is None:
                return ""
            return content.get_string(key) or key

    def t(self, key: str) -> str:
        return self.translate(key)

    def translate_format(self, key: str, *args: Any) -> str:
        """Translate ``key`` and fill its printf-style verbs with ``args``."""
        return _sprintf(self.translate(key), *args)

    def tf(self, key: str, *args: Any) -> str:
        return self.translate_format(key, *args)