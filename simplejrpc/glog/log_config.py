"""Logging configuration and the helpers that interpret it."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any


@dataclass
class LogConfig:
    """Settings for the logging system."""

    path: str = ""
    file: str = ""
    level: str = ""
    stdout: bool = False
    st_status: int = 0
    rotate_backup_limit: int = 0
    writer_color_enable: bool = False
    rotate_backup_compress: int = 0
    rotate_expire: str = ""
    flag: int = 0


# Configuration keys for each field; keys match case-insensitively.
_KEYS = {
    "path": "path",
    "file": "file",
    "level": "level",
    "stdout": "stdout",
    "ststatus": "st_status",
    "rotatebackuplimit": "rotate_backup_limit",
    "writercolorenable": "writer_color_enable",
    "rotatebackupcompress": "rotate_backup_compress",
    "rotateexpire": "rotate_expire",
    "flag": "flag",
}

_TYPES = {f.name: f.type for f in fields(LogConfig)}


def _coerce(key: str, value: Any, kind: str) -> Any:
    if kind == "str":
        if isinstance(value, str):
            return value
    elif kind == "bool":
        if isinstance(value, bool):
            return value
    elif kind == "int" and not isinstance(value, bool):
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
    raise ValueError(f"cannot use {value!r} as {kind} for log config key {key!r}")


def load_log_config(data: dict[str, Any]) -> LogConfig:
    """Build a LogConfig from a configuration mapping.

    Unknown keys and null values are ignored. Raises ValueError when a value
    has the wrong type.
    """
    values: dict[str, Any] = {}
    for key, value in data.items():
        name = _KEYS.get(key.lower())
        if name is None or value is None:
            continue
        values[name] = _coerce(key, value, _TYPES[name])
    return LogConfig(**values)


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str, default: int) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else default


def parse_rotate_expire(expire: str) -> int:
    """Convert an expiry such as ``"7d"`` or ``"48h"`` to hours.

    Unparsable day counts mean one day; anything else means 24 hours.
    """
    if expire.endswith("d"):
        return 24 * _parse_int(expire[:-1], 1)
    if expire.endswith("h"):
        return _parse_int(expire[:-1], 24)
    return 24


def replace_date_placeholders(filename: str) -> str:
    """Replace every ``{Y-m-d}`` in ``filename`` with today's date."""
    if "{Y-m-d}" in filename:
        return filename.replace("{Y-m-d}", datetime.now().strftime("%Y-%m-%d"))
    return filename