"""Field metadata, the validator base class and value helpers."""

from __future__ import annotations

import dataclasses
import math
import numbers
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field as dataclass_field
from typing import Any

from simplejrpc.gvalid.errors import (
    ValidationError,
    new_validation_error,
    with_error_message,
)

_INT = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass
class FieldInfo:
    """A field of an object being validated.

    ``tags`` maps tag names to rule strings; ``tag_name`` selects which one
    holds the validation rules. ``tag_options`` holds the options of the rule
    being applied.
    """

    name: str
    value: Any
    parent: Any = None
    tag_name: str = ""
    tags: Mapping[str, str] = dataclass_field(default_factory=dict)
    tag_options: list[str] = dataclass_field(default_factory=list)
    kind: Any = None


class Validator(ABC):
    """A validation rule with an optional custom error message."""

    def __init__(self) -> None:
        self._message = ""

    @abstractmethod
    def validate(self, field: FieldInfo, value: Any) -> None:
        """Raise an exception when ``value`` breaks the rule."""

    def use_message(self, message: str) -> None:
        """Use ``message`` instead of the default text in later errors."""
        self._message = message

    def new_validation_error(self, field: str, format: str, *args: Any) -> ValidationError:
        """Create an error for ``field``, preferring the custom message if set."""
        return with_error_message(new_validation_error(field, format, *args), self._message)


def is_empty(value: Any) -> bool:
    """Return True for None, zero, False, empty strings and collections,
    and dataclass instances whose fields are all empty."""
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, (str, bytes, bytearray, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(is_empty(getattr(value, f.name)) for f in dataclasses.fields(value))
    return False


def parse_int(text: str) -> int:
    """Parse a base-10 signed 64-bit integer; ValueError if invalid or out of range."""
    if not _INT.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_float(text: str) -> float:
    """Parse a floating-point number; ValueError if invalid or out of range."""
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid number: {text!r}")
    try:
        value = float(text)
    except ValueError:
        if "x" not in text.lower():
            raise
        value = float.fromhex(text)
    if math.isinf(value) and "inf" not in text.lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


def to_float(value: Any) -> float | None:
    """Return ``value`` when it is a float, otherwise None.

    Integers and booleans are not treated as floats.
    """
    if isinstance(value, float):
        return value
    return None