"""Small helpers: a conditional chooser, object/dict mapping and int joining."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")


def choose(condition: bool, a: T, b: T) -> T:
    """Return ``a`` when ``condition`` is true, otherwise ``b``."""
    return a if condition else b


def _public_fields(obj: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: getattr(obj, f.name)
            for f in dataclasses.fields(obj)
            if not f.name.startswith("_")
        }
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"object of type {type(obj).__name__} is not serializable")


def _encode(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    return _public_fields(obj)


def struct_to_map(obj: Any) -> dict[str, Any]:
    """Convert an object to a plain dict by serializing it through JSON.

    Raises TypeError when the object cannot be serialized or does not
    serialize to a JSON object.
    """
    try:
        encoded = json.dumps(obj, default=_encode)
    except ValueError as exc:
        raise TypeError(str(exc)) from exc
    result = json.loads(encoded)
    if not isinstance(result, dict):
        raise TypeError(f"value of type {type(obj).__name__} does not map to an object")
    return result


def map_to_struct(data: Mapping[str, Any], obj: Any) -> Any:
    """Set each of ``obj``'s fields whose name is a key of ``data``.

    Values are assigned as they are, without conversion. Returns ``obj``.
    """
    for name in _public_fields(obj):
        if name in data:
            setattr(obj, name, data[name])
    return obj


def join_int_slice(items: Iterable[int]) -> str:
    """Join integers into one string separated by single spaces."""
    return " ".join(str(int(item)) for item in items)