"""Walks the fields of a dataclass instance and validates each one."""

from __future__ import annotations

import dataclasses
from typing import Any, Protocol

from simplejrpc.gvalid.errors import ValidationErrors, first_error
from simplejrpc.gvalid.field import FieldInfo, Validator


class _Visitor(Protocol):
    def visit(self, field: FieldInfo) -> None: ...

    def register_validator(self, tag: str, validator: Validator) -> None: ...


class StructWalker:
    """Validates dataclass instances field by field.

    Rules are read from each field's metadata under ``tag_name``, e.g.
    ``field(metadata={"validate": "required|min_length:6"})``. Fields inherited
    from base dataclasses come first.
    """

    def __init__(self, visitor: _Visitor, tag_name: str) -> None:
        self.visitor = visitor
        self.tag_name = tag_name

    def register_validator(self, tag_name: str, validator: Validator) -> None:
        self.visitor.register_validator(tag_name, validator)

    def walk(self, obj: Any) -> None:
        """Validate ``obj`` and raise the first failure.

        Objects that are not dataclass instances are not validated.
        """
        if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
            return None
        try:
            self._walk_fields(obj)
        except ValidationErrors as exc:
            reduced = first_error(exc)
            raise reduced from None
        return None

    def _walk_fields(self, obj: Any) -> None:
        for spec in dataclasses.fields(obj):
            tags = {key: val for key, val in spec.metadata.items() if isinstance(val, str)}
            info = FieldInfo(
                name=spec.name,
                value=getattr(obj, spec.name),
                parent=obj,
                tag_name=self.tag_name,
                tags=tags,
                kind=spec.type,
            )
            self.visitor.visit(info)