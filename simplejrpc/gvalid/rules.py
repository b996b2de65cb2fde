"""The built-in validation rules: required, min_length and range."""

from __future__ import annotations

from typing import Any

from simplejrpc.gvalid.field import (
    FieldInfo,
    Validator,
    is_empty,
    parse_float,
    parse_int,
    to_float,
)


class RequiredValidator(Validator):
    """Fails when the value is empty: None, zero, False or an empty collection."""

    def validate(self, field: FieldInfo, value: Any) -> None:
        if is_empty(value):
            raise self.new_validation_error(field.name, "is required").with_message()


class MinLengthValidator(Validator):
    """Fails when a string is shorter, in UTF-8 bytes, than the first option.

    Empty and non-string values pass. Raises ValueError when the option is
    missing or not an integer.
    """

    def validate(self, field: FieldInfo, value: Any) -> None:
        if is_empty(value) or not isinstance(value, str):
            return
        if not field.tag_options:
            raise ValueError(f"min_length rule for {field.name!r} needs a length option")
        min_len = parse_int(field.tag_options[0])
        if len(value.encode("utf-8")) < min_len:
            raise self.new_validation_error(
                field.name, "must be at least %d characters", min_len
            ).with_message()


class RangeValidator(Validator):
    """Fails when a float lies outside the inclusive range given by two options.

    Non-float values, and rules with fewer than two options, pass. Raises
    ValueError when a bound is not a number.
    """

    def validate(self, field: FieldInfo, value: Any) -> None:
        num = to_float(value)
        if num is None or len(field.tag_options) < 2:
            return
        try:
            low = parse_float(field.tag_options[0])
        except ValueError as exc:
            raise ValueError(f"invalid minimum range value: {exc}") from exc
        try:
            high = parse_float(field.tag_options[1])
        except ValueError as exc:
            raise ValueError(f"invalid maximum range value: {exc}") from exc
        if num < low or num > high:
            raise self.new_validation_error(
                field.name, "must be between %v and %v", low, high
            ).with_message()