"""Validation error types."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from simplejrpc.gi18n.message import _sprintf


class RuleViolation(Exception):
    """A validation failure described by its message alone."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(Exception):
    """A field that failed validation, with the reason."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(field, message)
        self.field = field
        self.message = message

    def with_message(self) -> RuleViolation:
        """Return an error carrying only the message, without the field name."""
        return RuleViolation(self.message)

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationErrors(Exception):
    """Several validation errors reported together."""

    def __init__(self, errors: Iterable[ValidationError]) -> None:
        self.errors = list(errors)
        super().__init__(*self.errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def __str__(self) -> str:
        return "; ".join(str(error) for error in self.errors)


def new_validation_error(field: str, format: str, *args: Any) -> ValidationError:
    """Create a ValidationError whose message is ``format`` filled with ``args``."""
    return ValidationError(field, _sprintf(format, *args))


def with_error_message(error: ValidationError, message: str) -> ValidationError:
    """Replace the error's message when ``message`` is non-empty; return the error."""
    if message:
        error.message = message
    return error


def first_error(error: BaseException | None) -> BaseException | None:
    """Reduce a ValidationErrors to its first error; other errors pass through."""
    if isinstance(error, ValidationErrors) and error.errors:
        return error.errors[0]
    return error