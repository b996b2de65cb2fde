"""Error code values and an HTTP error."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LocalCode:
    """An error code with a message, optional detail and i18n template."""

    code: int
    message: str = ""
    detail: Any = None
    i18n: str = ""

    def __str__(self) -> str:
        if self.detail is not None:
            return f"{self.code}:{self.message} {self.detail}"
        if self.message:
            return f"{self.code}:{self.message}"
        return str(self.code)


class HttpError(Exception):
    """An error carrying an HTTP status code and a client-facing message."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message