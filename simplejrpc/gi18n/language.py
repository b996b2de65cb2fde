"""Languages known to the translation system."""

from __future__ import annotations

from enum import Enum


class Language(Enum):
    """A supported language, valued by its language code."""

    ENGLISH = "en"
    CHINESE = "zh"
    SIMPLIFIED_CHINESE = "zh-CN"
    TRADITIONAL_CHINESE = "zh-TW"

    def __str__(self) -> str:
        return self.value


_BY_CODE = {language.value.lower(): language for language in Language}


def new_language(lang: str) -> Language:
    """Return the Language for ``lang``, case-insensitively; unknown codes mean English."""
    return _BY_CODE.get(lang.lower(), Language.ENGLISH)