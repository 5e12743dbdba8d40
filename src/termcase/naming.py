"""Identifier casing utilities used throughout the project."""

from __future__ import annotations

import re
from enum import Enum

__all__ = ["FormatMode", "format_identifier", "split_words"]


_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_SEPARATORS = re.compile(r"[^a-zA-Z0-9]+")


class FormatMode(str, Enum):
    """Casing policies supported by :func:`format_identifier`."""

    PASCAL_CASE = "PascalCase"
    CAMEL_CASE = "camelCase"


def split_words(text: str) -> list[str]:
    """Split ``text`` into ASCII alphanumeric words.

    Lower-to-upper transitions such as ``userId`` count as word breaks. Every
    character outside ``[a-zA-Z0-9]`` separates words, so text without any
    ASCII letters or digits produces an empty list.
    """

    spaced = _CASE_BOUNDARY.sub(r"\1 \2", text)
    return [word for word in _SEPARATORS.split(spaced) if word]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def format_identifier(text: str, mode: FormatMode | str = FormatMode.PASCAL_CASE) -> str:
    """Return ``text`` cased as a PascalCase or camelCase identifier.

    Parameters
    ----------
    text:
        Free-form text, typically an English keyword phrase such as
        ``"total count"``.
    mode:
        A :class:`FormatMode` or its string value. Unknown values raise
        :class:`ValueError`.

    Every word is normalised to an initial capital followed by lowercase
    letters, so acronyms are not preserved: ``"userID"`` becomes ``"UserId"``.
    An empty string is returned when ``text`` holds no ASCII letters or digits.
    """

    policy = FormatMode(mode)
    words = [_capitalize(word) for word in split_words(text)]
    if not words:
        return ""

    if policy is FormatMode.PASCAL_CASE:
        return "".join(words)

    head, *tail = words
    return head.lower() + "".join(tail)
