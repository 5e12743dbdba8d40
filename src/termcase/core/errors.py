"""Custom exception types used by termcase core utilities."""

from __future__ import annotations


class TranslationError(RuntimeError):
    """Raised when a translation batch cannot be fulfilled."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
