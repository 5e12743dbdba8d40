"""Core data structures and translator interfaces for termcase."""

from __future__ import annotations

from .errors import TranslationError
from .models import FormattedResult, TranslationBatch, TranslationPair

__all__ = [
    "FormattedResult",
    "TranslationBatch",
    "TranslationError",
    "TranslationPair",
]
