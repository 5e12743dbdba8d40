"""Turn natural-language terms into programming identifiers.

The package exposes a deterministic PascalCase/camelCase formatter, a batch
translator that asks an OpenAI compatible model for English keywords, and a
small pipeline plus command line interface combining the two.
"""

from __future__ import annotations

from .config import TranslatorSettings
from .core import FormattedResult, TranslationBatch, TranslationError, TranslationPair
from .core.adapters import OpenAITranslator, TranslationAdapter
from .naming import FormatMode, format_identifier, split_words
from .pipeline import epoch_millis, format_results, split_terms, translate_terms

__all__ = [
    "FormatMode",
    "FormattedResult",
    "OpenAITranslator",
    "TranslationAdapter",
    "TranslationBatch",
    "TranslationError",
    "TranslationPair",
    "TranslatorSettings",
    "epoch_millis",
    "format_identifier",
    "format_results",
    "split_terms",
    "split_words",
    "translate_terms",
]

__version__ = "0.1.0"
