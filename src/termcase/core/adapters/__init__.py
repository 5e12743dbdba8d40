"""Translator interfaces and provider implementations."""

from __future__ import annotations

from .base import TranslationAdapter
from .openai import OpenAITranslator
from .utils import TRANSLATION_SCHEMA, build_prompt, parse_translations, response_format

__all__ = [
    "OpenAITranslator",
    "TRANSLATION_SCHEMA",
    "TranslationAdapter",
    "build_prompt",
    "parse_translations",
    "response_format",
]
