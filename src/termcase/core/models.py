"""Records exchanged between the translator, the formatter and callers."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TranslationPair(BaseModel):
    """A source term and the English keyword returned for it."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    original: str = Field(..., description="Term exactly as submitted to the service.")
    translated: str = Field(..., description="English keyword phrase suggested by the service.")


class TranslationBatch(BaseModel):
    """Structured payload the translation service must return."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    translations: List[TranslationPair] = Field(..., description="Translated terms in service order.")


class FormattedResult(BaseModel):
    """A translated term together with its cased identifier."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    original: str = Field(..., description="Term exactly as submitted to the service.")
    translated: str = Field(..., description="English keyword phrase suggested by the service.")
    formatted: str = Field(..., description="Identifier produced from the translated phrase.")
    timestamp: int = Field(..., ge=0, description="Creation time in milliseconds since the Unix epoch.")


__all__ = ["FormattedResult", "TranslationBatch", "TranslationPair"]
