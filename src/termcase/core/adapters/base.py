"""Translator interface shared by provider implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..models import TranslationPair


class TranslationAdapter(ABC):
    """Abstract interface for provider-specific batch translators."""

    @abstractmethod
    async def translate_batch(self, terms: Sequence[str], /) -> list[TranslationPair]:
        """Translate ``terms`` in a single request and return the pairs in service order."""

    async def aclose(self) -> None:
        """Release provider resources held by the adapter."""
