"""Batch workflow tying term splitting, translation and identifier casing together."""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Iterable, Sequence
from typing import Callable

from .core.adapters import TranslationAdapter
from .core.models import FormattedResult, TranslationPair
from .naming import FormatMode, format_identifier

__all__ = ["epoch_millis", "format_results", "split_terms", "translate_terms"]

LOGGER = logging.getLogger(__name__)

_TERM_SEPARATORS = re.compile(r"[\n,]+")


def epoch_millis() -> int:
    """Return the current time in milliseconds since the Unix epoch."""

    return time.time_ns() // 1_000_000


def split_terms(raw: str) -> list[str]:
    """Split newline or comma separated input into trimmed, non-empty terms."""

    return [term for term in (part.strip() for part in _TERM_SEPARATORS.split(raw)) if term]


def format_results(
    pairs: Iterable[TranslationPair],
    mode: FormatMode | str,
    *,
    clock: Callable[[], int] = epoch_millis,
) -> list[FormattedResult]:
    """Build a :class:`FormattedResult` for each pair, stamped by ``clock``."""

    policy = FormatMode(mode)
    return [
        FormattedResult(
            original=pair.original,
            translated=pair.translated,
            formatted=format_identifier(pair.translated, policy),
            timestamp=clock(),
        )
        for pair in pairs
    ]


async def translate_terms(
    terms: Sequence[str],
    mode: FormatMode | str,
    translator: TranslationAdapter,
    *,
    clock: Callable[[], int] = epoch_millis,
) -> list[FormattedResult]:
    """Translate ``terms`` in one batch and case every returned keyword.

    :class:`~termcase.core.errors.TranslationError` raised by ``translator``
    propagates unchanged; no partial results are produced.
    """

    pairs = await translator.translate_batch(terms)
    results = format_results(pairs, mode, clock=clock)
    empty = sum(1 for result in results if not result.formatted)
    if empty:
        LOGGER.debug("translate_terms produced %s empty identifiers", empty)
    return results
