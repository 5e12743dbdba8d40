"""Pure conversion helpers shared by translator implementations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from ..errors import TranslationError
from ..models import TranslationBatch, TranslationPair

SCHEMA_NAME = "identifier_translations"

TRANSLATION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "translations": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "original": {"type": "string"},
                    "translated": {"type": "string"},
                },
                "required": ["original", "translated"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["translations"],
    "additionalProperties": False,
}

_INSTRUCTIONS = (
    "Translate the following list of terms into English keywords suitable for "
    "variable naming. Return the result as a JSON object with a single "
    '"translations" array of objects, where each object has "original" and '
    '"translated" properties.'
)


def build_prompt(terms: Sequence[str]) -> str:
    """Render the instruction text for a batch of ``terms``."""

    joined = "\n".join(terms)
    return f"{_INSTRUCTIONS}\n\nTerms:\n{joined}"


def response_format() -> dict[str, Any]:
    """Return the ``response_format`` request option enforcing the batch schema."""

    return {
        "type": "json_schema",
        "json_schema": {
            "name": SCHEMA_NAME,
            "strict": True,
            "schema": TRANSLATION_SCHEMA,
        },
    }


def parse_translations(content: str) -> list[TranslationPair]:
    """Validate ``content`` against the batch schema and return its pairs."""

    try:
        batch = TranslationBatch.model_validate_json(content)
    except ValidationError as exc:
        msg = "translation response does not match the expected schema"
        raise TranslationError(msg) from exc
    return list(batch.translations)


def extract_content(response: Any) -> str:
    """Return the message text of the first choice in a chat completion."""

    choices = _get(response, "choices")
    if not isinstance(choices, Sequence) or isinstance(choices, (str, bytes)) or not choices:
        msg = "translation response missing choices"
        raise TranslationError(msg)

    message = _get(choices[0], "message")
    if message is None:
        msg = "translation choice missing message payload"
        raise TranslationError(msg)

    refusal = _get(message, "refusal")
    if refusal:
        msg = f"translation request was refused: {refusal}"
        raise TranslationError(msg)

    content = _get(message, "content")
    if not isinstance(content, str) or not content.strip():
        msg = "translation response contained no content"
        raise TranslationError(msg)
    return content


def _get(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)
