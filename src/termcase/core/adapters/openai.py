"""OpenAI provider adapter issuing one structured-output request per batch."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from openai import AsyncOpenAI

from ...config import TranslatorSettings
from ..errors import TranslationError
from ..models import TranslationPair
from .base import TranslationAdapter
from .utils import build_prompt, extract_content, parse_translations, response_format

LOGGER = logging.getLogger(__name__)

_RESERVED = {"messages", "response_format", "stream"}


async def create_completion(client: Any, payload: Mapping[str, Any]) -> Any:
    """Issue a chat completion, awaiting the result for async clients."""

    response = client.chat.completions.create(**payload)
    if inspect.isawaitable(response):
        response = await response
    return response


class OpenAITranslator(TranslationAdapter):
    """Translate term batches through OpenAI's chat completion API."""

    def __init__(
        self,
        client: Any | None = None,
        *,
        settings: TranslatorSettings | None = None,
        default_model: str | None = None,
        default_params: Mapping[str, Any] | None = None,
    ) -> None:
        if client is None and settings is None:
            settings = TranslatorSettings()

        self._client = client
        self._owns_client = False
        self._settings = settings
        self._default_params = dict(default_params or {})

        # precedence: default_model, then default_params["model"], then settings.model
        params_model = self._default_params.pop("model", None)
        model_value = default_model or params_model
        if model_value is None and settings is not None:
            model_value = settings.model
        self._default_model = str(model_value) if model_value else None

        if settings is not None:
            self._default_params = {**settings.request_params(), **self._default_params}

        conflict = _RESERVED.intersection(self._default_params)
        if conflict:
            joined = ", ".join(sorted(conflict))
            msg = f"default parameters cannot include reserved keys: {joined}"
            raise ValueError(msg)

    async def translate_batch(self, terms: Sequence[str], /) -> list[TranslationPair]:
        if isinstance(terms, (str, bytes, bytearray)):
            msg = "terms must be a sequence of strings"
            raise TypeError(msg)

        batch = list(terms)
        if not batch:
            LOGGER.debug("translate_batch skipped: empty batch")
            return []

        model_name = self._resolve_model()
        payload = self._build_payload(batch, model_name)
        LOGGER.debug("translate_batch model=%s terms=%s", model_name, len(batch))

        client = self._ensure_client()
        try:
            response = await create_completion(client, payload)
        except Exception as exc:
            msg = "OpenAI client call failed"
            raise TranslationError(msg) from exc

        pairs = parse_translations(extract_content(response))
        LOGGER.debug("translate_batch received pairs=%s", len(pairs))
        return pairs

    async def aclose(self) -> None:
        """Close the SDK client when this translator created it."""

        if not self._owns_client or self._client is None:
            return

        client = self._client
        self._client = None
        self._owns_client = False
        for closer_name in ("aclose", "close"):
            closer = getattr(client, closer_name, None)
            if closer is None:
                continue
            result = closer()
            if inspect.isawaitable(result):
                await result
            return

    def _resolve_model(self) -> str:
        if not self._default_model:
            msg = "a model name must be provided"
            raise TranslationError(msg)
        return self._default_model

    def _build_payload(self, terms: Sequence[str], model_name: str) -> dict[str, Any]:
        payload: dict[str, Any] = {"model": model_name, **self._default_params}
        payload.setdefault("temperature", 0)
        payload["messages"] = [{"role": "user", "content": build_prompt(terms)}]
        payload["response_format"] = response_format()
        return payload

    def _ensure_client(self) -> Any:
        if self._client is not None:
            return self._client

        settings = self._settings or TranslatorSettings()
        try:
            self._client = AsyncOpenAI(**settings.client_options())
        except Exception as exc:
            msg = "unable to configure the OpenAI client"
            raise TranslationError(msg) from exc
        self._owns_client = True
        return self._client
