"""Configuration shared by the translator adapters and the CLI."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TranslatorSettings(BaseSettings):
    """Connection settings for the translation service.

    Values are read from ``TERMCASE_*`` environment variables or a ``.env``
    file in the working directory.

    Attributes
    ----------
    api_key:
        Credential for the OpenAI compatible endpoint. When unset the SDK falls
        back to its own ``OPENAI_API_KEY`` lookup.
    base_url:
        Optional endpoint override for OpenAI compatible providers.
    model:
        Chat model used for every batch unless overridden per call.
    timeout_seconds:
        Upper bound for a single request.
    temperature:
        Sampling temperature sent with each request.
    """

    model_config = SettingsConfigDict(
        env_prefix="TERMCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_key: str | None = Field(default=None, description="API key for the translation service.")
    base_url: str | None = Field(default=None, description="OpenAI compatible base URL.")
    model: str = Field(default="gpt-4o-mini", min_length=1, description="Default chat model.")
    timeout_seconds: float = Field(default=30.0, gt=0, description="Request timeout in seconds.")
    temperature: float = Field(default=0.0, ge=0, le=2, description="Sampling temperature.")

    def client_options(self) -> dict[str, Any]:
        """Return keyword arguments for constructing an SDK client.

        Retries are disabled so every batch issues exactly one request.
        """

        options: dict[str, Any] = {"timeout": self.timeout_seconds, "max_retries": 0}
        if self.api_key:
            options["api_key"] = self.api_key
        if self.base_url:
            options["base_url"] = self.base_url
        return options

    def request_params(self) -> dict[str, Any]:
        """Return default request parameters for the translator."""

        return {"temperature": self.temperature}


__all__ = ["TranslatorSettings"]
