from __future__ import annotations

import base64
import logging
from typing import Any, Sequence

import openai
from openai import AsyncOpenAI

from resume_wizard.ai.config import AIConfig
from resume_wizard.ai.errors import (
    AIAuthError,
    AIQuotaError,
    AIUnavailableError,
    ResumeAIError,
    classify_provider_message,
)
from resume_wizard.ai.types import ChatMessage

logger = logging.getLogger(__name__)


def _map_provider_error(exc: Exception) -> ResumeAIError:
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return AIAuthError(f"AI provider rejected the credential: {exc}")
    if isinstance(exc, openai.RateLimitError):
        return AIQuotaError(f"AI provider quota or rate limit reached: {exc}")
    if isinstance(exc, openai.APIConnectionError):
        return AIUnavailableError(f"AI provider is unreachable: {exc}")
    # Untyped upstream failure; fall back to reading the message.
    error_cls = classify_provider_message(str(exc))
    return error_cls(f"AI provider request failed: {exc}")


class OpenAIProvider:
    """OpenAI chat-completions client. Also serves Gemini via its OpenAI-compatible endpoint."""

    def __init__(self, config: AIConfig, temperature: float = 0.2):
        self._config = config
        self._model = config.model
        self._temperature = temperature
        self._client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout_s,
            max_retries=config.max_retries,
        )

    @property
    def model(self) -> str:
        return self._model

    async def _create(self, **create_kwargs: Any) -> str:
        try:
            response = await self._client.chat.completions.create(model=self._model, **create_kwargs)
        except openai.OpenAIError as exc:
            mapped = _map_provider_error(exc)
            logger.warning("ai_request_failed model=%s code=%s", self._model, mapped.code)
            raise mapped from exc
        content = response.choices[0].message.content if response.choices else ""
        return str(content or "").strip()

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        json_output: bool = False,
        temperature: float | None = None,
        max_output_tokens: int = 2000,
    ) -> str:
        payload = [{"role": m.role, "content": m.content} for m in messages]
        create_kwargs: dict[str, Any] = {
            "messages": payload,
            "temperature": self._temperature if temperature is None else temperature,
            "max_tokens": max_output_tokens,
        }
        if json_output:
            create_kwargs["response_format"] = {"type": "json_object"}
        return await self._create(**create_kwargs)

    async def read_image(
        self,
        *,
        instruction: str,
        image: bytes,
        mime_type: str = "image/jpeg",
    ) -> str:
        encoded = base64.b64encode(image).decode("utf-8")
        return await self._create(
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": instruction},
                        {"type": "image_url", "image_url": {"url": f"data:{mime_type};base64,{encoded}"}},
                    ],
                }
            ],
            temperature=0.1,
            max_tokens=2500,
        )
