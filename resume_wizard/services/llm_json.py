from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from resume_wizard.ai.errors import AIUnavailableError, ValidationFailure
from resume_wizard.ai.types import AIClient, ChatMessage
from resume_wizard.core.config import settings

logger = logging.getLogger(__name__)

_DECODER = json.JSONDecoder()


def first_json_value(text: str, expect: type = dict) -> Any:
    """Decode the first well-formed JSON object (or array) embedded in ``text``.

    Models sometimes wrap the payload in prose or code fences, so every opening
    bracket is tried in order until one decodes to the expected type.
    """
    opener = "{" if expect is dict else "["
    source = text or ""
    start = source.find(opener)
    while start != -1:
        try:
            value, _end = _DECODER.raw_decode(source, start)
        except json.JSONDecodeError:
            value = None
        if isinstance(value, expect):
            return value
        start = source.find(opener, start + 1)
    raise ValidationFailure(f"AI response did not contain a JSON {expect.__name__}.")


async def complete_text(
    client: AIClient,
    *,
    system_prompt: str,
    user_prompt: str,
    json_output: bool = False,
    temperature: float | None = None,
    max_output_tokens: int = 2000,
    timeout_s: float | None = None,
) -> str:
    messages = [
        ChatMessage(role="system", content=system_prompt),
        ChatMessage(role="user", content=user_prompt),
    ]
    timeout = settings.ai_timeout_s if timeout_s is None else timeout_s
    try:
        return await asyncio.wait_for(
            client.complete(
                messages,
                json_output=json_output,
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            ),
            timeout=timeout,
        )
    except asyncio.TimeoutError as exc:
        logger.warning("ai_request_timeout timeout_s=%s", timeout)
        raise AIUnavailableError(f"AI request timed out after {timeout}s.") from exc


async def complete_json(
    client: AIClient,
    *,
    system_prompt: str,
    user_prompt: str,
    temperature: float | None = None,
    max_output_tokens: int = 2000,
    timeout_s: float | None = None,
) -> dict[str, Any]:
    text = await complete_text(
        client,
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        json_output=True,
        temperature=temperature,
        max_output_tokens=max_output_tokens,
        timeout_s=timeout_s,
    )
    return first_json_value(text, dict)
