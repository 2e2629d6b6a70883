from __future__ import annotations

import logging

from resume_wizard.ai.errors import ConfigurationError, ResumeAIError
from resume_wizard.ai.types import AIClient
from resume_wizard.schemas.resume import StructuredResume
from resume_wizard.services.llm_json import complete_text, first_json_value
from resume_wizard.services.prompts import SUGGESTIONS_SYSTEM_PROMPT, build_suggestions_prompt

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5

DEFAULT_SUGGESTIONS = (
    "Add quantified achievements with specific metrics",
    "Include more industry-specific keywords",
    "Expand project descriptions with technical details",
    "Add relevant certifications for your field",
    "Include soft skills that complement technical abilities",
)


def _parse_suggestions(text: str) -> list[str]:
    try:
        payload = first_json_value(text, dict)
        items = payload.get("suggestions")
    except ResumeAIError:
        items = first_json_value(text, list)
    if not isinstance(items, list):
        return []
    return [str(item).strip() for item in items if isinstance(item, (str, int, float)) and str(item).strip()]


async def suggest_improvements(client: AIClient, resume: StructuredResume) -> list[str]:
    """Up to five suggestions. Provider or parse problems yield the default list.

    A missing credential still raises ConfigurationError so the caller can tell
    the user to configure the service.
    """
    try:
        text = await complete_text(
            client,
            system_prompt=SUGGESTIONS_SYSTEM_PROMPT,
            user_prompt=build_suggestions_prompt(resume.model_dump(by_alias=True)),
            json_output=True,
            temperature=0.4,
            max_output_tokens=800,
        )
        suggestions = _parse_suggestions(text)
    except ConfigurationError:
        raise
    except ResumeAIError as exc:
        logger.warning("suggestions_fallback code=%s", exc.code)
        return list(DEFAULT_SUGGESTIONS)

    if not suggestions:
        logger.warning("suggestions_fallback code=empty")
        return list(DEFAULT_SUGGESTIONS)
    return suggestions[:MAX_SUGGESTIONS]
