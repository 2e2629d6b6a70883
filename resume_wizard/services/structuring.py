from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from resume_wizard.ai.errors import ValidationFailure
from resume_wizard.ai.types import AIClient
from resume_wizard.schemas.api import ResumePrompt
from resume_wizard.schemas.resume import StructuredResume
from resume_wizard.services.llm_json import complete_json
from resume_wizard.services.prompts import (
    GENERATE_SYSTEM_PROMPT,
    STRUCTURE_SYSTEM_PROMPT,
    build_generate_prompt,
    build_structure_prompt,
)

logger = logging.getLogger(__name__)


def validate_structured_payload(payload: dict[str, Any]) -> StructuredResume:
    """Turn decoded AI output into a StructuredResume or raise ValidationFailure.

    A resume without a full name is treated as a failed parse, never returned
    partially.
    """
    personal = payload.get("personalInfo")
    if not isinstance(personal, dict):
        raise ValidationFailure("AI response is missing personalInfo.")
    try:
        resume = StructuredResume.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailure(f"AI response does not match the resume schema: {exc.error_count()} errors.") from exc
    if not resume.personal_info.full_name.strip():
        raise ValidationFailure("AI response is missing the candidate's full name.")
    return resume


async def structure_resume(client: AIClient, text: str) -> StructuredResume:
    payload = await complete_json(
        client,
        system_prompt=STRUCTURE_SYSTEM_PROMPT,
        user_prompt=build_structure_prompt(text),
        temperature=0.1,
        max_output_tokens=4000,
    )
    resume = validate_structured_payload(payload)
    logger.info(
        "resume_structured experience=%s education=%s projects=%s",
        len(resume.experience),
        len(resume.education),
        len(resume.projects),
    )
    return resume


async def generate_resume_from_prompt(client: AIClient, prompt: ResumePrompt) -> StructuredResume:
    payload = await complete_json(
        client,
        system_prompt=GENERATE_SYSTEM_PROMPT,
        user_prompt=build_generate_prompt(
            full_name=prompt.full_name,
            target_role=prompt.target_role,
            experience=prompt.experience,
            education=prompt.education,
            skills=prompt.skills,
            achievements=prompt.achievements,
            additional_info=prompt.additional_info,
        ),
        temperature=0.4,
        max_output_tokens=4000,
    )
    resume = validate_structured_payload(payload)
    logger.info("resume_generated target_role=%s", prompt.target_role or "-")
    return resume
