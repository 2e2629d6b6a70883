from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from resume_wizard.ai.errors import ValidationFailure
from resume_wizard.ai.types import AIClient
from resume_wizard.schemas.resume import EnhancedOverlay, StructuredResume
from resume_wizard.services.llm_json import complete_json
from resume_wizard.services.prompts import ENHANCE_SYSTEM_PROMPT, build_enhance_prompt

logger = logging.getLogger(__name__)


def validate_overlay_payload(payload: dict[str, Any]) -> EnhancedOverlay:
    try:
        overlay = EnhancedOverlay.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailure(f"AI response does not match the overlay schema: {exc.error_count()} errors.") from exc
    if not overlay.career_summary.strip():
        raise ValidationFailure("AI enhancement is missing the career summary.")
    if not overlay.enhanced_skills:
        raise ValidationFailure("AI enhancement is missing the enhanced skills.")
    return overlay


async def enhance_resume(client: AIClient, resume: StructuredResume) -> EnhancedOverlay:
    """Build a fresh overlay for ``resume``. The resume itself is only read."""
    payload = await complete_json(
        client,
        system_prompt=ENHANCE_SYSTEM_PROMPT,
        user_prompt=build_enhance_prompt(resume.model_dump(by_alias=True)),
        temperature=0.5,
        max_output_tokens=3000,
    )
    overlay = validate_overlay_payload(payload)
    logger.info(
        "resume_enhanced skills=%s projects=%s experience=%s",
        len(overlay.enhanced_skills),
        len(overlay.optimized_projects),
        len(overlay.professional_experience),
    )
    return overlay
