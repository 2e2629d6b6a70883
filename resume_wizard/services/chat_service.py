from __future__ import annotations

import logging
import re
import time

from resume_wizard.ai.types import AIClient
from resume_wizard.schemas.resume import StructuredResume
from resume_wizard.services.llm_json import complete_text
from resume_wizard.services.prompts import CHAT_SYSTEM_PROMPT, build_chat_prompt

logger = logging.getLogger("resume_wizard.chat")

MAX_SENTENCES = 3

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]*")


def trim_sentences(text: str, limit: int = MAX_SENTENCES) -> str:
    sentences = [match.group(0).strip() for match in _SENTENCE_RE.finditer(text or "")]
    sentences = [sentence for sentence in sentences if sentence.strip(".!? ")]
    if len(sentences) <= limit:
        return (text or "").strip()
    kept = sentences[:limit]
    if not kept[-1].endswith((".", "!", "?")):
        kept[-1] += "."
    return " ".join(kept)


def resume_context(resume: StructuredResume | None) -> str | None:
    if resume is None:
        return None
    role = resume.experience[0].position if resume.experience and resume.experience[0].position else "Not specified"
    skill_count = len(resume.skills.technical) + len(resume.skills.soft)
    return "\n".join(
        [
            f"Name: {resume.personal_info.full_name or 'Not specified'}",
            f"Role: {role}",
            f"Experience: {len(resume.experience)} positions",
            f"Projects: {len(resume.projects)} projects",
            f"Skills: {skill_count} total skills",
            f"Education: {len(resume.education)} degrees",
        ]
    )


async def chat_answer(client: AIClient, message: str, resume: StructuredResume | None = None) -> str:
    started_at = time.perf_counter()
    text = await complete_text(
        client,
        system_prompt=CHAT_SYSTEM_PROMPT,
        user_prompt=build_chat_prompt(message.strip(), resume_context(resume)),
        temperature=0.7,
        max_output_tokens=300,
    )
    answer = trim_sentences(text)
    logger.info(
        "chat_answered has_resume=%s chars=%s latency_ms=%s",
        resume is not None,
        len(answer),
        int((time.perf_counter() - started_at) * 1000),
    )
    return answer
