from __future__ import annotations

import asyncio
import logging

from resume_wizard.ai.errors import ResumeAIError
from resume_wizard.ai.types import AIClient

from .models import ExtractionCandidate, ExtractionSource, RawDocument
from .rendering import open_rendered_document, render_page, to_jpeg

logger = logging.getLogger(__name__)

VISION_SCALE = 2.0

READ_PAGE_INSTRUCTION = """You are reading one page of a resume image. Transcribe ALL visible text.
- Keep the reading order: top to bottom, left to right.
- Keep section headings, dates, company names, job titles and bullet points.
- Include every email address, phone number and URL exactly as shown.
- Do not summarize, translate or add anything that is not on the page.
Return plain text only."""


def render_pages_as_jpeg(document: RawDocument, max_pages: int, scale: float = VISION_SCALE) -> list[bytes]:
    with open_rendered_document(document) as doc:
        return [to_jpeg(render_page(doc[index], scale)) for index in range(min(doc.page_count, max_pages))]


async def extract_vision_text(
    document: RawDocument,
    max_pages: int = 3,
    *,
    client: AIClient | None = None,
) -> ExtractionCandidate:
    if client is None:
        logger.info("vision_skipped reason=no_ai_client")
        return ExtractionCandidate.empty(ExtractionSource.AI_VISION)

    images = await asyncio.to_thread(render_pages_as_jpeg, document, max_pages)
    page_texts: list[str] = []
    for page_number, image in enumerate(images, start=1):
        try:
            text = await client.read_image(instruction=READ_PAGE_INSTRUCTION, image=image, mime_type="image/jpeg")
        except ResumeAIError as exc:
            logger.warning("vision_page_failed page=%s code=%s", page_number, exc.code)
            continue
        if text.strip():
            page_texts.append(text.strip())

    return ExtractionCandidate(
        source=ExtractionSource.AI_VISION,
        text="\n\n".join(page_texts),
        pages_read=len(images),
    )
