from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from io import BytesIO
from typing import Any

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .models import ExtractionCandidate, ExtractionSource, RawDocument, UnreadableDocumentError

logger = logging.getLogger(__name__)

LINE_BUCKET = 5


def open_pdf(document: RawDocument) -> PdfReader:
    try:
        reader = PdfReader(BytesIO(document.content))
        if reader.is_encrypted:
            reader.decrypt("")
        return reader
    except (PdfReadError, ValueError, OSError) as exc:
        raise UnreadableDocumentError(f"Cannot open '{document.filename}' as PDF: {exc}") from exc


def _position(cm: list[float], tm: list[float]) -> tuple[float, float]:
    x = tm[4] * cm[0] + tm[5] * cm[2] + cm[4]
    y = tm[4] * cm[1] + tm[5] * cm[3] + cm[5]
    return x, y


def group_text_by_position(items: list[tuple[float, float, str]]) -> str:
    """Rebuild reading order: lines top to bottom, items left to right within a line."""
    lines: dict[int, list[tuple[float, str]]] = defaultdict(list)
    for x, y, text in items:
        bucket = int(round(y / LINE_BUCKET)) * LINE_BUCKET
        lines[bucket].append((x, text))

    rendered: list[str] = []
    for bucket in sorted(lines, reverse=True):
        ordered = sorted(lines[bucket], key=lambda item: item[0])
        line = " ".join(text for _x, text in ordered).strip()
        if line:
            rendered.append(" ".join(line.split()))
    return "\n".join(rendered)


def _annotation_text(page: Any) -> str:
    values: list[str] = []
    for ref in page.get("/Annots") or []:
        try:
            annot = ref.get_object()
            subtype = annot.get("/Subtype")
            if subtype == "/Link":
                action = annot.get("/A")
                uri = action.get_object().get("/URI") if action is not None else None
                if uri:
                    values.append(str(uri))
            elif subtype == "/Widget":
                field_value = annot.get("/V")
                if field_value:
                    values.append(str(field_value))
        except Exception as exc:  # noqa: BLE001 - a broken annotation must not drop the page
            logger.debug("pdf_annotation_skipped error=%s", exc)
    return " ".join(value.strip() for value in values if value.strip())


def _page_text(page: Any) -> str:
    items: list[tuple[float, float, str]] = []

    def visitor(text: str, cm: list[float], tm: list[float], _font: Any, _size: Any) -> None:
        if text and text.strip():
            x, y = _position(cm, tm)
            items.append((x, y, text.strip()))

    plain = page.extract_text(visitor_text=visitor) or ""
    grouped = group_text_by_position(items)
    return grouped if grouped.strip() else plain.strip()


def read_text_layer(document: RawDocument, max_pages: int) -> ExtractionCandidate:
    reader = open_pdf(document)
    pages = reader.pages[:max_pages]
    chunks: list[str] = []
    for page_number, page in enumerate(pages, start=1):
        try:
            page_text = _page_text(page)
            annotation_text = _annotation_text(page)
        except Exception as exc:  # noqa: BLE001 - keep going with the remaining pages
            logger.warning("structural_page_failed page=%s error=%s", page_number, exc)
            continue
        chunk = "\n".join(part for part in (page_text, annotation_text) if part)
        if chunk:
            chunks.append(chunk)

    return ExtractionCandidate(
        source=ExtractionSource.STRUCTURAL_TEXT,
        text="\n\n".join(chunks).strip(),
        pages_read=len(pages),
    )


async def extract_structural_text(document: RawDocument, max_pages: int = 10) -> ExtractionCandidate:
    return await asyncio.to_thread(read_text_layer, document, max_pages)
