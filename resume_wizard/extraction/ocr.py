from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any

import pytesseract
from PIL import Image

from .models import ExtractionCandidate, ExtractionSource, RawDocument
from .rendering import open_rendered_document, render_page

logger = logging.getLogger(__name__)

RENDER_SCALES: tuple[float, ...] = (2.0, 3.0, 1.5)
CONTRAST = 1.5
TESSERACT_CONFIG = "--oem 3 --psm 3"


@dataclass(frozen=True)
class OcrRead:
    text: str
    confidence: float


def preprocess_for_ocr(image: Image.Image) -> Image.Image:
    """Grayscale plus a mild contrast stretch around mid-gray."""
    gray = image.convert("L")
    factor = (259 * (CONTRAST + 255)) / (255 * (259 - CONTRAST))
    return gray.point(lambda value: max(0, min(255, int(factor * (value - 128) + 128))))


def _text_and_confidence(data: dict[str, list[Any]]) -> OcrRead:
    lines: dict[tuple[int, int, int], list[str]] = defaultdict(list)
    confidences: list[float] = []
    for index, word in enumerate(data.get("text", [])):
        word = (word or "").strip()
        try:
            conf = float(data["conf"][index])
        except (KeyError, IndexError, TypeError, ValueError):
            conf = -1.0
        if not word or conf < 0:
            continue
        key = (data["block_num"][index], data["par_num"][index], data["line_num"][index])
        lines[key].append(word)
        confidences.append(conf)

    text = "\n".join(" ".join(words) for _key, words in sorted(lines.items()))
    confidence = sum(confidences) / len(confidences) if confidences else 0.0
    return OcrRead(text=text, confidence=confidence)


def recognize(image: Image.Image) -> OcrRead:
    data = pytesseract.image_to_data(
        preprocess_for_ocr(image),
        lang="eng",
        config=TESSERACT_CONFIG,
        output_type=pytesseract.Output.DICT,
    )
    return _text_and_confidence(data)


def best_read(reads: list[OcrRead]) -> OcrRead:
    """Highest confidence wins; the first-tried scale wins ties."""
    best = OcrRead(text="", confidence=0.0)
    for read in reads:
        if read.confidence > best.confidence:
            best = read
    return best


def run_ocr(document: RawDocument, max_pages: int, scales: tuple[float, ...] = RENDER_SCALES) -> ExtractionCandidate:
    page_texts: list[str] = []
    page_confidences: list[float] = []
    with open_rendered_document(document) as doc:
        page_count = min(doc.page_count, max_pages)
        for page_index in range(page_count):
            reads: list[OcrRead] = []
            for scale in scales:
                try:
                    reads.append(recognize(render_page(doc[page_index], scale)))
                except pytesseract.TesseractNotFoundError:
                    logger.warning("ocr_unavailable reason=tesseract_not_installed")
                    return ExtractionCandidate.empty(ExtractionSource.OCR)
                except Exception as exc:  # noqa: BLE001 - one bad render must not stop the others
                    logger.warning("ocr_render_failed page=%s scale=%s error=%s", page_index + 1, scale, exc)
            chosen = best_read(reads)
            if chosen.text.strip():
                page_texts.append(chosen.text)
                page_confidences.append(chosen.confidence)

    confidence = sum(page_confidences) / len(page_confidences) if page_confidences else None
    return ExtractionCandidate(
        source=ExtractionSource.OCR,
        text="\n\n".join(page_texts).strip(),
        pages_read=page_count,
        confidence=confidence,
    )


async def extract_ocr_text(document: RawDocument, max_pages: int = 5) -> ExtractionCandidate:
    return await asyncio.to_thread(run_ocr, document, max_pages)
