from __future__ import annotations

from contextlib import contextmanager
from io import BytesIO
from typing import Iterator

import fitz  # PyMuPDF
from PIL import Image

from .models import RawDocument, UnreadableDocumentError


@contextmanager
def open_rendered_document(document: RawDocument) -> Iterator[fitz.Document]:
    try:
        doc = fitz.open(stream=document.content, filetype="pdf")
    except (RuntimeError, ValueError) as exc:
        raise UnreadableDocumentError(f"Cannot render '{document.filename}': {exc}") from exc
    try:
        if doc.needs_pass:
            doc.authenticate("")
        yield doc
    finally:
        doc.close()


def render_page(page: fitz.Page, scale: float) -> Image.Image:
    pix = page.get_pixmap(matrix=fitz.Matrix(scale, scale), alpha=False)
    return Image.frombytes("RGB", (pix.width, pix.height), pix.samples)


def to_jpeg(image: Image.Image, quality: int = 95) -> bytes:
    buffer = BytesIO()
    image.convert("RGB").save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()
