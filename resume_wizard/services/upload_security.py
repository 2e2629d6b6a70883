from __future__ import annotations

from fastapi import status

from resume_wizard.extraction.models import PDF_MEDIA_TYPE, RawDocument

PDF_MAGIC = b"%PDF-"
ALLOWED_CONTENT_TYPES = {PDF_MEDIA_TYPE, "application/x-pdf", "application/octet-stream", ""}


class UploadRejected(ValueError):
    def __init__(self, message: str, *, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(message)
        self.status_code = status_code


def _safe_filename(filename: str | None) -> str:
    name = (filename or "").replace("\\", "/").rsplit("/", 1)[-1].strip()
    return name[:255] or "resume.pdf"


def validate_pdf_upload(
    *,
    filename: str | None,
    content_type: str | None,
    content: bytes,
    max_bytes: int,
) -> RawDocument:
    """Check extension, declared type, size and signature before any parsing."""
    name = _safe_filename(filename)
    ext = name.rsplit(".", 1)[-1].lower() if "." in name else ""
    if ext != "pdf":
        raise UploadRejected("Only PDF resumes are supported. Please upload a .pdf file.")

    declared = (content_type or "").split(";", 1)[0].strip().lower()
    if declared not in ALLOWED_CONTENT_TYPES:
        raise UploadRejected(f"Unsupported content type '{declared}'. Please upload a PDF.")

    if not content:
        raise UploadRejected("The uploaded file is empty.")
    if len(content) > max_bytes:
        raise UploadRejected(
            f"File is too large. Maximum size is {max_bytes // (1024 * 1024)} MB.",
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        )
    if not content.startswith(PDF_MAGIC):
        raise UploadRejected("File signature does not match .pdf content.")

    return RawDocument(content=content, filename=name, media_type=PDF_MEDIA_TYPE)
