from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

PDF_MEDIA_TYPE = "application/pdf"


class ExtractionSource(str, Enum):
    STRUCTURAL_TEXT = "structural_text"
    OCR = "optical_character_recognition"
    AI_VISION = "ai_vision"
    HYBRID = "hybrid"
    SYNTHETIC_FALLBACK = "synthetic_fallback"


class ExtractionFailure(Exception):
    """A strategy could not produce text. Absorbed by the pipeline."""


class UnreadableDocumentError(ExtractionFailure):
    """The buffer cannot be opened as a document at all."""


@dataclass(frozen=True)
class RawDocument:
    content: bytes = field(repr=False)
    filename: str = "resume.pdf"
    media_type: str = PDF_MEDIA_TYPE

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ExtractionCandidate:
    source: ExtractionSource
    text: str = ""
    pages_read: int = 0
    confidence: float | None = None

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()

    @classmethod
    def empty(cls, source: ExtractionSource) -> "ExtractionCandidate":
        return cls(source=source)


@dataclass(frozen=True)
class ExtractionDecision:
    accepted: bool
    candidate: ExtractionCandidate | None
    indicators_matched: int


@dataclass(frozen=True)
class ExtractionOutcome:
    """Result of a full pipeline run: the chosen candidate and how it was reached."""

    candidate: ExtractionCandidate
    decision: ExtractionDecision
    attempted: tuple[ExtractionSource, ...]
    notice: str | None = None

    @property
    def source(self) -> ExtractionSource:
        return self.candidate.source

    @property
    def synthetic(self) -> bool:
        return self.candidate.source is ExtractionSource.SYNTHETIC_FALLBACK
