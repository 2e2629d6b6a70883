from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from resume_wizard.schemas.resume import EnhancedOverlay, StructuredResume

ExtractionSourceName = Literal[
    "structural_text",
    "optical_character_recognition",
    "ai_vision",
    "hybrid",
    "synthetic_fallback",
]
AtsBand = Literal["excellent", "good", "needs_improvement"]


class ExtractionInfo(BaseModel):
    source: ExtractionSourceName
    indicators_matched: int = Field(ge=0)
    characters: int = Field(ge=0)
    attempted: list[ExtractionSourceName] = Field(default_factory=list)
    synthetic: bool = False
    notice: str | None = None


class SessionCreatedResponse(BaseModel):
    session_id: str


class SessionResponse(BaseModel):
    session_id: str
    resume: StructuredResume | None = None
    overlay: EnhancedOverlay | None = None
    extraction: ExtractionInfo | None = None
    updated_at: datetime


class ErrorDetail(BaseModel):
    code: str
    message: str
    guidance: str


class ImportResponse(BaseModel):
    session_id: str
    committed: bool
    resume: StructuredResume
    overlay: EnhancedOverlay | None = None
    extraction: ExtractionInfo
    enhancement_error: ErrorDetail | None = None


class ResumePrompt(BaseModel):
    full_name: str = Field(min_length=1, max_length=200)
    target_role: str = Field(default="", max_length=200)
    experience: str = Field(default="", max_length=10000)
    education: str = Field(default="", max_length=5000)
    skills: str = Field(default="", max_length=5000)
    achievements: str = Field(default="", max_length=5000)
    additional_info: str = Field(default="", max_length=5000)


class SuggestionsResponse(BaseModel):
    suggestions: list[str]


class AtsCategory(BaseModel):
    id: str
    score: int = Field(ge=0, le=100)
    weight: float = Field(ge=0.0, le=1.0)


class AtsScoreResponse(BaseModel):
    overall: int = Field(ge=0, le=100)
    band: AtsBand
    categories: list[AtsCategory]
    strengths: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class SectionResponse(BaseModel):
    section: str
    source: Literal["overlay", "original"]
    content: Any


class ChatRequest(BaseModel):
    message: str = Field(min_length=1, max_length=4000)
    session_id: str | None = None


class ChatResponse(BaseModel):
    answer: str
