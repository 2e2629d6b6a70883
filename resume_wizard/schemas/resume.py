from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel

SectionName = Literal["summary", "skills", "projects", "experience"]


def _clean_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        return [str(value).strip()] if str(value).strip() else []
    cleaned: list[str] = []
    for item in value:
        if item is None:
            continue
        text = str(item).strip()
        if text:
            cleaned.append(text)
    return cleaned


def _assign_ids(items: list[Any], prefix: str) -> None:
    """Give every entry a unique id; missing or repeated ids become ``<prefix>_<n>``."""
    seen: set[str] = set()
    for index, item in enumerate(items, start=1):
        item_id = (item.id or "").strip()
        if not item_id or item_id in seen:
            item_id = f"{prefix}_{index}"
            while item_id in seen:
                item_id = f"{item_id}_{index}"
        item.id = item_id
        seen.add(item_id)


class ResumeModel(BaseModel):
    """camelCase on the wire, snake_case in Python, nulls replaced by defaults."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class PersonalInfo(ResumeModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linked_in: str = Field(default="", alias="linkedIn")
    github: str = ""
    website: str = ""


class Education(ResumeModel):
    id: str = ""
    degree: str = ""
    institution: str = ""
    year: str = ""
    gpa: str = ""
    honors: str = ""


class Experience(ResumeModel):
    id: str = ""
    company: str = ""
    position: str = ""
    duration: str = ""
    location: str = ""
    description: str = ""
    achievements: list[str] = Field(default_factory=list)

    @field_validator("achievements", mode="before")
    @classmethod
    def _clean_achievements(cls, value: Any) -> list[str]:
        return _clean_str_list(value)


class Project(ResumeModel):
    id: str = ""
    title: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    link: str = ""
    github: str = ""

    @field_validator("technologies", mode="before")
    @classmethod
    def _clean_technologies(cls, value: Any) -> list[str]:
        return _clean_str_list(value)


class Certification(ResumeModel):
    id: str = ""
    name: str = ""
    issuer: str = ""
    date: str = ""
    expiry_date: str = ""
    credential_id: str = ""


class Skills(ResumeModel):
    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)

    @field_validator("technical", "soft", mode="before")
    @classmethod
    def _clean_skills(cls, value: Any) -> list[str]:
        return _clean_str_list(value)


class StructuredResume(ResumeModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    career_objective: str = ""
    education: list[Education] = Field(default_factory=list)
    experience: list[Experience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    certifications: list[Certification] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)

    @field_validator("languages", mode="before")
    @classmethod
    def _clean_languages(cls, value: Any) -> list[str]:
        return _clean_str_list(value)

    @model_validator(mode="after")
    def _stable_ids(self) -> "StructuredResume":
        _assign_ids(self.education, "edu")
        _assign_ids(self.experience, "exp")
        _assign_ids(self.projects, "proj")
        _assign_ids(self.certifications, "cert")
        return self


class EnhancedOverlay(ResumeModel):
    """AI-rewritten alternative content. Shown next to the resume, never merged into it."""

    career_summary: str = ""
    enhanced_skills: list[str] = Field(default_factory=list)
    optimized_projects: list[Project] = Field(default_factory=list)
    professional_experience: list[Experience] = Field(default_factory=list)
    portfolio_intro: str = ""

    @field_validator("enhanced_skills", mode="before")
    @classmethod
    def _clean_enhanced_skills(cls, value: Any) -> list[str]:
        return _clean_str_list(value)

    @model_validator(mode="after")
    def _stable_ids(self) -> "EnhancedOverlay":
        _assign_ids(self.optimized_projects, "proj")
        _assign_ids(self.professional_experience, "exp")
        return self


def resolve_section(
    resume: StructuredResume,
    overlay: EnhancedOverlay | None,
    section: SectionName,
    *,
    prefer_overlay: bool = True,
) -> Any:
    """Pick overlay-or-original content for one section.

    The overlay wins only when it is preferred, present and non-empty for that
    section. Neither input is modified.
    """
    original: Any
    enhanced: Any
    if section == "summary":
        original = resume.career_objective
        enhanced = overlay.career_summary if overlay else ""
    elif section == "skills":
        original = list(resume.skills.technical)
        enhanced = list(overlay.enhanced_skills) if overlay else []
    elif section == "projects":
        original = [item.model_copy(deep=True) for item in resume.projects]
        enhanced = [item.model_copy(deep=True) for item in overlay.optimized_projects] if overlay else []
    elif section == "experience":
        original = [item.model_copy(deep=True) for item in resume.experience]
        enhanced = [item.model_copy(deep=True) for item in overlay.professional_experience] if overlay else []
    else:
        raise ValueError(f"Unknown resume section: {section}")

    if prefer_overlay and enhanced:
        return enhanced
    return original


def overlay_covers(overlay: EnhancedOverlay | None, section: SectionName) -> bool:
    """True when ``resolve_section`` would serve this section from the overlay."""
    if overlay is None:
        return False
    if section == "summary":
        return bool(overlay.career_summary)
    if section == "skills":
        return bool(overlay.enhanced_skills)
    if section == "projects":
        return bool(overlay.optimized_projects)
    if section == "experience":
        return bool(overlay.professional_experience)
    raise ValueError(f"Unknown resume section: {section}")
