from __future__ import annotations

import math
import re
from typing import Any

from resume_wizard.core.config.scoring import get_scoring_value
from resume_wizard.schemas.api import AtsCategory, AtsScoreResponse
from resume_wizard.schemas.resume import EnhancedOverlay, StructuredResume

CATEGORY_ORDER = ("keywords", "formatting", "sections", "contact", "experience")

_QUANTIFIED_RE = re.compile(r"\d+%|\$\d+|\d+\+")


def _points(name: str) -> int:
    return int(get_scoring_value(f"ats.points.{name}", 0))


def _threshold(name: str) -> int:
    return int(get_scoring_value(f"ats.thresholds.{name}", 0))


def category_scores(resume: StructuredResume, overlay: EnhancedOverlay | None = None) -> dict[str, int]:
    info = resume.personal_info

    contact_fields = (info.email, info.phone, info.location, info.linked_in)
    contact = _points("contact_field") * sum(1 for value in contact_fields if value.strip())

    section_flags = (
        bool(info.full_name.strip()),
        bool(resume.education),
        bool(resume.experience),
        bool(resume.skills.technical),
        bool(resume.projects),
    )
    sections = _points("section") * sum(1 for present in section_flags if present)

    total_skills = len(resume.skills.technical) + len(resume.skills.soft)
    keywords = min(100, total_skills * _points("per_skill"))

    experience = 0
    if resume.experience:
        experience += _points("experience_present")
        if any(_QUANTIFIED_RE.search(item.description) for item in resume.experience):
            experience += _points("experience_quantified")
        if overlay is not None and overlay.professional_experience:
            experience += _points("experience_enhanced")

    return {
        "keywords": min(100, keywords),
        "formatting": min(100, _points("formatting_base")),
        "sections": min(100, sections),
        "contact": min(100, contact),
        "experience": min(100, experience),
    }


def _band(overall: int) -> str:
    if overall >= int(get_scoring_value("ats.bands.excellent", 80)):
        return "excellent"
    if overall >= int(get_scoring_value("ats.bands.good", 60)):
        return "good"
    return "needs_improvement"


def score_resume(resume: StructuredResume, overlay: EnhancedOverlay | None = None) -> AtsScoreResponse:
    """Weighted ATS compatibility score with strengths and suggestions."""
    scores = category_scores(resume, overlay)
    weights: dict[str, Any] = get_scoring_value("ats.weights", {}) or {}

    weighted = sum(scores[name] * float(weights.get(name, 0.0)) for name in CATEGORY_ORDER)
    # Half-up rounding, matching how the score card has always displayed it.
    overall = max(0, min(100, int(math.floor(weighted + 0.5))))

    suggestions: list[str] = []
    if scores["keywords"] < _threshold("keywords_ok"):
        suggestions.append("Add more relevant technical skills and industry keywords")
    if scores["contact"] < _threshold("contact_ok"):
        suggestions.append("Complete your contact information including LinkedIn profile")
    if scores["experience"] < _threshold("experience_ok"):
        suggestions.append("Add quantified achievements with specific metrics and percentages")
    if not resume.projects:
        suggestions.append("Include relevant projects to showcase your practical experience")
    if overlay is None:
        suggestions.append("Use AI enhancement to optimize your content for ATS systems")

    strengths: list[str] = []
    if scores["contact"] >= _threshold("contact_ok"):
        strengths.append("Complete contact information")
    if scores["sections"] >= _threshold("sections_ok"):
        strengths.append("Well-structured resume sections")
    if scores["keywords"] >= _threshold("keywords_ok"):
        strengths.append("Good keyword density")
    if scores["experience"] >= _threshold("experience_ok"):
        strengths.append("Strong experience descriptions")

    return AtsScoreResponse(
        overall=overall,
        band=_band(overall),
        categories=[
            AtsCategory(id=name, score=scores[name], weight=float(weights.get(name, 0.0)))
            for name in CATEGORY_ORDER
        ],
        strengths=strengths,
        suggestions=suggestions,
    )
