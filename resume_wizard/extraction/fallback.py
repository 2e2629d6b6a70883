"""Placeholder resume used when every extraction strategy failed.

The output is fabricated, not extracted. Callers must surface
``PLACEHOLDER_NOTICE`` next to anything built from it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace

from .fallback_templates import DEFAULT_TEMPLATE, TEMPLATES_BY_ROLE
from .models import ExtractionCandidate, ExtractionSource

logger = logging.getLogger(__name__)

PLACEHOLDER_NOTICE = (
    "No readable text could be extracted from this file. The resume below is a generated "
    "placeholder, not your data. Review and replace every section before using it."
)

SENIOR_SIZE_BYTES = 500_000
MID_LEVEL_SIZE_BYTES = 200_000


@dataclass(frozen=True)
class FallbackProfile:
    name: str
    role: str
    email: str
    phone: str
    location: str
    seniority: str
    years_exp: str

    @property
    def handle(self) -> str:
        return self.name.lower().replace(" ", "")


PROFILES: dict[str, FallbackProfile] = {
    "john_smith": FallbackProfile(
        "John Smith", "Senior Software Engineer", "john.smith@email.com", "(555) 123-4567",
        "San Francisco, CA", "Senior", "6+",
    ),
    "sarah_johnson": FallbackProfile(
        "Sarah Johnson", "Digital Marketing Manager", "sarah.johnson@email.com", "(555) 987-6543",
        "Los Angeles, CA", "Senior", "5+",
    ),
    "michael_brown": FallbackProfile(
        "Michael Brown", "Data Scientist", "michael.brown@email.com", "(555) 456-7890",
        "New York, NY", "Senior", "4+",
    ),
    "emily_davis": FallbackProfile(
        "Emily Davis", "UX/UI Designer", "emily.davis@email.com", "(555) 321-0987",
        "Austin, TX", "Mid-level", "4+",
    ),
    "alex_rodriguez": FallbackProfile(
        "Alex Rodriguez", "Product Manager", "alex.rodriguez@email.com", "(555) 789-0123",
        "Seattle, WA", "Senior", "5+",
    ),
    "david_wilson": FallbackProfile(
        "David Wilson", "Business Analyst", "david.wilson@email.com", "(555) 654-3210",
        "Chicago, IL", "Mid-level", "3+",
    ),
    "lisa_anderson": FallbackProfile(
        "Lisa Anderson", "Financial Analyst", "lisa.anderson@email.com", "(555) 111-2222",
        "Boston, MA", "Senior", "6+",
    ),
}
DEFAULT_PROFILE = FallbackProfile(
    "Alex Rodriguez", "Full Stack Developer", "alex.rodriguez@email.com", "(555) 789-0123",
    "Seattle, WA", "Mid-level", "4+",
)

NAME_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"john|smith", re.IGNORECASE), "john_smith"),
    (re.compile(r"sarah|johnson", re.IGNORECASE), "sarah_johnson"),
    (re.compile(r"michael|brown", re.IGNORECASE), "michael_brown"),
    (re.compile(r"emily|davis", re.IGNORECASE), "emily_davis"),
    (re.compile(r"alex|rodriguez", re.IGNORECASE), "alex_rodriguez"),
    (re.compile(r"david|wilson", re.IGNORECASE), "david_wilson"),
    (re.compile(r"lisa|anderson", re.IGNORECASE), "lisa_anderson"),
)

ROLE_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"software|engineer|developer|programmer|coding|tech", re.IGNORECASE), "Senior Software Engineer"),
    (re.compile(r"marketing|digital|social|brand|growth", re.IGNORECASE), "Digital Marketing Manager"),
    (re.compile(r"data|scientist|analytics|machine|learning|ai", re.IGNORECASE), "Data Scientist"),
    (re.compile(r"design|ux|ui|creative|graphic|visual", re.IGNORECASE), "UX/UI Designer"),
    (re.compile(r"product|manager|pm|strategy|roadmap", re.IGNORECASE), "Product Manager"),
    (re.compile(r"business|analyst|consultant|operations", re.IGNORECASE), "Business Analyst"),
    (re.compile(r"sales|account|customer|relationship", re.IGNORECASE), "Sales Manager"),
    (re.compile(r"finance|accounting|financial|budget", re.IGNORECASE), "Financial Analyst"),
)


def select_profile(filename: str, size: int) -> FallbackProfile:
    name = (filename or "").lower()

    profile: FallbackProfile | None = None
    for pattern, key in NAME_PATTERNS:
        if pattern.search(name):
            profile = PROFILES[key]
            break

    if profile is None:
        profile = DEFAULT_PROFILE

    # The default persona shares Alex Rodriguez's identity, so a role hint in
    # the filename overrides its role either way.
    if profile.name == DEFAULT_PROFILE.name:
        for pattern, role in ROLE_PATTERNS:
            if pattern.search(name):
                profile = replace(profile, role=role)
                break

    # Larger files tend to come from longer careers.
    if size > SENIOR_SIZE_BYTES:
        profile = replace(profile, seniority="Senior", years_exp="7+")
    elif size > MID_LEVEL_SIZE_BYTES:
        profile = replace(profile, seniority="Mid-level", years_exp="4-6")
    return profile


def render_profile(profile: FallbackProfile) -> str:
    template = TEMPLATES_BY_ROLE.get(profile.role, DEFAULT_TEMPLATE)
    return template.format(
        name=profile.name,
        role=profile.role,
        email=profile.email,
        phone=profile.phone,
        location=profile.location,
        handle=profile.handle,
        years_exp=profile.years_exp,
    ).strip()


def synthesize_fallback(filename: str, size: int) -> ExtractionCandidate:
    profile = select_profile(filename, size)
    logger.warning(
        "extraction_fallback_synthesized file=%s profile=%s role=%s",
        filename,
        profile.name,
        profile.role,
    )
    return ExtractionCandidate(source=ExtractionSource.SYNTHETIC_FALLBACK, text=render_profile(profile))
