"""Resume-likelihood gate applied to every extraction candidate.

The gate is a pure function: a fixed minimum length followed by a battery of
independent pattern checks. A candidate is accepted when at least
``MIN_INDICATORS`` of the patterns match, which tolerates partially garbled OCR
output while rejecting near-empty or off-domain text.
"""

from __future__ import annotations

import re

from .models import ExtractionCandidate, ExtractionDecision

MIN_TEXT_LENGTH = 150
MIN_INDICATORS = 3

RESUME_INDICATORS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(experience|work|employment|job|position|company|role)\b", re.IGNORECASE),
    re.compile(r"\b(education|degree|university|college|school|graduated)\b", re.IGNORECASE),
    re.compile(r"\b(skills|technologies|programming|software|technical)\b", re.IGNORECASE),
    re.compile(r"\b(email|phone|contact|address|linkedin|github)\b", re.IGNORECASE),
    re.compile(r"\b(resume|cv|curriculum|portfolio)\b", re.IGNORECASE),
    re.compile(r"\b(project|developed|created|built|designed)\b", re.IGNORECASE),
    re.compile(r"@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"),
    re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b"),
    re.compile(
        r"\b(january|february|march|april|may|june|july|august|september|october|november|december|\d{4})\b",
        re.IGNORECASE,
    ),
)


def count_indicators(text: str) -> int:
    return sum(1 for pattern in RESUME_INDICATORS if pattern.search(text))


def is_valid_resume_text(text: str | None) -> bool:
    return evaluate_text(text).accepted


def evaluate_text(text: str | None) -> ExtractionDecision:
    value = text or ""
    matched = count_indicators(value)
    if len(value.strip()) < MIN_TEXT_LENGTH:
        return ExtractionDecision(accepted=False, candidate=None, indicators_matched=matched)
    return ExtractionDecision(accepted=matched >= MIN_INDICATORS, candidate=None, indicators_matched=matched)


def evaluate(candidate: ExtractionCandidate) -> ExtractionDecision:
    decision = evaluate_text(candidate.text)
    return ExtractionDecision(
        accepted=decision.accepted,
        candidate=candidate if decision.accepted else None,
        indicators_matched=decision.indicators_matched,
    )
