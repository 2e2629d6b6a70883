from __future__ import annotations

import re
from typing import Iterable

from .models import ExtractionCandidate, ExtractionSource

MIN_BASE_LENGTH = 100
MIN_TOKEN_LENGTH = 4
ADDITIONAL_INFO_MARKER = "Additional Information:"

_TOKEN_RE = re.compile(r"^[a-z0-9@._-]+$")


def unique_tokens(base_text: str, other_text: str) -> list[str]:
    """Tokens of ``other_text`` missing from ``base_text``, in order of appearance."""
    base_tokens = set(base_text.lower().split())
    return [
        token
        for token in other_text.lower().split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in base_tokens and _TOKEN_RE.match(token)
    ]


def merge_candidates(candidates: Iterable[ExtractionCandidate]) -> ExtractionCandidate:
    """Token-level union of several imperfect extractions on top of the longest one."""
    usable = [candidate for candidate in candidates if len(candidate.text) > MIN_BASE_LENGTH]
    if not usable:
        return ExtractionCandidate.empty(ExtractionSource.HYBRID)

    base = usable[0]
    for candidate in usable[1:]:
        if candidate.length > base.length:
            base = candidate

    merged = base.text
    for candidate in usable:
        if candidate is base:
            continue
        extra = unique_tokens(base.text, candidate.text)
        if extra:
            merged += f"\n\n{ADDITIONAL_INFO_MARKER}\n" + " ".join(extra)

    return ExtractionCandidate(
        source=ExtractionSource.HYBRID,
        text=merged,
        pages_read=max(candidate.pages_read for candidate in usable),
    )
