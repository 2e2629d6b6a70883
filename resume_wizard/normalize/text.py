from __future__ import annotations

import re
import unicodedata

_DISALLOWED_CHARS = re.compile(r"[^\w\s@.,;:!?()\[\]{}'\"+\-=_/\\|<>&%$#*•–]")

# Applied in order; each replacement only emits characters none of the
# earlier patterns can match, so a second pass is a no-op.
_OCR_FIXES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\b0(?=[a-zA-Z])"), "O"),
    (re.compile(r"\bl(?=\d)"), "1"),
    (re.compile(r"\brn\b"), "m"),
    (re.compile(r"\bvv\b"), "w"),
    (re.compile(r"\bII\b"), "ll"),
)

_EMAIL_GAP = re.compile(r"(?<=\w)\s*@\s*(?=\w)")
_PHONE = re.compile(r"\b(\d{3})[ \t]*[-.]?[ \t]*(\d{3})[ \t]*[-.]?[ \t]*(\d{4})\b")

SECTION_HEADERS = (
    "EXPERIENCE",
    "EDUCATION",
    "SKILLS",
    "PROJECTS",
    "CONTACT",
    "SUMMARY",
    "CERTIFICATIONS",
    "LANGUAGES",
)
_SECTION_HEADER = re.compile(r"\b(" + "|".join(SECTION_HEADERS) + r")\b")

_HORIZONTAL_SPACE = re.compile(r"[^\S\n]+")
_BLANK_LINE_RUN = re.compile(r"\n{3,}")


def strip_disallowed_chars(text: str) -> str:
    return _DISALLOWED_CHARS.sub(" ", text)


def fix_ocr_confusions(text: str) -> str:
    for pattern, replacement in _OCR_FIXES:
        text = pattern.sub(replacement, text)
    return text


def fix_contact_patterns(text: str) -> str:
    text = _EMAIL_GAP.sub("@", text)
    return _PHONE.sub(r"\1-\2-\3", text)


def canonicalize_section_headers(text: str) -> str:
    return _SECTION_HEADER.sub(lambda match: match.group(1).capitalize(), text)


def collapse_whitespace(text: str) -> str:
    text = _HORIZONTAL_SPACE.sub(" ", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    text = _BLANK_LINE_RUN.sub("\n\n", text)
    return text.strip()


def normalize_text(text: str | None) -> str:
    """Clean extracted resume text. Deterministic and idempotent."""
    if not text:
        return ""
    value = unicodedata.normalize("NFC", text)
    value = value.replace("\r\n", "\n").replace("\r", "\n")
    value = strip_disallowed_chars(value)
    value = fix_ocr_confusions(value)
    value = fix_contact_patterns(value)
    value = canonicalize_section_headers(value)
    return collapse_whitespace(value)
