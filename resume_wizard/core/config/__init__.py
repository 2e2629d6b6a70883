from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    max_upload_bytes: int
    ocr_enabled: bool
    structural_timeout_s: float
    ocr_timeout_s: float
    ai_timeout_s: float
    structural_max_pages: int
    ocr_max_pages: int
    vision_max_pages: int
    session_ttl_minutes: int


settings = Settings(
    api_key=_get_env("API_KEY"),
    rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ],
    ),
    max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
    ocr_enabled=_get_env_bool("OCR_ENABLED", True),
    structural_timeout_s=_get_env_float("STRUCTURAL_TIMEOUT_S", 30.0),
    ocr_timeout_s=_get_env_float("OCR_TIMEOUT_S", 90.0),
    ai_timeout_s=_get_env_float("AI_TIMEOUT_S", 45.0),
    structural_max_pages=_get_env_int("STRUCTURAL_MAX_PAGES", 10),
    ocr_max_pages=_get_env_int("OCR_MAX_PAGES", 5),
    vision_max_pages=_get_env_int("VISION_MAX_PAGES", 3),
    session_ttl_minutes=_get_env_int("SESSION_TTL_MINUTES", 360),
)

if settings.max_upload_bytes <= 0:
    raise RuntimeError("MAX_UPLOAD_BYTES must be a positive integer.")

__all__ = ["Settings", "settings"]
