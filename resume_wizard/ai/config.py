from __future__ import annotations

import os
from dataclasses import dataclass

from resume_wizard.ai.errors import ConfigurationError

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

_DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "gemini": "gemini-2.0-flash",
}
_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
}


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str
    base_url: str | None
    timeout_s: float
    max_retries: int


def looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    if not lower:
        return True
    if lower.startswith(("your_", "your-", "replace_", "replace-", "<")):
        return True
    if set(lower) <= {"x", "*", "-", "."}:
        return True
    return lower in {"changeme", "todo", "none", "null", "placeholder", "api_key", "sk-..."}


def _validate_key(provider: str, key: str) -> None:
    env_name = _KEY_ENV[provider]
    if not key:
        raise ConfigurationError(f"{env_name} is missing.")
    if looks_like_placeholder(key):
        raise ConfigurationError(f"{env_name} is still set to a placeholder value.")
    if provider == "gemini" and (not key.startswith("AIza") or len(key) <= 20):
        raise ConfigurationError(
            f"{env_name} has an invalid format. Gemini API keys start with 'AIza' "
            "and are longer than 20 characters."
        )


def load_ai_config() -> AIConfig:
    """Read and validate the AI credential before any network call is attempted."""
    provider = (os.getenv("AI_PROVIDER") or "openai").strip().lower()
    if provider not in _KEY_ENV:
        raise ConfigurationError(f"Unsupported AI_PROVIDER='{provider}'.")

    key = (os.getenv(_KEY_ENV[provider]) or "").strip()
    _validate_key(provider, key)

    model = (os.getenv("AI_MODEL") or _DEFAULT_MODELS[provider]).strip()
    base_url = (os.getenv("OPENAI_BASE_URL") or "").strip() or None
    if provider == "gemini" and base_url is None:
        base_url = GEMINI_OPENAI_BASE_URL

    try:
        timeout_s = float(os.getenv("AI_TIMEOUT_S", "45"))
        max_retries = int(os.getenv("OPENAI_MAX_RETRIES", "0"))
    except ValueError as exc:
        raise ConfigurationError(f"Invalid AI timeout/retry setting: {exc}") from exc

    return AIConfig(
        provider=provider,
        model=model,
        api_key=key,
        base_url=base_url,
        timeout_s=timeout_s,
        max_retries=max_retries,
    )
