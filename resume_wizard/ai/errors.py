"""Typed error categories for every call that reaches the AI provider.

Callers branch on the exception type (or its ``code``), never on the message.
"""

from __future__ import annotations


class ResumeAIError(RuntimeError):
    code = "ai_error"
    guidance = "Please try again."

    def __init__(self, message: str, *, code: str | None = None, guidance: str | None = None):
        super().__init__(message)
        if code:
            self.code = code
        if guidance:
            self.guidance = guidance

    def to_detail(self) -> dict[str, str]:
        return {"code": self.code, "message": str(self), "guidance": self.guidance}


class ConfigurationError(ResumeAIError):
    code = "ai_not_configured"
    guidance = "Check that a valid AI API key is configured on the server."


class AIAuthError(ResumeAIError):
    code = "ai_auth_failed"
    guidance = "The AI provider rejected the API key. Check the configured credential."


class AIQuotaError(ResumeAIError):
    code = "ai_quota_exceeded"
    guidance = "The AI service quota was exceeded. Try again later or enter your details manually."


class AIUnavailableError(ResumeAIError):
    code = "ai_unavailable"
    guidance = "The AI service did not respond. Try again in a moment."


class ValidationFailure(ResumeAIError):
    code = "ai_invalid_response"
    guidance = "Try again, or try a different file or create the resume from scratch."


_AUTH_MARKERS = ("api key", "api_key", "invalid key", "unauthorized", "permission denied")
_QUOTA_MARKERS = ("quota", "rate limit", "rate_limit", "resource exhausted", "too many requests")


def classify_provider_message(message: str) -> type[ResumeAIError]:
    """Last-resort classification for provider errors that carry no usable type."""
    lowered = (message or "").lower()
    if any(marker in lowered for marker in _QUOTA_MARKERS):
        return AIQuotaError
    if any(marker in lowered for marker in _AUTH_MARKERS):
        return AIAuthError
    return AIUnavailableError
