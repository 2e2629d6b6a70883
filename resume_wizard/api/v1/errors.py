from fastapi import HTTPException, status

from resume_wizard.ai.errors import (
    AIAuthError,
    AIQuotaError,
    AIUnavailableError,
    ConfigurationError,
    ResumeAIError,
    ValidationFailure,
)
from resume_wizard.services.session import SessionNotFound, SessionStore, ResumeSession

AI_ERROR_STATUS: dict[type[ResumeAIError], int] = {
    ConfigurationError: status.HTTP_503_SERVICE_UNAVAILABLE,
    AIAuthError: status.HTTP_502_BAD_GATEWAY,
    AIQuotaError: status.HTTP_429_TOO_MANY_REQUESTS,
    AIUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
    ValidationFailure: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def ai_http_error(exc: ResumeAIError) -> HTTPException:
    for error_cls, status_code in AI_ERROR_STATUS.items():
        if isinstance(exc, error_cls):
            return HTTPException(status_code=status_code, detail=exc.to_detail())
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.to_detail())


def get_session_or_404(store: SessionStore, session_id: str) -> ResumeSession:
    try:
        return store.get(session_id)
    except SessionNotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"code": "session_not_found", "message": "Unknown session.", "guidance": "Start a new session."},
        ) from exc
