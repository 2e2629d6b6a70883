from __future__ import annotations

import secrets

from fastapi import HTTPException, status

from resume_wizard.core.config import settings


def check_api_key(x_api_key: str | None) -> None:
    """Guard for every route when API_KEY is configured. Open otherwise."""
    if not settings.api_key:
        return
    if not x_api_key or not secrets.compare_digest(x_api_key, settings.api_key):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "code": "invalid_api_key",
                "message": "Please provide a valid API key to use the resume wizard.",
                "guidance": "Send the key in the X-API-Key header.",
            },
        )
