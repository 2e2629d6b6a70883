from fastapi import APIRouter, Request

from resume_wizard import __version__
from resume_wizard.core.config import settings

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check(request: Request):
    return {
        "status": "healthy",
        "version": __version__,
        "ocr_enabled": settings.ocr_enabled,
        "sessions": len(request.app.state.session_store),
    }
