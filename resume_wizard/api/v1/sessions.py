import logging

from fastapi import APIRouter, File, Header, HTTPException, Request, UploadFile, status

from resume_wizard.ai.errors import ResumeAIError
from resume_wizard.api.v1.errors import ai_http_error, get_session_or_404
from resume_wizard.core.config import settings
from resume_wizard.core.rate_limit import rate_limit
from resume_wizard.core.security import check_api_key
from resume_wizard.schemas.api import (
    AtsScoreResponse,
    ErrorDetail,
    ExtractionInfo,
    ImportResponse,
    ResumePrompt,
    SectionResponse,
    SessionCreatedResponse,
    SessionResponse,
    SuggestionsResponse,
)
from resume_wizard.schemas.resume import StructuredResume, overlay_covers, resolve_section
from resume_wizard.services.ats_score import score_resume
from resume_wizard.services.resume_import import ImportFailed
from resume_wizard.services.session import ExtractionRecord, ResumeSession
from resume_wizard.services.suggestions import suggest_improvements
from resume_wizard.services.upload_security import UploadRejected, validate_pdf_upload

logger = logging.getLogger(__name__)

router = APIRouter()

SECTIONS = ("summary", "skills", "projects", "experience")


def _extraction_info(record: ExtractionRecord | None) -> ExtractionInfo | None:
    if record is None:
        return None
    return ExtractionInfo(
        source=record.source.value,
        indicators_matched=record.indicators_matched,
        characters=record.characters,
        attempted=[source.value for source in record.attempted],
        synthetic=record.synthetic,
        notice=record.notice,
    )


def _session_response(session: ResumeSession) -> SessionResponse:
    return SessionResponse(
        session_id=session.session_id,
        resume=session.resume,
        overlay=session.overlay,
        extraction=_extraction_info(session.extraction),
        updated_at=session.updated_at,
    )


def _require_resume(session: ResumeSession) -> StructuredResume:
    if session.resume is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "code": "resume_missing",
                "message": "This session has no resume yet.",
                "guidance": "Upload a resume or generate one first.",
            },
        )
    return session.resume


def _import_failed_error(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "code": "import_failed",
            "message": message,
            "guidance": "Please try again, or try a different file.",
        },
    )


@router.post("/sessions", response_model=SessionCreatedResponse, status_code=status.HTTP_201_CREATED)
@rate_limit()
async def create_session(
    request: Request,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    session = request.app.state.session_store.create()
    return SessionCreatedResponse(session_id=session.session_id)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(
    request: Request,
    session_id: str,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    session = get_session_or_404(request.app.state.session_store, session_id)
    return _session_response(session)


@router.put("/sessions/{session_id}/resume", response_model=SessionResponse)
async def edit_resume(
    request: Request,
    session_id: str,
    payload: StructuredResume,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    session = get_session_or_404(request.app.state.session_store, session_id)
    session.edit_resume(payload)
    return _session_response(session)


@router.post("/sessions/{session_id}/upload", response_model=ImportResponse)
@rate_limit()
async def upload_resume(
    request: Request,
    session_id: str,
    file: UploadFile = File(...),
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    session = get_session_or_404(request.app.state.session_store, session_id)

    content = await file.read(settings.max_upload_bytes + 1)
    try:
        document = validate_pdf_upload(
            filename=file.filename,
            content_type=file.content_type,
            content=content,
            max_bytes=settings.max_upload_bytes,
        )
    except UploadRejected as exc:
        raise HTTPException(
            status_code=exc.status_code,
            detail={"code": "upload_rejected", "message": str(exc), "guidance": "Try a different file."},
        ) from exc

    try:
        result = await request.app.state.import_service.import_document(session, document)
    except ResumeAIError as exc:
        raise ai_http_error(exc) from exc
    except ImportFailed as exc:
        raise _import_failed_error("Failed to process your resume.") from exc

    enhancement_error = None
    if result.enhancement_error is not None:
        enhancement_error = ErrorDetail(**result.enhancement_error.to_detail())
    return ImportResponse(
        session_id=session.session_id,
        committed=result.committed,
        resume=result.resume,
        overlay=result.overlay,
        extraction=_extraction_info(result.extraction),
        enhancement_error=enhancement_error,
    )


@router.post("/sessions/{session_id}/enhance", response_model=SessionResponse)
@rate_limit()
async def enhance_session_resume(
    request: Request,
    session_id: str,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    session = get_session_or_404(request.app.state.session_store, session_id)
    _require_resume(session)
    try:
        await request.app.state.import_service.enhance(session)
    except ResumeAIError as exc:
        raise ai_http_error(exc) from exc
    return _session_response(session)


@router.post("/sessions/{session_id}/generate", response_model=SessionResponse)
@rate_limit()
async def generate_resume(
    request: Request,
    session_id: str,
    payload: ResumePrompt,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    session = get_session_or_404(request.app.state.session_store, session_id)
    try:
        await request.app.state.import_service.generate(session, payload)
    except ResumeAIError as exc:
        raise ai_http_error(exc) from exc
    except ImportFailed as exc:
        raise _import_failed_error("Failed to generate your resume.") from exc
    return _session_response(session)


@router.post("/sessions/{session_id}/suggestions", response_model=SuggestionsResponse)
@rate_limit()
async def improvement_suggestions(
    request: Request,
    session_id: str,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    session = get_session_or_404(request.app.state.session_store, session_id)
    resume = _require_resume(session)
    try:
        client = request.app.state.ai_client_factory()
        suggestions = await suggest_improvements(client, resume)
    except ResumeAIError as exc:
        raise ai_http_error(exc) from exc
    return SuggestionsResponse(suggestions=suggestions)


@router.get("/sessions/{session_id}/ats-score", response_model=AtsScoreResponse)
async def ats_score(
    request: Request,
    session_id: str,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    session = get_session_or_404(request.app.state.session_store, session_id)
    resume = _require_resume(session)
    return score_resume(resume, session.overlay)


@router.get("/sessions/{session_id}/sections/{section}", response_model=SectionResponse)
async def resume_section(
    request: Request,
    session_id: str,
    section: str,
    prefer_overlay: bool = True,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    if section not in SECTIONS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown section '{section}'.")
    session = get_session_or_404(request.app.state.session_store, session_id)
    resume = _require_resume(session)

    content = resolve_section(resume, session.overlay, section, prefer_overlay=prefer_overlay)
    source = "overlay" if prefer_overlay and overlay_covers(session.overlay, section) else "original"
    if isinstance(content, list):
        content = [item.model_dump(by_alias=True) if hasattr(item, "model_dump") else item for item in content]
    return SectionResponse(section=section, source=source, content=content)
