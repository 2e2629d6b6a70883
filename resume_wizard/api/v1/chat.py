from fastapi import APIRouter, Header, Request

from resume_wizard.ai.errors import ResumeAIError
from resume_wizard.api.v1.errors import ai_http_error, get_session_or_404
from resume_wizard.core.rate_limit import rate_limit
from resume_wizard.core.security import check_api_key
from resume_wizard.schemas.api import ChatRequest, ChatResponse
from resume_wizard.services.chat_service import chat_answer

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
@rate_limit()
async def chat(
    request: Request,
    payload: ChatRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    resume = None
    if payload.session_id:
        resume = get_session_or_404(request.app.state.session_store, payload.session_id).resume
    try:
        client = request.app.state.ai_client_factory()
        answer = await chat_answer(client, payload.message, resume)
    except ResumeAIError as exc:
        raise ai_http_error(exc) from exc
    return ChatResponse(answer=answer)
