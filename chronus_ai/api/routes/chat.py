"""
Chat Routes - The assistant endpoint used by the planning UI.

POST /api/ai/chat always answers 200 with a ChatResult once the body
passes validation: provider failures are absorbed by the ChatService.
"""
from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from chronus_ai.core.exceptions import ValidationError
from chronus_ai.core.logging_config import get_logger
from chronus_ai.core.validators import normalize_mode, validate_message
from chronus_ai.models.chat import ChatRequest, ChatResult, ErrorResponse
from chronus_ai.services.chat_service import ChatService, get_chat_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/ai",
    tags=["Chat"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid message"},
    }
)


@router.post(
    "/chat",
    response_model=ChatResult,
    summary="Ask the planning assistant",
    description="""
    Send a free-text request plus a planning mode.

    **Modes** (case-insensitive, free-form):
    - `todo`: break the request into short actionable tasks
    - `study`: plan focused study sessions
    - `final`: build an exam revision plan

    The reply always contains `reply` and a (possibly empty) list of
    `suggestions`. If no AI provider is configured, or the provider call
    fails, a simulated reply is returned instead of an error.
    """
)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResult:
    is_valid, sanitized_message, error = validate_message(request.message)
    if not is_valid:
        raise ValidationError(error, field="message")

    mode = normalize_mode(request.mode)
    logger.info(f"Chat request: mode={mode}, message={sanitized_message[:50]!r}")

    # The provider call blocks; keep it off the event loop. If the client
    # disconnects the call still finishes and its result is dropped.
    return await run_in_threadpool(chat_service.chat, sanitized_message, mode)
