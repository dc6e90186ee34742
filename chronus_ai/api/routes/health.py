"""
Health Check Routes - Liveness and readiness probes.
"""
from datetime import datetime

from fastapi import APIRouter, Depends

from chronus_ai import __version__
from chronus_ai.core.logging_config import get_logger
from chronus_ai.models.chat import HealthResponse
from chronus_ai.services.chat_service import ChatService, get_chat_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """Report that the API process is up."""
    logger.debug("Health check requested")

    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.utcnow()
    )


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness check endpoint",
    description="""
    Returns whether the service is ready to accept requests, and which
    provider chat requests will go to (`openai`, `gemini`, or `fallback`
    when no provider is configured). No upstream call is made.
    """
)
async def readiness_check(
    chat_service: ChatService = Depends(get_chat_service),
) -> HealthResponse:
    logger.debug("Readiness check requested")

    return HealthResponse(
        status="ready",
        version=__version__,
        provider=chat_service.provider_name,
        timestamp=datetime.utcnow()
    )
