"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance:
1. Logging initialization
2. Middleware (CORS in development)
3. Exception handlers
4. Router registration

Run with: uvicorn chronus_ai.api.main:app --reload
"""
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chronus_ai import __version__
from chronus_ai.api.routes import chat_router, health_router
from chronus_ai.core.config import get_settings
from chronus_ai.core.exceptions import ChatbotException
from chronus_ai.core.logging_config import setup_logging, get_logger
from chronus_ai.services.chat_service import get_chat_service


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, settings.log_dir)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective configuration on startup and shutdown."""
    chat_service = get_chat_service()
    logger.info(f"Starting {settings.app_name} {__version__} in {settings.app_env} mode")
    logger.info(f"AI provider: {chat_service.provider_name}")
    if chat_service.provider_name == "fallback":
        logger.warning("AI_API_URL/AI_API_KEY not set; all chat replies will be simulated")
    logger.info(f"Prompt templates: {chat_service.template_resolver.template_dir}")

    yield

    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title="Chronus AI API",
    description="""
    Planning assistant backend for the Chronus calendar.

    Send a message and a mode (`todo`, `study`, `final`, ...) to
    `POST /api/ai/chat` and get back a reply plus suggested tasks.
    OpenAI-style and Gemini endpoints are supported; without a
    configured provider the API answers with a simulated reply.
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration
# ============================================================

if settings.is_development():
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.warning("CORS configured for development (all origins allowed)")


# ============================================================
# Exception Handlers
# ============================================================

@app.exception_handler(ChatbotException)
async def chatbot_exception_handler(request: Request, exc: ChatbotException):
    """Handle all custom assistant exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    Detailed error information is only included in development mode.
    """
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "details": str(exc) if settings.is_development() else None,
            "timestamp": datetime.utcnow().isoformat()
        }
    )


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(chat_router)


@app.get("/", include_in_schema=False)
async def root():
    """Service status banner."""
    return {
        "status": "running",
        "message": "Chronus AI Backend is active",
        "api_docs": "/api/ai/chat",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "chronus_ai.api.main:app",
        host="0.0.0.0",
        port=8081,
        reload=settings.is_development()
    )
