"""
API Routes module - Endpoint definitions.

- chat.py   : Planning assistant endpoint
- health.py : Health check endpoints
"""
from chronus_ai.api.routes.chat import router as chat_router
from chronus_ai.api.routes.health import router as health_router

__all__ = [
    "chat_router",
    "health_router",
]
