"""
Services module - Business logic and orchestration.

No HTTP concerns here (those belong in api/); the chat service only
orchestrates templates, provider adapters and the fallback.
"""
from chronus_ai.services.chat_service import ChatService, get_chat_service
from chronus_ai.services.fallback import generate_fallback

__all__ = [
    "ChatService",
    "get_chat_service",
    "generate_fallback",
]
