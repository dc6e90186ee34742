"""
API module - FastAPI routes and HTTP handling.
"""
from chronus_ai.api.main import app

__all__ = ["app"]
