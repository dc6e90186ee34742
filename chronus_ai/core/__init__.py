"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Error hierarchy shared by the service and API layers
"""
from chronus_ai.core.config import get_settings, Settings, ProviderConfig, UNSET_API_KEY
from chronus_ai.core.logging_config import setup_logging, get_logger

__all__ = [
    "get_settings",
    "Settings",
    "ProviderConfig",
    "UNSET_API_KEY",
    "setup_logging",
    "get_logger",
]
