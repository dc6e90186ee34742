"""
Configuration management via environment variables.

This module loads configuration from a .env file using python-dotenv.
All configuration values are accessed through the Settings class.

The .env file is looked up in the working directory the server is started
from (or at CHRONUS_ENV_FILE), not next to the installed package.

The provider settings (AI_API_URL / AI_API_KEY) are optional: when either
is missing, or the key is the FAKE_KEY sentinel, the chat service answers
with its offline fallback instead of calling an upstream model.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv


def env_file_path() -> Path:
    """Location of the .env file: CHRONUS_ENV_FILE, else ./.env."""
    override = os.environ.get("CHRONUS_ENV_FILE")
    if override:
        return Path(override)
    return Path.cwd() / ".env"


def load_env_file(path: Optional[Union[str, Path]] = None) -> bool:
    """
    Load a .env file into os.environ without overriding variables
    that are already set.

    Returns:
        True if the file was found and loaded
    """
    path = Path(path) if path else env_file_path()
    if not path.is_file():
        return False
    return load_dotenv(path)


# This must happen before accessing os.environ
load_env_file()


# Key value that explicitly marks the provider as "not configured"
UNSET_API_KEY = "FAKE_KEY"

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class ProviderConfig:
    """
    Upstream chat-completion provider settings.

    Built once at startup and injected into the ChatService, so the
    service never reads process environment itself.

    Attributes:
        endpoint_url: Full chat-completion endpoint URL
        api_key: Provider API key (bearer token or query key)
        model: Model identifier sent to OpenAI-style endpoints
        temperature: Sampling temperature for OpenAI-style endpoints
        timeout_seconds: Upper bound for the outbound HTTP call
    """
    endpoint_url: Optional[str] = None
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def is_configured(self) -> bool:
        """True when a real provider call can be attempted."""
        if not self.endpoint_url or not self.api_key:
            return False
        return self.api_key != UNSET_API_KEY


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        ai_api_url: Provider endpoint URL (optional)
        ai_api_key: Provider API key (optional)
        ai_model: Model name for OpenAI-style providers
        ai_temperature: Sampling temperature
        ai_timeout_seconds: Outbound request timeout
        prompt_dir: Directory holding system-prompt*.txt templates
        log_dir: Directory for daily log files (defaults to ./logs)
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str

    # Provider settings
    ai_api_url: Optional[str]
    ai_api_key: Optional[str]
    ai_model: str
    ai_temperature: float
    ai_timeout_seconds: float

    # Prompt templates
    prompt_dir: Optional[str]

    # Logging
    log_dir: Optional[str]

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"

    def provider_config(self) -> ProviderConfig:
        """Build the immutable provider configuration for the chat service."""
        return ProviderConfig(
            endpoint_url=self.ai_api_url,
            api_key=self.ai_api_key,
            model=self.ai_model,
            temperature=self.ai_temperature,
            timeout_seconds=self.ai_timeout_seconds,
        )


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_optional_env(key: str) -> Optional[str]:
    """Get an environment variable, treating blank values as unset."""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return None
    return value.strip()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; lru_cache(maxsize=1) keeps a
    single instance for the life of the process.

    Returns:
        Settings instance with all configuration values
    """
    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "ChronusAI"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),

        # Provider
        ai_api_url=_get_optional_env("AI_API_URL"),
        ai_api_key=_get_optional_env("AI_API_KEY"),
        ai_model=_get_env("AI_MODEL", DEFAULT_MODEL),
        ai_temperature=float(_get_env("AI_TEMPERATURE", str(DEFAULT_TEMPERATURE))),
        ai_timeout_seconds=float(_get_env("AI_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))),

        # Prompts
        prompt_dir=_get_optional_env("PROMPT_DIR"),

        # Logging
        log_dir=_get_optional_env("LOG_DIR"),
    )
