"""
Provider settings and logging helpers.

Settings are loaded with Pydantic BaseSettings from the process environment
(and an optional .env file). Each adapter builds its own ProviderSettings at
construction time, so credentials are read once per handle and validated on
every construction.

Usage:
    from ai_providers.config import ProviderSettings, configure_logging

    configure_logging("DEBUG")
    settings = ProviderSettings()
    print(settings.XAI_BASE_URL)
"""
from __future__ import annotations

import logging
import re
from typing import ClassVar, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER_NAMESPACE = "ai_providers"


class ProviderSettings(BaseSettings):
    """
    Credentials and endpoints for the supported AI providers.

    Configuration Sources:
        1. Environment variables
        2. .env file (if present)
        3. Default values (defined below)

    Missing keys are not a validation error here; the adapter that needs
    a key raises MissingCredentialError when it is constructed.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Gemini (https://aistudio.google.com/app/apikey)
    # =========================================================================

    GOOGLE_API_KEY: str | None = Field(
        default=None,
        description="Google AI Studio API key for Gemini text and embeddings",
    )

    # =========================================================================
    # OpenAI (https://platform.openai.com/api-keys)
    # =========================================================================

    OPENAI_API_KEY: str | None = Field(
        default=None,
        description="OpenAI API key for chat completions and embeddings",
    )

    # =========================================================================
    # xAI Grok (https://console.x.ai)
    # =========================================================================

    XAI_API_KEY: str | None = Field(
        default=None,
        description="xAI API key for Grok chat completions",
    )
    XAI_BASE_URL: str = Field(
        default="https://api.x.ai/v1",
        description="OpenAI-compatible endpoint serving the Grok models",
    )

    # =========================================================================
    # Logging
    # =========================================================================

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging verbosity level used by configure_logging()",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Ensure LOG_LEVEL is uppercase."""
        return v.upper() if isinstance(v, str) else v

    def credential(self, env_var: str) -> str | None:
        """Return the stripped credential stored under env_var, or None if blank."""
        value = getattr(self, env_var, None)
        if value is None:
            return None
        value = value.strip()
        return value or None


# =============================================================================
# Logging Configuration
# =============================================================================

class SanitizingFormatter(logging.Formatter):
    """
    Logging formatter that redacts sensitive information.

    Automatically redacts:
    - Bearer tokens
    - API keys
    - Tokens
    """

    SENSITIVE_PATTERNS: ClassVar[list[tuple[re.Pattern[str], str]]] = [
        (re.compile(r'(Bearer\s+)[^\s]+', re.I), r'\1[REDACTED]'),
        (re.compile(r'(api[_-]?key["\']?\s*[:=]\s*["\']?)[^"\'\s]+', re.I), r'\1[REDACTED]'),
        (re.compile(r'(token["\']?\s*[:=]\s*["\']?)[^"\'\s]+', re.I), r'\1[REDACTED]'),
        (re.compile(r'\b(sk-|xai-|AIza)[A-Za-z0-9_\-]{8,}'), r'\1[REDACTED]'),
    ]

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with sensitive data redaction."""
        message = super().format(record)
        for pattern, replacement in self.SENSITIVE_PATTERNS:
            message = pattern.sub(replacement, message)
        return message


def configure_logging(log_level: str | None = None) -> None:
    """
    Configure logging for the ai_providers namespace.

    Unlike an application entry point, this never touches the root logger:
    the host process decides whether and when to call it.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to LOG_LEVEL from ProviderSettings.
    """
    level_name = (log_level or ProviderSettings().LOG_LEVEL).upper()
    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    handler = logging.StreamHandler()
    handler.setFormatter(SanitizingFormatter(log_format))

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.handlers = [handler]
    package_logger.setLevel(getattr(logging, level_name, logging.INFO))
    package_logger.propagate = False

    # Suppress noisy vendor loggers
    for logger_name in ("httpx", "httpcore", "google", "google_genai", "openai"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the ai_providers namespace.

    Args:
        name: Logger name relative to the package (e.g. "providers.gemini")

    Returns:
        logging.Logger instance
    """
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
