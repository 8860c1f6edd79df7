"""
AI Provider - Factory module for the supported vendors.

Maps a closed set of provider names to their implementation:

    providers/
    ├── __init__.py        # This file - factory and default provider
    ├── interface.py       # Abstract interface all providers implement
    ├── gemini_impl.py     # Gemini: text + embeddings
    ├── openai_impl.py     # OpenAI: text + batch embeddings
    └── grok_impl.py       # Grok: text only

Every call builds a fresh provider, so credentials are validated on each
construction. Nothing is cached here.
"""
from __future__ import annotations

from typing import Dict, Optional, Type, Union

from ..config import ProviderSettings, get_logger
from ..exceptions import UnknownProviderError
from ..models import MODEL_CATALOG, Capability, ProviderName
from .gemini_impl import GeminiProvider
from .grok_impl import GrokProvider
from .interface import (
    AIProviderInterface,
    ChatMessage,
    GenerateOptions,
    MessageRole,
    build_messages,
)
from .openai_impl import OpenAIProvider

logger = get_logger("providers")

# The one documented default. Never derived from which keys are configured.
DEFAULT_PROVIDER = ProviderName.GEMINI

_PROVIDERS: Dict[ProviderName, Type[AIProviderInterface]] = {
    ProviderName.GEMINI: GeminiProvider,
    ProviderName.OPENAI: OpenAIProvider,
    ProviderName.GROK: GrokProvider,
}


def _resolve_name(name: Union[ProviderName, str]) -> ProviderName:
    if isinstance(name, ProviderName):
        return name
    if isinstance(name, str):
        try:
            return ProviderName(name.strip().lower())
        except ValueError:
            pass
    raise UnknownProviderError(name, supported=[p.value for p in ProviderName])


def create_provider(
    name: Union[ProviderName, str],
    model_override: Optional[str] = None,
    *,
    api_key: Optional[str] = None,
) -> AIProviderInterface:
    """
    Create a provider instance by name.

    Args:
        name: "gemini", "openai" or "grok" (case-insensitive) or a ProviderName
        model_override: Accepted but not applied yet; the model always
            comes from MODEL_CATALOG.
        api_key: Explicit key, takes precedence over the environment

    Returns:
        A freshly constructed provider

    Raises:
        UnknownProviderError: If name is not a supported provider
        MissingCredentialError: If the provider's API key is not set
    """
    provider_name = _resolve_name(name)
    if model_override:
        logger.warning(
            "model_override=%r is not applied; %s uses %s",
            model_override,
            provider_name.value,
            MODEL_CATALOG[provider_name][Capability.TEXT],
        )
    return _PROVIDERS[provider_name](api_key=api_key)


def get_default_provider() -> AIProviderInterface:
    """Get the default provider (Gemini)."""
    return create_provider(DEFAULT_PROVIDER)


def list_providers(settings: Optional[ProviderSettings] = None) -> Dict[str, dict]:
    """
    Describe every supported provider without constructing any.

    Returns:
        Dict mapping provider name to {"available": bool, "embeddings": bool,
        "default": bool}; "available" means its API key is configured.
    """
    settings = settings if settings is not None else ProviderSettings()
    return {
        name.value: {
            "available": settings.credential(provider_class.env_var) is not None,
            "embeddings": provider_class.supports_embeddings,
            "default": name is DEFAULT_PROVIDER,
        }
        for name, provider_class in _PROVIDERS.items()
    }


__all__ = [
    "AIProviderInterface",
    "ChatMessage",
    "GenerateOptions",
    "MessageRole",
    "build_messages",
    "GeminiProvider",
    "OpenAIProvider",
    "GrokProvider",
    "DEFAULT_PROVIDER",
    "create_provider",
    "get_default_provider",
    "list_providers",
]
