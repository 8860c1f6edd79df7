"""
Uniform async interface over third-party text-generation and embedding
providers (Gemini, OpenAI, Grok).

Quick start:
    from ai_providers import create_provider, get_default_provider

    provider = create_provider("openai")
    text = await provider.generate_text("Summarise this", system_prompt="Be brief")
    vectors = await provider.generate_embeddings(["first", "second"])
"""
from .config import ProviderSettings, configure_logging, get_logger
from .exceptions import (
    AIProviderException,
    CapabilityNotSupportedError,
    ConfigurationError,
    MissingCredentialError,
    UnknownProviderError,
)
from .models import MODEL_CATALOG, Capability, ProviderName
from .providers import (
    DEFAULT_PROVIDER,
    AIProviderInterface,
    GeminiProvider,
    GenerateOptions,
    GrokProvider,
    OpenAIProvider,
    create_provider,
    get_default_provider,
    list_providers,
)

__all__ = [
    # Factory
    "create_provider",
    "get_default_provider",
    "list_providers",
    "DEFAULT_PROVIDER",
    # Providers
    "AIProviderInterface",
    "GeminiProvider",
    "OpenAIProvider",
    "GrokProvider",
    "GenerateOptions",
    # Registry
    "MODEL_CATALOG",
    "Capability",
    "ProviderName",
    # Errors
    "AIProviderException",
    "ConfigurationError",
    "MissingCredentialError",
    "UnknownProviderError",
    "CapabilityNotSupportedError",
    # Config
    "ProviderSettings",
    "configure_logging",
    "get_logger",
]
