"""
Custom exceptions for the AI provider layer.

Only failures detected by this package live here. Errors raised by the
vendor clients (openai, google-genai) propagate to the caller untouched.

Exception Hierarchy:
    AIProviderException (base, 500)
    ├── ConfigurationError (500)
    │   └── MissingCredentialError (500)
    ├── UnknownProviderError (400)
    └── CapabilityNotSupportedError (501)

Usage:
    from ai_providers.exceptions import MissingCredentialError

    raise MissingCredentialError("OPENAI_API_KEY", provider="openai")
"""
from __future__ import annotations

from typing import Any, Iterable


class AIProviderException(Exception):
    """
    Base exception for all provider-layer errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code a calling web server may respond with
        details: Additional error details (optional)
        error_code: Machine-readable error code
    """

    default_message: str = "AI provider error"
    default_status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        details: str | None = None,
        error_code: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.status_code = status_code or self.default_status_code
        self.details = details
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details
        """
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, status_code={self.status_code})"


# =============================================================================
# Configuration Errors (500)
# =============================================================================

class ConfigurationError(AIProviderException):
    """Raised when provider configuration is invalid or missing."""

    default_message = "Configuration error"
    default_status_code = 500


class MissingCredentialError(ConfigurationError):
    """
    Raised at adapter construction when its API key is absent or empty.

    Always raised before the vendor client is created, so no request
    has reached the network.
    """

    default_message = "Missing credential"

    def __init__(self, env_var: str, provider: str | None = None) -> None:
        self.env_var = env_var
        self.provider = provider
        label = f"{provider} provider" if provider else "provider"
        super().__init__(
            f"{env_var} is required for the {label}",
            details=f"Set the {env_var} environment variable or pass api_key=",
        )


# =============================================================================
# Client Errors (4xx)
# =============================================================================

class UnknownProviderError(AIProviderException):
    """Raised by the factory for a provider name outside the supported set."""

    default_message = "Unknown AI provider"
    default_status_code = 400

    def __init__(self, provider: Any, supported: Iterable[str] = ()) -> None:
        self.provider = provider
        self.supported = tuple(supported)
        details = None
        if self.supported:
            details = "Supported providers: " + ", ".join(self.supported)
        super().__init__(f"Unknown AI provider: {provider!r}", details=details)


class CapabilityNotSupportedError(AIProviderException):
    """
    Raised when a provider is asked for a capability it does not offer.

    Examples:
        - Embeddings requested from the text-only Grok provider
    """

    default_message = "Capability not supported"
    default_status_code = 501

    def __init__(
        self,
        capability: str,
        provider: str,
        alternatives: Iterable[str] = (),
    ) -> None:
        self.capability = capability
        self.provider = provider
        self.alternatives = tuple(alternatives)
        message = f"{provider} does not support {capability}."
        if self.alternatives:
            message += f" Use {' or '.join(self.alternatives)} instead."
        super().__init__(message)
