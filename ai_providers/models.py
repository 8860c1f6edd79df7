"""
Model registry: which model each provider uses for each capability.

MODEL_CATALOG is built once at import and is read-only at both levels.
A provider without an entry for a capability does not offer it.

Usage:
    from ai_providers.models import MODEL_CATALOG, Capability, ProviderName

    MODEL_CATALOG[ProviderName.OPENAI][Capability.EMBEDDING]
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ProviderName(str, Enum):
    """Closed set of supported providers."""
    GEMINI = "gemini"
    OPENAI = "openai"
    GROK = "grok"


class Capability(str, Enum):
    """What a provider can be asked to do."""
    TEXT = "text"
    EMBEDDING = "embedding"


ModelCatalog = Mapping[ProviderName, Mapping[Capability, str]]

MODEL_CATALOG: ModelCatalog = MappingProxyType({
    ProviderName.GEMINI: MappingProxyType({
        Capability.TEXT: "gemini-2.5-pro",
        Capability.EMBEDDING: "text-embedding-004",
    }),
    ProviderName.OPENAI: MappingProxyType({
        Capability.TEXT: "gpt-4o",
        Capability.EMBEDDING: "text-embedding-3-large",
    }),
    ProviderName.GROK: MappingProxyType({
        Capability.TEXT: "grok-3",
    }),
})


def providers_supporting(capability: Capability) -> list[str]:
    """Names of the providers with a model registered for capability."""
    return [name.value for name, models in MODEL_CATALOG.items() if capability in models]
