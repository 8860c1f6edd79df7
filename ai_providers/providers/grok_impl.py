"""
Grok provider implementation.

xAI serves Grok behind an OpenAI-compatible API, so this provider drives
AsyncOpenAI pointed at XAI_BASE_URL. Grok has no embedding models: every
embedding call fails before reaching the network.
"""
from __future__ import annotations

from typing import List, Optional

from openai import AsyncOpenAI

from ..config import ProviderSettings, get_logger
from ..exceptions import CapabilityNotSupportedError
from ..models import Capability, ProviderName, providers_supporting
from .interface import AIProviderInterface, GenerateOptions, require_api_key
from .openai_impl import create_chat_completion

logger = get_logger("providers.grok")


class GrokProvider(AIProviderInterface):
    """Grok provider: text generation only."""

    provider = ProviderName.GROK
    env_var = "XAI_API_KEY"
    supports_embeddings = False

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[ProviderSettings] = None,
    ):
        settings = settings if settings is not None else ProviderSettings()
        key = require_api_key(self.provider, self.env_var, api_key, settings)
        self.base_url = settings.XAI_BASE_URL
        self._client = AsyncOpenAI(api_key=key, base_url=self.base_url)
        logger.info(
            "Initialized Grok provider (model: %s, endpoint: %s)",
            self.get_model_name(),
            self.base_url,
        )

    def _embeddings_unsupported(self) -> CapabilityNotSupportedError:
        return CapabilityNotSupportedError(
            "embeddings",
            provider=self.get_provider_name(),
            alternatives=providers_supporting(Capability.EMBEDDING),
        )

    async def generate_text(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        options: Optional[GenerateOptions] = None,
    ) -> str:
        """Generate a completion via xAI chat completions."""
        logger.debug("Grok chat completion (model: %s)", self.get_model_name())
        return await create_chat_completion(
            self._client,
            self.get_model_name(),
            prompt,
            system_prompt,
            options,
        )

    async def generate_embedding(self, text: str) -> List[float]:
        raise self._embeddings_unsupported()

    async def generate_embeddings(self, texts: List[str]) -> List[List[float]]:
        raise self._embeddings_unsupported()
