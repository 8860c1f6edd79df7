"""
Gemini provider implementation.

Uses Google's genai library (async client) for text generation and
embeddings. The system prompt travels as GenerateContentConfig's
system_instruction, never inside the user contents.
"""
from __future__ import annotations

from typing import List, Optional

from google import genai
from google.genai import types

from ..config import ProviderSettings, get_logger
from ..models import ProviderName
from .interface import AIProviderInterface, GenerateOptions, require_api_key

logger = get_logger("providers.gemini")


class GeminiProvider(AIProviderInterface):
    """
    Gemini provider: text generation and embeddings.

    Batch embeddings use the sequential default from AIProviderInterface,
    one embed_content call per text in input order.
    """

    provider = ProviderName.GEMINI
    env_var = "GOOGLE_API_KEY"

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[ProviderSettings] = None,
    ):
        key = require_api_key(self.provider, self.env_var, api_key, settings)
        self._client = genai.Client(api_key=key)
        logger.info(
            "Initialized Gemini provider (model: %s, embeddings: %s)",
            self.get_model_name(),
            self.get_embedding_model_name(),
        )

    @staticmethod
    def _build_config(
        system_prompt: Optional[str],
        options: Optional[GenerateOptions],
    ) -> types.GenerateContentConfig:
        """Translate the uniform request into Gemini's generation config."""
        config_kwargs = {}
        if system_prompt:
            config_kwargs["system_instruction"] = system_prompt
        if options is not None:
            if options.temperature is not None:
                config_kwargs["temperature"] = options.temperature
            if options.max_tokens is not None:
                config_kwargs["max_output_tokens"] = options.max_tokens
        return types.GenerateContentConfig(**config_kwargs)

    async def generate_text(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        options: Optional[GenerateOptions] = None,
    ) -> str:
        """Generate a completion with Gemini."""
        logger.debug("Gemini generate_content (model: %s)", self.get_model_name())
        response = await self._client.aio.models.generate_content(
            model=self.get_model_name(),
            contents=prompt,
            config=self._build_config(system_prompt, options),
        )
        return response.text or ""

    async def generate_embedding(self, text: str) -> List[float]:
        """Generate one embedding with Gemini's embedding model."""
        logger.debug("Gemini embed_content (model: %s)", self.get_embedding_model_name())
        response = await self._client.aio.models.embed_content(
            model=self.get_embedding_model_name(),
            contents=text,
        )
        return list(response.embeddings[0].values)
