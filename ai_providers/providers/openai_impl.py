"""
OpenAI provider implementation.

Wraps the AsyncOpenAI client: chat completions for text, the embeddings
endpoint for vectors. Batch embeddings go out as a single request.

Environment:
    OPENAI_API_KEY - Required. Set via .env or shell.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI

from ..config import ProviderSettings, get_logger
from ..models import ProviderName
from .interface import (
    AIProviderInterface,
    GenerateOptions,
    build_messages,
    require_api_key,
)

logger = get_logger("providers.openai")


async def create_chat_completion(
    client: AsyncOpenAI,
    model: str,
    prompt: str,
    system_prompt: Optional[str] = None,
    options: Optional[GenerateOptions] = None,
) -> str:
    """
    Run one chat completion against an OpenAI-compatible endpoint.

    Shared by every provider that speaks the chat-completions protocol.
    Returns "" when the response carries no content.
    """
    request: Dict[str, Any] = {
        "model": model,
        "messages": [message.to_dict() for message in build_messages(prompt, system_prompt)],
    }
    if options is not None:
        if options.temperature is not None:
            request["temperature"] = options.temperature
        if options.max_tokens is not None:
            request["max_tokens"] = options.max_tokens

    completion = await client.chat.completions.create(**request)
    if not completion.choices:
        return ""
    return completion.choices[0].message.content or ""


class OpenAIProvider(AIProviderInterface):
    """OpenAI provider: chat completions and native batch embeddings."""

    provider = ProviderName.OPENAI
    env_var = "OPENAI_API_KEY"

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[ProviderSettings] = None,
    ):
        key = require_api_key(self.provider, self.env_var, api_key, settings)
        self._client = AsyncOpenAI(api_key=key)
        logger.info(
            "Initialized OpenAI provider (model: %s, embeddings: %s)",
            self.get_model_name(),
            self.get_embedding_model_name(),
        )

    async def generate_text(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        options: Optional[GenerateOptions] = None,
    ) -> str:
        """Generate a completion via OpenAI chat completions."""
        logger.debug("OpenAI chat completion (model: %s)", self.get_model_name())
        return await create_chat_completion(
            self._client,
            self.get_model_name(),
            prompt,
            system_prompt,
            options,
        )

    async def generate_embedding(self, text: str) -> List[float]:
        """Generate one embedding via the OpenAI embeddings API."""
        response = await self._client.embeddings.create(
            model=self.get_embedding_model_name(),
            input=text,
        )
        return response.data[0].embedding

    async def generate_embeddings(self, texts: List[str]) -> List[List[float]]:
        """
        Generate embeddings for all texts in one request.

        Items are realigned on their response index so the output order
        always matches the input order.
        """
        if not texts:
            return []

        logger.debug("OpenAI batch embedding of %d texts", len(texts))
        response = await self._client.embeddings.create(
            model=self.get_embedding_model_name(),
            input=list(texts),
        )
        items = sorted(response.data, key=lambda item: item.index)
        return [item.embedding for item in items]
