"""
Abstract interface for AI providers.

Every provider implements the same capability contract so calling code
can swap vendors without touching vendor SDKs. A provider that cannot
fulfil an operation still implements it and raises
CapabilityNotSupportedError.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from ..config import ProviderSettings
from ..exceptions import MissingCredentialError
from ..models import MODEL_CATALOG, Capability, ProviderName
from ..utils import parse_json_response


JSON_ONLY_INSTRUCTION = "Respond with valid JSON only."


class MessageRole(str, Enum):
    """Roles a chat-completion message may carry."""
    SYSTEM = "system"
    USER = "user"


@dataclass(frozen=True)
class ChatMessage:
    """Represents a single message sent to a chat-completion endpoint."""
    role: MessageRole
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class GenerateOptions:
    """Optional sampling parameters. None means "vendor default"."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


def build_messages(prompt: str, system_prompt: Optional[str] = None) -> List[ChatMessage]:
    """
    Build the ordered message list for a chat-completion call.

    The system message, when present, always comes first.
    """
    messages: List[ChatMessage] = []
    if system_prompt:
        messages.append(ChatMessage(MessageRole.SYSTEM, system_prompt))
    messages.append(ChatMessage(MessageRole.USER, prompt))
    return messages


def require_api_key(
    provider: ProviderName,
    env_var: str,
    api_key: Optional[str],
    settings: Optional[ProviderSettings],
) -> str:
    """
    Resolve the credential for a provider or fail before any client exists.

    An explicit api_key wins; otherwise env_var is read from settings
    (a fresh ProviderSettings when none is given).

    Raises:
        MissingCredentialError: If neither source yields a non-blank key
    """
    if api_key and api_key.strip():
        return api_key.strip()

    settings = settings if settings is not None else ProviderSettings()
    key = settings.credential(env_var)
    if not key:
        raise MissingCredentialError(env_var, provider=provider.value)
    return key


class AIProviderInterface(ABC):
    """
    Abstract interface for text-generation and embedding providers.

    All implementations must provide:
    - Text generation with an optional system prompt
    - Single and batch embedding generation (or raise
      CapabilityNotSupportedError)
    - Provider and model information

    Vendor errors are never caught here; they reach the caller unchanged.
    """

    provider: ProviderName
    env_var: str
    supports_embeddings: bool = True

    @abstractmethod
    async def generate_text(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        options: Optional[GenerateOptions] = None,
    ) -> str:
        """
        Generate a single completion.

        Args:
            prompt: User prompt
            system_prompt: System-level instruction, sent separately from
                the prompt. Nothing is sent when omitted.
            options: Sampling parameters

        Returns:
            str: Completion text, "" when the vendor returned no content
        """
        pass

    @abstractmethod
    async def generate_embedding(self, text: str) -> List[float]:
        """
        Generate the embedding vector for one text.

        The vector length is whatever the vendor's embedding model returns.
        """
        pass

    async def generate_embeddings(self, texts: List[str]) -> List[List[float]]:
        """
        Generate embeddings for multiple texts.

        Default implementation awaits generate_embedding() once per text,
        in input order. Override for providers with a native batch endpoint.

        Returns:
            One vector per input text, in input order
        """
        embeddings: List[List[float]] = []
        for text in texts:
            embeddings.append(await self.generate_embedding(text))
        return embeddings

    async def generate_json(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        options: Optional[GenerateOptions] = None,
    ) -> Any:
        """
        Generate a completion and parse it as JSON.

        Raises:
            json.JSONDecodeError: If the reply is not valid JSON
        """
        if system_prompt:
            instruction = f"{system_prompt}\n\n{JSON_ONLY_INSTRUCTION}"
        else:
            instruction = JSON_ONLY_INSTRUCTION

        response = await self.generate_text(prompt, instruction, options)
        return parse_json_response(response)

    def get_provider_name(self) -> str:
        """Get the provider name (e.g., 'gemini', 'openai')."""
        return self.provider.value

    def get_model_name(self) -> str:
        """Get the text-generation model identifier."""
        return MODEL_CATALOG[self.provider][Capability.TEXT]

    def get_embedding_model_name(self) -> Optional[str]:
        """Get the embedding model identifier, None for text-only providers."""
        return MODEL_CATALOG[self.provider].get(Capability.EMBEDDING)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.get_model_name()!r})"


__all__ = [
    "AIProviderInterface",
    "ChatMessage",
    "GenerateOptions",
    "MessageRole",
    "build_messages",
    "require_api_key",
    "JSON_ONLY_INSTRUCTION",
]
