"""
Pytest configuration and shared fixtures.

Vendor client classes are patched where the providers import them, so no
test ever opens a network connection. Mocked vendors return deterministic
vectors derived from the input text.
"""
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ai_providers.config import ProviderSettings

CREDENTIAL_ENV_VARS = ("GOOGLE_API_KEY", "OPENAI_API_KEY", "XAI_API_KEY", "XAI_BASE_URL")


def fake_vector(text: str) -> list[float]:
    """Deterministic per-text embedding used by every mocked vendor."""
    return [float(len(text)), float(sum(map(ord, text)) % 997), 0.5]


def make_settings(**values) -> ProviderSettings:
    """Settings built only from the given values, ignoring any .env file."""
    return ProviderSettings(_env_file=None, **values)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test with no provider credentials in the environment."""
    for name in CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(Path(__file__).parent)
    yield monkeypatch


@pytest.fixture
def all_keys(monkeypatch):
    """Set a credential for every provider."""
    monkeypatch.setenv("GOOGLE_API_KEY", "google-test-key")
    monkeypatch.setenv("OPENAI_API_KEY", "openai-test-key")
    monkeypatch.setenv("XAI_API_KEY", "xai-test-key")


# ===================================================================
# Gemini (google-genai)
# ===================================================================

def _gemini_embed(*, model, contents):
    return SimpleNamespace(embeddings=[SimpleNamespace(values=fake_vector(contents))])


@pytest.fixture
def mock_genai_client():
    """Patch genai.Client; yields (client_class, client_instance)."""
    with patch("ai_providers.providers.gemini_impl.genai.Client") as client_class:
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock(
            return_value=SimpleNamespace(text="gemini says hi")
        )
        client.aio.models.embed_content = AsyncMock(side_effect=_gemini_embed)
        client_class.return_value = client
        yield client_class, client


# ===================================================================
# OpenAI-compatible (openai.AsyncOpenAI)
# ===================================================================

def chat_completion(content):
    """Build a chat.completions.create response carrying content."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(role="assistant", content=content))]
    )


def _openai_embed(*, model, input):
    if isinstance(input, str):
        return SimpleNamespace(data=[SimpleNamespace(index=0, embedding=fake_vector(input))])
    items = [SimpleNamespace(index=i, embedding=fake_vector(text)) for i, text in enumerate(input)]
    # The API does not promise item order; make the mock return them reversed.
    return SimpleNamespace(data=list(reversed(items)))


def _make_openai_client():
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=chat_completion("openai says hi"))
    client.embeddings.create = AsyncMock(side_effect=_openai_embed)
    return client


@pytest.fixture
def mock_openai_client():
    """Patch AsyncOpenAI for the OpenAI provider; yields (class, instance)."""
    with patch("ai_providers.providers.openai_impl.AsyncOpenAI") as client_class:
        client = _make_openai_client()
        client_class.return_value = client
        yield client_class, client


@pytest.fixture
def mock_grok_client():
    """Patch AsyncOpenAI for the Grok provider; yields (class, instance)."""
    with patch("ai_providers.providers.grok_impl.AsyncOpenAI") as client_class:
        client = _make_openai_client()
        client.chat.completions.create.return_value = chat_completion("grok says hi")
        client_class.return_value = client
        yield client_class, client


@pytest.fixture
def mock_all_clients(mock_genai_client, mock_openai_client, mock_grok_client):
    """Patch every vendor client at once."""
    return {
        "gemini": mock_genai_client,
        "openai": mock_openai_client,
        "grok": mock_grok_client,
    }
