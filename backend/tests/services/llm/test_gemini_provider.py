"""
Tests for GeminiProvider

The SDK client is replaced by a stub exposing models.generate_content.
"""

from types import SimpleNamespace

import pytest
from google.genai import errors

from app.core.exceptions import CollaboratorError
from app.services.llm import GeminiProvider, LLMConfig, ProviderType


class StubModels:
    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _reply(text):
    return SimpleNamespace(
        text=text,
        usage_metadata=SimpleNamespace(prompt_token_count=20, candidates_token_count=8),
    )


def _provider(*outcomes):
    provider = GeminiProvider(api_key="g-test-key")
    models = StubModels(*outcomes)
    provider.client = SimpleNamespace(models=models)
    return provider, models


def test_unavailable_without_key(monkeypatch):
    monkeypatch.setattr("app.services.llm.gemini_provider.GEMINI_API_KEY", "")

    assert not GeminiProvider().is_available()


@pytest.mark.asyncio
async def test_generate():
    provider, models = _provider(_reply(' [{"source": "cat", "target": "gato"}] '))
    config = LLMConfig(model="gemini-2.5-flash", temperature=0.7, max_tokens=500, system_instruction="Be helpful")

    response = await provider.generate("List words", config)

    call = models.calls[0]
    assert call["model"] == "gemini-2.5-flash"
    assert call["contents"] == "List words"
    assert call["config"].temperature == 0.7
    assert call["config"].max_output_tokens == 500
    assert call["config"].system_instruction == "Be helpful"
    assert response.text == '[{"source": "cat", "target": "gato"}]'
    assert response.provider == ProviderType.GEMINI
    assert response.usage.total_tokens == 28


@pytest.mark.asyncio
async def test_server_error_retried():
    unavailable = errors.ServerError(503, {"error": {"code": 503, "message": "overloaded", "status": "UNAVAILABLE"}})
    provider, models = _provider(unavailable, _reply("[]"))

    response = await provider.generate("hi", LLMConfig(model="gemini-2.5-flash"))

    assert response.text == "[]"
    assert len(models.calls) == 2


@pytest.mark.asyncio
async def test_client_error_raised():
    denied = errors.ClientError(403, {"error": {"code": 403, "message": "denied", "status": "PERMISSION_DENIED"}})
    provider, models = _provider(denied)

    with pytest.raises(CollaboratorError) as exc_info:
        await provider.generate("hi", LLMConfig(model="gemini-2.5-flash"))

    assert exc_info.value.status_code == 403
    assert len(models.calls) == 1


@pytest.mark.asyncio
async def test_generate_without_client_fails():
    provider = GeminiProvider(api_key="g-test-key")
    provider.client = None

    with pytest.raises(CollaboratorError, match="not available"):
        await provider.generate("hi")
