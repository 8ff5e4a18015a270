"""
Tests for the httpx-backed LLM providers

Requests are answered by httpx.MockTransport, so no network is used.
"""

import json

import httpx
import pytest

from app.core.exceptions import CollaboratorError, CollaboratorTimeoutError, ParseError
from app.services.llm import LLMConfig, OllamaProvider, OpenAIProvider, ProviderType


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _completion(content="[]", usage=True):
    body = {
        "model": "gpt-4-0613",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }
    if usage:
        body["usage"] = {"prompt_tokens": 42, "completion_tokens": 17, "total_tokens": 59}
    return body


class TestOpenAIProvider:
    @pytest.mark.asyncio
    async def test_request_shape(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=_completion('[{"source": "cat", "target": "chat"}]'))

        provider = OpenAIProvider(api_key="sk-abc", base_url="https://llm.test/v1/", client=_client(handler))
        config = LLMConfig(model="gpt-4", temperature=0.7, max_tokens=500, system_instruction="Be helpful")

        response = await provider.generate("List words", config)

        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://llm.test/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer sk-abc"
        assert json.loads(request.content) == {
            "model": "gpt-4",
            "messages": [
                {"role": "system", "content": "Be helpful"},
                {"role": "user", "content": "List words"},
            ],
            "temperature": 0.7,
            "max_tokens": 500,
        }
        assert response.text == '[{"source": "cat", "target": "chat"}]'
        assert response.provider == ProviderType.OPENAI
        assert response.model == "gpt-4-0613"

    @pytest.mark.asyncio
    async def test_usage_parsed(self):
        provider = OpenAIProvider(
            api_key="sk-abc",
            client=_client(lambda request: httpx.Response(200, json=_completion())),
        )

        response = await provider.generate("hi", LLMConfig(model="gpt-4"))

        assert response.usage.input_tokens == 42
        assert response.usage.output_tokens == 17
        assert response.usage.total_tokens == 59

    @pytest.mark.asyncio
    async def test_no_system_message_without_instruction(self):
        seen = []

        def handler(request):
            seen.append(json.loads(request.content))
            return httpx.Response(200, json=_completion(usage=False))

        provider = OpenAIProvider(api_key="sk-abc", client=_client(handler))

        response = await provider.generate("hi", LLMConfig(model="gpt-4"))

        assert seen[0]["messages"] == [{"role": "user", "content": "hi"}]
        assert "max_tokens" not in seen[0]
        assert response.usage is None

    @pytest.mark.asyncio
    async def test_retries_server_errors(self):
        statuses = iter([503, 502, 200])

        def handler(request):
            status = next(statuses)
            if status != 200:
                return httpx.Response(status, text="overloaded")
            return httpx.Response(200, json=_completion("ok"))

        provider = OpenAIProvider(api_key="sk-abc", client=_client(handler))

        response = await provider.generate("hi", LLMConfig(model="gpt-4"))

        assert response.text == "ok"

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(500, text="boom")

        provider = OpenAIProvider(api_key="sk-abc", client=_client(handler))

        with pytest.raises(CollaboratorError) as exc_info:
            await provider.generate("hi", LLMConfig(model="gpt-4"))

        assert exc_info.value.status_code == 500
        assert exc_info.value.body == "boom"
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_client_errors_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(401, json={"error": {"message": "bad key"}})

        provider = OpenAIProvider(api_key="sk-abc", client=_client(handler))

        with pytest.raises(CollaboratorError) as exc_info:
            await provider.generate("hi", LLMConfig(model="gpt-4"))

        assert exc_info.value.status_code == 401
        assert exc_info.value.service == "openai"
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        provider = OpenAIProvider(api_key="sk-abc", client=_client(handler))

        with pytest.raises(CollaboratorTimeoutError):
            await provider.generate("hi", LLMConfig(model="gpt-4"))

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        provider = OpenAIProvider(api_key="sk-abc", client=_client(handler))

        with pytest.raises(CollaboratorError, match="request failed"):
            await provider.generate("hi", LLMConfig(model="gpt-4"))

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        provider = OpenAIProvider(
            api_key="sk-abc",
            client=_client(lambda request: httpx.Response(200, text="<html>")),
        )

        with pytest.raises(ParseError):
            await provider.generate("hi", LLMConfig(model="gpt-4"))

    @pytest.mark.asyncio
    async def test_missing_content(self):
        provider = OpenAIProvider(
            api_key="sk-abc",
            client=_client(lambda request: httpx.Response(200, json={"choices": []})),
        )

        with pytest.raises(ParseError, match="no message content"):
            await provider.generate("hi", LLMConfig(model="gpt-4"))

    def test_availability_follows_api_key(self, monkeypatch):
        monkeypatch.setattr("app.services.llm.openai_provider.OPENAI_API_KEY", "")

        assert OpenAIProvider(api_key="sk-abc").is_available()
        assert not OpenAIProvider(api_key="").is_available()

    @pytest.mark.asyncio
    async def test_shared_client_left_open(self):
        client = _client(lambda request: httpx.Response(200, json=_completion()))
        provider = OpenAIProvider(api_key="sk-abc", client=client)

        await provider.aclose()

        assert not client.is_closed
        await client.aclose()


class TestOllamaProvider:
    @pytest.mark.asyncio
    async def test_request_shape(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={
                "model": "gemma3:12b",
                "response": ' [{"source": "cat", "target": "gato"}] ',
                "prompt_eval_count": 30,
                "eval_count": 12,
            })

        provider = OllamaProvider(base_url="http://ollama.test:11434", client=_client(handler))
        config = LLMConfig(model="gemma3:12b", temperature=0.7, max_tokens=500, system_instruction="Be helpful")

        response = await provider.generate("List words", config)

        assert str(seen[0].url) == "http://ollama.test:11434/api/generate"
        assert json.loads(seen[0].content) == {
            "model": "gemma3:12b",
            "prompt": "List words",
            "stream": False,
            "options": {"temperature": 0.7, "num_predict": 500},
            "system": "Be helpful",
        }
        assert response.text == '[{"source": "cat", "target": "gato"}]'
        assert response.provider == ProviderType.OLLAMA
        assert response.usage.total_tokens == 42
