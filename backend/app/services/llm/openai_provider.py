"""
OpenAI LLM Provider

Implementation of LLMProvider for the OpenAI chat completions API.
"""

from typing import Any, Dict, List, Optional

import httpx

from app.config import OPENAI_API_KEY, OPENAI_BASE_URL, WORD_MODEL_CONFIG
from app.core.exceptions import ParseError

from .base import (
    HTTPLLMProvider,
    LLMConfig,
    LLMResponse,
    ProviderType,
    UsageStats,
)


class OpenAIProvider(HTTPLLMProvider):
    """OpenAI chat completions over httpx"""

    provider_type = ProviderType.OPENAI
    default_model = WORD_MODEL_CONFIG.openai_model

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = WORD_MODEL_CONFIG.timeout_seconds,
        client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(
            base_url=base_url or OPENAI_BASE_URL,
            timeout=timeout,
            api_key=api_key or OPENAI_API_KEY,
            client=client,
        )

    def is_available(self) -> bool:
        return bool(self.api_key)

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    @staticmethod
    def _build_messages(prompt: str, system_instruction: Optional[str]) -> List[Dict[str, str]]:
        messages = []
        if system_instruction:
            messages.append({"role": "system", "content": system_instruction})
        messages.append({"role": "user", "content": prompt})
        return messages

    def _parse_response(self, data: Dict[str, Any], model: str) -> LLMResponse:
        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ParseError("OpenAI response has no message content", content=str(data)) from e
        if text is None:
            raise ParseError("OpenAI response has no message content", content=str(data))

        usage = None
        if data.get("usage"):
            usage = UsageStats(
                input_tokens=data["usage"].get("prompt_tokens", 0),
                output_tokens=data["usage"].get("completion_tokens", 0),
            )

        return LLMResponse(
            text=text.strip(),
            model=data.get("model", model),
            provider=self.provider_type,
            usage=usage,
            raw_response=data,
        )

    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        if config is None:
            config = LLMConfig(model=kwargs.get("model", self.default_model))

        model = kwargs.get("model", config.model)
        payload: Dict[str, Any] = {
            "model": model,
            "messages": self._build_messages(prompt, config.system_instruction),
            "temperature": config.temperature,
        }
        if config.max_tokens:
            payload["max_tokens"] = config.max_tokens
        payload.update(config.extra_options)

        data = await self._post_json("chat/completions", payload)
        return self._parse_response(data, model)
