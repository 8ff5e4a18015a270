"""
Ollama LLM Provider

Implementation of LLMProvider for local models via Ollama.
Supports models like gemma3, deepseek, llama, mistral, etc.
"""

from typing import Any, Dict, Optional

import httpx

from app.config import OLLAMA_HOST, WORD_MODEL_CONFIG
from app.core.logging import get_logger

from .base import (
    HTTPLLMProvider,
    LLMConfig,
    LLMResponse,
    ProviderType,
    UsageStats,
)

logger = get_logger(__name__, component="ollama_provider")


class OllamaProvider(HTTPLLMProvider):
    """Ollama LLM Provider for local models

    Connects to a local or remote Ollama server through its /api/generate
    endpoint with streaming disabled.
    """

    provider_type = ProviderType.OLLAMA
    default_model = WORD_MODEL_CONFIG.ollama_model

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = WORD_MODEL_CONFIG.timeout_seconds,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize Ollama provider

        Args:
            base_url: Ollama server URL. Defaults to OLLAMA_HOST
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx client
        """
        super().__init__(base_url=base_url or OLLAMA_HOST, timeout=timeout, client=client)

    def is_available(self) -> bool:
        """Check if Ollama server is available"""
        try:
            with httpx.Client(timeout=5.0) as client:
                response = client.get(f"{self.base_url}/api/tags")
                return response.status_code == 200
        except httpx.HTTPError as e:
            logger.debug(f"Ollama server not reachable: {e}", extra={"base_url": self.base_url})
            return False

    def _build_options(self, config: LLMConfig) -> Optional[Dict[str, Any]]:
        """Build Ollama-specific options"""
        options = {}

        if config.temperature is not None:
            options["temperature"] = config.temperature

        if config.max_tokens:
            options["num_predict"] = config.max_tokens

        options.update(config.extra_options)

        return options if options else None

    def _parse_response(self, data: Dict[str, Any], model: str) -> LLMResponse:
        """Parse Ollama API response"""
        text = data.get("response", "")

        usage = None
        if "prompt_eval_count" in data or "eval_count" in data:
            usage = UsageStats(
                input_tokens=data.get("prompt_eval_count", 0),
                output_tokens=data.get("eval_count", 0),
            )

        return LLMResponse(
            text=text.strip(),
            model=model,
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
            "prompt": prompt,
            "stream": False,
        }

        options = self._build_options(config)
        if options:
            payload["options"] = options

        if config.system_instruction:
            payload["system"] = config.system_instruction

        data = await self._post_json("api/generate", payload)
        return self._parse_response(data, model)
