"""
Gemini LLM Provider

Implementation of LLMProvider for Google's Gemini AI models.
"""

import asyncio
import time
from typing import Any, Dict, Optional

from google import genai
from google.genai import errors, types

from app.config import GEMINI_API_KEY, WORD_MODEL_CONFIG, HTTP_MAX_RETRIES, HTTP_RETRY_BASE_DELAY
from app.core.exceptions import CollaboratorError, CollaboratorTimeoutError
from app.core.http_logging import new_exchange_id
from app.core.logging import get_logger
from app.core.retry import with_retry

from .base import (
    LLMProvider,
    LLMResponse,
    LLMConfig,
    ProviderType,
    UsageStats,
)

logger = get_logger(__name__, component="gemini_provider")


class GeminiProvider(LLMProvider):
    """Google Gemini LLM Provider"""

    provider_type = ProviderType.GEMINI
    default_model = WORD_MODEL_CONFIG.gemini_model

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = WORD_MODEL_CONFIG.timeout_seconds,
    ):
        """Initialize Gemini provider

        Args:
            api_key: Gemini API key. If not provided, uses GEMINI_API_KEY
            timeout: Seconds to wait for a single generate call
        """
        self.api_key = api_key or GEMINI_API_KEY
        self.timeout = timeout
        self.client = genai.Client(api_key=self.api_key) if self.api_key else None

    def is_available(self) -> bool:
        """Check if Gemini is available"""
        return self.client is not None

    def _build_generation_config(self, config: LLMConfig) -> Optional[types.GenerateContentConfig]:
        """Build Gemini-specific generation config"""
        kwargs: Dict[str, Any] = {}

        if config.temperature is not None:
            kwargs["temperature"] = config.temperature

        if config.max_tokens:
            kwargs["max_output_tokens"] = config.max_tokens

        if config.system_instruction:
            kwargs["system_instruction"] = config.system_instruction

        kwargs.update(config.extra_options)

        if kwargs:
            return types.GenerateContentConfig(**kwargs)
        return None

    def _extract_usage(self, response: Any) -> Optional[UsageStats]:
        """Extract usage stats from Gemini response"""
        usage = getattr(response, "usage_metadata", None)
        if usage:
            return UsageStats(
                input_tokens=getattr(usage, "prompt_token_count", 0) or 0,
                output_tokens=getattr(usage, "candidates_token_count", 0) or 0,
            )
        return None

    @with_retry(max_attempts=HTTP_MAX_RETRIES, base_delay=HTTP_RETRY_BASE_DELAY)
    async def _generate_content(self, request_kwargs: Dict[str, Any]) -> Any:
        exchange_id = new_exchange_id()
        logger.info(
            f"[gemini] [{exchange_id}] ==> generate_content {request_kwargs['model']}",
            extra={"exchange_id": exchange_id, "prompt": request_kwargs["contents"]},
        )
        start = time.perf_counter()
        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(self.client.models.generate_content, **request_kwargs),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise CollaboratorTimeoutError(
                f"gemini request timed out after {self.timeout:g}s",
                service=self.name,
            ) from e
        except errors.APIError as e:
            raise CollaboratorError(
                f"gemini returned HTTP {e.code}: {e.message}",
                service=self.name,
                status_code=e.code,
                body=getattr(e, "details", None),
            ) from e

        logger.info(
            f"[gemini] [{exchange_id}] <== ({(time.perf_counter() - start) * 1000:.0f}ms)\n"
            f"Body:\n{response.text}",
            extra={"exchange_id": exchange_id},
        )
        return response

    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate response using Gemini API

        The SDK call is blocking, so it runs in a worker thread.
        """
        if not self.is_available():
            raise CollaboratorError("Gemini provider is not available. Check API key.", service=self.name)

        if config is None:
            config = LLMConfig(model=kwargs.get("model", self.default_model))

        model = kwargs.get("model", config.model)
        request_kwargs: Dict[str, Any] = {
            "model": model,
            "contents": prompt,
        }

        generation_config = self._build_generation_config(config)
        if generation_config:
            request_kwargs["config"] = generation_config

        response = await self._generate_content(request_kwargs)

        return LLMResponse(
            text=response.text.strip() if response.text else "",
            model=model,
            provider=self.provider_type,
            usage=self._extract_usage(response),
            raw_response=response,
        )
