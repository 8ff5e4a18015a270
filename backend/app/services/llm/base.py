"""
Base classes for LLM providers

Defines the abstract interface that all LLM providers must implement, plus
an httpx-backed base for providers that speak plain JSON over HTTP.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

import httpx

from app.config import HTTP_MAX_RETRIES, HTTP_RETRY_BASE_DELAY
from app.core.exceptions import CollaboratorError, CollaboratorTimeoutError, ParseError
from app.core.http_logging import log_incoming_response, log_outgoing_request, new_exchange_id
from app.core.retry import with_retry


class ProviderType(str, Enum):
    """Supported LLM providers"""
    OPENAI = "openai"
    GEMINI = "gemini"
    OLLAMA = "ollama"


@dataclass
class LLMConfig:
    """Configuration for an LLM request"""
    model: str
    temperature: float = 0.7
    max_tokens: Optional[int] = None
    system_instruction: Optional[str] = None

    # Provider-specific options
    extra_options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class UsageStats:
    """Token usage statistics"""
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        if self.total_tokens == 0:
            self.total_tokens = self.input_tokens + self.output_tokens


@dataclass
class LLMResponse:
    """Unified response from any LLM provider"""
    text: str
    model: str
    provider: ProviderType
    usage: Optional[UsageStats] = None
    raw_response: Any = None  # Original response object from the provider


class LLMProvider(ABC):
    """Abstract base class for LLM providers

    All LLM providers must implement this interface to ensure
    consistent behavior across different backends.
    """

    provider_type: ProviderType
    default_model: str = ""

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a response from the LLM

        Args:
            prompt: The prompt text
            config: LLM configuration options
            **kwargs: Additional provider-specific options

        Returns:
            LLMResponse with the generated text and metadata

        Raises:
            CollaboratorError: Transport failure or non-success status
            CollaboratorTimeoutError: The call exceeded its timeout
            ParseError: The provider answered with an unexpected shape
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is available and properly configured"""
        pass

    async def aclose(self) -> None:
        """Release network resources held by the provider"""
        return None

    @property
    def name(self) -> str:
        """Get the provider name"""
        return self.provider_type.value


class HTTPLLMProvider(LLMProvider):
    """Provider that talks JSON over HTTP through a shared httpx.AsyncClient"""

    def __init__(
        self,
        base_url: str,
        timeout: float,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.api_key = api_key
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    @with_retry(max_attempts=HTTP_MAX_RETRIES, base_delay=HTTP_RETRY_BASE_DELAY)
    async def _post_json(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST a JSON payload and return the decoded JSON answer."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        exchange_id = new_exchange_id()
        log_outgoing_request(self.name, exchange_id, "POST", url, api_key=self.api_key, body=payload)

        start = time.perf_counter()
        try:
            response = await self._client.post(url, json=payload, headers=self._headers())
        except httpx.TimeoutException as e:
            raise CollaboratorTimeoutError(
                f"{self.name} request timed out after {self.timeout:g}s",
                service=self.name,
            ) from e
        except httpx.HTTPError as e:
            raise CollaboratorError(f"{self.name} request failed: {e}", service=self.name) from e

        log_incoming_response(self.name, exchange_id, response, (time.perf_counter() - start) * 1000)

        if not response.is_success:
            raise CollaboratorError(
                f"{self.name} returned HTTP {response.status_code}",
                service=self.name,
                status_code=response.status_code,
                body=response.text,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"{self.name} returned a non-JSON body", content=response.text) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
