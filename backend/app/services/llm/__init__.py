"""
LLM Service - Abstraction layer for Language Model providers

This module provides a unified interface for interacting with different LLM providers:
- OpenAI (chat completions)
- Gemini (Google's AI models)
- Ollama (local models like gemma3, llama, etc.)

Usage:
    from app.services.llm import get_llm_provider, LLMConfig

    llm = get_llm_provider()
    response = await llm.generate("Your prompt here", LLMConfig(model="gpt-4"))
    print(response.text)
"""

from .base import (
    LLMProvider,
    HTTPLLMProvider,
    LLMResponse,
    LLMConfig,
    ProviderType,
    UsageStats,
)
from .factory import get_llm_provider, get_default_provider_type, clear_provider_cache
from .gemini_provider import GeminiProvider
from .ollama_provider import OllamaProvider
from .openai_provider import OpenAIProvider

__all__ = [
    # Base classes
    "LLMProvider",
    "HTTPLLMProvider",
    "LLMResponse",
    "LLMConfig",
    "ProviderType",
    "UsageStats",
    # Providers
    "OpenAIProvider",
    "GeminiProvider",
    "OllamaProvider",
    # Factory
    "get_llm_provider",
    "get_default_provider_type",
    "clear_provider_cache",
]
