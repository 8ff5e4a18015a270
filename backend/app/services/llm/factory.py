"""
LLM Provider Factory

Creates and manages LLM provider instances based on configuration.
"""

from typing import Dict, Optional

from app.config import LLM_PROVIDER, OPENAI_API_KEY, GEMINI_API_KEY

from .base import LLMProvider, ProviderType
from .gemini_provider import GeminiProvider
from .ollama_provider import OllamaProvider
from .openai_provider import OpenAIProvider


# Cache for provider instances
_provider_cache: Dict[ProviderType, LLMProvider] = {}


def get_default_provider_type() -> ProviderType:
    """Get the default provider type from configuration

    Checks LLM_PROVIDER first, then picks OpenAI or Gemini if their API key
    is set, otherwise falls back to a local Ollama server.
    """
    if LLM_PROVIDER:
        try:
            return ProviderType(LLM_PROVIDER)
        except ValueError:
            raise ValueError(
                f"Unknown LLM_PROVIDER '{LLM_PROVIDER}'. "
                f"Use one of: {', '.join(p.value for p in ProviderType)}"
            )

    if OPENAI_API_KEY:
        return ProviderType.OPENAI
    if GEMINI_API_KEY:
        return ProviderType.GEMINI

    return ProviderType.OLLAMA


def get_llm_provider(
    provider_type: Optional[ProviderType] = None,
    use_cache: bool = True,
    verify: bool = True,
    **kwargs
) -> LLMProvider:
    """Get an LLM provider instance

    Args:
        provider_type: Specific provider to use. If None, uses default.
        use_cache: Whether to cache and reuse provider instances
        verify: Raise if the provider reports itself unavailable
        **kwargs: Provider-specific initialization options

    Returns:
        LLMProvider instance

    Raises:
        ValueError: If verify is set and the provider is not available
    """
    if provider_type is None:
        provider_type = get_default_provider_type()

    if use_cache and provider_type in _provider_cache:
        return _provider_cache[provider_type]

    provider: LLMProvider
    hint: str

    if provider_type == ProviderType.OPENAI:
        provider = OpenAIProvider(
            api_key=kwargs.get("api_key"),
            base_url=kwargs.get("base_url"),
        )
        hint = "Set OPENAI_API_KEY or choose another LLM_PROVIDER"

    elif provider_type == ProviderType.GEMINI:
        provider = GeminiProvider(api_key=kwargs.get("api_key"))
        hint = "Set GEMINI_API_KEY or choose another LLM_PROVIDER"

    elif provider_type == ProviderType.OLLAMA:
        provider = OllamaProvider(base_url=kwargs.get("base_url"))
        hint = "Make sure Ollama is running (ollama serve) or set LLM_PROVIDER"

    else:
        raise ValueError(f"Unknown provider type: {provider_type}")

    if verify and not provider.is_available():
        raise ValueError(f"{provider.name} provider is not available. {hint}")

    if use_cache:
        _provider_cache[provider_type] = provider

    return provider


def clear_provider_cache():
    """Clear the provider cache"""
    _provider_cache.clear()
