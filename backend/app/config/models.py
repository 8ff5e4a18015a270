"""
Model Configuration for word generation

=== PROVIDER CONFIGURATION ===

Set LLM_PROVIDER environment variable to switch providers:
    - "openai" : OpenAI chat completions (requires OPENAI_API_KEY)
    - "gemini" : Google Gemini API (requires GEMINI_API_KEY)
    - "ollama" : Local Ollama models

Without LLM_PROVIDER the provider is picked from whichever API key is set
(OpenAI first, then Gemini), falling back to a local Ollama server.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class WordModelConfig:
    """Sampling settings used for every word-pair request"""
    openai_model: str
    gemini_model: str
    ollama_model: str
    temperature: float = 0.7
    max_tokens: int = 500
    tokens_per_pair: int = 20
    timeout_seconds: float = 120.0

    def max_tokens_for(self, count: int) -> int:
        """Completion budget large enough for `count` pairs."""
        return max(self.max_tokens, count * self.tokens_per_pair)


WORD_MODEL_CONFIG = WordModelConfig(
    openai_model=os.getenv("OPENAI_MODEL", "gpt-4"),
    gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
    ollama_model=os.getenv("OLLAMA_MODEL", "gemma3:12b"),
    max_tokens=int(os.getenv("LLM_MAX_TOKENS", "500")),
    timeout_seconds=float(os.getenv("LLM_TIMEOUT_SECONDS", "120")),
)


__all__ = ["WordModelConfig", "WORD_MODEL_CONFIG"]
