"""
Application configuration and settings
"""

import os

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from .constants import (  # noqa: E402
    WORD_DURATION_SECONDS,
    MIN_WORD_COUNT,
    MAX_WORD_COUNT,
    MIN_PAUSE_SECONDS,
    MAX_PAUSE_SECONDS,
    ITEMS_PER_PAIR,
    ITEMS_PER_PAIR_WITH_REPEAT,
    DEFAULT_RESOLUTION,
    DEFAULT_QUALITY,
    DEFAULT_BACKGROUND_COLOR,
    VOICE_MODEL,
)
from .models import WordModelConfig, WORD_MODEL_CONFIG  # noqa: E402

# API settings
API_TITLE = "Language Video Generator API"
API_DESCRIPTION = "Generate vocabulary-learning videos rendered by Json2Video"
API_VERSION = "1.0.0"

# CORS origins ("*" allows any origin)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Json2Video rendering service
JSON2VIDEO_API_KEY = os.getenv("JSON2VIDEO_API_KEY", "")
JSON2VIDEO_BASE_URL = os.getenv("JSON2VIDEO_BASE_URL", "https://api.json2video.com/v2")
JSON2VIDEO_TIMEOUT_SECONDS = float(os.getenv("JSON2VIDEO_TIMEOUT_SECONDS", "1000"))

# LLM provider settings
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "").lower() or None  # "openai", "gemini" or "ollama"
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
OLLAMA_HOST = os.getenv("OLLAMA_HOST", "http://localhost:11434")

# Transport retry policy for both collaborators
HTTP_MAX_RETRIES = int(os.getenv("HTTP_MAX_RETRIES", "3"))
HTTP_RETRY_BASE_DELAY = float(os.getenv("HTTP_RETRY_BASE_DELAY", "1.0"))

# Request guard
MAX_REQUEST_BODY_BYTES = int(os.getenv("MAX_REQUEST_BODY_BYTES", str(64 * 1024)))

__all__ = [
    "WORD_DURATION_SECONDS",
    "MIN_WORD_COUNT",
    "MAX_WORD_COUNT",
    "MIN_PAUSE_SECONDS",
    "MAX_PAUSE_SECONDS",
    "ITEMS_PER_PAIR",
    "ITEMS_PER_PAIR_WITH_REPEAT",
    "DEFAULT_RESOLUTION",
    "DEFAULT_QUALITY",
    "DEFAULT_BACKGROUND_COLOR",
    "VOICE_MODEL",
    "WordModelConfig",
    "WORD_MODEL_CONFIG",
    "API_TITLE",
    "API_DESCRIPTION",
    "API_VERSION",
    "CORS_ORIGINS",
    "JSON2VIDEO_API_KEY",
    "JSON2VIDEO_BASE_URL",
    "JSON2VIDEO_TIMEOUT_SECONDS",
    "LLM_PROVIDER",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "GEMINI_API_KEY",
    "OLLAMA_HOST",
    "HTTP_MAX_RETRIES",
    "HTTP_RETRY_BASE_DELAY",
    "MAX_REQUEST_BODY_BYTES",
]
