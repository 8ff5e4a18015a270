"""
Pydantic models for API request/response schemas
"""

from .generation import (
    CamelModel,
    VideoGenerationRequest,
    VideoGenerationResponse,
    WordPairSchema,
)
from .status import (
    VideoStatusResponse,
    LanguageInfo,
    LanguagesResponse,
    HealthResponse,
)

__all__ = [
    "CamelModel",
    "VideoGenerationRequest",
    "VideoGenerationResponse",
    "WordPairSchema",
    "VideoStatusResponse",
    "LanguageInfo",
    "LanguagesResponse",
    "HealthResponse",
]
