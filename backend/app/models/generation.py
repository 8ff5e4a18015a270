"""
API schemas for video generation

Caller-facing JSON uses camelCase; Python code uses the snake_case names.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.config import DEFAULT_BACKGROUND_COLOR, DEFAULT_RESOLUTION


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, accepting either spelling"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VideoGenerationRequest(CamelModel):
    """Request to generate a vocabulary video"""
    topic: str = ""
    word_count: int = 10
    duration_minutes: Optional[float] = None  # Overrides word_count when set
    source_language: str = "en"
    target_language: str = "ar"
    pause_between_words: float = 1.0
    use_secondary_repeat: bool = False
    resolution: str = DEFAULT_RESOLUTION
    background_color: str = DEFAULT_BACKGROUND_COLOR


class WordPairSchema(CamelModel):
    source_word: str
    target_word: str


class VideoGenerationResponse(CamelModel):
    """Result of a generation request; also the body of 400/500 answers"""
    success: bool
    project_id: Optional[str] = None
    message: str = ""
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    generated_words: List[WordPairSchema] = []
