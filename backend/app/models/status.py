"""
API schemas for render status and service metadata
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from .generation import CamelModel


class VideoStatusResponse(CamelModel):
    """Render status of a submitted project"""
    success: bool
    status: str = "unknown"  # pending, running, done, error or unknown
    video_url: Optional[str] = None
    subtitles_url: Optional[str] = None
    message: Optional[str] = None
    created_at: Optional[str] = None
    ended_at: Optional[str] = None
    duration: Optional[float] = None
    size: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    rendering_time: Optional[float] = None


class LanguageInfo(BaseModel):
    code: str
    name: str


class LanguagesResponse(BaseModel):
    languages: List[LanguageInfo]


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
