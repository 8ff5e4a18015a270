"""
Json2Video response models and the render results handed to use cases.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class RenderState(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    DONE = "done"
    ERROR = "error"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Optional[str]) -> "RenderState":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.UNKNOWN


def _timestamp_text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


class MovieCreatedPayload(BaseModel):
    """Answer to POST /movies"""
    model_config = ConfigDict(extra="ignore")

    success: bool = False
    project: Optional[str] = None
    timestamp: Optional[str] = None
    message: Optional[str] = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def stringify_timestamp(cls, value: Any) -> Optional[str]:
        return _timestamp_text(value)


class MovieDetailsPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool = False
    status: str = ""
    message: Optional[str] = None
    project: str = ""
    url: Optional[str] = None
    # false when no subtitles were produced, otherwise a URL
    ass: Optional[Union[bool, str]] = None
    created_at: Optional[str] = None
    ended_at: Optional[str] = None
    duration: Optional[float] = None
    size: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    rendering_time: Optional[float] = None

    @field_validator("created_at", "ended_at", mode="before")
    @classmethod
    def stringify_timestamps(cls, value: Any) -> Optional[str]:
        return _timestamp_text(value)

    @property
    def subtitles_url(self) -> Optional[str]:
        return self.ass if isinstance(self.ass, str) and self.ass else None


class MovieStatusPayload(BaseModel):
    """Answer to GET /movies?project=<id>"""
    model_config = ConfigDict(extra="ignore")

    success: bool = False
    movie: Optional[MovieDetailsPayload] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class RenderJobHandle:
    job_id: str
    submitted_at: str


@dataclass(frozen=True)
class RenderStatus:
    """Mapped status of a render job"""
    found: bool
    state: RenderState
    url: Optional[str] = None
    subtitles_url: Optional[str] = None
    message: Optional[str] = None
    created_at: Optional[str] = None
    ended_at: Optional[str] = None
    duration: Optional[float] = None
    size: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    rendering_time: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: MovieStatusPayload) -> "RenderStatus":
        movie = payload.movie
        if movie is None:
            return cls(
                found=payload.success,
                state=RenderState.UNKNOWN,
                message=payload.message,
            )
        return cls(
            found=payload.success,
            state=RenderState.parse(movie.status),
            url=movie.url,
            subtitles_url=movie.subtitles_url,
            message=movie.message or payload.message,
            created_at=movie.created_at,
            ended_at=movie.ended_at,
            duration=movie.duration,
            size=movie.size,
            width=movie.width,
            height=movie.height,
            rendering_time=movie.rendering_time,
        )
