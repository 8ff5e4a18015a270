"""
Composition assembly

Wraps a Timeline in the single-scene movie document the rendering service
expects. The payload shape mirrors the service's JSON schema, so keys use
its kebab-case spelling.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from app.config import DEFAULT_BACKGROUND_COLOR, DEFAULT_QUALITY, DEFAULT_RESOLUTION

from .models import TimedElement, Timeline


@dataclass(frozen=True)
class RenderSettings:
    resolution: str = DEFAULT_RESOLUTION
    quality: str = DEFAULT_QUALITY
    background_color: str = DEFAULT_BACKGROUND_COLOR
    cache: bool = False
    comment: str = ""


@dataclass(frozen=True)
class Scene:
    comment: str
    background_color: str
    duration: float
    elements: Tuple[TimedElement, ...]

    def to_payload(self) -> Dict[str, Any]:
        return {
            "comment": self.comment,
            "background-color": self.background_color,
            "duration": self.duration,
            "elements": [element.to_element() for element in self.elements],
        }


@dataclass(frozen=True)
class CompositionDocument:
    comment: str
    resolution: str
    quality: str
    cache: bool
    scenes: Tuple[Scene, ...]

    @property
    def duration(self) -> float:
        return sum(scene.duration for scene in self.scenes)

    def to_payload(self) -> Dict[str, Any]:
        """Render-service movie JSON"""
        return {
            "comment": self.comment,
            "resolution": self.resolution,
            "quality": self.quality,
            "cache": self.cache,
            "scenes": [scene.to_payload() for scene in self.scenes],
        }


def assemble(
    timeline: Timeline,
    settings: RenderSettings,
    scene_comment: Optional[str] = None,
) -> CompositionDocument:
    """Place the whole timeline in one scene lasting timeline.total_duration."""
    scene = Scene(
        comment=scene_comment if scene_comment is not None else settings.comment,
        background_color=settings.background_color,
        duration=timeline.total_duration,
        elements=timeline.elements,
    )
    return CompositionDocument(
        comment=settings.comment,
        resolution=settings.resolution,
        quality=settings.quality,
        cache=settings.cache,
        scenes=(scene,),
    )
