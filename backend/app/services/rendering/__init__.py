"""
Rendering service client
"""

from .json2video_client import Json2VideoClient
from .models import (
    RenderState,
    RenderJobHandle,
    RenderStatus,
    MovieCreatedPayload,
    MovieStatusPayload,
    MovieDetailsPayload,
)

__all__ = [
    "Json2VideoClient",
    "RenderState",
    "RenderJobHandle",
    "RenderStatus",
    "MovieCreatedPayload",
    "MovieStatusPayload",
    "MovieDetailsPayload",
]
