"""
Timeline building and composition assembly
"""

from .models import (
    ElementType,
    WordPair,
    TimingConfig,
    VoiceAssignment,
    TextStyle,
    TextCue,
    VoiceCue,
    TimedElement,
    Timeline,
)
from .builder import build_timeline, derive_word_count, count_pairs_for_duration
from .composition import RenderSettings, Scene, CompositionDocument, assemble

__all__ = [
    "ElementType",
    "WordPair",
    "TimingConfig",
    "VoiceAssignment",
    "TextStyle",
    "TextCue",
    "VoiceCue",
    "TimedElement",
    "Timeline",
    "build_timeline",
    "derive_word_count",
    "count_pairs_for_duration",
    "RenderSettings",
    "Scene",
    "CompositionDocument",
    "assemble",
]
