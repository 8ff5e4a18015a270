"""
Timeline data types.

Word pairs and timing settings go in; a Timeline of TextCue/VoiceCue
elements comes out. Every type is frozen so a built timeline can be handed
to the assembler without copying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Tuple, Union

from app.config import (
    WORD_DURATION_SECONDS,
    ITEMS_PER_PAIR,
    ITEMS_PER_PAIR_WITH_REPEAT,
    MIN_PAUSE_SECONDS,
    MAX_PAUSE_SECONDS,
    VOICE_MODEL,
)
from app.config.constants import (
    CUE_FONT_SIZE,
    SOURCE_TEXT_COLOR,
    TARGET_TEXT_COLOR,
    TEXT_ALIGN,
)
from app.core.exceptions import ValidationError
from app.core.voice_catalog import resolve_voice


class ElementType(str, Enum):
    """Element kinds accepted by the rendering service"""
    TEXT = "text"
    VOICE = "voice"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"


@dataclass(frozen=True)
class WordPair:
    """A source word and its translation; list order is timeline order"""
    source_word: str
    target_word: str


@dataclass(frozen=True)
class TimingConfig:
    """Caller-visible timing knobs plus the fixed per-word slot"""
    pause_between_words: float = 1.0
    use_secondary_repeat: bool = False
    word_duration_seconds: float = WORD_DURATION_SECONDS

    @property
    def item_duration(self) -> float:
        return self.word_duration_seconds + self.pause_between_words

    @property
    def items_per_pair(self) -> int:
        return ITEMS_PER_PAIR_WITH_REPEAT if self.use_secondary_repeat else ITEMS_PER_PAIR

    @property
    def pair_duration(self) -> float:
        return self.items_per_pair * self.item_duration

    def validate(self) -> None:
        pause = self.pause_between_words
        if pause is None or not (MIN_PAUSE_SECONDS <= pause <= MAX_PAUSE_SECONDS):
            raise ValidationError(
                f"Pause between words must be between {MIN_PAUSE_SECONDS:g} "
                f"and {MAX_PAUSE_SECONDS:g} seconds",
                field="pause_between_words",
            )
        if self.word_duration_seconds <= 0:
            raise ValidationError(
                "Word duration must be positive",
                field="word_duration_seconds",
            )


@dataclass(frozen=True)
class VoiceAssignment:
    source_voice_id: str
    target_voice_id: str

    @classmethod
    def for_languages(cls, source_language: str, target_language: str) -> "VoiceAssignment":
        return cls(
            source_voice_id=resolve_voice(source_language),
            target_voice_id=resolve_voice(target_language),
        )


@dataclass(frozen=True)
class TextStyle:
    font_size: str = CUE_FONT_SIZE
    color: str = SOURCE_TEXT_COLOR
    text_align: str = TEXT_ALIGN

    def to_settings(self) -> Dict[str, str]:
        return {
            "font-size": self.font_size,
            "color": self.color,
            "text-align": self.text_align,
        }


SOURCE_TEXT_STYLE = TextStyle(color=SOURCE_TEXT_COLOR)
TARGET_TEXT_STYLE = TextStyle(color=TARGET_TEXT_COLOR)


@dataclass(frozen=True)
class TextCue:
    """On-screen word, visible for `duration` seconds from `start`"""
    content: str
    start: float
    duration: float
    style: TextStyle = field(default=SOURCE_TEXT_STYLE)

    element_type: ClassVar[ElementType] = ElementType.TEXT

    @property
    def end(self) -> float:
        return self.start + self.duration

    def to_element(self) -> Dict[str, object]:
        return {
            "type": self.element_type.value,
            "text": self.content,
            "start": self.start,
            "duration": self.duration,
            "settings": self.style.to_settings(),
        }


@dataclass(frozen=True)
class VoiceCue:
    """Spoken word starting at `start`.

    `duration` is the slot reserved for the utterance; the renderer sizes
    the actual clip, so it is not sent on the wire.
    """
    content: str
    start: float
    duration: float
    voice_id: str
    model: str = VOICE_MODEL

    element_type: ClassVar[ElementType] = ElementType.VOICE

    def to_element(self) -> Dict[str, object]:
        return {
            "type": self.element_type.value,
            "text": self.content,
            "voice": self.voice_id,
            "model": self.model,
            "start": self.start,
        }


TimedElement = Union[TextCue, VoiceCue]


@dataclass(frozen=True)
class Timeline:
    elements: Tuple[TimedElement, ...]
    total_duration: float
    pair_count: int

    @property
    def text_cues(self) -> Tuple[TextCue, ...]:
        return tuple(e for e in self.elements if isinstance(e, TextCue))

    @property
    def voice_cues(self) -> Tuple[VoiceCue, ...]:
        return tuple(e for e in self.elements if isinstance(e, VoiceCue))
