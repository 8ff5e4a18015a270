"""
Timeline builder

Lays word pairs out back to back. Each pair occupies `items_per_pair` slots
of `word_duration + pause` seconds:

    slot 0  source text + source voice
    slot 1  target text (kept on screen to the end of the pair) + target voice
    slot 2  second target voice, only with use_secondary_repeat

Offsets are plain float seconds; quantization is left to the renderer.
"""

import math
from typing import List, Sequence

from app.config import MIN_WORD_COUNT, MAX_WORD_COUNT
from app.core.exceptions import ValidationError
from app.core.logging import get_logger

from .models import (
    SOURCE_TEXT_STYLE,
    TARGET_TEXT_STYLE,
    TextCue,
    TimedElement,
    Timeline,
    TimingConfig,
    VoiceAssignment,
    VoiceCue,
    WordPair,
)

logger = get_logger(__name__, component="timeline_builder")


def build_timeline(
    word_pairs: Sequence[WordPair],
    timing: TimingConfig,
    voices: VoiceAssignment,
) -> Timeline:
    """
    Convert ordered word pairs into a time-stamped cue sequence.

    Args:
        word_pairs: Pairs in display order (must not be empty)
        timing: Pause/repeat settings; validated here as well as by callers
        voices: Voice ids for the source and target languages

    Returns:
        Timeline whose total_duration is len(word_pairs) * pair_duration

    Raises:
        ValidationError: If word_pairs is empty or timing is out of range
    """
    if not word_pairs:
        raise ValidationError("At least one word pair is required", field="word_pairs")
    timing.validate()

    item_duration = timing.item_duration
    pair_duration = timing.pair_duration
    target_text_duration = pair_duration - item_duration

    elements: List[TimedElement] = []
    for index, pair in enumerate(word_pairs):
        pair_start = index * pair_duration
        target_start = pair_start + item_duration

        elements.append(TextCue(
            content=pair.source_word,
            start=pair_start,
            duration=item_duration,
            style=SOURCE_TEXT_STYLE,
        ))
        elements.append(VoiceCue(
            content=pair.source_word,
            start=pair_start,
            duration=item_duration,
            voice_id=voices.source_voice_id,
        ))
        elements.append(TextCue(
            content=pair.target_word,
            start=target_start,
            duration=target_text_duration,
            style=TARGET_TEXT_STYLE,
        ))
        elements.append(VoiceCue(
            content=pair.target_word,
            start=target_start,
            duration=item_duration,
            voice_id=voices.target_voice_id,
        ))
        if timing.use_secondary_repeat:
            elements.append(VoiceCue(
                content=pair.target_word,
                start=pair_start + 2 * item_duration,
                duration=item_duration,
                voice_id=voices.target_voice_id,
            ))

    total_duration = len(word_pairs) * pair_duration

    logger.debug(
        "Built timeline",
        extra={
            "pair_count": len(word_pairs),
            "element_count": len(elements),
            "pair_duration": pair_duration,
            "total_duration": total_duration,
        },
    )

    return Timeline(
        elements=tuple(elements),
        total_duration=total_duration,
        pair_count=len(word_pairs),
    )


def derive_word_count(duration_minutes: float, timing: TimingConfig) -> int:
    """Number of pairs that fit in `duration_minutes`, clamped to the allowed range."""
    # clamp before flooring; very long durations overflow to inf
    slots = min(float(MAX_WORD_COUNT), duration_minutes * 60 / timing.pair_duration)
    return max(MIN_WORD_COUNT, math.floor(slots))


def count_pairs_for_duration(total_seconds: float, timing: TimingConfig) -> int:
    """Recover the pair count of a timeline from its total duration."""
    return int(round(total_seconds / timing.pair_duration))
