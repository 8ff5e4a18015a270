"""
Constants configuration

Timing constants and request limits shared by validation, the timeline
builder and the duration-to-word-count derivation.
"""

# Every spoken word occupies a fixed one-second slot before its pause
WORD_DURATION_SECONDS = 1.0

MIN_WORD_COUNT = 1
MAX_WORD_COUNT = 100

MIN_PAUSE_SECONDS = 0.0
MAX_PAUSE_SECONDS = 10.0

# Items per pair: source + target, plus an optional second target
ITEMS_PER_PAIR = 2
ITEMS_PER_PAIR_WITH_REPEAT = 3

# Rendering defaults
DEFAULT_RESOLUTION = "full-hd"
DEFAULT_QUALITY = "high"
DEFAULT_BACKGROUND_COLOR = "#000000"
VOICE_MODEL = "azure"

# Cue styling
CUE_FONT_SIZE = "80px"
SOURCE_TEXT_COLOR = "#FFFFFF"
TARGET_TEXT_COLOR = "#FFD700"
TEXT_ALIGN = "center"

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
    "CUE_FONT_SIZE",
    "SOURCE_TEXT_COLOR",
    "TARGET_TEXT_COLOR",
    "TEXT_ALIGN",
]
