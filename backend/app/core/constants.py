"""
Shared constants used across the application.

Centralizes the language tables so prompts, validation and the
/languages endpoint all agree on the same codes.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping

# Language code to full name mapping
# Used by: word generator prompts, routes/languages
LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType({
    "en": "English",
    "ar": "Arabic",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
    "hi": "Hindi",
    "nl": "Dutch",
    "pl": "Polish",
    "tr": "Turkish",
    "sv": "Swedish",
    "no": "Norwegian",
    "da": "Danish",
    "fi": "Finnish",
    "el": "Greek",
    "cs": "Czech",
    "hu": "Hungarian",
    "ro": "Romanian",
    "th": "Thai",
    "vi": "Vietnamese",
    "id": "Indonesian",
    "uk": "Ukrainian",
})


def get_language_name(code: str) -> str:
    """Get language name from code (or its base code), returns code if not found."""
    base_code = code.split("-")[0].lower()
    return LANGUAGE_NAMES.get(base_code, code)


def get_supported_languages() -> List[Dict[str, str]]:
    """Return the supported language list in display order."""
    return [{"code": code, "name": name} for code, name in LANGUAGE_NAMES.items()]
