"""
Central voice/language catalog for the rendering service's Azure TTS.

This module is the single source of truth for:
- Language code -> narration voice used in voice cues
- Whether a language code can be narrated at all (request validation)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Keys are lowercase; lookups normalize the incoming code first.
VOICES_BY_LANGUAGE: Mapping[str, str] = MappingProxyType({
    # English
    "en": "en-US-EmmaMultilingualNeural",
    "en-us": "en-US-EmmaMultilingualNeural",
    "en-gb": "en-GB-SoniaNeural",
    "en-au": "en-AU-NatashaNeural",
    # Arabic
    "ar": "ar-SA-ZariyahNeural",
    "ar-sa": "ar-SA-ZariyahNeural",
    "ar-eg": "ar-EG-SalmaNeural",
    # Spanish
    "es": "es-ES-ElviraNeural",
    "es-es": "es-ES-ElviraNeural",
    "es-mx": "es-MX-DaliaNeural",
    # French
    "fr": "fr-FR-DeniseNeural",
    "fr-fr": "fr-FR-DeniseNeural",
    "fr-ca": "fr-CA-SylvieNeural",
    # German
    "de": "de-DE-KatjaNeural",
    "de-de": "de-DE-KatjaNeural",
    "de-ch": "de-CH-LeniNeural",
    # Italian
    "it": "it-IT-ElsaNeural",
    "it-it": "it-IT-ElsaNeural",
    # Portuguese
    "pt": "pt-BR-FranciscaNeural",
    "pt-br": "pt-BR-FranciscaNeural",
    "pt-pt": "pt-PT-RaquelNeural",
    # Chinese
    "zh": "zh-CN-XiaoxiaoNeural",
    "zh-cn": "zh-CN-XiaoxiaoNeural",
    "zh-tw": "zh-TW-HsiaoChenNeural",
    # Japanese / Korean
    "ja": "ja-JP-NanamiNeural",
    "ja-jp": "ja-JP-NanamiNeural",
    "ko": "ko-KR-SunHiNeural",
    "ko-kr": "ko-KR-SunHiNeural",
    # Single-voice languages
    "ru": "ru-RU-SvetlanaNeural",
    "hi": "hi-IN-SwaraNeural",
    "nl": "nl-NL-ColetteNeural",
    "pl": "pl-PL-ZofiaNeural",
    "tr": "tr-TR-EmelNeural",
    "sv": "sv-SE-SofieNeural",
    "no": "nb-NO-PernilleNeural",
    "da": "da-DK-ChristelNeural",
    "fi": "fi-FI-NooraNeural",
    "el": "el-GR-AthinaNeural",
    "cs": "cs-CZ-VlastaNeural",
    "hu": "hu-HU-NoemiNeural",
    "ro": "ro-RO-AlinaNeural",
    "th": "th-TH-PremwadeeNeural",
    "vi": "vi-VN-HoaiMyNeural",
    "id": "id-ID-GadisNeural",
    "uk": "uk-UA-PolinaNeural",
})

DEFAULT_VOICE_LANGUAGE = "en"
DEFAULT_VOICE = VOICES_BY_LANGUAGE[DEFAULT_VOICE_LANGUAGE]


def _lookup(language_code: str) -> str | None:
    code = (language_code or "").strip().lower()
    voice = VOICES_BY_LANGUAGE.get(code)
    if voice is not None:
        return voice
    return VOICES_BY_LANGUAGE.get(code.split("-")[0])


def resolve_voice(language_code: str) -> str:
    """Get the narration voice for a language; falls back to the English voice."""
    return _lookup(language_code) or DEFAULT_VOICE


def is_supported(language_code: str) -> bool:
    """True if the code or its base language has a voice (no fallback)."""
    return _lookup(language_code) is not None
