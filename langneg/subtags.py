"""Curated likely subtags data.

A minimal replacement for the CLDR ``likelySubtags.json`` supplemental table,
based on CLDR 30.0.3, for cases where the full table is too large to ship.
"""

from __future__ import annotations

from types import MappingProxyType

from .models import Locale

LIKELY_SUBTAGS_MIN = MappingProxyType(
    {
        "ar": "ar-arab-eg",
        "az-arab": "az-arab-ir",
        "az-ir": "az-arab-ir",
        "be": "be-cyrl-by",
        "da": "da-latn-dk",
        "el": "el-grek-gr",
        "en": "en-latn-us",
        "fa": "fa-arab-ir",
        "ja": "ja-jpan-jp",
        "ko": "ko-kore-kr",
        "pt": "pt-latn-br",
        "sr": "sr-cyrl-rs",
        "sr-ru": "sr-latn-ru",
        "sv": "sv-latn-se",
        "ta": "ta-taml-in",
        "uk": "uk-cyrl-ua",
        "zh": "zh-hans-cn",
        "zh-hant": "zh-hant-tw",
        "zh-hk": "zh-hant-hk",
        "zh-mo": "zh-hant-mo",
        "zh-tw": "zh-hant-tw",
        "zh-gb": "zh-hant-gb",
        "zh-us": "zh-hant-us",
    }
)

# Languages whose most likely region is the language code itself (fr -> fr-FR).
REGION_MATCHING_LANGUAGES = frozenset(
    {
        "az",
        "bg",
        "cs",
        "de",
        "es",
        "fi",
        "fr",
        "hu",
        "it",
        "lt",
        "lv",
        "nl",
        "pl",
        "ro",
        "ru",
    }
)


def get_likely_subtags_min(tag: str) -> Locale | None:
    """Return the most likely full locale for a lowercased tag, if known."""
    expanded_tag = LIKELY_SUBTAGS_MIN.get(tag)
    if expanded_tag:
        return Locale.parse(expanded_tag)

    locale = Locale.parse(tag)
    if locale.language in REGION_MATCHING_LANGUAGES:
        locale.region = locale.language.upper()
        return locale
    return None
