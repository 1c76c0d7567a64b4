"""Locale negotiation based on RFC 4647 extended filtering."""

from .matching import filter_matches
from .models import Locale, NegotiationOptions, Strategy
from .negotiation import ConfigurationError, negotiate_languages
from .subtags import get_likely_subtags_min

__all__ = [
    "ConfigurationError",
    "Locale",
    "NegotiationOptions",
    "Strategy",
    "filter_matches",
    "get_likely_subtags_min",
    "negotiate_languages",
]
