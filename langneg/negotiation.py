"""Language negotiation entry point."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import ValidationError

from .matching import filter_matches
from .models import NegotiationOptions, Strategy


class ConfigurationError(ValueError):
    """Raised when negotiation options cannot be used together."""


def _as_tags(locales: Iterable[object] | str | None) -> list[str]:
    if locales is None:
        return []
    if isinstance(locales, str):
        return [locales]
    return [str(locale) for locale in locales]


def negotiate_languages(
    requested_locales: Iterable[object] | str | None,
    available_locales: Iterable[object] | str | None,
    *,
    strategy: Strategy | str = Strategy.FILTERING,
    default_locale: str | None = None,
) -> list[str]:
    """Negotiate requested locales against the available ones.

    Args:
        requested_locales: BCP-47 locale ids sorted by user preference.
        available_locales: BCP-47 locale ids with resources available. Unsorted.
        strategy: One of:

            ``filtering`` (default)
                Match as many available locales as possible, in order of the
                requested locales.
            ``matching``
                Find the best match for each requested locale.
            ``lookup``
                Find a single best available locale. Requires
                ``default_locale``.

        default_locale: Locale used as a last resort. Appended to the result
            unless already present; with ``lookup`` it is the result when
            nothing matches.

    Returns:
        Available locale ids as given, sorted by user preference.

    Raises:
        ConfigurationError: If the strategy is unknown, or ``lookup`` is used
            without ``default_locale``.
    """
    try:
        options = NegotiationOptions(strategy=strategy, default_locale=default_locale)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid negotiation options: {e.errors()[0]['msg']}"
        ) from e

    supported_locales = filter_matches(
        _as_tags(requested_locales),
        _as_tags(available_locales),
        options.strategy,
    )

    if options.strategy is Strategy.LOOKUP:
        if not supported_locales:
            supported_locales.append(options.default_locale)
    elif options.default_locale and options.default_locale not in supported_locales:
        supported_locales.append(options.default_locale)

    return supported_locales
