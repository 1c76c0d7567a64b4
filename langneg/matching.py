"""Filtering of available locales against requested locales.

Based on the RFC 4647 3.3.2 Extended Filtering algorithm, with these changes:

1) Available locales are treated as ranges, so a more specific request
   matches a more generic available locale::

       ['en-US'] * ['en'] = ['en']

   Available locale ids are expected to be as precise as the requests they
   should cover. Once both ``sr-Cyrl`` and ``sr-Latn`` are available they must
   be listed that way, or any ``sr-*`` request matches a bare ``sr``.

2) Likely subtags expand underspecified requests::

       ['fr'] * ['fr-FR'] = ['fr-FR']
       ['en'] * ['en-US'] = ['en-US']
       ['sr'] * ['sr-Latn', 'sr-Cyrl'] = ['sr-Cyrl']

3) Requests are finally compared with their variant and then their region
   replaced by a range, since the fall-off between a user's languages is
   usually greater than between regional variants (LDML 4.4)::

       ['en-AU'] * ['en-US'] = ['en-US']
       ['sr-RU'] * ['sr-Latn-RO'] = ['sr-Latn-RO']

   Script ranges are never relaxed, so ``sr-Cyrl`` never matches ``sr-Latn``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum, auto

from .models import Locale, Strategy


class _Step(Enum):
    """What to do after scanning the pool for one cascade step."""

    NEXT_STEP = auto()
    NEXT_REQUEST = auto()
    HALT = auto()


def build_pool(available_locales: Iterable[str]) -> dict[str, Locale]:
    """Parse available locales, dropping the ones that are not well formed."""
    pool: dict[str, Locale] = {}
    for tag in available_locales:
        locale = Locale.parse(tag)
        if locale.well_formed:
            pool[tag] = locale
    return pool


def _after_match(strategy: Strategy) -> _Step:
    if strategy is Strategy.LOOKUP:
        return _Step.HALT
    if strategy is Strategy.MATCHING:
        return _Step.NEXT_REQUEST
    return _Step.NEXT_STEP


def _consume(
    pool: dict[str, Locale],
    supported: list[str],
    strategy: Strategy,
    predicate: Callable[[str, Locale], bool],
) -> _Step:
    """Move every pool entry accepted by ``predicate`` into ``supported``.

    ``filtering`` takes all matches of the step, the other strategies stop at
    the first one.
    """
    matched = False
    for tag in list(pool):
        if not predicate(tag, pool[tag]):
            continue
        supported.append(tag)
        del pool[tag]
        matched = True
        outcome = _after_match(strategy)
        if outcome is not _Step.NEXT_STEP:
            return outcome
    return _Step.NEXT_REQUEST if matched else _Step.NEXT_STEP


def _cascade(
    requested_tag: str,
    pool: dict[str, Locale],
    supported: list[str],
    strategy: Strategy,
) -> _Step:
    requested = Locale.parse(requested_tag)

    def exact(tag: str, _: Locale) -> bool:
        return tag.lower() == requested_tag

    def in_range(_: str, available: Locale) -> bool:
        return available.matches(requested, True, False)

    def both_ranges(_: str, available: Locale) -> bool:
        return available.matches(requested, True, True)

    # en-US == en-US
    outcome = _consume(pool, supported, strategy, exact)
    if outcome is not _Step.NEXT_STEP:
        return outcome

    # en-US in en-*-*-*
    outcome = _consume(pool, supported, strategy, in_range)
    if outcome is not _Step.NEXT_STEP:
        return outcome

    # en -> en-Latn-US, zh -> zh-Hans-CN
    if requested.add_likely_subtags():
        outcome = _consume(pool, supported, strategy, in_range)
        if outcome is not _Step.NEXT_STEP:
            return outcome

    # en-US-macos -> en-US-*
    requested.clear_variants()
    outcome = _consume(pool, supported, strategy, both_ranges)
    if outcome is not _Step.NEXT_STEP:
        return outcome

    # zh-Hant-HK -> zh-Hant -> zh-Hant-TW
    requested.clear_region()
    if requested.add_likely_subtags():
        outcome = _consume(pool, supported, strategy, in_range)
        if outcome is not _Step.NEXT_STEP:
            return outcome

    # en-US -> en-*
    requested.clear_region()
    return _consume(pool, supported, strategy, both_ranges)


def filter_matches(
    requested_locales: Iterable[str],
    available_locales: Iterable[str],
    strategy: Strategy,
) -> list[str]:
    """Return available locales that satisfy the requested ones, in order.

    The strings are returned as given in ``available_locales``. Each available
    locale is used at most once; later requests only see what is left.
    """
    strategy = Strategy(strategy)
    supported: list[str] = []
    pool = build_pool(available_locales)

    for requested_tag in requested_locales:
        requested_tag = requested_tag.lower()
        if Locale.parse(requested_tag).language is None:
            continue
        if _cascade(requested_tag, pool, supported, strategy) is _Step.HALT:
            break

    return supported
