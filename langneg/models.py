"""Pydantic models for locale identifiers and negotiation options."""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import BaseModel, model_validator

LOCALE_PATTERN = re.compile(
    r"^([a-z]{2,3}|\*)"
    r"(?:-([a-z]{4}|\*))?"
    r"(?:-([a-z]{2}|\*))?"
    r"(?:-([0-9][a-z0-9]{3}|[a-z0-9]{5,8}|\*))?$",
    re.IGNORECASE,
)


class Locale(BaseModel):
    """BCP-47 locale identifier split into language, script, region and variant.

    Any field may hold the range character ``*``. A field set to ``None`` is
    absent, and is only treated as a wildcard by :meth:`matches` on the side
    whose range flag is enabled.
    """

    language: str | None = None
    script: str | None = None
    region: str | None = None
    variant: str | None = None
    well_formed: bool = True

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """Parse a locale tag, allowing the script subtag to be skipped.

        ``en-US`` parses as language ``en`` and region ``US``. Tags that do not
        match the grammar yield a locale with ``well_formed`` set to False and
        no subtags.
        """
        match = LOCALE_PATTERN.match(tag.replace("_", "-"))
        if not match:
            return cls(well_formed=False)
        language, script, region, variant = match.groups()
        return cls(
            language=language.lower(),
            script=script.title() if script else None,
            region=region.upper() if region else None,
            variant=variant,
        )

    def matches(
        self, other: Locale, this_range: bool = False, other_range: bool = False
    ) -> bool:
        """Compare subtags, treating absent fields as wildcards on range sides."""
        for field in ("language", "script", "region", "variant"):
            mine = getattr(self, field)
            theirs = getattr(other, field)
            if mine == theirs:
                continue
            if this_range and mine is None:
                continue
            if other_range and theirs is None:
                continue
            return False
        return True

    def add_likely_subtags(self) -> bool:
        """Expand in place from the likely subtags table.

        Returns False, leaving the locale untouched, when no expansion is known.
        """
        from .subtags import get_likely_subtags_min

        expanded = get_likely_subtags_min(str(self).lower())
        if expanded is None:
            return False
        self.language = expanded.language
        self.script = expanded.script
        self.region = expanded.region
        self.variant = expanded.variant
        return True

    def clear_variants(self) -> None:
        self.variant = None

    def clear_region(self) -> None:
        self.region = None

    def __str__(self) -> str:
        parts = [self.language, self.script, self.region, self.variant]
        return "-".join(part for part in parts if part is not None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Locale):
            return NotImplemented
        return (self.language, self.script, self.region, self.variant) == (
            other.language,
            other.script,
            other.region,
            other.variant,
        )


class Strategy(StrEnum):
    """How many available locales a negotiation returns."""

    FILTERING = "filtering"
    MATCHING = "matching"
    LOOKUP = "lookup"


class NegotiationOptions(BaseModel):
    """Options accepted by :func:`langneg.negotiation.negotiate_languages`."""

    strategy: Strategy = Strategy.FILTERING
    default_locale: str | None = None

    @model_validator(mode="after")
    def check_default_locale(self) -> NegotiationOptions:
        if self.strategy is Strategy.LOOKUP and self.default_locale is None:
            raise ValueError("default_locale cannot be None for strategy `lookup`")
        return self
