"""Tests for locale parsing, serialization and range matching."""

import pytest

from langneg.models import Locale, NegotiationOptions, Strategy


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("en", ("en", None, None, None)),
        ("en-US", ("en", None, "US", None)),
        ("EN_latn_us", ("en", "Latn", "US", None)),
        ("sr-CYRL", ("sr", "Cyrl", None, None)),
        ("de-DE-1996", ("de", None, "DE", "1996")),
        ("en-US-POSIX", ("en", None, "US", "POSIX")),
        ("ast-Latn-ES-valencia", ("ast", "Latn", "ES", "valencia")),
        ("*-US", ("*", None, "US", None)),
        ("en-*-*-*", ("en", "*", "*", "*")),
    ],
)
def test_parse_well_formed(tag, expected):
    locale = Locale.parse(tag)

    assert locale.well_formed
    assert (locale.language, locale.script, locale.region, locale.variant) == expected


@pytest.mark.parametrize(
    "tag", ["", "e", "english", "en-US-mac", "en--US", "!!!", "en-US-toolongvariant"]
)
def test_parse_malformed(tag):
    locale = Locale.parse(tag)

    assert not locale.well_formed
    assert locale.language is None
    assert locale.script is None
    assert locale.region is None
    assert locale.variant is None


@pytest.mark.parametrize(
    "tag", ["en", "en-us", "EN_latn_us", "sr-cyrl-rs", "de-DE-1996", "*-*", "zh_hant"]
)
def test_parse_is_idempotent(tag):
    locale = Locale.parse(tag)

    assert Locale.parse(str(locale)) == locale


def test_str_joins_present_subtags():
    assert str(Locale.parse("en-latn-us")) == "en-Latn-US"
    assert str(Locale.parse("en_us")) == "en-US"
    assert str(Locale.parse("!!!")) == ""


def test_wildcard_is_not_absent():
    assert Locale.parse("en-*") != Locale.parse("en")


def test_equality_compares_subtags():
    assert Locale.parse("en-US") == Locale.parse("EN_us")
    assert Locale.parse("en-US") != Locale.parse("en")
    assert Locale.parse("en-US") != "en-US"


def test_matches_with_available_as_range():
    available = Locale.parse("en")
    requested = Locale.parse("en-US")

    assert available.matches(requested, True, False)
    assert not available.matches(requested, False, False)
    assert not requested.matches(available, True, False)
    assert requested.matches(available, False, True)


def test_matches_never_crosses_scripts():
    available = Locale.parse("sr-Latn")
    requested = Locale.parse("sr-Cyrl-RS")

    assert not available.matches(requested, True, True)


def test_wildcard_value_only_matches_itself():
    assert not Locale.parse("*").matches(Locale.parse("en"), True, True)
    assert Locale.parse("*").matches(Locale.parse("*"))


def test_clear_variants_and_region():
    locale = Locale.parse("en-US-windows")

    locale.clear_variants()
    assert str(locale) == "en-US"

    locale.clear_region()
    assert str(locale) == "en"

    locale.clear_region()
    assert str(locale) == "en"


def test_add_likely_subtags_from_table():
    locale = Locale.parse("en")

    assert locale.add_likely_subtags()
    assert str(locale) == "en-Latn-US"


def test_add_likely_subtags_from_region_matching_language():
    locale = Locale.parse("fr")

    assert locale.add_likely_subtags()
    assert str(locale) == "fr-FR"


def test_add_likely_subtags_is_case_insensitive():
    locale = Locale.parse("sr-RU")

    assert locale.add_likely_subtags()
    assert str(locale) == "sr-Latn-RU"


def test_add_likely_subtags_miss_leaves_locale_unchanged():
    locale = Locale.parse("xx-YY")

    assert not locale.add_likely_subtags()
    assert str(locale) == "xx-YY"


def test_negotiation_options_defaults():
    options = NegotiationOptions()

    assert options.strategy is Strategy.FILTERING
    assert options.default_locale is None


def test_negotiation_options_lookup_requires_default_locale():
    with pytest.raises(ValueError, match="default_locale"):
        NegotiationOptions(strategy="lookup")
