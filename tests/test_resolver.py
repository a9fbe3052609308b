"""Tests for locale resolution over in-memory bundles.

Covers candidate ordering (Base insertion, development backstop), directory
and table existence checks, the root-table fallback and the no-match result.

Python 3.13+.
"""

from lprojkit import MatchKind, MemoryBundle
from lprojkit.resolution import (
    LocaleMatch,
    application_locale,
    candidate_localizations,
    resolve_locale_bundle,
)

TABLE = "Localizable"
HELLO = {TABLE: {"hello": "Hello"}}


class TestCandidateLocalizations:
    """Ordering of the localization tags resolution tries."""

    def test_full_tag_then_base_then_language_then_development(self) -> None:
        bundle = MemoryBundle.from_dict(
            {"en-US": {}, "en": {}, "Base": {}}, development_localization="en"
        )
        assert candidate_localizations(["en-US"], bundle) == ["en-US", "Base", "en", "en"]

    def test_full_tag_without_language_directory(self) -> None:
        bundle = MemoryBundle.from_dict({"en-US": {}}, development_localization="de")
        assert candidate_localizations(["en-US"], bundle) == ["en-US", "Base", "de"]

    def test_language_only_when_full_tag_missing(self) -> None:
        """The full tag is never tried when it is not advertised."""
        bundle = MemoryBundle.from_dict({"en": {}, "Base": {}})
        assert candidate_localizations(["en-GB"], bundle) == ["en", "Base"]

    def test_no_match_falls_back_to_development_without_base(self) -> None:
        bundle = MemoryBundle.from_dict(
            {"fr": {}, "Base": {}}, development_localization="de"
        )
        assert candidate_localizations(["ja-JP"], bundle) == ["de"]

    def test_no_match_without_development_is_empty(self) -> None:
        bundle = MemoryBundle.from_dict({"fr": {}, "Base": {}})
        assert candidate_localizations(["ja"], bundle) == []

    def test_empty_preferred_languages_uses_development(self) -> None:
        bundle = MemoryBundle.from_dict({"en": {}}, development_localization="en")
        assert candidate_localizations([], bundle) == ["en"]

    def test_empty_preferred_languages_without_development(self) -> None:
        bundle = MemoryBundle.from_dict({"en": {}})
        assert candidate_localizations([], bundle) == []

    def test_development_appended_even_when_duplicate(self) -> None:
        bundle = MemoryBundle.from_dict({"en": {}}, development_localization="en")
        # "en" is both the identifier and its own language code
        assert candidate_localizations(["en"], bundle) == ["en", "Base", "en", "en"]

    def test_only_first_preferred_language_is_considered(self) -> None:
        bundle = MemoryBundle.from_dict({"fr": {}, "de": {}})
        assert candidate_localizations(["ja", "fr", "de"], bundle) == []
        assert candidate_localizations(["fr", "de"], bundle) == ["fr", "Base", "fr"]

    def test_posix_identifier_language_code(self) -> None:
        bundle = MemoryBundle.from_dict({"pt": {}})
        assert candidate_localizations(["pt_BR"], bundle) == ["pt", "Base"]

    def test_script_subtag_language_code(self) -> None:
        bundle = MemoryBundle.from_dict({"zh-Hans": {}, "zh": {}})
        assert candidate_localizations(["zh-Hans"], bundle) == ["zh-Hans", "Base", "zh"]

    def test_malformed_identifier_uses_development(self) -> None:
        bundle = MemoryBundle.from_dict({"en": {}}, development_localization="en")
        assert candidate_localizations(["42"], bundle) == ["en"]

    def test_base_is_always_second(self) -> None:
        bundle = MemoryBundle.from_dict(
            {"en-US": {}, "en": {}}, development_localization="fr"
        )
        candidates = candidate_localizations(["en-US"], bundle)
        assert candidates[1] == "Base"
        assert candidates[-1] == "fr"


class TestResolveLocaleBundle:
    """Selection of the directory that supplies a table."""

    def test_exact_tag_wins_over_language_and_base(self) -> None:
        bundle = MemoryBundle.from_dict(
            {"en-US": HELLO, "en": HELLO, "Base": HELLO}, development_localization="en"
        )
        match = resolve_locale_bundle(TABLE, ["en-US"], bundle)
        assert match is not None
        assert match.locale == "en-US"
        assert match.kind == MatchKind.LOCALIZATION
        assert match.bundle.load_table(TABLE) is not None

    def test_language_code_when_region_missing(self) -> None:
        bundle = MemoryBundle.from_dict({"en": HELLO, "fr": HELLO})
        match = resolve_locale_bundle(TABLE, ["en-US"], bundle)
        assert match is not None
        assert match.locale == "en"

    def test_base_between_region_and_language(self) -> None:
        bundle = MemoryBundle.from_dict(
            {"en-US": {}, "en": HELLO, "Base": HELLO}, development_localization="en"
        )
        match = resolve_locale_bundle(TABLE, ["en-US"], bundle)
        assert match is not None
        assert match.locale == "Base"

    def test_development_localization_backstop(self) -> None:
        bundle = MemoryBundle.from_dict(
            {"de": HELLO, "Base": HELLO}, development_localization="de"
        )
        match = resolve_locale_bundle(TABLE, ["ja"], bundle)
        assert match is not None
        assert match.locale == "de"
        assert match.candidates == ("de",)

    def test_empty_preferred_languages_uses_development(self) -> None:
        bundle = MemoryBundle.from_dict({"en": HELLO}, development_localization="en")
        match = resolve_locale_bundle(TABLE, [], bundle)
        assert match is not None
        assert match.locale == "en"

    def test_directory_without_table_is_skipped(self) -> None:
        bundle = MemoryBundle.from_dict(
            {"fr": {"Other": {"x": "y"}}, "Base": HELLO}, development_localization="fr"
        )
        match = resolve_locale_bundle(TABLE, ["fr"], bundle)
        assert match is not None
        assert match.locale == "Base"

    def test_advertised_tag_without_directory_is_skipped(self) -> None:
        bundle = MemoryBundle.from_dict(
            {"Base": HELLO},
            advertised_localizations=("fr", "Base"),
        )
        match = resolve_locale_bundle(TABLE, ["fr"], bundle)
        assert match is not None
        assert match.locale == "Base"
        assert match.candidates == ("fr", "Base", "fr")

    def test_root_table_fallback_uses_application_locale(self) -> None:
        bundle = MemoryBundle.from_dict(
            {"fr": {}}, root=HELLO, preferred=("fr",), locale="de_DE"
        )
        match = resolve_locale_bundle(TABLE, ["ja"], bundle)
        assert match is not None
        assert match.kind == MatchKind.ROOT
        assert match.is_root
        assert match.locale == "fr"
        assert match.bundle is bundle

    def test_root_table_fallback_without_preferred_uses_current_locale(self) -> None:
        bundle = MemoryBundle.from_dict({}, root=HELLO, locale="de_DE")
        match = resolve_locale_bundle(TABLE, ["en"], bundle)
        assert match is not None
        assert match.locale == "de_DE"
        assert match.bundle is bundle

    def test_no_match_anywhere(self) -> None:
        bundle = MemoryBundle.from_dict(
            {"en": {"Other": {"a": "b"}}}, development_localization="en"
        )
        assert resolve_locale_bundle(TABLE, ["en"], bundle) is None

    def test_later_preferred_languages_are_ignored(self) -> None:
        """No retry with the second language when the first resolves nowhere."""
        bundle = MemoryBundle.from_dict({"fr": HELLO})
        assert resolve_locale_bundle(TABLE, ["ja", "fr"], bundle) is None

    def test_region_tag_without_language_directory(self) -> None:
        """Tags en-US, Base, fr; development en; preferred en-GB; table only in Base.

        Neither en-GB nor en is advertised, so the development localization
        is the sole candidate and Base is never inserted. en.lproj does not
        exist and the root has no table: no match.
        """
        bundle = MemoryBundle.from_dict(
            {"en-US": {}, "Base": HELLO, "fr": {}}, development_localization="en"
        )
        assert candidate_localizations(["en-GB"], bundle) == ["en"]
        assert resolve_locale_bundle(TABLE, ["en-GB"], bundle) is None

    def test_region_tag_with_language_directory(self) -> None:
        """Same bundle plus an en.lproj without the table resolves to Base."""
        bundle = MemoryBundle.from_dict(
            {"en-US": {}, "Base": HELLO, "fr": {}, "en": {}}, development_localization="en"
        )
        match = resolve_locale_bundle(TABLE, ["en-GB"], bundle)
        assert match is not None
        assert match.candidates == ("en", "Base", "en")
        assert match.locale == "Base"


class TestApplicationLocale:
    def test_first_preferred_localization(self) -> None:
        bundle = MemoryBundle(preferred=("de", "en"), locale="fr_FR")
        assert application_locale(bundle) == "de"

    def test_current_locale_when_nothing_preferred(self) -> None:
        bundle = MemoryBundle(locale="fr_FR")
        assert application_locale(bundle) == "fr_FR"


class TestLocaleMatch:
    def test_is_root_false_for_localization(self) -> None:
        match = LocaleMatch(locale="en", bundle=MemoryBundle(), kind=MatchKind.LOCALIZATION)
        assert not match.is_root
        assert match.candidates == ()
