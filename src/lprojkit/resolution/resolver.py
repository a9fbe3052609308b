"""Locale resolution for string tables.

Given a table name, the caller's preferred languages and a bundle, pick the
localization directory that should supply translations for that table.

Candidate order for a first preferred language "en-US":

    en-US      (only if an en-US.lproj is advertised)
    Base       (language-neutral directory)
    en         (base language, if advertised)
    <dev>      (development localization, always last)

Only the first preferred language is considered. When neither it nor its
base language is advertised, the development localization is the only
candidate and Base is not tried. If no candidate directory contains the
table, a table at the bundle root is used with the application locale.
Otherwise there is no match and callers show the caller-supplied default.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from lprojkit.bundle import Bundle
from lprojkit.constants import BASE_LOCALIZATION
from lprojkit.enums import MatchKind
from lprojkit.locale_utils import language_code
from lprojkit.types import LocaleCode, TableName

__all__ = [
    "LocaleMatch",
    "application_locale",
    "candidate_localizations",
    "resolve_locale_bundle",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleMatch:
    """Outcome of a successful resolution.

    Attributes:
        locale: Localization tag of the matched directory, or the
            application locale for a root-level table
        bundle: Bundle to read the table from (the .lproj sub-bundle, or the
            original bundle for a root-level table)
        kind: Whether the table came from a localization directory or the root
        candidates: Candidate tags that were tried, in order
    """

    locale: LocaleCode
    bundle: Bundle
    kind: MatchKind
    candidates: tuple[LocaleCode, ...] = ()

    @property
    def is_root(self) -> bool:
        """True if the table was found outside any localization directory."""
        return self.kind == MatchKind.ROOT


def application_locale(bundle: Bundle) -> LocaleCode:
    """Return the bundle's first preferred localization, else the current locale."""
    preferred = bundle.preferred_localizations
    if preferred:
        return preferred[0]
    return bundle.current_locale()


def candidate_localizations(
    preferred_languages: Sequence[LocaleCode], bundle: Bundle
) -> list[LocaleCode]:
    """Build the ordered list of localization tags to try.

    Duplicates are kept: the development localization is appended even when
    it already appears earlier.

    Example:
        >>> bundle = MemoryBundle.from_dict(
        ...     {"en-US": {}, "en": {}, "Base": {}}, development_localization="en"
        ... )
        >>> candidate_localizations(["en-US", "fr"], bundle)
        ['en-US', 'Base', 'en', 'en']
    """
    available = bundle.localizations
    languages: list[LocaleCode] = []

    for identifier in preferred_languages[:1]:
        language = language_code(identifier)
        if identifier in available:
            languages.append(identifier)
            if language is not None and language in available:
                languages.append(language)
        elif language is not None and language in available:
            languages.append(language)

    development = bundle.development_localization
    if not languages:
        if development is not None:
            languages = [development]
    else:
        languages.insert(1, BASE_LOCALIZATION)
        if development is not None:
            languages.append(development)

    return languages


def resolve_locale_bundle(
    table_name: TableName,
    preferred_languages: Sequence[LocaleCode],
    bundle: Bundle,
) -> LocaleMatch | None:
    """Find the localization directory that supplies table_name.

    Args:
        table_name: Table name without extension (e.g., "Localizable")
        preferred_languages: Caller's languages, best first. Only the first
            entry is used.
        bundle: Bundle to search

    Returns:
        LocaleMatch for the first candidate directory containing the table,
        a root-level LocaleMatch if only the bundle root has it, or None if
        the table exists nowhere. A match does not guarantee that any
        particular key is present in the table.
    """
    candidates = tuple(candidate_localizations(preferred_languages, bundle))
    logger.debug("Candidates for table '%s': %s", table_name, candidates)

    for localization in candidates:
        localized = bundle.localized_bundle(localization)
        if localized is not None and localized.has_table(table_name):
            logger.debug("Table '%s' resolved to localization '%s'", table_name, localization)
            return LocaleMatch(
                locale=localization,
                bundle=localized,
                kind=MatchKind.LOCALIZATION,
                candidates=candidates,
            )

    if bundle.has_table(table_name):
        locale = application_locale(bundle)
        logger.debug("Table '%s' resolved at bundle root, locale '%s'", table_name, locale)
        return LocaleMatch(
            locale=locale,
            bundle=bundle,
            kind=MatchKind.ROOT,
            candidates=candidates,
        )

    logger.debug("Table '%s' not found for %s", table_name, list(preferred_languages[:1]))
    return None
