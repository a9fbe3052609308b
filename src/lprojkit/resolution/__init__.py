"""Locale resolution: choose the localization directory for a string table.

Python 3.13+.
"""

from lprojkit.resolution.resolver import (
    LocaleMatch,
    application_locale,
    candidate_localizations,
    resolve_locale_bundle,
)

__all__ = [
    "LocaleMatch",
    "application_locale",
    "candidate_localizations",
    "resolve_locale_bundle",
]
