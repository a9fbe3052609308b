"""lprojkit - runtime lookup for generated localized string accessors.

Resolves which <tag>.lproj localization directory should supply a string
table for a list of preferred languages, and reads .strings and
.stringsdict tables from it.

Public API:
    StringResource - Key, table, bundle and default value of one string
    resolve_locale_bundle - Pick the localization directory for a table
    candidate_localizations - Ordered localization tags resolution tries
    LocaleMatch - Result of a successful resolution
    localized_string - Platform-style key lookup in a bundle
    Bundle - Protocol for resource bundles
    DirectoryBundle - Bundle backed by a directory on disk
    MemoryBundle - Bundle backed by dictionaries

Exceptions:
    LprojError - Base exception class
    StringsSyntaxError - Malformed .strings source
    TableLoadError - Undecodable or invalid table file

Submodules:
    lprojkit.tables - .strings/.stringsdict parsing and plural formatting
    lprojkit.diagnostics - Error codes and structured diagnostics
    lprojkit.locale_utils - Locale code helpers and system locale detection
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .bundle import Bundle, DirectoryBundle, MemoryBundle
from .diagnostics import LprojError, StringsSyntaxError, TableLoadError
from .enums import MatchKind, TableFormat
from .resolution import (
    LocaleMatch,
    application_locale,
    candidate_localizations,
    resolve_locale_bundle,
)
from .resource import StringResource, localized_string

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("lprojkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Bundle",
    "DirectoryBundle",
    "LocaleMatch",
    "LprojError",
    "MatchKind",
    "MemoryBundle",
    "StringResource",
    "StringsSyntaxError",
    "TableFormat",
    "TableLoadError",
    "__version__",
    "application_locale",
    "candidate_localizations",
    "localized_string",
    "resolve_locale_bundle",
]
