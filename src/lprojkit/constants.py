"""Shared constants for lprojkit.

Centralizes bundle layout names, resource file suffixes and cache bounds
used across the bundle, table and resolution packages. Placing constants
here avoids circular imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Bundle layout
    "BASE_LOCALIZATION",
    "LPROJ_SUFFIX",
    "INFO_PLIST_NAME",
    "DEVELOPMENT_REGION_KEY",
    # Table files
    "STRINGS_SUFFIX",
    "STRINGSDICT_SUFFIX",
    "DEFAULT_TABLE_NAME",
    # Limits
    "MAX_TABLE_CACHE_SIZE",
    "MAX_LOOKUP_CACHE_SIZE",
    "MAX_SOURCE_SIZE",
    # Locale fallback
    "FALLBACK_LOCALE",
]

# ============================================================================
# BUNDLE LAYOUT
# ============================================================================

# Language-neutral localization directory (Base.lproj). Tried between the
# most specific match and the development localization.
BASE_LOCALIZATION: str = "Base"

LPROJ_SUFFIX: str = ".lproj"

INFO_PLIST_NAME: str = "Info.plist"

# Info.plist key naming the authoring language of the bundle.
DEVELOPMENT_REGION_KEY: str = "CFBundleDevelopmentRegion"

# ============================================================================
# TABLE FILES
# ============================================================================

STRINGS_SUFFIX: str = ".strings"

STRINGSDICT_SUFFIX: str = ".stringsdict"

# Table consulted when a lookup names no table.
DEFAULT_TABLE_NAME: str = "Localizable"

# ============================================================================
# LIMITS
# ============================================================================

# Parsed tables kept per DirectoryBundle. Bundles are read-only, so entries
# never go stale; the bound only caps memory.
MAX_TABLE_CACHE_SIZE: int = 256

# Localization directory and table existence lookups kept per DirectoryBundle.
# Callers may pass arbitrary tags, so these caches are bounded too.
MAX_LOOKUP_CACHE_SIZE: int = 1024

# Maximum table file size in bytes (10 MiB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# LOCALE FALLBACK
# ============================================================================

# Returned by get_system_locale() when nothing can be detected.
FALLBACK_LOCALE: str = "en_US"
