"""Locale utilities for localization tags and system locale detection.

Localization directories are named with BCP-47 style tags ("en-GB",
"zh-Hans") or legacy POSIX style tags ("en_GB"). Babel expects POSIX
underscores. The helpers here convert between the two and extract the base
language code used by locale resolution.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from lprojkit.constants import FALLBACK_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "language_code",
    "normalize_locale",
    "to_language_tag",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def to_language_tag(locale_code: str) -> str:
    """Convert a POSIX locale code to the hyphenated tag used by .lproj names.

    Example:
        >>> to_language_tag("pt_BR")
        'pt-BR'
    """
    return locale_code.replace("_", "-")


def language_code(identifier: str) -> str | None:
    """Extract the base language code from a locale identifier.

    Parsing is syntactic only: the identifier does not need to name a
    locale known to CLDR. Encoding suffixes ("en_US.UTF-8") and modifiers
    ("de_DE@euro") are ignored.

    Args:
        identifier: Locale identifier in BCP-47 or POSIX form

    Returns:
        Lowercase language code, or None if the identifier is malformed

    Example:
        >>> language_code("en-US")
        'en'
        >>> language_code("zh_Hans_CN")
        'zh'
        >>> language_code("42") is None
        True
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.core import parse_locale  # noqa: PLC0415

    try:
        parts = parse_locale(to_language_tag(identifier), sep="-")
    except ValueError as e:
        logger.debug("Cannot parse locale identifier %r: %s", identifier, e)
        return None
    return parts[0]


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def _posix_locale(value: str | None) -> str | None:
    """Strip the encoding from a locale setting, ignoring C/POSIX pseudo-locales."""
    if not value or value in ("C", "POSIX"):
        return None
    return normalize_locale(value.split(".")[0])


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the locale string lookups should use.

    Detection order follows the POSIX precedence for message catalogs:
    1. LC_ALL environment variable (overrides all)
    2. LC_MESSAGES environment variable (for message catalogs)
    3. Python locale.getlocale() (OS-level locale, from LC_CTYPE)
    4. LANG environment variable (default locale)

    LC_MESSAGES is read before locale.getlocale() so that a message
    language set apart from the character type is not shadowed.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return FALLBACK_LOCALE.

    Returns:
        Detected locale code in POSIX format (e.g., "de_DE")

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    for var in ("LC_ALL", "LC_MESSAGES"):
        detected = _posix_locale(os.environ.get(var))
        if detected is not None:
            return detected

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    detected = _posix_locale(system_locale) or _posix_locale(os.environ.get("LANG"))
    if detected is not None:
        return detected

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return FALLBACK_LOCALE
