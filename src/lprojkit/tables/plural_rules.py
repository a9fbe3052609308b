"""CLDR plural rules implementation using Babel.

Provides plural category selection for the locale a table was resolved
for. Localization tags that are not real locales ("Base") fall back to the
simple one/other rule.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal

from babel.core import UnknownLocaleError

from lprojkit.locale_utils import get_babel_locale

__all__ = ["select_plural_category"]


def select_plural_category(n: int | float | Decimal, locale: str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en-US", "ar")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en")
        'one'
        >>> select_plural_category(5, "ru")
        'many'
        >>> select_plural_category(2, "Base")
        'other'
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return "one" if abs(n) == 1 else "other"

    return locale_obj.plural_form(n)
