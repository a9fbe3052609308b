"""String resources: the runtime side of generated string accessors.

A code generator emits one StringResource per key; calling it returns the
display string:

    >>> welcome = StringResource(
    ...     key="welcome.title",
    ...     table_name="Localizable",
    ...     bundle=DirectoryBundle.from_path("App.app"),
    ...     locales=("en", "de"),
    ...     value="Welcome",
    ...     comment="Title of the welcome screen",
    ... )
    >>> welcome()                     # bundle's preferred localizations
    'Willkommen'
    >>> welcome(["en-GB"])            # explicit languages, only the first is used
    'Welcome'

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from lprojkit.bundle import Bundle
from lprojkit.constants import DEFAULT_TABLE_NAME
from lprojkit.resolution import application_locale, resolve_locale_bundle
from lprojkit.tables import StringTable, format_printf
from lprojkit.types import LocaleCode, StringKey, TableName

__all__ = ["StringResource", "localized_string"]

logger = logging.getLogger(__name__)


def _find_table(bundle: Bundle, table_name: TableName) -> tuple[StringTable, LocaleCode] | None:
    """Locate the table the way a platform bundle lookup does.

    A table at the bundle root wins over localized copies; otherwise the
    preferred localizations are searched in order. The first existing table
    is used even if it lacks the requested key.
    """
    table = bundle.load_table(table_name)
    if table is not None:
        return table, application_locale(bundle)

    for localization in bundle.preferred_localizations:
        localized = bundle.localized_bundle(localization)
        if localized is None:
            continue
        table = localized.load_table(table_name)
        if table is not None:
            return table, localization
    return None


def localized_string(
    key: StringKey,
    bundle: Bundle,
    *,
    table_name: TableName = DEFAULT_TABLE_NAME,
    value: str = "",
) -> str:
    """Look up key in a bundle's table.

    Args:
        key: Key to look up
        bundle: Bundle to search
        table_name: Table name without extension
        value: Returned when the key is missing. If empty, the key itself
            is returned.

    Returns:
        The translated string, value, or key

    Raises:
        StringsSyntaxError: If the selected .strings file is malformed
        TableLoadError: If the selected table cannot be loaded
    """
    found = _find_table(bundle, table_name)
    if found is not None:
        text = found[0].get(key)
        if text is not None:
            return text
    logger.debug("Key '%s' not found in table '%s'", key, table_name)
    return value or key


@dataclass(frozen=True, slots=True)
class StringResource:
    """A localizable string and everything needed to look it up.

    Attributes:
        key: Key of the string in its table
        table_name: Table containing the string
        bundle: Bundle the table lives in
        locales: Localizations the string was found in when generated
        value: Returned when no table for the requested language exists.
            Also the default for lookups without explicit languages.
        comment: Translator comment attached to the string, if any
    """

    key: StringKey
    table_name: TableName
    bundle: Bundle
    locales: tuple[LocaleCode, ...] = ()
    value: str | None = None
    comment: str | None = None

    def __call__(self, preferred_languages: Sequence[LocaleCode] | None = None) -> str:
        """Return the display string.

        Args:
            preferred_languages: None uses the bundle's own preferred
                localizations. Otherwise the first language selects the
                localization directory via resolve_locale_bundle().

        Returns:
            Translated string. When no table exists for the requested
            language, the default value (or "" without one). When the table
            exists but lacks the key, the key.
        """
        if preferred_languages is None:
            return localized_string(
                self.key, self.bundle, table_name=self.table_name, value=self.value or ""
            )

        match = resolve_locale_bundle(self.table_name, preferred_languages, self.bundle)
        if match is None:
            return self.value or ""

        return localized_string(self.key, match.bundle, table_name=self.table_name)

    def plural(
        self,
        count: int | float | Decimal,
        preferred_languages: Sequence[LocaleCode] | None = None,
    ) -> str:
        """Return the display string for count using .stringsdict plural rules.

        Language selection follows __call__. Plural categories come from the
        CLDR rules of the resolved localization. Keys found only in the
        .strings file are used as printf templates for count.
        """
        if preferred_languages is None:
            found = _find_table(self.bundle, self.table_name)
            fallback = self.value or ""
        else:
            match = resolve_locale_bundle(self.table_name, preferred_languages, self.bundle)
            if match is None:
                return format_printf(self.value, count) if self.value else ""
            table = match.bundle.load_table(self.table_name)
            found = (table, match.locale) if table is not None else None
            fallback = ""

        if found is not None:
            table, locale = found
            text = table.format_plural(self.key, count, locale)
            if text is not None:
                return text
        return format_printf(fallback, count) if fallback else self.key
