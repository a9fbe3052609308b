"""In-memory bundle for tests and embedded resources."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from lprojkit.constants import FALLBACK_LOCALE
from lprojkit.tables import StringTable
from lprojkit.types import LocaleCode, StringKey, TableName

__all__ = ["MemoryBundle"]


@dataclass(frozen=True, slots=True)
class MemoryBundle:
    """Bundle whose localization directories and tables live in dictionaries.

    Attributes:
        localized_tables: Tables per localization directory. A key with an
            empty mapping is a directory without tables.
        root_tables: Tables at the bundle root
        development_localization: Authoring language (last fallback)
        preferred: Preferred localizations, best first
        locale: Value returned by current_locale()
        advertised_localizations: Overrides the tags reported by
            ``localizations``. Lets tests advertise a tag whose directory is
            missing. None reports the keys of localized_tables.

    Example:
        >>> bundle = MemoryBundle.from_dict(
        ...     {"en": {"Localizable": {"hello": "Hello"}}},
        ...     development_localization="en",
        ... )
        >>> bundle.localized_bundle("en").load_table("Localizable").get("hello")
        'Hello'
    """

    localized_tables: Mapping[LocaleCode, Mapping[TableName, StringTable]] = field(
        default_factory=dict
    )
    root_tables: Mapping[TableName, StringTable] = field(default_factory=dict)
    development_localization: LocaleCode | None = None
    preferred: tuple[LocaleCode, ...] = ()
    locale: LocaleCode = FALLBACK_LOCALE
    advertised_localizations: tuple[LocaleCode, ...] | None = None

    @classmethod
    def from_dict(
        cls,
        localized: Mapping[LocaleCode, Mapping[TableName, Mapping[StringKey, str]]],
        *,
        root: Mapping[TableName, Mapping[StringKey, str]] | None = None,
        development_localization: LocaleCode | None = None,
        preferred: tuple[LocaleCode, ...] = (),
        locale: LocaleCode = FALLBACK_LOCALE,
        advertised_localizations: tuple[LocaleCode, ...] | None = None,
    ) -> MemoryBundle:
        """Build a bundle from plain nested dictionaries of strings."""

        def tables(
            raw: Mapping[TableName, Mapping[StringKey, str]],
        ) -> dict[TableName, StringTable]:
            return {
                name: StringTable(name=name, strings=dict(entries))
                for name, entries in raw.items()
            }

        return cls(
            localized_tables={tag: tables(raw) for tag, raw in localized.items()},
            root_tables=tables(root or {}),
            development_localization=development_localization,
            preferred=preferred,
            locale=locale,
            advertised_localizations=advertised_localizations,
        )

    @property
    def localizations(self) -> tuple[LocaleCode, ...]:
        if self.advertised_localizations is not None:
            return self.advertised_localizations
        return tuple(self.localized_tables)

    @property
    def preferred_localizations(self) -> tuple[LocaleCode, ...]:
        return self.preferred

    def current_locale(self) -> LocaleCode:
        return self.locale

    def localized_bundle(self, localization: LocaleCode) -> MemoryBundle | None:
        tables = self.localized_tables.get(localization)
        if tables is None:
            return None
        return MemoryBundle(root_tables=tables, locale=self.locale)

    def has_table(self, table_name: TableName) -> bool:
        return table_name in self.root_tables

    def load_table(self, table_name: TableName) -> StringTable | None:
        return self.root_tables.get(table_name)
