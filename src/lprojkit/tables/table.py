"""Parsed string tables.

A table named "Localizable" may be backed by Localizable.strings,
Localizable.stringsdict or both. StringTable merges the two; plural
entries shadow plain strings with the same key.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from xml.parsers.expat import ExpatError

from lprojkit.diagnostics import ErrorTemplate, StringsSyntaxError, TableLoadError
from lprojkit.tables.strings_parser import parse_strings_data
from lprojkit.tables.stringsdict import PluralEntry, format_printf, parse_stringsdict

__all__ = ["StringTable", "load_table"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StringTable:
    """Immutable key lookup over one table's .strings and .stringsdict files.

    Attributes:
        name: Table name without extension (e.g., "Localizable")
        strings: Entries from the .strings file
        plurals: Entries from the .stringsdict file
    """

    name: str
    strings: Mapping[str, str] = field(default_factory=dict)
    plurals: Mapping[str, PluralEntry] = field(default_factory=dict)

    def __contains__(self, key: object) -> bool:
        return key in self.plurals or key in self.strings

    def __iter__(self) -> Iterator[str]:
        yield from self.plurals
        yield from (key for key in self.strings if key not in self.plurals)

    def __len__(self) -> int:
        return len(self.plurals) + sum(1 for key in self.strings if key not in self.plurals)

    def get(self, key: str) -> str | None:
        """Return the stored string for key.

        Plural entries return their unexpanded format key, which is what a
        plain lookup yields before a count is applied.
        """
        if key in self.plurals:
            return self.plurals[key].format_key
        return self.strings.get(key)

    def format_plural(self, key: str, count: int | float | Decimal, locale: str) -> str | None:
        """Format key for count, or None if key is not in the table.

        Keys present only in the .strings file are treated as printf
        templates for the count.
        """
        if key in self.plurals:
            return self.plurals[key].format(count, locale)
        if key in self.strings:
            return format_printf(self.strings[key], count)
        return None


def load_table(
    name: str,
    *,
    strings_data: bytes | None = None,
    stringsdict_data: bytes | None = None,
    source_path: str = "",
) -> StringTable:
    """Build a StringTable from the raw bytes of its files.

    Args:
        name: Table name
        strings_data: Contents of <name>.strings, if the file exists
        stringsdict_data: Contents of <name>.stringsdict, if the file exists
        source_path: Path prefix used in diagnostics

    Returns:
        Parsed table

    Raises:
        StringsSyntaxError: If the .strings source is malformed
        TableLoadError: If a file cannot be decoded or is not a valid property list
    """
    strings: dict[str, str] = {}
    plurals: dict[str, PluralEntry] = {}

    if strings_data is not None:
        strings_path = f"{source_path}.strings"
        try:
            strings = parse_strings_data(strings_data)
        except StringsSyntaxError as e:
            logger.error("Failed to parse table %s: %s", strings_path, e)
            if e.diagnostic is not None:
                raise StringsSyntaxError(
                    dataclasses.replace(e.diagnostic, source_path=strings_path)
                ) from e
            raise
        except UnicodeDecodeError as e:
            raise TableLoadError(
                ErrorTemplate.decode_failed(strings_path, str(e)), source_path=strings_path
            ) from e
        except (ExpatError, ValueError) as e:
            raise TableLoadError(
                ErrorTemplate.plist_invalid(strings_path, str(e)), source_path=strings_path
            ) from e

    if stringsdict_data is not None:
        plurals = parse_stringsdict(stringsdict_data, source_path=f"{source_path}.stringsdict")

    logger.debug(
        "Loaded table %s: %d strings, %d plural entries", name, len(strings), len(plurals)
    )
    return StringTable(name=name, strings=strings, plurals=plurals)
