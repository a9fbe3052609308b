"""Enumerations for lprojkit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum

from lprojkit.constants import STRINGS_SUFFIX, STRINGSDICT_SUFFIX


class TableFormat(StrEnum):
    """On-disk representation of a string table.

    StrEnum provides automatic string conversion: str(TableFormat.STRINGS) == ".strings"
    """

    STRINGS = STRINGS_SUFFIX
    """Flat key/value mapping: "key" = "value";"""

    STRINGSDICT = STRINGSDICT_SUFFIX
    """Property list with plural rules per key."""


class MatchKind(StrEnum):
    """Where a resolved table was found."""

    LOCALIZATION = "localization"
    """Inside a <tag>.lproj directory."""

    ROOT = "root"
    """At the bundle root, outside any localization directory."""


__all__ = [
    "MatchKind",
    "TableFormat",
]
