"""Type aliases for the bundle and resolution domain.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "LocaleCode",
    "StringKey",
    "TableName",
]

LocaleCode: TypeAlias = str
"""Localization tag or locale code (e.g., 'en', 'en-GB', 'Base', 'pt_BR')."""

TableName: TypeAlias = str
"""String table name without extension (e.g., 'Localizable', 'Errors')."""

StringKey: TypeAlias = str
"""Key of an entry in a string table."""
