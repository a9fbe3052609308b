"""String table formats: .strings and .stringsdict.

Submodules:
    strings_parser - .strings text parser and property list fallback
    stringsdict    - .stringsdict plural entries and printf substitution
    plural_rules   - CLDR plural category selection via Babel
    table          - StringTable merging both files of one table

Python 3.13+.
"""

from lprojkit.tables.plural_rules import select_plural_category
from lprojkit.tables.strings_parser import decode_strings, parse_strings, parse_strings_data
from lprojkit.tables.stringsdict import (
    PluralEntry,
    PluralVariable,
    format_printf,
    parse_stringsdict,
)
from lprojkit.tables.table import StringTable, load_table

__all__ = [
    "PluralEntry",
    "PluralVariable",
    "StringTable",
    "decode_strings",
    "format_printf",
    "load_table",
    "parse_stringsdict",
    "parse_strings",
    "parse_strings_data",
    "select_plural_category",
]
