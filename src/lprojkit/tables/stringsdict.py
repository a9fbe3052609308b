"""Reader and formatter for .stringsdict plural tables.

A .stringsdict file is a property list mapping each key to a format
string and one rule dictionary per variable:

    files-count:
        NSStringLocalizedFormatKey: "%#@files@ selected"
        files:
            NSStringFormatSpecTypeKey: NSStringPluralRuleType
            NSStringFormatValueTypeKey: d
            one: "%d file"
            other: "%d files"

Formatting picks the variant for the CLDR plural category of the count,
fills its printf-style specifiers with the count converted to the
NSStringFormatValueTypeKey type, and substitutes the result for
``%#@files@``. Remaining specifiers in the format key get the raw count.

Python 3.13+.
"""

from __future__ import annotations

import plistlib
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from xml.parsers.expat import ExpatError

from lprojkit.diagnostics import ErrorTemplate, TableLoadError
from lprojkit.tables.plural_rules import select_plural_category

__all__ = [
    "FORMAT_KEY",
    "PluralEntry",
    "PluralVariable",
    "format_printf",
    "parse_stringsdict",
]

FORMAT_KEY = "NSStringLocalizedFormatKey"
_SPEC_TYPE_KEY = "NSStringFormatSpecTypeKey"
_VALUE_TYPE_KEY = "NSStringFormatValueTypeKey"
_PLURAL_RULE_TYPE = "NSStringPluralRuleType"
_CATEGORIES = ("zero", "one", "two", "few", "many", "other")

_VARIABLE_RE = re.compile(r"%#@([^@]+)@")
# No "#" flag: unexpanded %#@var@ placeholders must not match.
_PRINTF_RE = re.compile(
    r"%(?:\d+\$)?(?P<flags>[-+ 0]*)(?P<width>\d*)(?:\.(?P<precision>\d+))?"
    r"(?:hh|h|ll|l|q|z|t|j|L)?(?P<conversion>[diouxXeEfgGaAcsDUO@%])"
)
_PYTHON_CONVERSIONS = {
    "@": "s", "c": "s", "u": "d", "D": "d", "U": "d", "O": "o", "a": "e", "A": "E",
}
_INTEGER_CONVERSIONS = frozenset("diouxXcDUO")
_FLOAT_CONVERSIONS = frozenset("eEfgGaA")


@dataclass(frozen=True, slots=True)
class PluralVariable:
    """Plural rule for one ``%#@name@`` variable.

    Attributes:
        name: Variable name referenced from the format key
        value_type: printf conversion of the count (e.g., "d")
        forms: Variant per CLDR plural category
    """

    name: str
    value_type: str = "d"
    forms: Mapping[str, str] = field(default_factory=dict)

    def select(self, count: int | float | Decimal, locale: str) -> str:
        """Pick the variant for count.

        An explicit "zero" variant wins for 0 even in languages whose CLDR
        rules have no zero category. Missing categories fall back to "other".
        """
        if count == 0 and "zero" in self.forms:
            return self.forms["zero"]
        category = select_plural_category(count, locale)
        return self.forms.get(category, self.forms.get("other", ""))

    def coerce(self, count: int | float | Decimal) -> int | float | Decimal:
        """Convert count to the number type value_type names.

        Length modifiers are ignored: "ld" and "d" both yield an int.

        Example:
            >>> PluralVariable("n", "d").coerce(2.0)
            2
        """
        conversion = self.value_type[-1:]
        if conversion in _INTEGER_CONVERSIONS:
            return int(count)
        if conversion in _FLOAT_CONVERSIONS:
            return float(count)
        return count

    def format(self, count: int | float | Decimal, locale: str) -> str:
        """Select the variant for count and substitute the coerced count into it."""
        return format_printf(self.select(count, locale), self.coerce(count))


@dataclass(frozen=True, slots=True)
class PluralEntry:
    """One .stringsdict key."""

    key: str
    format_key: str
    variables: Mapping[str, PluralVariable] = field(default_factory=dict)

    def format(self, count: int | float | Decimal, locale: str) -> str:
        """Format the entry for count using the plural rules of locale.

        Example:
            >>> entry = PluralEntry(
            ...     "files", "%#@n@",
            ...     {"n": PluralVariable("n", "d", {"one": "%d file", "other": "%d files"})},
            ... )
            >>> entry.format(3, "en")
            '3 files'
        """

        def expand(match: re.Match[str]) -> str:
            variable = self.variables.get(match.group(1))
            if variable is None:
                return match.group(0)
            # Escape literal percents so the final pass leaves them alone.
            return variable.format(count, locale).replace("%", "%%")

        return format_printf(_VARIABLE_RE.sub(expand, self.format_key), count)


def format_printf(template: str, value: int | float | Decimal) -> str:
    """Substitute value into every printf-style specifier of template.

    Example:
        >>> format_printf("%d of %@ (100%%)", 7)
        '7 of 7 (100%)'
    """

    def substitute(match: re.Match[str]) -> str:
        conversion = match.group("conversion")
        if conversion == "%":
            return "%"
        spec = "%" + match.group("flags") + match.group("width")
        if match.group("precision") is not None:
            spec += "." + match.group("precision")
        conversion = _PYTHON_CONVERSIONS.get(conversion, conversion)
        if conversion == "s":
            return (spec + "s") % value
        if conversion in "dioxX":
            return (spec + conversion) % int(value)
        return (spec + conversion) % float(value)

    return _PRINTF_RE.sub(substitute, template)


def _parse_variable(key: str, name: str, raw: object, source_path: str) -> PluralVariable:
    if not isinstance(raw, dict):
        raise TableLoadError(
            ErrorTemplate.stringsdict_entry_invalid(key, f"variable '{name}' is not a dictionary"),
            source_path=source_path,
        )
    spec_type = raw.get(_SPEC_TYPE_KEY, _PLURAL_RULE_TYPE)
    if spec_type != _PLURAL_RULE_TYPE:
        raise TableLoadError(
            ErrorTemplate.stringsdict_entry_invalid(key, f"unsupported rule type '{spec_type}'"),
            source_path=source_path,
        )
    forms = {category: str(raw[category]) for category in _CATEGORIES if category in raw}
    return PluralVariable(name=name, value_type=str(raw.get(_VALUE_TYPE_KEY, "d")), forms=forms)


def parse_stringsdict(data: bytes, *, source_path: str = "") -> dict[str, PluralEntry]:
    """Parse the raw bytes of a .stringsdict file.

    Args:
        data: XML or binary property list
        source_path: Path used in error diagnostics

    Returns:
        Mapping of keys to plural entries

    Raises:
        TableLoadError: If the property list is corrupt or an entry is malformed
    """
    try:
        root = plistlib.loads(data)
    except (ExpatError, ValueError) as e:
        raise TableLoadError(
            ErrorTemplate.plist_invalid(source_path, str(e)), source_path=source_path
        ) from e
    if not isinstance(root, dict):
        raise TableLoadError(
            ErrorTemplate.plist_invalid(source_path, f"root is {type(root).__name__}"),
            source_path=source_path,
        )

    entries: dict[str, PluralEntry] = {}
    for key, raw in root.items():
        if not isinstance(raw, dict) or FORMAT_KEY not in raw:
            raise TableLoadError(
                ErrorTemplate.stringsdict_entry_invalid(key, f"missing {FORMAT_KEY}"),
                source_path=source_path,
            )
        format_key = str(raw[FORMAT_KEY])
        variables = {
            name: _parse_variable(key, name, raw[name], source_path)
            for name in _VARIABLE_RE.findall(format_key)
            if name in raw
        }
        entries[key] = PluralEntry(key=key, format_key=format_key, variables=variables)
    return entries
