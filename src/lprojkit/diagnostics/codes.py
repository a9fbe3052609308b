"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Syntax errors (.strings parser failures)
        4000-4999: Table load errors (decoding, property lists, size limits)
        5000-5999: Bundle errors (bundle metadata)
    """

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    UNTERMINATED_STRING = 3002
    UNTERMINATED_COMMENT = 3003
    EXPECTED_TOKEN = 3004
    INVALID_ESCAPE = 3005

    # Table load errors (4000-4999)
    TABLE_DECODE_FAILED = 4001
    TABLE_TOO_LARGE = 4002
    PLIST_INVALID = 4003
    STRINGSDICT_ENTRY_INVALID = 4004

    # Bundle errors (5000-5999)
    INFO_PLIST_UNREADABLE = 5001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at(cls, source: str, pos: int) -> SourceSpan:
        """Build a zero-width span at a character offset of source.

        Only "\\n" is treated as a line delimiter, so CRLF files report
        correct lines.
        """
        pos = min(max(pos, 0), len(source))
        line = source.count("\n", 0, pos) + 1
        column = pos - (source.rfind("\n", 0, pos) + 1) + 1
        return cls(start=pos, end=pos, line=line, column=column)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for errors without a position)
        hint: Suggestion for fixing the error
        source_path: Table file the error refers to, if known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[UNTERMINATED_STRING]: Unterminated quoted string
              --> en.lproj/Localizable.strings:3:9
              = help: Close the string with a double quote

        Control characters in the message are escaped with repr() so that
        content copied from table files cannot inject terminal sequences.
        """
        message = self.message
        if not message.isprintable():
            message = repr(message)[1:-1]
        parts = [f"{self.severity}[{self.code.name}]: {message}"]

        location = self.source_path
        if self.span is not None:
            position = f"{self.span.line}:{self.span.column}"
            location = f"{location}:{position}" if location else f"line {position}"
        if location:
            parts.append(f"  --> {location}")

        if self.hint:
            parts.append(f"  = help: {self.hint}")

        return "\n".join(parts)
