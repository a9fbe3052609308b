"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here so that messages stay consistent and
    tests can assert on codes rather than message text.
    """

    @staticmethod
    def unexpected_eof(span: SourceSpan, expected: str) -> Diagnostic:
        """Source ended while a token was still expected."""
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=f"Unexpected end of input, expected {expected}",
            span=span,
            hint="Every entry must end with ';'",
        )

    @staticmethod
    def unterminated_string(span: SourceSpan) -> Diagnostic:
        """Quoted string has no closing quote."""
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message="Unterminated quoted string",
            span=span,
            hint="Close the string with a double quote",
        )

    @staticmethod
    def unterminated_comment(span: SourceSpan) -> Diagnostic:
        """Block comment has no closing '*/'."""
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_COMMENT,
            message="Unterminated block comment",
            span=span,
            hint="Close the comment with '*/'",
        )

    @staticmethod
    def expected_token(span: SourceSpan, expected: str, found: str) -> Diagnostic:
        """A specific token was required."""
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_TOKEN,
            message=f"Expected {expected}, found {found!r}",
            span=span,
        )

    @staticmethod
    def invalid_escape(span: SourceSpan, sequence: str) -> Diagnostic:
        """Malformed backslash escape inside a quoted string."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_ESCAPE,
            message=f"Invalid escape sequence {sequence!r}",
            span=span,
            hint="Unicode escapes need four hex digits: \\U00e9",
        )

    @staticmethod
    def decode_failed(source_path: str, reason: str) -> Diagnostic:
        """Table bytes are not valid UTF-8 or UTF-16."""
        return Diagnostic(
            code=DiagnosticCode.TABLE_DECODE_FAILED,
            message=f"Cannot decode table: {reason}",
            source_path=source_path,
            hint="Save .strings files as UTF-8 or UTF-16 with a byte order mark",
        )

    @staticmethod
    def table_too_large(source_path: str, size: int, limit: int) -> Diagnostic:
        """Table file exceeds the configured size limit."""
        return Diagnostic(
            code=DiagnosticCode.TABLE_TOO_LARGE,
            message=f"Table is {size} bytes, limit is {limit} bytes",
            source_path=source_path,
        )

    @staticmethod
    def plist_invalid(source_path: str, reason: str) -> Diagnostic:
        """Property list could not be parsed or has the wrong root type."""
        return Diagnostic(
            code=DiagnosticCode.PLIST_INVALID,
            message=f"Invalid property list: {reason}",
            source_path=source_path,
            hint="The root object must be a dictionary",
        )

    @staticmethod
    def stringsdict_entry_invalid(key: str, reason: str) -> Diagnostic:
        """A .stringsdict entry is missing required keys."""
        return Diagnostic(
            code=DiagnosticCode.STRINGSDICT_ENTRY_INVALID,
            message=f"Invalid stringsdict entry '{key}': {reason}",
            hint="Each entry needs NSStringLocalizedFormatKey and one dictionary per variable",
        )

    @staticmethod
    def info_plist_unreadable(source_path: str, reason: str) -> Diagnostic:
        """Info.plist exists but cannot be read."""
        return Diagnostic(
            code=DiagnosticCode.INFO_PLIST_UNREADABLE,
            message=f"Cannot read bundle metadata: {reason}",
            source_path=source_path,
            severity="warning",
        )
