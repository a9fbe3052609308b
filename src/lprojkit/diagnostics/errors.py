"""lprojkit exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LprojError(Exception):
    """Base exception for all lprojkit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LprojError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class StringsSyntaxError(LprojError):
    """Malformed .strings source.

    The diagnostic span points at the offending character.
    """


class TableLoadError(LprojError):
    """A table file exists but cannot be decoded or is not a valid property list.

    Attributes:
        source_path: Path of the table file that failed to load
    """

    def __init__(self, message: str | Diagnostic, *, source_path: str = "") -> None:
        """Initialize TableLoadError.

        Args:
            message: Error message string OR Diagnostic object
            source_path: Path of the table file
        """
        super().__init__(message)
        self.source_path = source_path
