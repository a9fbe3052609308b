"""Diagnostic system for lprojkit errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import LprojError, StringsSyntaxError, TableLoadError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "LprojError",
    "SourceSpan",
    "StringsSyntaxError",
    "TableLoadError",
]
