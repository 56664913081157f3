"""Diagnostic system for countphrase errors.

Provides structured error diagnostics with codes, hints, and typed fields.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CountPhraseError,
    InvalidCountError,
    InvalidLocaleError,
    InvalidNounFormsError,
    InvalidRequestError,
    NumeralFormattingError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CountPhraseError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidCountError",
    "InvalidLocaleError",
    "InvalidNounFormsError",
    "InvalidRequestError",
    "NumeralFormattingError",
    "OutputFormat",
]
