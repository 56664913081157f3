"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Request errors (request shape, option types)
        2000-2999: Count errors (missing, non-numeric, non-finite)
        3000-3999: Noun form errors (missing, wrong type, blank)
        4000-4999: Locale errors (wrong type, blank, unsupported)
        5000-5999: Formatting errors (numeral rendering failures)
    """

    # Request errors (1000-1999)
    REQUEST_MISSING = 1001
    REQUEST_NOT_A_RECORD = 1002
    OPTION_TYPE_INVALID = 1003

    # Count errors (2000-2999)
    COUNT_MISSING = 2001
    COUNT_NOT_NUMERIC = 2002
    COUNT_NOT_FINITE = 2003

    # Noun form errors (3000-3999)
    NOUN_FORMS_MISSING = 3001
    NOUN_FORMS_NOT_A_RECORD = 3002
    NOUN_FORM_MISSING = 3003
    NOUN_FORM_NOT_STRING = 3004
    NOUN_FORM_BLANK = 3005

    # Locale errors (4000-4999)
    LOCALE_NOT_STRING = 4001
    LOCALE_BLANK = 4002
    LOCALE_UNSUPPORTED = 4003

    # Formatting errors (5000-5999)
    NUMERAL_FORMATTING_FAILED = 5001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        field_name: Request field that caused the error
        expected_type: Expected type for the field
        received_type: Actual type received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    field_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[NOUN_FORM_BLANK]: Noun form 'dual' is blank
              = field: noun_forms.dual
              = help: Provide the dual inflection of the noun

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
