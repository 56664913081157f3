"""countphrase exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Every failure is terminal for the single call that raised it.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CountPhraseError(Exception):
    """Base exception for all countphrase errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CountPhraseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidRequestError(CountPhraseError):
    """The request is absent, not a record, or carries a mistyped option."""


class InvalidCountError(CountPhraseError):
    """Count is missing, non-numeric, NaN, or infinite."""


class InvalidNounFormsError(CountPhraseError):
    """Noun forms are absent, not a record, or a form is missing or blank."""


class InvalidLocaleError(CountPhraseError):
    """Locale is not a string, blank, or unsupported by the numeral formatter."""


class NumeralFormattingError(CountPhraseError):
    """Raised when locale-aware numeral rendering fails.

    Attributes:
        fallback_value: Plain str() of the value that failed to render
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize NumeralFormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Plain rendering of the value, for callers that degrade
        """
        super().__init__(message)
        self.fallback_value = fallback_value
