"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Each template returns a Diagnostic; callers wrap it in the matching
    CountPhraseError subclass.
    """

    # Request errors

    @staticmethod
    def request_missing() -> Diagnostic:
        """Request value is None."""
        return Diagnostic(
            code=DiagnosticCode.REQUEST_MISSING,
            message="Request is required",
            hint="Pass a PhraseRequest or a mapping with 'count' and 'noun_forms'",
        )

    @staticmethod
    def request_not_a_record(received_type: str) -> Diagnostic:
        """Request is neither a PhraseRequest nor a mapping.

        Args:
            received_type: Type name of the value received

        Returns:
            Diagnostic for REQUEST_NOT_A_RECORD
        """
        return Diagnostic(
            code=DiagnosticCode.REQUEST_NOT_A_RECORD,
            message="Request must be a PhraseRequest or a mapping",
            expected_type="PhraseRequest | Mapping",
            received_type=received_type,
        )

    @staticmethod
    def option_type_invalid(field_name: str, expected_type: str, received_type: str) -> Diagnostic:
        """Request option has the wrong type.

        Args:
            field_name: Option name
            expected_type: Type the option must have
            received_type: Type name of the value received

        Returns:
            Diagnostic for OPTION_TYPE_INVALID
        """
        msg = f"Option '{field_name}' must be of type {expected_type}"
        return Diagnostic(
            code=DiagnosticCode.OPTION_TYPE_INVALID,
            message=msg,
            field_name=field_name,
            expected_type=expected_type,
            received_type=received_type,
        )

    # Count errors

    @staticmethod
    def count_missing() -> Diagnostic:
        """Request has no count."""
        return Diagnostic(
            code=DiagnosticCode.COUNT_MISSING,
            message="count is required",
            field_name="count",
        )

    @staticmethod
    def count_not_numeric(received_type: str) -> Diagnostic:
        """Count is not a real number.

        Args:
            received_type: Type name of the value received

        Returns:
            Diagnostic for COUNT_NOT_NUMERIC
        """
        return Diagnostic(
            code=DiagnosticCode.COUNT_NOT_NUMERIC,
            message="count must be a valid number",
            field_name="count",
            expected_type="int | float | Decimal | Fraction",
            received_type=received_type,
            hint="Booleans and numeric strings are not accepted",
        )

    @staticmethod
    def count_not_finite(value: object) -> Diagnostic:
        """Count is NaN or infinite.

        Args:
            value: The offending count

        Returns:
            Diagnostic for COUNT_NOT_FINITE
        """
        msg = f"count must be finite, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.COUNT_NOT_FINITE,
            message=msg,
            field_name="count",
        )

    # Noun form errors

    @staticmethod
    def noun_forms_missing() -> Diagnostic:
        """Noun forms are None or absent from the request."""
        return Diagnostic(
            code=DiagnosticCode.NOUN_FORMS_MISSING,
            message="nounForms is required",
            field_name="noun_forms",
            hint="Provide singular, dual, and plural forms of the noun",
        )

    @staticmethod
    def noun_forms_not_a_record(received_type: str) -> Diagnostic:
        """Noun forms are neither NounForms nor a mapping.

        Args:
            received_type: Type name of the value received

        Returns:
            Diagnostic for NOUN_FORMS_NOT_A_RECORD
        """
        return Diagnostic(
            code=DiagnosticCode.NOUN_FORMS_NOT_A_RECORD,
            message="nounForms must be a NounForms or a mapping",
            field_name="noun_forms",
            expected_type="NounForms | Mapping",
            received_type=received_type,
        )

    @staticmethod
    def noun_form_missing(form: str) -> Diagnostic:
        """A required noun form key is absent.

        Args:
            form: Name of the missing form (singular, dual, plural)

        Returns:
            Diagnostic for NOUN_FORM_MISSING
        """
        msg = f"nounForms must contain singular, dual, and plural properties; missing '{form}'"
        return Diagnostic(
            code=DiagnosticCode.NOUN_FORM_MISSING,
            message=msg,
            field_name=f"noun_forms.{form}",
        )

    @staticmethod
    def noun_form_not_string(form: str, received_type: str) -> Diagnostic:
        """A noun form is not a string.

        Args:
            form: Name of the form
            received_type: Type name of the value received

        Returns:
            Diagnostic for NOUN_FORM_NOT_STRING
        """
        msg = f"Noun form '{form}' must be a string"
        return Diagnostic(
            code=DiagnosticCode.NOUN_FORM_NOT_STRING,
            message=msg,
            field_name=f"noun_forms.{form}",
            expected_type="str",
            received_type=received_type,
        )

    @staticmethod
    def noun_form_blank(form: str) -> Diagnostic:
        """A noun form is empty after trimming whitespace.

        Args:
            form: Name of the form

        Returns:
            Diagnostic for NOUN_FORM_BLANK
        """
        msg = f"Noun form '{form}' is blank"
        return Diagnostic(
            code=DiagnosticCode.NOUN_FORM_BLANK,
            message=msg,
            field_name=f"noun_forms.{form}",
            hint=f"Provide the {form} inflection of the noun",
        )

    # Locale errors

    @staticmethod
    def locale_not_string(received_type: str) -> Diagnostic:
        """Locale is not a string.

        Args:
            received_type: Type name of the value received

        Returns:
            Diagnostic for LOCALE_NOT_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_STRING,
            message="locale must be a string",
            field_name="locale",
            expected_type="str",
            received_type=received_type,
        )

    @staticmethod
    def locale_blank() -> Diagnostic:
        """Locale is empty after trimming whitespace."""
        return Diagnostic(
            code=DiagnosticCode.LOCALE_BLANK,
            message="locale must not be blank",
            field_name="locale",
            hint="Omit locale to use the default, or pass a BCP-47 tag such as 'ar-EG'",
        )

    @staticmethod
    def locale_unsupported(locale_code: str) -> Diagnostic:
        """Locale is not recognized by the numeral formatter.

        Args:
            locale_code: The rejected locale identifier

        Returns:
            Diagnostic for LOCALE_UNSUPPORTED
        """
        msg = f"Unknown locale identifier '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNSUPPORTED,
            message=msg,
            field_name="locale",
            hint="Use a CLDR locale identifier such as 'ar-EG', 'ar-SA', or 'en-US'",
        )

    # Formatting errors

    @staticmethod
    def numeral_formatting_failed(value: object, locale_code: str, reason: str) -> Diagnostic:
        """Numeral rendering failed inside the formatting capability.

        Args:
            value: Number that failed to render
            locale_code: Locale used for rendering
            reason: Underlying error text

        Returns:
            Diagnostic for NUMERAL_FORMATTING_FAILED
        """
        msg = f"Number formatting failed for '{value}' in locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.NUMERAL_FORMATTING_FAILED,
            message=msg,
        )
