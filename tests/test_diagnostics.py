"""Tests for the diagnostics package - error hierarchy and formatting."""

from __future__ import annotations

import json

import pytest

from countphrase import (
    CountPhraseError,
    InvalidCountError,
    InvalidLocaleError,
    InvalidNounFormsError,
    InvalidRequestError,
    NumeralFormattingError,
)
from countphrase.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
)


class TestErrorHierarchy:
    """All errors share one base class."""

    @pytest.mark.parametrize(
        "error_cls",
        [
            InvalidRequestError,
            InvalidCountError,
            InvalidNounFormsError,
            InvalidLocaleError,
        ],
    )
    def test_subclasses_base(self, error_cls: type[CountPhraseError]) -> None:
        """Callers can catch every validation failure with CountPhraseError."""
        assert issubclass(error_cls, CountPhraseError)

    def test_plain_message(self) -> None:
        """A string message leaves diagnostic unset."""
        error = InvalidCountError("count must be a valid number")
        assert error.diagnostic is None
        assert str(error) == "count must be a valid number"

    def test_diagnostic_message(self) -> None:
        """A Diagnostic message is kept and rendered into str()."""
        diagnostic = ErrorTemplate.locale_unsupported("xx")
        error = InvalidLocaleError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error).startswith("error[LOCALE_UNSUPPORTED]: Unknown locale identifier 'xx'")

    def test_formatting_error_fallback(self) -> None:
        """NumeralFormattingError carries the plain rendering of the value."""
        error = NumeralFormattingError("failed", fallback_value="3.7")
        assert isinstance(error, CountPhraseError)
        assert error.fallback_value == "3.7"


class TestDiagnosticCodes:
    """Codes are unique and grouped by thousand."""

    def test_codes_unique(self) -> None:
        """No two codes share a value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("prefix", "group"),
        [
            ("REQUEST_", 1),
            ("OPTION_", 1),
            ("COUNT_", 2),
            ("NOUN_", 3),
            ("LOCALE_", 4),
            ("NUMERAL_", 5),
        ],
    )
    def test_code_groups(self, prefix: str, group: int) -> None:
        """Each error family uses its own thousand."""
        for code in DiagnosticCode:
            if code.name.startswith(prefix):
                assert code.value // 1000 == group


class TestDiagnosticFormatter:
    """Rust, simple, and JSON output."""

    def test_rust_format(self) -> None:
        """Default output resembles a compiler diagnostic."""
        output = ErrorTemplate.noun_form_blank("dual").format_error()
        assert output == (
            "error[NOUN_FORM_BLANK]: Noun form 'dual' is blank\n"
            "  = field: noun_forms.dual\n"
            "  = help: Provide the dual inflection of the noun"
        )

    def test_rust_format_with_types(self) -> None:
        """Expected and received types are listed."""
        output = DiagnosticFormatter().format(ErrorTemplate.count_not_numeric("str"))
        assert "  = expected: int | float | Decimal | Fraction" in output
        assert "  = received: str" in output

    def test_simple_format(self) -> None:
        """SIMPLE output is a single line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.locale_blank()) == (
            "LOCALE_BLANK: locale must not be blank"
        )

    def test_json_format(self) -> None:
        """JSON output keeps non-ASCII text readable."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        diagnostic = Diagnostic(
            code=DiagnosticCode.NOUN_FORM_BLANK,
            message="Noun form 'سيارة' is blank",
            field_name="noun_forms.singular",
        )
        output = formatter.format(diagnostic)
        assert "سيارة" in output
        data = json.loads(output)
        assert data == {
            "code": "NOUN_FORM_BLANK",
            "code_value": 3005,
            "message": "Noun form 'سيارة' is blank",
            "severity": "error",
            "field_name": "noun_forms.singular",
        }

    def test_sanitize_truncates(self) -> None:
        """Long messages are truncated when sanitizing."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        diagnostic = ErrorTemplate.locale_unsupported("x" * 50)
        assert formatter.format(diagnostic) == "LOCALE_UNSUPPORTED: Unknown lo..."

    def test_color(self) -> None:
        """Color mode wraps severity in ANSI codes."""
        formatter = DiagnosticFormatter(color=True)
        assert formatter.format(ErrorTemplate.count_missing()).startswith("\033[1;31merror\033[0m")

    def test_warning_severity(self) -> None:
        """Warnings are labelled as such."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.LOCALE_UNSUPPORTED, message="m", severity="warning"
        )
        assert DiagnosticFormatter().format(diagnostic) == "warning[LOCALE_UNSUPPORTED]: m"

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all([ErrorTemplate.count_missing(), ErrorTemplate.locale_blank()])
        assert output == "COUNT_MISSING: count is required\n\nLOCALE_BLANK: locale must not be blank"

    def test_diagnostic_str_is_message(self) -> None:
        """str(Diagnostic) is the bare message."""
        assert str(ErrorTemplate.request_missing()) == "Request is required"
