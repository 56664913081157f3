"""Property-based tests for format_count_phrase.

Properties hold for all noun forms and all supported locales; expected
numerals are taken from the same numeral formatter the composer uses.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from countphrase import (
    GrammaticalCategory,
    InvalidCountError,
    InvalidNounFormsError,
    NounForms,
    format_count,
)
from countphrase.constants import ZERO_MARKER
from countphrase.runtime.numerals import DEFAULT_NUMERAL_FORMATTER
from tests.strategies import (
    blank_strings,
    counts_by_category,
    fractional_counts,
    noun_forms,
    supported_locales,
    whole_counts,
)


def render(value: float, locale: str) -> str:
    return DEFAULT_NUMERAL_FORMATTER.render(value, locale)


class TestCategoryProperties:
    """Output per category, for all noun forms and locales."""

    @given(forms=noun_forms, locale=supported_locales)
    def test_one(self, forms: NounForms, locale: str) -> None:
        """Count 1 is the bare singular; with the numeral, render(1) + singular."""
        assert format_count(1, forms, locale=locale) == forms.singular
        assert format_count(1, forms, locale=locale, always_show_number=True) == (
            f"{render(1, locale)} {forms.singular}"
        )

    @given(forms=noun_forms, locale=supported_locales)
    def test_two(self, forms: NounForms, locale: str) -> None:
        """Count 2 is the bare dual; with the numeral, render(2) + dual."""
        assert format_count(2, forms, locale=locale) == forms.dual
        assert format_count(2, forms, locale=locale, always_show_number=True) == (
            f"{render(2, locale)} {forms.dual}"
        )

    @given(forms=noun_forms, locale=supported_locales)
    def test_zero(self, forms: NounForms, locale: str) -> None:
        """Count 0 is the zero marker; with the numeral, render(0) + singular."""
        assert format_count(0, forms, locale=locale) == f"{ZERO_MARKER} {forms.singular}"
        assert format_count(0, forms, locale=locale, always_show_number=True) == (
            f"{render(0, locale)} {forms.singular}"
        )

    @given(
        forms=noun_forms,
        locale=supported_locales,
        n=st.integers(min_value=3, max_value=10),
        show=st.booleans(),
    )
    def test_few(self, forms: NounForms, locale: str, n: int, show: bool) -> None:
        """Counts 3-10 use the plural regardless of always_show_number."""
        assert format_count(n, forms, locale=locale, always_show_number=show) == (
            f"{render(n, locale)} {forms.plural}"
        )

    @given(
        forms=noun_forms,
        locale=supported_locales,
        n=st.integers(min_value=11, max_value=10**12),
        show=st.booleans(),
    )
    def test_many(self, forms: NounForms, locale: str, n: int, show: bool) -> None:
        """Counts above 10 revert to the singular."""
        assert format_count(n, forms, locale=locale, always_show_number=show) == (
            f"{render(n, locale)} {forms.singular}"
        )

    @given(forms=noun_forms, locale=supported_locales, c=fractional_counts, show=st.booleans())
    def test_fractional(self, forms: NounForms, locale: str, c: float, show: bool) -> None:
        """Non-integer counts always show the numeral with the singular."""
        assert format_count(c, forms, locale=locale, always_show_number=show) == (
            f"{render(abs(c), locale)} {forms.singular}"
        )


class TestSignIndependence:
    """format(c) == format(-c)."""

    @given(forms=noun_forms, locale=supported_locales, c=whole_counts, show=st.booleans())
    def test_whole(self, forms: NounForms, locale: str, c: int, show: bool) -> None:
        """Negating a whole count never changes the phrase."""
        event(f"negative={c < 0}")
        assert format_count(c, forms, locale=locale, always_show_number=show) == format_count(
            -c, forms, locale=locale, always_show_number=show
        )

    @given(forms=noun_forms, c=fractional_counts)
    def test_fractional(self, forms: NounForms, c: float) -> None:
        """Negating a fractional count never changes the phrase."""
        assert format_count(c, forms) == format_count(-c, forms)

    @given(case=counts_by_category(GrammaticalCategory.MANY))
    def test_numeral_is_magnitude(self, case: tuple[GrammaticalCategory, int]) -> None:
        """The shown numeral is the rendering of abs(count), never a signed value."""
        _, count = case
        forms = NounForms(singular="سيارة", dual="سيارتان", plural="سيارات")
        result = format_count(count, forms, locale="en-US")
        assert result == f"{render(abs(count), 'en-US')} سيارة"
        assert not result.startswith("-")


class TestRejection:
    """Invalid input never produces output."""

    @given(
        blank=blank_strings,
        form=st.sampled_from(["singular", "dual", "plural"]),
        count=whole_counts,
    )
    def test_blank_noun_form(self, blank: str, form: str, count: int) -> None:
        """Any blank form is rejected, whatever the count."""
        forms = {"singular": "سيارة", "dual": "سيارتان", "plural": "سيارات", form: blank}
        with pytest.raises(InvalidNounFormsError):
            format_count(count, forms)

    @given(
        forms=noun_forms,
        count=st.sampled_from([float("nan"), float("inf"), float("-inf")]),
        show=st.booleans(),
    )
    def test_non_finite_count(self, forms: NounForms, count: float, show: bool) -> None:
        """NaN and infinities are rejected."""
        with pytest.raises(InvalidCountError):
            format_count(count, forms, always_show_number=show)
