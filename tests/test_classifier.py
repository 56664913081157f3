"""Tests for classify_count - the whole-number decision table."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from countphrase import GrammaticalCategory, classify_count
from tests.strategies import counts_by_category


class TestClassifyCountTable:
    """Explicit category table."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            (0, GrammaticalCategory.ZERO),
            (1, GrammaticalCategory.ONE),
            (2, GrammaticalCategory.TWO),
            (3, GrammaticalCategory.FEW),
            (9, GrammaticalCategory.FEW),
            (10, GrammaticalCategory.FEW),
            (11, GrammaticalCategory.MANY),
            (100, GrammaticalCategory.MANY),
            (10**30, GrammaticalCategory.MANY),
        ],
    )
    def test_category(self, count: int, expected: GrammaticalCategory) -> None:
        """Each count maps to exactly one category."""
        assert classify_count(count) is expected

    def test_negative_rejected(self) -> None:
        """Classification is defined on magnitudes only."""
        with pytest.raises(ValueError, match="non-negative"):
            classify_count(-1)

    def test_categories_are_cldr_names(self) -> None:
        """Category values reuse CLDR plural category names."""
        assert [str(c) for c in GrammaticalCategory] == ["zero", "one", "two", "few", "many"]


class TestClassifyCountProperties:
    """Properties over the whole count range."""

    @given(case=counts_by_category())
    def test_magnitude_determines_category(
        self, case: tuple[GrammaticalCategory, int]
    ) -> None:
        """abs(count) lands in the category its range predicts."""
        expected, count = case
        assert classify_count(abs(count)) is expected

    @given(n=st.integers(min_value=0, max_value=10**6))
    def test_monotonic(self, n: int) -> None:
        """Categories never go backwards as the count grows."""
        order = list(GrammaticalCategory)
        assert order.index(classify_count(n)) <= order.index(classify_count(n + 1))
