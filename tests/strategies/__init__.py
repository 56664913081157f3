"""Hypothesis strategies for countphrase property-based testing.

Usage:
    from tests.strategies import noun_forms, supported_locales, whole_counts
"""

from .phrase import (
    blank_strings,
    counts_by_category,
    fractional_counts,
    noun_form_texts,
    noun_forms,
    supported_locales,
    whole_counts,
)

__all__ = [
    "blank_strings",
    "counts_by_category",
    "fractional_counts",
    "noun_form_texts",
    "noun_forms",
    "supported_locales",
    "whole_counts",
]
