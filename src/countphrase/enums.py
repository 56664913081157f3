"""Enumerations for countphrase type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class GrammaticalCategory(StrEnum):
    """Count-driven agreement class selecting the noun form and numeral display.

    Values reuse the CLDR plural category names.

    StrEnum provides automatic string conversion: str(GrammaticalCategory.FEW) == "few"
    """

    ZERO = "zero"
    """Count 0: zero marker + singular (لا سيارة)"""

    ONE = "one"
    """Count 1: bare singular (سيارة)"""

    TWO = "two"
    """Count 2: bare dual (سيارتان)"""

    FEW = "few"
    """Counts 3-10: numeral + plural (٥ سيارات)"""

    MANY = "many"
    """Counts 11+: numeral + singular (١١ سيارة)"""


__all__ = [
    "GrammaticalCategory",
]
