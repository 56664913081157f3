"""countphrase runtime package.

Provides count classification and locale-aware numeral rendering.

Python 3.13+.
"""

from .classifier import classify_count
from .numerals import (
    DEFAULT_NUMERAL_FORMATTER,
    BabelNumeralFormatter,
    NumeralContext,
    NumeralFormatter,
)

__all__ = [
    "DEFAULT_NUMERAL_FORMATTER",
    "BabelNumeralFormatter",
    "NumeralContext",
    "NumeralFormatter",
    "classify_count",
]
