"""countphrase - Count-aware noun phrases for five-category number agreement.

Formats a count together with a noun for Arabic-style agreement, where the
noun form depends on whether the count is zero, one, two, few (3-10), or
many (11+). Numerals are rendered in the locale's own digits and separators
using Babel's CLDR data.

Public API:
    format_count_phrase - Format a PhraseRequest (or mapping) into a phrase
    format_count - Keyword form of format_count_phrase
    CountPhraseFormatter - Formatter bound to one locale
    classify_count - Whole-number count to GrammaticalCategory
    NounForms - Singular, dual, and plural inflections
    PhraseRequest - One formatting request
    GrammaticalCategory - ZERO, ONE, TWO, FEW, MANY

Exceptions:
    CountPhraseError - Base exception class
    InvalidRequestError - Request absent, not a record, or mistyped option
    InvalidCountError - Count missing, non-numeric, NaN, or infinite
    InvalidNounFormsError - Noun forms missing or blank
    InvalidLocaleError - Locale blank or unsupported
    NumeralFormattingError - Numeral rendering failed

Submodules:
    countphrase.diagnostics - Error types, codes, and diagnostic formatting
    countphrase.runtime.numerals - NumeralFormatter protocol and Babel adapter
    countphrase.locale_utils - Locale normalization and support queries
"""

from .constants import DEFAULT_LOCALE
from .diagnostics import (
    CountPhraseError,
    InvalidCountError,
    InvalidLocaleError,
    InvalidNounFormsError,
    InvalidRequestError,
    NumeralFormattingError,
)
from .enums import GrammaticalCategory
from .models import NounForms, PhraseRequest
from .phrase import (
    CountPhraseFormatter,
    format_count,
    format_count_phrase,
    get_arabic_count_phrase,
)
from .runtime import BabelNumeralFormatter, NumeralFormatter, classify_count

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("countphrase")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_LOCALE",
    "BabelNumeralFormatter",
    "CountPhraseError",
    "CountPhraseFormatter",
    "GrammaticalCategory",
    "InvalidCountError",
    "InvalidLocaleError",
    "InvalidNounFormsError",
    "InvalidRequestError",
    "NounForms",
    "NumeralFormatter",
    "NumeralFormattingError",
    "PhraseRequest",
    "__version__",
    "classify_count",
    "format_count",
    "format_count_phrase",
    "get_arabic_count_phrase",
]
