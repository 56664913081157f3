"""Locale-aware numeral rendering using Babel.

Thin adapter over Babel's CLDR number formatting. The classifier decides
whole-vs-fractional handling before calling in here; this module only
renders an absolute value in the locale's digits and separators.

Architecture:
    - NumeralFormatter: Protocol consumed by the phrase composer
    - BabelNumeralFormatter: Default implementation backed by Babel
    - NumeralContext: Immutable per-locale rendering state, LRU-cached

Babel supplies the decimal and grouping symbols of a locale's default
numbering system but always emits ASCII digits. NumeralContext maps those
digits onto the numbering system's own glyphs, so ar-EG renders 3.7 as
"٣٫٧" the way Intl.NumberFormat does. Locales whose default system lacks
symbols or a digit table render Latin digits.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import decimal
import functools
import logging
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from numbers import Rational
from threading import RLock
from typing import TYPE_CHECKING, ClassVar, Protocol

from babel import UnknownLocaleError
from babel import numbers as babel_numbers
from babel.numbers import UnsupportedNumberingSystemError

from countphrase.constants import MAX_LOCALE_CACHE_SIZE
from countphrase.diagnostics import (
    ErrorTemplate,
    InvalidLocaleError,
    NumeralFormattingError,
)
from countphrase.locale_utils import get_babel_locale, is_locale_supported, normalize_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "DEFAULT_NUMERAL_FORMATTER",
    "BabelNumeralFormatter",
    "NumeralContext",
    "NumeralFormatter",
]

logger = logging.getLogger(__name__)

type NumeralValue = int | float | Decimal | Fraction

# Code point of digit zero for CLDR numeric numbering systems.
# Digits one through nine follow contiguously in every one of these blocks.
_NUMBERING_SYSTEM_ZEROS: dict[str, int] = {
    "adlm": 0x1E950,
    "arab": 0x0660,
    "arabext": 0x06F0,
    "bali": 0x1B50,
    "beng": 0x09E6,
    "cakm": 0x11136,
    "deva": 0x0966,
    "fullwide": 0xFF10,
    "gujr": 0x0AE6,
    "guru": 0x0A66,
    "java": 0xA9D0,
    "khmr": 0x17E0,
    "knda": 0x0CE6,
    "laoo": 0x0ED0,
    "latn": 0x0030,
    "limb": 0x1946,
    "mlym": 0x0D66,
    "mong": 0x1810,
    "mtei": 0xABF0,
    "mymr": 0x1040,
    "nkoo": 0x07C0,
    "olck": 0x1C50,
    "orya": 0x0B66,
    "rohg": 0x10D30,
    "sund": 0x1BB0,
    "tamldec": 0x0BE6,
    "telu": 0x0C66,
    "thai": 0x0E50,
    "tibt": 0x0F20,
    "vaii": 0xA620,
}


@functools.lru_cache(maxsize=32)
def _digit_table(numbering_system: str) -> dict[int, str]:
    """str.translate table mapping ASCII digits to a numbering system's glyphs."""
    zero = _NUMBERING_SYSTEM_ZEROS[numbering_system]
    return {ord("0") + i: chr(zero + i) for i in range(10)}


# Digits kept beyond the integer part while Babel rounds to the pattern's
# fraction digits (at most three for CLDR default decimal patterns)
_FRACTION_PRECISION_HEADROOM = 8


def _precision_for(integer_digits: int) -> int:
    return max(decimal.getcontext().prec, integer_digits + _FRACTION_PRECISION_HEADROOM)


def _as_babel_number(value: NumeralValue) -> Decimal:
    """Convert a count to a Decimal without losing integer digits."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # Same conversion Babel applies to floats: shortest repr, not binary expansion
        return Decimal(repr(value))
    if isinstance(value, Rational):
        whole = abs(value.numerator) // value.denominator
        with decimal.localcontext() as ctx:
            # bit_length over-estimates decimal digits by at most one per three bits
            ctx.prec = _precision_for(whole.bit_length() // 3 + 1)
            return Decimal(value.numerator) / Decimal(value.denominator)
    return Decimal(repr(float(value)))


class NumeralFormatter(Protocol):
    """Locale-aware numeral rendering capability.

    Implementations must be synchronous and side-effect free.
    """

    def render(self, value: NumeralValue, locale: str) -> str:
        """Render a non-negative finite number in the locale's digits and separators."""
        ...

    def is_supported(self, locale: str) -> bool:
        """Return True if ``render`` accepts this locale identifier."""
        ...


@dataclass(frozen=True, slots=True)
class NumeralContext:
    """Immutable numeral rendering configuration for one locale.

    Use NumeralContext.create() to construct instances; it validates the
    locale and reuses cached instances.

    Examples:
        >>> NumeralContext.create("ar-EG").format_number(3.7)
        '٣٫٧'
        >>> NumeralContext.create("en-US").format_number(1234.5)
        '1,234.5'

    Thread Safety:
        Instances are immutable. Cache operations are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, NumeralContext]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    numbering_system: str

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the numeral context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached NumeralContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> NumeralContext:
        """Create (or fetch cached) NumeralContext for a locale.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'ar-EG', 'en-US')

        Returns:
            NumeralContext for the locale

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        try:
            babel_locale = get_babel_locale(cache_key)
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except (ValueError, TypeError) as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None

        numbering_system = babel_locale.default_numbering_system
        if (
            numbering_system not in _NUMBERING_SYSTEM_ZEROS
            or numbering_system not in babel_locale.number_symbols
        ):
            logger.warning(
                "Numbering system '%s' of locale '%s' is not supported; using latn digits",
                numbering_system,
                locale_code,
            )
            numbering_system = "latn"

        ctx = cls(
            locale_code=locale_code,
            _babel_locale=babel_locale,
            numbering_system=numbering_system,
        )

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @property
    def babel_locale(self) -> Locale:
        """Get pre-validated Babel Locale object for this context."""
        return self._babel_locale

    def format_number(self, value: NumeralValue) -> str:
        """Format number with the locale's default pattern, symbols, and digits.

        Uses the CLDR default decimal pattern: native grouping, at most three
        fraction digits, no forced trailing zeros. Matches Intl.NumberFormat
        default precision. Every integer digit is kept, however large the
        value.

        Args:
            value: Non-negative finite number

        Returns:
            Localized numeral string

        Raises:
            NumeralFormattingError: If Babel cannot format the value
        """
        try:
            number = _as_babel_number(value)
            # Babel rounds under the active context; 28 digits cannot hold 1e30
            with decimal.localcontext() as ctx:
                ctx.prec = _precision_for(max(number.adjusted() + 1, 1))
                formatted = babel_numbers.format_decimal(
                    number,
                    locale=self._babel_locale,
                    numbering_system=self.numbering_system,
                )
        except (
            ValueError,
            TypeError,
            InvalidOperation,
            AttributeError,
            KeyError,
            UnsupportedNumberingSystemError,
        ) as e:
            diagnostic = ErrorTemplate.numeral_formatting_failed(value, self.locale_code, str(e))
            raise NumeralFormattingError(diagnostic, fallback_value=str(value)) from e

        return str(formatted).translate(_digit_table(self.numbering_system))


class BabelNumeralFormatter:
    """NumeralFormatter backed by Babel CLDR data.

    Example:
        >>> formatter = BabelNumeralFormatter()
        >>> formatter.render(15, "ar-EG")
        '١٥'
        >>> formatter.is_supported("xx-INVALID")
        False
    """

    __slots__ = ()

    def render(self, value: NumeralValue, locale: str) -> str:
        """Render value in the locale's digits and separators.

        Raises:
            InvalidLocaleError: If Babel does not know the locale
            NumeralFormattingError: If Babel cannot format the value
        """
        try:
            ctx = NumeralContext.create(locale)
        except ValueError:
            raise InvalidLocaleError(ErrorTemplate.locale_unsupported(locale)) from None
        return ctx.format_number(value)

    def is_supported(self, locale: str) -> bool:
        """Return True if Babel has CLDR data for the locale."""
        return is_locale_supported(locale)


DEFAULT_NUMERAL_FORMATTER: NumeralFormatter = BabelNumeralFormatter()
