"""Count phrase composition.

Combines validation, classification, and numeral rendering into the final
phrase. Grammar of the five categories:

    0      لا + singular        (numeral + singular with always_show_number)
    1      singular             (numeral + singular with always_show_number)
    2      dual                 (numeral + dual with always_show_number)
    3-10   numeral + plural
    11+    numeral + singular
    x.y    numeral + singular   (fractional counts skip classification)

Sign is discarded before classification; -3 and 3 produce the same phrase.

Python 3.13+.
"""

import logging
import math
import warnings
from collections.abc import Mapping
from decimal import Decimal
from numbers import Integral, Rational

from countphrase.constants import DEFAULT_LOCALE, ZERO_MARKER
from countphrase.diagnostics import ErrorTemplate, InvalidRequestError
from countphrase.enums import GrammaticalCategory
from countphrase.models import Count, NounForms, PhraseRequest
from countphrase.runtime.classifier import classify_count
from countphrase.runtime.numerals import DEFAULT_NUMERAL_FORMATTER, NumeralFormatter
from countphrase.validation import validate_count, validate_locale, validate_request

__all__ = [
    "CountPhraseFormatter",
    "format_count",
    "format_count_phrase",
    "get_arabic_count_phrase",
]

logger = logging.getLogger(__name__)


def _is_whole(value: Count) -> bool:
    """Check whether a non-negative finite count has no fractional part."""
    if isinstance(value, Integral):
        return True
    if isinstance(value, Decimal):
        return value == value.to_integral_value()
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, Rational):
        return value.denominator == 1
    return value == math.floor(value)


def _magnitude(value: Count) -> Count:
    """Absolute value of a count, exact for Decimals of any precision."""
    if isinstance(value, Decimal):
        # abs() rounds to the context precision; copy_abs() only flips the sign
        return value.copy_abs()
    return abs(value)


def _category_for(absolute_count: Count) -> GrammaticalCategory | None:
    if not _is_whole(absolute_count):
        return None
    return classify_count(int(absolute_count))


def _compose(
    category: GrammaticalCategory | None,
    noun_forms: NounForms,
    formatted_number: str,
    always_show_number: bool,
) -> str:
    match category:
        case None:
            return f"{formatted_number} {noun_forms.singular}"
        case GrammaticalCategory.ZERO:
            # Shown numeral replaces the zero marker rather than joining it
            if always_show_number:
                return f"{formatted_number} {noun_forms.singular}"
            return f"{ZERO_MARKER} {noun_forms.singular}"
        case GrammaticalCategory.ONE:
            if always_show_number:
                return f"{formatted_number} {noun_forms.singular}"
            return noun_forms.singular
        case GrammaticalCategory.TWO:
            if always_show_number:
                return f"{formatted_number} {noun_forms.dual}"
            return noun_forms.dual
        case GrammaticalCategory.FEW:
            return f"{formatted_number} {noun_forms.plural}"
        case GrammaticalCategory.MANY:
            return f"{formatted_number} {noun_forms.singular}"


def format_count_phrase(
    request: PhraseRequest | Mapping[str, object],
    *,
    formatter: NumeralFormatter | None = None,
) -> str:
    """Return the grammatically correct phrase for a count and noun.

    Args:
        request: PhraseRequest, or a mapping with keys count, noun_forms
            (or nounForms), locale, and always_show_number (or alwaysShowNumber)
        formatter: Numeral formatter (default: Babel CLDR formatter)

    Returns:
        Phrase combining the localized numeral (when shown) and the noun form

    Raises:
        InvalidRequestError: If the request is absent, not a record, or an
            option has the wrong type
        InvalidCountError: If the count is missing, non-numeric, NaN, or infinite
        InvalidNounFormsError: If a noun form is missing, not a string, or blank
        InvalidLocaleError: If the locale is blank or unsupported
        NumeralFormattingError: If the numeral formatter fails

    Examples:
        >>> car = NounForms(singular="سيارة", dual="سيارتان", plural="سيارات")
        >>> format_count_phrase(PhraseRequest(count=0, noun_forms=car))
        'لا سيارة'
        >>> format_count_phrase(PhraseRequest(count=7, noun_forms=car))
        '٧ سيارات'
        >>> format_count_phrase(PhraseRequest(count=15, noun_forms=car))
        '١٥ سيارة'
        >>> format_count_phrase({"count": 1, "nounForms": car, "alwaysShowNumber": True})
        '١ سيارة'
    """
    numeral_formatter = formatter if formatter is not None else DEFAULT_NUMERAL_FORMATTER
    validated = validate_request(request, numeral_formatter)
    # Validators return these concrete types
    noun_forms = validated.noun_forms
    assert isinstance(noun_forms, NounForms)
    locale = validated.locale or DEFAULT_LOCALE

    absolute_count = _magnitude(validated.count)
    formatted_number = numeral_formatter.render(absolute_count, locale)
    category = _category_for(absolute_count)

    return _compose(category, noun_forms, formatted_number, validated.always_show_number)


def format_count(
    count: Count,
    noun_forms: NounForms | Mapping[str, object],
    *,
    locale: str | None = DEFAULT_LOCALE,
    always_show_number: bool = False,
    formatter: NumeralFormatter | None = None,
) -> str:
    """Keyword form of format_count_phrase.

    Example:
        >>> format_count(3.7, {"singular": "سيارة", "dual": "سيارتان", "plural": "سيارات"})
        '٣٫٧ سيارة'
    """
    request = PhraseRequest(
        count=count,
        noun_forms=noun_forms,
        locale=locale,
        always_show_number=always_show_number,
    )
    return format_count_phrase(request, formatter=formatter)


def get_arabic_count_phrase(options: PhraseRequest | Mapping[str, object]) -> str:
    """Deprecated name of format_count_phrase.

    .. deprecated::
        Will be removed in version 1.0.0. Use :func:`format_count_phrase` instead.
    """
    warnings.warn(
        "get_arabic_count_phrase() is deprecated and will be removed in version 1.0.0. "
        "Use format_count_phrase() instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    return format_count_phrase(options)


class CountPhraseFormatter:
    """Count phrase formatter bound to one locale.

    The locale is validated once at construction; each format() call then
    validates only the count and noun forms.

    Examples:
        >>> fmt = CountPhraseFormatter("en-US")
        >>> fmt.format(3, NounForms("سيارة", "سيارتان", "سيارات"))
        '3 سيارات'
        >>> fmt.classify(11)
        <GrammaticalCategory.MANY: 'many'>
    """

    __slots__ = ("_always_show_number", "_formatter", "_locale")

    def __init__(
        self,
        locale: str | None = DEFAULT_LOCALE,
        *,
        always_show_number: bool = False,
        formatter: NumeralFormatter | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            locale: Numeral locale (default: "ar-EG")
            always_show_number: Show the numeral for counts 0, 1, and 2
            formatter: Numeral formatter (default: Babel CLDR formatter)

        Raises:
            InvalidLocaleError: If the locale is blank or unsupported
            InvalidRequestError: If always_show_number is not a bool
        """
        self._formatter = formatter if formatter is not None else DEFAULT_NUMERAL_FORMATTER
        self._locale = validate_locale(locale, self._formatter)
        if not isinstance(always_show_number, bool):
            raise InvalidRequestError(
                ErrorTemplate.option_type_invalid(
                    "always_show_number", "bool", type(always_show_number).__name__
                )
            )
        self._always_show_number = always_show_number
        logger.debug("CountPhraseFormatter bound to locale '%s'", self._locale)

    @property
    def locale(self) -> str:
        """Validated, trimmed locale identifier."""
        return self._locale

    @property
    def always_show_number(self) -> bool:
        """Whether counts 0, 1, and 2 show the numeral."""
        return self._always_show_number

    def format(self, count: Count, noun_forms: NounForms | Mapping[str, object]) -> str:
        """Format a count phrase with this formatter's locale and options."""
        request = PhraseRequest(
            count=count,
            noun_forms=noun_forms,
            locale=self._locale,
            always_show_number=self._always_show_number,
        )
        return format_count_phrase(request, formatter=self._formatter)

    def classify(self, count: Count) -> GrammaticalCategory | None:
        """Return the grammatical category of a count.

        Returns:
            Category of |count|, or None for fractional counts, which always
            use the singular form with the numeral shown

        Raises:
            InvalidCountError: If the count is non-numeric, NaN, or infinite
        """
        return _category_for(_magnitude(validate_count(count)))

    def __repr__(self) -> str:
        return (
            f"CountPhraseFormatter(locale={self._locale!r}, "
            f"always_show_number={self._always_show_number!r})"
        )
