"""Input validation for count phrase requests.

Each validator returns a validated value or raises the matching
CountPhraseError subclass. validate_request runs them in a fixed order
(request shape, count, noun forms, locale) so malformed multi-field input
always reports the same error.

Python 3.13+.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from numbers import Rational, Real
from typing import TYPE_CHECKING

from countphrase.constants import DEFAULT_LOCALE
from countphrase.diagnostics import (
    CountPhraseError,
    ErrorTemplate,
    InvalidCountError,
    InvalidLocaleError,
    InvalidNounFormsError,
    InvalidRequestError,
)
from countphrase.models import NOUN_FORM_FIELDS, Count, NounForms, PhraseRequest

if TYPE_CHECKING:
    from countphrase.runtime.numerals import NumeralFormatter

__all__ = [
    "validate_count",
    "validate_locale",
    "validate_noun_forms",
    "validate_request",
]

logger = logging.getLogger(__name__)

# camelCase option names of the original options object
_CAMEL_CASE_ALIASES: dict[str, str] = {
    "noun_forms": "nounForms",
    "always_show_number": "alwaysShowNumber",
}

_MISSING = object()


def _type_name(value: object) -> str:
    return type(value).__name__


def _lookup(mapping: Mapping[str, object], name: str) -> object:
    """Get a request field by snake_case name, falling back to its camelCase alias."""
    if name in mapping:
        return mapping[name]
    alias = _CAMEL_CASE_ALIASES.get(name)
    if alias is not None and alias in mapping:
        return mapping[alias]
    return _MISSING


def validate_count(value: object) -> Count:
    """Validate that a count is a finite real number.

    Accepts int, float, Decimal, and any numbers.Real (e.g., Fraction).
    bool is rejected even though it subclasses int.

    Args:
        value: Candidate count

    Returns:
        The count, unchanged

    Raises:
        InvalidCountError: If the count is missing, non-numeric, NaN, or infinite
    """
    if value is None or value is _MISSING:
        raise InvalidCountError(ErrorTemplate.count_missing())

    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidCountError(ErrorTemplate.count_not_numeric(_type_name(value)))

    if isinstance(value, Decimal):
        finite = value.is_finite()
    elif isinstance(value, Rational):
        # int and Fraction are always finite
        finite = True
    else:
        finite = math.isfinite(value)
    if not finite:
        raise InvalidCountError(ErrorTemplate.count_not_finite(value))

    return value  # type: ignore[return-value]


def validate_noun_forms(value: object) -> NounForms:
    """Validate noun forms and return them trimmed.

    Args:
        value: NounForms instance or mapping with singular, dual, and plural keys

    Returns:
        NounForms with surrounding whitespace removed from every form

    Raises:
        InvalidNounFormsError: If the value is absent, not a record, or any
            form is missing, not a string, or blank after trimming
    """
    if value is None or value is _MISSING:
        raise InvalidNounFormsError(ErrorTemplate.noun_forms_missing())

    if isinstance(value, NounForms):
        return value.stripped()

    if not isinstance(value, Mapping):
        raise InvalidNounFormsError(ErrorTemplate.noun_forms_not_a_record(_type_name(value)))

    forms: dict[str, str] = {}
    for form in NOUN_FORM_FIELDS:
        if form not in value or value[form] is None:
            raise InvalidNounFormsError(ErrorTemplate.noun_form_missing(form))
        raw = value[form]
        if not isinstance(raw, str):
            raise InvalidNounFormsError(ErrorTemplate.noun_form_not_string(form, _type_name(raw)))
        forms[form] = raw

    # NounForms re-checks blank forms on construction
    return NounForms(**forms).stripped()


def validate_locale(value: object, formatter: NumeralFormatter) -> str:
    """Validate a locale identifier against the numeral formatter.

    Recognition is delegated to ``formatter.is_supported``; there is no
    built-in allow-list.

    Args:
        value: Candidate locale identifier; None selects DEFAULT_LOCALE
        formatter: Numeral formatter that will render the count

    Returns:
        Trimmed locale identifier

    Raises:
        InvalidLocaleError: If the locale is not a string, blank, or unsupported
    """
    if value is None or value is _MISSING:
        value = DEFAULT_LOCALE

    if not isinstance(value, str):
        raise InvalidLocaleError(ErrorTemplate.locale_not_string(_type_name(value)))

    locale = value.strip()
    if not locale:
        raise InvalidLocaleError(ErrorTemplate.locale_blank())

    if not formatter.is_supported(locale):
        raise InvalidLocaleError(ErrorTemplate.locale_unsupported(locale))

    return locale


def _validate_always_show_number(value: object) -> bool:
    if value is None or value is _MISSING:
        return False
    if not isinstance(value, bool):
        raise InvalidRequestError(
            ErrorTemplate.option_type_invalid("always_show_number", "bool", _type_name(value))
        )
    return value


def validate_request(value: object, formatter: NumeralFormatter) -> PhraseRequest:
    """Validate a whole request.

    Order: request shape, count, noun forms, locale, options.

    Args:
        value: PhraseRequest or mapping (snake_case or camelCase keys)
        formatter: Numeral formatter used for locale support checks

    Returns:
        PhraseRequest holding validated, trimmed values

    Raises:
        InvalidRequestError: If the request is absent, not a record, or an
            option has the wrong type
        InvalidCountError: See validate_count
        InvalidNounFormsError: See validate_noun_forms
        InvalidLocaleError: See validate_locale
    """
    try:
        if value is None:
            raise InvalidRequestError(ErrorTemplate.request_missing())

        if isinstance(value, PhraseRequest):
            fields: dict[str, object] = {
                "count": value.count,
                "noun_forms": value.noun_forms,
                "locale": value.locale,
                "always_show_number": value.always_show_number,
            }
        elif isinstance(value, Mapping):
            fields = {
                name: _lookup(value, name)
                for name in ("count", "noun_forms", "locale", "always_show_number")
            }
        else:
            raise InvalidRequestError(ErrorTemplate.request_not_a_record(_type_name(value)))

        count = validate_count(fields["count"])
        noun_forms = validate_noun_forms(fields["noun_forms"])
        locale = validate_locale(fields["locale"], formatter)
        always_show_number = _validate_always_show_number(fields["always_show_number"])
    except CountPhraseError as e:
        logger.debug("Rejected count phrase request: %s", e.diagnostic or e)
        raise

    return PhraseRequest(
        count=count,
        noun_forms=noun_forms,
        locale=locale,
        always_show_number=always_show_number,
    )
