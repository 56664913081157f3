"""Immutable value types for count phrase requests.

Python 3.13+.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from countphrase.constants import DEFAULT_LOCALE
from countphrase.diagnostics import ErrorTemplate, InvalidNounFormsError

__all__ = [
    "NOUN_FORM_FIELDS",
    "Count",
    "NounForms",
    "PhraseRequest",
]

type Count = int | float | Decimal | Fraction

NOUN_FORM_FIELDS: tuple[str, str, str] = ("singular", "dual", "plural")


@dataclass(frozen=True, slots=True)
class NounForms:
    """The three inflections of a noun needed by the five count categories.

    Attributes:
        singular: Used for ZERO, ONE, MANY and fractional counts (e.g., "سيارة")
        dual: Used for TWO (e.g., "سيارتان")
        plural: Used for FEW, counts 3-10 (e.g., "سيارات")
    """

    singular: str
    dual: str
    plural: str

    def __post_init__(self) -> None:
        """Validate that every form is a non-blank string.

        Raises:
            InvalidNounFormsError: If a form is not a str or is blank after trimming
        """
        for form in NOUN_FORM_FIELDS:
            value = getattr(self, form)
            if not isinstance(value, str):
                raise InvalidNounFormsError(
                    ErrorTemplate.noun_form_not_string(form, type(value).__name__)
                )
            if not value.strip():
                raise InvalidNounFormsError(ErrorTemplate.noun_form_blank(form))

    def stripped(self) -> "NounForms":
        """Return a copy with surrounding whitespace removed from every form."""
        return NounForms(
            singular=self.singular.strip(),
            dual=self.dual.strip(),
            plural=self.plural.strip(),
        )


@dataclass(frozen=True, slots=True)
class PhraseRequest:
    """One formatting request.

    Fields are validated by format_count_phrase, not at construction, so
    callers get the same error precedence for objects and mappings.

    Attributes:
        count: Finite real number; sign is ignored, fractions are allowed
        noun_forms: NounForms or a mapping with singular, dual, and plural keys
        locale: Numeral locale (default: "ar-EG"); None also means the default
        always_show_number: Show the numeral for counts 0, 1, and 2 (default: False)
    """

    count: Count
    noun_forms: NounForms | Mapping[str, object]
    locale: str | None = DEFAULT_LOCALE
    always_show_number: bool = False
