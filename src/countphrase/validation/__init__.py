"""Request validation for countphrase.

Python 3.13+.
"""

from .request import validate_count, validate_locale, validate_noun_forms, validate_request

__all__ = [
    "validate_count",
    "validate_locale",
    "validate_noun_forms",
    "validate_request",
]
