"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization and the Babel-backed support query
used by locale validation. Normalize at the entry point, then use the
normalized form for cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from countphrase.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "is_locale_supported",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (ar-EG), while Babel/POSIX uses underscores (ar_EG).
    Surrounding whitespace is removed.

    Args:
        locale_code: BCP-47 locale code (e.g., "ar-EG", "en-US")

    Returns:
        POSIX-formatted locale code (e.g., "ar_EG", "en_US")

    Example:
        >>> normalize_locale("ar-EG")
        'ar_EG'
        >>> normalize_locale(" en-US ")
        'en_US'
        >>> normalize_locale("ar")  # Already normalized
        'ar'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. NumeralContext and
    is_locale_supported share this cache, so a locale reported as supported
    is the same Locale object used for rendering.
    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    locale = Locale.parse(normalized)
    logger.debug("Parsed locale '%s' as %s", locale_code, locale)
    return locale


def is_locale_supported(locale_code: str) -> bool:
    """Check whether Babel has CLDR data for a locale identifier.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        True if the locale parses, False for unknown or malformed identifiers.

    Example:
        >>> is_locale_supported("ar-EG")
        True
        >>> is_locale_supported("xx-INVALID")
        False
    """
    if not locale_code.strip():
        return False
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError):
        return False
    return True


def clear_locale_cache() -> None:
    """Clear the parsed-locale cache (frees memory, resets state in tests)."""
    get_babel_locale.cache_clear()
