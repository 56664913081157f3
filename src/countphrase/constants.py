"""Shared constants for countphrase.

Centralized configuration constants used across the runtime and validation
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Locale defaults: Locale used when the caller supplies none
- Grammar: Zero marker word and range bounds of the FEW category
- Cache limits: Memory bounds for parsed locale data

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    # Grammar
    "ZERO_MARKER",
    "FEW_MIN",
    "FEW_MAX",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Egyptian Arabic renders Arabic-Indic digits (٠١٢...) and the Arabic
# decimal separator (٫) under its CLDR default numbering system.
DEFAULT_LOCALE: str = "ar-EG"

# ============================================================================
# GRAMMAR
# ============================================================================

# Negation particle placed before the singular form for a count of zero.
ZERO_MARKER: str = "لا"

# Inclusive bounds of the FEW category (plural noun form).
# Counts above FEW_MAX revert to the singular noun form.
FEW_MIN: int = 3
FEW_MAX: int = 10

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached NumeralContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
