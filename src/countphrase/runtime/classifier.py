"""Count classification into grammatical categories.

Maps a non-negative whole-number magnitude onto the five agreement classes.
Pure decision table, decoupled from numeral rendering and string composition.

Python 3.13+. Zero external dependencies.
"""

from countphrase.constants import FEW_MAX, FEW_MIN
from countphrase.enums import GrammaticalCategory

__all__ = ["classify_count"]


def classify_count(whole_count: int) -> GrammaticalCategory:
    """Select the grammatical category for a whole-number count.

    Args:
        whole_count: Non-negative whole-number magnitude of the count

    Returns:
        GrammaticalCategory for the count

    Raises:
        ValueError: If whole_count is negative

    Examples:
        >>> classify_count(0)
        <GrammaticalCategory.ZERO: 'zero'>
        >>> classify_count(10)
        <GrammaticalCategory.FEW: 'few'>
        >>> classify_count(11)
        <GrammaticalCategory.MANY: 'many'>
    """
    if whole_count < 0:
        msg = f"whole_count must be non-negative, got {whole_count}"
        raise ValueError(msg)

    match whole_count:
        case 0:
            return GrammaticalCategory.ZERO
        case 1:
            return GrammaticalCategory.ONE
        case 2:
            return GrammaticalCategory.TWO
        case n if FEW_MIN <= n <= FEW_MAX:
            return GrammaticalCategory.FEW
        case _:
            return GrammaticalCategory.MANY
