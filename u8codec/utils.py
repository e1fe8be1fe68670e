"""Utility functions for sizing and classifying code units."""

from collections.abc import Iterable

from u8codec.constants import (
    HIGH_SURROGATE_MAX,
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
)
from u8codec.encoder import as_code_units, iter_code_points, sequence_length
from u8codec.sequences import CodeUnits


def utf16_len(text: str) -> int:
    """Calculate length in UTF-16 code units.

    Args:
        text: Input text string

    Returns:
        Length in UTF-16 code units

    Examples:
        >>> utf16_len('Hello')
        5
        >>> utf16_len('\\N{EARTH GLOBE EUROPE-AFRICA}')
        2
    """
    return len(text.encode('utf-16-le', 'surrogatepass')) // 2


def utf8_len(units: CodeUnits | str | Iterable[int]) -> int:
    """Exact number of bytes ``encode(units)`` produces, without encoding.

    Args:
        units: Same input as ``encode``

    Returns:
        Length of the UTF-8 encoding in bytes

    Raises:
        EncodingError: For exactly the inputs ``encode`` rejects
    """
    return sum(sequence_length(c) for _, c in iter_code_points(as_code_units(units)))


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_MIN <= unit <= HIGH_SURROGATE_MAX


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_MIN <= unit <= LOW_SURROGATE_MAX


def is_surrogate(value: int) -> bool:
    """True for any value in the surrogate-reserved range U+D800..U+DFFF."""
    return HIGH_SURROGATE_MIN <= value <= LOW_SURROGATE_MAX
