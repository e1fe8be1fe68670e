"""UTF-16 code units to UTF-8 bytes.

For details on UTF-8 see https://tools.ietf.org/html/rfc3629
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from u8codec.constants import (
    CONTINUATION_PAYLOAD_MASK,
    CONTINUATION_PREFIX,
    FOUR_BYTE_PREFIX,
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
    MAX_CODE_UNIT,
    MAX_FOUR_BYTE,
    MAX_ONE_BYTE,
    MAX_THREE_BYTE,
    MAX_TWO_BYTE,
    SURROGATE_OFFSET,
    SURROGATE_PAYLOAD_BITS,
    SURROGATE_PAYLOAD_MASK,
    THREE_BYTE_PREFIX,
    TWO_BYTE_PREFIX,
)
from u8codec.errors import EncodingError, ErrorKind, fail
from u8codec.sequences import CodeUnits


def as_code_units(units: CodeUnits | str | Iterable[int]) -> Sequence[int]:
    """Coerce encoder input into an indexable sequence of code units.

    Strings are split into UTF-16 code units. Byte strings are refused: they
    are UTF-8 already and belong to ``decode``.
    """
    if isinstance(units, str):
        return CodeUnits.from_str(units)
    if isinstance(units, (bytes, bytearray, memoryview)):
        raise TypeError(f'expected code units, not {type(units).__name__}')
    if isinstance(units, Sequence):
        return units
    return tuple(units)


def _unit_at(units: Sequence[int], i: int) -> int:
    unit = units[i]
    if not isinstance(unit, int):
        raise TypeError(f'code unit {i} must be int, not {type(unit).__name__}')
    return unit


def iter_code_points(units: Sequence[int]) -> Iterator[tuple[int, int]]:
    """Yield ``(position, code_point)`` for each scalar value in ``units``.

    Surrogate pairs are joined into one code point; ``position`` is the index
    of the first code unit it was read from.

    Raises:
        EncodingError: On a lone or mismatched surrogate, a high surrogate at
            the end of input, or a value that is not a 16-bit code unit
    """
    length = len(units)
    i = 0
    while i < length:
        start = i
        c = _unit_at(units, i)
        i += 1

        if not 0 <= c <= MAX_CODE_UNIT:
            raise fail(
                EncodingError,
                ErrorKind.CODE_POINT_OUT_OF_RANGE,
                start,
                f'{c:#x} is not a 16-bit code unit',
            )

        if HIGH_SURROGATE_MIN <= c <= LOW_SURROGATE_MAX:
            # A low surrogate can only ever be the second half of a pair
            if c >= LOW_SURROGATE_MIN:
                raise fail(
                    EncodingError,
                    ErrorKind.INVALID_SURROGATE_PAIR,
                    start,
                    f'low surrogate {c:#06x} without preceding high surrogate',
                )
            if length - i < 1:
                raise fail(
                    EncodingError,
                    ErrorKind.UNEXPECTED_END_OF_INPUT,
                    start,
                    f'high surrogate {c:#06x} at end of input',
                )

            high = c - HIGH_SURROGATE_MIN
            low = _unit_at(units, i) - LOW_SURROGATE_MIN
            i += 1
            if not 0 <= low <= SURROGATE_PAYLOAD_MASK:
                raise fail(
                    EncodingError,
                    ErrorKind.INVALID_SURROGATE_PAIR,
                    start,
                    f'invalid code unit {units[i - 1]:#06x} as second part of surrogate pair',
                )

            c = (high << SURROGATE_PAYLOAD_BITS | low) + SURROGATE_OFFSET

        yield start, c


def sequence_length(code_point: int) -> int:
    """Number of bytes in the canonical UTF-8 encoding of ``code_point``.

    Returns 0 for values outside the Unicode scalar range.
    """
    if code_point < 0:
        return 0
    if code_point <= MAX_ONE_BYTE:
        return 1
    if code_point <= MAX_TWO_BYTE:
        return 2
    if code_point <= MAX_THREE_BYTE:
        return 3
    if code_point <= MAX_FOUR_BYTE:
        return 4
    return 0


def encode(units: CodeUnits | str | Iterable[int]) -> bytes:
    """Encode UTF-16 code units as UTF-8.

    Args:
        units: Code units to encode. A ``str`` is split into its UTF-16 code
            units first; any other iterable is read as code units directly.

    Returns:
        The UTF-8 encoding, sized exactly to its contents

    Raises:
        EncodingError: If the input holds a lone surrogate, ends halfway
            through a surrogate pair, or contains a non 16-bit value.
            Nothing is returned on failure.
        TypeError: If given bytes or non-integer code units

    Examples:
        >>> encode('hello')
        b'hello'
        >>> encode(CodeUnits([0xD834, 0xDD1E])).hex(' ')
        'f0 9d 84 9e'
    """
    buf = bytearray()

    for position, c in iter_code_points(as_code_units(units)):
        if c <= MAX_ONE_BYTE:
            # 0xxx xxxx
            buf.append(c)

        elif c <= MAX_TWO_BYTE:
            # 110x xxxx   10xx xxxx
            buf.append(TWO_BYTE_PREFIX | (c >> 6))
            buf.append(CONTINUATION_PREFIX | (c & CONTINUATION_PAYLOAD_MASK))

        elif c <= MAX_THREE_BYTE:
            # 1110 xxxx   10xx xxxx   10xx xxxx
            buf.append(THREE_BYTE_PREFIX | (c >> 12))
            buf.append(CONTINUATION_PREFIX | ((c >> 6) & CONTINUATION_PAYLOAD_MASK))
            buf.append(CONTINUATION_PREFIX | (c & CONTINUATION_PAYLOAD_MASK))

        elif c <= MAX_FOUR_BYTE:
            # 1111 0xxx   10xx xxxx   10xx xxxx   10xx xxxx
            buf.append(FOUR_BYTE_PREFIX | (c >> 18))
            buf.append(CONTINUATION_PREFIX | ((c >> 12) & CONTINUATION_PAYLOAD_MASK))
            buf.append(CONTINUATION_PREFIX | ((c >> 6) & CONTINUATION_PAYLOAD_MASK))
            buf.append(CONTINUATION_PREFIX | (c & CONTINUATION_PAYLOAD_MASK))

        else:
            raise fail(
                EncodingError,
                ErrorKind.CODE_POINT_OUT_OF_RANGE,
                position,
                f'code point {c:#x} out of range',
            )

    return bytes(buf)


def encode_str(text: str) -> bytes:
    """Encode a Python string as UTF-8 via its UTF-16 code units.

    Unlike ``str.encode('utf-8')`` this raises ``EncodingError`` (not
    ``UnicodeEncodeError``) for lone surrogates.
    """
    return encode(CodeUnits.from_str(text))
