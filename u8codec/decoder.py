"""UTF-8 bytes to UTF-16 code units.

Decoding is strict by default: overlong (non canonical) sequences and
directly encoded surrogate code points are refused. Both are classic sources
of filter bypass bugs when UTF-8 is validated in one place and interpreted in
another.
"""

from __future__ import annotations

from u8codec.constants import (
    CONTINUATION_MASK,
    CONTINUATION_PAYLOAD_BITS,
    CONTINUATION_PAYLOAD_MASK,
    CONTINUATION_PREFIX,
    HIGH_SURROGATE_MIN,
    LEADING_BYTE_PATTERNS,
    LOW_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
    MAX_CODE_POINT,
    MAX_CODE_UNIT,
    MIN_CODE_POINT_BY_CONTINUATIONS,
    SURROGATE_OFFSET,
    SURROGATE_PAYLOAD_BITS,
    SURROGATE_PAYLOAD_MASK,
)
from u8codec.errors import DecodingError, ErrorKind, fail
from u8codec.sequences import CodeUnits


def classify_leading_byte(byte: int) -> tuple[int, int] | None:
    """Return ``(payload, continuation_count)`` for a leading byte.

    ``payload`` is the byte with its length marker stripped. Returns ``None``
    for continuation bytes (10xxxxxx) and for 11111xxx, neither of which can
    start a sequence.
    """
    for marker_mask, marker, payload_mask, count in LEADING_BYTE_PATTERNS:
        if byte & marker_mask == marker:
            return byte & payload_mask, count
    return None


def is_continuation_byte(byte: int) -> bool:
    return byte & CONTINUATION_MASK == CONTINUATION_PREFIX


def decode(data: bytes | bytearray | memoryview, strict: bool = True) -> CodeUnits:
    """Decode UTF-8 into UTF-16 code units.

    Args:
        data: UTF-8 encoded bytes
        strict: If True (default), code points reserved for UTF-16 surrogate
            pairs but encoded directly, and characters encoded with more bytes
            than necessary, raise ``DecodingError``. If False both are
            accepted and passed through numerically.

    Returns:
        Decoded code units; code points above U+FFFF become surrogate pairs

    Raises:
        DecodingError: On a bad leading or continuation byte, truncated
            sequence, value above U+10FFFF, or (strict only) overlong form or
            encoded surrogate. Nothing is returned on failure.
        TypeError: If ``data`` is not a bytes-like object

    Examples:
        >>> decode(bytes([0xF0, 0x9D, 0x84, 0x9E]))
        CodeUnits([0xd834, 0xdd1e])
        >>> decode(bytes([0xC1, 0xBF]), strict=False)
        CodeUnits([0x007f])
    """
    if isinstance(data, memoryview):
        data = data.tobytes()
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f'expected bytes-like object, not {type(data).__name__}')

    units: list[int] = []
    length = len(data)
    i = 0

    while i < length:
        start = i

        # Read next code point from input
        c0 = data[i]
        i += 1

        leading = classify_leading_byte(c0)
        if leading is None:
            raise fail(
                DecodingError,
                ErrorKind.INVALID_LEADING_BYTE,
                start,
                f'byte {c0:#04x} cannot start a sequence',
            )
        code_point, count = leading

        if length - i < count:
            raise fail(
                DecodingError,
                ErrorKind.UNEXPECTED_END_OF_INPUT,
                start,
                f'sequence needs {count} continuation byte(s), {length - i} left',
            )

        for _ in range(count):
            c = data[i]
            if not is_continuation_byte(c):
                raise fail(
                    DecodingError,
                    ErrorKind.INVALID_CONTINUATION_BYTE,
                    start,
                    f'byte {c:#04x} at {i} is not a continuation byte',
                )
            code_point = (code_point << CONTINUATION_PAYLOAD_BITS) | (c & CONTINUATION_PAYLOAD_MASK)
            i += 1

        if strict:
            if code_point < MIN_CODE_POINT_BY_CONTINUATIONS[count]:
                raise fail(
                    DecodingError,
                    ErrorKind.NON_CANONICAL_ENCODING,
                    start,
                    f'U+{code_point:04X} encoded in {count + 1} bytes is not in canonical form',
                )
            if HIGH_SURROGATE_MIN <= code_point <= LOW_SURROGATE_MAX:
                raise fail(
                    DecodingError,
                    ErrorKind.RESERVED_CODE_POINT,
                    start,
                    f'U+{code_point:04X} is reserved for UTF-16 surrogates',
                )

        # Append code point to output, possibly as a surrogate pair
        if code_point <= MAX_CODE_UNIT:
            units.append(code_point)
        elif code_point <= MAX_CODE_POINT:
            code_point -= SURROGATE_OFFSET
            units.append((code_point >> SURROGATE_PAYLOAD_BITS) + HIGH_SURROGATE_MIN)
            units.append((code_point & SURROGATE_PAYLOAD_MASK) + LOW_SURROGATE_MIN)
        else:
            raise fail(
                DecodingError,
                ErrorKind.CODE_POINT_OUT_OF_RANGE,
                start,
                f'code point {code_point:#x} is above U+10FFFF',
            )

    return CodeUnits(units)


def decode_str(data: bytes | bytearray | memoryview, strict: bool = True) -> str:
    """Decode UTF-8 straight into a Python string.

    With ``strict=False`` the result may contain lone surrogate characters.
    """
    return decode(data, strict).to_str()
