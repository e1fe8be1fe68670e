"""Tests for u8codec.decoder - UTF-8 bytes to UTF-16 code units.

Strict mode must refuse every overlong form and every directly encoded
surrogate; lenient mode must pass them through numerically.
"""

import pytest

from u8codec.decoder import classify_leading_byte, decode, decode_str
from u8codec.errors import DecodingError, ErrorCategory, ErrorKind
from u8codec.sequences import CodeUnits

# ============================================================================
# Valid input
# ============================================================================


def test_decode_ascii() -> None:
    assert decode(b'hello') == CodeUnits.from_str('hello')
    assert decode(bytes(range(0x80))) == tuple(range(0x80)), 'All of ASCII decodes as-is'


@pytest.mark.parametrize(
    ('data', 'expected', 'description'),
    [
        ([0xC2, 0x80], [0x0080], 'lowest two byte character'),
        ([0xDF, 0xBF], [0x07FF], 'highest two byte character'),
        ([0xE0, 0xA0, 0x80], [0x0800], 'lowest three byte character'),
        ([0xED, 0x9F, 0xBF], [0xD7FF], 'last code point before surrogates'),
        ([0xEE, 0x80, 0x80], [0xE000], 'first code point after surrogates'),
        ([0xEF, 0xBF, 0xBF], [0xFFFF], 'highest three byte character'),
        ([0xF0, 0x90, 0x80, 0x80], [0xD800, 0xDC00], 'lowest four byte character'),
        ([0xF0, 0x9D, 0x84, 0x9E], [0xD834, 0xDD1E], 'G clef'),
        ([0xF1, 0x80, 0x80, 0x80], [0xD8C0, 0xDC00], 'U+40000, leading byte F1'),
        ([0xF4, 0x8F, 0xBF, 0xBF], [0xDBFF, 0xDFFF], 'highest four byte character'),
    ],
)
def test_decode_boundaries(data: list[int], expected: list[int], description: str) -> None:
    result = decode(bytes(data))
    assert isinstance(result, CodeUnits)
    assert result == tuple(expected), description


def test_decode_empty() -> None:
    assert decode(b'') == CodeUnits()


@pytest.mark.parametrize('container', [bytes, bytearray, memoryview])
def test_decode_accepts_bytes_like(container: type) -> None:
    assert decode(container(b'\xc3\xa9')) == (0xE9,)


@pytest.mark.parametrize('source', ['hello', [0x68, 0x69], CodeUnits([0x68])])
def test_decode_rejects_non_bytes(source: object) -> None:
    with pytest.raises(TypeError):
        decode(source)  # type: ignore[arg-type]


def test_decode_str() -> None:
    assert decode_str(bytes([0xF0, 0x9D, 0x84, 0x9E])) == '\N{MUSICAL SYMBOL G CLEF}'
    assert decode_str(b'caf\xc3\xa9') == 'caf\N{LATIN SMALL LETTER E WITH ACUTE}'


# ============================================================================
# Strict mode rejections
# ============================================================================

OVERLONG = [
    # (bytes, value decoded in lenient mode, description)
    ([0xC0, 0x80], 0x00, 'two byte NUL'),
    ([0xC1, 0xBF], 0x7F, 'unneeded first byte in two byte character'),
    ([0xE0, 0x80, 0xAF], 0x2F, 'three byte solidus'),
    ([0xE0, 0x9F, 0xBF], 0x7FF, 'unneeded first byte in three byte character'),
    ([0xF0, 0x80, 0x80, 0x80], 0x00, 'four byte NUL'),
    ([0xF0, 0x8F, 0xBF, 0xBF], 0xFFFF, 'unneeded first byte in four byte character'),
]

ENCODED_SURROGATES = [
    ([0xED, 0xA0, 0x80], 0xD800, 'lowest high surrogate'),
    ([0xED, 0xAF, 0xBF], 0xDBFF, 'highest high surrogate'),
    ([0xED, 0xB0, 0x80], 0xDC00, 'lowest low surrogate'),
    ([0xED, 0xBF, 0xBF], 0xDFFF, 'highest low surrogate'),
]


@pytest.mark.parametrize(('data', 'value', 'description'), OVERLONG)
def test_strict_rejects_overlong(data: list[int], value: int, description: str) -> None:
    with pytest.raises(DecodingError) as exc_info:
        decode(bytes(data))
    assert exc_info.value.kind is ErrorKind.NON_CANONICAL_ENCODING, description
    assert exc_info.value.category is ErrorCategory.POLICY
    assert exc_info.value.suppressible


@pytest.mark.parametrize(('data', 'value', 'description'), ENCODED_SURROGATES)
def test_strict_rejects_encoded_surrogates(data: list[int], value: int, description: str) -> None:
    with pytest.raises(DecodingError) as exc_info:
        decode(bytes(data), strict=True)
    assert exc_info.value.kind is ErrorKind.RESERVED_CODE_POINT, description


def test_strict_is_default() -> None:
    with pytest.raises(DecodingError):
        decode(bytes([0xC1, 0xBF]))


def test_strict_error_position_points_at_sequence_start() -> None:
    with pytest.raises(DecodingError) as exc_info:
        decode(b'ok' + bytes([0xED, 0xA0, 0x80]))
    assert exc_info.value.position == 2


# ============================================================================
# Lenient mode
# ============================================================================


@pytest.mark.parametrize(('data', 'value', 'description'), OVERLONG + ENCODED_SURROGATES)
def test_lenient_accepts(data: list[int], value: int, description: str) -> None:
    assert decode(bytes(data), strict=False) == (value,), description


def test_lenient_surrogates_survive_to_str() -> None:
    # An encoded pair of surrogates is CESU-8; lenient mode rebuilds the character
    cesu = bytes([0xED, 0xA0, 0xBD, 0xED, 0xB8, 0x80])
    assert decode(cesu, strict=False) == (0xD83D, 0xDE00)
    assert decode_str(cesu, strict=False) == '\N{GRINNING FACE}'

    assert decode_str(bytes([0xED, 0xA0, 0x80]), strict=False) == chr(0xD800)


# ============================================================================
# Malformed input (fails in both modes)
# ============================================================================


@pytest.mark.parametrize(
    ('data', 'position', 'description'),
    [
        ([0xCF], 0, 'truncated two byte character'),
        ([0xEF, 0xBF], 0, 'truncated three byte character'),
        ([0xE0, 0xA0], 0, 'three byte leader with one continuation'),
        ([0xF7, 0xBF, 0xBF], 0, 'truncated four byte character'),
        ([0xF0], 0, 'lone four byte leader'),
        ([0x61, 0x62, 0xE2, 0x82], 2, 'truncated after ascii'),
    ],
)
@pytest.mark.parametrize('strict', [True, False])
def test_truncated(data: list[int], position: int, description: str, strict: bool) -> None:
    with pytest.raises(DecodingError) as exc_info:
        decode(bytes(data), strict=strict)
    assert exc_info.value.kind is ErrorKind.UNEXPECTED_END_OF_INPUT, description
    assert exc_info.value.category is ErrorCategory.STRUCTURAL
    assert exc_info.value.position == position


@pytest.mark.parametrize(
    ('data', 'position'),
    [
        ([0x80], 0),
        ([0xBF], 0),
        ([0x61, 0x80], 1),
        ([0xC3, 0xA9, 0xA9], 2),
        ([0xF8, 0x88, 0x80, 0x80, 0x80], 0),
        ([0xFC, 0x84, 0x80, 0x80, 0x80, 0x80], 0),
        ([0xFE], 0),
        ([0xFF], 0),
    ],
)
@pytest.mark.parametrize('strict', [True, False])
def test_invalid_leading_byte(data: list[int], position: int, strict: bool) -> None:
    with pytest.raises(DecodingError) as exc_info:
        decode(bytes(data), strict=strict)
    assert exc_info.value.kind is ErrorKind.INVALID_LEADING_BYTE
    assert exc_info.value.position == position


@pytest.mark.parametrize(
    'data',
    [
        [0xC2, 0x41],
        [0xC2, 0xC2, 0x80],
        [0xE0, 0xA0, 0xC0],
        [0xE2, 0x28, 0xA1],
        [0xF0, 0x90, 0x80, 0x7F],
        [0xF0, 0x28, 0x8C, 0xBC],
        # Continuation is checked before canonical form
        [0xC0, 0x41],
    ],
)
@pytest.mark.parametrize('strict', [True, False])
def test_invalid_continuation_byte(data: list[int], strict: bool) -> None:
    with pytest.raises(DecodingError) as exc_info:
        decode(bytes(data), strict=strict)
    assert exc_info.value.kind is ErrorKind.INVALID_CONTINUATION_BYTE
    assert exc_info.value.category is ErrorCategory.MALFORMED
    assert not exc_info.value.suppressible


@pytest.mark.parametrize(
    'data',
    [
        [0xF4, 0x90, 0x80, 0x80],
        [0xF5, 0x80, 0x80, 0x80],
        [0xF7, 0xBF, 0xBF, 0xBF],
    ],
)
@pytest.mark.parametrize('strict', [True, False])
def test_above_max_code_point(data: list[int], strict: bool) -> None:
    with pytest.raises(DecodingError) as exc_info:
        decode(bytes(data), strict=strict)
    assert exc_info.value.kind is ErrorKind.CODE_POINT_OUT_OF_RANGE
    assert exc_info.value.category is ErrorCategory.RANGE


# ============================================================================
# Leading byte classification
# ============================================================================


@pytest.mark.parametrize(
    ('byte', 'expected'),
    [
        (0x00, (0x00, 0)),
        (0x7F, (0x7F, 0)),
        (0xC2, (0x02, 1)),
        (0xDF, (0x1F, 1)),
        (0xE0, (0x00, 2)),
        (0xEF, (0x0F, 2)),
        (0xF0, (0x00, 3)),
        (0xF7, (0x07, 3)),
        (0x80, None),
        (0xBF, None),
        (0xF8, None),
        (0xFF, None),
    ],
)
def test_classify_leading_byte(byte: int, expected: tuple[int, int] | None) -> None:
    assert classify_leading_byte(byte) == expected
