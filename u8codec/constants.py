"""Numeric constants shared by the encoder and the decoder.

UTF-8 octet layout (RFC 3629, section 3):

    Code point range    | Octet sequence (binary)
    --------------------+------------------------------------
    0000 0000-0000 007F | 0xxxxxxx
    0000 0080-0000 07FF | 110xxxxx 10xxxxxx
    0000 0800-0000 FFFF | 1110xxxx 10xxxxxx 10xxxxxx
    0001 0000-0010 FFFF | 11110xxx 10xxxxxx 10xxxxxx 10xxxxxx
"""

# Code unit / code point ranges
MAX_CODE_UNIT = 0xFFFF
MAX_CODE_POINT = 0x10FFFF

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF

# Offset subtracted from astral code points before splitting into a pair
SURROGATE_OFFSET = 0x10000
SURROGATE_PAYLOAD_BITS = 10
SURROGATE_PAYLOAD_MASK = 0x3FF

# Largest code point that fits in a sequence of 1, 2, 3 and 4 bytes
MAX_ONE_BYTE = 0x7F
MAX_TWO_BYTE = 0x7FF
MAX_THREE_BYTE = 0xFFFF
MAX_FOUR_BYTE = MAX_CODE_POINT

# Leading byte prefixes
TWO_BYTE_PREFIX = 0xC0
THREE_BYTE_PREFIX = 0xE0
FOUR_BYTE_PREFIX = 0xF0

# Continuation byte: 10xxxxxx
CONTINUATION_PREFIX = 0x80
CONTINUATION_MASK = 0xC0
CONTINUATION_PAYLOAD_MASK = 0x3F
CONTINUATION_PAYLOAD_BITS = 6

# Leading byte classification: (marker mask, marker value, payload mask, continuation count).
# Checked in order; a byte matching none of them cannot start a sequence.
LEADING_BYTE_PATTERNS: tuple[tuple[int, int, int, int], ...] = (
    (0x80, 0x00, 0x7F, 0),
    (0xE0, 0xC0, 0x1F, 1),
    (0xF0, 0xE0, 0x0F, 2),
    (0xF8, 0xF0, 0x07, 3),
)

# Smallest code point that may legally use a sequence with N continuation bytes.
# Anything below is an overlong encoding.
MIN_CODE_POINT_BY_CONTINUATIONS: tuple[int, ...] = (
    0x00,
    MAX_ONE_BYTE + 1,
    MAX_TWO_BYTE + 1,
    MAX_THREE_BYTE + 1,
)
