"""UTF-16 code units to UTF-8 bytes and back.

This package converts between the UTF-16 code unit sequence of an in-memory
string and its UTF-8 wire form, validating per RFC 3629. Decoding is strict by
default and rejects overlong encodings and encoded surrogates.

Example:
    >>> from u8codec import decode, encode
    >>> data = encode('G clef: \\N{MUSICAL SYMBOL G CLEF}')
    >>> data[-4:].hex(' ')
    'f0 9d 84 9e'
    >>> decode(data).to_str()
    'G clef: \\N{MUSICAL SYMBOL G CLEF}'
"""

from u8codec.decoder import decode, decode_str
from u8codec.encoder import encode, encode_str
from u8codec.errors import CodecError, DecodingError, EncodingError, ErrorCategory, ErrorKind
from u8codec.sequences import CodeUnits
from u8codec.utils import utf8_len, utf16_len

__version__ = '0.1.0'

__all__ = [
    'encode',
    'decode',
    'encode_str',
    'decode_str',
    'CodeUnits',
    'utf8_len',
    'utf16_len',
    'CodecError',
    'EncodingError',
    'DecodingError',
    'ErrorKind',
    'ErrorCategory',
]
