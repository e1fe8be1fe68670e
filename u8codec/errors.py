"""Error taxonomy for the UTF-8 / UTF-16 codec.

Errors are classified by cause. Every failure aborts the call that raised it;
no partial output is ever returned and nothing is retried internally.

Example:
    >>> from u8codec import DecodingError, ErrorKind, decode
    >>> try:
    ...     decode(bytes([0xE0, 0xA0]))
    ... except DecodingError as e:
    ...     print(e.kind, e.position)
    unexpected_end_of_input 0
"""

from __future__ import annotations

from enum import StrEnum
import logging
from typing import TypeVar

LOGGER = logging.getLogger(__name__)


class ErrorCategory(StrEnum):
    """Coarse cause of a codec failure."""

    # Input truncated mid-sequence
    STRUCTURAL = 'structural'
    # Byte or code unit pattern violates the format grammar
    MALFORMED = 'malformed'
    # Decodable, but breaks canonical-form rules (skipped in non-strict mode)
    POLICY = 'policy'
    # Value outside the Unicode scalar range
    RANGE = 'range'


class ErrorKind(StrEnum):
    """Specific reason a codec call failed."""

    UNEXPECTED_END_OF_INPUT = 'unexpected_end_of_input'
    INVALID_SURROGATE_PAIR = 'invalid_surrogate_pair'
    CODE_POINT_OUT_OF_RANGE = 'code_point_out_of_range'
    INVALID_LEADING_BYTE = 'invalid_leading_byte'
    INVALID_CONTINUATION_BYTE = 'invalid_continuation_byte'
    NON_CANONICAL_ENCODING = 'non_canonical_encoding'
    RESERVED_CODE_POINT = 'reserved_code_point'

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self]


_CATEGORIES: dict[ErrorKind, ErrorCategory] = {
    ErrorKind.UNEXPECTED_END_OF_INPUT: ErrorCategory.STRUCTURAL,
    ErrorKind.INVALID_SURROGATE_PAIR: ErrorCategory.MALFORMED,
    ErrorKind.INVALID_LEADING_BYTE: ErrorCategory.MALFORMED,
    ErrorKind.INVALID_CONTINUATION_BYTE: ErrorCategory.MALFORMED,
    ErrorKind.NON_CANONICAL_ENCODING: ErrorCategory.POLICY,
    ErrorKind.RESERVED_CODE_POINT: ErrorCategory.POLICY,
    ErrorKind.CODE_POINT_OUT_OF_RANGE: ErrorCategory.RANGE,
}


class CodecError(ValueError):
    """Base class for all encode/decode failures.

    Attributes:
        kind: Specific failure reason
        position: Index into the input (code units for encode, bytes for decode)
            of the first element of the offending sequence
        message: Human readable description
    """

    allowed_kinds: frozenset[ErrorKind] = frozenset(ErrorKind)

    def __init__(self, kind: ErrorKind, position: int, message: str) -> None:
        if kind not in self.allowed_kinds:
            raise ValueError(f'{type(self).__name__} cannot carry kind {kind!r}')
        super().__init__(f'{message} at position {position}')
        self.kind = kind
        self.position = position
        self.message = message

    @property
    def category(self) -> ErrorCategory:
        return self.kind.category

    @property
    def suppressible(self) -> bool:
        """True if non-strict decoding would have accepted the input."""
        return self.category is ErrorCategory.POLICY

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.kind.value!r}, position={self.position})'


class EncodingError(CodecError):
    """Raised by `encode` when the code unit sequence cannot be encoded."""

    allowed_kinds = frozenset(
        {
            ErrorKind.UNEXPECTED_END_OF_INPUT,
            ErrorKind.INVALID_SURROGATE_PAIR,
            ErrorKind.CODE_POINT_OUT_OF_RANGE,
        }
    )


class DecodingError(CodecError):
    """Raised by `decode` when the byte sequence is not acceptable UTF-8."""

    allowed_kinds = frozenset(
        {
            ErrorKind.UNEXPECTED_END_OF_INPUT,
            ErrorKind.INVALID_LEADING_BYTE,
            ErrorKind.INVALID_CONTINUATION_BYTE,
            ErrorKind.NON_CANONICAL_ENCODING,
            ErrorKind.RESERVED_CODE_POINT,
            ErrorKind.CODE_POINT_OUT_OF_RANGE,
        }
    )


E = TypeVar('E', bound=CodecError)


def fail(error_cls: type[E], kind: ErrorKind, position: int, message: str) -> E:
    """Build a codec error and log it at DEBUG level.

    Returns the error so call sites read ``raise fail(...)``.
    """
    error = error_cls(kind, position, message)
    LOGGER.debug('%s: %s (%s)', error_cls.__name__, kind.value, error)
    return error
