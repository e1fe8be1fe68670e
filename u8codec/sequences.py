"""Container types for the two sides of the codec.

UTF-8 data is always plain ``bytes``. UTF-16 data is a ``CodeUnits`` tuple, so a
byte string and a code unit string can never be passed for one another.
"""

from __future__ import annotations

from collections.abc import Iterable
import struct
from typing import SupportsIndex, overload

from u8codec.constants import (
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MIN,
    MAX_CODE_UNIT,
    SURROGATE_OFFSET,
    SURROGATE_PAYLOAD_BITS,
    SURROGATE_PAYLOAD_MASK,
)


class CodeUnits(tuple[int, ...]):
    """Immutable sequence of 16-bit UTF-16 code units.

    Surrogate pairs are stored as two separate units, exactly as they appear in
    a UTF-16 string. Lone surrogates are allowed here; rejecting them is the
    encoder's job.

    Examples:
        >>> CodeUnits.from_str('a\\N{MUSICAL SYMBOL G CLEF}')
        CodeUnits([0x0061, 0xd834, 0xdd1e])
        >>> CodeUnits([0x68, 0x69]).to_str()
        'hi'
    """

    __slots__ = ()

    def __new__(cls, units: Iterable[int] = ()) -> CodeUnits:
        values = tuple(units)
        for i, unit in enumerate(values):
            if not isinstance(unit, int):
                raise TypeError(f'code unit {i} must be int, not {type(unit).__name__}')
            if not 0 <= unit <= MAX_CODE_UNIT:
                raise ValueError(f'code unit {i} out of 16-bit range: {unit:#x}')
        return super().__new__(cls, values)

    @classmethod
    def from_str(cls, text: str) -> CodeUnits:
        """Split a Python string into its UTF-16 code units.

        Characters above U+FFFF become surrogate pairs. Surrogate characters
        already present in ``text`` are kept as single units.

        Args:
            text: String to convert

        Returns:
            Code units in string order
        """
        if not isinstance(text, str):
            raise TypeError(f'expected str, not {type(text).__name__}')
        units: list[int] = []
        for char in text:
            value = ord(char)
            if value > MAX_CODE_UNIT:
                value -= SURROGATE_OFFSET
                units.append((value >> SURROGATE_PAYLOAD_BITS) + HIGH_SURROGATE_MIN)
                units.append((value & SURROGATE_PAYLOAD_MASK) + LOW_SURROGATE_MIN)
            else:
                units.append(value)
        return cls(units)

    def to_str(self) -> str:
        """Join the code units back into a Python string.

        Well-formed surrogate pairs become a single character; lone surrogates
        are passed through as surrogate characters.
        """
        raw = struct.pack(f'<{len(self)}H', *self)
        return raw.decode('utf-16-le', 'surrogatepass')

    @overload
    def __getitem__(self, index: SupportsIndex) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> CodeUnits: ...

    def __getitem__(self, index: SupportsIndex | slice) -> int | CodeUnits:
        if isinstance(index, slice):
            return CodeUnits(super().__getitem__(index))
        return super().__getitem__(index)

    def __repr__(self) -> str:
        return f"CodeUnits([{', '.join(f'{unit:#06x}' for unit in self)}])"
