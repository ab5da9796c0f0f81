"""
Checked integer conversion for grid coordinates.

All grid arithmetic is done on plain ints kept inside the 64-bit signed range.
Callers pick the integer type their results come back in; a value that does not
fit that type is a programmer error and raises instead of wrapping.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass


class ConversionError(OverflowError):
    """An integer is not representable in the requested IntType."""


@dataclass(frozen=True)
class IntType:
    """A fixed-width integer type: name, width in bits, signedness."""

    name: str
    bits: int
    signed: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def __str__(self) -> str:
        return self.name


I8 = IntType("i8", 8, True)
I16 = IntType("i16", 16, True)
I32 = IntType("i32", 32, True)
I64 = IntType("i64", 64, True)
U8 = IntType("u8", 8, False)
U16 = IntType("u16", 16, False)
U32 = IntType("u32", 32, False)
U64 = IntType("u64", 64, False)

ISIZE = I64
USIZE = U64


def convert(value: object, kind: IntType = I64) -> int:
    """
    Return value as an int of the given kind.

    Raises:
        TypeError: value is not an integer (bools included)
        ConversionError: value is out of range for kind
    """
    if isinstance(value, bool):
        raise TypeError(f"Expected an integer, got bool: {value!r}")
    try:
        n = operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"Expected an integer, got {type(value).__name__}: {value!r}"
        ) from None

    if not kind.contains(n):
        raise ConversionError(
            f"Value {n} does not fit in {kind}\n"
            f"  Range: [{kind.min_value}, {kind.max_value}]"
        )
    return n


def widen(value: object) -> int:
    """Convert an incoming coordinate, offset or count to the internal i64 range."""
    return convert(value, I64)
