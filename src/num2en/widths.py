"""Fixed-width integer and float types supported by the converters."""

from __future__ import annotations

import struct
from enum import Enum

# Pointer width of the running interpreter, used for usize/isize
NATIVE_BITS: int = struct.calcsize("P") * 8


class IntWidth(str, Enum):
    """Integer widths, named after their bit count and signedness."""

    U8 = "u8"
    I8 = "i8"
    U16 = "u16"
    I16 = "i16"
    U32 = "u32"
    I32 = "i32"
    U64 = "u64"
    I64 = "i64"
    U128 = "u128"
    I128 = "i128"
    USIZE = "usize"
    ISIZE = "isize"

    @property
    def bits(self) -> int:
        if self.value.endswith("size"):
            return NATIVE_BITS
        return int(self.value[1:])

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def unsigned(self) -> IntWidth:
        """The unsigned counterpart of the same width."""
        return IntWidth("u" + self.value[1:])

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def periods(self) -> int:
        """Highest period index the unsigned range of this width can reach.

        u8 -> 0, u16 -> 1, u32 -> 3, u64 -> 6, u128 -> 12.
        """
        return (len(str(self.unsigned.max_value)) - 1) // 3

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


class FloatWidth(str, Enum):
    """IEEE 754 binary float widths."""

    F32 = "f32"
    F64 = "f64"


U128_MAX: int = IntWidth.U128.max_value
