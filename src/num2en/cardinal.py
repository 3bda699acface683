"""Cardinal words for fixed-width integers ("one hundred forty-two").

Every value representable in a width has a word form, including the
most-negative value of each signed width.
"""

from __future__ import annotations

import operator

import numpy as np

from num2en.errors import OutOfRange
from num2en.lexical import render_magnitude
from num2en.widths import IntWidth


def check_width(value: int, width: IntWidth) -> int:
    """Return ``value`` as a plain int, raising unless it fits ``width``.

    Anything implementing ``__index__`` is accepted, so numpy integer
    scalars such as ``np.int8(-128)`` convert like their Python values.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Expected int for {width.value}, got {type(value).__name__}")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(
            f"Expected int for {width.value}, got {type(value).__name__}"
        ) from None
    if not width.contains(value):
        raise OutOfRange(value, width.value)
    return value


def magnitude_of(value: int, width: IntWidth) -> int:
    """Absolute value of ``value``, computed in the unsigned counterpart.

    Two's-complement negation in the unsigned width is exact for the
    signed minimum (-128 for i8 -> 128), which has no positive
    counterpart in its own width.
    """
    if value >= 0:
        return value
    return (~value + 1) & width.unsigned.max_value


def cardinal_tokens(value: int, width: IntWidth) -> list[str]:
    """Word tokens of a non-zero value, sign first."""
    words: list[str] = []
    if value < 0:
        words.append("negative")
    words.extend(render_magnitude(magnitude_of(value, width), width.periods))
    return words


def to_words(value: int, width: IntWidth | str = IntWidth.U128) -> str:
    """Convert an integer of the given width to cardinal words.

    Args:
        value: The integer to convert.
        width: Integer width the value is interpreted in (default u128).

    Returns:
        Space-joined words, e.g. ``"twelve thousand one hundred forty-two"``.

    Raises:
        TypeError: If ``value`` is not an int.
        OutOfRange: If ``value`` does not fit ``width``.

    Examples:
        >>> to_words(-2918, "i16")
        'negative two thousand nine hundred eighteen'
    """
    width = IntWidth(width)
    value = check_width(value, width)
    if value == 0:
        return "zero"
    return " ".join(cardinal_tokens(value, width))


def u8_to_words(value: int) -> str:
    return to_words(value, IntWidth.U8)


def i8_to_words(value: int) -> str:
    return to_words(value, IntWidth.I8)


def u16_to_words(value: int) -> str:
    return to_words(value, IntWidth.U16)


def i16_to_words(value: int) -> str:
    return to_words(value, IntWidth.I16)


def u32_to_words(value: int) -> str:
    return to_words(value, IntWidth.U32)


def i32_to_words(value: int) -> str:
    return to_words(value, IntWidth.I32)


def u64_to_words(value: int) -> str:
    return to_words(value, IntWidth.U64)


def i64_to_words(value: int) -> str:
    return to_words(value, IntWidth.I64)


def u128_to_words(value: int) -> str:
    return to_words(value, IntWidth.U128)


def i128_to_words(value: int) -> str:
    return to_words(value, IntWidth.I128)


def usize_to_words(value: int) -> str:
    """Native pointer-width unsigned integer (32 or 64 bits)."""
    return to_words(value, IntWidth.USIZE)


def isize_to_words(value: int) -> str:
    """Native pointer-width signed integer (32 or 64 bits)."""
    return to_words(value, IntWidth.ISIZE)
