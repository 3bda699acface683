"""Ordinal words for unsigned integers ("first", "twenty-first")."""

from __future__ import annotations

from types import MappingProxyType

from num2en.cardinal import cardinal_tokens, check_width
from num2en.widths import IntWidth

ORDINAL_EXCEPTIONS: MappingProxyType[str, str] = MappingProxyType({
    "one": "first",
    "two": "second",
    "three": "third",
    "five": "fifth",
    "eight": "eighth",
    "nine": "ninth",
    "twelve": "twelfth",
})


def ordinalize(token: str) -> str:
    """Rewrite a cardinal token into its ordinal form.

    Only the part after a hyphen changes: "forty-two" -> "forty-second",
    "twenty" -> "twentieth", "hundred" -> "hundredth".
    """
    prefix, _, word = token.rpartition("-")
    if prefix:
        prefix += "-"
    if word in ORDINAL_EXCEPTIONS:
        word = ORDINAL_EXCEPTIONS[word]
    elif word.endswith("y"):
        word = word[:-1] + "ieth"
    else:
        word += "th"
    return prefix + word


def to_ordinal_words(value: int, width: IntWidth | str = IntWidth.U128) -> str:
    """Convert an unsigned integer to ordinal words.

    Raises:
        ValueError: If ``width`` is signed.
        OutOfRange: If ``value`` does not fit ``width``.
    """
    width = IntWidth(width)
    if width.signed:
        raise ValueError(f"Ordinal words are only defined for unsigned widths, got {width.value}")
    value = check_width(value, width)
    if value == 0:
        return "zeroth"
    words = cardinal_tokens(value, width)
    words[-1] = ordinalize(words[-1])
    return " ".join(words)


def u8_to_ord_words(value: int) -> str:
    return to_ordinal_words(value, IntWidth.U8)


def u16_to_ord_words(value: int) -> str:
    return to_ordinal_words(value, IntWidth.U16)


def u32_to_ord_words(value: int) -> str:
    return to_ordinal_words(value, IntWidth.U32)


def u64_to_ord_words(value: int) -> str:
    return to_ordinal_words(value, IntWidth.U64)


def u128_to_ord_words(value: int) -> str:
    return to_ordinal_words(value, IntWidth.U128)


def usize_to_ord_words(value: int) -> str:
    return to_ordinal_words(value, IntWidth.USIZE)
