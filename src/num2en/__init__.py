"""num2en: convert integers, decimal text and floats to English words.

    >>> from num2en import to_words, to_ordinal_words, parse_and_spell
    >>> to_words(12_142)
    'twelve thousand one hundred forty-two'
    >>> to_ordinal_words(21)
    'twenty-first'
    >>> parse_and_spell("-0.5")
    'negative zero point five'
"""

from num2en.cardinal import (
    i8_to_words,
    i16_to_words,
    i32_to_words,
    i64_to_words,
    i128_to_words,
    isize_to_words,
    to_words,
    u8_to_words,
    u16_to_words,
    u32_to_words,
    u64_to_words,
    u128_to_words,
    usize_to_words,
)
from num2en.decimal_text import (
    f32_to_words,
    f64_to_words,
    float_to_words,
    parse_and_spell,
    spell_digits,
    str_to_words,
)
from num2en.errors import (
    InvalidCharacter,
    InvalidString,
    Num2EnError,
    NotFinite,
    OutOfRange,
    TooLarge,
)
from num2en.ordinal import (
    to_ordinal_words,
    u8_to_ord_words,
    u16_to_ord_words,
    u32_to_ord_words,
    u64_to_ord_words,
    u128_to_ord_words,
    usize_to_ord_words,
)
from num2en.widths import FloatWidth, IntWidth

__version__ = "0.1.0"

__all__ = [
    "FloatWidth",
    "IntWidth",
    "InvalidCharacter",
    "InvalidString",
    "NotFinite",
    "Num2EnError",
    "OutOfRange",
    "TooLarge",
    "f32_to_words",
    "f64_to_words",
    "float_to_words",
    "i8_to_words",
    "i16_to_words",
    "i32_to_words",
    "i64_to_words",
    "i128_to_words",
    "isize_to_words",
    "parse_and_spell",
    "spell_digits",
    "str_to_words",
    "to_ordinal_words",
    "to_words",
    "u8_to_ord_words",
    "u8_to_words",
    "u16_to_ord_words",
    "u16_to_words",
    "u32_to_ord_words",
    "u32_to_words",
    "u64_to_ord_words",
    "u64_to_words",
    "u128_to_ord_words",
    "u128_to_words",
    "usize_to_ord_words",
    "usize_to_words",
]
