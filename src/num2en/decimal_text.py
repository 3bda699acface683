"""Words for decimal text and floats ("123.456" -> "... point four five six").

The integer part goes through the u128 cardinal converter; the
fractional part is spelled digit by digit and may be any length.
"""

from __future__ import annotations

from types import MappingProxyType

import numpy as np

from num2en.cardinal import to_words
from num2en.errors import InvalidCharacter, InvalidString, NotFinite, TooLarge
from num2en.widths import U128_MAX, FloatWidth, IntWidth

DIGITS: MappingProxyType[str, str] = MappingProxyType({
    "0": "zero",
    "1": "one",
    "2": "two",
    "3": "three",
    "4": "four",
    "5": "five",
    "6": "six",
    "7": "seven",
    "8": "eight",
    "9": "nine",
})

_U128_DIGITS = len(str(U128_MAX))

_FLOAT_TYPES: dict[FloatWidth, type[np.floating]] = {
    FloatWidth.F32: np.float32,
    FloatWidth.F64: np.float64,
}


def spell_digits(digits: str) -> str:
    """Spell every digit individually: "007" -> "zero zero seven".

    Raises:
        InvalidCharacter: At the first character that is not 0-9.
    """
    words: list[str] = []
    for position, character in enumerate(digits):
        word = DIGITS.get(character)
        if word is None:
            raise InvalidCharacter(character, position)
        words.append(word)
    return " ".join(words)


def _validate(text: str) -> None:
    seen_point = False
    seen_digit = False
    for position, character in enumerate(text):
        if character == ".":
            if seen_point:
                raise InvalidString(text, "more than one decimal point")
            seen_point = True
        elif character in DIGITS:
            seen_digit = True
        elif character == "-":
            if position != 0:
                raise InvalidString(text, "'-' is only allowed as the first character")
        else:
            raise InvalidString(text, f"unexpected character {character!r}")
    if not seen_digit:
        raise InvalidString(text, "no digits")


def _parse_magnitude(digits: str, text: str) -> int:
    # Leading zeros go before int() so they never count toward its digit limit
    significant = digits.lstrip("0")
    if len(significant) > _U128_DIGITS:
        raise TooLarge(text)
    value = int(significant or "0")
    if value > U128_MAX:
        raise TooLarge(text)
    return value


def parse_and_spell(text: str) -> str:
    """Convert decimal text of the form ``[-]digits[.digits]`` to words.

    Args:
        text: The number. Either side of the decimal point may be empty,
            but at least one digit must be present. An empty string
            converts to an empty string.

    Returns:
        Words in the order ``[negative] [integer words] [point [digits]]``.

    Raises:
        InvalidString: Bad sign placement, several decimal points,
            characters other than ``-``, ``.`` and digits, or no digits.
        TooLarge: The integer part exceeds ``2**128 - 1``.

    Examples:
        >>> parse_and_spell("123.456")
        'one hundred twenty-three point four five six'
        >>> parse_and_spell(".0042")
        'point zero zero four two'
    """
    if not text:
        return ""
    _validate(text)

    words: list[str] = []
    body = text
    if body.startswith("-"):
        words.append("negative")
        body = body[1:]

    integer_part, point, fraction = body.partition(".")
    if integer_part:
        words.append(to_words(_parse_magnitude(integer_part, text), IntWidth.U128))
    if point:
        words.append("point")
        if fraction:
            words.append(spell_digits(fraction))
    return " ".join(words)


# Same operation under the name used by the integer converters
str_to_words = parse_and_spell


def format_float(value: float, width: FloatWidth | str = FloatWidth.F64) -> str:
    """Shortest positional text that round-trips ``value`` in ``width``.

    Never uses scientific notation, and a zero fraction is dropped
    (34.0 -> "34").

    Raises:
        NotFinite: If the value is NaN or infinite after narrowing.
    """
    if isinstance(value, (str, bytes)):
        raise TypeError(f"Expected a float, got {type(value).__name__}")
    width = FloatWidth(width)
    with np.errstate(over="ignore"):
        scalar = _FLOAT_TYPES[width](value)
    if not np.isfinite(scalar):
        raise NotFinite(value)
    return np.format_float_positional(scalar, unique=True, trim="-")


def float_to_words(value: float, width: FloatWidth | str = FloatWidth.F64) -> str:
    """Convert a finite float to words via its shortest decimal text.

    Raises:
        NotFinite: If the value is NaN or infinite.
        TooLarge: If the integer part exceeds ``2**128 - 1``.

    Examples:
        >>> float_to_words(15.2, "f32")
        'fifteen point two'
    """
    text = format_float(value, width)
    try:
        return parse_and_spell(text)
    except InvalidString as exc:
        raise RuntimeError(f"Float formatting produced unparsable text {text!r}") from exc


def f32_to_words(value: float) -> str:
    return float_to_words(value, FloatWidth.F32)


def f64_to_words(value: float) -> str:
    return float_to_words(value, FloatWidth.F64)
