"""Lexical layer: English words for magnitudes below one thousand.

Larger magnitudes are split into period groups of three digits, each
rendered here and followed by its period name.
"""

from __future__ import annotations

# 1..19, indexed by value - 1
_SMALL: tuple[str, ...] = (
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

# 20..90, indexed by tens digit - 2
_TENS: tuple[str, ...] = (
    "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)

# Names of the periods (1000 ** k), indexed by k - 1
PERIODS: tuple[str, ...] = (
    "thousand", "million", "billion", "trillion", "quadrillion",
    "quintillion", "sextillion", "septillion", "octillion", "nonillion",
    "decillion", "undecillion",
)


def render_below_hundred(value: int, words: list[str]) -> None:
    """Append the single token for 1 <= value < 100 (e.g. "forty-two")."""
    if value < 20:
        words.append(_SMALL[value - 1])
        return
    tens, ones = divmod(value, 10)
    word = _TENS[tens - 2]
    if ones:
        word += "-" + _SMALL[ones - 1]
    words.append(word)


def render_below_thousand(value: int, words: list[str]) -> None:
    """Append the tokens for 0 <= value < 1000. Zero appends nothing."""
    hundreds, rest = divmod(value, 100)
    if hundreds:
        render_below_hundred(hundreds, words)
        words.append("hundred")
    if rest:
        render_below_hundred(rest, words)


def render_magnitude(magnitude: int, periods: int) -> list[str]:
    """Decompose a non-negative magnitude into period groups.

    Args:
        magnitude: Value to render, ``0 <= magnitude < 1000 ** (periods + 1)``.
        periods: Highest period index to examine (0 = units only).

    Returns:
        Word tokens, most significant first. Entirely-zero groups emit
        nothing; a zero magnitude yields an empty list.
    """
    words: list[str] = []
    divisor = 1000 ** periods
    index = periods
    while divisor >= 1000:
        group = (magnitude // divisor) % 1000
        if group:
            render_below_thousand(group, words)
            words.append(PERIODS[index - 1])
        divisor //= 1000
        index -= 1
    render_below_thousand(magnitude % 1000, words)
    return words
