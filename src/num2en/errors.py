"""Exception taxonomy for num2en.

Every error derives from ValueError so callers can catch either the
package base class or the builtin.
"""

from __future__ import annotations

from typing import Any


class Num2EnError(ValueError):
    """Base class for all conversion failures."""


class InvalidCharacter(Num2EnError):
    """Digit spelling received a character other than 0-9."""

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid character {character!r} at position {position}"
        )


class InvalidString(Num2EnError):
    """Decimal text is not in the [-]digits[.digits] form."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid number string {text!r}: {reason}")


class TooLarge(Num2EnError):
    """The integer part does not fit in 128 unsigned bits."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"Integer part of {text!r} exceeds 2**128 - 1"
        )


class NotFinite(Num2EnError):
    """A float input is NaN or infinite."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Cannot convert non-finite value {value!r}")


class OutOfRange(Num2EnError):
    """An integer does not fit the requested width."""

    def __init__(self, value: Any, width: Any) -> None:
        self.value = value
        self.width = width
        super().__init__(
            f"{value} is outside the range of {width}"
        )
