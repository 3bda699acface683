"""Registered converters: one per public conversion operation.

Arguments arrive as JSON-ish values (numbers or strings), so each
converter coerces them before calling into the core modules.
"""

from __future__ import annotations

from typing import Any

from num2en.cardinal import to_words
from num2en.decimal_text import float_to_words, parse_and_spell, spell_digits
from num2en.ordinal import to_ordinal_words
from num2en.tools.base import (
    BaseConverter,
    ConverterCategory,
    ConverterParameter,
    ConverterSchema,
    register_converter,
)
from num2en.widths import FloatWidth, IntWidth

_INT_WIDTHS = [w.value for w in IntWidth]
_UNSIGNED_WIDTHS = [w.value for w in IntWidth if not w.signed]
_FLOAT_WIDTHS = [w.value for w in FloatWidth]


def _as_int(value: Any) -> int:
    # Floats like 3.0 would silently truncate through int()
    if isinstance(value, float):
        raise TypeError(f"Expected an integer, got float {value!r}")
    return int(value)


@register_converter
class CardinalConverter(BaseConverter):
    """Cardinal words for a fixed-width integer."""

    name = "cardinal"
    schema = ConverterSchema(
        name="cardinal",
        description="Write an integer out in English words, e.g. 142 -> 'one hundred forty-two'. Negative values are prefixed with 'negative'.",
        category=ConverterCategory.CARDINAL,
        parameters=[
            ConverterParameter(
                name="value",
                type="integer",
                description="The integer to convert",
            ),
            ConverterParameter(
                name="width",
                type="string",
                description="Integer width the value must fit (default u128)",
                enum=_INT_WIDTHS,
                default=IntWidth.U128.value,
                required=False,
            ),
        ],
        returns="The cardinal number words",
    )

    def convert(self, **kwargs: Any) -> str:
        width = kwargs.get("width", IntWidth.U128)
        return to_words(_as_int(kwargs["value"]), width)


@register_converter
class OrdinalConverter(BaseConverter):
    """Ordinal words for a fixed-width unsigned integer."""

    name = "ordinal"
    schema = ConverterSchema(
        name="ordinal",
        description="Write a non-negative integer as an English ordinal, e.g. 21 -> 'twenty-first'.",
        category=ConverterCategory.ORDINAL,
        parameters=[
            ConverterParameter(
                name="value",
                type="integer",
                description="The non-negative integer to convert",
            ),
            ConverterParameter(
                name="width",
                type="string",
                description="Unsigned integer width the value must fit (default u128)",
                enum=_UNSIGNED_WIDTHS,
                default=IntWidth.U128.value,
                required=False,
            ),
        ],
        returns="The ordinal number words",
    )

    def convert(self, **kwargs: Any) -> str:
        width = kwargs.get("width", IntWidth.U128)
        return to_ordinal_words(_as_int(kwargs["value"]), width)


@register_converter
class SpellDigitsConverter(BaseConverter):
    """Spell a string of digits one by one."""

    name = "spell_digits"
    schema = ConverterSchema(
        name="spell_digits",
        description="Spell each digit of a digit string individually, e.g. '007' -> 'zero zero seven'.",
        category=ConverterCategory.DIGITS,
        parameters=[
            ConverterParameter(
                name="digits",
                type="string",
                description="A string containing only the characters 0-9",
            ),
        ],
        returns="The digit words separated by spaces",
    )

    def convert(self, **kwargs: Any) -> str:
        return spell_digits(str(kwargs["digits"]))


@register_converter
class DecimalTextConverter(BaseConverter):
    """Words for a decimal number given as text."""

    name = "decimal_text"
    schema = ConverterSchema(
        name="decimal_text",
        description="Write a decimal number given as text in English words, e.g. '123.45' -> 'one hundred twenty-three point four five'. The integer part must not exceed 2**128 - 1; scientific notation is not supported.",
        category=ConverterCategory.DECIMAL,
        parameters=[
            ConverterParameter(
                name="text",
                type="string",
                description="The number in [-]digits[.digits] form",
            ),
        ],
        returns="The number words",
    )

    def convert(self, **kwargs: Any) -> str:
        return parse_and_spell(str(kwargs["text"]))


@register_converter
class FloatConverter(BaseConverter):
    """Words for a finite floating-point number."""

    name = "float"
    schema = ConverterSchema(
        name="float",
        description="Write a floating-point number in English words using its shortest decimal form, e.g. 15.2 -> 'fifteen point two'.",
        category=ConverterCategory.DECIMAL,
        parameters=[
            ConverterParameter(
                name="value",
                type="number",
                description="The finite number to convert",
            ),
            ConverterParameter(
                name="width",
                type="string",
                description="Float width the value is rounded to first (default f64)",
                enum=_FLOAT_WIDTHS,
                default=FloatWidth.F64.value,
                required=False,
            ),
        ],
        returns="The number words",
    )

    def convert(self, **kwargs: Any) -> str:
        width = kwargs.get("width", FloatWidth.F64)
        return float_to_words(float(kwargs["value"]), width)
