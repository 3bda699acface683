"""Command-line entry point for num2en.

Usage:
    num2en cardinal -128 --width i8
    num2en ordinal 21
    num2en digits 007
    num2en decimal 123.456
    num2en decimal -1.
    num2en float 15.2 --width f32 --json
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Any, Literal

from pydantic import BaseModel, Field

from num2en.tools import get_converter

logger = logging.getLogger("num2en")

# CLI command -> (registered converter, name of its main argument)
COMMANDS: dict[str, tuple[str, str]] = {
    "cardinal": ("cardinal", "value"),
    "ordinal": ("ordinal", "value"),
    "digits": ("spell_digits", "digits"),
    "decimal": ("decimal_text", "text"),
    "float": ("float", "value"),
}


class ConversionRequest(BaseModel):
    """A single conversion requested on the command line."""

    command: Literal["cardinal", "ordinal", "digits", "decimal", "float"]
    value: str = Field(description="Raw value text as typed by the user")
    width: str | None = Field(
        default=None,
        description="Integer or float width; the converter default when omitted",
    )

    def converter_kwargs(self) -> dict[str, Any]:
        _, argument = COMMANDS[self.command]
        kwargs: dict[str, Any] = {argument: self.value}
        if self.width is not None:
            kwargs["width"] = self.width
        return kwargs


# Values like "-1." or "-.5" that argparse would read as an option
_DASH_VALUE = re.compile(r"-[0-9.]*")


def _value_last(argv: list[str]) -> list[str]:
    """Move a dash-leading value behind "--" so it stays positional."""
    if len(argv) >= 2 and _DASH_VALUE.fullmatch(argv[1]):
        return [argv[0], *argv[2:], "--", argv[1]]
    return argv


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="num2en",
        description="Convert numbers to English words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("command", choices=sorted(COMMANDS))
    parser.add_argument("value", help="The number (or digit string) to convert")
    parser.add_argument(
        "--width",
        default=None,
        help="Integer width (u8..u128, i8..i128, usize, isize) or float width (f32, f64)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(_value_last(argv))


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    request = ConversionRequest(command=args.command, value=args.value, width=args.width)
    converter_name, _ = COMMANDS[request.command]
    logger.debug("Running %s with %s", converter_name, request.converter_kwargs())

    converter = get_converter(converter_name)()
    result = converter.execute(**request.converter_kwargs())

    if args.json:
        print(result.model_dump_json(indent=2))
    elif result.success:
        print(result.words)
    else:
        print(f"error: {result.error}", file=sys.stderr)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
