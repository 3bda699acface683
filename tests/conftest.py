"""Shared test fixtures for num2en."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from num2en import errors

TESTDATA_DIR = Path(__file__).parent / "testdata"


def read_cases(filename: str) -> list[tuple[str, str]]:
    """Read ``input;expected`` pairs from a testdata file.

    An expected value of ``!Name`` means the conversion raises
    ``num2en.errors.Name``.
    """
    cases = []
    for line in (TESTDATA_DIR / filename).read_text(encoding="utf-8").splitlines():
        raw, sep, expected = line.partition(";")
        if not sep:
            continue
        cases.append((raw, expected))
    return cases


def check_cases(
    filename: str,
    convert: Callable[[Any], str],
    parse: Callable[[str], Any] = str,
) -> None:
    cases = read_cases(filename)
    assert cases, f"{filename} has no cases"
    for raw, expected in cases:
        value = parse(raw)
        if expected.startswith("!"):
            error = getattr(errors, expected[1:])
            with pytest.raises(error):
                convert(value)
        else:
            assert convert(value) == expected, f"{filename}: input {raw!r}"


@pytest.fixture()
def run_cases() -> Callable[..., None]:
    return check_cases
