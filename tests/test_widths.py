"""Tests for the integer and float width definitions."""

from __future__ import annotations

import pytest

from num2en.widths import NATIVE_BITS, U128_MAX, FloatWidth, IntWidth


class TestIntWidth:
    def test_periods(self) -> None:
        expected = {
            IntWidth.U8: 0,
            IntWidth.I8: 0,
            IntWidth.U16: 1,
            IntWidth.I16: 1,
            IntWidth.U32: 3,
            IntWidth.I32: 3,
            IntWidth.U64: 6,
            IntWidth.I64: 6,
            IntWidth.U128: 12,
            IntWidth.I128: 12,
        }
        for width, periods in expected.items():
            assert width.periods == periods, width

    def test_limits(self) -> None:
        assert IntWidth.U8.min_value == 0
        assert IntWidth.U8.max_value == 255
        assert IntWidth.I8.min_value == -128
        assert IntWidth.I8.max_value == 127
        assert IntWidth.I128.min_value == -(2**127)
        assert U128_MAX == 2**128 - 1

    def test_unsigned_counterpart(self) -> None:
        assert IntWidth.I32.unsigned is IntWidth.U32
        assert IntWidth.U32.unsigned is IntWidth.U32
        assert IntWidth.ISIZE.unsigned is IntWidth.USIZE

    def test_native_width(self) -> None:
        assert NATIVE_BITS in (32, 64)
        assert IntWidth.USIZE.bits == NATIVE_BITS
        assert IntWidth.ISIZE.periods == (6 if NATIVE_BITS == 64 else 3)

    def test_from_string(self) -> None:
        assert IntWidth("i16") is IntWidth.I16
        with pytest.raises(ValueError):
            IntWidth("u7")

    def test_contains(self) -> None:
        assert IntWidth.I8.contains(-128)
        assert not IntWidth.I8.contains(128)
        assert not IntWidth.U8.contains(-1)


class TestFloatWidth:
    def test_values(self) -> None:
        assert [w.value for w in FloatWidth] == ["f32", "f64"]
