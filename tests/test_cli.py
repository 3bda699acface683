"""Tests for the num2en command-line entry point."""

from __future__ import annotations

import json

import pytest

from num2en.cli import ConversionRequest, main


class TestMain:
    def test_cardinal(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["cardinal", "12142"]) == 0
        assert capsys.readouterr().out == "twelve thousand one hundred forty-two\n"

    def test_negative_value_with_width(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["cardinal", "-128", "--width", "i8"]) == 0
        assert capsys.readouterr().out.strip() == "negative one hundred twenty-eight"

    def test_ordinal(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["ordinal", "112"]) == 0
        assert capsys.readouterr().out.strip() == "one hundred twelfth"

    def test_digits(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["digits", "007"]) == 0
        assert capsys.readouterr().out.strip() == "zero zero seven"

    def test_decimal(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["decimal", ".0042"]) == 0
        assert capsys.readouterr().out.strip() == "point zero zero four two"

    def test_decimal_ending_in_point(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["decimal", "-1."]) == 0
        assert capsys.readouterr().out.strip() == "negative one point"

    def test_dash_value_before_options(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["decimal", "-.5", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["data"]["words"] == "negative point five"

    def test_float_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["float", "15.2", "--width", "f32", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["success"] is True
        assert payload["data"]["words"] == "fifteen point two"

    def test_error_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["decimal", "235:53"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "235:53" in captured.err

    def test_unknown_command(self) -> None:
        with pytest.raises(SystemExit):
            main(["roman", "12"])


class TestConversionRequest:
    def test_kwargs(self) -> None:
        request = ConversionRequest(command="decimal", value="1.5")
        assert request.converter_kwargs() == {"text": "1.5"}

    def test_kwargs_with_width(self) -> None:
        request = ConversionRequest(command="cardinal", value="7", width="u8")
        assert request.converter_kwargs() == {"value": "7", "width": "u8"}

    def test_invalid_command(self) -> None:
        with pytest.raises(ValueError):
            ConversionRequest(command="roman", value="12")  # type: ignore[arg-type]
