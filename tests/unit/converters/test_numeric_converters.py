"""Unit tests for the numeric converters."""

from __future__ import annotations

from decimal import Decimal

import pytest

from simplecsv.converters.numeric import (
    DecimalConverter,
    FloatConverter,
    IntegerConverter,
)
from simplecsv.exceptions import ConfigurationError
from simplecsv.models import ErrorType, ParseError


class TestIntegerConverter:
    def test_plain_decode_and_encode(self) -> None:
        converter = IntegerConverter()
        config = converter.configure(None, 0)
        assert converter.decode(config, "-42", ParseError()) == -42
        assert converter.to_text(config, 42) == "42"

    def test_grouping_format(self) -> None:
        converter = IntegerConverter()
        config = converter.configure(",d", 0)
        assert config.grouping is True
        assert converter.to_text(config, 1234567) == "1,234,567"
        assert converter.decode(config, "1,234,567", ParseError()) == 1234567

    def test_padding_format(self) -> None:
        converter = IntegerConverter()
        config = converter.configure("05d", 0)
        assert converter.to_text(config, 42) == "00042"
        assert converter.decode(config, "00042", ParseError()) == 42

    def test_invalid_text_records_error(self) -> None:
        converter = IntegerConverter()
        config = converter.configure(None, 0)
        error = ParseError()
        assert converter.decode(config, "12abc", error) is None
        assert error.error_type is ErrorType.INVALID_FORMAT
        assert error.raw_value == "12abc"

    def test_invalid_format_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid int format"):
            IntegerConverter().configure("not-a-spec", 0)

    def test_bool_cannot_be_encoded(self) -> None:
        converter = IntegerConverter()
        with pytest.raises(TypeError):
            converter.to_text(converter.configure(None, 0), True)


class TestFloatConverter:
    def test_fixed_point_format(self) -> None:
        converter = FloatConverter()
        config = converter.configure(".2f", 0)
        assert converter.to_text(config, 3.14159) == "3.14"
        assert converter.decode(config, "3.14", ParseError()) == pytest.approx(3.14)

    def test_default_format_uses_str(self) -> None:
        converter = FloatConverter()
        config = converter.configure(None, 0)
        assert converter.to_text(config, 0.5) == "0.5"

    def test_invalid_text(self) -> None:
        converter = FloatConverter()
        error = ParseError()
        assert converter.decode(converter.configure(None, 0), "1.2.3", error) is None
        assert error.is_error()


class TestDecimalConverter:
    def test_decimal_round_trip_keeps_precision(self) -> None:
        converter = DecimalConverter()
        config = converter.configure(",.2f", 0)
        text = converter.to_text(config, Decimal("1234.50"))
        assert text == "1,234.50"
        assert converter.decode(config, text, ParseError()) == Decimal("1234.50")

    def test_invalid_text_records_error(self) -> None:
        converter = DecimalConverter()
        error = ParseError()
        assert converter.decode(converter.configure(None, 0), "ten", error) is None
        assert error.error_type is ErrorType.INVALID_FORMAT

    def test_integer_only_format_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            DecimalConverter().configure("d", 0)


@pytest.mark.parametrize(
    "converter", [IntegerConverter(), FloatConverter(), DecimalConverter()]
)
def test_null_boundary(converter) -> None:
    config = converter.configure(None, 0)
    error = ParseError()
    assert converter.decode(config, "", error) is None
    assert not error.is_error()
    assert converter.to_text(config, None) == ""


@pytest.mark.parametrize(
    "converter, format_spec, value",
    [
        (IntegerConverter(), None, 255),
        (IntegerConverter(), ",d", -1234567),
        (IntegerConverter(), "_d", 1234567),
        (IntegerConverter(), "+08d", 42),
        (FloatConverter(), ".3f", 0.5),
        (FloatConverter(), ",.1f", 12345.5),
        (FloatConverter(), "e", 0.25),
        (DecimalConverter(), ",.2f", Decimal("1234.50")),
        (DecimalConverter(), None, Decimal("-0.001")),
    ],
)
def test_accepted_formats_read_back(converter, format_spec, value) -> None:
    config = converter.configure(format_spec, 0)
    error = ParseError()
    assert converter.decode(config, converter.to_text(config, value), error) == value
    assert not error.is_error()


@pytest.mark.parametrize(
    "converter, format_spec",
    [
        (IntegerConverter(), "x"),
        (IntegerConverter(), "#x"),
        (IntegerConverter(), "X"),
        (IntegerConverter(), "b"),
        (IntegerConverter(), "o"),
        (IntegerConverter(), ".2f"),
        (FloatConverter(), "%"),
        (FloatConverter(), ".1%"),
        (DecimalConverter(), "%"),
    ],
)
def test_unreadable_formats_rejected(converter, format_spec: str) -> None:
    with pytest.raises(ConfigurationError, match="cannot be read back"):
        converter.configure(format_spec, 0)
