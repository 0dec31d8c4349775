# -*- coding: Utf-8 -*-

from __future__ import annotations

import enum
import struct
from datetime import datetime
from decimal import Decimal

from cfgfile import types as t
from cfgfile.converters.builtins import (
    BoolStringConverter,
    CharStringConverter,
    DateTimeStringConverter,
    DecimalStringConverter,
    EnumStringConverter,
    FallbackStringConverter,
    FloatStringConverter,
    IntegerStringConverter,
    StringStringConverter,
    builtin_converters,
)
from cfgfile.format import ConfigurationFormat

import pytest


class Color(enum.Enum):
    RED = 1
    GREEN = 2


@pytest.mark.unit
class TestBoolStringConverter:
    @pytest.mark.parametrize("text", ["true", "True", "ON", "yes", "y", "1"])
    def test____from_string____true_aliases(self, text: str, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = BoolStringConverter()

        # Act & Assert
        assert converter.from_string(text, t.BOOL, default_format) is True

    @pytest.mark.parametrize("text", ["false", "FALSE", "off", "No", "n", "0"])
    def test____from_string____false_aliases(self, text: str, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = BoolStringConverter()

        # Act & Assert
        assert converter.from_string(text, t.BOOL, default_format) is False

    def test____from_string____invalid_literal(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = BoolStringConverter()

        # Act & Assert
        with pytest.raises(ValueError):
            converter.from_string("maybe", t.BOOL, default_format)

    def test____to_string____capitalized(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = BoolStringConverter()

        # Act & Assert
        assert converter.to_string(True, default_format) == "True"
        assert converter.to_string(False, default_format) == "False"


@pytest.mark.unit
class TestIntegerStringConverter:
    @pytest.mark.parametrize(
        ["bits", "signed", "text"],
        [
            pytest.param(8, True, "127"),
            pytest.param(8, True, "-128"),
            pytest.param(8, False, "255"),
            pytest.param(16, True, "-32768"),
            pytest.param(32, False, "4294967295"),
            pytest.param(64, True, "-9223372036854775808"),
        ],
    )
    def test____from_string____bounds(self, bits: int, signed: bool, text: str, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = IntegerStringConverter(bits, signed=signed)

        # Act & Assert
        assert converter.from_string(text, t.INT64, default_format) == int(text)

    @pytest.mark.parametrize(
        ["bits", "signed", "text"],
        [
            pytest.param(8, True, "128"),
            pytest.param(8, False, "-1"),
            pytest.param(16, False, "65536"),
            pytest.param(64, True, "9223372036854775808"),
        ],
    )
    def test____from_string____out_of_range(self, bits: int, signed: bool, text: str, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = IntegerStringConverter(bits, signed=signed)

        # Act & Assert
        with pytest.raises(OverflowError):
            converter.from_string(text, t.INT64, default_format)

    def test____to_string____out_of_range(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = IntegerStringConverter(8, signed=False)

        # Act & Assert
        assert converter.to_string(255, default_format) == "255"
        with pytest.raises(OverflowError):
            converter.to_string(256, default_format)

    def test____to_string____rejects_float(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = IntegerStringConverter(32, signed=True)

        # Act & Assert
        with pytest.raises(TypeError):
            converter.to_string(1.5, default_format)  # type: ignore[arg-type]

    def test____dunder_init____unsupported_width(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(ValueError):
            IntegerStringConverter(12, signed=True)


@pytest.mark.unit
class TestFloatStringConverter:
    def test____from_string____single_precision_rounding(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = FloatStringConverter(single=True)
        expected: float = struct.unpack("<f", struct.pack("<f", 0.1))[0]

        # Act
        value = converter.from_string("0.1", t.FLOAT32, default_format)

        # Assert
        assert value == expected
        assert value != 0.1

    def test____from_string____single_precision_overflow(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = FloatStringConverter(single=True)

        # Act & Assert
        with pytest.raises(OverflowError):
            converter.from_string("1e39", t.FLOAT32, default_format)

    def test____from_string____double_precision(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = FloatStringConverter(single=False)

        # Act & Assert
        assert converter.from_string("0.1", t.FLOAT64, default_format) == 0.1
        assert converter.from_string("1e39", t.FLOAT64, default_format) == 1e39


@pytest.mark.unit
class TestOtherConverters:
    def test____decimal____conversion(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = DecimalStringConverter()

        # Act & Assert
        assert converter.from_string("-3.140", t.DECIMAL, default_format) == Decimal("-3.140")
        assert converter.to_string(Decimal("2.50"), default_format) == "2.50"

    def test____char____single_character_only(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = CharStringConverter()

        # Act & Assert
        assert converter.from_string("x", t.CHAR, default_format) == "x"
        with pytest.raises(ValueError):
            converter.from_string("xy", t.CHAR, default_format)
        with pytest.raises(ValueError):
            converter.to_string("", default_format)

    def test____string____removes_one_pair_of_double_quotes(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = StringStringConverter()

        # Act & Assert
        assert converter.from_string('"a b"', t.STRING, default_format) == "a b"
        assert converter.from_string('""a""', t.STRING, default_format) == '"a"'
        assert converter.from_string('"', t.STRING, default_format) == '"'
        assert converter.from_string("plain", t.STRING, default_format) == "plain"

    @pytest.mark.parametrize(
        ["value", "expected"],
        [
            pytest.param("plain text", "plain text", id="plain"),
            pytest.param('say "hi"', 'say "hi"', id="inner quotes"),
            pytest.param("a # b", '"a # b"', id="comment symbol"),
            pytest.param(" a", '" a"', id="leading whitespace"),
            pytest.param("a\t", '"a\t"', id="trailing whitespace"),
            pytest.param('"a"', '""a""', id="surrounding quotes"),
            pytest.param("", '""', id="empty"),
        ],
    )
    def test____string____quoted_when_needed(self, value: str, expected: str, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = StringStringConverter()

        # Act
        text = converter.to_string(value, default_format)

        # Assert
        assert text == expected
        assert converter.from_string(text, t.STRING, default_format) == value

    def test____string____comment_symbols_on_both_sides_of_a_quote(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = StringStringConverter()

        # Act & Assert
        with pytest.raises(ValueError, match=r"cannot be written"):
            converter.to_string('x; "y; z', default_format)

    def test____datetime____conversion(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = DateTimeStringConverter()
        value = datetime(2023, 12, 31, 23, 59, 58)

        # Act
        text = converter.to_string(value, default_format)

        # Assert
        assert text == "12/31/2023 23:59:58"
        assert converter.from_string(text, t.DATETIME, default_format) == value
        with pytest.raises(TypeError):
            converter.to_string("12/31/2023", default_format)  # type: ignore[arg-type]


@pytest.mark.unit
class TestEnumStringConverter:
    @pytest.mark.parametrize("text", ["GREEN", "Color.GREEN", "2", " GREEN "])
    def test____from_string____accepted_forms(self, text: str, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = EnumStringConverter()

        # Act & Assert
        assert converter.from_string(text, t.EnumType(Color), default_format) is Color.GREEN

    @pytest.mark.parametrize("text", ["BLUE", "Shape.GREEN", "green"])
    def test____from_string____unknown_member(self, text: str, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = EnumStringConverter()

        # Act & Assert
        with pytest.raises(ValueError):
            converter.from_string(text, t.EnumType(Color), default_format)

    def test____from_string____requires_concrete_enum_type(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = EnumStringConverter()

        # Act & Assert
        with pytest.raises(TypeError):
            converter.from_string("GREEN", t.ENUM, default_format)

    def test____to_string____member_name(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = EnumStringConverter()

        # Act & Assert
        assert converter.to_string(Color.RED, default_format) == "RED"


@pytest.mark.unit
class TestFallbackStringConverter:
    def test____to_string____uses_str(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = FallbackStringConverter()

        # Act & Assert
        assert converter.to_string(3 + 4j, default_format) == "(3+4j)"

    def test____from_string____always_fails(self, default_format: ConfigurationFormat) -> None:
        # Arrange
        converter = FallbackStringConverter()

        # Act & Assert
        with pytest.raises(NotImplementedError, match=r"No converter for this type is registered"):
            converter.from_string("(3+4j)", t.TypeTag("builtins.complex"), default_format)


def test____builtin_converters____covers_builtin_tags() -> None:
    # Arrange
    expected = {
        t.BOOL,
        t.INT8,
        t.INT16,
        t.INT32,
        t.INT64,
        t.UINT8,
        t.UINT16,
        t.UINT32,
        t.UINT64,
        t.FLOAT32,
        t.FLOAT64,
        t.DECIMAL,
        t.CHAR,
        t.STRING,
        t.DATETIME,
        t.ENUM,
    }

    # Act
    converters = builtin_converters()

    # Assert
    assert set(converters) == expected
