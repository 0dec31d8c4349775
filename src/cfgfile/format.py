# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Configuration format profiles module

A ConfigurationFormat gathers every knob read by the parser, the serializers and the
converters. It is immutable: derive a new one with replace() and pass it explicitly,
or install it as the process default with set_default_format().
"""

from __future__ import annotations

__all__ = [
    "ConfigurationFormat",
    "DateTimeFormat",
    "NumberFormat",
    "get_default_format",
    "set_default_format",
]

import dataclasses
import itertools
import math
import re
import struct
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Final

_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT32: Final[struct.Struct] = struct.Struct("<f")


@dataclass(frozen=True, slots=True)
class NumberFormat:
    decimal_separator: str = "."
    negative_sign: str = "-"
    positive_sign: str = "+"
    nan_symbol: str = "NaN"
    positive_infinity_symbol: str = "Infinity"
    negative_infinity_symbol: str = "-Infinity"

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value: Any = getattr(self, f.name)
            if not isinstance(value, str):
                raise TypeError(f"{f.name}: expected a str, got {type(value).__name__}")
            if not value:
                raise ValueError(f"{f.name} must not be empty")
        if self.decimal_separator in (self.negative_sign, self.positive_sign):
            raise ValueError("decimal_separator conflicts with a sign symbol")

    def parse_integer(self, text: str) -> int:
        literal = self.__normalize(text)
        if _INTEGER_PATTERN.fullmatch(literal) is None:
            raise ValueError(f"Invalid integer literal: {text!r}")
        return int(literal)

    def format_integer(self, value: int) -> str:
        return self.__localize(str(int(value)))

    def parse_float(self, text: str) -> float:
        stripped = text.strip()
        if stripped == self.nan_symbol:
            return math.nan
        if stripped == self.positive_infinity_symbol:
            return math.inf
        if stripped == self.negative_infinity_symbol:
            return -math.inf
        literal = self.__normalize(stripped)
        if _FLOAT_PATTERN.fullmatch(literal) is None:
            raise ValueError(f"Invalid floating point literal: {text!r}")
        return float(literal)

    def format_float(self, value: float, *, single: bool = False) -> str:
        value = float(value)
        if math.isnan(value):
            return self.nan_symbol
        if math.isinf(value):
            return self.positive_infinity_symbol if value > 0 else self.negative_infinity_symbol
        if not single:
            return self.__localize(repr(value))
        # Shortest representation which gives back the same single precision value
        packed: bytes = _FLOAT32.pack(value)
        literal: str = repr(value)
        for digits in range(1, 10):
            literal = f"{_FLOAT32.unpack(packed)[0]:.{digits}g}"
            if _FLOAT32.pack(float(literal)) == packed:
                break
        return self.__localize(literal)

    def parse_decimal(self, text: str) -> Decimal:
        literal = self.__normalize(text)
        if _FLOAT_PATTERN.fullmatch(literal) is None:
            raise ValueError(f"Invalid decimal literal: {text!r}")
        try:
            return Decimal(literal)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid decimal literal: {text!r}") from exc

    def format_decimal(self, value: Decimal) -> str:
        return self.__localize(str(value))

    def __normalize(self, text: str) -> str:
        text = text.strip()
        if text.startswith(self.negative_sign):
            text = "-" + text[len(self.negative_sign) :]
        elif text.startswith(self.positive_sign):
            text = "+" + text[len(self.positive_sign) :]
        if self.decimal_separator != ".":
            if "." in text:
                raise ValueError(f"Unexpected '.' in {text!r}")
            text = text.replace(self.decimal_separator, ".")
        return text

    def __localize(self, literal: str) -> str:
        if self.decimal_separator != ".":
            literal = literal.replace(".", self.decimal_separator)
        if literal.startswith("-"):
            literal = self.negative_sign + literal[1:]
        return literal


@dataclass(frozen=True, slots=True)
class DateTimeFormat:
    pattern: str = "%m/%d/%Y %H:%M:%S"
    input_patterns: tuple[str, ...] = ("%m/%d/%Y %H:%M", "%m/%d/%Y", "%Y-%m-%d %H:%M:%S")

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str) or not self.pattern:
            raise ValueError("pattern must be a non-empty str")
        object.__setattr__(self, "input_patterns", tuple(self.input_patterns))

    def format(self, value: datetime) -> str:
        return value.strftime(self.pattern)

    def parse(self, text: str) -> datetime:
        text = text.strip()
        for pattern in (self.pattern, *self.input_patterns):
            try:
                return datetime.strptime(text, pattern)
            except ValueError:
                continue
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f"Invalid date-time literal: {text!r}") from None


_stamps = itertools.count(1)


@dataclass(frozen=True, slots=True)
class ConfigurationFormat:
    comment_chars: tuple[str, ...] = ("#", ";", "'")
    array_element_separator: str = ","
    number_format: NumberFormat = NumberFormat()
    datetime_format: DateTimeFormat = DateTimeFormat()
    ignore_inline_comments: bool = False
    ignore_pre_comments: bool = False
    stamp: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        comment_chars: tuple[str, ...] = tuple(self.comment_chars)
        if not comment_chars:
            raise ValueError("The comment chars array must not be empty.")
        for char in comment_chars:
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Comment symbols must be single characters, got {char!r}")
            if char.isspace() or char in "[]={}\"":
                raise ValueError(f"Invalid comment symbol {char!r}")
        separator = self.array_element_separator
        if not isinstance(separator, str) or len(separator) != 1:
            raise ValueError(f"The array element separator must be a single character, got {separator!r}")
        if separator == "\0":
            raise ValueError("Zero-character is not allowed.")
        if separator in "{}" or separator in comment_chars:
            raise ValueError(f"Invalid array element separator {separator!r}")
        if not isinstance(self.number_format, NumberFormat):
            raise TypeError("number_format must be a NumberFormat")
        if not isinstance(self.datetime_format, DateTimeFormat):
            raise TypeError("datetime_format must be a DateTimeFormat")
        object.__setattr__(self, "comment_chars", comment_chars)
        object.__setattr__(self, "ignore_inline_comments", bool(self.ignore_inline_comments))
        object.__setattr__(self, "ignore_pre_comments", bool(self.ignore_pre_comments))
        object.__setattr__(self, "stamp", next(_stamps))

    def replace(self, **changes: Any) -> ConfigurationFormat:
        return dataclasses.replace(self, **changes)

    @property
    def default_comment_char(self) -> str:
        return self.comment_chars[0]


_default_format: ConfigurationFormat = ConfigurationFormat()


def get_default_format() -> ConfigurationFormat:
    return _default_format


def set_default_format(fmt: ConfigurationFormat) -> None:
    global _default_format

    if not isinstance(fmt, ConfigurationFormat):
        raise TypeError(f"Expected a ConfigurationFormat, got {type(fmt).__name__}")
    _default_format = fmt
