# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Built-in type string converters module"""

from __future__ import annotations

__all__ = [
    "BoolStringConverter",
    "CharStringConverter",
    "DateTimeStringConverter",
    "DecimalStringConverter",
    "EnumStringConverter",
    "FallbackStringConverter",
    "FloatStringConverter",
    "IntegerStringConverter",
    "StringStringConverter",
    "builtin_converters",
]

import operator
import struct
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from typing_extensions import final

from .. import types as _t
from ..codec import find_unquoted
from .abc import TypeStringConverter

if TYPE_CHECKING:
    from ..format import ConfigurationFormat
    from ..types import ScalarType, TypeTag

_FLOAT32: Final[struct.Struct] = struct.Struct("<f")


@final
class BoolStringConverter(TypeStringConverter[bool]):
    __slots__ = ()

    def to_string(self, value: bool, fmt: ConfigurationFormat) -> str:
        return "True" if value else "False"

    def from_string(self, text: str, tp: ScalarType, fmt: ConfigurationFormat) -> bool:
        match text.strip().lower():
            case "false" | "off" | "no" | "n" | "0":
                return False
            case "true" | "on" | "yes" | "y" | "1":
                return True
            case _:
                raise ValueError(f"Invalid boolean literal: {text!r}")


@final
class IntegerStringConverter(TypeStringConverter[int]):
    __slots__ = ("__bits", "__signed", "__min", "__max")

    def __init__(self, bits: int, *, signed: bool) -> None:
        super().__init__()
        if bits not in (8, 16, 32, 64):
            raise ValueError(f"Unsupported integer width: {bits}")
        self.__bits: int = bits
        self.__signed: bool = bool(signed)
        self.__min: int
        self.__max: int
        if signed:
            self.__min = -(1 << (bits - 1))
            self.__max = (1 << (bits - 1)) - 1
        else:
            self.__min = 0
            self.__max = (1 << bits) - 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__bits}, signed={self.__signed})"

    def to_string(self, value: int, fmt: ConfigurationFormat) -> str:
        return fmt.number_format.format_integer(self.__check_range(operator.index(value)))

    def from_string(self, text: str, tp: ScalarType, fmt: ConfigurationFormat) -> int:
        return self.__check_range(fmt.number_format.parse_integer(text))

    def __check_range(self, value: int) -> int:
        if not (self.__min <= value <= self.__max):
            raise OverflowError(f"{value} is out of range [{self.__min}, {self.__max}]")
        return value

    @property
    def bits(self) -> int:
        return self.__bits

    @property
    def signed(self) -> bool:
        return self.__signed


@final
class FloatStringConverter(TypeStringConverter[float]):
    __slots__ = ("__single",)

    def __init__(self, *, single: bool) -> None:
        super().__init__()
        self.__single: bool = bool(single)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(single={self.__single})"

    def to_string(self, value: float, fmt: ConfigurationFormat) -> str:
        return fmt.number_format.format_float(value, single=self.__single)

    def from_string(self, text: str, tp: ScalarType, fmt: ConfigurationFormat) -> float:
        value = fmt.number_format.parse_float(text)
        if self.__single:
            try:
                value = _FLOAT32.unpack(_FLOAT32.pack(value))[0]
            except (OverflowError, struct.error) as exc:
                raise OverflowError(f"{text!r} is out of range for a single precision float") from exc
        return value


@final
class DecimalStringConverter(TypeStringConverter[Decimal]):
    __slots__ = ()

    def to_string(self, value: Decimal, fmt: ConfigurationFormat) -> str:
        return fmt.number_format.format_decimal(Decimal(value))

    def from_string(self, text: str, tp: ScalarType, fmt: ConfigurationFormat) -> Decimal:
        return fmt.number_format.parse_decimal(text)


@final
class CharStringConverter(TypeStringConverter[str]):
    __slots__ = ()

    def to_string(self, value: str, fmt: ConfigurationFormat) -> str:
        value = str(value)
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got {value!r}")
        return value

    def from_string(self, text: str, tp: ScalarType, fmt: ConfigurationFormat) -> str:
        if len(text) != 1:
            raise ValueError(f"String must be exactly one character long, got {text!r}")
        return text


@final
class StringStringConverter(TypeStringConverter[str]):
    """Strings are written between double quotes when they would not read back as-is

    Reading removes one pair of surrounding double quotes.
    """

    __slots__ = ()

    def to_string(self, value: str, fmt: ConfigurationFormat) -> str:
        value = str(value)
        if value and self.__reads_back(value, fmt):
            return value
        quoted = f'"{value}"'
        if find_unquoted(quoted, fmt.comment_chars) >= 0:
            raise ValueError(f"{value!r} mixes double quotes and comment symbols, it cannot be written")
        return quoted

    def from_string(self, text: str, tp: ScalarType, fmt: ConfigurationFormat) -> str:
        if len(text) >= 2 and text[0] == text[-1] == '"':
            return text[1:-1]
        return text

    @staticmethod
    def __reads_back(value: str, fmt: ConfigurationFormat) -> bool:
        if value != value.strip():
            return False
        if value[0] == value[-1] == '"' and len(value) >= 2:
            return False
        return find_unquoted(value, fmt.comment_chars) < 0


@final
class DateTimeStringConverter(TypeStringConverter[datetime]):
    __slots__ = ()

    def to_string(self, value: datetime, fmt: ConfigurationFormat) -> str:
        if not isinstance(value, datetime):
            raise TypeError(f"Expected a datetime, got {type(value).__name__}")
        return fmt.datetime_format.format(value)

    def from_string(self, text: str, tp: ScalarType, fmt: ConfigurationFormat) -> datetime:
        return fmt.datetime_format.parse(text)


@final
class EnumStringConverter(TypeStringConverter[Enum]):
    """Shared converter of every Enum class

    Accepts 'Member', 'EnumName.Member' or the integer value of the member.
    """

    __slots__ = ()

    def to_string(self, value: Enum, fmt: ConfigurationFormat) -> str:
        return value.name

    def from_string(self, text: str, tp: ScalarType, fmt: ConfigurationFormat) -> Enum:
        if not isinstance(tp, _t.EnumType):
            raise TypeError(f"A concrete enum type is required, got {tp}")
        enum_class: type[Enum] = tp.enum_class
        name = text.strip()
        prefix = f"{enum_class.__name__}."
        if name.startswith(prefix):
            name = name[len(prefix) :]
        try:
            return enum_class[name]
        except KeyError:
            pass
        try:
            number = fmt.number_format.parse_integer(name)
        except ValueError:
            raise ValueError(f"{text!r} is not a member of {enum_class.__qualname__}") from None
        return enum_class(number)


@final
class FallbackStringConverter(TypeStringConverter[Any]):
    __slots__ = ()

    def to_string(self, value: Any, fmt: ConfigurationFormat) -> str:
        return str(value)

    def from_string(self, text: str, tp: ScalarType, fmt: ConfigurationFormat) -> Any:
        raise NotImplementedError("No converter for this type is registered.")


def builtin_converters() -> dict[TypeTag, TypeStringConverter[Any]]:
    return {
        _t.BOOL: BoolStringConverter(),
        _t.INT8: IntegerStringConverter(8, signed=True),
        _t.INT16: IntegerStringConverter(16, signed=True),
        _t.INT32: IntegerStringConverter(32, signed=True),
        _t.INT64: IntegerStringConverter(64, signed=True),
        _t.UINT8: IntegerStringConverter(8, signed=False),
        _t.UINT16: IntegerStringConverter(16, signed=False),
        _t.UINT32: IntegerStringConverter(32, signed=False),
        _t.UINT64: IntegerStringConverter(64, signed=False),
        _t.FLOAT32: FloatStringConverter(single=True),
        _t.FLOAT64: FloatStringConverter(single=False),
        _t.DECIMAL: DecimalStringConverter(),
        _t.CHAR: CharStringConverter(),
        _t.STRING: StringStringConverter(),
        _t.DATETIME: DateTimeStringConverter(),
        _t.ENUM: EnumStringConverter(),
    }
