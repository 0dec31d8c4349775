# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Setting element module"""

from __future__ import annotations

__all__ = ["Setting"]

from datetime import datetime
from typing import TYPE_CHECKING, Any, NamedTuple, overload

from . import types as _t
from .codec import calculate_array_size, decode_array, decode_value, encode_array, encode_value, is_array_value
from .converters.registry import get_default_registry
from .element import ConfigurationElement
from .format import get_default_format

if TYPE_CHECKING:
    from .converters.registry import ConverterRegistry
    from .format import ConfigurationFormat


class _ArraySizeCache(NamedTuple):
    stamp: int
    size: int


class _TypedValue[_T]:
    __slots__ = ("__type", "__name")

    def __init__(self, tp: _t.TypeSpec) -> None:
        self.__type: _t.TypeSpec = tp
        self.__name: str = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.__name = name

    @overload
    def __get__(self, setting: None, owner: type | None = None, /) -> _TypedValue[_T]: ...

    @overload
    def __get__(self, setting: Setting, owner: type | None = None, /) -> _T: ...

    def __get__(self, setting: Setting | None, owner: type | None = None, /) -> _TypedValue[_T] | _T:
        if setting is None:
            return self
        value: _T = setting.get_value(self.__type)
        return value

    def __set__(self, setting: Setting, value: _T, /) -> None:
        setting.set_value(value, self.__type)

    def __repr__(self) -> str:
        return f"<typed value {self.__name!r} ({self.__type})>"


class Setting(ConfigurationElement):
    """A named raw string value, typed on demand

    The raw value is kept as written in the configuration text. get_value() and
    set_value() convert it with the converter registered for the requested type.
    """

    __slots__ = ("__raw_value", "__array_cache")

    def __init__(
        self,
        name: str,
        value: Any = None,
        *,
        fmt: ConfigurationFormat | None = None,
        registry: ConverterRegistry | None = None,
    ) -> None:
        super().__init__(name)
        self.__raw_value: str = ""
        self.__array_cache: _ArraySizeCache | None = None
        if value is not None:
            self.set_value(value, fmt=fmt, registry=registry)

    @property
    def raw_value(self) -> str:
        return self.__raw_value

    @raw_value.setter
    def raw_value(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Expected a str, got {type(value).__name__}")
        self.__raw_value = value
        self.__array_cache = None

    def array_size(self, fmt: ConfigurationFormat | None = None) -> int:
        """Number of elements if the raw value is an array, -1 otherwise"""
        if fmt is None:
            fmt = get_default_format()
        cache = self.__array_cache
        if cache is None or cache.stamp != fmt.stamp:
            size = calculate_array_size(self.__raw_value, fmt.array_element_separator)
            self.__array_cache = cache = _ArraySizeCache(fmt.stamp, size)
        return cache.size

    def is_array(self, fmt: ConfigurationFormat | None = None) -> bool:
        return self.array_size(fmt) >= 0

    @overload
    def get_value[_T](
        self,
        tp: type[_T],
        *,
        fmt: ConfigurationFormat | None = ...,
        registry: ConverterRegistry | None = ...,
    ) -> _T: ...

    @overload
    def get_value(
        self,
        tp: _t.TypeSpec | Any,
        *,
        fmt: ConfigurationFormat | None = ...,
        registry: ConverterRegistry | None = ...,
    ) -> Any: ...

    def get_value(
        self,
        tp: Any,
        *,
        fmt: ConfigurationFormat | None = None,
        registry: ConverterRegistry | None = None,
    ) -> Any:
        spec = _t.resolve_type(tp)
        if fmt is None:
            fmt = get_default_format()
        if registry is None:
            registry = get_default_registry()
        if isinstance(spec, _t.ArrayOf):
            return decode_array(self.__raw_value, spec, fmt, registry, size=self.array_size(fmt))
        return decode_value(self.__raw_value, spec, fmt, registry)

    def get_value_array(
        self,
        element_type: Any,
        *,
        fmt: ConfigurationFormat | None = None,
        registry: ConverterRegistry | None = None,
    ) -> list[Any] | None:
        element = _t.resolve_type(element_type)
        if isinstance(element, _t.ArrayOf):
            raise ValueError("Jagged arrays are not supported.")
        return self.get_value(_t.ArrayOf(element), fmt=fmt, registry=registry)

    def set_value(
        self,
        value: Any,
        tp: Any = None,
        *,
        fmt: ConfigurationFormat | None = None,
        registry: ConverterRegistry | None = None,
    ) -> None:
        spec: _t.TypeSpec | None = _t.resolve_type(tp) if tp is not None else None
        if fmt is None:
            fmt = get_default_format()
        if registry is None:
            registry = get_default_registry()

        if value is None:
            self.raw_value = ""
            return

        if isinstance(spec, _t.ArrayOf) or (spec is None and is_array_value(value)):
            if not is_array_value(value):
                raise TypeError(f"Expected a list or a tuple for type {spec}, got {type(value).__name__}")
            element = spec.element if isinstance(spec, _t.ArrayOf) else None
            raw = encode_array(value, element, fmt, registry)
            self.__raw_value = raw
            self.__array_cache = _ArraySizeCache(fmt.stamp, calculate_array_size(raw, fmt.array_element_separator))
            return

        if is_array_value(value):
            raise TypeError(f"Cannot assign an array to a setting of type {spec}")
        self.raw_value = encode_value(value, spec, fmt, registry)

    def to_string(self, include_comments: bool = False) -> str:
        return self._decorate(f"{self.name}={self.__raw_value}", include_comments)

    bool_value: _TypedValue[bool] = _TypedValue(_t.BOOL)
    byte_value: _TypedValue[int] = _TypedValue(_t.UINT8)
    short_value: _TypedValue[int] = _TypedValue(_t.INT16)
    int_value: _TypedValue[int] = _TypedValue(_t.INT32)
    long_value: _TypedValue[int] = _TypedValue(_t.INT64)
    float_value: _TypedValue[float] = _TypedValue(_t.FLOAT32)
    double_value: _TypedValue[float] = _TypedValue(_t.FLOAT64)
    string_value: _TypedValue[str] = _TypedValue(_t.STRING)
    datetime_value: _TypedValue[datetime] = _TypedValue(_t.DATETIME)

    bool_array: _TypedValue[list[bool] | None] = _TypedValue(_t.ArrayOf(_t.BOOL))
    byte_array: _TypedValue[list[int] | None] = _TypedValue(_t.ArrayOf(_t.UINT8))
    short_array: _TypedValue[list[int] | None] = _TypedValue(_t.ArrayOf(_t.INT16))
    int_array: _TypedValue[list[int] | None] = _TypedValue(_t.ArrayOf(_t.INT32))
    long_array: _TypedValue[list[int] | None] = _TypedValue(_t.ArrayOf(_t.INT64))
    float_array: _TypedValue[list[float] | None] = _TypedValue(_t.ArrayOf(_t.FLOAT32))
    double_array: _TypedValue[list[float] | None] = _TypedValue(_t.ArrayOf(_t.FLOAT64))
    string_array: _TypedValue[list[str] | None] = _TypedValue(_t.ArrayOf(_t.STRING))
    datetime_array: _TypedValue[list[datetime] | None] = _TypedValue(_t.ArrayOf(_t.DATETIME))
