# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Setting value type identifiers module"""

from __future__ import annotations

__all__ = [
    "ArrayOf",
    "BOOL",
    "CHAR",
    "DATETIME",
    "DECIMAL",
    "ENUM",
    "EnumType",
    "FLOAT32",
    "FLOAT64",
    "INT16",
    "INT32",
    "INT64",
    "INT8",
    "Nullable",
    "STRING",
    "ScalarType",
    "TypeSpec",
    "TypeTag",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINT8",
    "infer_type",
    "resolve_type",
]

import types
import typing
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Final


@dataclass(frozen=True, slots=True)
class TypeTag:
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("A type tag name must be a non-empty str")

    def __str__(self) -> str:
        return self.name

    @classmethod
    def for_class(cls, tp: type[Any]) -> TypeTag:
        return cls(f"{tp.__module__}.{tp.__qualname__}")


@dataclass(frozen=True, slots=True)
class EnumType:
    enum_class: type[Enum]

    def __post_init__(self) -> None:
        if not isinstance(self.enum_class, type) or not issubclass(self.enum_class, Enum):
            raise TypeError(f"Expected an Enum subclass, got {self.enum_class!r}")

    def __str__(self) -> str:
        return f"enum {self.enum_class.__qualname__}"


type ScalarType = TypeTag | EnumType


@dataclass(frozen=True, slots=True)
class Nullable:
    inner: ScalarType

    def __post_init__(self) -> None:
        if not isinstance(self.inner, (TypeTag, EnumType)):
            raise ValueError(f"Only scalar types can be nullable, got {self.inner!r}")

    def __str__(self) -> str:
        return f"{self.inner}?"


@dataclass(frozen=True, slots=True)
class ArrayOf:
    element: ScalarType | Nullable

    def __post_init__(self) -> None:
        if isinstance(self.element, ArrayOf):
            raise ValueError("Jagged arrays are not supported.")
        if not isinstance(self.element, (TypeTag, EnumType, Nullable)):
            raise TypeError(f"Invalid array element type {self.element!r}")

    def __str__(self) -> str:
        return f"{self.element}[]"


type TypeSpec = TypeTag | EnumType | Nullable | ArrayOf


BOOL: Final[TypeTag] = TypeTag("bool")
INT8: Final[TypeTag] = TypeTag("int8")
INT16: Final[TypeTag] = TypeTag("int16")
INT32: Final[TypeTag] = TypeTag("int32")
INT64: Final[TypeTag] = TypeTag("int64")
UINT8: Final[TypeTag] = TypeTag("uint8")
UINT16: Final[TypeTag] = TypeTag("uint16")
UINT32: Final[TypeTag] = TypeTag("uint32")
UINT64: Final[TypeTag] = TypeTag("uint64")
FLOAT32: Final[TypeTag] = TypeTag("float32")
FLOAT64: Final[TypeTag] = TypeTag("float64")
DECIMAL: Final[TypeTag] = TypeTag("decimal")
CHAR: Final[TypeTag] = TypeTag("char")
STRING: Final[TypeTag] = TypeTag("string")
DATETIME: Final[TypeTag] = TypeTag("datetime")
ENUM: Final[TypeTag] = TypeTag("enum")

_PYTHON_TYPES: Final[dict[type[Any], TypeTag]] = {
    bool: BOOL,
    int: INT64,
    float: FLOAT64,
    Decimal: DECIMAL,
    str: STRING,
    datetime: DATETIME,
}


def resolve_type(tp: Any) -> TypeSpec:
    """Return the type identifier designated by 'tp'

    'tp' can be a type identifier, a builtin type (int, str, ...), an Enum subclass,
    'list[T]' / 'tuple[T, ...]' for arrays and 'T | None' for nullable values.
    Any other class is identified by its qualified name.
    """
    if isinstance(tp, (TypeTag, EnumType, Nullable, ArrayOf)):
        return tp

    origin: Any = typing.get_origin(tp)
    if origin is not None:
        args: tuple[Any, ...] = typing.get_args(tp)
        if (origin is list and len(args) == 1) or (origin is tuple and len(args) == 2 and args[1] is Ellipsis):
            return ArrayOf(_array_element(resolve_type(args[0])))
        if origin is typing.Union or origin is types.UnionType:
            non_none_args = [arg for arg in args if arg is not type(None)]
            if len(args) == 2 and len(non_none_args) == 1:
                inner = resolve_type(non_none_args[0])
                if isinstance(inner, Nullable):
                    return inner
                return Nullable(inner)  # type: ignore[arg-type]
        raise TypeError(f"Cannot resolve a type identifier from {tp!r}")

    if not isinstance(tp, type):
        raise TypeError(f"Expected a type or a type identifier, got {tp!r}")
    if issubclass(tp, Enum):
        return EnumType(tp)
    if tp in (list, tuple):
        raise TypeError(f"Missing array element type for {tp.__name__!r}")
    try:
        return _PYTHON_TYPES[tp]
    except KeyError:
        return TypeTag.for_class(tp)


def infer_type(value: Any) -> ScalarType:
    if isinstance(value, Enum):
        return EnumType(type(value))
    for tp in type(value).__mro__:
        if tp in _PYTHON_TYPES:
            return _PYTHON_TYPES[tp]
    return TypeTag.for_class(type(value))


def _array_element(element: TypeSpec) -> ScalarType | Nullable:
    if isinstance(element, ArrayOf):
        raise ValueError("Jagged arrays are not supported.")
    return element
