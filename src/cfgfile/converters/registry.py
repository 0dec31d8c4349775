# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Type string converter registry module

The registry is shared mutable state: register()/deregister() are not synchronized,
callers doing so from several threads must serialize these calls themselves.
"""

from __future__ import annotations

__all__ = [
    "ConverterRegistry",
    "deregister_converter",
    "find_converter",
    "get_default_registry",
    "register_converter",
    "set_default_registry",
]

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from ..types import ENUM, EnumType, ScalarType, TypeTag
from .abc import TypeStringConverter
from .builtins import FallbackStringConverter, builtin_converters

logger = logging.getLogger(__name__)


class ConverterRegistry:
    __slots__ = ("__converters", "__fallback", "__weakref__")

    def __init__(
        self,
        converters: Mapping[TypeTag, TypeStringConverter[Any]] | None = None,
        *,
        fallback: TypeStringConverter[Any] | None = None,
    ) -> None:
        if fallback is None:
            fallback = FallbackStringConverter()
        elif not isinstance(fallback, TypeStringConverter):
            raise TypeError(f"Expected a TypeStringConverter, got {fallback!r}")
        self.__converters: dict[TypeTag, TypeStringConverter[Any]] = {}
        self.__fallback: TypeStringConverter[Any] = fallback
        if converters:
            for tp, converter in converters.items():
                self.register(tp, converter)

    @classmethod
    def with_builtins(cls) -> ConverterRegistry:
        return cls(builtin_converters())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(str, self.__converters))})"

    def __contains__(self, tp: object, /) -> bool:
        return tp in self.__converters

    def __iter__(self) -> Iterator[TypeTag]:
        return iter(list(self.__converters))

    def __len__(self) -> int:
        return len(self.__converters)

    def register(self, tp: TypeTag, converter: TypeStringConverter[Any]) -> None:
        if isinstance(tp, EnumType):
            raise TypeError(f"Enum types share the {ENUM} converter, register it instead of {tp}")
        if not isinstance(tp, TypeTag):
            raise TypeError(f"Expected a TypeTag, got {tp!r}")
        if not isinstance(converter, TypeStringConverter):
            raise TypeError(f"Expected a TypeStringConverter, got {converter!r}")
        if tp in self.__converters:
            raise ValueError(f"A converter for type '{tp}' is already registered.")
        self.__converters[tp] = converter
        logger.debug("Registered %r for type %r", converter, tp.name)

    def deregister(self, tp: TypeTag) -> None:
        try:
            converter = self.__converters.pop(tp)
        except (KeyError, TypeError):
            raise ValueError(f"No converter is registered for type '{tp}'.") from None
        logger.debug("Deregistered %r for type %r", converter, tp.name)

    def find(self, tp: ScalarType) -> TypeStringConverter[Any]:
        if isinstance(tp, EnumType):
            tp = ENUM
        return self.__converters.get(tp, self.__fallback)

    def is_fallback(self, converter: TypeStringConverter[Any]) -> bool:
        return converter is self.__fallback

    def copy(self) -> ConverterRegistry:
        return type(self)(self.__converters, fallback=self.__fallback)

    @property
    def fallback(self) -> TypeStringConverter[Any]:
        return self.__fallback


_default_registry: ConverterRegistry = ConverterRegistry.with_builtins()


def get_default_registry() -> ConverterRegistry:
    return _default_registry


def set_default_registry(registry: ConverterRegistry) -> None:
    global _default_registry

    if not isinstance(registry, ConverterRegistry):
        raise TypeError(f"Expected a ConverterRegistry, got {type(registry).__name__}")
    _default_registry = registry


def register_converter(tp: TypeTag, converter: TypeStringConverter[Any]) -> None:
    return _default_registry.register(tp, converter)


def deregister_converter(tp: TypeTag) -> None:
    return _default_registry.deregister(tp)


def find_converter(tp: ScalarType) -> TypeStringConverter[Any]:
    return _default_registry.find(tp)
