# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Configuration exceptions definition module"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "DeserializeError",
    "ElementNotFoundError",
    "ParserError",
    "SettingValueCastError",
]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .types import TypeSpec


class ConfigurationError(Exception):
    pass


class ParserError(ConfigurationError):
    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"Line {line}: {message}")
        self.message: str = message
        self.line: int = line


class SettingValueCastError(ConfigurationError):
    def __init__(self, message: str, raw_value: str, target_type: TypeSpec | Any) -> None:
        super().__init__(message)
        self.raw_value: str = raw_value
        self.target_type: TypeSpec | Any = target_type

    @classmethod
    def create(cls, raw_value: str, target_type: TypeSpec | Any) -> SettingValueCastError:
        return cls(f"Failed to convert value {raw_value!r} to type {target_type}.", raw_value, target_type)

    @classmethod
    def converter_missing(cls, raw_value: str, target_type: TypeSpec | Any) -> SettingValueCastError:
        return cls(
            f"Failed to convert value {raw_value!r} to type {target_type}; no converter for this type is registered.",
            raw_value,
            target_type,
        )


class DeserializeError(ConfigurationError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class ElementNotFoundError(ConfigurationError, LookupError):
    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name: str = name
