# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Type string converter abstract base class module"""

from __future__ import annotations

__all__ = ["TypeStringConverter"]

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..format import ConfigurationFormat
    from ..types import ScalarType


class TypeStringConverter[_T](metaclass=ABCMeta):
    """Bidirectional conversion between a setting value and its string representation

    from_string() receives the requested type identifier, so that one converter can
    serve a family of types (e.g. every Enum class).
    """

    __slots__ = ("__weakref__",)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @abstractmethod
    def to_string(self, value: _T, fmt: ConfigurationFormat) -> str:
        raise NotImplementedError

    @abstractmethod
    def from_string(self, text: str, tp: ScalarType, fmt: ConfigurationFormat) -> _T:
        raise NotImplementedError
