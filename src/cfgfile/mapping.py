# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Object <-> section mapping module

A SectionMapper copies a fixed list of object attributes into the settings of a
section, and builds objects back from a section. Attributes which are not listed
are left alone.
"""

from __future__ import annotations

__all__ = ["FieldMapping", "MISSING", "SectionMapper"]

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, final

from .exceptions import ElementNotFoundError
from .section import Section
from .types import resolve_type

if TYPE_CHECKING:
    from .converters.registry import ConverterRegistry
    from .format import ConfigurationFormat
    from .types import TypeSpec


class _MissingType(enum.Enum):
    MISSING = enum.auto()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _MissingType.MISSING


@final
@dataclass(frozen=True, slots=True)
class FieldMapping:
    setting: str
    attribute: str
    type: Any
    default: Any = MISSING

    def __post_init__(self) -> None:
        if not self.setting:
            raise ValueError("The setting name must not be empty.")
        if not self.attribute.isidentifier():
            raise ValueError(f"Invalid attribute name {self.attribute!r}")
        object.__setattr__(self, "type", resolve_type(self.type))

    @property
    def spec(self) -> TypeSpec:
        spec: TypeSpec = self.type
        return spec

    @property
    def required(self) -> bool:
        return self.default is MISSING


@final
class SectionMapper[_T]:
    __slots__ = ("__factory", "__fields")

    def __init__(self, factory: Callable[..., _T], fields: Iterable[FieldMapping]) -> None:
        fields = tuple(fields)
        settings: set[str] = set()
        attributes: set[str] = set()
        for f in fields:
            if not isinstance(f, FieldMapping):
                raise TypeError(f"Expected a FieldMapping, got {f!r}")
            if f.setting.casefold() in settings:
                raise ValueError(f"Setting {f.setting!r} is mapped twice")
            if f.attribute in attributes:
                raise ValueError(f"Attribute {f.attribute!r} is mapped twice")
            settings.add(f.setting.casefold())
            attributes.add(f.attribute)
        self.__factory: Callable[..., _T] = factory
        self.__fields: tuple[FieldMapping, ...] = fields

    @property
    def fields(self) -> tuple[FieldMapping, ...]:
        return self.__fields

    def to_section(
        self,
        obj: _T,
        name: str,
        *,
        fmt: ConfigurationFormat | None = None,
        registry: ConverterRegistry | None = None,
    ) -> Section:
        section = Section(name)
        self.update_section(section, obj, fmt=fmt, registry=registry)
        return section

    def update_section(
        self,
        section: Section,
        obj: _T,
        *,
        fmt: ConfigurationFormat | None = None,
        registry: ConverterRegistry | None = None,
    ) -> None:
        for f in self.__fields:
            section[f.setting].set_value(getattr(obj, f.attribute), f.spec, fmt=fmt, registry=registry)

    def from_section(
        self,
        section: Section,
        *,
        fmt: ConfigurationFormat | None = None,
        registry: ConverterRegistry | None = None,
    ) -> _T:
        kwargs: dict[str, Any] = {}
        for f in self.__fields:
            setting = section.find_setting(f.setting)
            if setting is None:
                if f.required:
                    raise ElementNotFoundError(f"Setting {f.setting!r} not found in section {section.name!r}", f.setting)
                kwargs[f.attribute] = f.default
                continue
            kwargs[f.attribute] = setting.get_value(f.spec, fmt=fmt, registry=registry)
        return self.__factory(**kwargs)
