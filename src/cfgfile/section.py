# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Section element module"""

from __future__ import annotations

__all__ = ["Section"]

from collections.abc import Iterable

from .element import ConfigurationElement, ElementCollection
from .setting import Setting


class Section(ConfigurationElement, ElementCollection[Setting]):
    __slots__ = ("__settings",)

    def __init__(self, name: str, settings: Iterable[Setting] = ()) -> None:
        super().__init__(name)
        self.__settings: list[Setting] = []
        for setting in settings:
            self.add(setting)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} ({len(self.__settings)} settings)>"

    def _elements(self) -> list[Setting]:
        return self.__settings

    def _new_element(self, name: str) -> Setting:
        return Setting(name)

    @classmethod
    def _element_type(cls) -> type[Setting]:
        return Setting

    def find_setting(self, name: str) -> Setting | None:
        return self._find(name)

    def get_settings_named(self, name: str) -> list[Setting]:
        return self._named(name)

    def to_string(self, include_comments: bool = False) -> str:
        return self._decorate(f"[{self.name}]", include_comments)
