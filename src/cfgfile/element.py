# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Configuration elements base module"""

from __future__ import annotations

__all__ = ["Comment", "ConfigurationElement", "ElementCollection"]

from abc import ABCMeta, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import final, overload

from .exceptions import ElementNotFoundError


@final
@dataclass(frozen=True, slots=True)
class Comment:
    symbol: str
    text: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, str) or len(self.symbol) != 1:
            raise ValueError(f"A comment symbol must be a single character, got {self.symbol!r}")
        if not isinstance(self.text, str):
            raise TypeError(f"Expected a str, got {type(self.text).__name__}")
        if "\n" in self.text or "\r" in self.text:
            raise ValueError("A comment must fit in one line")

    def __str__(self) -> str:
        return f"{self.symbol} {self.text}"


def _check_name(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError(f"Expected a str, got {type(name).__name__}")
    if not name:
        raise ValueError("The name must not be empty.")
    return name


class ConfigurationElement(metaclass=ABCMeta):
    __slots__ = ("__name", "__comment", "__pre_comments", "__weakref__")

    def __init__(self, name: str) -> None:
        self.__name: str = _check_name(name)
        self.__comment: Comment | None = None
        self.__pre_comments: list[Comment] = []

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.__name!r}>"

    def __str__(self) -> str:
        return self.to_string(include_comments=False)

    @abstractmethod
    def to_string(self, include_comments: bool = False) -> str:
        raise NotImplementedError

    def _decorate(self, line: str, include_comments: bool) -> str:
        if not include_comments:
            return line
        if self.__comment is not None:
            line = f"{line} {self.__comment}"
        if self.__pre_comments:
            line = "\n".join([*map(str, self.__pre_comments), line])
        return line

    def matches(self, name: str) -> bool:
        return self.__name.casefold() == name.casefold()

    @property
    def name(self) -> str:
        return self.__name

    @name.setter
    def name(self, name: str) -> None:
        self.__name = _check_name(name)

    @property
    def comment(self) -> Comment | None:
        return self.__comment

    @comment.setter
    def comment(self, comment: Comment | None) -> None:
        if comment is not None and not isinstance(comment, Comment):
            raise TypeError(f"Expected a Comment or None, got {type(comment).__name__}")
        self.__comment = comment

    @property
    def pre_comments(self) -> list[Comment]:
        return self.__pre_comments

    @pre_comments.setter
    def pre_comments(self, comments: Iterable[Comment]) -> None:
        comments = list(comments)
        if not all(isinstance(c, Comment) for c in comments):
            raise TypeError("Expected an iterable of Comment")
        self.__pre_comments = comments


class ElementCollection[_E: ConfigurationElement](metaclass=ABCMeta):
    """Ordered list of named elements

    Lookup by name is case-insensitive and returns the first match.
    Indexing by name auto-creates a missing element.
    """

    __slots__ = ()

    @abstractmethod
    def _elements(self) -> list[_E]:
        raise NotImplementedError

    @abstractmethod
    def _new_element(self, name: str) -> _E:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def _element_type(cls) -> type[_E]:
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self._elements())

    def __iter__(self) -> Iterator[_E]:
        return iter(self._elements())

    def __contains__(self, item: object, /) -> bool:
        match item:
            case str():
                return self._find(item) is not None
            case ConfigurationElement():
                return any(element is item for element in self._elements())
            case _:
                return False

    @overload
    def __getitem__(self, key: int, /) -> _E: ...

    @overload
    def __getitem__(self, key: str, /) -> _E: ...

    def __getitem__(self, key: int | str, /) -> _E:
        elements = self._elements()
        match key:
            case str():
                element = self._find(key)
                if element is None:
                    element = self._new_element(key)
                    elements.append(element)
                return element
            case int():
                return elements[self.__check_index(key)]
            case _:
                raise TypeError(f"Expected an int or a str, got {type(key).__name__}")

    def __setitem__(self, key: int | str, element: _E, /) -> None:
        element_type = self._element_type()
        if not isinstance(element, element_type):
            raise TypeError(f"Expected a {element_type.__name__}, got {type(element).__name__}")
        elements = self._elements()
        match key:
            case str():
                for index, current in enumerate(elements):
                    if current.matches(key):
                        elements[index] = element
                        break
                else:
                    elements.append(element)
            case int():
                elements[self.__check_index(key)] = element
            case _:
                raise TypeError(f"Expected an int or a str, got {type(key).__name__}")

    def __check_index(self, index: int) -> int:
        if not (0 <= index < len(self._elements())):
            raise IndexError(f"Index {index} out of range")
        return index

    def add(self, element: _E) -> _E:
        element_type = self._element_type()
        if not isinstance(element, element_type):
            raise TypeError(f"Expected a {element_type.__name__}, got {type(element).__name__}")
        if element in self:
            raise ValueError(f"The specified {element_type.__name__.lower()} already exists.")
        self._elements().append(element)
        return element

    def remove(self, element: _E | str) -> None:
        elements = self._elements()
        if isinstance(element, str):
            found = self._find(element)
            if found is None:
                raise ElementNotFoundError(f"{element!r} not found", element)
            element = found
        for index, current in enumerate(elements):
            if current is element:
                del elements[index]
                return
        raise ElementNotFoundError(f"{element!r} not found", element.name)

    def remove_all_named(self, name: str) -> None:
        self._elements()[:] = [element for element in self._elements() if not element.matches(name)]

    def clear(self) -> None:
        self._elements().clear()

    def _find(self, name: str) -> _E | None:
        return next((element for element in self._elements() if element.matches(name)), None)

    def _named(self, name: str) -> list[_E]:
        return [element for element in self._elements() if element.matches(name)]
