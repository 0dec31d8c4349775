# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Configuration model module"""

from __future__ import annotations

__all__ = ["Configuration"]

import io
import logging
import os
from collections.abc import Iterable
from typing import IO, TYPE_CHECKING

from .element import ElementCollection
from .exceptions import DeserializeError
from .section import Section

if TYPE_CHECKING:
    from .format import ConfigurationFormat

logger = logging.getLogger(__name__)


def _check_path(path: str | os.PathLike[str]) -> str:
    path = os.fspath(path)
    if not isinstance(path, str):
        raise TypeError(f"Expected a str path, got {type(path).__name__}")
    if not path:
        raise ValueError("The filename must not be empty.")
    return path


class Configuration(ElementCollection[Section]):
    """Ordered list of sections

    Duplicate section names are allowed, lookups by name return the first match.
    """

    __slots__ = ("__sections", "__weakref__")

    def __init__(self, sections: Iterable[Section] = ()) -> None:
        self.__sections: list[Section] = []
        for section in sections:
            self.add(section)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} ({len(self.__sections)} sections)>"

    def _elements(self) -> list[Section]:
        return self.__sections

    def _new_element(self, name: str) -> Section:
        return Section(name)

    @classmethod
    def _element_type(cls) -> type[Section]:
        return Section

    def find_section(self, name: str) -> Section | None:
        return self._find(name)

    def get_sections_named(self, name: str) -> list[Section]:
        return self._named(name)

    ##### Text format #####

    @classmethod
    def load_string(cls, source: str, fmt: ConfigurationFormat | None = None) -> Configuration:
        from .parser import ConfigurationParser

        if not isinstance(source, str):
            raise TypeError(f"Expected a str, got {type(source).__name__}")
        return ConfigurationParser(fmt).parse(source)

    @classmethod
    def load_file(
        cls,
        path: str | os.PathLike[str],
        *,
        encoding: str | None = None,
        fmt: ConfigurationFormat | None = None,
    ) -> Configuration:
        path = _check_path(path)
        logger.debug("Loading configuration from %r", path)
        with open(path, "r", encoding=encoding or "utf-8-sig") as stream:
            return cls.load_stream(stream, fmt=fmt)

    @classmethod
    def load_stream(cls, stream: IO[str], *, fmt: ConfigurationFormat | None = None) -> Configuration:
        if stream is None:
            raise ValueError("stream is None")
        return cls.load_string(stream.read(), fmt)

    def to_string(self, fmt: ConfigurationFormat | None = None) -> str:
        from .serializer import serialize

        return serialize(self, fmt)

    def save_file(
        self,
        path: str | os.PathLike[str],
        *,
        encoding: str | None = None,
        fmt: ConfigurationFormat | None = None,
    ) -> None:
        path = _check_path(path)
        text = self.to_string(fmt)
        logger.debug("Saving configuration to %r", path)
        with open(path, "w", encoding=encoding or "utf-8") as stream:
            stream.write(text)

    def save_stream(self, stream: IO[str], *, fmt: ConfigurationFormat | None = None) -> None:
        if stream is None:
            raise ValueError("stream is None")
        stream.write(self.to_string(fmt))

    ##### Binary format #####

    @classmethod
    def load_bytes(cls, data: bytes) -> Configuration:
        from .binary import deserialize_binary

        with io.BytesIO(data) as stream:
            configuration = deserialize_binary(stream)
            if stream.read(1):
                raise DeserializeError("Extra data caught")
        return configuration

    @classmethod
    def load_binary_file(cls, path: str | os.PathLike[str]) -> Configuration:
        path = _check_path(path)
        logger.debug("Loading binary configuration from %r", path)
        with open(path, "rb") as stream:
            return cls.load_binary_stream(stream)

    @classmethod
    def load_binary_stream(cls, stream: IO[bytes]) -> Configuration:
        from .binary import deserialize_binary

        if stream is None:
            raise ValueError("stream is None")
        return deserialize_binary(stream)

    def to_bytes(self) -> bytes:
        with io.BytesIO() as stream:
            self.save_binary_stream(stream)
            return stream.getvalue()

    def save_binary_file(self, path: str | os.PathLike[str]) -> None:
        path = _check_path(path)
        logger.debug("Saving binary configuration to %r", path)
        with open(path, "wb") as stream:
            self.save_binary_stream(stream)

    def save_binary_stream(self, stream: IO[bytes]) -> None:
        from .binary import serialize_binary

        if stream is None:
            raise ValueError("stream is None")
        serialize_binary(self, stream)
