# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Configuration file handle module"""

from __future__ import annotations

__all__ = ["ConfigurationFile"]

import logging
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, final

from .configuration import Configuration

if TYPE_CHECKING:
    from .format import ConfigurationFormat

logger = logging.getLogger(__name__)


@final
class ConfigurationFile:
    """A configuration bound to a file path

    The handle does not synchronize the model itself: callers sharing the handle
    between threads use locked() around their reads and writes.
    """

    __slots__ = ("__path", "__binary", "__encoding", "__fmt", "__lock", "__configuration", "__weakref__")

    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        binary: bool = False,
        encoding: str | None = None,
        fmt: ConfigurationFormat | None = None,
    ) -> None:
        path = os.fspath(path)
        if not path:
            raise ValueError("The filename must not be empty.")
        self.__path: str = path
        self.__binary: bool = bool(binary)
        self.__encoding: str | None = encoding
        self.__fmt: ConfigurationFormat | None = fmt
        self.__lock = threading.RLock()
        self.__configuration: Configuration | None = None

    def __repr__(self) -> str:
        mode = "binary" if self.__binary else "text"
        return f"<{type(self).__name__} {self.__path!r} ({mode})>"

    def exists(self) -> bool:
        return os.path.isfile(self.__path)

    def load(self) -> Configuration:
        with self.__lock:
            if self.__binary:
                configuration = Configuration.load_binary_file(self.__path)
            else:
                configuration = Configuration.load_file(self.__path, encoding=self.__encoding, fmt=self.__fmt)
            self.__configuration = configuration
        logger.debug("%r loaded", self)
        return configuration

    def load_or_create(self) -> Configuration:
        with self.__lock:
            if self.exists():
                return self.load()
            self.__configuration = configuration = Configuration()
            return configuration

    def save(self) -> None:
        with self.__lock:
            configuration = self.configuration
            if self.__binary:
                configuration.save_binary_file(self.__path)
            else:
                configuration.save_file(self.__path, encoding=self.__encoding, fmt=self.__fmt)
        logger.debug("%r saved", self)

    @contextmanager
    def locked(self) -> Iterator[Configuration]:
        with self.__lock:
            yield self.configuration

    @property
    def path(self) -> str:
        return self.__path

    @property
    def binary(self) -> bool:
        return self.__binary

    @property
    def loaded(self) -> bool:
        return self.__configuration is not None

    @property
    def configuration(self) -> Configuration:
        configuration = self.__configuration
        if configuration is None:
            raise RuntimeError(f"{self!r}: configuration not loaded")
        return configuration

    @configuration.setter
    def configuration(self, configuration: Configuration) -> None:
        if not isinstance(configuration, Configuration):
            raise TypeError(f"Expected a Configuration, got {type(configuration).__name__}")
        with self.__lock:
            self.__configuration = configuration
