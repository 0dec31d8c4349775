# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Configuration binary format module

Layout (little-endian):

    int32 section_count
    section_count * (string name, int32 setting_count, comments,
                     setting_count * (string name, string raw_value, comments))

    comments: bool has_inline, [char symbol, string text], int32 count, count * (char symbol, string text)

Strings are prefixed by their UTF-8 byte length as a 7-bit variable-length integer.
Chars are written as their UTF-8 bytes.
"""

from __future__ import annotations

__all__ = ["BinaryReader", "BinaryWriter", "deserialize_binary", "serialize_binary"]

import logging
import struct
from typing import IO, TYPE_CHECKING, Final, final

from .configuration import Configuration
from .element import Comment
from .exceptions import DeserializeError
from .section import Section
from .setting import Setting

if TYPE_CHECKING:
    from .element import ConfigurationElement

logger = logging.getLogger(__name__)

_INT32: Final[struct.Struct] = struct.Struct("<i")
_BOOL: Final[struct.Struct] = struct.Struct("<?")


@final
class BinaryWriter:
    __slots__ = ("__stream",)

    def __init__(self, stream: IO[bytes]) -> None:
        self.__stream: IO[bytes] = stream

    def write_int32(self, value: int) -> None:
        self.__stream.write(_INT32.pack(value))

    def write_bool(self, value: bool) -> None:
        self.__stream.write(_BOOL.pack(bool(value)))

    def write_char(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        self.__stream.write(char.encode("utf-8"))

    def write_string(self, value: str) -> None:
        data = value.encode("utf-8")
        self.write_7bit_encoded_int(len(data))
        self.__stream.write(data)

    def write_7bit_encoded_int(self, value: int) -> None:
        if value < 0:
            raise ValueError("Negative length")
        data = bytearray()
        while value >= 0x80:
            data.append((value & 0x7F) | 0x80)
            value >>= 7
        data.append(value)
        self.__stream.write(data)


@final
class BinaryReader:
    __slots__ = ("__stream",)

    def __init__(self, stream: IO[bytes]) -> None:
        self.__stream: IO[bytes] = stream

    def read_bytes(self, size: int) -> bytes:
        data = self.__stream.read(size)
        if len(data) != size:
            raise DeserializeError("Unexpected end of data")
        return data

    def read_int32(self) -> int:
        value: int = _INT32.unpack(self.read_bytes(_INT32.size))[0]
        return value

    def read_bool(self) -> bool:
        return self.read_bytes(1)[0] != 0

    def read_char(self) -> str:
        first = self.read_bytes(1)
        lead = first[0]
        if lead < 0x80:
            return first.decode("ascii")
        if 0xC0 <= lead < 0xE0:
            size = 2
        elif 0xE0 <= lead < 0xF0:
            size = 3
        elif 0xF0 <= lead < 0xF8:
            size = 4
        else:
            raise DeserializeError(f"Invalid UTF-8 lead byte 0x{lead:02x}")
        return self.__decode(first + self.read_bytes(size - 1))

    def read_string(self) -> str:
        return self.__decode(self.read_bytes(self.read_7bit_encoded_int()))

    def read_7bit_encoded_int(self) -> int:
        result = 0
        for shift in range(0, 35, 7):
            byte = self.read_bytes(1)[0]
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return result
        raise DeserializeError("Bad 7-bit encoded integer")

    @staticmethod
    def __decode(data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DeserializeError(str(exc)) from exc


def _write_comments(writer: BinaryWriter, element: ConfigurationElement) -> None:
    comment = element.comment
    writer.write_bool(comment is not None)
    if comment is not None:
        writer.write_char(comment.symbol)
        writer.write_string(comment.text)
    writer.write_int32(len(element.pre_comments))
    for pre_comment in element.pre_comments:
        writer.write_char(pre_comment.symbol)
        writer.write_string(pre_comment.text)


def _read_comments(reader: BinaryReader, element: ConfigurationElement) -> None:
    if reader.read_bool():
        element.comment = _read_comment(reader)
    count = _read_count(reader)
    element.pre_comments.extend(_read_comment(reader) for _ in range(count))


def _read_comment(reader: BinaryReader) -> Comment:
    symbol = reader.read_char()
    text = reader.read_string()
    try:
        return Comment(symbol, text)
    except ValueError as exc:
        raise DeserializeError(f"Invalid comment: {exc}") from exc


def _read_count(reader: BinaryReader) -> int:
    count = reader.read_int32()
    if count < 0:
        raise DeserializeError(f"Negative element count {count}")
    return count


def _read_name(reader: BinaryReader) -> str:
    name = reader.read_string()
    if not name:
        raise DeserializeError("Empty element name")
    return name


def serialize_binary(configuration: Configuration, stream: IO[bytes]) -> None:
    writer = BinaryWriter(stream)
    writer.write_int32(len(configuration))
    for section in configuration:
        writer.write_string(section.name)
        writer.write_int32(len(section))
        _write_comments(writer, section)
        for setting in section:
            writer.write_string(setting.name)
            writer.write_string(setting.raw_value)
            _write_comments(writer, setting)
    logger.debug("Wrote %d sections in binary format", len(configuration))


def deserialize_binary(stream: IO[bytes]) -> Configuration:
    reader = BinaryReader(stream)
    configuration = Configuration()
    for _ in range(_read_count(reader)):
        section = Section(_read_name(reader))
        setting_count = _read_count(reader)
        _read_comments(reader, section)
        for _ in range(setting_count):
            setting = Setting(_read_name(reader))
            setting.raw_value = reader.read_string()
            _read_comments(reader, setting)
            section.add(setting)
        configuration.add(section)
    logger.debug("Read %d sections in binary format", len(configuration))
    return configuration
