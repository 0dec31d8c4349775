# -*- coding: Utf-8 -*-

from __future__ import annotations

import io

from cfgfile.binary import BinaryReader, BinaryWriter, deserialize_binary, serialize_binary
from cfgfile.configuration import Configuration
from cfgfile.element import Comment
from cfgfile.exceptions import DeserializeError
from cfgfile.section import Section
from cfgfile.setting import Setting

import pytest


def _serialize(configuration: Configuration) -> bytes:
    stream = io.BytesIO()
    serialize_binary(configuration, stream)
    return stream.getvalue()


def _deserialize(data: bytes) -> Configuration:
    return deserialize_binary(io.BytesIO(data))


@pytest.mark.unit
class TestBinaryWriterReader:
    @pytest.mark.parametrize(
        ["length", "prefix"],
        [
            pytest.param(0, b"\x00"),
            pytest.param(127, b"\x7f"),
            pytest.param(128, b"\x80\x01"),
            pytest.param(200, b"\xc8\x01"),
            pytest.param(16384, b"\x80\x80\x01"),
        ],
    )
    def test____write_string____7bit_length_prefix(self, length: int, prefix: bytes) -> None:
        # Arrange
        stream = io.BytesIO()
        writer = BinaryWriter(stream)

        # Act
        writer.write_string("a" * length)

        # Assert
        assert stream.getvalue() == prefix + b"a" * length
        assert BinaryReader(io.BytesIO(stream.getvalue())).read_string() == "a" * length

    def test____write_string____utf8_byte_length(self) -> None:
        # Arrange
        stream = io.BytesIO()

        # Act
        BinaryWriter(stream).write_string("é€")

        # Assert
        assert stream.getvalue() == b"\x05\xc3\xa9\xe2\x82\xac"

    @pytest.mark.parametrize(["char", "data"], [("#", b"#"), ("é", b"\xc3\xa9"), ("€", b"\xe2\x82\xac"), ("𝄞", b"\xf0\x9d\x84\x9e")])
    def test____char____utf8_bytes(self, char: str, data: bytes) -> None:
        # Arrange
        stream = io.BytesIO()

        # Act
        BinaryWriter(stream).write_char(char)

        # Assert
        assert stream.getvalue() == data
        assert BinaryReader(io.BytesIO(data)).read_char() == char

    def test____read_char____invalid_lead_byte(self) -> None:
        # Arrange
        reader = BinaryReader(io.BytesIO(b"\x80"))

        # Act & Assert
        with pytest.raises(DeserializeError):
            reader.read_char()

    def test____int32_and_bool____little_endian(self) -> None:
        # Arrange
        stream = io.BytesIO()
        writer = BinaryWriter(stream)

        # Act
        writer.write_int32(-2)
        writer.write_bool(True)

        # Assert
        assert stream.getvalue() == b"\xfe\xff\xff\xff\x01"
        reader = BinaryReader(io.BytesIO(stream.getvalue()))
        assert reader.read_int32() == -2
        assert reader.read_bool() is True

    def test____read_7bit_encoded_int____too_long(self) -> None:
        # Arrange
        reader = BinaryReader(io.BytesIO(b"\xff" * 6))

        # Act & Assert
        with pytest.raises(DeserializeError, match=r"Bad 7-bit encoded integer"):
            reader.read_7bit_encoded_int()


@pytest.mark.unit
class TestBinaryLayout:
    def test____serialize_binary____exact_bytes(self) -> None:
        # Arrange
        configuration = Configuration([Section("A", [Setting("x", 1)])])

        # Act
        data = _serialize(configuration)

        # Assert
        assert data == (
            b"\x01\x00\x00\x00"  # section count
            b"\x01A"  # section name
            b"\x01\x00\x00\x00"  # setting count
            b"\x00"  # no inline comment
            b"\x00\x00\x00\x00"  # no pre-comment
            b"\x01x"  # setting name
            b"\x011"  # raw value
            b"\x00"
            b"\x00\x00\x00\x00"
        )

    def test____serialize_binary____comments_block(self) -> None:
        # Arrange
        section = Section("S")
        section.comment = Comment("#", "hi")
        section.pre_comments.append(Comment(";", "p"))
        configuration = Configuration([section])

        # Act
        data = _serialize(configuration)

        # Assert
        assert data == (
            b"\x01\x00\x00\x00"
            b"\x01S"
            b"\x00\x00\x00\x00"
            b"\x01#\x02hi"  # inline comment
            b"\x01\x00\x00\x00;\x01p"  # one pre-comment
        )


@pytest.mark.functional
class TestBinaryRoundTrip:
    def test____deserialize_binary____exact_model(self) -> None:
        # Arrange
        configuration = Configuration()
        general = configuration["Général"]
        general.pre_comments.extend([Comment("#", "first"), Comment("'", "")])
        general.comment = Comment(";", "inline € comment")
        general["values"].int_array = [1, 2, 3]
        general["values"].comment = Comment("#", "array")
        general["empty"].raw_value = ""
        general["multi"].raw_value = "line\nbreak"
        configuration["Empty"]
        configuration["Dup"]["x"].int_value = 1
        configuration.add(Section("dup"))["x"].int_value = 2

        # Act
        loaded = _deserialize(_serialize(configuration))

        # Assert
        assert _serialize(loaded) == _serialize(configuration)
        assert [section.name for section in loaded] == ["Général", "Empty", "Dup", "dup"]
        assert loaded["Général"].pre_comments == [Comment("#", "first"), Comment("'", "")]
        assert loaded["Général"].comment == Comment(";", "inline € comment")
        assert loaded["Général"]["values"].int_array == [1, 2, 3]
        assert loaded["Général"]["values"].comment == Comment("#", "array")
        assert loaded["Général"]["multi"].raw_value == "line\nbreak"
        assert loaded.get_sections_named("dup")[1]["x"].int_value == 2

    def test____deserialize_binary____empty_configuration(self) -> None:
        # Arrange

        # Act
        loaded = _deserialize(_serialize(Configuration()))

        # Assert
        assert len(loaded) == 0


@pytest.mark.unit
class TestBinaryErrors:
    def test____deserialize_binary____truncated_data(self) -> None:
        # Arrange
        configuration = Configuration()
        configuration["A"]["x"].int_value = 42
        data = _serialize(configuration)

        # Act & Assert
        for size in range(len(data)):
            with pytest.raises(DeserializeError):
                _deserialize(data[:size])

    def test____deserialize_binary____negative_count(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(DeserializeError, match=r"Negative element count"):
            _deserialize(b"\xff\xff\xff\xff")

    def test____deserialize_binary____empty_name(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(DeserializeError, match=r"Empty element name"):
            _deserialize(b"\x01\x00\x00\x00\x00")

    def test____deserialize_binary____invalid_utf8(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(DeserializeError):
            _deserialize(b"\x01\x00\x00\x00\x01\xff")
