# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Configuration text parser module

Grammar, one statement per line (surrounding whitespaces are not significant):

    # comment           -> pre-comment of the next section or setting
    [name]  # comment   -> opens a section
    name = value  ; c   -> setting of the current section

A comment symbol inside a double-quoted span is part of the value.
"""

from __future__ import annotations

__all__ = ["ConfigurationParser", "parse"]

import logging

from typing_extensions import final

from .codec import find_unquoted
from .configuration import Configuration
from .element import Comment
from .exceptions import ParserError
from .format import ConfigurationFormat, get_default_format
from .section import Section
from .setting import Setting

logger = logging.getLogger(__name__)


@final
class ConfigurationParser:
    __slots__ = ("__fmt",)

    def __init__(self, fmt: ConfigurationFormat | None = None) -> None:
        if fmt is None:
            fmt = get_default_format()
        elif not isinstance(fmt, ConfigurationFormat):
            raise TypeError(f"Expected a ConfigurationFormat, got {type(fmt).__name__}")
        self.__fmt: ConfigurationFormat = fmt

    @property
    def format(self) -> ConfigurationFormat:
        return self.__fmt

    def parse(self, source: str) -> Configuration:
        fmt = self.__fmt
        configuration = Configuration()
        current_section: Section | None = None
        pre_comments: list[Comment] = []

        line_number: int = 0
        for line_number, line in enumerate(source.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue

            comment_index = self.__find_comment(line)
            if comment_index == 0:
                if not fmt.ignore_pre_comments:
                    pre_comments.append(self.__make_comment(line, 0))
                continue

            comment: Comment | None = None
            if comment_index > 0:
                comment = self.__make_comment(line, comment_index)
                line = line[:comment_index].rstrip()

            element: Section | Setting
            if line.startswith("["):
                element = current_section = self.__parse_section(line, line_number)
                configuration.add(current_section)
            else:
                element = self.__parse_setting(line, line_number)
                if current_section is None:
                    raise ParserError(f"The setting '{element.name}' has to be in a section.", line_number)
                current_section.add(element)

            element.comment = comment
            if pre_comments:
                element.pre_comments.extend(pre_comments)
                pre_comments.clear()

        logger.debug("Parsed %d sections from %d lines", len(configuration), line_number)
        return configuration

    def __find_comment(self, line: str) -> int:
        comment_chars = self.__fmt.comment_chars
        if self.__fmt.ignore_inline_comments:
            return 0 if line[0] in comment_chars else -1
        return find_unquoted(line, comment_chars)

    @staticmethod
    def __make_comment(line: str, index: int) -> Comment:
        return Comment(line[index], line[index + 1 :].strip())

    @staticmethod
    def __parse_section(line: str, line_number: int) -> Section:
        closing = line.find("]")
        if closing < 0:
            raise ParserError("closing bracket missing.", line_number)
        if closing != len(line) - 1:
            raise ParserError(f"unexpected token '{line[closing + 1 :]}'", line_number)
        name = line[1:closing].strip()
        if not name:
            raise ParserError("section name expected.", line_number)
        return Section(name)

    @staticmethod
    def __parse_setting(line: str, line_number: int) -> Setting:
        equal = line.find("=")
        if equal < 0:
            raise ParserError("setting assignment expected.", line_number)
        name = line[:equal].strip()
        if not name:
            raise ParserError("setting name expected.", line_number)
        setting = Setting(name)
        setting.raw_value = line[equal + 1 :].strip()
        return setting


def parse(source: str, fmt: ConfigurationFormat | None = None) -> Configuration:
    return ConfigurationParser(fmt).parse(source)
