# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Configuration text serializer module

Every line is checked before being written: names and values which the parser
would read differently are rejected with ValueError.
"""

from __future__ import annotations

__all__ = ["serialize"]

import io
from typing import TYPE_CHECKING

from .codec import find_unquoted
from .format import get_default_format

if TYPE_CHECKING:
    from .configuration import Configuration
    from .element import ConfigurationElement
    from .format import ConfigurationFormat
    from .section import Section
    from .setting import Setting


def _check_comments(element: ConfigurationElement, fmt: ConfigurationFormat) -> None:
    comments = list(element.pre_comments)
    if element.comment is not None:
        comments.append(element.comment)
    for comment in comments:
        if comment.symbol not in fmt.comment_chars:
            raise ValueError(f"{element!r}: invalid comment symbol {comment.symbol!r}")


def _check_name(element: ConfigurationElement, forbidden: str, fmt: ConfigurationFormat) -> None:
    name = element.name
    if name != name.strip():
        raise ValueError(f"{element!r}: a name cannot start or end with whitespaces")
    for char in (*forbidden, '"', *fmt.comment_chars):
        if char in name:
            raise ValueError(f"{element!r}: {char!r} is not allowed in a name")


def _check_line(element: ConfigurationElement, fmt: ConfigurationFormat) -> None:
    text = element.to_string(include_comments=False)
    if "\n" in text or "\r" in text:
        raise ValueError(f"{element!r}: line breaks cannot be written in the text format")
    if fmt.ignore_inline_comments:
        return
    if find_unquoted(text, fmt.comment_chars) >= 0:
        raise ValueError(f"{element!r}: the value would be read as a comment")
    if element.comment is not None and text.count('"') % 2:
        raise ValueError(f"{element!r}: an unbalanced double quote would hide the inline comment")


def _check_section(section: Section, fmt: ConfigurationFormat) -> None:
    _check_comments(section, fmt)
    _check_name(section, "]", fmt)
    _check_line(section, fmt)


def _check_setting(setting: Setting, fmt: ConfigurationFormat) -> None:
    _check_comments(setting, fmt)
    _check_name(setting, "=", fmt)
    if setting.name.startswith("["):
        raise ValueError(f"{setting!r}: a setting name cannot start with '['")
    _check_line(setting, fmt)


def serialize(configuration: Configuration, fmt: ConfigurationFormat | None = None) -> str:
    if fmt is None:
        fmt = get_default_format()

    buffer = io.StringIO()
    for index, section in enumerate(configuration):
        _check_section(section, fmt)
        if index > 0 and section.pre_comments:
            buffer.write("\n")
        buffer.write(section.to_string(include_comments=True))
        buffer.write("\n")

        for setting in section:
            _check_setting(setting, fmt)
            if setting.pre_comments:
                buffer.write("\n")
            buffer.write(setting.to_string(include_comments=True))
            buffer.write("\n")

        buffer.write("\n")

    return buffer.getvalue().replace("\n\n\n", "\n\n")
