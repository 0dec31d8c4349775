# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Setting value codec module

Turns a raw setting string into typed scalars and arrays, and back.

Array syntax is '{elem1, elem2, ...}'. The array size inference is naive: every
separator found in the raw string counts, even inside an element, so a separator
in an element's own text corrupts the computed size.
"""

from __future__ import annotations

__all__ = [
    "calculate_array_size",
    "decode_array",
    "decode_value",
    "encode_array",
    "encode_value",
    "find_unquoted",
    "is_array_value",
    "split_array",
]

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from typing_extensions import assert_never

from .exceptions import SettingValueCastError
from .types import ArrayOf, EnumType, Nullable, TypeTag, infer_type

if TYPE_CHECKING:
    from .converters.registry import ConverterRegistry
    from .format import ConfigurationFormat
    from .types import ScalarType, TypeSpec


def _is_blank(text: str) -> bool:
    return not text or text.isspace()


def calculate_array_size(raw: str, separator: str) -> int:
    """Return the number of elements of the array in 'raw', or -1 if 'raw' is not an array"""
    if not raw:
        return -1

    start = raw.find("{")
    end = raw.rfind("}")
    if start < 0 or end < 0:
        return -1

    # Only whitespaces are allowed around the braces
    if not _is_blank(raw[:start]) or not _is_blank(raw[end + 1 :]):
        return -1

    separator_count = raw.count(separator)
    if separator_count == 0:
        return 0 if _is_blank(raw[start + 1 : end]) else 1
    return separator_count + 1


def split_array(raw: str, separator: str) -> list[str]:
    start = raw.find("{")
    end = raw.rfind("}")
    if start < 0 or end < start:
        raise ValueError(f"{raw!r} is not an array")
    interior = raw[start + 1 : end]
    if separator not in interior and _is_blank(interior):
        return []
    return [element.strip() for element in interior.split(separator)]


def find_unquoted(text: str, chars: Iterable[str]) -> int:
    """Return the index of the first char of 'chars' outside a double-quoted span, or -1"""
    chars = frozenset(chars)
    in_quotes = False
    for index, char in enumerate(text):
        if char == '"':
            in_quotes = not in_quotes
        elif not in_quotes and char in chars:
            return index
    return -1


def is_array_value(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def decode_value(raw: str, tp: TypeSpec, fmt: ConfigurationFormat, registry: ConverterRegistry) -> Any:
    match tp:
        case ArrayOf():
            return decode_array(raw, tp, fmt, registry)
        case Nullable(inner=inner):
            if not raw:
                return None
            tp = inner
        case TypeTag() | EnumType():
            pass
        case _:
            assert_never(tp)

    converter = registry.find(tp)
    if registry.is_fallback(converter):
        raise SettingValueCastError.converter_missing(raw, tp)
    try:
        return converter.from_string(raw, tp, fmt)
    except Exception as exc:
        raise SettingValueCastError.create(raw, tp) from exc


def decode_array(
    raw: str,
    tp: ArrayOf,
    fmt: ConfigurationFormat,
    registry: ConverterRegistry,
    *,
    size: int | None = None,
) -> list[Any] | None:
    if size is None:
        size = calculate_array_size(raw, fmt.array_element_separator)
    if size < 0:
        return None
    if size == 0:
        return []
    elements = split_array(raw, fmt.array_element_separator)
    if len(elements) != size:
        raise SettingValueCastError(
            f"Failed to convert value {raw!r} to type {tp}: expected {size} elements, got {len(elements)}.",
            raw,
            tp,
        )
    return [decode_value(element, tp.element, fmt, registry) for element in elements]


def encode_value(
    value: Any,
    tp: ScalarType | Nullable | None,
    fmt: ConfigurationFormat,
    registry: ConverterRegistry,
) -> str:
    if value is None:
        return ""
    if isinstance(tp, Nullable):
        tp = tp.inner
    elif tp is None:
        tp = infer_type(value)
    return registry.find(tp).to_string(value, fmt)


def encode_array(
    values: Iterable[Any],
    element: ScalarType | Nullable | None,
    fmt: ConfigurationFormat,
    registry: ConverterRegistry,
) -> str:
    strings: list[str] = []
    for value in values:
        if is_array_value(value):
            raise ValueError("Jagged arrays are not supported.")
        strings.append(encode_value(value, element, fmt, registry))
    return "{" + f"{fmt.array_element_separator} ".join(strings) + "}"
