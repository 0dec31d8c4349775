# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Setting value converters package"""

from __future__ import annotations

__all__ = [
    "BoolStringConverter",
    "CharStringConverter",
    "ConverterRegistry",
    "DateTimeStringConverter",
    "DecimalStringConverter",
    "EnumStringConverter",
    "FallbackStringConverter",
    "FloatStringConverter",
    "IntegerStringConverter",
    "StringStringConverter",
    "TypeStringConverter",
    "builtin_converters",
    "deregister_converter",
    "find_converter",
    "get_default_registry",
    "register_converter",
    "set_default_registry",
]

from .abc import *
from .builtins import *
from .registry import *
