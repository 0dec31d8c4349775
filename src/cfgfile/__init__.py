# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""INI-like configuration files library

cfgfile parses human-editable configuration text into a configuration -> sections
-> settings model, gives typed access to setting values through a pluggable
converter registry, and writes the model back as text or in a compact binary form.

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.
This program is distributed in the hope that it will be useful, but WITHOUT
ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with
this program. If not, see <http://www.gnu.org/licenses/>.
"""

from __future__ import annotations

__all__ = [
    "ArrayOf",
    "Comment",
    "Configuration",
    "ConfigurationError",
    "ConfigurationFile",
    "ConfigurationFormat",
    "ConfigurationParser",
    "ConverterRegistry",
    "DateTimeFormat",
    "DeserializeError",
    "ElementNotFoundError",
    "EnumType",
    "FieldMapping",
    "Nullable",
    "NumberFormat",
    "ParserError",
    "Section",
    "SectionMapper",
    "Setting",
    "SettingValueCastError",
    "TypeStringConverter",
    "TypeTag",
    "deregister_converter",
    "find_converter",
    "get_default_format",
    "get_default_registry",
    "parse",
    "register_converter",
    "serialize",
    "set_default_format",
    "set_default_registry",
]

__author__ = "cfgfile contributors"
__copyright__ = "Copyright (c) 2021-2025, cfgfile contributors"
__deprecated__ = False
__license__ = "GNU GPL v3.0"
__maintainer__ = "cfgfile contributors"
__status__ = "Development"
__version__ = "1.0.0.dev1"

version_info: tuple[int, int, int] = (1, 0, 0)

import logging

############ Package initialization ############
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .configuration import Configuration
from .converters import (
    ConverterRegistry,
    TypeStringConverter,
    deregister_converter,
    find_converter,
    get_default_registry,
    register_converter,
    set_default_registry,
)
from .element import Comment
from .exceptions import ConfigurationError, DeserializeError, ElementNotFoundError, ParserError, SettingValueCastError
from .format import ConfigurationFormat, DateTimeFormat, NumberFormat, get_default_format, set_default_format
from .handle import ConfigurationFile
from .mapping import FieldMapping, SectionMapper
from .parser import ConfigurationParser, parse
from .section import Section
from .serializer import serialize
from .setting import Setting
from .types import ArrayOf, EnumType, Nullable, TypeTag
