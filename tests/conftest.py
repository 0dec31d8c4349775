# -*- coding: Utf-8 -*-

from __future__ import annotations

import os
import pathlib
from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from cfgfile.converters import ConverterRegistry
    from cfgfile.format import ConfigurationFormat


################################## fixtures ##################################


@pytest.fixture(scope="session")
def cfgfile_rootdirs_list() -> list[pathlib.Path]:
    import importlib

    cfgfile_spec = importlib.import_module("cfgfile").__spec__
    assert cfgfile_spec is not None
    assert cfgfile_spec.submodule_search_locations is not None

    return [pathlib.Path(path) for path in cfgfile_spec.submodule_search_locations]


@pytest.fixture(scope="session")
def cfgfile_packages_paths(cfgfile_rootdirs_list: list[pathlib.Path]) -> list[pathlib.Path]:
    import importlib
    import pkgutil

    def get_packages_paths() -> Iterator[str]:
        yield from map(os.fspath, cfgfile_rootdirs_list)
        for package_info in filter(
            lambda module_info: module_info.ispkg,
            pkgutil.walk_packages(map(os.fspath, cfgfile_rootdirs_list), prefix="cfgfile."),
        ):
            package_module = importlib.import_module(package_info.name)
            package_module_spec = package_module.__spec__
            assert package_module_spec is not None
            assert package_module_spec.submodule_search_locations is not None
            yield from package_module_spec.submodule_search_locations

    return [pathlib.Path(p) for p in get_packages_paths()]


@pytest.fixture
def default_format() -> ConfigurationFormat:
    from cfgfile.format import get_default_format

    return get_default_format()


@pytest.fixture
def registry() -> ConverterRegistry:
    from cfgfile.converters import ConverterRegistry

    return ConverterRegistry.with_builtins()


################################## Auto used fixtures for all session test ##################################


@pytest.fixture(autouse=True)
def __restore_process_defaults() -> Iterator[None]:
    """
    Tests may replace the default format or the default registry: put back the original ones
    """
    from cfgfile.converters import get_default_registry, set_default_registry
    from cfgfile.format import get_default_format, set_default_format

    fmt = get_default_format()
    registry = get_default_registry()
    default_converters = {tp: registry.find(tp) for tp in registry}
    try:
        yield
    finally:
        set_default_format(fmt)
        for tp in list(registry):
            if tp not in default_converters or registry.find(tp) is not default_converters[tp]:
                registry.deregister(tp)
        for tp, converter in default_converters.items():
            if tp not in registry:
                registry.register(tp, converter)
        set_default_registry(registry)
