#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# This file is part of pyGCube.
# Copyright (C) 2025 The pyGCube Project and contributors.
#
# pyGCube is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# pyGCube is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with pyGCube. If not, see <https://www.gnu.org/licenses/>.

#
# pyGCube is free software: you can redistribute it and/or modify
# (at your option) any later version.
#
# pyGCube is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#


"""
Centralized module for managing global and module-specific verbosity levels.
It defines verbosity constants and provides functions to query the effective
verbosity for a given module, taking into account global settings and
module-specific overrides.

Module names are dotted paths relative to the `pygcube` package
(e.g. "utils.io.format.cube.cube_io"); fully qualified names are accepted
and normalized.
"""

from pygcube.foundation.enums import VerbosityLevel as _VL
from typing import TypeAlias

# Integer value of one of the VerbosityLevel members (e.g., logging_config.INFO).
VerbosityLevelValue: TypeAlias = int


# --- Verbosity Level Constants ---
CRITICAL = _VL.CRITICAL.int_value  # 50
ERROR = _VL.ERROR.int_value  # 40
NOTICE = _VL.NOTICE.int_value  # 35
WARNING = _VL.WARNING.int_value  # 30
INFO = _VL.INFO.int_value  # 20
DEBUG = _VL.DEBUG.int_value  # 10
TRACE = _VL.TRACE.int_value  # 5

_VALID_VERBOSITY_VALUES = frozenset(level.int_value for level in _VL)

MIN_VERBOSITY_VALUE = TRACE  # 5
MAX_VERBOSITY_VALUE = CRITICAL  # 50

_PACKAGE_PREFIX = "pygcube."

# --- Module-specific Verbosity Configuration ---
_MODULE_VERBOSITY_SETTINGS = {
    # config
    "config.global_runtime": NOTICE,
    # foundation
    "foundation.data_models": NOTICE,
    # utils
    "utils.bonds": NOTICE,
    # utils.io
    "utils.io.format.cube.cube_io": NOTICE,
    "utils.io.readers": NOTICE,
    "utils.io.writers": NOTICE,
    # scripts
    "scripts.pygcube_info": INFO,
}


_GLOBAL_VERBOSITY_LEVEL = INFO


def _normalize_module_name(module_name: str) -> str:
    if module_name.startswith(_PACKAGE_PREFIX):
        return module_name[len(_PACKAGE_PREFIX) :]
    return module_name


def _validate_level(level_value, what: str):
    if not isinstance(level_value, int) or level_value not in _VALID_VERBOSITY_VALUES:
        raise ValueError(
            f"Invalid {what}: {level_value}. Must be one of {sorted(list(_VALID_VERBOSITY_VALUES))}."
        )


def set_global_verbosity_level(level_value: VerbosityLevelValue):
    """
    Sets the global verbosity level.
    Higher `level_value` means less verbose output (more severe messages).
    Raises ValueError if `level_value` is not a valid VerbosityLevel integer.
    """
    global _GLOBAL_VERBOSITY_LEVEL
    _validate_level(level_value, "global verbosity level_value")
    _GLOBAL_VERBOSITY_LEVEL = level_value


def get_global_verbosity_level() -> VerbosityLevelValue:
    """Returns the current global verbosity level (integer value)."""
    return _GLOBAL_VERBOSITY_LEVEL


def set_module_verbosity(module_name: str, level_value: VerbosityLevelValue):
    """
    Sets the specific verbosity level for a given module.
    Raises ValueError if `level_value` is not a valid VerbosityLevel integer.
    """
    _validate_level(level_value, f"module verbosity level_value for {module_name}")
    _MODULE_VERBOSITY_SETTINGS[_normalize_module_name(module_name)] = level_value


def get_module_verbosity(module_name: str) -> VerbosityLevelValue:
    """
    Returns the explicitly configured verbosity level for a module.
    Returns the global verbosity level if the module is not explicitly configured.
    """
    return _MODULE_VERBOSITY_SETTINGS.get(
        _normalize_module_name(module_name), _GLOBAL_VERBOSITY_LEVEL
    )


def get_effective_verbosity(module_name: str) -> VerbosityLevelValue:
    """
    Determines the effective verbosity level for a given module.

    Rule: The most restrictive (highest value) level between global and module-specific wins.
    """
    return max(get_global_verbosity_level(), get_module_verbosity(module_name))
