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
This module provides global configuration settings and utility functions for pyGCube,
including precision control and verbosity management.

It defines:
- `PRECISION`: The numerical precision (single or double) of voxel buffers.
- `cube_real`: NumPy data type of voxel values, set from `PRECISION`.
- Functions to set and get precision and verbosity levels.
- `print_if_verbose` (alias `vprint`) for conditional printing.
"""

import numpy as np

from pygcube.foundation.enums import Precision, VerbosityLevel
import pygcube.config.logging_config as logging_config
from pygcube.config.logging_config import (
    VerbosityLevelValue,
)

# --- Configuration Variables and Initialization ---
# Single precision matches the float voxel storage of common cube consumers.
PRECISION = Precision.SINGLE

cube_real: type = None


def _initialize_data_types():
    """Initializes the voxel data type based on the current precision."""
    global cube_real

    if PRECISION == Precision.SINGLE:
        cube_real = np.float32
    elif PRECISION == Precision.DOUBLE:
        cube_real = np.float64
    else:
        raise ValueError(f"Invalid precision: {PRECISION}")


def set_precision(prec: Precision):
    """Switches voxel buffers created from now on to `prec` (Precision member).

    Raises:
        ValueError: If `prec` is not a Precision member.
    """
    global PRECISION
    if not isinstance(prec, Precision):
        raise ValueError(f"Invalid precision: {prec!r}")
    PRECISION = prec
    _initialize_data_types()


def get_precision() -> Precision:
    """Returns the current precision setting."""
    return PRECISION


def get_real_dtype() -> type:
    """Returns the NumPy dtype used for voxel buffers under the current precision."""
    return cube_real


def set_verbosity_level(level: VerbosityLevel):
    """Sets the global verbosity from a VerbosityLevel member (see logging_config)."""
    logging_config.set_global_verbosity_level(level.int_value)
    print_if_verbose(
        logging_config.DEBUG,
        logging_config.get_effective_verbosity(__name__),
        f"Configured global verbosity level to: {level.name} (value: {level.int_value})",
    )


# --- Print Functions ---
# Prints a message if the message_level is GREATER THAN or EQUAL TO the configured_verbosity_level.


def print_if_verbose(
    message_level: VerbosityLevelValue,
    configured_verbosity_level: VerbosityLevelValue,
    *args,
    sep=" ",
    end="\n",
    file=None,
    flush=False,
):
    """
    `print(*args, ...)` gated on verbosity.

    The message is shown when `message_level` (e.g. logging_config.WARNING) is at
    least `configured_verbosity_level`, normally the result of
    `logging_config.get_effective_verbosity` for the calling module.
    """
    if message_level >= configured_verbosity_level:
        print(*args, sep=sep, end=end, file=file, flush=flush)


vprint = print_if_verbose


def get_global_verbosity_level_value() -> VerbosityLevelValue:
    """Returns the current global verbosity level as an integer value."""
    return logging_config.get_global_verbosity_level()


# --- Initialize data types on module import ---
_initialize_data_types()
