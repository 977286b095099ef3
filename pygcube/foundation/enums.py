#!/usr/bin/env python
# coding: utf-8

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
Module defining enumeration classes for pyGCube configuration.

    - Numerical precision of voxel buffers (Precision)
    - Verbosity levels (VerbosityLevel)
    - Length units used by cube files and the in-memory model (LengthUnit)

This module is intentionally kept lightweight and avoids dependencies
on libraries that are not essential for defining configuration enums.
"""

from pygcube.foundation.enumbase import BaseInfoEnum


class Precision(BaseInfoEnum):
    """Enumerates supported precisions for voxel values held in memory."""

    SINGLE = 1, "Use single precision (4-byte) floats for voxel values."
    DOUBLE = 2, "Use double precision (8-byte) floats for voxel values."


class VerbosityLevel(BaseInfoEnum):
    """Enumerates all supported verbosity levels for messages in pyGCube."""

    CRITICAL = (
        50,
        "Log only critical failures.",
    )
    ERROR = (
        40,
        "Log errors preventing a read or write from completing (e.g., malformed numbers, truncated files).",
    )
    NOTICE = (
        35,
        "Log final results, excluding warnings and progress details.",
    )
    WARNING = (
        30,
        "Log tolerated irregularities (e.g., sheared axis vectors, extra grids not written).",
    )
    INFO = (
        20,
        "Log general progress such as files read and written.",
    )
    DEBUG = (
        10,
        "Log header contents: atom counts, grid dimensions, origin and spacing.",
    )
    TRACE = (
        5,
        "Log every atom record and token-level reader state.",
    )


class LengthUnit(BaseInfoEnum):
    """Enumerates length units handled by the cube codec."""

    BOHR = 1, "Atomic unit of length; native unit of Gaussian cube files."
    ANGSTROM = 2, "Canonical unit of positions and spacings held in memory."
