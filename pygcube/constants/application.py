#!/usr/bin/env python
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
This module defines the constants describing the Gaussian cube text layout.

It includes:
- `ConstCubeFormat`: Fixed strings of the cube format.
- `ConstCubeFieldWidth`: Column widths of integer, real and voxel fields.
- `ConstCubeDecimals`: Decimal places of real and voxel fields.
- `ConstCubeInts`: Integer limits of the format and the in-memory model.
- Derived module-level constants for convenient access in the codec.

Every enum is `@unique`: members sharing a value would otherwise become
aliases and drop out of iteration.
"""

from enum import Enum, unique

from numpy import uint8, iinfo


@unique
class ConstCubeFormat(Enum):
    """
    Fixed strings of a Gaussian cube file as written by pyGCube.

    Constants:
        GeneratorBanner (str): First line of every written file.
        FileExtension (str): Conventional file extension.
        TextEncoding (str): Byte encoding of cube files. Latin-1 maps every byte,
            so free-text name and title lines always decode.
    """

    GeneratorBanner = "Gaussian Cube file generated by pyGCube."
    FileExtension = "cube"
    TextEncoding = "latin-1"


@unique
class ConstCubeFieldWidth(Enum):
    """Widths of the right-justified fields."""

    Int = 5
    Float = 12
    Voxel = 13


@unique
class ConstCubeDecimals(Enum):
    """Decimal places of fixed-point reals and of the voxel mantissa."""

    Float = 6
    Voxel = 5


@unique
class ConstCubeInts(Enum):
    """
    Integer limits of the format and of the in-memory model.

    Constants:
        MaxAtomicNumber (int): Largest value storable as an atomic number (uint8).
        NumDimensions (int): Number of grid axes.
        VoxelsPerLine (int): Voxel values written per line.
        ValuesPerPoint (int): Trailing header field, one scalar per voxel.
    """

    MaxAtomicNumber = int(iinfo(uint8).max)
    NumDimensions = 3
    VoxelsPerLine = 6
    ValuesPerPoint = 1


ATOMIC_NUMBER_DTYPE = uint8

CUBE_BANNER = ConstCubeFormat.GeneratorBanner.value
CUBE_TEXT_ENCODING = ConstCubeFormat.TextEncoding.value
CUBE_INT_FIELD = f"{{:>{ConstCubeFieldWidth.Int.value}d}}"
CUBE_FLOAT_FIELD = (
    f"{{:>{ConstCubeFieldWidth.Float.value}.{ConstCubeDecimals.Float.value}f}}"
)
CUBE_VOXEL_FIELD = (
    f"{{:>{ConstCubeFieldWidth.Voxel.value}.{ConstCubeDecimals.Voxel.value}e}}"
)
CUBE_VOXELS_PER_LINE = ConstCubeInts.VoxelsPerLine.value
CUBE_VALUES_PER_POINT = ConstCubeInts.ValuesPerPoint.value
CUBE_FILE_EXTENSIONS = (ConstCubeFormat.FileExtension.value,)
# No MIME type is registered for cube files
CUBE_MIME_TYPES = ()

MAX_ATOMIC_NUMBER = ConstCubeInts.MaxAtomicNumber.value
NUM_DIMENSIONS = ConstCubeInts.NumDimensions.value
