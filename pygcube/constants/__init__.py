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
This module defines various constants used in the pyGCube program.

It re-exports enumerations for:
    - ConstPhysical:      Physical constants (double precision).
    - ConstCubeFormat:    Fixed strings of the Gaussian cube text format.
    - ConstCubeFieldWidth, ConstCubeDecimals: Column layout of the cube format.
    - ConstCubeInts:      Integer limits of the format and the in-memory model.
    - ConstChemElement:   Known chemical elements.

It also re-exports:
    - CUBE_*: Format strings and fixed values used by the cube codec.
    - ATOMIC_NUMBER_DTYPE, MAX_ATOMIC_NUMBER, NUM_DIMENSIONS: Model limits.
    - COVALENT_RADII, DEFAULT_COVALENT_RADIUS: Radii used by bond perception.
    - AtomicNumToElement and element lookup functions.
"""

# Re-export constants from physical.py
from .physical import ConstPhysical

# Re-export constants from application.py
from .application import (
    ConstCubeFormat,
    ConstCubeFieldWidth,
    ConstCubeDecimals,
    ConstCubeInts,
    ATOMIC_NUMBER_DTYPE,
    CUBE_BANNER,
    CUBE_TEXT_ENCODING,
    CUBE_INT_FIELD,
    CUBE_FLOAT_FIELD,
    CUBE_VOXEL_FIELD,
    CUBE_VOXELS_PER_LINE,
    CUBE_VALUES_PER_POINT,
    CUBE_FILE_EXTENSIONS,
    CUBE_MIME_TYPES,
    MAX_ATOMIC_NUMBER,
    NUM_DIMENSIONS,
)

# Re-export constants from elements.py
from .elements import (
    ConstChemElement,
    AtomicNumToElement,
    COVALENT_RADII,
    DEFAULT_COVALENT_RADIUS,
    get_element_by_symbol,
    get_element_by_atomic_number,
    get_element_symbol_by_atomic_number,
    get_covalent_radius,
)
