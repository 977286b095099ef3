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
This module defines an enumeration `ConstPhysical` containing the physical
constants used by pyGCube. All constants are represented with double-precision
(float64) for accuracy in unit conversions.
"""

from enum import Enum


class ConstPhysical(Enum):
    """
    Physical constants used in pyGCube (double precision).

    Constants:
        BohrToAngstrom (float): Bohr radius in angstrom (CODATA 2018).
        AngstromToBohr (float): Reciprocal of BohrToAngstrom.
    """

    BohrToAngstrom = 0.529177210903
    AngstromToBohr = 1.0 / 0.529177210903
