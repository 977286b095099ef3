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

import numpy as np

from pygcube.constants import DEFAULT_COVALENT_RADIUS, get_covalent_radius
from pygcube.utils.bonds import covalent_radii_of, perceive_bonds_simple


def test_hydrogen_molecule_is_bonded():
    bonds = perceive_bonds_simple([1, 1], [[0.0, 0.0, 0.0], [0.74, 0.0, 0.0]])
    assert bonds.tolist() == [[0, 1]]


def test_distant_atoms_are_not_bonded():
    bonds = perceive_bonds_simple([6, 6], [[0.0, 0.0, 0.0], [3.0, 0.0, 0.0]])
    assert bonds.shape == (0, 2)


def test_overlapping_atoms_are_not_bonded():
    bonds = perceive_bonds_simple([6, 8], [[0.0, 0.0, 0.0], [0.1, 0.0, 0.0]])
    assert len(bonds) == 0


def test_methane():
    d = 1.09 / np.sqrt(3.0)
    positions = [
        [0.0, 0.0, 0.0],
        [d, d, d],
        [-d, -d, d],
        [-d, d, -d],
        [d, -d, -d],
    ]
    bonds = perceive_bonds_simple([6, 1, 1, 1, 1], positions)
    assert bonds.tolist() == [[0, 1], [0, 2], [0, 3], [0, 4]]


def test_radius_fallback():
    assert get_covalent_radius(6) == 0.76
    assert get_covalent_radius(0) == DEFAULT_COVALENT_RADIUS
    assert get_covalent_radius(118) == DEFAULT_COVALENT_RADIUS
    np.testing.assert_allclose(
        covalent_radii_of([1, 200]), [0.31, DEFAULT_COVALENT_RADIUS]
    )


def test_empty_structure():
    assert perceive_bonds_simple([], np.empty((0, 3))).shape == (0, 2)
