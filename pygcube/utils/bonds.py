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
Distance-based bond perception.

Two atoms are bonded when their separation lies between `min_distance` and the
sum of their covalent radii plus `tolerance` (all in angstrom). No bond orders,
valence checks or periodic images are considered.
"""

import numpy as np

from pygcube.config.global_runtime import vprint
from pygcube.config.logging_config import (
    DEBUG,
    get_effective_verbosity,
)
from pygcube.constants import COVALENT_RADII, DEFAULT_COVALENT_RADIUS

_MODULE_NAME = __name__

BOND_TOLERANCE = 0.45
BOND_MIN_DISTANCE = 0.32

_RADII_TABLE = np.asarray(COVALENT_RADII, dtype=np.float64)


def covalent_radii_of(atomic_numbers: np.ndarray) -> np.ndarray:
    """Covalent radii (angstrom) for an array of atomic numbers, with fallback for unknowns."""
    numbers = np.asarray(atomic_numbers, dtype=np.int64)
    radii = np.full(numbers.shape, DEFAULT_COVALENT_RADIUS, dtype=np.float64)
    known = (numbers > 0) & (numbers < _RADII_TABLE.size)
    radii[known] = _RADII_TABLE[numbers[known]]
    return radii


def perceive_bonds_simple(
    atomic_numbers,
    positions,
    tolerance: float = BOND_TOLERANCE,
    min_distance: float = BOND_MIN_DISTANCE,
) -> np.ndarray:
    """
    Infers bonds from interatomic distances.

    Args:
        atomic_numbers: Atomic numbers, shape (N,).
        positions: Cartesian coordinates in angstrom, shape (N, 3).
        tolerance: Added to the sum of covalent radii to form the bonding cutoff.
        min_distance: Pairs closer than this are treated as overlapping, not bonded.

    Returns:
        np.ndarray: Bonded index pairs (i, j) with i < j, shape (M, 2), dtype int64,
        ordered by i then j.
    """
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
    radii = covalent_radii_of(atomic_numbers)
    n_atoms = positions.shape[0]
    if radii.shape[0] != n_atoms:
        raise ValueError(
            f"Got {radii.shape[0]} atomic numbers for {n_atoms} positions."
        )

    min_sq = min_distance * min_distance
    pairs = []
    for i in range(n_atoms - 1):
        deltas = positions[i + 1 :] - positions[i]
        dist_sq = np.einsum("ij,ij->i", deltas, deltas)
        cutoff_sq = (radii[i + 1 :] + radii[i] + tolerance) ** 2
        partners = np.nonzero((dist_sq >= min_sq) & (dist_sq <= cutoff_sq))[0]
        for j in partners:
            pairs.append((i, i + 1 + int(j)))

    bonds = np.array(pairs, dtype=np.int64).reshape(-1, 2)
    vprint(
        DEBUG,
        get_effective_verbosity(_MODULE_NAME),
        f"Perceived {bonds.shape[0]} bonds among {n_atoms} atoms",
    )
    return bonds
