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
In-memory model populated by the readers and consumed by the writers.

- `Structure`: atoms (atomic numbers and angstrom positions), string-keyed
  metadata, perceived bonds and the volumetric grids attached to the molecule.
- `Atom`: a lightweight handle (structure, index) into a Structure.
- `Grid`: a regular 3D scalar field with origin, per-axis spacing and integer
  dimensions. Samples are held in a flat buffer in C order of shape
  (nx, ny, nz), i.e. z varies fastest.
"""

from typing import Any, List, Optional

import numpy as np

from pygcube.config.global_runtime import get_real_dtype, vprint
from pygcube.config.logging_config import (
    TRACE,
    get_effective_verbosity,
)
from pygcube.constants import (
    ATOMIC_NUMBER_DTYPE,
    MAX_ATOMIC_NUMBER,
    NUM_DIMENSIONS,
    get_element_symbol_by_atomic_number,
)
from pygcube.utils.bonds import (
    BOND_MIN_DISTANCE,
    BOND_TOLERANCE,
    perceive_bonds_simple,
)

_MODULE_NAME = __name__


def _as_vec3(values, dtype=np.float64) -> np.ndarray:
    vec = np.array(values, dtype=dtype).reshape(-1)
    if vec.size != NUM_DIMENSIONS:
        raise ValueError(f"Expected {NUM_DIMENSIONS} components, got {vec.size}.")
    return vec


class Grid:
    """A regular 3D scalar field (a "cube")."""

    def __init__(self):
        self._min = np.zeros(NUM_DIMENSIONS, dtype=np.float64)
        self._spacing = np.zeros(NUM_DIMENSIONS, dtype=np.float64)
        self._dimensions = np.zeros(NUM_DIMENSIONS, dtype=np.int64)
        self._data = np.empty(0, dtype=get_real_dtype())

    def __repr__(self):
        return "<Grid at {:#x}, dimensions={}, origin={}, spacing={}>".format(
            id(self),
            tuple(int(d) for d in self._dimensions),
            self._min.tolist(),
            self._spacing.tolist(),
        )

    def set_limits(self, origin, dims, spacing):
        """
        Sets origin (angstrom), number of points per axis, and per-axis spacing (angstrom).

        Raises:
            ValueError: If any dimension is not positive.
        """
        dims = _as_vec3(dims, dtype=np.int64)
        if (dims <= 0).any():
            raise ValueError(f"Grid dimensions must be positive, got {dims.tolist()}.")
        self._min = _as_vec3(origin)
        self._dimensions = dims
        self._spacing = _as_vec3(spacing)

    @property
    def min(self) -> np.ndarray:
        """Position of voxel (0, 0, 0)."""
        return self._min.copy()

    @property
    def max(self) -> np.ndarray:
        """Position of the last voxel along every axis."""
        return self._min + (self._dimensions - 1) * self._spacing

    @property
    def spacing(self) -> np.ndarray:
        return self._spacing.copy()

    @property
    def dimensions(self) -> np.ndarray:
        return self._dimensions.copy()

    @property
    def size(self) -> int:
        return int(np.prod(self._dimensions))

    @property
    def data(self) -> np.ndarray:
        """The flat sample buffer (not a copy)."""
        return self._data

    def set_data(self, values):
        """
        Replaces the sample buffer.

        `values` may be flat (C-order ravelled) or shaped (nx, ny, nz).

        Raises:
            ValueError: If the number of values does not match the grid dimensions.
        """
        buffer = np.asarray(values, dtype=get_real_dtype())
        if buffer.size != self.size:
            raise ValueError(
                f"Grid of dimensions {self._dimensions.tolist()} holds {self.size} values, got {buffer.size}."
            )
        self._data = buffer.reshape(-1)

    def values_3d(self) -> np.ndarray:
        """The sample buffer viewed with shape (nx, ny, nz)."""
        return self._data.reshape(tuple(int(d) for d in self._dimensions))

    def value(self, i: int, j: int, k: int) -> float:
        return float(self.values_3d()[i, j, k])

    def position(self, i: int, j: int, k: int) -> np.ndarray:
        return self._min + np.array([i, j, k], dtype=np.float64) * self._spacing


class Atom:
    """Handle to one atom of a Structure."""

    def __init__(self, structure: Optional["Structure"], index: int):
        self._structure = structure
        self._index = index

    def __repr__(self):
        if not self.is_valid():
            return f"<Atom (invalid) index={self._index}>"
        return "<Atom {} {} at {}>".format(
            self._index, self.symbol, self.position3d.tolist()
        )

    def __eq__(self, other):
        if not isinstance(other, Atom):
            return NotImplemented
        return self._structure is other._structure and self._index == other._index

    def __hash__(self):
        return hash((id(self._structure), self._index))

    @property
    def index(self) -> int:
        return self._index

    def is_valid(self) -> bool:
        return (
            self._structure is not None
            and 0 <= self._index < self._structure.atom_count()
        )

    @property
    def atomic_number(self) -> int:
        return self._structure._atomic_numbers[self._index]

    @property
    def symbol(self) -> str:
        return get_element_symbol_by_atomic_number(self.atomic_number)

    @property
    def position3d(self) -> np.ndarray:
        return self._structure._positions[self._index].copy()

    def set_position3d(self, position):
        self._structure._positions[self._index] = _as_vec3(position)


class Structure:
    """
    A molecule: atoms, free-form metadata, bonds and attached grids.

    Positions are stored in angstrom.
    """

    def __init__(self):
        self._atomic_numbers: List[int] = []
        self._positions: List[np.ndarray] = []
        self._data = {}
        self._bonds = np.empty((0, 2), dtype=np.int64)
        self._cubes: List[Grid] = []

    def __repr__(self):
        return "<Structure at {:#x}, name={!r}, {:d} atoms, {:d} bonds, {:d} cubes>".format(
            id(self),
            self.data("name"),
            self.atom_count(),
            len(self._bonds),
            self.cube_count(),
        )

    # --- atoms ---
    def add_atom(self, atomic_number: int) -> Atom:
        """
        Appends an atom at the origin and returns its handle.

        Raises:
            ValueError: If `atomic_number` is outside the storable range.
        """
        atomic_number = int(atomic_number)
        if not 0 <= atomic_number <= MAX_ATOMIC_NUMBER:
            raise ValueError(
                f"Atomic number {atomic_number} outside 0..{MAX_ATOMIC_NUMBER}."
            )
        self._atomic_numbers.append(atomic_number)
        self._positions.append(np.zeros(NUM_DIMENSIONS, dtype=np.float64))
        index = len(self._atomic_numbers) - 1
        vprint(
            TRACE,
            get_effective_verbosity(_MODULE_NAME),
            f"Added atom {index} with atomic number {atomic_number}",
        )
        return Atom(self, index)

    def atom(self, index: int) -> Atom:
        """Handle for atom `index`; the handle is invalid when the index is out of range."""
        return Atom(self, index)

    def atoms(self) -> List[Atom]:
        return [Atom(self, i) for i in range(self.atom_count())]

    def atom_count(self) -> int:
        return len(self._atomic_numbers)

    def remove_atom(self, index: int):
        """Removes atom `index` and every bond that references it."""
        if not 0 <= index < self.atom_count():
            raise IndexError(f"Atom index {index} out of range.")
        del self._atomic_numbers[index]
        del self._positions[index]
        if len(self._bonds):
            keep = (self._bonds != index).all(axis=1)
            bonds = self._bonds[keep]
            bonds[bonds > index] -= 1
            self._bonds = bonds

    @property
    def atomic_numbers(self) -> np.ndarray:
        return np.array(self._atomic_numbers, dtype=ATOMIC_NUMBER_DTYPE)

    @property
    def positions(self) -> np.ndarray:
        if not self._positions:
            return np.empty((0, NUM_DIMENSIONS), dtype=np.float64)
        return np.vstack(self._positions)

    # --- metadata ---
    def set_data(self, key: str, value: Any):
        self._data[key] = value

    def data(self, key: str, default: Any = "") -> Any:
        return self._data.get(key, default)

    # --- bonds ---
    @property
    def bonds(self) -> np.ndarray:
        return self._bonds.copy()

    def perceive_bonds_simple(
        self, tolerance: float = BOND_TOLERANCE, min_distance: float = BOND_MIN_DISTANCE
    ):
        """Replaces the bond list with bonds inferred from covalent radii."""
        self._bonds = perceive_bonds_simple(
            self.atomic_numbers, self.positions, tolerance, min_distance
        )

    # --- grids ---
    def add_cube(self) -> Grid:
        cube = Grid()
        self._cubes.append(cube)
        return cube

    def cube(self, index: int) -> Optional[Grid]:
        if 0 <= index < len(self._cubes):
            return self._cubes[index]
        return None

    def cube_count(self) -> int:
        return len(self._cubes)

    @property
    def cubes(self) -> List[Grid]:
        return list(self._cubes)

    def clear(self):
        """Removes all atoms, bonds, metadata and grids."""
        self._atomic_numbers = []
        self._positions = []
        self._data = {}
        self._bonds = np.empty((0, 2), dtype=np.int64)
        self._cubes = []
