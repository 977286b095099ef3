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
Reader and writer for Gaussian cube (.cube) text files.

**Data block order follows the cube convention (z fastest, y middle, x slowest).**
Grid buffers are flat, C-ordered views of shape (nx, ny, nz).

File layout::

    line 1      molecule name (free text)
    line 2      title / comment (free text, discarded on read)
    line 3      natoms  ox  oy  oz  [nval]
    lines 4-6   n_i  v_i,x  v_i,y  v_i,z        (one line per axis)
    natoms x    Z  charge  x  y  z
    [if natoms < 0]  ncubes  idx_1 ... idx_ncubes
    voxels      nx*ny*nz values per grid, whitespace separated

Lengths are stored in bohr on disk and in angstrom in memory. Only the
diagonal component of each axis vector is used (orthogonal grids). A negative
atom count announces a list of orbital indices and one grid per index.
Files are read and written as latin-1 text, so the free-text name and title
lines accept any byte.
"""

from typing import List, Optional, Tuple

import numpy as np

from pygcube.config.global_runtime import get_real_dtype, vprint
from pygcube.config.logging_config import (
    ERROR,
    WARNING,
    INFO,
    DEBUG,
    TRACE,
    get_effective_verbosity,
)
from pygcube.constants import (
    ConstPhysical,
    CUBE_BANNER,
    CUBE_TEXT_ENCODING,
    CUBE_INT_FIELD,
    CUBE_FLOAT_FIELD,
    CUBE_VOXEL_FIELD,
    CUBE_VOXELS_PER_LINE,
    CUBE_VALUES_PER_POINT,
    MAX_ATOMIC_NUMBER,
    NUM_DIMENSIONS,
)
from pygcube.foundation.data_models import Grid, Structure
from pygcube.foundation.enums import LengthUnit
from pygcube.foundation.errors import (
    CubeDecodeError,
    InvalidAtomError,
    InvalidDimensionsError,
    InvalidNameError,
    MalformedNumberError,
    NoGridDataError,
    NumericOverflowError,
    UnexpectedEofError,
)

_MODULE_NAME = __name__

BOHR_TO_ANGSTROM = ConstPhysical.BohrToAngstrom.value
ANGSTROM_TO_BOHR = ConstPhysical.AngstromToBohr.value

ORBITAL_INDICES_KEY = "orbital_indices"


# --- Unit conversion ---


def bohr_to_angstrom(values):
    """Converts lengths (scalar or array) from bohr to angstrom."""
    return np.asarray(values, dtype=np.float64) * BOHR_TO_ANGSTROM


def angstrom_to_bohr(values):
    """Converts lengths (scalar or array) from angstrom to bohr."""
    return np.asarray(values, dtype=np.float64) * ANGSTROM_TO_BOHR


def convert_length(values, from_unit: LengthUnit, to_unit: LengthUnit):
    """Converts lengths between any two `LengthUnit` members."""
    if from_unit == to_unit:
        return np.asarray(values, dtype=np.float64)
    if from_unit == LengthUnit.BOHR and to_unit == LengthUnit.ANGSTROM:
        return bohr_to_angstrom(values)
    if from_unit == LengthUnit.ANGSTROM and to_unit == LengthUnit.BOHR:
        return angstrom_to_bohr(values)
    raise ValueError(f"Unsupported length conversion: {from_unit} -> {to_unit}")


# --- Field formatting ---


def format_fixed_int(number: int) -> str:
    """Right-justified integer, width 5."""
    return CUBE_INT_FIELD.format(int(number))


def format_fixed_float(number: float) -> str:
    """Right-justified fixed-point real, width 12, 6 decimals."""
    return CUBE_FLOAT_FIELD.format(float(number))


def format_voxel(value: float) -> str:
    """Right-justified scientific real, width 13, 5 decimals in the mantissa."""
    return CUBE_VOXEL_FIELD.format(float(value))


# --- Decoding ---


class CubeTokenReader:
    """
    Line- and token-oriented reader over a text stream.

    The cube grammar mixes whole-line reads (names, axis and atom records) with
    free-form token reads (header numbers, orbital indices, voxel values) that
    may span lines. Tokens pulled from a line stay pending until consumed or
    until `skip_rest_of_line` realigns the reader on the next line boundary.
    `next_line` always starts a fresh line and drops pending tokens.
    """

    def __init__(self, stream):
        self.stream = stream

        # 1-based number of the line most recently read, 0 before any read
        self.linenum = 0

        self._tokens: List[str] = []
        self._pos = 0

    def _readline(self, what: str) -> str:
        line = self.stream.readline()
        if not line:
            raise UnexpectedEofError(
                f"End of file while reading {what}", line=self.linenum + 1
            )
        self.linenum += 1
        return line

    def next_line(self, what: str) -> str:
        """Reads the next full line without its line terminator."""
        self.skip_rest_of_line()
        return self._readline(what).rstrip("\r\n")

    def next_fields(self, what: str) -> List[str]:
        """Reads the next line and splits it on whitespace."""
        return self.next_line(what).split()

    def has_pending_tokens(self) -> bool:
        return self._pos < len(self._tokens)

    def next_token(self, what: str) -> Tuple[str, int]:
        """Returns the next token and its 0-based field index on its line."""
        while not self.has_pending_tokens():
            self._tokens = self._readline(what).split()
            self._pos = 0
        field = self._pos
        self._pos += 1
        return self._tokens[field], field

    def next_int(self, what: str) -> int:
        token, field = self.next_token(what)
        return parse_int(token, what, self.linenum, field)

    def next_float(self, what: str) -> float:
        token, field = self.next_token(what)
        return parse_float(token, what, self.linenum, field)

    def read_reals(self, count: int, dtype, what: str) -> np.ndarray:
        """
        Reads exactly `count` whitespace-separated reals into a new array of `dtype`.

        The buffer is allocated once at its final size.
        """
        values = np.empty(count, dtype=dtype)
        filled = 0
        while filled < count:
            if not self.has_pending_tokens():
                try:
                    self._tokens = self._readline(what).split()
                except UnexpectedEofError as e:
                    raise UnexpectedEofError(
                        f"End of file while reading {what}: got {filled} of {count} values",
                        line=e.line,
                    ) from None
                self._pos = 0
                continue
            take = min(count - filled, len(self._tokens) - self._pos)
            first_field = self._pos
            chunk = self._tokens[first_field : first_field + take]
            try:
                parsed = np.asarray(chunk, dtype=np.float64)
            except ValueError:
                # locate the offending token, or accept what float() accepts
                parsed = np.array(
                    [
                        parse_float(token, what, self.linenum, first_field + offset)
                        for offset, token in enumerate(chunk)
                    ],
                    dtype=np.float64,
                )
            with np.errstate(over="ignore"):
                converted = parsed.astype(dtype)
            if np.isinf(converted).any():
                self._check_overflow(chunk, converted, dtype, what, first_field)
            values[filled : filled + take] = converted
            self._pos += take
            filled += take
        return values

    def _check_overflow(self, chunk, converted, dtype, what, first_field):
        """Raises on the first finite token that became infinite in `dtype`."""
        for offset, (token, value) in enumerate(zip(chunk, converted.tolist())):
            if np.isinf(value) and not _is_infinity_literal(token):
                raise NumericOverflowError(
                    f"Value {token!r} for {what} does not fit {np.dtype(dtype).name}",
                    self.linenum,
                    first_field + offset,
                )

    def skip_rest_of_line(self):
        """Discards whatever remains of the current line."""
        self._tokens = []
        self._pos = 0


def _is_infinity_literal(token: str) -> bool:
    return token.lstrip("+-").lower().startswith("inf")


def parse_int(token: Optional[str], what: str, line: int, field: int) -> int:
    if token is None:
        raise MalformedNumberError(f"Missing integer for {what}", line, field)
    try:
        return int(token)
    except ValueError:
        raise MalformedNumberError(
            f"Invalid integer {token!r} for {what}", line, field
        ) from None


def parse_float(token: Optional[str], what: str, line: int, field: int) -> float:
    if token is None:
        raise MalformedNumberError(f"Missing real number for {what}", line, field)
    try:
        return float(token)
    except ValueError:
        raise MalformedNumberError(
            f"Invalid real number {token!r} for {what}", line, field
        ) from None


def _field(fields: List[str], index: int) -> Optional[str]:
    return fields[index] if index < len(fields) else None


def _read_axes(reader: CubeTokenReader, verbosity) -> Tuple[np.ndarray, np.ndarray]:
    """Reads the three axis lines; returns dimensions and diagonal spacings in bohr."""
    dims = np.zeros(NUM_DIMENSIONS, dtype=np.int64)
    spacing = np.zeros(NUM_DIMENSIONS, dtype=np.float64)
    for axis in range(NUM_DIMENSIONS):
        what = f"axis {axis} record"
        fields = reader.next_fields(what)
        line = reader.linenum
        n_points = parse_int(_field(fields, 0), what, line, 0)
        if n_points <= 0:
            vprint(ERROR, verbosity, f"Axis {axis} has {n_points} points")
            raise InvalidDimensionsError(
                f"Axis {axis} must have a positive number of points, got {n_points}",
                line,
                0,
            )
        vector = [
            parse_float(_field(fields, 1 + c), what, line, 1 + c)
            for c in range(NUM_DIMENSIONS)
        ]
        off_diagonal = [v for c, v in enumerate(vector) if c != axis and v != 0.0]
        if off_diagonal:
            vprint(
                WARNING,
                verbosity,
                f"Axis {axis} vector {vector} is not axis-aligned; off-diagonal components are ignored",
            )
        dims[axis] = n_points
        spacing[axis] = vector[axis]
    return dims, spacing


def _read_atoms(reader: CubeTokenReader, structure: Structure, n_atoms: int, verbosity):
    for i in range(n_atoms):
        what = f"atom record {i}"
        fields = reader.next_fields(what)
        line = reader.linenum
        atomic_number = parse_int(_field(fields, 0), what, line, 0)
        if not 0 <= atomic_number <= MAX_ATOMIC_NUMBER:
            vprint(ERROR, verbosity, f"Atomic number {atomic_number} out of range")
            raise NumericOverflowError(
                f"Atomic number {atomic_number} does not fit 0..{MAX_ATOMIC_NUMBER}",
                line,
                0,
            )
        # nuclear charge, validated but unused
        parse_float(_field(fields, 1), what, line, 1)
        position = np.array(
            [parse_float(_field(fields, j), what, line, j) for j in range(2, 5)]
        )
        atom = structure.add_atom(atomic_number)
        atom.set_position3d(bohr_to_angstrom(position))
        vprint(
            TRACE,
            verbosity,
            f"Atom {i}: Z = {atomic_number}, position (bohr) = {position.tolist()}",
        )


def _read_orbital_indices(reader: CubeTokenReader, verbosity) -> List[int]:
    n_cubes = reader.next_int("number of grids")
    if n_cubes < 0:
        raise MalformedNumberError(
            f"Number of grids must not be negative, got {n_cubes}", reader.linenum
        )
    orbitals = [reader.next_int("orbital index") for _ in range(n_cubes)]
    reader.skip_rest_of_line()
    vprint(DEBUG, verbosity, f"Multi-grid file, orbital indices: {orbitals}")
    return orbitals


def decode(stream, structure: Optional[Structure] = None) -> Tuple[Structure, List[Grid]]:
    """
    Reads one cube document from a text stream.

    Args:
        stream: Text stream supporting `readline()`.
        structure: Structure to populate; a new one is created when omitted.

    Returns:
        tuple: (structure, grids) where `grids` are the grids added by this call.

    Raises:
        MalformedNumberError: A numeric field is missing or unparseable.
        NumericOverflowError: An atomic number does not fit the atomic-number type,
            or a finite voxel value does not fit the voxel dtype.
        UnexpectedEofError: The stream ended early.
        InvalidDimensionsError: An axis has a non-positive number of points.

    On error, atoms already added to `structure` are left in place; no grid is
    attached unless its voxel block was read completely.
    """
    verbosity = get_effective_verbosity(_MODULE_NAME)
    if structure is None:
        structure = Structure()
    reader = CubeTokenReader(stream)

    try:
        structure.set_data("name", reader.next_line("molecule name"))
        reader.next_line("title line")

        n_atoms = reader.next_int("atom count")
        origin = np.array([reader.next_float("grid origin") for _ in range(3)])
        reader.skip_rest_of_line()

        dims, spacing = _read_axes(reader, verbosity)
        _read_atoms(reader, structure, abs(n_atoms), verbosity)

        n_cubes = 1
        if n_atoms < 0:
            orbitals = _read_orbital_indices(reader, verbosity)
            structure.set_data(ORBITAL_INDICES_KEY, orbitals)
            n_cubes = len(orbitals)

        structure.perceive_bonds_simple()

        origin = bohr_to_angstrom(origin)
        spacing = bohr_to_angstrom(spacing)
        vprint(
            DEBUG,
            verbosity,
            f"Cube header: {abs(n_atoms)} atoms, {n_cubes} grid(s) of dimensions {dims.tolist()}, "
            f"origin {origin.tolist()} A, spacing {spacing.tolist()} A",
        )

        n_values = int(np.prod(dims))
        grids = []
        for i in range(n_cubes):
            values = reader.read_reals(n_values, get_real_dtype(), f"voxel data of grid {i}")
            reader.skip_rest_of_line()
            cube = structure.add_cube()
            cube.set_limits(origin, dims, spacing)
            cube.set_data(values)
            grids.append(cube)
    except CubeDecodeError as e:
        vprint(ERROR, verbosity, f"Error reading cube data: {e}")
        raise

    return structure, grids


def read_cube(filepath, structure: Optional[Structure] = None) -> Tuple[Structure, List[Grid]]:
    """
    Reads a Gaussian cube file from disk. See `decode`.

    Raises:
        FileNotFoundError: If `filepath` does not exist.
        CubeDecodeError: If the file content is invalid.
    """
    with open(filepath, "r", encoding=CUBE_TEXT_ENCODING) as f_text:
        structure, grids = decode(f_text, structure)
    vprint(
        INFO,
        get_effective_verbosity(_MODULE_NAME),
        f"Read {structure.atom_count()} atoms and {len(grids)} grid(s) from {filepath}",
    )
    return structure, grids


# --- Encoding ---


def _format_voxels(values: np.ndarray) -> str:
    """Six values per line; a trailing partial line is left unterminated."""
    values = np.asarray(values, dtype=np.float64).reshape(-1)
    n_full = values.size // CUBE_VOXELS_PER_LINE
    row_format = CUBE_VOXEL_FIELD * CUBE_VOXELS_PER_LINE + "\n"
    full_rows = values[: n_full * CUBE_VOXELS_PER_LINE].reshape(-1, CUBE_VOXELS_PER_LINE)
    text = "".join(row_format.format(*row) for row in full_rows.tolist())
    tail = values[n_full * CUBE_VOXELS_PER_LINE :]
    return text + "".join(format_voxel(v) for v in tail.tolist())


def _check_name(name: str, verbosity):
    """The name must fit on one line of a latin-1 file."""
    reason = None
    if "\n" in name or "\r" in name:
        reason = "contains a line break"
    else:
        try:
            name.encode(CUBE_TEXT_ENCODING)
        except UnicodeEncodeError:
            reason = f"is not representable in {CUBE_TEXT_ENCODING}"
    if reason is not None:
        vprint(ERROR, verbosity, f"Cannot write molecule name {name!r}: {reason}")
        raise InvalidNameError(name, reason)


def encode(structure: Structure, grids: Optional[List[Grid]] = None, stream=None) -> str:
    """
    Writes `structure` and the first of `grids` as a cube document.

    Args:
        structure: Source of the atoms and the "name" metadata.
        grids: Grids to write; defaults to the grids attached to `structure`.
            Only the first grid is written.
        stream: Optional text stream; the document is written to it as it is built.

    Returns:
        str: The text emitted.

    Raises:
        NoGridDataError: No grid is available; nothing is emitted.
        InvalidNameError: The name holds a line break or a character outside
            latin-1; nothing is emitted.
        InvalidAtomError: An atom handle is invalid; the text emitted so far is
            left in `stream`.
    """
    verbosity = get_effective_verbosity(_MODULE_NAME)
    if grids is None:
        grids = structure.cubes
    if not grids:
        vprint(ERROR, verbosity, "No grid data to write")
        raise NoGridDataError()
    name = structure.data("name")
    _check_name(name, verbosity)
    if len(grids) > 1:
        vprint(
            WARNING,
            verbosity,
            f"Only the first of {len(grids)} grids is written to cube format",
        )

    parts = []

    def emit(text: str):
        parts.append(text)
        if stream is not None:
            stream.write(text)

    cube = grids[0]
    origin = angstrom_to_bohr(cube.min)
    spacing = angstrom_to_bohr(cube.spacing)
    dims = cube.dimensions

    emit(CUBE_BANNER + "\n")
    emit(f"{name}\n" if name else "\n")

    n_atoms = structure.atom_count()
    emit(
        format_fixed_int(n_atoms)
        + "".join(format_fixed_float(c) for c in origin)
        + format_fixed_int(CUBE_VALUES_PER_POINT)
        + "\n"
    )

    for axis in range(NUM_DIMENSIONS):
        vector = np.zeros(NUM_DIMENSIONS)
        vector[axis] = spacing[axis]
        emit(
            format_fixed_int(dims[axis])
            + "".join(format_fixed_float(c) for c in vector)
            + "\n"
        )

    for i in range(n_atoms):
        atom = structure.atom(i)
        if not atom.is_valid():
            vprint(ERROR, verbosity, f"Internal error: atom {i} is invalid")
            raise InvalidAtomError(i)
        position = angstrom_to_bohr(atom.position3d)
        emit(
            format_fixed_int(atom.atomic_number)
            + format_fixed_float(0.0)
            + "".join(format_fixed_float(c) for c in position)
            + "\n"
        )

    emit(_format_voxels(cube.data))

    vprint(
        DEBUG,
        verbosity,
        f"Encoded {n_atoms} atoms and a grid of dimensions {dims.tolist()}",
    )
    return "".join(parts)


def write_cube(filepath, structure: Structure, grids: Optional[List[Grid]] = None):
    """
    Writes a Gaussian cube file to disk. See `encode`.

    The document is fully encoded before the file is opened, so a failed encode
    leaves no file behind.
    """
    text = encode(structure, grids)
    with open(filepath, "w", encoding=CUBE_TEXT_ENCODING) as cube_file:
        cube_file.write(text)
    vprint(
        INFO,
        get_effective_verbosity(_MODULE_NAME),
        f"Wrote {structure.atom_count()} atoms and one grid to {filepath}",
    )
