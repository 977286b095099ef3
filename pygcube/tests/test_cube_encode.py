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

import io

import numpy as np
import pytest

from pygcube.foundation.data_models import Atom, Structure
from pygcube.foundation.errors import (
    InvalidAtomError,
    InvalidNameError,
    NoGridDataError,
)
from pygcube.utils.io.format.cube.cube_io import (
    bohr_to_angstrom,
    decode,
    encode,
    format_fixed_float,
    format_fixed_int,
    format_voxel,
    read_cube,
    write_cube,
)


EXPECTED_SIMPLE = (
    "Gaussian Cube file generated by pyGCube.\n"
    "CO test molecule\n"
    "    2    0.000000    0.000000    0.000000    1\n"
    "    2    0.500000    0.000000    0.000000\n"
    "    2    0.000000    0.500000    0.000000\n"
    "    2    0.000000    0.000000    0.500000\n"
    "    6    0.000000    0.000000    0.000000    0.000000\n"
    "    8    0.000000    1.000000    0.000000    0.000000\n"
    "  0.00000e+00  1.00000e+00  2.00000e+00  3.00000e+00  4.00000e+00  5.00000e+00\n"
    "  6.00000e+00  7.00000e+00"
)


def _build_structure(values, dims=(2, 2, 2), name="CO test molecule"):
    structure = Structure()
    structure.set_data("name", name)
    structure.add_atom(6)
    oxygen = structure.add_atom(8)
    oxygen.set_position3d(bohr_to_angstrom([1.0, 0.0, 0.0]))
    grid = structure.add_cube()
    grid.set_limits([0.0, 0.0, 0.0], dims, bohr_to_angstrom([0.5, 0.5, 0.5]))
    grid.set_data(values)
    return structure


def test_field_formatting():
    assert format_fixed_int(7) == "    7"
    assert format_fixed_float(-1.5) == "   -1.500000"
    assert format_voxel(1.0e-3) == "  1.00000e-03"
    assert format_voxel(-123456.0) == " -1.23456e+05"


def test_encode_layout():
    structure = _build_structure(np.arange(8))
    assert encode(structure) == EXPECTED_SIMPLE


def test_encode_decoded_file(simple_cube_text):
    structure, _ = decode(io.StringIO(simple_cube_text))
    lines = encode(structure).splitlines()
    # decoding takes line 1 as the name
    assert lines[1] == "CO test molecule"
    assert lines[2:] == EXPECTED_SIMPLE.splitlines()[2:]


def test_full_last_line_is_terminated():
    structure = _build_structure(np.arange(12), dims=(2, 2, 3))
    text = encode(structure)
    assert text.endswith("  1.10000e+01\n")
    assert text.count("e+0") == 12


def test_blank_name_line():
    structure = _build_structure(np.arange(8), name="")
    assert encode(structure).splitlines()[1] == ""


def test_encode_writes_to_stream():
    structure = _build_structure(np.arange(8))
    stream = io.StringIO()
    text = encode(structure, stream=stream)
    assert stream.getvalue() == text == EXPECTED_SIMPLE


def test_only_first_grid_written(multi_cube_text):
    structure, grids = decode(io.StringIO(multi_cube_text))
    assert len(grids) == 2
    text = encode(structure)
    assert "-1.00000e-01" not in text
    assert text.splitlines()[2].startswith("    1")


def test_explicit_grid_list():
    structure = _build_structure(np.arange(8))
    other = structure.add_cube()
    other.set_limits([0.0, 0.0, 0.0], (1, 1, 2), [1.0, 1.0, 1.0])
    other.set_data([42.0, 43.0])
    text = encode(structure, [other])
    assert text.endswith("  4.20000e+01  4.30000e+01")


def test_no_grid_data():
    structure = Structure()
    structure.add_atom(1)
    stream = io.StringIO()
    with pytest.raises(NoGridDataError):
        encode(structure, stream=stream)
    assert stream.getvalue() == ""


def test_no_grid_data_leaves_no_file(tmp_path):
    path = tmp_path / "empty.cube"
    with pytest.raises(NoGridDataError):
        write_cube(path, Structure())
    assert not path.exists()


class _BrokenStructure(Structure):
    def atom(self, index):
        if index == 1:
            return Atom(None, index)
        return super().atom(index)


def test_invalid_atom_aborts_write():
    structure = _BrokenStructure()
    structure.add_atom(6)
    structure.add_atom(8)
    grid = structure.add_cube()
    grid.set_limits([0.0, 0.0, 0.0], (1, 1, 1), [1.0, 1.0, 1.0])
    grid.set_data([1.0])

    stream = io.StringIO()
    with pytest.raises(InvalidAtomError) as excinfo:
        encode(structure, stream=stream)
    assert excinfo.value.index == 1
    partial = stream.getvalue().splitlines()
    assert partial[0] == "Gaussian Cube file generated by pyGCube."
    assert len(partial) == 7


def test_round_trip_is_stable():
    rng = np.random.default_rng(7)
    structure = _build_structure(rng.normal(size=30) * 1e-3, dims=(2, 3, 5))
    first = encode(structure)

    second = encode(decode(io.StringIO(first))[0])
    third = encode(decode(io.StringIO(second))[0])

    assert second == third
    assert first.splitlines()[2:] == second.splitlines()[2:]


def test_write_cube_file(tmp_path):
    path = tmp_path / "out.cube"
    write_cube(path, _build_structure(np.arange(8)))
    assert path.read_text() == EXPECTED_SIMPLE


@pytest.mark.parametrize("name", ["first\nsecond", "carriage\rreturn", "euro €"])
def test_unwritable_name(name):
    structure = _build_structure(np.arange(8), name=name)
    stream = io.StringIO()
    with pytest.raises(InvalidNameError) as excinfo:
        encode(structure, stream=stream)
    assert excinfo.value.name == name
    assert stream.getvalue() == ""


def test_unwritable_name_leaves_no_file(tmp_path):
    path = tmp_path / "bad_name.cube"
    with pytest.raises(InvalidNameError):
        write_cube(path, _build_structure(np.arange(8), name="two\nlines"))
    assert not path.exists()


def test_latin1_name_round_trip(tmp_path):
    source = tmp_path / "latin1.cube"
    source.write_bytes(
        b"Dichte \xc5ngstr\xf6m\n"
        + b"Elektronendichte\n"
        + EXPECTED_SIMPLE.encode("ascii").split(b"\n", 2)[2]
    )
    structure, grids = read_cube(source)
    assert structure.data("name") == "Dichte Ångström"
    assert grids[0].size == 8

    out = tmp_path / "copy.cube"
    write_cube(out, structure, grids)
    assert out.read_bytes().split(b"\n")[1] == b"Dichte \xc5ngstr\xf6m"
