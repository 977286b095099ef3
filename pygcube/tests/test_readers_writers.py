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
import pytest

from pygcube.constants import CUBE_FILE_EXTENSIONS, CUBE_MIME_TYPES
from pygcube.utils.io.readers import (
    file_extension,
    read_structure_file,
    supported_read_extensions,
)
from pygcube.utils.io.writers import supported_write_extensions, write_structure_file


def test_registered_extensions():
    assert CUBE_FILE_EXTENSIONS == ("cube",)
    assert CUBE_MIME_TYPES == ()
    assert supported_read_extensions() == ["cube"]
    assert supported_write_extensions() == ["cube"]
    assert file_extension("/data/run/Density.CUBE") == "cube"
    assert file_extension("noext") == ""


def test_read_then_write(simple_cube_file, tmp_path):
    structure, grids = read_structure_file(simple_cube_file)
    assert structure.atom_count() == 2
    assert len(grids) == 1

    out = tmp_path / "copy.cube"
    write_structure_file(out, structure, grids)

    reread, regrids = read_structure_file(str(out))
    np.testing.assert_allclose(reread.positions, structure.positions, atol=1e-6)
    np.testing.assert_array_equal(regrids[0].data, grids[0].data)
    np.testing.assert_array_equal(regrids[0].dimensions, grids[0].dimensions)


def test_unknown_extensions(simple_cube_file, tmp_path, capsys):
    with pytest.raises(ValueError):
        read_structure_file(tmp_path / "molecule.xyz")
    assert "Unsupported file extension 'xyz'" in capsys.readouterr().out

    structure, grids = read_structure_file(simple_cube_file)
    out = tmp_path / "molecule.pdb"
    with pytest.raises(ValueError):
        write_structure_file(out, structure, grids)
    assert not out.exists()
