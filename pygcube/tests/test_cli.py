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

import pytest

from pygcube.scripts.pygcube_info import main, parse_arguments


def test_summary(simple_cube_file, capsys):
    assert main([str(simple_cube_file)]) == 0
    out = capsys.readouterr().out
    assert "Name:   CO test molecule" in out
    assert "Atoms:  2 (C O)" in out
    assert "Bonds:  1" in out
    assert "Grids:  1" in out
    assert "dimensions:   (2, 2, 2)" in out


def test_rewrite(simple_cube_file, tmp_path):
    out = tmp_path / "out.cube"
    assert main([str(simple_cube_file), "-o", str(out)]) == 0
    assert out.read_text().startswith("Gaussian Cube file generated by pyGCube.\n")


def test_existing_output_needs_overwrite(simple_cube_file, tmp_path, capsys):
    out = tmp_path / "out.cube"
    out.write_text("keep")
    assert main([str(simple_cube_file), "-o", str(out)]) == 1
    assert out.read_text() == "keep"
    assert "already exists" in capsys.readouterr().out

    assert main([str(simple_cube_file), "-o", str(out), "-O", "-p", "double"]) == 0
    assert out.read_text() != "keep"


def test_malformed_file(tmp_path, capsys):
    path = tmp_path / "bad.cube"
    path.write_text("name\ntitle\n    x    0.0    0.0    0.0\n")
    assert main([str(path)]) == 1
    assert "Error: " in capsys.readouterr().out


def test_version(capsys):
    assert main(["-V"]) == 0
    assert "pyGCube:  v" in capsys.readouterr().out


def test_missing_input(capsys):
    assert main([]) == 1
    with pytest.raises(SystemExit):
        parse_arguments(["does-not-exist.cube"])
