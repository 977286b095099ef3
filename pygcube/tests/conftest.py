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

import pygcube.config.logging_config as logging_config
from pygcube.config.global_runtime import set_precision
from pygcube.foundation.enums import Precision


SIMPLE_CUBE = """\
CO test molecule
density
    2    0.000000    0.000000    0.000000
    2    0.500000    0.000000    0.000000
    2    0.000000    0.500000    0.000000
    2    0.000000    0.000000    0.500000
    6    0.000000    0.000000    0.000000    0.000000
    8    0.000000    1.000000    0.000000    0.000000
  0.00000e+00  1.00000e+00  2.00000e+00  3.00000e+00  4.00000e+00  5.00000e+00
  6.00000e+00  7.00000e+00
"""

MULTI_CUBE = """\
orbitals
MO coefficients
   -1   -1.000000   -1.000000   -1.000000
    2    0.400000    0.000000    0.000000
    2    0.000000    0.400000    0.000000
    2    0.000000    0.000000    0.400000
    1    1.000000    0.000000    0.000000    0.000000
    2    5    6
  1.00000e-01  2.00000e-01  3.00000e-01  4.00000e-01  5.00000e-01  6.00000e-01
  7.00000e-01  8.00000e-01
 -1.00000e-01 -2.00000e-01 -3.00000e-01 -4.00000e-01 -5.00000e-01 -6.00000e-01
 -7.00000e-01 -8.00000e-01
"""


@pytest.fixture(autouse=True)
def reset_runtime():
    yield
    set_precision(Precision.SINGLE)
    logging_config.set_global_verbosity_level(logging_config.INFO)


@pytest.fixture
def simple_cube_text():
    return SIMPLE_CUBE


@pytest.fixture
def multi_cube_text():
    return MULTI_CUBE


@pytest.fixture
def simple_cube_file(tmp_path):
    path = tmp_path / "simple.cube"
    path.write_text(SIMPLE_CUBE)
    return path
