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
This module dispatches structure files to the matching format reader based on
the file extension. Currently supported:

- Gaussian cube files (.cube): molecular structure plus one or more volumetric
  grids (electron density, molecular orbitals, potentials).
"""

import os

from pygcube.config.global_runtime import vprint
from pygcube.config.logging_config import (
    ERROR,
    get_effective_verbosity,
)
from pygcube.constants import CUBE_FILE_EXTENSIONS
from pygcube.utils.io.format.cube.cube_io import read_cube

_MODULE_NAME = __name__

_READERS = {ext: read_cube for ext in CUBE_FILE_EXTENSIONS}


def file_extension(filepath) -> str:
    """Lower-case extension of `filepath` without the leading dot."""
    return os.path.splitext(str(filepath))[1].lstrip(".").lower()


def supported_read_extensions():
    return sorted(_READERS)


def read_structure_file(filepath, structure=None):
    """
    Reads `filepath` with the reader registered for its extension.

    Returns:
        tuple: (structure, grids) as returned by the format reader.

    Raises:
        ValueError: If no reader handles the file extension.
    """
    ext = file_extension(filepath)
    reader = _READERS.get(ext)
    if reader is None:
        error_message = f"Unsupported file extension '{ext}' for {filepath}. Supported: {supported_read_extensions()}"
        vprint(ERROR, get_effective_verbosity(_MODULE_NAME), error_message)
        raise ValueError(error_message)
    return reader(filepath, structure)
