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
This module dispatches structures to the matching format writer based on the
extension of the output file. Currently supported:

- Gaussian cube files (.cube): the structure and its first grid.
"""

from pygcube.config.global_runtime import vprint
from pygcube.config.logging_config import (
    ERROR,
    get_effective_verbosity,
)
from pygcube.constants import CUBE_FILE_EXTENSIONS
from pygcube.utils.io.format.cube.cube_io import write_cube
from pygcube.utils.io.readers import file_extension

_MODULE_NAME = __name__

_WRITERS = {ext: write_cube for ext in CUBE_FILE_EXTENSIONS}


def supported_write_extensions():
    return sorted(_WRITERS)


def write_structure_file(filepath, structure, grids=None):
    """
    Writes `structure` with the writer registered for the extension of `filepath`.

    Raises:
        ValueError: If no writer handles the file extension.
    """
    ext = file_extension(filepath)
    writer = _WRITERS.get(ext)
    if writer is None:
        error_message = f"Unsupported file extension '{ext}' for {filepath}. Supported: {supported_write_extensions()}"
        vprint(ERROR, get_effective_verbosity(_MODULE_NAME), error_message)
        raise ValueError(error_message)
    writer(filepath, structure, grids)
