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
pyGCube: a NumPy based reader and writer for Gaussian Cube volumetric data files.
"""

__author__ = "The pyGCube Development Team"
__copyright__ = "Copyright 2025, The pyGCube Project"
__credits__ = ["Gaussian Cube format description by Gaussian, Inc."]
__license__ = "AGPL-3.0-or-later"
__version__ = "0.1.0"

__maintainers__ = ["pyGCube Development Team"]
__contact__ = "pyGCube Development Team"

__status__ = "Alpha"
