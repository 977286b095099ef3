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
Exception types raised by the pyGCube readers and writers.

Decoding errors carry the 1-based line number and 0-based field index where
the problem was detected, when known. Encoding errors carry the index of the
offending atom, when applicable.

    CubeError
    ├── CubeDecodeError
    │   ├── MalformedNumberError
    │   ├── NumericOverflowError
    │   ├── UnexpectedEofError
    │   └── InvalidDimensionsError
    └── CubeEncodeError
        ├── InvalidAtomError
        ├── InvalidNameError
        └── NoGridDataError
"""

from typing import Optional


class CubeError(Exception):
    """Base class of all cube codec errors."""


class CubeDecodeError(CubeError):
    def __init__(
        self, message: str, line: Optional[int] = None, field: Optional[int] = None
    ):
        self.line = line
        self.field = field
        location = []
        if line is not None:
            location.append(f"line {line}")
        if field is not None:
            location.append(f"field {field}")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)


class MalformedNumberError(CubeDecodeError):
    """A token is missing or cannot be parsed as the expected numeric type."""


class NumericOverflowError(CubeDecodeError):
    """A number parsed but does not fit the type it is stored in."""


class UnexpectedEofError(CubeDecodeError):
    """The stream ended before the grammar was satisfied."""


class InvalidDimensionsError(CubeDecodeError):
    """A grid axis has a non-positive number of points."""


class CubeEncodeError(CubeError):
    """Base class of errors raised while writing a cube file."""


class InvalidAtomError(CubeEncodeError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Internal error: atom {index} is invalid.")


class InvalidNameError(CubeEncodeError):
    """The molecule name cannot be written on a single cube line."""

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Molecule name {name!r} {reason}.")


class NoGridDataError(CubeEncodeError):
    def __init__(self):
        super().__init__("Structure has no grid data to write.")
