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


from enum import Enum


class BaseInfoEnum(Enum):
    """
    Base class for pyGCube enums that carry an integer value and a descriptive info string.

    Each member is declared as ``NAME = int_value, "info text"``. The integer is the
    enum value proper (used for comparisons, thresholds and serialization), while the
    info string documents the option for command-line help and error messages.

    - **`info` Property**: The descriptive string of the member.
    - **`int_value` Property**: The underlying integer constant.
    - **`list()` Class Method**: Names of all public members.
    - **`help()` Class Method**: ``'<NAME>: <info>'`` lines for each member.
    - **`from_name()` Class Method**: Case-insensitive lookup by member name.
    """

    def __new__(cls, int_value, info):
        obj = object.__new__(cls)
        obj._value_ = int_value
        obj._info = info
        return obj

    @property
    def info(self):
        """Returns the descriptive string associated with the enum member."""
        return self._info

    @property
    def int_value(self):
        """Returns the underlying primitive integer value of the enum."""
        return self.value

    @classmethod
    def list(cls):
        """Returns a list of all public enum member names defined in the class."""
        return [c.name for c in cls if not c.name.startswith("_")]

    @classmethod
    def help(cls):
        """Returns '<NAME>: <description>' entries for each enum option."""
        return [f"{c.name}: {c.info}" for c in cls if not c.name.startswith("_")]

    @classmethod
    def from_name(cls, name: str):
        """
        Looks up a member by name, ignoring case.

        Raises:
            ValueError: If no member of this enum carries the given name.
        """
        key = name.strip().upper()
        for member in cls:
            if member.name.upper() == key:
                return member
        raise ValueError(
            f"Invalid {cls.__name__} name: {name!r}. Must be one of {cls.list()}."
        )
