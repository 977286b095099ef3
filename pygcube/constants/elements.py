#!/usr/bin/env python
# -*- coding: utf-8 -*-

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
This module defines an enumeration for chemical elements and provides utility functions
for working with atomic numbers.

It includes:
- `ConstChemElement`: An enumeration of known chemical elements, mapping their symbols
  to their atomic numbers.
- `AtomicNumToElement`: A reverse mapping (dictionary) for efficient lookup of
  `ConstChemElement` members by their atomic number.
- `COVALENT_RADII`: Covalent radii in angstrom indexed by atomic number, used by
  bond perception.
- Lookup helpers by symbol and by atomic number.
"""

from enum import Enum


class ConstChemElement(Enum):
    """
    Enumeration of known chemical elements.

    Source: IUPAC Periodic Table (May 4, 2022).

    Members are element symbols mapped to their integer atomic numbers.
    """

    UNK = 0  # UNKNOWN (dummy atom/element, not in Periodic table)
    H = 1
    He = 2
    Li = 3
    Be = 4
    B = 5
    C = 6
    N = 7
    O = 8
    F = 9
    Ne = 10
    Na = 11
    Mg = 12
    Al = 13
    Si = 14
    P = 15
    S = 16
    Cl = 17
    Ar = 18
    K = 19
    Ca = 20
    Sc = 21
    Ti = 22
    V = 23
    Cr = 24
    Mn = 25
    Fe = 26
    Co = 27
    Ni = 28
    Cu = 29
    Zn = 30
    Ga = 31
    Ge = 32
    As = 33
    Se = 34
    Br = 35
    Kr = 36
    Rb = 37
    Sr = 38
    Y = 39
    Zr = 40
    Nb = 41
    Mo = 42
    Tc = 43
    Ru = 44
    Rh = 45
    Pd = 46
    Ag = 47
    Cd = 48
    In = 49
    Sn = 50
    Sb = 51
    Te = 52
    I = 53
    Xe = 54
    Cs = 55
    Ba = 56
    La = 57
    Ce = 58
    Pr = 59
    Nd = 60
    Pm = 61
    Sm = 62
    Eu = 63
    Gd = 64
    Tb = 65
    Dy = 66
    Ho = 67
    Er = 68
    Tm = 69
    Yb = 70
    Lu = 71
    Hf = 72
    Ta = 73
    W = 74
    Re = 75
    Os = 76
    Ir = 77
    Pt = 78
    Au = 79
    Hg = 80
    Tl = 81
    Pb = 82
    Bi = 83
    Po = 84
    At = 85
    Rn = 86
    Fr = 87
    Ra = 88
    Ac = 89
    Th = 90
    Pa = 91
    U = 92
    Np = 93
    Pu = 94
    Am = 95
    Cm = 96
    Bk = 97
    Cf = 98
    Es = 99
    Fm = 100
    Md = 101
    No = 102
    Lr = 103
    Rf = 104
    Db = 105
    Sg = 106
    Bh = 107
    Hs = 108
    Mt = 109
    Ds = 110
    Rg = 111
    Cn = 112
    Nh = 113
    Fl = 114
    Mc = 115
    Lv = 116
    Ts = 117
    Og = 118

    @classmethod
    def has_member(cls, key):
        """Check if the enumeration has a member with the given key."""
        return key in cls.__members__


# Create a reverse mapping for atomic number to element for efficient lookup
AtomicNumToElement = {elm.value: elm for elm in ConstChemElement}

# Covalent radii from Cordero et al. 'Covalent radii revisited',
# Dalton Transactions 2008, 2832-2838. Index 0 is the dummy element.
COVALENT_RADII = (
    0.0,
    0.31, 0.28,  # H and He
    1.28, 0.96, 0.84, 0.76, 0.71, 0.66, 0.57, 0.58,  # Li through Ne
    1.66, 1.41, 1.21, 1.11, 1.07, 1.05, 1.02, 1.06,  # Na through Ar
    2.03, 1.76, 1.70, 1.60, 1.53, 1.39, 1.61, 1.52, 1.50,
    1.24, 1.32, 1.22, 1.22, 1.20, 1.19, 1.20, 1.20, 1.16,  # K through Kr
    2.20, 1.95, 1.90, 1.75, 1.64, 1.54, 1.47, 1.46, 1.42,
    1.39, 1.45, 1.44, 1.42, 1.39, 1.39, 1.38, 1.39, 1.40,  # Rb through Xe
    2.44, 2.15, 2.07, 2.04, 2.03, 2.01, 1.99, 1.98,
    1.98, 1.96, 1.94, 1.92, 1.92, 1.89, 1.90, 1.87,  # Cs through Lu
    1.87, 1.75, 1.70, 1.62, 1.51, 1.44, 1.41, 1.36,
    1.36, 1.32, 1.45, 1.46, 1.48, 1.40, 1.50, 1.50,  # Hf through Rn
    2.60, 2.21, 2.15, 2.06, 2.00, 1.96, 1.90, 1.87, 1.80, 1.69,  # Fr through Cm
)

DEFAULT_COVALENT_RADIUS = 0.77


def get_element_by_symbol(symbol: str) -> ConstChemElement:
    """
    Get the ConstChemElement enum member from a chemical element symbol string.

    Args:
        symbol (str): The element symbol (e.g., 'C', 'Cl', 'Fe').

    Returns:
        ConstChemElement: The corresponding enum member, or ConstChemElement.UNK.
    """
    symbol = symbol.capitalize()
    if ConstChemElement.has_member(symbol):
        return ConstChemElement[symbol]
    return ConstChemElement.UNK


def get_element_by_atomic_number(atomic_number: int) -> ConstChemElement:
    """
    Retrieves the chemical element Enum member for a given atomic number.

    Atomic numbers without a known element map to ConstChemElement.UNK.
    """
    return AtomicNumToElement.get(int(atomic_number), ConstChemElement.UNK)


def get_element_symbol_by_atomic_number(atomic_number: int) -> str:
    """Retrieves the element symbol for a given atomic number ('UNK' if unknown)."""
    return get_element_by_atomic_number(atomic_number).name


def get_covalent_radius(atomic_number: int) -> float:
    """
    Covalent radius in angstrom for `atomic_number`.

    Elements outside the tabulated range, and the dummy element 0, fall back to
    `DEFAULT_COVALENT_RADIUS`.
    """
    atomic_number = int(atomic_number)
    if 0 < atomic_number < len(COVALENT_RADII):
        return COVALENT_RADII[atomic_number]
    return DEFAULT_COVALENT_RADIUS
