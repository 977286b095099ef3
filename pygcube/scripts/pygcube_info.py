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


import os
import sys
import argparse
from collections import Counter

import numpy as np

from pygcube.foundation.enums import Precision, VerbosityLevel
from pygcube.foundation.errors import CubeError


def isfile(fname):
    if not os.path.isfile(fname):
        raise argparse.ArgumentTypeError(f"File not found: {fname}")
    return fname


def check_output_file(outfile, overwrite) -> bool:
    """
    Returns False (after reporting) if the output file exists and overwrite is False.
    """
    if os.path.isfile(outfile) and not overwrite:
        print(f"Error: Output file '{outfile}' already exists.")
        print("       Use -O or --overwrite to overwrite it.")
        return False
    return True


def parse_arguments(argv=None):
    precision_choices = tuple(p.lower() for p in Precision.list())
    verbosity_choices = tuple(v.lower() for v in VerbosityLevel.list())

    parser = argparse.ArgumentParser(
        prog="pygcube-info",
        description="Summarize a Gaussian cube file and optionally re-write it.",
    )
    parser.add_argument(
        "cubefile",
        nargs="?",
        type=isfile,
        help="Input cube file. Required unless using '-h' or '-V'.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Print version of pygcube and exit.",
    )
    parser.add_argument(
        "-p",
        "--precision",
        choices=precision_choices,
        default="single",
        help="Precision of voxel values held in memory (default: single).",
    )
    parser.add_argument(
        "-v",
        "--verbosity",
        choices=verbosity_choices,
        default="info",
        help="Verbosity level for outputs (default: info).",
    )
    parser.add_argument(
        "-o",
        "--outfile",
        help="Write the structure and its first grid to OUTFILE.",
    )
    parser.add_argument(
        "-O",
        "--overwrite",
        action="store_true",
        help="Overwrite output file if it exists (default: False).",
    )
    return parser.parse_args(argv)


def print_pygcube_version_info():
    """Prints version information for pygcube and its key dependencies."""
    import pygcube
    import platform

    print(f"\n--- pyGCube Version Info ---")
    print(f"pyGCube:  v{pygcube.__version__}")
    print(f"Python:   {platform.python_version()}")
    print(f"OS:       {platform.system()} {platform.release()} ({platform.machine()})")
    print(f"NumPy:    v{np.__version__}")
    print(f"----------------------------\n")


def summarize(structure, grids):
    """Prints a human readable summary of a decoded cube file."""
    from pygcube.constants import get_element_symbol_by_atomic_number

    counts = Counter(
        get_element_symbol_by_atomic_number(z) for z in structure.atomic_numbers
    )
    formula = " ".join(f"{sym}{n if n > 1 else ''}" for sym, n in sorted(counts.items()))
    print(f"Name:   {structure.data('name')}")
    print(f"Atoms:  {structure.atom_count()} ({formula})")
    print(f"Bonds:  {len(structure.bonds)}")
    print(f"Grids:  {len(grids)}")
    for i, grid in enumerate(grids):
        values = grid.data
        print(f"  Grid {i}:")
        print(f"    dimensions:   {tuple(int(d) for d in grid.dimensions)}")
        print(f"    origin (A):   {np.array2string(grid.min, precision=6)}")
        print(f"    spacing (A):  {np.array2string(grid.spacing, precision=6)}")
        print(
            f"    values:       min {values.min():.5e}  max {values.max():.5e}  mean {values.mean():.5e}"
        )


def main(argv=None):
    from pygcube.config.global_runtime import (
        set_precision,
        set_verbosity_level,
    )

    args = parse_arguments(argv)

    if args.version:
        print_pygcube_version_info()
        return 0

    if not args.cubefile:
        print("Error: Input cube file is required but was not provided.")
        print("Use -h to see usage.")
        return 1

    if args.outfile and not check_output_file(args.outfile, args.overwrite):
        return 1

    set_precision(Precision.from_name(args.precision))
    set_verbosity_level(VerbosityLevel.from_name(args.verbosity))

    from pygcube.utils.io.readers import read_structure_file
    from pygcube.utils.io.writers import write_structure_file

    try:
        structure, grids = read_structure_file(args.cubefile)
        summarize(structure, grids)
        if args.outfile:
            write_structure_file(args.outfile, structure, grids)
    except (CubeError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
