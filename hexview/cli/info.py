"""
Info CLI command

Shows resolution, center and area of a cell.
"""

import argparse
import json

from hexview.grid.h3_grid import get_default_grid
from hexview.render import cell_tooltip


def run_info(args: argparse.Namespace) -> None:
    """Run the info command"""
    grid = get_default_grid()
    cell = grid.require_cell(args.cell)
    lat, lon = grid.cell_to_latlng(cell)

    if args.json:
        print(
            json.dumps(
                {
                    "cell": cell,
                    "resolution": grid.get_resolution(cell),
                    "center": [lat, lon],
                    "area_m2": grid.cell_area_m2(cell),
                }
            )
        )
        return

    print(cell_tooltip(cell, grid))
    print(f"Center: {lat:.6f}, {lon:.6f}")
