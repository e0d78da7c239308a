"""
Cover CLI command

Covers a GeoJSON polygon with cells.
"""

import argparse
import json

from hexview.config import HexViewConfig
from hexview.selection.cover import cover_polygon, max_acceptable_resolution, parse_polygon


def run_cover(args: argparse.Namespace) -> None:
    """Run the cover command"""
    config = HexViewConfig.from_env()
    geometry = parse_polygon(args.geojson)

    max_resolution = max_acceptable_resolution(geometry, max_cells=config.max_cover_cells)
    requested = config.default_cover_resolution if args.resolution is None else args.resolution
    resolution = min(requested, max_resolution)

    cells = cover_polygon(geometry, resolution, compact=args.compact)

    if args.json:
        print(
            json.dumps(
                {
                    "resolution": resolution,
                    "max_resolution": max_resolution,
                    "compact": args.compact,
                    "cells": cells,
                }
            )
        )
        return

    if resolution < requested:
        print(f"Resolution capped at {max_resolution} (max {config.max_cover_cells:,} cells)")
    print(f"Resolution: {resolution}")
    print(f"Cells: {len(cells):,}")
    for cell in cells:
        print(cell)
