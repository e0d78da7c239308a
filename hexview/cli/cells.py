"""
Cells CLI command

Prints the resolution and visible cells for a viewport.
"""

import argparse
import json

from hexview.config import HexViewConfig
from hexview.core.types import Viewport
from hexview.viewport.engine import ViewportGridEngine
from hexview.viewport.resolution import get_policy


def run_cells(args: argparse.Namespace) -> None:
    """Run the cells command"""
    config = HexViewConfig.from_env()
    policy = get_policy(args.policy or config.resolution_policy)

    engine = ViewportGridEngine(policy=policy)
    if args.resolution is not None:
        engine.freeze_resolution(args.resolution)

    viewport = Viewport(
        latitude=args.lat,
        longitude=args.lon,
        zoom=args.zoom,
        width=args.width,
        height=args.height,
        bearing=args.bearing,
    )
    update = engine.compute(viewport)
    bounds = update.bounds

    if args.json:
        print(
            json.dumps(
                {
                    "resolution": update.resolution,
                    "bounds": list(bounds.as_tuple()) if bounds else None,
                    "count": len(update.cells),
                    "cells": [] if args.count else update.cells,
                }
            )
        )
        return

    print(f"Resolution: {update.resolution}")
    if bounds is not None:
        print(
            f"Bounds: lat {bounds.min_lat:.5f}..{bounds.max_lat:.5f}, "
            f"lon {bounds.min_lon:.5f}..{bounds.max_lon:.5f}"
        )
    print(f"Cells: {len(update.cells):,}")
    if not args.count:
        for cell in update.cells:
            print(cell)
