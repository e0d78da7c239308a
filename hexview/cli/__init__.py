"""
hexview CLI Entry Points

Provides command-line interface for:
- cells: Visible cells for a viewport
- parse: Resolve cell identifiers from freeform text
- cover: Cover a GeoJSON polygon with cells
- info: Show details of a cell
"""

import argparse
import logging
import sys

from hexview.core.exceptions import HexViewError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexview",
        description="hexview - H3 grid viewport and selection tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hexview cells --lat 37.7 --lon -122.4 --zoom 11      Visible cells for a viewport
  hexview parse "[8a1fb46622dffff, 8a1fb46622affff]"   Resolve pasted identifiers
  hexview cover area.geojson --resolution 7 --compact  Cover a polygon
  hexview info 8a1fb46622dffff                         Show cell details
        """,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Cells command
    cells_parser = subparsers.add_parser("cells", help="Visible cells for a viewport")
    cells_parser.add_argument("--lat", type=float, required=True, help="Center latitude")
    cells_parser.add_argument("--lon", type=float, required=True, help="Center longitude")
    cells_parser.add_argument("--zoom", type=float, required=True, help="Zoom level")
    cells_parser.add_argument("--width", type=float, default=800, help="Width in pixels (default: 800)")
    cells_parser.add_argument("--height", type=float, default=600, help="Height in pixels (default: 600)")
    cells_parser.add_argument("--bearing", type=float, default=0.0, help="Bearing in degrees")
    cells_parser.add_argument(
        "--policy", choices=["table", "logistic"], default=None, help="Resolution policy"
    )
    cells_parser.add_argument("--resolution", type=int, default=None, help="Freeze resolution")
    cells_parser.add_argument("--count", action="store_true", help="Only print the cell count")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Resolve cell identifiers from text")
    parse_parser.add_argument("tokens", nargs="+", help="Tokens to resolve")

    # Cover command
    cover_parser = subparsers.add_parser("cover", help="Cover a GeoJSON polygon with cells")
    cover_parser.add_argument("geojson", help="Path to a GeoJSON file")
    cover_parser.add_argument("--resolution", type=int, default=None, help="Cover resolution")
    cover_parser.add_argument("--compact", action="store_true", help="Compact the covering")

    # Info command
    info_parser = subparsers.add_parser("info", help="Show cell details")
    info_parser.add_argument("cell", help="Cell identifier")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(message)s" if not args.verbose else "%(levelname)s: %(message)s"
    )

    try:
        if args.command == "cells":
            from hexview.cli.cells import run_cells

            run_cells(args)
        elif args.command == "parse":
            from hexview.cli.parse import run_parse

            run_parse(args)
        elif args.command == "cover":
            from hexview.cli.cover import run_cover

            run_cover(args)
        elif args.command == "info":
            from hexview.cli.info import run_info

            run_info(args)
        else:
            parser.print_help()
            return 1
    except HexViewError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
