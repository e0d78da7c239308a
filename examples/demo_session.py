"""
hexview Session Demo

Walks a viewer session without a map: a short drag over San Francisco, a pasted
selection, a few clicks, and a polygon cover.

Usage:
    python examples/demo_session.py --lat 37.7 --lon -122.4 --zoom 11
    python examples/demo_session.py --lon 179.5 --zoom 4      # antimeridian
"""

import argparse
import logging
import time

from hexview import HexSession, HexViewConfig, Viewport, cell_tooltip


def parse_args():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description="hexview Session Demo")
    parser.add_argument("--lat", type=float, default=37.7, help="Center latitude (default: 37.7)")
    parser.add_argument("--lon", type=float, default=-122.4, help="Center longitude (default: -122.4)")
    parser.add_argument("--zoom", type=float, default=11, help="Zoom level (default: 11)")
    parser.add_argument(
        "--select",
        type=str,
        default="[8a1fb46622dffff, 8a1fb46622affff]",
        help="Text to paste into the selection box",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    return parser.parse_args()


def simulate_drag(session: HexSession, start: Viewport, steps: int = 10) -> None:
    """Pan east in small steps faster than the throttle window"""
    print(f"\n[1] Dragging {steps} steps from ({start.latitude}, {start.longitude})")
    updates = []
    unsubscribe = session.subscribe(updates.append)

    for step in range(steps):
        session.on_viewport_change(start.with_center(start.latitude, start.longitude + step * 0.01))
        time.sleep(0.02)

    # Wait out the throttle window so the trailing update lands
    time.sleep(session.config.throttle_wait_s + 0.1)
    unsubscribe()

    print(f"    {steps} viewport events -> {len(updates)} grid update(s)")
    latest = session.background
    print(f"    Final center lon: {latest.viewport.longitude:.3f}")
    print(f"    Resolution {latest.resolution}, {len(latest):,} visible cells")


def main():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    print("=" * 60)
    print("hexview Session Demo")
    print("=" * 60)

    session = HexSession(config=HexViewConfig.from_env())
    viewport = Viewport(latitude=args.lat, longitude=args.lon, zoom=args.zoom, width=800, height=600)

    simulate_drag(session, viewport)

    print(f"\n[2] Pasting: {args.select}")
    submitted = session.on_text_submitted([args.select, "not-a-cell"])
    print(f"    Selected: {submitted.cells}")
    print(f"    Rejected: {submitted.rejected}")
    if submitted.viewport is not None:
        vp = submitted.viewport
        print(f"    Recentred to ({vp.latitude:.5f}, {vp.longitude:.5f}) at zoom {vp.zoom}")
        for cell in submitted.cells[:1]:
            print("    " + cell_tooltip(cell).replace("\n", "\n    "))

    print("\n[3] Clicking background cells")
    background = session.background.cells
    if len(background) >= 2:
        print(f"    click          -> {session.on_cell_clicked(background[0])}")
        print(f"    shift+click    -> {session.on_cell_clicked(background[1], extend=True)}")
        print(f"    click again    -> {session.on_cell_clicked(background[0])}")

    print("\n[4] Polygon cover")
    half = 0.05
    ring = [
        (args.lon - half, args.lat - half),
        (args.lon + half, args.lat - half),
        (args.lon + half, args.lat + half),
        (args.lon - half, args.lat + half),
    ]
    session.set_cover(enabled=True, resolution=9)
    for compact in (False, True):
        session.set_cover(compact=compact)
        cells = session.on_polygon_drawn(ring)
        label = "compact" if compact else "plain  "
        print(
            f"    {label}: {len(cells):,} cells at resolution {session.cover.resolution} "
            f"(max {session.cover.max_resolution})"
        )

    print("\nDone.")


if __name__ == "__main__":
    main()
