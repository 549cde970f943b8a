"""
Modland CLI Entry Points

Provides command-line interface for:
- tile: MODIS land tile of a latitude/longitude
- sinusoidal: Sinusoidal coordinates of a latitude/longitude
- bounds: Sinusoidal bounds of a tile
- polygon: Tiles holding the vertices of a GeoJSON geometry
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Modland - MODIS/VIIRS sinusoidal tile lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  modland tile 34.0 -118.0             Tile containing a point (h08v05)
  modland sinusoidal 45.0 45.0         Sinusoidal x/y of a point
  modland bounds h18v09                Sinusoidal bounds of a tile
  modland polygon study_area.geojson   Tiles holding the polygon's vertices
        """,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Tile command
    tile_parser = subparsers.add_parser("tile", help="Show the tile containing a point")
    tile_parser.add_argument("lat", type=float, help="Latitude in decimal degrees")
    tile_parser.add_argument("lon", type=float, help="Longitude in decimal degrees")

    # Sinusoidal command
    sinu_parser = subparsers.add_parser(
        "sinusoidal", help="Show sinusoidal coordinates of a point"
    )
    sinu_parser.add_argument("lat", type=float, help="Latitude in decimal degrees")
    sinu_parser.add_argument("lon", type=float, help="Longitude in decimal degrees")

    # Bounds command
    bounds_parser = subparsers.add_parser("bounds", help="Show sinusoidal bounds of a tile")
    bounds_parser.add_argument("tile", help="Tile ID (e.g., h18v09)")

    # Polygon command
    polygon_parser = subparsers.add_parser(
        "polygon", help="Show tiles holding the vertices of a GeoJSON geometry"
    )
    polygon_parser.add_argument("geojson", help="GeoJSON file path or inline GeoJSON text")

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(message)s" if not args.verbose else "%(levelname)s: %(message)s"
    )

    from modland.cli.lookup import run_bounds, run_polygon, run_sinusoidal, run_tile

    commands = {
        "tile": run_tile,
        "sinusoidal": run_sinusoidal,
        "bounds": run_bounds,
        "polygon": run_polygon,
    }

    if args.command not in commands:
        parser.print_help()
        sys.exit(1)

    commands[args.command](args)


if __name__ == "__main__":
    main()
