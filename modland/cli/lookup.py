"""
Lookup CLI commands

Point, tile and geometry lookups on the MODIS land grid.
"""

import argparse
import sys
from typing import Callable, TypeVar

from modland.core.exceptions import ModlandError

T = TypeVar("T")


def _run(func: Callable[[], T]) -> T:
    """Call func, reporting Modland errors on stderr and exiting with status 1"""
    try:
        return func()
    except (ModlandError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def run_tile(args: argparse.Namespace) -> None:
    """Run the tile command"""
    from modland.core.api import latlon_to_modland

    print(_run(lambda: latlon_to_modland(args.lat, args.lon)))


def run_sinusoidal(args: argparse.Namespace) -> None:
    """Run the sinusoidal command"""
    from modland.core.api import latlon_to_sinusoidal

    x, y = _run(lambda: latlon_to_sinusoidal(args.lat, args.lon))
    print(f"{x!r} {y!r}")


def run_bounds(args: argparse.Namespace) -> None:
    """Run the bounds command"""
    from modland.core.api import modland_tile_bounds

    xmin, ymin, xmax, ymax = _run(lambda: modland_tile_bounds(args.tile))
    print(f"{xmin!r} {ymin!r} {xmax!r} {ymax!r}")


def run_polygon(args: argparse.Namespace) -> None:
    """Run the polygon command"""
    from modland.query.spatial import modland_tiles_for_geometry

    tiles = _run(lambda: modland_tiles_for_geometry(args.geojson))
    for tile in sorted(tiles):
        print(tile)
