"""
Modland Public API Functions

Top-level functions mapping geographic coordinates onto the MODIS land grid:

    (lat, lon) -> latlon_to_sinusoidal -> (x, y) -> sinusoidal_to_modland -> "hXXvYY"
"""

import logging
from typing import Iterable, Tuple

from modland.grid.base import TileGrid
from modland.grid.tile_grid import ModlandTileGrid
from modland.projection.projector import SinusoidalProjector, get_default_projector

logger = logging.getLogger(__name__)

_DEFAULT_GRID = ModlandTileGrid()


def latlon_to_sinusoidal(
    lat: float,
    lon: float,
    projector: SinusoidalProjector | None = None,
) -> Tuple[float, float]:
    """
    Convert latitude and longitude to sinusoidal projection coordinates

    Args:
        lat: Latitude in decimal degrees (-90 to 90)
        lon: Longitude in decimal degrees (-180 to 180)
        projector: Projector instance (default: shared Rasterio-backed projector)

    Returns:
        Sinusoidal coordinates (x, y) in meters

    Raises:
        LatLonRangeError: If lat or lon is out of bounds

    Examples:
        >>> latlon_to_sinusoidal(45.0, 45.0)
        (3538204.887918666, 5003777.338949354)
    """
    projector = projector or get_default_projector()
    return projector.project(lat, lon)


def sinusoidal_to_modland(
    x: float,
    y: float,
    tile_grid: TileGrid | None = None,
) -> str:
    """
    Convert sinusoidal projection coordinates to a MODIS land tile

    Args:
        x: Sinusoidal x coordinate in meters
        y: Sinusoidal y coordinate in meters
        tile_grid: Tile grid instance (default: MODIS land grid)

    Returns:
        Tile ID in format "hXXvYY"

    Raises:
        SinusoidalRangeError: If x or y lies outside the projection extent

    Examples:
        >>> sinusoidal_to_modland(0.0, 0.0)
        'h18v09'
    """
    grid = tile_grid or _DEFAULT_GRID
    return grid.get_tile_id(x, y)


def latlon_to_modland(
    lat: float,
    lon: float,
    projector: SinusoidalProjector | None = None,
    tile_grid: TileGrid | None = None,
) -> str:
    """
    Convert latitude and longitude to a MODIS land tile

    Errors from either stage propagate unchanged.

    Examples:
        >>> latlon_to_modland(34.0, -118.0)  # Los Angeles
        'h08v05'
    """
    x, y = latlon_to_sinusoidal(lat, lon, projector=projector)
    return sinusoidal_to_modland(x, y, tile_grid=tile_grid)


def modland_tiles_for_polygon(
    vertices: Iterable[Tuple[float, float]],
    projector: SinusoidalProjector | None = None,
    tile_grid: TileGrid | None = None,
) -> set[str]:
    """
    Find the MODIS land tiles holding the vertices of a polygon

    Only vertices are inspected: a tile crossed by an edge or covered by the
    interior without containing any vertex is not reported. A single
    out-of-range vertex fails the whole call.

    Args:
        vertices: Sequence of (lon, lat) pairs (longitude first)
        projector: Projector instance (default: shared Rasterio-backed projector)
        tile_grid: Tile grid instance (default: MODIS land grid)

    Returns:
        Set of tile IDs

    Examples:
        >>> modland_tiles_for_polygon([(-118.0, 34.0), (-117.0, 34.5)])
        {'h08v05'}
    """
    lons, lats = [], []
    for lon, lat in vertices:
        lons.append(lon)
        lats.append(lat)

    # Every vertex is validated before any projection work
    projector = projector or get_default_projector()
    xs, ys = projector.project_many(lats, lons)

    tiles = {
        sinusoidal_to_modland(float(x), float(y), tile_grid=tile_grid) for x, y in zip(xs, ys)
    }

    logger.debug("Resolved %d vertices to %d tiles", len(lons), len(tiles))
    return tiles


def modland_tile_bounds(
    tile_id: str,
    tile_grid: TileGrid | None = None,
) -> Tuple[float, float, float, float]:
    """
    Get the sinusoidal bounds (xmin, ymin, xmax, ymax) of a MODIS land tile

    Raises:
        TileIdError: If the tile ID is malformed or outside the grid
    """
    grid = tile_grid or _DEFAULT_GRID
    return grid.get_tile_bounds(tile_id)
