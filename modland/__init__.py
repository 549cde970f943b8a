"""
Modland - Locate MODIS/VIIRS sinusoidal land tiles

Converts WGS84 latitude/longitude to the MODIS sinusoidal projection and
resolves the 36 × 18 land grid tile ("hXXvYY") containing a point or the
vertices of a polygon.

Quick Start:
    >>> import modland
    >>>
    >>> modland.latlon_to_sinusoidal(45.0, 45.0)
    (3538204.887918666, 5003777.338949354)
    >>> modland.sinusoidal_to_modland(0.0, 0.0)
    'h18v09'
    >>> modland.latlon_to_modland(34.0, -118.0)
    'h08v05'
    >>> modland.modland_tiles_for_polygon([(-118.0, 34.0), (-117.0, 34.5)])
    {'h08v05'}
"""

from modland.core import (
    GeometryError,
    LatLonRangeError,
    # Exceptions
    ModlandError,
    RangeError,
    SinusoidalRangeError,
    TileIdError,
    TileIndexError,
    # Functions
    latlon_to_modland,
    latlon_to_sinusoidal,
    modland_tile_bounds,
    modland_tiles_for_polygon,
    sinusoidal_to_modland,
)
from modland.grid import GridConstants, ModlandTileGrid, TileIndex, parse_tile_id
from modland.grid.constants import (
    LOWER_RIGHT_X_METERS,
    LOWER_RIGHT_Y_METERS,
    MODLAND_GRID,
    SINUSOIDAL,
    TILE_SIZE_METERS,
    TOTAL_COLUMNS,
    TOTAL_ROWS,
    UPPER_LEFT_X_METERS,
    UPPER_LEFT_Y_METERS,
    WGS84,
)
from modland.projection import RasterioTransform, ReferenceSystemTransform, SinusoidalProjector

__version__ = "0.1.0"

__all__ = [
    "GeometryError",
    "GridConstants",
    "LOWER_RIGHT_X_METERS",
    "LOWER_RIGHT_Y_METERS",
    "LatLonRangeError",
    "MODLAND_GRID",
    "ModlandError",
    "ModlandTileGrid",
    "RangeError",
    "RasterioTransform",
    "ReferenceSystemTransform",
    "SINUSOIDAL",
    "SinusoidalProjector",
    "SinusoidalRangeError",
    "TILE_SIZE_METERS",
    "TOTAL_COLUMNS",
    "TOTAL_ROWS",
    "TileIdError",
    "TileIndex",
    "TileIndexError",
    "UPPER_LEFT_X_METERS",
    "UPPER_LEFT_Y_METERS",
    "WGS84",
    "__version__",
    "latlon_to_modland",
    "latlon_to_sinusoidal",
    "modland_tile_bounds",
    "modland_tiles_for_geodataframe",
    "modland_tiles_for_geometry",
    "modland_tiles_for_polygon",
    "parse_tile_id",
    "sinusoidal_to_modland",
]


# Lazy imports for geometry helpers (avoids importing shapely at startup)
def __getattr__(name):
    if name == "modland_tiles_for_geometry":
        from modland.query.spatial import modland_tiles_for_geometry

        return modland_tiles_for_geometry
    elif name == "modland_tiles_for_geodataframe":
        from modland.query.spatial import modland_tiles_for_geodataframe

        return modland_tiles_for_geodataframe
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
