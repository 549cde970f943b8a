"""
Modland Core Module

Exceptions and the coordinate-to-tile API.
"""

from modland.core.exceptions import (
    ModlandError,
    RangeError,
    LatLonRangeError,
    SinusoidalRangeError,
    TileIndexError,
    TileIdError,
    GeometryError,
)
from modland.core.api import (
    latlon_to_sinusoidal,
    sinusoidal_to_modland,
    latlon_to_modland,
    modland_tiles_for_polygon,
    modland_tile_bounds,
)

__all__ = [
    # Functions
    "latlon_to_sinusoidal",
    "sinusoidal_to_modland",
    "latlon_to_modland",
    "modland_tiles_for_polygon",
    "modland_tile_bounds",
    # Exceptions
    "ModlandError",
    "RangeError",
    "LatLonRangeError",
    "SinusoidalRangeError",
    "TileIndexError",
    "TileIdError",
    "GeometryError",
]
