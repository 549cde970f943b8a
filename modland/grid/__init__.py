"""
Modland Grid Module

MODIS land tile grid on the sinusoidal projection plane.
"""

from modland.grid.base import TileGrid, TileIndex
from modland.grid.constants import MODLAND_GRID, GridConstants
from modland.grid.tile_grid import ModlandTileGrid, parse_tile_id

__all__ = [
    "GridConstants",
    "MODLAND_GRID",
    "ModlandTileGrid",
    "TileGrid",
    "TileIndex",
    "parse_tile_id",
]
