"""
TileGrid Implementation

Resolves sinusoidal coordinates to MODIS land tiles.
"""

import math
import re
from typing import Tuple

from modland.core.exceptions import SinusoidalRangeError, TileIdError, TileIndexError
from modland.grid.base import TileIndex
from modland.grid.constants import MODLAND_GRID, GridConstants

TILE_ID_PATTERN = re.compile(r"h([0-9]{2})v([0-9]{2})")


class ModlandTileGrid:
    """
    MODIS land tile grid (36 × 18 tiles of ~1111.95km)

    Tile IDs are in format "hXXvYY" where:
    - h increases eastward from the western edge of the projection (h00-h35)
    - v increases southward from the northern edge of the projection (v00-v17)
    - The projection origin (x=0, y=0) is the upper-left corner of h18v09

    A point on a boundary shared by two tiles belongs to the tile east/south
    of it, except on the eastern and southern grid edges, which fold back
    into the last column and row.

    Examples:
        >>> grid = ModlandTileGrid()
        >>> grid.get_tile_id(0.0, 0.0)
        'h18v09'
        >>> grid.get_tile_id(3538204.887918666, 5003777.338949354)
        'h21v04'
        >>> grid.get_tile_id(grid.grid.lower_right_x, grid.grid.lower_right_y)
        'h35v17'
    """

    def __init__(self, grid: GridConstants = MODLAND_GRID):
        """
        Initialize tile grid

        Args:
            grid: Grid constants (default: the MODIS land grid)
        """
        self.grid = grid

    def get_tile_id(self, x: float, y: float) -> str:
        """
        Convert sinusoidal coordinates to tile ID

        Args:
            x: Sinusoidal x coordinate in meters
            y: Sinusoidal y coordinate in meters

        Returns:
            Tile ID in format "hXXvYY"

        Raises:
            SinusoidalRangeError: If x or y lies outside the projection extent
            TileIndexError: If the computed index falls outside the grid
        """
        return str(self.get_tile_index(x, y))

    def get_tile_index(self, x: float, y: float) -> TileIndex:
        """
        Convert sinusoidal coordinates to a (h, v) tile index

        Args:
            x: Sinusoidal x coordinate in meters
            y: Sinusoidal y coordinate in meters

        Returns:
            TileIndex of the tile containing the point
        """
        grid = self.grid

        if not grid.upper_left_x <= x <= grid.lower_right_x:
            raise SinusoidalRangeError(
                "x", x, f"sinusoidal x coordinate ({x}) out of bounds"
            )

        if not grid.lower_right_y <= y <= grid.upper_left_y:
            raise SinusoidalRangeError(
                "y", y, f"sinusoidal y coordinate ({y}) out of bounds"
            )

        h = math.floor((x - grid.upper_left_x) / grid.tile_size)
        v = math.floor(-(y + grid.lower_right_y) / grid.tile_size)

        # Points on the eastern/southern grid edge fold into the last column/row
        if h == grid.total_columns:
            h -= 1

        if v == grid.total_rows:
            v -= 1

        if not 0 <= h < grid.total_columns or not 0 <= v < grid.total_rows:
            raise TileIndexError(
                f"Tile index h={h} v={v} outside {grid.total_columns}x{grid.total_rows} "
                f"grid for x={x}, y={y}"
            )

        return TileIndex(h, v)

    def get_tile_bounds(self, tile_id: str) -> Tuple[float, float, float, float]:
        """
        Get sinusoidal bounds of a tile

        Args:
            tile_id: Tile identifier (e.g., "h18v09")

        Returns:
            Bounding box as (xmin, ymin, xmax, ymax) in meters

        Examples:
            >>> grid = ModlandTileGrid()
            >>> grid.get_tile_bounds("h00v00")
            (-20015109.355798, 8895604.158132..., -18903158.836031..., 10007554.677899)
        """
        h, v = parse_tile_id(tile_id, self.grid)
        grid = self.grid

        xmin = grid.upper_left_x + h * grid.tile_size
        ymax = grid.upper_left_y - v * grid.tile_size

        return (xmin, ymax - grid.tile_size, xmin + grid.tile_size, ymax)


def parse_tile_id(tile_id: str, grid: GridConstants = MODLAND_GRID) -> TileIndex:
    """
    Parse a tile ID string into a TileIndex

    Args:
        tile_id: Tile identifier in format "hXXvYY"
        grid: Grid constants used to validate the index range

    Returns:
        TileIndex(h, v)

    Raises:
        TileIdError: If the ID is malformed or names a tile outside the grid

    Examples:
        >>> parse_tile_id("h18v09")
        TileIndex(h=18, v=9)
    """
    if not isinstance(tile_id, str):
        raise TileIdError(f"Tile ID must be a string, got {type(tile_id).__name__}")

    match = TILE_ID_PATTERN.fullmatch(tile_id)
    if match is None:
        raise TileIdError(f"Invalid tile ID format: {tile_id!r}")

    h, v = int(match.group(1)), int(match.group(2))
    if h >= grid.total_columns or v >= grid.total_rows:
        raise TileIdError(
            f"Tile ID {tile_id!r} outside {grid.total_columns}x{grid.total_rows} grid"
        )

    return TileIndex(h, v)
