"""
Tile Grid System Protocol

Sinusoidal tile grid for MODIS/VIIRS land products.
"""

from typing import NamedTuple, Protocol, Tuple


class TileIndex(NamedTuple):
    """
    Horizontal and vertical position of a tile in the grid

    Renders as the canonical "hXXvYY" identifier.

    Examples:
        >>> str(TileIndex(18, 9))
        'h18v09'
    """

    h: int
    v: int

    def __str__(self) -> str:
        return f"h{self.h:02d}v{self.v:02d}"


class TileGrid(Protocol):
    """
    Sinusoidal tile grid

    The MODIS land grid partitions the sinusoidal projection plane into
    36 columns (h00-h35) by 18 rows (v00-v17) of equal-area tiles, numbered
    from the upper-left corner eastward and southward.
    """

    def get_tile_id(self, x: float, y: float) -> str:
        """
        Convert sinusoidal coordinates to tile ID

        Args:
            x: Sinusoidal x coordinate in meters
            y: Sinusoidal y coordinate in meters

        Returns:
            Tile ID in format "hXXvYY" (e.g., "h18v09")
        """
        ...

    def get_tile_bounds(self, tile_id: str) -> Tuple[float, float, float, float]:
        """
        Get sinusoidal bounds of a tile

        Args:
            tile_id: Tile identifier (e.g., "h18v09")

        Returns:
            Bounding box as (xmin, ymin, xmax, ymax) in meters
        """
        ...
