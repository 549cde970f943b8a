"""
MODIS Land Grid Constants

Extent of the MODIS/VIIRS sinusoidal projection plane and the dimensions of
the MODIS land tile grid. Values match the MODIS land products exactly.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridConstants:
    """
    Immutable description of the sinusoidal tile grid

    Attributes:
        upper_left_x: Western limit of the projection plane in meters
        upper_left_y: Northern limit of the projection plane in meters
        lower_right_x: Eastern limit of the projection plane in meters
        lower_right_y: Southern limit of the projection plane in meters
        tile_size: Width (and height) of one tile in meters
        total_rows: Number of tile rows (v)
        total_columns: Number of tile columns (h)
        geographic_crs: PROJ string of the geographic reference system
        sinusoidal_crs: PROJ string of the sinusoidal reference system
    """

    upper_left_x: float = -20015109.355798
    upper_left_y: float = 10007554.677899
    lower_right_x: float = 20015109.355798
    lower_right_y: float = -10007554.677899
    tile_size: float = 1111950.5197665554
    total_rows: int = 18
    total_columns: int = 36
    geographic_crs: str = "+proj=longlat +ellps=WGS84 +datum=WGS84 +no_defs"
    # Sphere of radius 6371007.181 m, not the WGS84 ellipsoid
    sinusoidal_crs: str = (
        "+proj=sinu +lon_0=0 +x_0=0 +y_0=0 "
        "+a=6371007.181 +b=6371007.181 +units=m +no_defs"
    )


MODLAND_GRID = GridConstants()

# boundaries of sinusoidal projection
UPPER_LEFT_X_METERS = MODLAND_GRID.upper_left_x
UPPER_LEFT_Y_METERS = MODLAND_GRID.upper_left_y
LOWER_RIGHT_X_METERS = MODLAND_GRID.lower_right_x
LOWER_RIGHT_Y_METERS = MODLAND_GRID.lower_right_y

# size across (width or height) of any tile
TILE_SIZE_METERS = MODLAND_GRID.tile_size

# boundaries of MODIS land grid
TOTAL_ROWS = MODLAND_GRID.total_rows
TOTAL_COLUMNS = MODLAND_GRID.total_columns

WGS84 = MODLAND_GRID.geographic_crs
SINUSOIDAL = MODLAND_GRID.sinusoidal_crs
