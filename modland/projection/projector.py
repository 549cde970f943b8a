"""
Geographic to sinusoidal projection

Validates geographic coordinates and delegates the forward transform to a
ReferenceSystemTransform (Rasterio by default).
"""

import logging
import threading
from typing import Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from modland.core.exceptions import LatLonRangeError
from modland.grid.constants import MODLAND_GRID, GridConstants
from modland.projection.base import ReferenceSystemTransform
from modland.projection.transform import RasterioTransform

logger = logging.getLogger(__name__)

_default_projector: "SinusoidalProjector | None" = None
_default_lock = threading.Lock()


class SinusoidalProjector:
    """
    Projects WGS84 latitude/longitude onto the MODIS sinusoidal plane

    Attributes:
        grid: Grid constants supplying both reference systems
        transform: Point transform from the geographic to the sinusoidal CRS

    Examples:
        >>> projector = SinusoidalProjector()
        >>> projector.project(0.0, 0.0)
        (0.0, 0.0)
        >>> projector.project(45.0, 45.0)
        (3538204.887918666, 5003777.338949354)
    """

    def __init__(
        self,
        transform: ReferenceSystemTransform | None = None,
        grid: GridConstants = MODLAND_GRID,
    ):
        """
        Initialize projector

        Args:
            transform: Transform to use (default: RasterioTransform between
                grid.geographic_crs and grid.sinusoidal_crs)
            grid: Grid constants (default: the MODIS land grid)
        """
        self.grid = grid

        if transform is None:
            transform = RasterioTransform(grid.geographic_crs, grid.sinusoidal_crs)

        self.transform = transform

    def project(self, lat: float, lon: float) -> Tuple[float, float]:
        """
        Convert latitude and longitude to sinusoidal coordinates

        Args:
            lat: Latitude in decimal degrees (-90 to 90)
            lon: Longitude in decimal degrees (-180 to 180)

        Returns:
            Sinusoidal coordinates (x, y) in meters

        Raises:
            LatLonRangeError: If lat or lon is out of bounds
        """
        validate_latlon(lat, lon)

        xs, ys = self.transform.transform([lon], [lat])
        return float(xs[0]), float(ys[0])

    def project_many(
        self, lats: Sequence[float], lons: Sequence[float]
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """
        Convert arrays of latitude and longitude to sinusoidal coordinates

        All pairs are validated before any projection work.

        Args:
            lats: Latitudes in decimal degrees
            lons: Longitudes in decimal degrees, same length as lats

        Returns:
            Tuple of (x, y) float64 arrays in meters

        Raises:
            ValueError: If lats and lons differ in length
            LatLonRangeError: On the first out-of-bounds value
        """
        lat_arr = np.asarray(lats, dtype=np.float64).ravel()
        lon_arr = np.asarray(lons, dtype=np.float64).ravel()

        if lat_arr.shape != lon_arr.shape:
            raise ValueError(
                f"lats and lons must have the same length, got {lat_arr.size} and {lon_arr.size}"
            )

        for lat, lon in zip(lat_arr, lon_arr):
            validate_latlon(float(lat), float(lon))

        if lat_arr.size == 0:
            return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64)

        xs, ys = self.transform.transform(lon_arr.tolist(), lat_arr.tolist())
        return np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64)


def validate_latlon(lat: float, lon: float) -> None:
    """
    Check geographic coordinates against their valid range

    Raises:
        LatLonRangeError: If lat is outside [-90, 90] or lon outside [-180, 180]
    """
    if not -90 <= lat <= 90:
        raise LatLonRangeError("latitude", lat)

    if not -180 <= lon <= 180:
        raise LatLonRangeError("longitude", lon)


def get_default_projector() -> SinusoidalProjector:
    """Return the shared projector for the MODIS land grid, creating it once"""
    global _default_projector

    if _default_projector is None:
        with _default_lock:
            if _default_projector is None:
                logger.debug("Initializing default sinusoidal projector")
                _default_projector = SinusoidalProjector()

    return _default_projector
