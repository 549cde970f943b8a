"""
Reference system transform using Rasterio (GDAL/PROJ)
"""

import logging
from typing import Sequence, Tuple

from rasterio.crs import CRS
from rasterio.warp import transform

logger = logging.getLogger(__name__)


class RasterioTransform:
    """
    Forward point transform backed by rasterio.warp.transform

    Attributes:
        src_crs: Source coordinate reference system
        dst_crs: Destination coordinate reference system

    Examples:
        >>> from modland.grid.constants import SINUSOIDAL, WGS84
        >>> t = RasterioTransform(WGS84, SINUSOIDAL)
        >>> t.transform([45.0], [45.0])
        ([3538204.887918666], [5003777.338949354])
    """

    def __init__(self, src_crs: str | CRS, dst_crs: str | CRS):
        """
        Build CRS descriptors for both ends of the transform

        Args:
            src_crs: Source CRS (PROJ string, "EPSG:XXXX", or rasterio CRS)
            dst_crs: Destination CRS (PROJ string, "EPSG:XXXX", or rasterio CRS)

        Raises:
            rasterio.errors.CRSError: If either CRS cannot be parsed
        """
        self.src_crs = src_crs if isinstance(src_crs, CRS) else CRS.from_string(src_crs)
        self.dst_crs = dst_crs if isinstance(dst_crs, CRS) else CRS.from_string(dst_crs)
        logger.debug("Created transform %s -> %s", self.src_crs, self.dst_crs)

    def transform(
        self, xs: Sequence[float], ys: Sequence[float]
    ) -> Tuple[Sequence[float], Sequence[float]]:
        """
        Transform coordinates from the source to the destination CRS

        Args:
            xs: X coordinates (longitudes) in the source CRS
            ys: Y coordinates (latitudes) in the source CRS

        Returns:
            Tuple of (xs, ys) in the destination CRS
        """
        out_xs, out_ys = transform(self.src_crs, self.dst_crs, list(xs), list(ys))
        return out_xs, out_ys
