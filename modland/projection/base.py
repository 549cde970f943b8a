"""
Reference System Transform Protocol

Capability used by the projector to move points between two coordinate
reference systems. The concrete geodesy engine is swappable.
"""

from typing import Protocol, Sequence, Tuple


class ReferenceSystemTransform(Protocol):
    """
    Point transform between a source and a destination CRS

    Coordinates follow the traditional GIS axis order: (x, y), i.e.
    (longitude, latitude) for geographic systems.
    """

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
        ...
