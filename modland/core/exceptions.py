"""
Modland Exceptions

Exception hierarchy for error handling.
"""


class ModlandError(Exception):
    """Base exception for Modland"""

    pass


class RangeError(ModlandError):
    """
    Coordinate outside its valid range

    Attributes:
        name: Name of the offending coordinate (e.g., "latitude")
        value: The offending value
    """

    def __init__(self, name: str, value: float, message: str | None = None):
        self.name = name
        self.value = value
        super().__init__(message or f"{name} ({value}) out of bounds")


class LatLonRangeError(RangeError):
    """Latitude or longitude outside the geographic range"""

    pass


class SinusoidalRangeError(RangeError):
    """Sinusoidal x or y outside the projection extent"""

    pass


class TileIndexError(ModlandError):
    """Computed tile index fell outside the grid"""

    pass


class TileIdError(ModlandError):
    """Tile identifier is malformed or outside the grid"""

    pass


class GeometryError(ModlandError):
    """Geometry could not be parsed into vertices"""

    pass
