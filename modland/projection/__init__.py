"""
Modland Projection Module

WGS84 to MODIS sinusoidal projection.
"""

from modland.projection.base import ReferenceSystemTransform
from modland.projection.projector import (
    SinusoidalProjector,
    get_default_projector,
    validate_latlon,
)
from modland.projection.transform import RasterioTransform

__all__ = [
    "RasterioTransform",
    "ReferenceSystemTransform",
    "SinusoidalProjector",
    "get_default_projector",
    "validate_latlon",
]
