"""
Modland Query Module

Tile lookup for geometries (GeoJSON, Shapely, GeoDataFrame).
"""

from modland.query.spatial import (
    geometry_vertices,
    modland_tiles_for_geodataframe,
    modland_tiles_for_geometry,
)

__all__ = [
    "geometry_vertices",
    "modland_tiles_for_geodataframe",
    "modland_tiles_for_geometry",
]
