"""
Spatial query utilities for GeoJSON-based queries

Supports:
- GeoJSON polygon/multipolygon queries (dict, string, or file)
- Shapely geometry support
- GeoDataFrame support (reprojected to WGS84)

Tiles are resolved from geometry vertices only.
"""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

from shapely.errors import ShapelyError
from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry, BaseMultipartGeometry
from shapely.geometry.polygon import Polygon

from modland.core.api import modland_tiles_for_polygon
from modland.core.exceptions import GeometryError
from modland.grid.tile_grid import ModlandTileGrid
from modland.projection.projector import SinusoidalProjector

if TYPE_CHECKING:
    import geopandas as gpd

logger = logging.getLogger(__name__)

GeometryInput = Union[dict, BaseGeometry, str, Path]


def modland_tiles_for_geometry(
    geometry: GeometryInput,
    projector: SinusoidalProjector | None = None,
    tile_grid: ModlandTileGrid | None = None,
) -> set[str]:
    """
    Find the MODIS land tiles holding the vertices of a geometry

    Args:
        geometry: GeoJSON dict, GeoJSON string, Shapely geometry, or path to
            GeoJSON file, with WGS84 (lon, lat) coordinates
        projector: Projector instance (default: shared Rasterio-backed projector)
        tile_grid: Tile grid instance (default: MODIS land grid)

    Returns:
        Set of tile IDs

    Examples:
        >>> geojson = {
        ...     "type": "Polygon",
        ...     "coordinates": [[[-118.0, 34.0], [-117.0, 34.5], [-117.5, 35.0], [-118.0, 34.0]]]
        ... }
        >>> modland_tiles_for_geometry(geojson)
        {'h08v05'}
    """
    vertices = geometry_vertices(geometry)
    return modland_tiles_for_polygon(vertices, projector=projector, tile_grid=tile_grid)


def modland_tiles_for_geodataframe(
    gdf: "gpd.GeoDataFrame",
    projector: SinusoidalProjector | None = None,
    tile_grid: ModlandTileGrid | None = None,
) -> set[str]:
    """
    Find the MODIS land tiles holding the vertices of every geometry in a frame

    Frames in another CRS are reprojected to EPSG:4326 first. A frame with no
    CRS is taken to be WGS84 already.

    Args:
        gdf: GeoDataFrame (or GeoSeries) of geometries
        projector: Projector instance (default: shared Rasterio-backed projector)
        tile_grid: Tile grid instance (default: MODIS land grid)

    Returns:
        Union of the tile sets of all geometries
    """
    if gdf.crs is not None and gdf.crs.to_epsg() != 4326:
        logger.debug("Reprojecting %d geometries from %s to EPSG:4326", len(gdf), gdf.crs)
        gdf = gdf.to_crs(epsg=4326)

    tiles: set[str] = set()
    for geom in gdf.geometry:
        if geom is None or geom.is_empty:
            continue
        tiles |= modland_tiles_for_polygon(
            _collect_vertices(geom), projector=projector, tile_grid=tile_grid
        )

    return tiles


def geometry_vertices(geometry: GeometryInput) -> list[tuple[float, float]]:
    """
    Extract the (lon, lat) vertices of a geometry

    Polygons yield their exterior ring followed by interior rings; multipart
    geometries yield every part in order.

    Args:
        geometry: GeoJSON dict, GeoJSON string, Shapely geometry, or path to GeoJSON file

    Returns:
        List of (lon, lat) pairs
    """
    geom = _parse_geometry(geometry)
    vertices = _collect_vertices(geom)
    logger.debug("Extracted %d vertices from %s", len(vertices), geom.geom_type)
    return vertices


def _collect_vertices(geom: BaseGeometry) -> list[tuple[float, float]]:
    """Flatten a Shapely geometry into (x, y) vertex pairs"""
    if geom.is_empty:
        return []

    if isinstance(geom, Polygon):
        rings = [geom.exterior, *geom.interiors]
        return [(c[0], c[1]) for ring in rings for c in ring.coords]

    if isinstance(geom, BaseMultipartGeometry):
        return [v for part in geom.geoms for v in _collect_vertices(part)]

    return [(c[0], c[1]) for c in geom.coords]


def _parse_geometry(geometry: GeometryInput) -> BaseGeometry:
    """
    Parse geometry from various input formats

    Args:
        geometry: GeoJSON dict, GeoJSON string, Shapely geometry, or path to GeoJSON file

    Returns:
        Shapely geometry object
    """
    # Already a Shapely geometry
    if isinstance(geometry, BaseGeometry):
        return geometry

    # Inline GeoJSON text
    if isinstance(geometry, str) and geometry.lstrip().startswith("{"):
        try:
            geojson = json.loads(geometry)
        except json.JSONDecodeError as e:
            raise GeometryError(f"Invalid GeoJSON text: {e}") from e
        return _geojson_to_geometry(geojson)

    # Path to GeoJSON file
    if isinstance(geometry, (str, Path)):
        path = Path(geometry)
        if not path.exists():
            raise FileNotFoundError(f"GeoJSON file not found: {geometry}")
        try:
            with open(path, encoding="utf-8") as f:
                geojson = json.load(f)
        except FileNotFoundError:
            raise
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise GeometryError(f"Invalid GeoJSON in {path}: {e}") from e
        except OSError as e:
            raise GeometryError(f"Cannot read GeoJSON file {path}: {e}") from e
        return _geojson_to_geometry(geojson)

    # GeoJSON dict
    if isinstance(geometry, dict):
        return _geojson_to_geometry(geometry)

    raise TypeError(f"Unsupported geometry type: {type(geometry)}")


def _geojson_to_geometry(geojson: dict) -> BaseGeometry:
    """
    Convert GeoJSON dict to Shapely geometry

    Handles Feature, FeatureCollection and raw geometry types. A
    FeatureCollection becomes a GeometryCollection of its features.
    """
    try:
        if geojson.get("type") == "FeatureCollection":
            features = geojson.get("features", [])
            if not features:
                raise GeometryError("Empty FeatureCollection")
            return shape(
                {
                    "type": "GeometryCollection",
                    "geometries": [f["geometry"] for f in features],
                }
            )

        if geojson.get("type") == "Feature":
            return shape(geojson["geometry"])

        return shape(geojson)
    except (KeyError, TypeError, ValueError, AttributeError, ShapelyError) as e:
        raise GeometryError(f"Invalid GeoJSON geometry: {e}") from e
