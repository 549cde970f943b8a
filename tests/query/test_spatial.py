"""
Tests for geometry-based tile queries
"""

import json

import geopandas as gpd
import pytest
from shapely.geometry import MultiPolygon, Point, Polygon

from modland.core.exceptions import GeometryError, LatLonRangeError
from modland.query.spatial import (
    geometry_vertices,
    modland_tiles_for_geodataframe,
    modland_tiles_for_geometry,
)


class TestGeometryVertices:
    """Test vertex extraction"""

    def test_geojson_polygon(self, sample_polygon):
        vertices = geometry_vertices(sample_polygon)
        assert vertices == [(-118.0, 34.0), (-117.0, 34.5), (-117.5, 35.0), (-118.0, 34.0)]

    def test_feature(self, sample_polygon):
        feature = {"type": "Feature", "properties": {}, "geometry": sample_polygon}
        assert geometry_vertices(feature) == geometry_vertices(sample_polygon)

    def test_feature_collection(self, sample_polygon):
        collection = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "properties": {}, "geometry": sample_polygon},
                {"type": "Feature", "properties": {}, "geometry": {"type": "Point", "coordinates": [2.35, 48.86]}},
            ],
        }
        vertices = geometry_vertices(collection)
        assert len(vertices) == 5
        assert vertices[-1] == (2.35, 48.86)

    def test_polygon_with_hole(self):
        shell = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
        hole = [(2.0, 2.0), (3.0, 2.0), (3.0, 3.0)]
        vertices = geometry_vertices(Polygon(shell, [hole]))
        # Exterior ring (closed) then interior ring (closed)
        assert len(vertices) == 5 + 4
        assert vertices[0] == (0.0, 0.0)
        assert vertices[5] == (2.0, 2.0)

    def test_multipolygon(self):
        a = Polygon([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)])
        b = Polygon([(45.0, 45.0), (46.0, 45.0), (46.0, 46.0)])
        vertices = geometry_vertices(MultiPolygon([a, b]))
        assert len(vertices) == 8
        assert (45.0, 45.0) in vertices

    def test_point(self):
        assert geometry_vertices(Point(1.0, 2.0)) == [(1.0, 2.0)]

    def test_drops_z(self):
        geojson = {
            "type": "Polygon",
            "coordinates": [[[-118.0, 34.0, 10.0], [-117.0, 34.5, 20.0], [-117.5, 35.0, 5.0], [-118.0, 34.0, 10.0]]],
        }
        assert geometry_vertices(geojson)[1] == (-117.0, 34.5)

    def test_empty_geometry(self):
        assert geometry_vertices(Polygon()) == []

    def test_geojson_string(self, sample_polygon):
        assert geometry_vertices(json.dumps(sample_polygon)) == geometry_vertices(sample_polygon)

    def test_geojson_file(self, tmp_path, sample_polygon):
        path = tmp_path / "area.geojson"
        path.write_text(json.dumps(sample_polygon))
        assert geometry_vertices(path) == geometry_vertices(sample_polygon)
        assert geometry_vertices(str(path)) == geometry_vertices(sample_polygon)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            geometry_vertices(tmp_path / "missing.geojson")

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "broken.geojson"
        path.write_text("not json")
        with pytest.raises(GeometryError):
            geometry_vertices(path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "bad.geojson"
        path.write_bytes(b"\xff\xfe{bad")
        with pytest.raises(GeometryError):
            geometry_vertices(path)

    def test_directory_path(self, tmp_path):
        path = tmp_path / "dir.geojson"
        path.mkdir()
        with pytest.raises(GeometryError):
            geometry_vertices(path)

    def test_invalid_geojson_text(self):
        with pytest.raises(GeometryError):
            geometry_vertices("{not json")

    def test_unknown_geometry_type(self):
        with pytest.raises(GeometryError):
            geometry_vertices({"type": "Hexagon", "coordinates": []})

    def test_feature_without_geometry(self):
        with pytest.raises(GeometryError):
            geometry_vertices({"type": "Feature", "properties": {}})

    def test_empty_feature_collection(self):
        with pytest.raises(GeometryError):
            geometry_vertices({"type": "FeatureCollection", "features": []})

    def test_unsupported_input(self):
        with pytest.raises(TypeError):
            geometry_vertices(42)


class TestTilesForGeometry:
    """Test modland_tiles_for_geometry"""

    def test_polygon(self, sample_polygon):
        assert modland_tiles_for_geometry(sample_polygon) == {"h08v05"}

    def test_spanning_tiles(self, fake_projector):
        poly = Polygon([(0.5, 0.5), (45.0, 45.0), (0.5, 45.0)])
        tiles = modland_tiles_for_geometry(poly, projector=fake_projector)
        assert tiles == {"h18v08", "h21v04", "h18v04"}

    def test_out_of_range_vertex(self, fake_projector):
        poly = Polygon([(0.0, 0.0), (190.0, 0.0), (0.0, 10.0)])
        with pytest.raises(LatLonRangeError):
            modland_tiles_for_geometry(poly, projector=fake_projector)


class TestTilesForGeoDataFrame:
    """Test modland_tiles_for_geodataframe"""

    @pytest.fixture
    def gdf(self):
        return gpd.GeoDataFrame(
            {"name": ["los_angeles", "origin"]},
            geometry=[
                Polygon([(-118.0, 34.0), (-117.0, 34.5), (-117.5, 35.0)]),
                Point(0.5, 0.5),
            ],
            crs="EPSG:4326",
        )

    def test_wgs84_frame(self, gdf, fake_projector):
        tiles = modland_tiles_for_geodataframe(gdf, projector=fake_projector)
        assert tiles == {"h08v05", "h18v08"}

    def test_reprojects_frame(self, gdf, fake_projector):
        mercator = gdf.to_crs(epsg=3857)
        tiles = modland_tiles_for_geodataframe(mercator, projector=fake_projector)
        assert tiles == {"h08v05", "h18v08"}

    def test_frame_without_crs(self, fake_projector):
        frame = gpd.GeoDataFrame(geometry=[Point(45.5, 45.5)])
        assert modland_tiles_for_geodataframe(frame, projector=fake_projector) == {"h21v04"}

    def test_skips_missing_geometries(self, fake_projector):
        frame = gpd.GeoDataFrame(geometry=[None, Point(45.5, 45.5)], crs="EPSG:4326")
        assert modland_tiles_for_geodataframe(frame, projector=fake_projector) == {"h21v04"}
