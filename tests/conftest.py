"""
Modland Test Configuration

Shared pytest fixtures for all tests.
"""

import math

import pytest

from modland.grid.tile_grid import ModlandTileGrid
from modland.projection.projector import SinusoidalProjector

SPHERE_RADIUS = 6371007.181


class SphereSinusoidalTransform:
    """Closed-form sinusoidal projection on the MODIS sphere, recording calls"""

    def __init__(self):
        self.calls = []

    def transform(self, xs, ys):
        self.calls.append((list(xs), list(ys)))
        out_xs = [
            SPHERE_RADIUS * math.radians(lon) * math.cos(math.radians(lat))
            for lon, lat in zip(xs, ys)
        ]
        out_ys = [SPHERE_RADIUS * math.radians(lat) for lat in ys]
        return out_xs, out_ys


@pytest.fixture
def sphere_transform():
    """Pure-math transform standing in for the geodesy library"""
    return SphereSinusoidalTransform()


@pytest.fixture
def fake_projector(sphere_transform):
    """Projector backed by the closed-form transform"""
    return SinusoidalProjector(transform=sphere_transform)


@pytest.fixture
def projector():
    """Projector backed by Rasterio"""
    return SinusoidalProjector()


@pytest.fixture
def grid():
    """MODIS land tile grid"""
    return ModlandTileGrid()


@pytest.fixture
def sample_polygon():
    """GeoJSON polygon around Los Angeles, (lon, lat) order"""
    return {
        "type": "Polygon",
        "coordinates": [
            [[-118.0, 34.0], [-117.0, 34.5], [-117.5, 35.0], [-118.0, 34.0]]
        ],
    }
