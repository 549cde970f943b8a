"""
Tests for exceptions
"""

import pytest

from modland.core.exceptions import (
    GeometryError,
    LatLonRangeError,
    ModlandError,
    RangeError,
    SinusoidalRangeError,
    TileIdError,
    TileIndexError,
)


class TestExceptions:
    """Test exception hierarchy"""

    def test_base_exception(self):
        """Test ModlandError"""
        with pytest.raises(ModlandError):
            raise ModlandError("Test error")

    def test_range_errors(self):
        """Test both range errors inherit from RangeError"""
        with pytest.raises(RangeError):
            raise LatLonRangeError("latitude", 91.0)

        with pytest.raises(RangeError):
            raise SinusoidalRangeError("x", 1e9)

        with pytest.raises(ModlandError):
            raise RangeError("x", 1.0)

    def test_range_error_attributes(self):
        err = LatLonRangeError("longitude", -181.0)
        assert err.name == "longitude"
        assert err.value == -181.0
        assert str(err) == "longitude (-181.0) out of bounds"

    def test_range_error_custom_message(self):
        err = SinusoidalRangeError("y", 2.5, "sinusoidal y coordinate (2.5) out of bounds")
        assert str(err) == "sinusoidal y coordinate (2.5) out of bounds"
        assert err.value == 2.5

    def test_tile_errors(self):
        """Test tile errors inherit from ModlandError"""
        with pytest.raises(ModlandError):
            raise TileIndexError("Index outside grid")

        with pytest.raises(ModlandError):
            raise TileIdError("Bad tile")

    def test_geometry_error(self):
        """Test GeometryError inherits from ModlandError"""
        with pytest.raises(ModlandError):
            raise GeometryError("Bad geometry")

    def test_range_errors_are_distinct(self):
        assert not issubclass(LatLonRangeError, SinusoidalRangeError)
        assert not issubclass(SinusoidalRangeError, LatLonRangeError)
