"""
Testes para Value Objects (Coordinates)
"""
import pytest

from domain.value_objects.coordinates import Coordinates


class TestCoordinates:
    """Testes para Value Object Coordinates"""

    def test_valid_coordinates(self):
        coords = Coordinates(latitude=-22.9194, longitude=-42.8186)
        assert coords.latitude == -22.9194
        assert coords.longitude == -42.8186

    def test_boundaries_are_valid(self):
        Coordinates(latitude=90, longitude=180)
        Coordinates(latitude=-90, longitude=-180)

    def test_invalid_latitude(self):
        with pytest.raises(ValueError, match="Latitude inválida"):
            Coordinates(latitude=90.1, longitude=0.0)

    def test_invalid_longitude(self):
        with pytest.raises(ValueError, match="Longitude inválida"):
            Coordinates(latitude=0.0, longitude=-180.5)

    def test_nan_is_invalid(self):
        with pytest.raises(ValueError):
            Coordinates(latitude=float("nan"), longitude=0.0)

    def test_immutable(self):
        coords = Coordinates(latitude=-22.9, longitude=-42.8)
        with pytest.raises(AttributeError):
            coords.latitude = 0

    def test_to_tuple(self):
        assert Coordinates(latitude=-22.9, longitude=-42.8).to_tuple() == (-22.9, -42.8)

    def test_str(self):
        assert str(Coordinates(latitude=-22.9194, longitude=-42.8186)) == "22.9194°S, 42.8186°W"

    def test_query_params(self):
        assert Coordinates(-22.9, -42.8).to_query_params() == {'lat': -22.9, 'lon': -42.8}

    @pytest.mark.parametrize("lat,lon,expected", [
        (-22.9, -42.8, True),
        (90, 180, True),
        (91, 0, False),
        (0, -181, False),
        (float("inf"), 0, False),
        (0, float("nan"), False),
    ])
    def test_is_valid(self, lat, lon, expected):
        assert Coordinates.is_valid(lat, lon) is expected
