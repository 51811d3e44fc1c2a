# chefs/tests/test_geo.py
import pytest

from chefs.geo import EARTH_RADIUS_KM, central_angle, distance_km, latitude_bounds, within_radius


def test_same_point_is_zero():
    assert central_angle(40.0, -74.0, 40.0, -74.0) == 0


def test_one_degree_of_latitude():
    # one degree of arc on a 6378 km sphere
    assert distance_km(0, 0, 1, 0) == pytest.approx(111.317, abs=0.01)


def test_radius_is_angular():
    # ~8.9 km apart
    assert within_radius(40.7128, -74.0060, 40.7930, -74.0060, 10)
    assert not within_radius(40.7128, -74.0060, 40.7930, -74.0060, 5)


def test_crosses_antimeridian():
    assert within_radius(0, 179.95, 0, -179.95, 20)


def test_latitude_bounds_cover_radius():
    low, high = latitude_bounds(40.0, 111.317)
    assert low == pytest.approx(39.0, abs=1e-3)
    assert high == pytest.approx(41.0, abs=1e-3)


def test_latitude_bounds_clamped_at_poles():
    low, high = latitude_bounds(89.9, 500)
    assert high == 90.0
    assert low < 89.9


def test_earth_radius_constant():
    assert EARTH_RADIUS_KM == 6378.0
