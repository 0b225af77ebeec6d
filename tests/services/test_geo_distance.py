import pytest

from app.schemas.geo import GeoCoordinate
from app.services.geo_distance import EARTH_RADIUS_KM, distance_km

BOCHUM = GeoCoordinate(latitude=51.4818, longitude=7.2162)
ESSEN = GeoCoordinate(latitude=51.4556, longitude=7.0116)
BERLIN = GeoCoordinate(latitude=52.5200, longitude=13.4050)
MUNICH = GeoCoordinate(latitude=48.1351, longitude=11.5820)


def test_same_point_is_zero():
    """Test that the distance from a point to itself is zero"""
    assert distance_km(BOCHUM, BOCHUM) == 0.0


def test_bochum_to_essen():
    """Test the distance between Bochum and Essen (about 14.5 km)"""
    assert 14.0 <= distance_km(BOCHUM, ESSEN) <= 15.0


def test_berlin_to_munich():
    """Test the distance between Berlin and Munich (about 504 km)"""
    assert 500.0 <= distance_km(BERLIN, MUNICH) <= 510.0


def test_distance_is_symmetric():
    """Test that swapping the points does not change the distance"""
    pairs = [(BOCHUM, MUNICH), (BERLIN, ESSEN), (BOCHUM, ESSEN)]
    for a, b in pairs:
        assert distance_km(a, b) == pytest.approx(distance_km(b, a), abs=1e-5)


def test_across_equator():
    """Test that 20 degrees of latitude on one meridian is about 2222 km"""
    north = GeoCoordinate(latitude=10.0, longitude=0.0)
    south = GeoCoordinate(latitude=-10.0, longitude=0.0)

    assert 2200.0 <= distance_km(north, south) <= 2250.0


def test_across_antimeridian():
    """Test that points on both sides of the antimeridian are close"""
    west = GeoCoordinate(latitude=0.0, longitude=179.5)
    east = GeoCoordinate(latitude=0.0, longitude=-179.5)

    # one degree of longitude on the equator is about 111 km
    assert distance_km(west, east) == pytest.approx(111.19, abs=0.1)


def test_antipodal_points():
    """Test that antipodal points are half the circumference apart"""
    a = GeoCoordinate(latitude=0.0, longitude=0.0)
    b = GeoCoordinate(latitude=0.0, longitude=180.0)

    assert distance_km(a, b) == pytest.approx(3.141592653589793 * EARTH_RADIUS_KM)


def test_distance_grows_with_separation():
    """Test that the distance increases with the angular separation"""
    origin = GeoCoordinate(latitude=0.0, longitude=0.0)
    distances = [
        distance_km(origin, GeoCoordinate(latitude=float(lat), longitude=0.0))
        for lat in range(0, 91, 10)
    ]

    assert distances == sorted(distances)
    assert len(set(distances)) == len(distances)


def test_not_a_flat_approximation():
    """Test that longitude degrees shrink towards the poles"""
    equator = distance_km(
        GeoCoordinate(latitude=0.0, longitude=0.0), GeoCoordinate(latitude=0.0, longitude=1.0)
    )
    north = distance_km(
        GeoCoordinate(latitude=60.0, longitude=0.0), GeoCoordinate(latitude=60.0, longitude=1.0)
    )

    assert north == pytest.approx(equator / 2, rel=1e-3)
