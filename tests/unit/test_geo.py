"""大円距離計算のテスト"""

import math

import pytest

from property_search.shared.utils.geo import EARTH_RADIUS_KM, distance_km

POINTS = [
    (0.0, 0.0),
    (24.5854, 73.7125),
    (-33.8688, 151.2093),
    (89.9, -179.9),
]


@pytest.mark.parametrize("lat,lon", POINTS)
def test_same_point_is_zero(lat: float, lon: float) -> None:
    """同一地点の距離は0"""
    assert distance_km(lat, lon, lat, lon) == 0


@pytest.mark.parametrize("a", POINTS)
@pytest.mark.parametrize("b", POINTS)
def test_distance_is_symmetric(a: tuple[float, float], b: tuple[float, float]) -> None:
    """距離は2点の順序によらない"""
    assert distance_km(*a, *b) == distance_km(*b, *a)


def test_one_degree_of_latitude() -> None:
    """緯度1度はおよそ111.19km"""
    expected = 2 * math.pi * EARTH_RADIUS_KM / 360
    assert distance_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(expected, rel=1e-9)


def test_antipodal_points() -> None:
    """対蹠点の距離は地球の半周"""
    assert distance_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_udaipur_to_property() -> None:
    """ウダイプール中心から市内の物件までは数km"""
    distance = distance_km(24.5854, 73.7125, 24.58145726, 73.68223671)
    assert 3.0 < distance < 3.2
