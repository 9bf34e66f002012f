"""地理計算ユーティリティ"""

from math import asin, cos, radians, sin, sqrt

# 地球の平均半径（km）
EARTH_RADIUS_KM = 6371.0


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    2点間の大円距離（km）をハバーサイン公式で計算

    入力は10進数の度数を想定し、範囲チェックは行わない

    Args:
        lat1: 地点1の緯度
        lon1: 地点1の経度
        lat2: 地点2の緯度
        lon2: 地点2の経度

    Returns:
        float: 距離（km）
    """
    phi1 = radians(lat1)
    phi2 = radians(lat2)
    dphi = phi2 - phi1
    dlambda = radians(lon2) - radians(lon1)

    h = sin(dphi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(dlambda / 2) ** 2

    # 対蹠点付近の丸め誤差でasinの定義域を外れないようにする
    return 2 * EARTH_RADIUS_KM * asin(min(1.0, sqrt(h)))
