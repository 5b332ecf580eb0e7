import math
from typing import Optional

from lunch_center.schemas.search import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points on Earth (km)."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(center: Coordinate, point: Coordinate) -> float:
    """중심 좌표와 장소 사이 거리(km), 소수 한 자리."""
    return round(haversine_km(center.lat, center.lng, point.lat, point.lng), 1)


def _parse_float(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(parsed):
        return None
    return parsed


def resolve_distance_km(
    raw_distance: Optional[str],
    center: Coordinate,
    x: Optional[str],
    y: Optional[str],
) -> Optional[float]:
    """
    카카오가 distance(m)를 0이 아닌 값으로 주면 그걸 km로 바꿔 쓰고,
    없거나 0이거나 숫자가 아니면 좌표로 직접 계산한다. 좌표도 못 읽으면 None.
    """
    meters = _parse_float(raw_distance)
    if meters:
        return round(meters / 1000, 1)

    lng = _parse_float(x)
    lat = _parse_float(y)
    if lng is None or lat is None:
        return None
    return distance_km(center, Coordinate(x=lng, y=lat))
