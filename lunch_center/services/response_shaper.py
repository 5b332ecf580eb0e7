from typing import Iterable, Optional

from lunch_center.infrastructure.kakao.dto import KakaoPlaceDocument
from lunch_center.schemas.search import (
    CenterResponse,
    Coordinate,
    PlaceResponse,
    SearchPlacesResponse,
)
from lunch_center.services.distance import resolve_distance_km


def _to_float(value: Optional[str]) -> Optional[float]:
    try:
        return float(value) if value not in (None, "") else None
    except ValueError:
        return None


def shape_place(record: KakaoPlaceDocument, center: Coordinate) -> PlaceResponse:
    # 주소는 도로명 주소 우선, 없으면 지번 주소 사용
    address = record.road_address_name or record.address_name
    return PlaceResponse(
        id=record.id,
        name=record.place_name,
        category=record.category_name,
        address=address,
        link=record.place_url,
        map_url=record.place_url,
        distance_km=resolve_distance_km(record.distance, center, record.x, record.y),
        lat=_to_float(record.y),
        lng=_to_float(record.x),
    )


def shape_search_result(
    center: Coordinate, records: Iterable[KakaoPlaceDocument]
) -> SearchPlacesResponse:
    return SearchPlacesResponse(
        center=CenterResponse(lat=center.lat, lng=center.lng),
        places=[shape_place(record, center) for record in records],
    )
