from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """경도(x), 위도(y) 한 쌍. 카카오 API와 같은 순서를 쓴다."""

    x: float = Field(..., description="경도 (longitude)")
    y: float = Field(..., description="위도 (latitude)")

    model_config = ConfigDict(frozen=True)

    @property
    def lng(self) -> float:
        return self.x

    @property
    def lat(self) -> float:
        return self.y


class SearchPlacesRequest(BaseModel):
    """맛집 검색 요청. 빈 값 검사는 서비스에서 한국어 안내 메시지와 함께 처리한다."""

    free_text: Optional[str] = Field(None, alias="freeText", description="오늘 점심에 대한 한 줄")
    location_keyword: Optional[str] = Field(
        None, alias="locationKeyword", description="주소 또는 지역명 (예: 강남역)"
    )

    model_config = ConfigDict(populate_by_name=True)


class CenterResponse(BaseModel):
    lat: float
    lng: float


class PlaceResponse(BaseModel):
    id: str
    name: str
    category: str
    address: Optional[str] = None
    link: Optional[str] = None
    map_url: Optional[str] = Field(None, serialization_alias="mapUrl")
    distance_km: Optional[float] = Field(None, serialization_alias="distanceKm")
    lat: Optional[float] = None
    lng: Optional[float] = None


class SearchPlacesResponse(BaseModel):
    center: CenterResponse
    places: List[PlaceResponse]
