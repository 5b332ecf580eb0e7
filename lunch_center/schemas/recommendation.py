from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecommendationCreate(BaseModel):
    """추천 식당 등록 스키마. 필수 값 검사는 서비스에서 trim 후 처리한다."""

    name: Optional[str] = Field(None, max_length=255, description="식당 이름")
    address: Optional[str] = Field(None, max_length=255, description="주소")
    reason: Optional[str] = Field(None, description="추천 이유")
    kakao_url: Optional[str] = Field(None, alias="kakaoUrl", max_length=500, description="카카오맵 링크")
    categories: List[str] = Field(default_factory=list, description="카테고리 목록")

    model_config = ConfigDict(populate_by_name=True)


class RecommendationLikeRequest(BaseModel):
    """좋아요 요청. delta가 -1이면 취소, 그 외에는 +1."""

    id: Any = Field(..., description="추천 식당 ID")
    delta: Optional[int] = Field(None, description="-1이면 좋아요 취소")


class RecommendationResponse(BaseModel):
    id: int
    name: str
    address: str
    reason: str
    kakao_url: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    likes: int = 0

    model_config = ConfigDict(from_attributes=True)


RecommendationSort = Literal["latest", "likes"]
