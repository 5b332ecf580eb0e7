from typing import List, Optional

from pydantic import BaseModel, Field


class MenuRecommendRequest(BaseModel):
    mood: Optional[str] = Field(None, max_length=200, description="기분 또는 상황")
    keyword: Optional[str] = Field(None, max_length=100, description="원하는 키워드")


class MenuItem(BaseModel):
    name: str = Field(..., description="메뉴명")
    reason: str = Field("", description="추천 이유")


class MenuRecommendResponse(BaseModel):
    menus: List[MenuItem] = Field(default_factory=list)
