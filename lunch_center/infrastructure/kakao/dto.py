from pydantic import BaseModel
from typing import Optional, List


class KakaoSearchMeta(BaseModel):
    total_count: Optional[int] = None
    pageable_count: Optional[int] = None
    is_end: bool = False


class KakaoPlaceDocument(BaseModel):
    id: str
    place_name: str = ""
    category_name: str = ""
    category_group_code: Optional[str] = None
    category_group_name: Optional[str] = None
    phone: Optional[str] = None
    address_name: Optional[str] = None
    road_address_name: Optional[str] = None
    x: Optional[str] = None
    y: Optional[str] = None
    place_url: Optional[str] = None
    distance: Optional[str] = None


class KakaoKeywordSearchResponse(BaseModel):
    documents: List[KakaoPlaceDocument] = []
    meta: Optional[KakaoSearchMeta] = None

    @property
    def is_end(self) -> bool:
        return bool(self.meta and self.meta.is_end)


class KakaoAddressDocument(BaseModel):
    address_name: Optional[str] = None
    address_type: Optional[str] = None
    x: Optional[str] = None
    y: Optional[str] = None


class KakaoAddressSearchResponse(BaseModel):
    documents: List[KakaoAddressDocument] = []
    meta: Optional[KakaoSearchMeta] = None
