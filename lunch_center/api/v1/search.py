from typing import Dict

from fastapi import APIRouter, Depends, Request

from lunch_center.api.deps import get_place_search_service
from lunch_center.core.security import limiter, rate_limit_exempt
from lunch_center.schemas.search import SearchPlacesRequest, SearchPlacesResponse
from lunch_center.services.search_service import PlaceSearchService


router = APIRouter()


@router.get("/health_check")
@limiter.limit("30/minute", exempt_when=rate_limit_exempt)
async def health(request: Request) -> Dict[str, str]:
    return {"status": "ok"}


@router.post("/search-places", response_model=SearchPlacesResponse)
@limiter.limit("20/minute", exempt_when=rate_limit_exempt)
async def search_places(
    request: Request,
    req: SearchPlacesRequest,
    search_service: PlaceSearchService = Depends(get_place_search_service),
) -> SearchPlacesResponse:
    """주소/지역 + 오늘 점심에 대한 한 줄로 근처 식당 검색"""
    return await search_service.search(req)
