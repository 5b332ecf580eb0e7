from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from lunch_center.api.deps import get_db
from lunch_center.core.security import limiter, rate_limit_exempt
from lunch_center.schemas.recommendation import (
    RecommendationCreate,
    RecommendationLikeRequest,
    RecommendationResponse,
    RecommendationSort,
)
from lunch_center.services.recommendation_service import (
    create_recommendation,
    like_recommendation,
    list_recommendations,
)


router = APIRouter()


@router.get("/frommer-recommendations", response_model=List[RecommendationResponse])
@limiter.limit("60/minute", exempt_when=rate_limit_exempt)
async def get_recommendations(
    request: Request,
    sort: RecommendationSort = "latest",
    category: Optional[str] = None,
    db: Session = Depends(get_db),
) -> List[RecommendationResponse]:
    """추천 식당 전체 목록 (최신순 / 좋아요순)"""
    rows = list_recommendations(db, sort=sort, category=category)
    return [RecommendationResponse.model_validate(row) for row in rows]


@router.post("/frommer-recommendations", response_model=RecommendationResponse, status_code=201)
@limiter.limit("30/minute", exempt_when=rate_limit_exempt)
async def post_recommendation(
    request: Request,
    data: RecommendationCreate,
    db: Session = Depends(get_db),
) -> RecommendationResponse:
    """새 추천 식당 등록"""
    return RecommendationResponse.model_validate(create_recommendation(db, data))


@router.post("/frommer-recommendations/like", response_model=RecommendationResponse)
@limiter.limit("60/minute", exempt_when=rate_limit_exempt)
async def like(
    request: Request,
    data: RecommendationLikeRequest,
    db: Session = Depends(get_db),
) -> RecommendationResponse:
    """좋아요 +1 (delta=-1이면 취소)"""
    return RecommendationResponse.model_validate(like_recommendation(db, data.id, data.delta))
