import logging

from fastapi import APIRouter, Depends, Request

from lunch_center.core.config import Settings, get_settings
from lunch_center.core.exceptions import LunchCenterError, UpstreamError
from lunch_center.core.messages import MENU_RECOMMEND_FAILED_MESSAGE
from lunch_center.core.security import limiter, rate_limit_exempt
from lunch_center.schemas.menu import MenuRecommendRequest, MenuRecommendResponse
from lunch_center.utils.llm import get_llm_model, recommend_menus


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/recommend", response_model=MenuRecommendResponse)
@limiter.limit("10/minute", exempt_when=rate_limit_exempt)
async def recommend(
    request: Request,
    req: MenuRecommendRequest,
    settings: Settings = Depends(get_settings),
) -> MenuRecommendResponse:
    """기분/키워드로 점심 메뉴 3개 추천"""
    model = get_llm_model(settings, temperature=0.8)
    try:
        return await recommend_menus(model, mood=req.mood, keyword=req.keyword)
    except LunchCenterError:
        raise
    except Exception as e:
        logger.error("[LLM] 메뉴 추천 실패: %s", e)
        raise UpstreamError(MENU_RECOMMEND_FAILED_MESSAGE) from e
