"""Common dependency functions: settings, database session and search pipeline wiring."""

from functools import partial
from typing import Generator, Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from lunch_center.core.config import Settings, get_settings
from lunch_center.core.exceptions import ConfigurationError
from lunch_center.core.messages import KAKAO_KEY_MISSING_MESSAGE
from lunch_center.infrastructure.kakao.kakao_local_client import KakaoLocalClient
from lunch_center.services.geocoder import Geocoder
from lunch_center.services.keyword_builder import KeywordBuilder, KeywordGenerator
from lunch_center.services.place_search import PlaceSearchClient
from lunch_center.services.search_service import PlaceSearchService
from lunch_center.utils.llm import generate_search_keywords, get_llm_model


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency function to get database session from the app's session factory."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_kakao_client(settings: Settings = Depends(get_settings)) -> KakaoLocalClient:
    if not settings.KAKAO_REST_API_KEY:
        raise ConfigurationError(KAKAO_KEY_MISSING_MESSAGE)
    return KakaoLocalClient(
        api_key=settings.KAKAO_REST_API_KEY,
        timeout=settings.KAKAO_TIMEOUT_SECONDS,
    )


def get_keyword_generator(settings: Settings = Depends(get_settings)) -> Optional[KeywordGenerator]:
    """OPENAI_API_KEY가 없으면 None: 키워드 빌더가 LLM 단계를 건너뛴다."""
    if not settings.llm_enabled:
        return None
    return partial(generate_search_keywords, model=get_llm_model(settings))


def get_place_search_service(
    kakao_client: KakaoLocalClient = Depends(get_kakao_client),
    keyword_generator: Optional[KeywordGenerator] = Depends(get_keyword_generator),
) -> PlaceSearchService:
    return PlaceSearchService(
        geocoder=Geocoder(kakao_client),
        keyword_builder=KeywordBuilder(keyword_generator),
        place_search=PlaceSearchClient(kakao_client),
    )
