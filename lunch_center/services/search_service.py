import logging

import httpx
from pydantic import ValidationError

from lunch_center.core.exceptions import (
    InvalidRequestError,
    LocationNotFoundError,
    UpstreamError,
)
from lunch_center.core.messages import (
    FREE_TEXT_REQUIRED_MESSAGE,
    LOCATION_NOT_FOUND_MESSAGE,
    LOCATION_REQUIRED_MESSAGE,
    SEARCH_FAILED_MESSAGE,
)
from lunch_center.schemas.search import SearchPlacesRequest, SearchPlacesResponse
from lunch_center.services.geocoder import Geocoder
from lunch_center.services.keyword_builder import KeywordBuilder
from lunch_center.services.place_search import PlaceSearchClient
from lunch_center.services.response_shaper import shape_search_result

logger = logging.getLogger(__name__)


class PlaceSearchService:
    """주소/지역 + 자유 텍스트로 근처 식당 목록을 만드는 서비스 클래스입니다."""

    def __init__(
        self,
        geocoder: Geocoder,
        keyword_builder: KeywordBuilder,
        place_search: PlaceSearchClient,
    ):
        self.geocoder = geocoder
        self.keyword_builder = keyword_builder
        self.place_search = place_search

    @staticmethod
    def validate(req: SearchPlacesRequest) -> tuple[str, str]:
        location = (req.location_keyword or "").strip()
        if not location:
            raise InvalidRequestError(LOCATION_REQUIRED_MESSAGE)
        free_text = (req.free_text or "").strip()
        if not free_text:
            raise InvalidRequestError(FREE_TEXT_REQUIRED_MESSAGE)
        return location, free_text

    async def search(self, req: SearchPlacesRequest) -> SearchPlacesResponse:
        location, free_text = self.validate(req)

        try:
            # 1) 주소/지역 -> 좌표
            center = await self.geocoder.resolve(location)
            if center is None:
                raise LocationNotFoundError(LOCATION_NOT_FOUND_MESSAGE)

            # 2) 자유 텍스트 -> 검색 키워드
            keywords = await self.keyword_builder.build_search_keywords(free_text)

            # 3) 키워드별 식당 검색 + 중복 제거
            records = await self.place_search.search_all(center, keywords)
        except httpx.HTTPError as e:
            logger.error("[SEARCH] 카카오 요청 실패: %s", e)
            raise UpstreamError(str(e) or SEARCH_FAILED_MESSAGE) from e
        except ValidationError as e:
            logger.error("[SEARCH] 카카오 응답 형식 오류: %s", e)
            raise UpstreamError(SEARCH_FAILED_MESSAGE) from e

        # 4) 프론트에 넘길 형태로 변환
        return shape_search_result(center, records)
