import logging
from typing import Iterable, List

from lunch_center.infrastructure.kakao.dto import KakaoPlaceDocument
from lunch_center.infrastructure.kakao.kakao_local_client import KakaoLocalClient
from lunch_center.schemas.search import Coordinate

logger = logging.getLogger(__name__)

RESTAURANT_CATEGORY_CODE = "FD6"  # 음식점
SEARCH_RADIUS_M = 1000
PAGE_SIZE = 15
MAX_PAGES = 3  # 키워드당 최대 45개
KEYWORD_SUFFIX = " 맛집"


def dedupe_by_id(records: Iterable[KakaoPlaceDocument]) -> List[KakaoPlaceDocument]:
    """카카오 장소 id 기준 중복 제거. 먼저 나온 항목이 남는다."""
    by_id = {}
    for record in records:
        by_id.setdefault(record.id, record)
    return list(by_id.values())


class PlaceSearchClient:
    """
    중심 좌표 반경 1km 안에서 키워드별로 음식점을 검색하고 결과를 합칩니다.
    키워드와 페이지는 순서대로 하나씩 요청하며, 한 번이라도 실패하면 전체 검색이 실패합니다.
    """

    def __init__(self, kakao_client: KakaoLocalClient):
        self.kakao_client = kakao_client

    async def search_one(self, center: Coordinate, keyword: str) -> List[KakaoPlaceDocument]:
        collected: List[KakaoPlaceDocument] = []
        for page in range(1, MAX_PAGES + 1):
            result = await self.kakao_client.search_keyword(
                keyword,
                x=center.x,
                y=center.y,
                radius=SEARCH_RADIUS_M,
                category_group_code=RESTAURANT_CATEGORY_CODE,
                page=page,
                size=PAGE_SIZE,
            )
            if not result.documents:
                break

            collected.extend(result.documents)

            if result.is_end:  # 마지막 페이지면 중단
                break

        logger.debug("[SEARCH] '%s' -> %d건", keyword, len(collected))
        return dedupe_by_id(collected)

    async def search_all(self, center: Coordinate, keywords: List[str]) -> List[KakaoPlaceDocument]:
        merged: List[KakaoPlaceDocument] = []
        for keyword in keywords:
            merged.extend(await self.search_one(center, f"{keyword}{KEYWORD_SUFFIX}"))

        places = dedupe_by_id(merged)
        logger.info("[SEARCH] 키워드 %d개 -> 장소 %d곳", len(keywords), len(places))
        return places
