import logging
import math
from typing import Optional

from lunch_center.infrastructure.kakao.kakao_local_client import KakaoLocalClient
from lunch_center.schemas.search import Coordinate

logger = logging.getLogger(__name__)


def _parse_coordinate(doc) -> Optional[Coordinate]:
    if doc is None:
        return None
    try:
        x, y = float(doc.x), float(doc.y)
    except (TypeError, ValueError):
        return None
    # "NaN", "inf" 도 float()는 통과하므로 따로 거른다
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return Coordinate(x=x, y=y)


class Geocoder:
    """
    주소(또는 지역명)를 좌표로 바꿉니다.
    도로명/지번 주소 검색을 먼저 시도하고, 결과가 없으면 키워드 검색(역/동/상권 이름 등)으로 재시도합니다.
    """

    def __init__(self, kakao_client: KakaoLocalClient):
        self.kakao_client = kakao_client

    async def resolve(self, location_text: str) -> Optional[Coordinate]:
        # 1) 주소 검색
        address_result = await self.kakao_client.search_address(location_text, size=1)
        doc = address_result.documents[0] if address_result.documents else None
        coordinate = _parse_coordinate(doc)
        if coordinate is not None:
            logger.info("[GEOCODE] '%s' -> 주소 검색 (%s, %s)", location_text, coordinate.x, coordinate.y)
            return coordinate

        # 2) 키워드 검색
        keyword_result = await self.kakao_client.search_keyword(location_text, size=1)
        doc = keyword_result.documents[0] if keyword_result.documents else None
        coordinate = _parse_coordinate(doc)
        if coordinate is not None:
            logger.info("[GEOCODE] '%s' -> 키워드 검색 (%s, %s)", location_text, coordinate.x, coordinate.y)
            return coordinate

        logger.info("[GEOCODE] '%s' 위치를 찾지 못함", location_text)
        return None
