import logging
from typing import Any, Dict, Optional

import httpx

from lunch_center.core.exceptions import UpstreamError
from lunch_center.core.messages import SEARCH_FAILED_MESSAGE
from lunch_center.infrastructure.kakao.dto import (
    KakaoAddressSearchResponse,
    KakaoKeywordSearchResponse,
)

logger = logging.getLogger(__name__)


class KakaoLocalClient:
    """
    카카오 로컬 API와 상호작용하는 클라이언트입니다.
    주소 검색과 키워드 검색을 담당하며, 실패 응답은 모두 UpstreamError로 올려보냅니다.
    """

    BASE_URL = "https://dapi.kakao.com/v2/local/search"

    def __init__(
            self,
            api_key: str,
            timeout: float = 10.0,
            transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.bearer_type = "KakaoAK"
        self._transport = transport

    async def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        headers = {"Authorization": f"{self.bearer_type} {self.api_key}"}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            r = await client.get(f"{self.BASE_URL}/{path}", headers=headers, params=params)

        if r.status_code != 200:
            error_text = r.text
            logger.error("[KAKAO] %s 오류: %s %s", path, r.status_code, error_text)
            raise UpstreamError(
                f"Kakao API error {r.status_code} - {self._describe_error(r)}",
                upstream_status=r.status_code,
            )
        if not r.content:
            return {}
        try:
            data = r.json()
        except ValueError as e:
            logger.error("[KAKAO] %s 응답이 JSON이 아님: %s", path, r.text[:200])
            raise UpstreamError(SEARCH_FAILED_MESSAGE, upstream_status=r.status_code) from e
        if not isinstance(data, dict):
            logger.error("[KAKAO] %s 응답 형식 오류: %s", path, r.text[:200])
            raise UpstreamError(SEARCH_FAILED_MESSAGE, upstream_status=r.status_code)
        return data

    @staticmethod
    def _describe_error(r: httpx.Response) -> str:
        try:
            body = r.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("errorType"):
            return f"{body['errorType']}: {body.get('message')}"
        return r.text or "no body"

    async def search_address(self, query: str, size: int = 1) -> KakaoAddressSearchResponse:
        """도로명/지번 주소 검색."""
        data = await self._get("address.json", {"query": query, "size": size})
        return KakaoAddressSearchResponse(**data)

    async def search_keyword(
            self,
            query: str,
            x: Optional[float] = None,
            y: Optional[float] = None,
            radius: Optional[int] = None,
            category_group_code: Optional[str] = None,
            page: int = 1,
            size: int = 15,
    ) -> KakaoKeywordSearchResponse:
        """
        키워드로 장소를 검색합니다.
        x/y/radius를 함께 주면 해당 좌표 반경 안에서만 찾고, 각 문서에 distance(m)가 채워집니다.
        """
        params: Dict[str, Any] = {"query": query, "page": page, "size": size}
        if x is not None and y is not None:
            params["x"] = x
            params["y"] = y
        if radius is not None:
            params["radius"] = radius
        if category_group_code:
            params["category_group_code"] = category_group_code

        logger.debug("[KAKAO] keyword search %s", params)
        data = await self._get("keyword.json", params)
        return KakaoKeywordSearchResponse(**data)
