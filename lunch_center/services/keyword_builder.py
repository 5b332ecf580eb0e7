import logging
from typing import Awaitable, Callable, List, Optional

from lunch_center.services.taste_keywords import (
    expand_to_menu_categories,
    extract_menu_keywords,
    extract_taste_phrases,
)

logger = logging.getLogger(__name__)

KeywordGenerator = Callable[[str], Awaitable[List[str]]]
KeywordStrategy = Callable[[str], Awaitable[Optional[List[str]]]]


def merge_keywords(derived: List[str], raw_text: str) -> List[str]:
    """파생 키워드 뒤에 원문을 붙이고 중복 제거 (처음 나온 순서 유지)."""
    merged: List[str] = []
    for keyword in [*derived, raw_text]:
        if keyword and keyword not in merged:
            merged.append(keyword)
    return merged


class KeywordBuilder:
    """
    자유 텍스트를 검색 키워드 목록으로 바꿉니다.
    맛/기분 표현 -> 메뉴 이름 -> LLM 순서로 시도하고, 처음으로 결과를 낸 전략을 씁니다.
    아무것도 안 나오면 원문 한 줄을 그대로 키워드로 씁니다.
    """

    def __init__(self, keyword_generator: Optional[KeywordGenerator] = None):
        self.keyword_generator = keyword_generator
        self._strategies: List[KeywordStrategy] = [
            self._from_taste_phrases,
            self._from_menu_keywords,
            self._from_llm,
        ]

    async def _from_taste_phrases(self, text: str) -> Optional[List[str]]:
        phrases = extract_taste_phrases(text)
        if not phrases:
            return None
        return expand_to_menu_categories(phrases)

    async def _from_menu_keywords(self, text: str) -> Optional[List[str]]:
        return extract_menu_keywords(text)

    async def _from_llm(self, text: str) -> Optional[List[str]]:
        if self.keyword_generator is None:
            return None
        try:
            return await self.keyword_generator(text)
        except Exception as e:
            # LLM은 없어도 되는 의존성: 실패하면 원문으로 검색한다.
            logger.warning("[LLM] 키워드 생성 실패, 원문으로 대체: %s", e)
            return None

    async def build(self, free_text: str) -> List[str]:
        text = (free_text or "").strip()
        if not text:
            return []

        for strategy in self._strategies:
            keywords = await strategy(text)
            if keywords:
                return keywords
        return [text]

    async def build_search_keywords(self, free_text: str) -> List[str]:
        """실제 검색에 쓸 키워드: 파생 키워드 + 사용자가 쓴 원문."""
        text = (free_text or "").strip()
        keywords = merge_keywords(await self.build(text), text)
        logger.info("[SEARCH] '%s' -> 키워드 %s", text, keywords)
        return keywords
