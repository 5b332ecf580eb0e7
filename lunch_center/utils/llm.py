"""LLM을 사용한 검색 키워드 생성 / 점심 메뉴 추천 유틸리티"""
import json
import logging
import re
from typing import List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.prompts import PromptTemplate
from langchain_openai import ChatOpenAI

from lunch_center.core.config import Settings
from lunch_center.core.exceptions import ConfigurationError
from lunch_center.core.messages import OPENAI_KEY_MISSING_MESSAGE
from lunch_center.schemas.menu import MenuRecommendResponse

logger = logging.getLogger(__name__)

MAX_GENERATED_KEYWORDS = 4


# --- 1) LLM 모델 준비 ---
def get_llm_model(settings: Settings, temperature: float = 0.3) -> ChatOpenAI:
    """LLM 모델 초기화"""
    if not settings.OPENAI_API_KEY:
        raise ConfigurationError(OPENAI_KEY_MISSING_MESSAGE)

    return ChatOpenAI(
        model=settings.OPENAI_MODEL,
        api_key=settings.OPENAI_API_KEY,
        temperature=temperature,
    )


# --- 2) 프롬프트 ---
keyword_prompt = PromptTemplate.from_template(
    """
너는 직장인의 점심 기분/상황 문장을 카카오맵 맛집 검색 키워드로 바꾸는 역할을 한다.

아래 문장을 보고 근처 식당을 찾기 좋은 한국어 검색 키워드를 1~3개 골라라.

- 메뉴 이름이나 음식 종류 위주로 짧게 (예: 김치찌개, 국밥, 쌀국수)
- 쉼표(,)로 구분해서 키워드만 출력하고 다른 설명은 붙이지 마라.

문장:
----------------
{text}
----------------
"""
)

menu_prompt = PromptTemplate.from_template(
    """
너는 한국 직장인의 점심 메뉴를 추천해주는 어시스턴트야.

사용자의 기분 또는 상황: {mood}
사용자가 원하는 키워드: {keyword}

아래 형식의 JSON만 반환해:
{{
  "menus": [
    {{ "name": "메뉴명", "reason": "추천 이유" }},
    {{ "name": "메뉴명", "reason": "추천 이유" }},
    {{ "name": "메뉴명", "reason": "추천 이유" }}
  ]
}}

규칙:
- 총 3개만 추천할 것
- 내용은 한국 회사 점심 문화에 잘 맞게 작성할 것
"""
)


def _content_of(response) -> str:
    # 응답이 AIMessage인 경우 content 추출
    if hasattr(response, "content"):
        return str(response.content)
    return str(response)


def parse_keywords(content: str) -> List[str]:
    """쉼표/줄바꿈으로 나눈 키워드 목록 (빈 값 제거, 최대 4개)."""
    parts = (part.strip() for part in re.split(r"[,\n]", content))
    return [part for part in parts if part][:MAX_GENERATED_KEYWORDS]


def strip_code_fence(content: str) -> str:
    """```json ... ``` 형식의 코드 블록 제거"""
    content = content.strip()
    if content.startswith("```json"):
        content = content[7:]
    if content.startswith("```"):
        content = content[3:]
    if content.endswith("```"):
        content = content[:-3]
    return content.strip()


# --- 3) 검색 키워드 생성 ---
async def generate_search_keywords(text: str, model: BaseChatModel) -> List[str]:
    """기분/상황 문장에서 검색 키워드 추출. 실패는 호출한 쪽에서 처리한다."""
    chain = keyword_prompt | model
    response = await chain.ainvoke({"text": text})
    content = _content_of(response)
    logger.info("[LLM] 키워드 응답: %s", content)
    return parse_keywords(content)


# --- 4) 점심 메뉴 추천 ---
async def recommend_menus(
    model: BaseChatModel, mood: Optional[str] = None, keyword: Optional[str] = None
) -> MenuRecommendResponse:
    chain = menu_prompt | model
    response = await chain.ainvoke(
        {"mood": mood or "(입력 없음)", "keyword": keyword or "(입력 없음)"}
    )
    content = strip_code_fence(_content_of(response))

    try:
        return MenuRecommendResponse(**json.loads(content))
    except (json.JSONDecodeError, TypeError, ValueError) as e:
        logger.warning("[LLM] 메뉴 JSON 파싱 실패: %s / %s", e, content[:200])
        return MenuRecommendResponse(menus=[])
