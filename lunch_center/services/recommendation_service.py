"""사내 추천 식당 목록 / 등록 / 좋아요 서비스"""
import logging
import re
from typing import List, Optional

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from lunch_center.core.exceptions import ConflictError, InvalidRequestError, NotFoundError
from lunch_center.core.messages import (
    RECOMMENDATION_DUPLICATE_MESSAGE,
    RECOMMENDATION_FIELDS_REQUIRED_MESSAGE,
    RECOMMENDATION_INVALID_ID_MESSAGE,
    RECOMMENDATION_NOT_FOUND_MESSAGE,
)
from lunch_center.models.recommendation import Recommendation
from lunch_center.schemas.recommendation import RecommendationCreate

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def list_recommendations(
    db: Session,
    sort: str = "latest",
    category: Optional[str] = None,
) -> List[Recommendation]:
    query = db.query(Recommendation)
    if sort == "likes":
        query = query.order_by(Recommendation.likes.desc())
    query = query.order_by(Recommendation.created_at.desc(), Recommendation.id.desc())
    rows = query.all()

    # JSON 컬럼 검색은 DB마다 문법이 달라서 파이썬에서 거른다.
    if category:
        rows = [row for row in rows if category in (row.categories or [])]
    return rows


def create_recommendation(db: Session, data: RecommendationCreate) -> Recommendation:
    name = (data.name or "").strip()
    address = (data.address or "").strip()
    reason = (data.reason or "").strip()
    if not name or not address or not reason:
        raise InvalidRequestError(RECOMMENDATION_FIELDS_REQUIRED_MESSAGE)

    # 같은 이름(대소문자 무시)의 식당 중복 체크
    duplicate = db.query(Recommendation.id).filter(
        func.lower(Recommendation.name) == name.lower()
    ).first()
    if duplicate:
        raise ConflictError(RECOMMENDATION_DUPLICATE_MESSAGE)

    recommendation = Recommendation(
        name=name,
        address=address,
        reason=reason,
        kakao_url=data.kakao_url or None,
        categories=list(data.categories or []),
        likes=0,
    )
    db.add(recommendation)
    db.commit()
    db.refresh(recommendation)
    logger.info("[RECOMMEND] 등록: %s", recommendation)
    return recommendation


def parse_recommendation_id(raw_id) -> int:
    """앞쪽 정수 부분만 읽는다 (1, "1", 1.0, "12abc" 모두 허용)."""
    if isinstance(raw_id, bool) or raw_id is None:
        raise InvalidRequestError(RECOMMENDATION_INVALID_ID_MESSAGE)
    if isinstance(raw_id, int):
        return raw_id
    match = _LEADING_INT.match(str(raw_id))
    if match is None:
        raise InvalidRequestError(RECOMMENDATION_INVALID_ID_MESSAGE)
    return int(match.group(1))


def like_recommendation(db: Session, raw_id, delta: Optional[int] = None) -> Recommendation:
    """
    좋아요 수를 한 번의 UPDATE로 증감한다 (0 밑으로는 내려가지 않음).
    delta가 -1이면 감소, 아니면 +1.
    """
    recommendation_id = parse_recommendation_id(raw_id)
    change = -1 if delta == -1 else 1

    new_likes = func.coalesce(Recommendation.likes, 0) + change
    updated = db.query(Recommendation).filter(
        Recommendation.id == recommendation_id
    ).update(
        {Recommendation.likes: case((new_likes < 0, 0), else_=new_likes)},
        synchronize_session=False,
    )
    db.commit()

    if not updated:
        raise NotFoundError(RECOMMENDATION_NOT_FOUND_MESSAGE)

    recommendation = db.query(Recommendation).filter(
        Recommendation.id == recommendation_id
    ).first()
    if recommendation is None:
        raise NotFoundError(RECOMMENDATION_NOT_FOUND_MESSAGE)
    return recommendation
