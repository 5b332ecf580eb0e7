from sqlalchemy import (
    JSON,
    VARCHAR,
    Column,
    DateTime,
    Index,
    Integer,
    Text,
    func,
)

from lunch_center.models.base import Base


class Recommendation(Base):
    """사내 추천 식당 테이블 모델"""

    __tablename__ = "recommendations"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="PK")
    name = Column(VARCHAR(255), nullable=False, comment="식당 이름")
    address = Column(VARCHAR(255), nullable=False, comment="주소")
    reason = Column(Text, nullable=False, comment="추천 이유")
    kakao_url = Column(VARCHAR(500), nullable=True, comment="카카오맵 링크")
    categories = Column(JSON, nullable=False, default=list, comment="카테고리 (예: 음식점, 카페)")
    created_at = Column(DateTime, nullable=False, server_default=func.now(), comment="등록 시각")
    likes = Column(Integer, nullable=False, default=0, server_default="0", comment="좋아요 수")

    __table_args__ = (
        Index("idx_recommendation_name", "name"),
        Index("idx_recommendation_created_at", "created_at"),
        {"mysql_engine": "InnoDB", "mysql_charset": "utf8mb4"},
    )

    def __repr__(self):
        return f"<Recommendation(id={self.id}, name={self.name}, likes={self.likes})>"
