"""Database engine / session factory, built from the Settings handed to the app."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from lunch_center.core.config import Settings
from lunch_center.models.base import Base


def build_engine(settings: Settings) -> Engine:
    return create_engine(
        settings.database_url,
        pool_pre_ping=True,  # 끊긴 커넥션 재사용 방지
        pool_recycle=3600,
    )


def create_session_factory(settings: Settings) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=build_engine(settings))


def init_db(settings: Settings) -> None:
    """recommendations 등 모델 테이블 생성"""
    engine = build_engine(settings)
    try:
        Base.metadata.create_all(bind=engine)
    finally:
        engine.dispose()
