import os

# lunch_center.main 의 기본 앱이 MySQL 대신 메모리 SQLite를 보도록 import 전에 지정
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lunch_center.api.deps import get_db, get_kakao_client
from lunch_center.core.config import Settings, get_settings
from lunch_center.main import create_app
from lunch_center.models import Base
from tests.kakao_fakes import FakeKakaoApi


def build_settings(**overrides) -> Settings:
    values = dict(
        KAKAO_REST_API_KEY="test-kakao-key",
        OPENAI_API_KEY=None,
        ALLOWED_HOSTS=["testserver"],
        RATE_LIMIT_ENABLED=False,
        DATABASE_URL="sqlite://",
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def test_settings():
    return build_settings()


@pytest.fixture
def fake_kakao():
    return FakeKakaoApi()


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def app(test_settings, fake_kakao, db_session):
    application = create_app(test_settings)
    application.dependency_overrides[get_settings] = lambda: test_settings
    application.dependency_overrides[get_kakao_client] = fake_kakao.client
    application.dependency_overrides[get_db] = lambda: db_session
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
