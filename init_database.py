"""데이터베이스 초기화 스크립트"""
import logging
import sys

# 모든 모델을 import하여 테이블 정의가 로드되도록 함
from lunch_center.models import Recommendation  # noqa: F401

from lunch_center.core.config import get_settings
from lunch_center.core.log import setup_logging
from lunch_center.database import init_db

logger = logging.getLogger("init_database")


def main():
    """데이터베이스 테이블 생성"""
    settings = get_settings()
    setup_logging(settings)
    logger.info("데이터베이스 초기화 시작...")
    logger.info("데이터베이스: %s", settings.DB_NAME)
    logger.info("호스트: %s:%s", settings.DB_HOST, settings.DB_PORT)

    try:
        init_db(settings)
        logger.info("데이터베이스 테이블 생성 완료: recommendations (사내 추천 식당)")
    except Exception as e:
        logger.error("오류 발생: %s", e)
        logger.error("MySQL 서버 실행 여부와 .env의 DB_* 설정을 확인하세요.")
        sys.exit(1)


if __name__ == "__main__":
    main()
