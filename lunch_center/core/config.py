from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    KAKAO_REST_API_KEY: Optional[str] = None
    KAKAO_TIMEOUT_SECONDS: float = 10.0

    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"

    # Database configuration
    DB_HOST: str = "127.0.0.1"
    DB_PORT: int = 3306
    DB_USER: str = "lunch"
    DB_PASSWORD: str = ""
    DB_NAME: str = "lunch_center_DB"
    DATABASE_URL: Optional[str] = None

    ALLOWED_HOSTS: List[str] = [
        "lunch.frommer.co.kr",
        "*.amazonaws.com",
        "localhost",
        "127.0.0.1",
    ]
    ALLOWED_ORIGINS: List[str] = [
        "https://lunch.frommer.co.kr",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    RATE_LIMIT_ENABLED: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL; DATABASE_URL wins over the DB_* parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
            f"?charset=utf8mb4"
        )

    @property
    def llm_enabled(self) -> bool:
        return bool(self.OPENAI_API_KEY)

    def get_allowed_origins(self) -> List[str]:
        """Return CORS allowed origins depending on environment."""
        if self.ENVIRONMENT == "production":
            return [
                origin for origin in self.ALLOWED_ORIGINS
                if not origin.startswith("http://localhost") and not origin.startswith("http://127.0.0.1")
            ]
        return list(self.ALLOWED_ORIGINS)


@lru_cache
def get_settings() -> Settings:
    return Settings()
