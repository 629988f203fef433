from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SERVICE_NAME: str = "employee-service"

    # 파일 경로 또는 sqlite+aiosqlite:///:memory: (테스트용)
    DATABASE_URL: str = "sqlite+aiosqlite:///./employees.db"
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
