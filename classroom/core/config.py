# /classroom/core/config.py

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings, read from environment variables and an optional
    `.env` file in the working directory.
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Classroom Tracker API"
    DATABASE_URL: str = "sqlite:///./classroom.db"
    LOG_LEVEL: str = "INFO"
    CORS_ALLOWED_ORIGINS: List[str] = ["*"]

    # Number of fresh class codes tried before class creation gives up.
    CLASS_CODE_MAX_ATTEMPTS: int = 5

    # Create missing tables on startup. Disable when the schema is managed by Alembic.
    AUTO_CREATE_TABLES: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
