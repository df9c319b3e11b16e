# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Every value has a default, so the service starts with an empty .env
    against a local SQLite file.

    Optional env vars (.env):
      - DATABASE_URL (any SQLAlchemy URL, e.g. postgresql+psycopg2://...)
      - SEED_ON_STARTUP (insert mock products when the catalog is empty)
      - ALLOW_EMPTY_CHECKOUT (False => checkout of an empty cart is a 400)
    """

    PROJECT_NAME: str = "Vibe Commerce API"
    API_PREFIX: str = "/api"

    # DB config
    DATABASE_URL: str = "sqlite:///./vibe_commerce.db"
    DATABASE_ECHO: bool = False

    SEED_ON_STARTUP: bool = True
    ALLOW_EMPTY_CHECKOUT: bool = True

    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
