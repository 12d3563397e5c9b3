# performance_api/core/config.py
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - JWT_SECRET (HS256 signing secret for access tokens)

    Optional:
      - PORT (default 3000)
      - ENVIRONMENT or NODE_ENV: development | production | test
      - DB_NAME (SQLite file, ignored when ENVIRONMENT=test)
      - DATABASE_URL (overrides the SQLite URL derived from DB_NAME)
    """

    PROJECT_NAME: str = "Player Performance API"
    API_VERSION: str = "1.0.0"

    PORT: int = 3000

    ENVIRONMENT: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
    )

    # Storage
    DB_NAME: str = "player_performance.db"
    DATABASE_URL: str | None = None

    # Token signing
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_HOURS: int = 24

    # Password hashing cost factor
    BCRYPT_ROUNDS: int = 12

    CORS_ORIGINS: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_test(self) -> bool:
        return self.ENVIRONMENT == "test"

    @property
    def database_url(self) -> str:
        """
        Resolve the SQLAlchemy URL.

        - DATABASE_URL wins if set.
        - test environment => in-memory SQLite.
        - otherwise => file-backed SQLite named by DB_NAME.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.is_test:
            return "sqlite://"
        return f"sqlite:///{self.DB_NAME}"


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
