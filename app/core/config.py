"""Application configuration from environment."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Task Tracker"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./tasks.db"

    # JWT: no default for the secret, startup fails without it
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 120  # 2 hours

    # bcrypt cost factor (4..31)
    bcrypt_rounds: int = 12

    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
