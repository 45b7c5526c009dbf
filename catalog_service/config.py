"""
Configuration management for the Catalog Service
"""
from datetime import timedelta
from typing import List, Optional
import re

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-this-secret-in-prod"

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$", re.IGNORECASE)
_DURATION_UNITS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: str) -> timedelta:
    """
    Parse a token lifetime such as "3600", "30m", "1h" or "7d".

    Raises:
        ValueError: If the value is not a positive duration
    """
    match = _DURATION_RE.match(str(value))
    if not match:
        raise ValueError(f"Invalid duration '{value}'. Use seconds or <n>s|m|h|d (e.g. 1h)")
    amount, unit = match.groups()
    seconds = int(amount) * _DURATION_UNITS[unit.lower()]
    if seconds <= 0:
        raise ValueError("Duration must be positive")
    return timedelta(seconds=seconds)


class Settings(BaseSettings):
    """Catalog Service configuration loaded from environment variables"""

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Database Configuration
    DATABASE_URL: Optional[str] = None
    PG_HOST: Optional[str] = None
    PG_PORT: int = 5432
    PG_USER: Optional[str] = None
    PG_PASSWORD: Optional[str] = None
    PG_DATABASE: Optional[str] = None
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10

    # Token Configuration
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_IN: str = "1h"

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("JWT_EXPIRES_IN")
    @classmethod
    def validate_expires_in(cls, v: str) -> str:
        parse_duration(v)
        return v

    @property
    def token_lifetime(self) -> timedelta:
        return parse_duration(self.JWT_EXPIRES_IN)

    @property
    def database_url(self) -> str:
        """Resolve the store URL: DATABASE_URL, then PG_* parts, then a local SQLite file."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.PG_HOST:
            credentials = self.PG_USER or ""
            if self.PG_PASSWORD:
                credentials += f":{self.PG_PASSWORD}"
            if credentials:
                credentials += "@"
            return (
                f"postgresql+psycopg2://{credentials}{self.PG_HOST}:{self.PG_PORT}"
                f"/{self.PG_DATABASE or ''}"
            )
        return "sqlite:///./catalog.db"


def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings()
