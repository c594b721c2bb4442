from functools import lru_cache
import os
from typing import List, Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False
    project_name: str = "Booking API"
    environment: str = "development"
    log_level: str = "INFO"

    # Raw CORS origins string - read from env
    cors_origins_raw: Optional[str] = Field(
        default=None,
        alias="CORS_ORIGINS"
    )

    @computed_field
    @property
    def backend_cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS from environment variable (comma-separated string)."""
        raw = self.cors_origins_raw
        if not raw:
            raw = os.environ.get("BACKEND_CORS_ORIGINS") or ""

        if not raw.strip():
            return []
        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    database_url: str = "sqlite+aiosqlite:///./bookings.db"
    db_echo: bool = False
    db_pool_pre_ping: bool = True

    # Paging for summary listings
    default_page_size: int = 100
    max_page_size: int = 1000


@lru_cache
def get_settings() -> Settings:
    return Settings()
