from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Program that imported specializations are attached to (B.Tech).
DEFAULT_IMPORT_PROGRAM_ID = "1c4983fa-8011-41dd-9cbc-d784641648fc"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str = Field(..., alias="DATABASE_URL")

    import_program_id: str = Field(DEFAULT_IMPORT_PROGRAM_ID, alias="IMPORT_PROGRAM_ID")
    import_csv_path: str = Field("data.csv", alias="IMPORT_CSV_PATH")

    allowed_domains: Optional[str] = Field(None, alias="ALLOWED_DOMAINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("database_url")
    @classmethod
    def _use_async_driver(cls, value: str) -> str:
        # Hosted Postgres providers hand out plain postgres:// URLs.
        if value.startswith("postgres://"):
            return "postgresql+asyncpg://" + value[len("postgres://"):]
        if value.startswith("postgresql://"):
            return "postgresql+asyncpg://" + value[len("postgresql://"):]
        return value

    @property
    def allowed_domain_list(self) -> List[str]:
        if not self.allowed_domains:
            return []
        return [d.strip() for d in self.allowed_domains.split(",") if d.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
