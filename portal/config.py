"""Centralized application configuration using Pydantic settings."""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the portal gateway."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = Field(default="Operations Portal", description="Title shown in the OpenAPI docs")
    port: int = Field(default=5000, description="Port the gateway listens on")

    data_dir: Path = Field(default=Path("./data"), description="Directory holding one SQLite file per partition")
    database_url_template: str = Field(
        default="sqlite:///{data_dir}/{partition}.sqlite",
        description="SQLAlchemy URL template, formatted once per storage partition.",
    )
    run_db_migrations: bool = Field(
        default=True,
        description="Whether partition tables should be created on startup.",
    )
    seed_default_users: bool = Field(default=True, description="Insert the bootstrap accounts on startup")

    upload_dir: Path = Field(default=Path("./uploads"), description="Where uploaded attachments are written")
    uploads_url_prefix: str = Field(default="/uploads", description="Static path prefix attachments are served under")
    frontend_dir: Optional[Path] = Field(default=None, description="Optional static frontend served at /")

    cors_origins: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")
    default_rate_limit: str = Field(default="60/minute", description="Global rate limiting rule")
    rate_limiting_enabled: bool = Field(default=True, description="Toggle to disable SlowAPI limits (useful in tests)")
    course_cache_ttl: int = Field(
        default=30,
        description="TTL (s) for cached role-filtered course listings. The cache is per process; use 0 with several workers.",
    )
    require_moderator_for_approval: bool = Field(
        default=False,
        description="Require an administrator in the X-Portal-User header to list or approve pending reports.",
    )
    log_dir: Path = Field(default=Path("./logs"), description="Directory for audit log files")

    def partition_url(self, partition: str) -> str:
        return self.database_url_template.format(data_dir=self.data_dir.as_posix(), partition=partition)


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of the Settings object."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the cached Settings instance (useful for tests)."""

    get_settings.cache_clear()
