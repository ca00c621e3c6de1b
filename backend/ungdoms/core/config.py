"""Application configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        validate_default=True,
    )

    # Application
    APP_NAME: str = Field(default="Ungdoms Vårdadmin")
    APP_ENV: str = Field(default="development")
    APP_DEBUG: bool = Field(default=True)
    APP_VERSION: str = Field(default="1.0.0")
    LOG_LEVEL: str | None = Field(
        default=None,
        description="Explicit log level; falls back to DEBUG/INFO based on APP_DEBUG",
    )

    # API
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)

    # Security
    CORS_ORIGINS: list[str] = Field(default=["http://localhost:5173"])

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    # JSON document store
    STORE_PATH: Path = Field(
        default=Path("server/data/store.json"),
        description="Backing JSON document; must be writable by the process",
    )
    STORE_SEED_DEFAULT_STAFF: bool = Field(
        default=False,
        description="Populate a fresh store with the default staff roster",
    )
    STORE_ENFORCE_VERSION: bool = Field(
        default=False,
        description="Require an If-Match version header on every update",
    )
    STORE_ENFORCE_STATUS_TRANSITIONS: bool = Field(
        default=False,
        description="Reject backward care plan / GFP status transitions",
    )

    # Dev identity (no credential validation happens in this service)
    DEV_DEFAULT_STAFF_ID: str = Field(default="s_demo")

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings and apply production defaults."""
        if self.APP_ENV == "production":
            if self.APP_DEBUG:
                raise ValueError("APP_DEBUG must be False in production")
            if "*" in self.CORS_ORIGINS:
                raise ValueError("Wildcard CORS_ORIGINS not allowed in production")

        if self.STORE_PATH.suffix != ".json":
            raise ValueError(f"STORE_PATH must point to a .json file, got {self.STORE_PATH}")

        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
