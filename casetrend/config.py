"""
Configuration management using pydantic-settings.
All settings loaded from environment variables (12-factor app).
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Redis (sparse counter store)
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")
    redis_socket_timeout: float = Field(
        default=5.0, gt=0.0, description="Redis socket timeout in seconds"
    )
    redis_scan_count: int = Field(
        default=500, ge=1, description="SCAN batch size hint for pattern reads"
    )
    store_read_workers: int = Field(
        default=3, ge=1, le=16, description="Threads used for concurrent store reads"
    )

    # Engine Configuration
    parse_policy: str = Field(
        default="strict",
        description="Handling of non-numeric values under timestamped keys (strict|lenient)",
    )
    trend_basis: str = Field(
        default="trimmed",
        description="Series the trend comparator runs on (trimmed|untrimmed)",
    )

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    api_reload: bool = Field(default=True, description="Enable hot reload")
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="CORS allowed origins (comma-separated)",
    )

    # Logging
    log_level: str = Field(default="info", description="Log level")
    log_format: str = Field(default="json", description="Log format (json|console)")

    # Development
    dev_mode: bool = Field(default=True, description="Development mode")
    testing: bool = Field(default=False, description="Testing mode")

    @field_validator("cors_origins")
    @classmethod
    def parse_cors_origins(cls, v: str) -> List[str]:
        """Parse comma-separated CORS origins."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("parse_policy")
    @classmethod
    def validate_parse_policy(cls, v: str) -> str:
        """Only strict and lenient parsing are supported."""
        v = v.lower()
        if v not in ("strict", "lenient"):
            raise ValueError("parse_policy must be 'strict' or 'lenient'")
        return v

    @field_validator("trend_basis")
    @classmethod
    def validate_trend_basis(cls, v: str) -> str:
        """Trend comparison runs on either the trimmed or the untrimmed series."""
        v = v.lower()
        if v not in ("trimmed", "untrimmed"):
            raise ValueError("trend_basis must be 'trimmed' or 'untrimmed'")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure singleton behavior.
    """
    return Settings()
