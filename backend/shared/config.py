"""
Centralized configuration for the Kraftflix backend.

All settings are loaded from environment variables (or a .env file).
The JWT signing secret has no default: the process refuses to start
without one, and every instance validating the same tokens must share it.
"""

from functools import lru_cache
from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = "Kraftflix API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = [
        "http://localhost:4200",
        "http://localhost:8080",
        "http://localhost:1234",
        "http://localhost:3000",
        "https://kraftflix.netlify.app",
        "https://tk1893.github.io",
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Authentication
    jwt_secret: str = Field(..., min_length=1)
    jwt_algorithm: Literal["HS256"] = "HS256"
    token_ttl_days: int = Field(default=7, ge=1)
    password_hash_rounds: int = Field(default=10, ge=4, le=31)

    # Storage
    store_backend: Literal["supabase", "memory"] = "supabase"
    supabase_url: str = ""
    supabase_service_role_key: str = ""


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
