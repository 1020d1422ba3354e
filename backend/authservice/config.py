"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Credential service
    credential_service_url: str = "http://user-service:8000"
    credential_service_timeout_seconds: float = 10.0

    # JWT Configuration
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 30

    # Password hashing
    password_hash_rounds: int = 29000
    password_pepper: str = ""

    # Login request rules
    login_min_length: int = 1
    login_max_length: int = 320
    login_pattern: Optional[str] = None
    password_min_length: int = 1
    password_max_length: int = 128

    # Return 404/403 instead of a single 401 for unknown login / wrong password
    expose_auth_failure_kind: bool = False

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
