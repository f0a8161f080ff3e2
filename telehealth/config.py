"""
Configuration management for the Telehealth Symptom Analysis Service.
Uses pydantic-settings for type-safe environment variable handling.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

# Value shipped in sample .env files; treated the same as an unset key
OPENAI_KEY_PLACEHOLDER = "your_openai_api_key_here"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Telehealth Symptom Analysis Service"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Security
    SERVICE_API_KEY: str = ""
    FRONTEND_ORIGIN: str = "http://localhost:5173"

    # Remote inference
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    OPENAI_MAX_TOKENS: int = 1000
    OPENAI_TEMPERATURE: float = 0.3
    OPENAI_TIMEOUT: int = 30

    # Storage
    STORAGE_BACKEND: str = "memory"  # memory, redis
    REDIS_URL: str = "redis://localhost:6379"

    # Rate limiting
    RATE_LIMIT_REQUESTS: int = 100
    RATE_LIMIT_WINDOW: int = 60  # seconds
    ANALYSIS_RATE_LIMIT: str = "30/minute"

    # Connection pooling
    HTTP_POOL_SIZE: int = 100
    HTTP_POOL_KEEPALIVE: int = 30

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def openai_configured(self) -> bool:
        """True when a usable OpenAI credential is present."""
        key = (self.OPENAI_API_KEY or "").strip()
        return bool(key) and key != OPENAI_KEY_PLACEHOLDER


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
