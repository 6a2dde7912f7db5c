"""Application configuration."""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings."""

    # Storage
    DATA_FILE: str = "data.json"

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000
    DEBUG: bool = True
    CORS_ORIGINS: List[str] = ["*"]

    # Admin
    ADMIN_PASSWORD: str = "admin123"  # demo password, override in production
    TOKEN_TTL_HOURS: float = 4.0

    # Timezone used to decide what "today" is; server local time when unset
    TIMEZONE: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
