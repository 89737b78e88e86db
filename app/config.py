from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Database
    DATABASE_URL: str

    # API
    API_TITLE: str = "GOSHALA API"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Security
    SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 30
    # Login lives in the external identity service
    AUTH_TOKEN_URL: str = "/api/auth/login"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Localization
    DEFAULT_LOCALE: str = "en"
    SUPPORTED_LOCALES: List[str] = ["en", "hi", "pa", "bn", "gu", "mr"]

    # Forum listing
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100
    STICKY_POST_LIMIT: int = 5

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
