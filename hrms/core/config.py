# hrms/core/config.py
from pydantic_settings import BaseSettings
from pydantic import validator
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from .env"""

    # === Database ===
    # The store lives in process memory; nothing is written to disk.
    DATABASE_URL: str = "sqlite+aiosqlite:///:memory:"
    DATABASE_ECHO: bool = False
    SEED_SAMPLE_DATA: bool = True

    # === CORS ===
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5000", "http://127.0.0.1:5000"]
    ALLOWED_METHODS: List[str] = ["*"]
    ALLOWED_HEADERS: List[str] = ["*"]

    # === Server ===
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # === System ===
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    # === Business Rules ===
    NEW_HIRE_WINDOW_DAYS: int = 30
    CONTRACT_RENEWAL_WINDOW_DAYS: int = 30
    RECENT_EMPLOYEES_LIMIT: int = 4

    @validator("LOG_LEVEL")
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Create a global settings instance
settings = Settings()
