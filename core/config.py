# core/config.py
"""Configuration management for the ingestion pipeline."""
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
)


class Settings:
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///academix.db")

    # External sources
    GOOGLE_BOOKS_API_KEY: Optional[str] = os.getenv("GOOGLE_BOOKS_API_KEY") or None
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "15"))
    HTTP_USER_AGENT: str = os.getenv("HTTP_USER_AGENT", DEFAULT_USER_AGENT)
    FETCH_LIMIT: int = int(os.getenv("FETCH_LIMIT", "20"))

    # Batch runs
    BATCH_DELAY_SECONDS: float = float(os.getenv("BATCH_DELAY_SECONDS", "2.0"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
