"""
Application configuration using Pydantic Settings.
Loads from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    APP_NAME: str = "VetTriage Guided Diagnostics"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    
    # In-memory store
    SEED_MOCK_DATA: bool = True
    RECENT_ANALYSES_LIMIT: Optional[int] = None  # None keeps every analysis
    
    # Triage sessions
    SESSION_SELECT_FIRST_PET: bool = True
    MAX_TRIAGE_SESSIONS: Optional[int] = 1000  # oldest sessions are dropped past this
    
    # Classifier
    CLASSIFIER_BACKEND: str = "scoring"  # scoring, mock
    SEVERITY_BLEND_WEIGHT: float = 0.5  # share of base risk in the composite
    NEUTRAL_VITAL_SCORE: float = 0.5
    URGENT_THRESHOLD: float = 0.75
    MONITOR_THRESHOLD: float = 0.4
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
