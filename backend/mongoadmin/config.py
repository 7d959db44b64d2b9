"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    server_selection_timeout_ms: int = 5000

    # A database only exists once it holds a collection
    bootstrap_collection: str = "init"

    # 0 means every document of a collection is returned in detail mode
    document_fetch_limit: int = 0

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:8501",  # Streamlit default
        "http://streamlit_frontend:8501",  # Docker network
    ]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
