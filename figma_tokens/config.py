"""Application configuration management."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Keys
    figma_access_token: str = ""

    # Application
    log_level: str = "INFO"

    # Figma API
    figma_api_base_url: str = "https://api.figma.com/v1"
    request_timeout: float = 30.0

    # Output
    output_dir: str = "."  # Root the token paths are written under

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
