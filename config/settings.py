"""Configuration settings for the BetPro ledger."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Local key-value store
    db_path: str = "data/betpro.db"

    # Spreadsheet export
    export_dir: str = "output"
    export_format: str = "xlsx"  # xlsx or csv

    # Display preferences used until the user picks their own
    default_language: str = "pt"
    default_currency: str = "BRL"
    default_theme: str = "light"

    # OpenRouter for AI insights
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "google/gemini-2.5-flash"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
