"""
Client configuration using Pydantic Settings.

Values come from CONTACTBOOK_* environment variables; anything passed
explicitly to ApiClient overrides them.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Client configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CONTACTBOOK_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = "http://localhost:8000/api"
    credentials_path: Path = Path.home() / ".contactbook" / "credentials.json"
    timeout: float = 10.0  # seconds


@lru_cache
def get_client_settings() -> ClientSettings:
    """Get cached client settings instance."""
    return ClientSettings()
