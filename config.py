"""Configuration management for the ticket formatter."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Ticket rendering
    client_signature: str = "SD Nova"
    strict_tool_matching: bool = False  # mots entiers au lieu de sous-chaînes

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None


# Global settings instance
settings = Settings()
