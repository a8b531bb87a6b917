"""Application settings and configuration management."""
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BookingSettings(BaseSettings):
    """Booking rules and identifier generation."""

    available_rooms: list[str] = Field(
        default_factory=lambda: ["101", "102", "103", "201", "202", "203"]
    )
    min_guests: int = 1
    max_guests: int = 4

    id_prefix: str = "BK"
    id_length: int = 6  # Random part only, prefix excluded
    confirmation_code_length: int = 8

    model_config = SettingsConfigDict(env_prefix="BOOKING_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Sub-settings
    booking: BookingSettings = BookingSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
