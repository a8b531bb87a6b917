"""Configuration package."""

from src.config.logging import add_booking_id_prefix, configure_logging, get_logger
from src.config.settings import BookingSettings, Settings, settings

__all__ = [
    "settings",
    "Settings",
    "BookingSettings",
    "configure_logging",
    "get_logger",
    "add_booking_id_prefix",
]
