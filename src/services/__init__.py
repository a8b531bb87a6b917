"""Business services package."""

from src.services.booking_processor import BookingProcessor, Validator

__all__ = [
    "BookingProcessor",
    "Validator",
]
