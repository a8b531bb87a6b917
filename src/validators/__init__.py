"""Booking validation package."""

from src.validators.booking_validator import BookingValidator

__all__ = ["BookingValidator"]
