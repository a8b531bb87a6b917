"""Data transformation package."""

from src.transformers.booking_transformer import BookingTransformer

__all__ = [
    "BookingTransformer",
]
