"""Environment capabilities injected into the booking services."""

from src.providers.clock import Clock, FixedClock, SystemClock
from src.providers.random_source import RandomSource, SecretsRandomSource

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "RandomSource",
    "SecretsRandomSource",
]
