"""Booking processor: validates, enriches and stores hotel bookings."""

from typing import Any, Optional, Protocol

from structlog import get_logger
from structlog.contextvars import bound_contextvars

from src.models.booking import CandidateBooking, StoredBooking
from src.providers.clock import Clock, SystemClock
from src.providers.random_source import RandomSource, SecretsRandomSource
from src.transformers import BookingTransformer

logger = get_logger(__name__)


class Validator(Protocol):
    """Anything able to accept or reject a candidate booking."""

    def validate(self, booking: CandidateBooking) -> bool:
        ...


class BookingProcessor:
    """Processes hotel bookings into an in-memory, append-only store.

    The store lives as long as the processor instance. It has no size cap
    and no internal locking; hosts sharing one processor between threads
    must serialize calls themselves.
    """

    def __init__(
        self,
        validator: Validator,
        clock: Optional[Clock] = None,
        random_source: Optional[RandomSource] = None,
    ):
        """Initialize the processor.

        Args:
            validator: Booking validator instance
            clock: Source of the processing timestamp. Defaults to the system clock.
            random_source: Source of booking ID characters. Defaults to ``secrets``.
        """
        self.validator = validator
        self.clock = clock or SystemClock()
        self.random_source = random_source or SecretsRandomSource()
        self._bookings: list[StoredBooking] = []

    def process(self, booking: CandidateBooking) -> bool:
        """Process a booking.

        Args:
            booking: Booking data to process

        Returns:
            True if processed successfully, False if validation failed
        """
        if not self.validator.validate(booking):
            logger.info("Booking rejected by validator")
            return False

        booking_id = BookingTransformer.generate_booking_id(self.random_source)
        with bound_contextvars(booking_id=booking_id):
            stored = BookingTransformer.transform(
                booking,
                booking_id=booking_id,
                processed_at=self.clock.now(),
            )
            self._bookings.append(stored)

            logger.info(
                "Booking processed",
                confirmation_code=stored.confirmation_code,
                room_number=stored.room_number,
                booking_count=len(self._bookings),
            )
        return True

    def get_bookings(self) -> list[dict[str, Any]]:
        """Get all processed bookings in insertion order.

        Returns:
            Copies of the stored bookings
        """
        return [booking.to_dict() for booking in self._bookings]

    def get_booking_count(self) -> int:
        """Get total number of processed bookings."""
        return len(self._bookings)

    def get_latest_booking(self) -> Optional[dict[str, Any]]:
        """Get the most recently stored booking.

        Returns:
            Copy of the last booking, or None if nothing is stored
        """
        if not self._bookings:
            return None
        return self._bookings[-1].to_dict()

    def find_by_confirmation_code(self, code: str) -> Optional[dict[str, Any]]:
        """Find booking by confirmation code.

        Args:
            code: Confirmation code to search for

        Returns:
            Copy of the first matching booking, or None if not found
        """
        for booking in self._bookings:
            if booking.confirmation_code == code:
                return booking.to_dict()

        return None
