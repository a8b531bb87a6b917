"""Business rules a booking must satisfy before it can be stored."""

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from structlog import get_logger

from src.config import settings
from src.models.booking import REQUIRED_FIELDS, CandidateBooking, ValidationFailure
from src.providers.clock import Clock, SystemClock

logger = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"

# Leading ASCII integer of a string, after optional ASCII whitespace
_LEADING_INT = re.compile(r"^[ \t\n\r\v\f]*([+-]?[0-9]+)")


def _is_empty(value: Any) -> bool:
    """Check whether a field value counts as missing.

    None, empty strings, zero, False, empty containers and the string "0"
    are all treated as empty.
    """
    return not value or value == "0"


def _coerce_int(value: int | str) -> int:
    """Coerce a guest count to int; non-numeric strings become 0."""
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


class BookingValidator:
    """Validates candidate bookings against static business rules.

    Validation never raises: malformed input, wrong types and rule
    violations all simply make ``validate`` return False.
    """

    def __init__(
        self,
        available_rooms: Optional[list[str]] = None,
        clock: Optional[Clock] = None,
        min_guests: Optional[int] = None,
        max_guests: Optional[int] = None,
    ):
        """Initialize the validator.

        Args:
            available_rooms: Bookable room numbers. Defaults to settings.
            clock: Source of the current UTC date. Defaults to the system clock.
            min_guests: Smallest allowed party size. Defaults to settings.
            max_guests: Largest allowed party size. Defaults to settings.
        """
        rooms = available_rooms if available_rooms is not None else settings.booking.available_rooms
        self._available_rooms = tuple(rooms)
        self.clock = clock or SystemClock()
        self.min_guests = min_guests if min_guests is not None else settings.booking.min_guests
        self.max_guests = max_guests if max_guests is not None else settings.booking.max_guests

    def validate(self, booking: CandidateBooking) -> bool:
        """Validate booking data.

        Args:
            booking: Candidate booking mapping

        Returns:
            True if every rule passes, False otherwise
        """
        return self.first_failure(booking) is None

    def first_failure(self, booking: CandidateBooking) -> Optional[ValidationFailure]:
        """Run the rules in order and report the first one that fails.

        Args:
            booking: Candidate booking mapping

        Returns:
            The failed rule, or None if the booking is valid
        """
        missing = self._first_missing_field(booking)
        if missing:
            return self._reject(ValidationFailure.MISSING_FIELD, field=missing)

        if not self.is_valid_room(booking["room_number"]):
            return self._reject(ValidationFailure.INVALID_ROOM, field="room_number")

        if not self.is_valid_date(booking["check_in"]):
            return self._reject(ValidationFailure.INVALID_DATE, field="check_in")

        if not self.is_valid_guest_count(booking["guests"]):
            return self._reject(ValidationFailure.INVALID_GUEST_COUNT, field="guests")

        return None

    def get_available_rooms(self) -> list[str]:
        """Get list of available rooms.

        Returns:
            Copy of the bookable room numbers, in configured order
        """
        return list(self._available_rooms)

    @staticmethod
    def _first_missing_field(booking: CandidateBooking) -> Optional[str]:
        if not isinstance(booking, Mapping):
            return REQUIRED_FIELDS[0]
        for field in REQUIRED_FIELDS:
            if _is_empty(booking.get(field)):
                return field
        return None

    def is_valid_room(self, room_number: Any) -> bool:
        """Check room number is a string matching a known room exactly."""
        if not isinstance(room_number, str):
            return False
        return room_number in self._available_rooms

    def is_valid_date(self, date: Any) -> bool:
        """Check date is a strict YYYY-MM-DD string not in the past.

        The parsed date must serialize back to the exact input, which rejects
        non-padded variants such as ``2025-1-5``. Today (UTC) is accepted.
        """
        if not isinstance(date, str):
            return False

        try:
            parsed = datetime.strptime(date, DATE_FORMAT).date()
        except ValueError:
            return False

        if parsed.isoformat() != date:
            return False

        today = self.clock.now().date()
        return parsed >= today

    def is_valid_guest_count(self, guests: Any) -> bool:
        """Check guest count is an int or string within the allowed range."""
        if isinstance(guests, bool) or not isinstance(guests, (int, str)):
            return False

        count = _coerce_int(guests)
        return self.min_guests <= count <= self.max_guests

    @staticmethod
    def _reject(reason: ValidationFailure, field: str) -> ValidationFailure:
        logger.debug("Booking rejected", reason=reason.value, field=field)
        return reason
