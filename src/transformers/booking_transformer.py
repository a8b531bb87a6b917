"""Transformer that turns accepted candidate bookings into stored bookings."""

import copy
import hashlib
from datetime import datetime, timezone
from typing import Any

from src.config import settings
from src.models.booking import REQUIRED_FIELDS, CandidateBooking, StoredBooking
from src.providers.random_source import RandomSource

PROCESSED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


class BookingTransformer:
    """Generates booking identifiers and enriches accepted bookings."""

    @staticmethod
    def _stringify(value: Any) -> str:
        """Render a field value for hashing (None as "", booleans as "1" / "")."""
        if value is None:
            return ""
        if isinstance(value, bool):
            return "1" if value else ""
        return str(value)

    @staticmethod
    def generate_booking_id(
        random_source: RandomSource,
        prefix: str | None = None,
        length: int | None = None,
    ) -> str:
        """Generate a booking ID such as ``BKX7QK2A``.

        Uniqueness is probabilistic only: the result is not checked
        against bookings already stored.

        Args:
            random_source: Supplier of random alphanumeric characters
            prefix: ID prefix. Defaults to settings.
            length: Number of random characters. Defaults to settings.

        Returns:
            Prefix followed by uppercased random characters
        """
        prefix = settings.booking.id_prefix if prefix is None else prefix
        length = settings.booking.id_length if length is None else length
        return prefix + random_source.random_string(length, alphanumeric_only=True).upper()

    @staticmethod
    def generate_confirmation_code(booking: CandidateBooking, length: int | None = None) -> str:
        """Generate confirmation code based on booking data.

        Hashes guest name, room number, check-in and guests concatenated in
        that order without separators, and keeps the first ``length`` hex
        characters in upper case. Bookings with the same four values get the
        same code. Missing fields hash as empty text.

        Args:
            booking: Booking holding the four required fields
            length: Code length. Defaults to settings.

        Returns:
            Uppercase hexadecimal confirmation code
        """
        length = settings.booking.confirmation_code_length if length is None else length
        payload = "".join(
            BookingTransformer._stringify(booking.get(field)) for field in REQUIRED_FIELDS
        )
        digest = hashlib.md5(payload.encode("utf-8")).hexdigest()
        return digest[:length].upper()

    @staticmethod
    def format_processed_at(moment: datetime) -> str:
        """Format a timestamp as UTC ``YYYY-MM-DD HH:MM:SS``.

        Naive datetimes are assumed to already be UTC.
        """
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        return moment.strftime(PROCESSED_AT_FORMAT)

    @staticmethod
    def transform(
        booking: CandidateBooking,
        booking_id: str,
        processed_at: datetime,
    ) -> StoredBooking:
        """Build the stored booking from an accepted candidate.

        The candidate mapping is deep-copied, never modified or shared. Generated fields
        overwrite any caller keys of the same name.

        Args:
            booking: Accepted candidate booking
            booking_id: Identifier assigned to the booking
            processed_at: Moment of enrichment

        Returns:
            Frozen stored booking
        """
        data = copy.deepcopy(dict(booking))
        data["id"] = booking_id
        data["processed_at"] = BookingTransformer.format_processed_at(processed_at)
        data["confirmation_code"] = BookingTransformer.generate_confirmation_code(booking)
        return StoredBooking.model_validate(data)
