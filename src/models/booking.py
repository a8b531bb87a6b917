"""Models for candidate and stored hotel bookings."""

import copy
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

# Caller-supplied booking, not yet validated
CandidateBooking = Mapping[str, Any]

REQUIRED_FIELDS = ("guest_name", "room_number", "check_in", "guests")


class ValidationFailure(str, Enum):
    """First rule a candidate booking failed.

    Checks run in this order and stop at the first failure:
    - MISSING_FIELD: a required field is absent or empty
    - INVALID_ROOM: room number is not a known room
    - INVALID_DATE: check-in is malformed or in the past
    - INVALID_GUEST_COUNT: party size outside the allowed range
    """
    MISSING_FIELD = "missing_field"
    INVALID_ROOM = "invalid_room"
    INVALID_DATE = "invalid_date"
    INVALID_GUEST_COUNT = "invalid_guest_count"


class StoredBooking(BaseModel):
    """Accepted booking enriched with generated fields.

    Input fields keep the exact values the caller sent (e.g. ``guests`` may
    be ``2`` or ``"2"``), so they are typed loosely. Extra caller keys are
    preserved. Instances are frozen once created. A missing input field
    is stored as None.
    """

    guest_name: Any = None
    room_number: Any = None
    check_in: Any = None
    guests: Any = None

    id: str
    processed_at: str  # UTC, YYYY-MM-DD HH:MM:SS
    confirmation_code: str

    model_config = ConfigDict(extra="allow", frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """Return a detached dictionary copy of the booking."""
        return copy.deepcopy(self.model_dump())
