import logging
from datetime import datetime, timezone

import pytest
import structlog
import structlog.testing

from src.providers.clock import FixedClock
from src.validators import BookingValidator
from tests.stubs import StubRandomSource, StubValidator

FIXED_NOW = datetime(2025, 6, 1, 10, 30, 45, tzinfo=timezone.utc)


def configure_test_logging():
    """Send structlog output through stdlib logging instead of stdout."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@pytest.fixture(autouse=True, scope="session")
def route_logs_to_stdlib():
    configure_test_logging()
    yield
    structlog.reset_defaults()


@pytest.fixture
def log_capture():
    """Capture structlog events, including bound context variables."""
    capture = structlog.testing.LogCapture()
    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars, capture],
        cache_logger_on_first_use=False,
    )
    yield capture
    structlog.contextvars.clear_contextvars()
    configure_test_logging()


@pytest.fixture
def restore_logging():
    """Undo changes a test makes to root logging and structlog."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.contextvars.clear_contextvars()
    configure_test_logging()


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2025-06-01 10:30:45 UTC."""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def random_source():
    """Deterministic random source."""
    return StubRandomSource()


@pytest.fixture
def validator(fixed_clock):
    """Real validator with default rooms and a fixed clock."""
    return BookingValidator(clock=fixed_clock)


@pytest.fixture
def accepting_validator():
    """Validator stub that accepts everything."""
    return StubValidator(True)


@pytest.fixture
def rejecting_validator():
    """Validator stub that rejects everything."""
    return StubValidator(False)


@pytest.fixture
def make_booking():
    """Build a valid candidate booking, with optional overrides."""

    def _make(**overrides):
        booking = {
            "guest_name": "John Doe",
            "room_number": "101",
            "check_in": "2025-12-25",
            "guests": 2,
        }
        booking.update(overrides)
        return booking

    return _make
