"""Entry point wiring the booking services into a host application."""

import json
import sys
from typing import Any, NamedTuple, Optional

from src.config import configure_logging, get_logger, settings
from src.services import BookingProcessor
from src.validators import BookingValidator

logger = get_logger(__name__)


class BookingServices(NamedTuple):
    """Validator and processor shared by a host process."""

    validator: BookingValidator
    processor: BookingProcessor


_services: Optional[BookingServices] = None


def init_booking_services() -> BookingServices:
    """Configure logging and build the booking services once per process.

    Hosts call this from their startup hook; later calls return the
    services created by the first one.
    """
    global _services
    if _services is None:
        configure_logging()
        validator = BookingValidator()
        _services = BookingServices(validator=validator, processor=BookingProcessor(validator))
        logger.info(
            "Booking services initialized",
            environment=settings.environment,
            available_rooms=validator.get_available_rooms(),
        )
    return _services


def get_booking_processor() -> BookingProcessor:
    """Get the process-wide booking processor."""
    return init_booking_services().processor


def handle_booking_request(event: dict[str, Any]) -> dict[str, Any]:
    """Handle a booking request from the host's request pipeline.

    Args:
        event: Request event carrying the candidate under ``booking``

    Returns:
        Response dictionary with ``statusCode`` and JSON ``body``
    """
    try:
        processor = get_booking_processor()
        booking = event.get("booking") or {}

        if not processor.process(booking):
            return {
                "statusCode": 400,
                "body": json.dumps({"success": False}),
            }

        stored = processor.get_latest_booking()
        return {
            "statusCode": 201,
            "body": json.dumps(
                {
                    "success": True,
                    "id": stored["id"],
                    "confirmation_code": stored["confirmation_code"],
                    "processed_at": stored["processed_at"],
                }
            ),
        }

    except Exception as e:
        logger.error(
            "Booking request failed",
            error=str(e),
            exc_info=True,
        )
        return {
            "statusCode": 500,
            "body": json.dumps({"success": False, "error": str(e)}),
        }


def main(argv: Optional[list[str]] = None) -> int:
    """Process one booking given as JSON (argument or stdin) and print the result.

    Returns:
        0 if the booking was stored, 1 otherwise
    """
    argv = sys.argv[1:] if argv is None else argv
    raw = argv[0] if argv else sys.stdin.read()

    try:
        booking = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error("Invalid booking JSON", error=str(e))
        print(json.dumps({"success": False, "error": "Invalid JSON"}))
        return 1

    response = handle_booking_request({"booking": booking})
    print(response["body"])
    return 0 if response["statusCode"] == 201 else 1


if __name__ == "__main__":
    sys.exit(main())
