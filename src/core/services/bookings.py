"""Booking persistence on DynamoDB, plus the user expansion step."""

import logging
from typing import Any
from uuid import uuid4

from botocore.exceptions import ClientError

from core.errors import ErrorCode, PersistenceError
from core.models.booking import Booking, CreateBookingRequest, ExpandedBooking
from core.services.items import collect_pages, decode_item, encode_item
from core.services.users import get_users

logger = logging.getLogger(__name__)

_ATTRIBUTES = ("bookingId", "placeId", "userId", "CheckIn", "CheckOut", "PartyType")


def _to_item(booking: Booking) -> dict[str, Any]:
    return encode_item(booking.model_dump(by_alias=True))


def _from_item(item: dict[str, Any]) -> Booking:
    return Booking.model_validate(decode_item(item, "bookingId", _ATTRIBUTES))


def put_booking(request: CreateBookingRequest, dynamo_client: Any, bookings_table: str) -> Booking:
    """Store a new booking under a generated id.

    The referenced user is not checked; a booking may point at a user that
    does not exist.
    """
    booking = Booking(
        booking_id=str(uuid4()),
        place_id=request.place_id,
        user_id=request.user_id,
        check_in=request.check_in,
        check_out=request.check_out,
        party_type=request.party_type,
    )
    try:
        dynamo_client.put_item(TableName=bookings_table, Item=_to_item(booking))
    except ClientError as e:
        raise PersistenceError(f"Failed to store booking: {e}", code=ErrorCode.PERSISTENCE_FAILED) from e

    logger.info("Created booking %s for place %s", booking.booking_id, booking.place_id)
    return booking


def scan_bookings(dynamo_client: Any, bookings_table: str) -> list[Booking]:
    try:
        items = collect_pages(dynamo_client.scan, {"TableName": bookings_table})
    except ClientError as e:
        raise PersistenceError(f"Failed to scan bookings: {e}", code=ErrorCode.PERSISTENCE_FAILED) from e

    bookings = [_from_item(item) for item in items]
    logger.debug("Scanned %d bookings", len(bookings))
    return bookings


def query_bookings_for_place(
    place_id: str,
    dynamo_client: Any,
    bookings_table: str,
    place_index: str,
) -> list[Booking]:
    """All bookings for one place, read through the placeId index."""
    try:
        items = collect_pages(
            dynamo_client.query,
            {
                "TableName": bookings_table,
                "IndexName": place_index,
                "KeyConditionExpression": "placeId = :place_id",
                "ExpressionAttributeValues": {":place_id": {"S": place_id}},
            },
        )
    except ClientError as e:
        raise PersistenceError(
            f"Failed to query bookings for place {place_id}: {e}",
            code=ErrorCode.PERSISTENCE_FAILED,
        ) from e

    bookings = [_from_item(item) for item in items]
    logger.debug("Found %d bookings for place %s", len(bookings), place_id)
    return bookings


def expand_users(bookings: list[Booking], dynamo_client: Any, users_table: str) -> list[ExpandedBooking]:
    """Replace each booking's user reference with the stored user record."""
    if not bookings:
        return []

    users = get_users([booking.user_id for booking in bookings], dynamo_client, users_table)
    return [
        ExpandedBooking(
            booking_id=booking.booking_id,
            place_id=booking.place_id,
            user=users.get(booking.user_id),
            check_in=booking.check_in,
            check_out=booking.check_out,
            party_type=booking.party_type,
        )
        for booking in bookings
    ]
