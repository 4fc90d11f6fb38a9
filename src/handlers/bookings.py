"""Booking HTTP handlers: POST /bookings, GET /bookings, GET /bookings/place/{placeId}."""

from typing import Any

from core.clients import get_dynamo_client
from core.config import get_config
from core.http import api_handler, empty_response, json_response, parse_body, path_parameter
from core.models.booking import CreateBookingRequest
from core.services.bookings import expand_users, put_booking, query_bookings_for_place, scan_bookings


@api_handler
def create_booking(event: dict[str, Any], context: object) -> dict[str, Any]:
    request = parse_body(event, CreateBookingRequest)

    config = get_config()
    put_booking(request, get_dynamo_client(), config.bookings_table)

    return empty_response(201)


@api_handler
def get_all_bookings_for_place(event: dict[str, Any], context: object) -> dict[str, Any]:
    """List one place's bookings with each userId expanded to the user record."""
    place_id = path_parameter(event, "placeId")
    if not place_id:
        return json_response(200, [])

    config = get_config()
    dynamo_client = get_dynamo_client()
    bookings = query_bookings_for_place(place_id, dynamo_client, config.bookings_table, config.place_index)
    expanded = expand_users(bookings, dynamo_client, config.users_table)

    return json_response(200, [booking.model_dump(by_alias=True) for booking in expanded])


@api_handler
def get_all_bookings(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    bookings = scan_bookings(get_dynamo_client(), config.bookings_table)

    return json_response(200, [booking.model_dump(by_alias=True) for booking in bookings])
