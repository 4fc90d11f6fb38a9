"""User HTTP handlers: POST /users, GET /users."""

from typing import Any

from core.clients import get_dynamo_client
from core.config import get_config
from core.http import api_handler, empty_response, json_response, parse_body
from core.models.user import CreateUserRequest
from core.services.users import put_user, scan_users


@api_handler
def create_user(event: dict[str, Any], context: object) -> dict[str, Any]:
    request = parse_body(event, CreateUserRequest)

    config = get_config()
    put_user(request, get_dynamo_client(), config.users_table)

    return empty_response(201)


@api_handler
def get_all_users(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    users = scan_users(get_dynamo_client(), config.users_table)

    return json_response(200, [user.model_dump(by_alias=True) for user in users])
