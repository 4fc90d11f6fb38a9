"""User persistence on DynamoDB."""

import logging
from typing import Any
from uuid import uuid4

from botocore.exceptions import ClientError

from core.errors import ErrorCode, PersistenceError
from core.models.user import CreateUserRequest, User
from core.services.items import collect_pages, decode_item, encode_item

logger = logging.getLogger(__name__)

# batch_get_item accepts at most 100 keys per request
_BATCH_GET_LIMIT = 100

_ATTRIBUTES = ("userId", "name", "email")


def _to_item(user: User) -> dict[str, Any]:
    return encode_item(user.model_dump(by_alias=True))


def _from_item(item: dict[str, Any]) -> User:
    return User.model_validate(decode_item(item, "userId", _ATTRIBUTES))


def put_user(request: CreateUserRequest, dynamo_client: Any, users_table: str) -> User:
    """Store a new user under a generated id."""
    user = User(user_id=str(uuid4()), name=request.name, email=request.email)
    try:
        dynamo_client.put_item(TableName=users_table, Item=_to_item(user))
    except ClientError as e:
        raise PersistenceError(f"Failed to store user: {e}", code=ErrorCode.PERSISTENCE_FAILED) from e

    logger.info("Created user %s", user.user_id)
    return user


def scan_users(dynamo_client: Any, users_table: str) -> list[User]:
    try:
        items = collect_pages(dynamo_client.scan, {"TableName": users_table})
    except ClientError as e:
        raise PersistenceError(f"Failed to scan users: {e}", code=ErrorCode.PERSISTENCE_FAILED) from e

    users = [_from_item(item) for item in items]
    logger.debug("Scanned %d users", len(users))
    return users


def get_users(user_ids: list[str], dynamo_client: Any, users_table: str) -> dict[str, User]:
    """Fetch users by id. Ids with no stored user are absent from the result."""
    found: dict[str, User] = {}
    unique_ids = list(dict.fromkeys(user_ids))

    try:
        for start in range(0, len(unique_ids), _BATCH_GET_LIMIT):
            chunk = unique_ids[start : start + _BATCH_GET_LIMIT]
            request_items: dict[str, Any] = {
                users_table: {"Keys": [{"userId": {"S": user_id}} for user_id in chunk]}
            }

            while request_items:
                response = dynamo_client.batch_get_item(RequestItems=request_items)
                for item in response.get("Responses", {}).get(users_table, []):
                    user = _from_item(item)
                    found[user.user_id] = user
                request_items = response.get("UnprocessedKeys") or {}
    except ClientError as e:
        raise PersistenceError(f"Failed to fetch users: {e}", code=ErrorCode.PERSISTENCE_FAILED) from e

    return found
