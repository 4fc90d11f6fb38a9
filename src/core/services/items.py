"""DynamoDB item encoding and paging shared by the booking and user services."""

from collections.abc import Callable
from typing import Any

from core.errors import ErrorCode, PersistenceError
from core.models.fields import Scalar


def to_attribute(value: Scalar) -> dict[str, Any]:
    # bool is checked first since it is a subclass of int
    if isinstance(value, bool):
        return {"BOOL": value}
    if isinstance(value, (int, float)):
        return {"N": str(value)}
    return {"S": value}


def from_attribute(attribute: dict[str, Any]) -> Scalar:
    if "S" in attribute:
        return attribute["S"]
    if "BOOL" in attribute:
        return attribute["BOOL"]
    if "N" in attribute:
        number = attribute["N"]
        try:
            return int(number)
        except ValueError:
            return float(number)
    raise ValueError(f"unsupported attribute type {sorted(attribute)}")


def encode_item(record: dict[str, Scalar]) -> dict[str, Any]:
    return {name: to_attribute(value) for name, value in record.items()}


def decode_item(item: dict[str, Any], key_name: str, names: tuple[str, ...]) -> dict[str, Scalar]:
    """Read ``names`` out of a stored item.

    Raises PersistenceError naming the item's key when an attribute is
    missing or has a type this service never writes.
    """
    key = item.get(key_name, {}).get("S", "<no key>")
    decoded: dict[str, Scalar] = {}
    for name in names:
        if name not in item:
            raise PersistenceError(
                f"Stored item {key_name}={key} is missing attribute {name}",
                code=ErrorCode.PERSISTENCE_FAILED,
            )
        try:
            decoded[name] = from_attribute(item[name])
        except ValueError as e:
            raise PersistenceError(
                f"Stored item {key_name}={key} has unreadable attribute {name}: {e}",
                code=ErrorCode.PERSISTENCE_FAILED,
            ) from e
    return decoded


def collect_pages(operation: Callable[..., dict[str, Any]], request_kwargs: dict[str, Any]) -> list[dict[str, Any]]:
    """Run a scan or query to completion, following LastEvaluatedKey."""
    items: list[dict[str, Any]] = []
    last_key = None

    while True:
        kwargs = dict(request_kwargs)
        if last_key:
            kwargs["ExclusiveStartKey"] = last_key

        response = operation(**kwargs)
        items.extend(response.get("Items", []))

        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
