"""Unit tests for DynamoDB item encoding and paging."""

from unittest.mock import MagicMock

import pytest

from core.errors import ErrorCode, PersistenceError
from core.services.items import collect_pages, decode_item, encode_item, from_attribute, to_attribute


@pytest.mark.parametrize(
    "value, attribute",
    [
        ("2024-01-01", {"S": "2024-01-01"}),
        (1704067200000, {"N": "1704067200000"}),
        (1.5, {"N": "1.5"}),
        (True, {"BOOL": True}),
    ],
)
def test_attribute_types(value, attribute):
    assert to_attribute(value) == attribute
    decoded = from_attribute(attribute)
    assert decoded == value
    assert type(decoded) is type(value)


def test_from_attribute_rejects_unknown_type():
    with pytest.raises(ValueError):
        from_attribute({"L": []})


def test_encode_item():
    assert encode_item({"userId": "u-1", "name": "Alice"}) == {"userId": {"S": "u-1"}, "name": {"S": "Alice"}}


def test_decode_item_missing_attribute_names_the_item():
    item = {"bookingId": {"S": "b-1"}, "placeId": {"S": "P1"}}

    with pytest.raises(PersistenceError) as exc_info:
        decode_item(item, "bookingId", ("bookingId", "placeId", "userId"))

    assert exc_info.value.code == ErrorCode.PERSISTENCE_FAILED
    assert "bookingId=b-1" in exc_info.value.message
    assert "userId" in exc_info.value.message


def test_decode_item_unreadable_attribute():
    item = {"userId": {"S": "u-1"}, "name": {"M": {}}}

    with pytest.raises(PersistenceError) as exc_info:
        decode_item(item, "userId", ("userId", "name"))

    assert "userId=u-1" in exc_info.value.message


def test_collect_pages_follows_last_evaluated_key():
    operation = MagicMock(
        side_effect=[
            {"Items": [{"k": {"S": "1"}}], "LastEvaluatedKey": {"k": {"S": "1"}}},
            {"Items": [{"k": {"S": "2"}}]},
        ]
    )

    items = collect_pages(operation, {"TableName": "Users"})

    assert items == [{"k": {"S": "1"}}, {"k": {"S": "2"}}]
    assert operation.call_args_list[0].kwargs == {"TableName": "Users"}
    assert operation.call_args_list[1].kwargs == {"TableName": "Users", "ExclusiveStartKey": {"k": {"S": "1"}}}
