"""Shared test fixtures for the bookings API."""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def _clear_caches():
    from core.clients import get_dynamo_client
    from core.config import _reset_config

    _reset_config()
    get_dynamo_client.cache_clear()


@pytest.fixture
def reset_caches():
    """Drop the cached config and boto3 client around a test."""
    _clear_caches()
    yield
    _clear_caches()


# In-process DynamoDB (moto) fixtures
@pytest.fixture
def mocked_tables(monkeypatch, reset_caches):
    """Create the bookings and users tables in moto and point the config at them."""
    import boto3
    from moto import mock_aws

    for key in ("DYNAMODB_ENDPOINT", "BOOKINGS_TABLE", "USERS_TABLE", "BOOKINGS_PLACE_INDEX"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")

    with mock_aws():
        client = boto3.client("dynamodb", region_name="us-east-1")
        client.create_table(
            TableName="Bookings",
            KeySchema=[{"AttributeName": "bookingId", "KeyType": "HASH"}],
            AttributeDefinitions=[
                {"AttributeName": "bookingId", "AttributeType": "S"},
                {"AttributeName": "placeId", "AttributeType": "S"},
            ],
            GlobalSecondaryIndexes=[
                {
                    "IndexName": "placeId-index",
                    "KeySchema": [{"AttributeName": "placeId", "KeyType": "HASH"}],
                    "Projection": {"ProjectionType": "ALL"},
                }
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        client.create_table(
            TableName="Users",
            KeySchema=[{"AttributeName": "userId", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "userId", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        yield client


# DynamoDB Local fixtures
@pytest.fixture
def dynamodb_resource():
    """Provide a DynamoDB resource for integration tests."""
    import boto3
    from core.config import get_config

    config = get_config()

    resource = boto3.resource(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    return resource


@pytest.fixture
def bookings_table(dynamodb_resource):
    """Provide the Bookings table."""
    from core.config import get_config

    table = dynamodb_resource.Table(get_config().bookings_table)
    yield table

    # Cleanup: scan and delete all items created during test
    response = table.scan()
    with table.batch_writer() as batch:
        for item in response.get("Items", []):
            batch.delete_item(Key={"bookingId": item["bookingId"]})


@pytest.fixture
def users_table(dynamodb_resource):
    """Provide the Users table."""
    from core.config import get_config

    table = dynamodb_resource.Table(get_config().users_table)
    yield table

    response = table.scan()
    with table.batch_writer() as batch:
        for item in response.get("Items", []):
            batch.delete_item(Key={"userId": item["userId"]})
