from os import environ
from typing import Literal

from pydantic import BaseModel, ConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    bookings_table: str
    users_table: str
    place_index: str
    log_level: LogLevel = "INFO"
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        bookings_table=environ.get("BOOKINGS_TABLE", "Bookings"),
        users_table=environ.get("USERS_TABLE", "Users"),
        place_index=environ.get("BOOKINGS_PLACE_INDEX", "placeId-index"),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
