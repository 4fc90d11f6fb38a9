"""API Gateway proxy event helpers and the shared error-reporting wrapper.

Every Lambda handler in src/handlers/ is wrapped with ``api_handler`` so that
failures take one path: validation errors become an empty 400, anything else
is logged and returned as a JSON 500 carrying only the user-facing message.
"""

import base64
import binascii
import functools
import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import pydantic

from core.config import get_config
from core.errors import USER_MESSAGES, BookingApiError, ErrorCode, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)
Handler = Callable[[dict[str, Any], Any], dict[str, Any]]

_JSON_HEADERS = {"Content-Type": "application/json"}


def empty_response(status_code: int) -> dict[str, Any]:
    return {"statusCode": status_code, "headers": {}, "body": ""}


def json_response(status_code: int, payload: Any) -> dict[str, Any]:
    return {"statusCode": status_code, "headers": dict(_JSON_HEADERS), "body": json.dumps(payload)}


def parse_body(event: dict[str, Any], model: type[ModelT]) -> ModelT:
    """Decode the event body and validate it against ``model``.

    Raises ValidationError when the body is not a JSON object or a required
    field is missing or empty.
    """
    raw = event.get("body")
    if raw is None:
        raw = "{}"
    if event.get("isBase64Encoded"):
        try:
            raw = base64.b64decode(raw).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValidationError(f"Body is not valid base64: {e}", code=ErrorCode.INVALID_REQUEST) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Body is not valid JSON: {e}", code=ErrorCode.INVALID_REQUEST) from e

    if not isinstance(data, dict):
        raise ValidationError("Body must be a JSON object", code=ErrorCode.INVALID_REQUEST)

    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(str(e), code=ErrorCode.VALIDATION_ERROR) from e


def path_parameter(event: dict[str, Any], name: str) -> str:
    params = event.get("pathParameters") or {}
    return params.get(name) or ""


def error_response(error: Exception) -> dict[str, Any]:
    if isinstance(error, BookingApiError):
        code, message = error.code, error.user_message
    else:
        code, message = ErrorCode.INTERNAL_ERROR, USER_MESSAGES[ErrorCode.INTERNAL_ERROR]
    return json_response(500, {"error": {"code": code.value, "message": message}})


def api_handler(func: Handler) -> Handler:
    @functools.wraps(func)
    def wrapper(event: dict[str, Any], context: Any) -> dict[str, Any]:
        try:
            logging.getLogger().setLevel(get_config().log_level)
            return func(event, context)
        except ValidationError as e:
            logger.info("Rejected request to %s: %s", func.__qualname__, e.message)
            return empty_response(400)
        except Exception as e:
            logger.exception("Unhandled error in %s", func.__qualname__)
            return error_response(e)

    return wrapper
