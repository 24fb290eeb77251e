"""
Response interpretation for the Respectify API.

Turns a RawResponse into either the decoded JSON object or a raised
RespectifyError. The status mapping is total: unmapped statuses fall into
the generic RespectifyError rather than being dropped.
"""

import json
from typing import Any, Dict, Iterable

from respectify.exceptions import (
    BadRequestError,
    JsonDecodingError,
    RespectifyError,
    UnauthorizedError,
    UnsupportedMediaTypeError,
)
from respectify.models.http import RawResponse
from respectify.utils.logging import get_logger


logger = get_logger(__name__)

_STATUS_ERRORS = {
    400: BadRequestError,
    401: UnauthorizedError,
    415: UnsupportedMediaTypeError,
}


def raise_for_status(response: RawResponse) -> None:
    """
    Raise the error matching a non-2xx status.

    Args:
        response: Raw response from the transport

    Raises:
        BadRequestError: On 400
        UnauthorizedError: On 401
        UnsupportedMediaTypeError: On 415
        RespectifyError: On any other non-2xx status
    """
    if response.is_success:
        return

    error_class = _STATUS_ERRORS.get(response.status_code, RespectifyError)
    error = error_class(response.reason_phrase, status_code=response.status_code)
    logger.warning(
        f"Respectify returned {response.status_code} {response.reason_phrase}",
        extra={"status_code": response.status_code, "error_kind": error.kind.value},
    )
    raise error


def decode_json(response: RawResponse, required_fields: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Decode a successful response body as a JSON object.

    Args:
        response: Raw 2xx response
        required_fields: Keys that must be present in the object

    Returns:
        The decoded object

    Raises:
        JsonDecodingError: If the body is not valid JSON, is not an object,
            or lacks any required field
    """
    try:
        data = json.loads(response.body)
    except (ValueError, UnicodeDecodeError) as e:
        raise JsonDecodingError(
            f"Response body is not valid JSON: {e}",
            status_code=response.status_code,
            body=response.body,
        ) from e

    if not isinstance(data, dict):
        raise JsonDecodingError(
            f"Expected a JSON object, got {type(data).__name__}",
            status_code=response.status_code,
            body=response.body,
        )

    missing = [field for field in required_fields if field not in data]
    if missing:
        raise JsonDecodingError(
            f"Response is missing required field(s): {', '.join(missing)}",
            status_code=response.status_code,
            body=response.body,
        )

    return data


def interpret_response(response: RawResponse, required_fields: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Classify a response and decode it on success.

    Args:
        response: Raw response from the transport
        required_fields: Keys the decoded object must contain

    Returns:
        The decoded JSON object

    Raises:
        RespectifyError: The subclass matching the failure
    """
    raise_for_status(response)
    return decode_json(response, required_fields)
