"""
Error taxonomy for the Respectify client.

Every failed operation raises exactly one RespectifyError subclass. The
``kind`` attribute identifies the failure class independently of the
Python type, so callers can branch on either.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    UNSUPPORTED_MEDIA = "unsupported_media"
    DECODING_FAILURE = "decoding_failure"
    TRANSPORT_FAILURE = "transport_failure"
    GENERIC = "generic"


class RespectifyError(Exception):
    """
    Base exception for Respectify API failures.

    Raised directly for non-2xx statuses without a dedicated subclass.

    Args:
        message: Human-readable error description (the reason phrase for HTTP errors)
        status_code: HTTP status code, or None when no response was obtained
    """

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r}, status_code={self.status_code!r})"


class BadRequestError(RespectifyError):
    """The service rejected the submitted data (HTTP 400)."""

    kind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = 400) -> None:
        super().__init__(message, status_code)


class UnauthorizedError(RespectifyError):
    """The email / API key pair was not accepted (HTTP 401)."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message: str, status_code: Optional[int] = 401) -> None:
        super().__init__(message, status_code)


class UnsupportedMediaTypeError(RespectifyError):
    """The service did not accept the request content type (HTTP 415)."""

    kind = ErrorKind.UNSUPPORTED_MEDIA

    def __init__(self, message: str, status_code: Optional[int] = 415) -> None:
        super().__init__(message, status_code)


class JsonDecodingError(RespectifyError):
    """
    A 2xx response body was malformed or lacked required fields.

    Args:
        message: What could not be decoded
        status_code: Status of the response that carried the body
        body: The raw body, kept for diagnostics
    """

    kind = ErrorKind.DECODING_FAILURE

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[bytes] = None,
    ) -> None:
        super().__init__(message, status_code)
        self.body = body


class TransportError(RespectifyError):
    """No response was obtained (connection, TLS or timeout failure)."""

    kind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=None)
