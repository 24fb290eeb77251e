"""Async client for the Respectify content-analysis API."""

from respectify.client import RespectifyClientAsync, get_respectify_client
from respectify.config import Settings, get_settings
from respectify.exceptions import (
    BadRequestError,
    ErrorKind,
    JsonDecodingError,
    RespectifyError,
    TransportError,
    UnauthorizedError,
    UnsupportedMediaTypeError,
)
from respectify.models import (
    CommentScore,
    CredentialCheckResult,
    RawResponse,
    TopicHandle,
    is_valid_uuid,
)
from respectify.sync_client import RespectifyClient
from respectify.transport import HttpxTransport, Transport

__version__ = "0.2.0"

__all__ = [
    # Clients
    "RespectifyClientAsync",
    "RespectifyClient",
    "get_respectify_client",
    # Transport
    "Transport",
    "HttpxTransport",
    # Models
    "CommentScore",
    "CredentialCheckResult",
    "RawResponse",
    "TopicHandle",
    "is_valid_uuid",
    # Errors
    "ErrorKind",
    "RespectifyError",
    "BadRequestError",
    "UnauthorizedError",
    "UnsupportedMediaTypeError",
    "JsonDecodingError",
    "TransportError",
    # Configuration
    "Settings",
    "get_settings",
]
