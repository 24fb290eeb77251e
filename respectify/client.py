"""
Asynchronous Respectify client.

This module provides the endpoint operations of the Respectify API:
- Topic initialization from article text or a URL
- Comment evaluation against an initialized topic
- Credential checks

Every operation is a coroutine run on the caller's asyncio event loop. An
operation returns its domain value or raises exactly one RespectifyError;
the credential check alone reports a 401 as a result instead of raising.
"""

import json
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from respectify.config import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    Settings,
    get_settings,
)
from respectify.exceptions import JsonDecodingError, RespectifyError, UnauthorizedError
from respectify.models.comment_score import CommentScore
from respectify.models.credentials import CredentialCheckResult
from respectify.models.http import RawResponse
from respectify.models.topic import TopicHandle
from respectify.responses import interpret_response
from respectify.transport import HttpxTransport, Transport
from respectify.utils.logging import get_logger, log_error_with_context, setup_logging
from respectify.utils.metrics import ClientMetrics


logger = get_logger(__name__)

COMMENT_SCORE_FIELDS = tuple(CommentScore.model_fields)


class RespectifyClientAsync:
    """
    Async client for the Respectify content-analysis API.

    The transport is shared by all operations issued on one instance and
    must not be replaced while calls are in flight.
    """

    def __init__(
        self,
        email: str,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        version: str = DEFAULT_API_VERSION,
        transport: Optional[Transport] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        metrics: Optional[ClientMetrics] = None,
    ):
        """
        Initialize the client.

        Args:
            email: Account email, sent with every request
            api_key: Account API key, sent with every request
            base_url: API root URL
            version: API version used in request paths
            transport: Transport to send requests through; an HttpxTransport
                is created when omitted
            timeout: Request timeout in seconds for the default transport
            metrics: Optional collector; receives failures classified here
                and call timings from the default transport
        """
        self.email = email
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.version = version
        self.metrics = metrics
        self._owns_transport = transport is None
        self.transport: Transport = transport or HttpxTransport(
            self.base_url, timeout=timeout, metrics=metrics
        )

        logger.info(f"RespectifyClientAsync initialized for {self.base_url} (v{self.version})")

    async def __aenter__(self) -> "RespectifyClientAsync":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the transport's connections if this client created it."""
        if self._owns_transport:
            await self.transport.aclose()

    def _path(self, endpoint: str) -> str:
        return f"/v{self.version}/{endpoint}"

    def _headers(self) -> Dict[str, str]:
        return {
            "X-User-Email": self.email,
            "X-API-Key": self.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _post(self, endpoint: str, payload: Dict[str, Any]) -> RawResponse:
        body = json.dumps(payload).encode("utf-8")
        return await self.transport.send("POST", self._path(endpoint), self._headers(), body)

    async def _get(self, endpoint: str) -> RawResponse:
        return await self.transport.send("GET", self._path(endpoint), self._headers())

    def _record_failure(self, error: RespectifyError) -> RespectifyError:
        """Count a classified failure by kind and hand the error back for raising."""
        if self.metrics is not None:
            self.metrics.record_failure(error.kind.value)
        return error

    def _interpret(self, response: RawResponse, required_fields: Tuple[str, ...]) -> Dict[str, Any]:
        try:
            return interpret_response(response, required_fields=required_fields)
        except RespectifyError as e:
            raise self._record_failure(e)

    async def _init_topic(self, payload: Dict[str, str], operation: str) -> TopicHandle:
        response = await self._post("inittopic", payload)
        data = self._interpret(response, ("article_id",))

        article_id = data["article_id"]
        if not isinstance(article_id, str):
            raise self._record_failure(JsonDecodingError(
                f"article_id must be a string, got {type(article_id).__name__}",
                status_code=response.status_code,
                body=response.body,
            ))

        logger.info(
            f"Topic initialized: {article_id}",
            extra={"operation": operation, "article_id": article_id},
        )
        return article_id

    async def init_topic_from_text(self, text: str) -> TopicHandle:
        """
        Initialize a topic from article text.

        Empty text is sent as-is; the service decides whether it is valid.

        Args:
            text: Article text

        Returns:
            The topic's article id (UUID string)

        Raises:
            BadRequestError: If the service rejects the text
            JsonDecodingError: If the response lacks article_id
            RespectifyError: For any other failure
        """
        return await self._init_topic({"text": text}, "init_topic_from_text")

    async def init_topic_from_url(self, url: str) -> TopicHandle:
        """
        Initialize a topic from the article at a URL.

        Args:
            url: Article URL

        Returns:
            The topic's article id (UUID string)

        Raises:
            BadRequestError: If the service rejects the URL
            JsonDecodingError: If the response lacks article_id
            RespectifyError: For any other failure
        """
        return await self._init_topic({"url": url}, "init_topic_from_url")

    async def evaluate_comment(self, article_id: TopicHandle, comment: str) -> CommentScore:
        """
        Score a comment in the context of an initialized topic.

        Args:
            article_id: Topic handle from one of the init_topic operations
            comment: Comment text

        Returns:
            CommentScore built from the fully validated response

        Raises:
            BadRequestError: If the service rejects the input
            UnauthorizedError: If the credentials are not accepted
            JsonDecodingError: If any score field is missing or mistyped
            RespectifyError: For any other failure
        """
        response = await self._post(
            "commentscore",
            {"article_context_id": article_id, "comment": comment},
        )
        data = self._interpret(response, COMMENT_SCORE_FIELDS)

        try:
            score = CommentScore.model_validate(data)
        except ValidationError as e:
            error = JsonDecodingError(
                f"Invalid comment score response: {e}",
                status_code=response.status_code,
                body=response.body,
            )
            log_error_with_context(
                logger, "Comment score failed validation", error, operation="evaluate_comment"
            )
            raise self._record_failure(error) from e

        logger.info(
            f"Comment scored {score.overall_score}",
            extra={"operation": "evaluate_comment", "article_id": article_id},
        )
        return score

    async def check_user_credentials(self) -> CredentialCheckResult:
        """
        Check whether the configured email and API key are valid.

        A 401 is reported as ``CredentialCheckResult(False, info)`` rather
        than raised.

        Returns:
            CredentialCheckResult(success, info)

        Raises:
            JsonDecodingError: If a 200 response lacks success or info
            RespectifyError: For any failure other than 401
        """
        response = await self._get("usercheck")

        try:
            data = self._interpret(response, ("success", "info"))
        except UnauthorizedError:
            logger.info(
                "Credential check rejected",
                extra={"operation": "check_user_credentials"},
            )
            return CredentialCheckResult(
                success=False,
                info=(
                    f"Unauthorized. This means there was no user found matching "
                    f"the email {self.email} and API key."
                ),
            )

        success, info = data["success"], data["info"]
        if not isinstance(success, bool) or not isinstance(info, str):
            raise self._record_failure(JsonDecodingError(
                "usercheck response has mistyped success/info fields",
                status_code=response.status_code,
                body=response.body,
            ))

        return CredentialCheckResult(success=success, info=info)


def get_respectify_client(
    settings: Optional[Settings] = None,
    configure_logging: bool = False,
) -> RespectifyClientAsync:
    """
    Factory function to create RespectifyClientAsync from settings.

    Args:
        settings: Settings to use; loaded from the environment when omitted
        configure_logging: Install JSON logging at ``settings.log_level``;
            leave False when the host application configures logging itself

    Returns:
        RespectifyClientAsync configured from the settings
    """
    settings = settings or get_settings()

    if configure_logging:
        setup_logging(settings.log_level)

    return RespectifyClientAsync(
        email=settings.respectify_email,
        api_key=settings.respectify_api_key,
        base_url=settings.respectify_base_url,
        version=settings.respectify_api_version,
        timeout=settings.respectify_timeout_seconds,
    )
