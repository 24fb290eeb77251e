"""
Blocking facade over RespectifyClientAsync.

The facade owns one event loop for its whole lifetime and drives every
call on it with run_until_complete, so pooled connections stay bound to a
live loop between calls. It must not be used from inside a running loop.
"""

import asyncio
from typing import Awaitable, Optional, TypeVar

from respectify.client import RespectifyClientAsync
from respectify.config import DEFAULT_API_VERSION, DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from respectify.models.comment_score import CommentScore
from respectify.models.credentials import CredentialCheckResult
from respectify.models.topic import TopicHandle
from respectify.transport import Transport
from respectify.utils.metrics import ClientMetrics


T = TypeVar("T")


class RespectifyClient:
    """
    Synchronous Respectify client.

    Usage:
        with RespectifyClient(email, api_key) as client:
            article_id = client.init_topic_from_text("...")
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
        self._loop = asyncio.new_event_loop()
        self._client = RespectifyClientAsync(
            email,
            api_key,
            base_url=base_url,
            version=version,
            transport=transport,
            timeout=timeout,
            metrics=metrics,
        )

    @property
    def email(self) -> str:
        return self._client.email

    @property
    def transport(self) -> Transport:
        return self._client.transport

    def __enter__(self) -> "RespectifyClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the async client (and any transport it created), then the loop."""
        if self._loop.is_closed():
            return
        try:
            self._loop.run_until_complete(self._client.aclose())
        finally:
            self._loop.close()

    def _run(self, call: Awaitable[T]) -> T:
        return self._loop.run_until_complete(call)

    def init_topic_from_text(self, text: str) -> TopicHandle:
        """Blocking version of RespectifyClientAsync.init_topic_from_text."""
        return self._run(self._client.init_topic_from_text(text))

    def init_topic_from_url(self, url: str) -> TopicHandle:
        """Blocking version of RespectifyClientAsync.init_topic_from_url."""
        return self._run(self._client.init_topic_from_url(url))

    def evaluate_comment(self, article_id: TopicHandle, comment: str) -> CommentScore:
        """Blocking version of RespectifyClientAsync.evaluate_comment."""
        return self._run(self._client.evaluate_comment(article_id, comment))

    def check_user_credentials(self) -> CredentialCheckResult:
        """Blocking version of RespectifyClientAsync.check_user_credentials."""
        return self._run(self._client.check_user_credentials())
