"""
Transport adapter for the Respectify API.

The client depends only on the Transport protocol; HttpxTransport is the
production implementation over a shared httpx.AsyncClient. Tests inject any
object with a matching ``send`` coroutine.
"""

from typing import Mapping, Optional, Protocol, runtime_checkable

import httpx

from respectify.exceptions import TransportError
from respectify.models.http import RawResponse
from respectify.utils.logging import get_logger
from respectify.utils.metrics import ClientMetrics, track_api_call


logger = get_logger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Sends one request and returns the raw response."""

    async def send(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> RawResponse:
        """
        Execute a request against the API.

        Args:
            method: HTTP method ("GET" or "POST")
            path: Path relative to the base URL (e.g. "/v0.2/inittopic")
            headers: Request headers
            body: Encoded request body, or None

        Returns:
            RawResponse with status code, reason phrase and body

        Raises:
            TransportError: If no response could be obtained
        """
        ...


class HttpxTransport:
    """
    Transport backed by httpx.AsyncClient.

    One AsyncClient (and its connection pool) is shared by every request
    issued through this transport. No retries are performed; timeouts are
    the AsyncClient's.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
        metrics: Optional[ClientMetrics] = None,
    ):
        """
        Initialize the transport.

        Args:
            base_url: API root, e.g. "https://app.respectify.org"
            timeout: Request timeout in seconds (ignored when client is given)
            client: Pre-configured AsyncClient to use instead of creating one
            metrics: Optional collector for call counts and latency
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.metrics = metrics
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def send(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> RawResponse:
        url = f"{self.base_url}/{path.lstrip('/')}"

        async with track_api_call(self.metrics, path, method, logger) as call:
            try:
                response = await self._client.request(
                    method, url, headers=dict(headers), content=body
                )
            except httpx.RequestError as e:
                raise TransportError(
                    f"{method} {path} failed: {type(e).__name__}: {e}"
                ) from e

            call["status_code"] = response.status_code
            return RawResponse(
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
                body=response.content,
            )

    async def aclose(self) -> None:
        """Close the underlying AsyncClient if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
