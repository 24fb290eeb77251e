"""Unit tests for the blocking RespectifyClient facade."""

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest
from unittest.mock import AsyncMock, patch

from respectify.exceptions import BadRequestError, UnauthorizedError
from respectify.models import CommentScore, CredentialCheckResult, RawResponse
from respectify.sync_client import RespectifyClient
from respectify.transport import HttpxTransport
from respectify.utils.metrics import ClientMetrics


TEST_ARTICLE_ID = "2b38cb35-e3d7-492f-b600-c3858f186300"


def json_response(payload) -> RawResponse:
    return RawResponse(status_code=200, reason_phrase="OK", body=json.dumps(payload).encode())


class _UserCheckHandler(BaseHTTPRequestHandler):
    """Answers every GET with a successful usercheck body over a kept-alive connection."""

    protocol_version = "HTTP/1.1"

    def do_GET(self):
        body = json.dumps({"success": True, "info": ""}).encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def local_server(monkeypatch):
    """Run a local HTTP/1.1 server for the duration of a test."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)

    server = ThreadingHTTPServer(("127.0.0.1", 0), _UserCheckHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield f"http://127.0.0.1:{server.server_address[1]}"

    server.shutdown()
    server.server_close()


@pytest.fixture
def mock_transport():
    return AsyncMock(spec=HttpxTransport)


@pytest.fixture
def client(mock_transport):
    client = RespectifyClient("mock-email@example.com", "mock-api-key", transport=mock_transport)
    yield client
    client.close()


def test_init_topic_from_text(client, mock_transport):
    """Test blocking topic initialization returns the article id."""
    mock_transport.send.return_value = json_response({"article_id": TEST_ARTICLE_ID})

    assert client.init_topic_from_text("Sample text") == TEST_ARTICLE_ID


def test_init_topic_from_url_bad_request(client, mock_transport):
    """Test errors propagate from the blocking call."""
    mock_transport.send.return_value = RawResponse(status_code=400, reason_phrase="Bad Request")

    with pytest.raises(BadRequestError):
        client.init_topic_from_url("")


def test_evaluate_comment(client, mock_transport):
    """Test blocking comment evaluation returns a CommentScore."""
    mock_transport.send.return_value = json_response({
        "logical_fallacies": [],
        "objectionable_phrases": [],
        "negative_tone_phrases": [],
        "appears_low_effort": False,
        "is_spam": True,
        "overall_score": 1,
    })

    score = client.evaluate_comment(TEST_ARTICLE_ID, "Buy now!")

    assert isinstance(score, CommentScore)
    assert score.is_spam is True


def test_evaluate_comment_unauthorized(client, mock_transport):
    """Test a 401 raises from the blocking comment evaluation."""
    mock_transport.send.return_value = RawResponse(status_code=401, reason_phrase="Unauthorized")

    with pytest.raises(UnauthorizedError):
        client.evaluate_comment(TEST_ARTICLE_ID, "comment")


def test_check_user_credentials_unauthorized(client, mock_transport):
    """Test the 401 conversion also applies to the blocking call."""
    mock_transport.send.return_value = RawResponse(status_code=401, reason_phrase="Unauthorized")

    success, info = client.check_user_credentials()

    assert success is False
    assert "mock-email@example.com" in info


def test_reuses_injected_transport(client, mock_transport):
    """Test every call goes through the injected transport, which stays open."""
    mock_transport.send.return_value = json_response({"success": True, "info": ""})

    assert client.check_user_credentials() == CredentialCheckResult(True, "")
    assert client.check_user_credentials() == CredentialCheckResult(True, "")

    assert client.transport is mock_transport
    assert mock_transport.send.await_count == 2
    mock_transport.aclose.assert_not_awaited()


def test_repeated_calls_over_pooled_httpx_connection(local_server):
    """Test consecutive calls share one loop, so kept-alive connections stay usable."""
    metrics = ClientMetrics()
    transport = HttpxTransport(local_server, metrics=metrics)

    with RespectifyClient("e@example.com", "k", transport=transport) as client:
        first = client.check_user_credentials()
        second = client.check_user_credentials()
        third = client.check_user_credentials()

    assert first == second == third == CredentialCheckResult(True, "")
    assert metrics.api_calls == {"/v0.2/usercheck": 3}
    assert metrics.failures == {}


def test_repeated_calls_over_created_transport(local_server):
    """Test the facade's own transport also survives consecutive calls."""
    with RespectifyClient("e@example.com", "k", base_url=local_server) as client:
        results = [client.check_user_credentials() for _ in range(3)]

    assert results == [CredentialCheckResult(True, "")] * 3


def test_close_closes_created_transport():
    """Test the transport created by the facade is closed once, on close()."""
    transport = AsyncMock(spec=HttpxTransport)
    transport.send.return_value = json_response({"success": True, "info": ""})

    with patch("respectify.client.HttpxTransport", return_value=transport) as transport_class:
        client = RespectifyClient("mock-email@example.com", "mock-api-key")

    client.check_user_credentials()
    client.check_user_credentials()
    transport.aclose.assert_not_awaited()

    client.close()
    client.close()

    transport_class.assert_called_once()
    transport.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_rejects_running_event_loop(client):
    """Test the facade cannot be driven from inside a running loop."""
    with pytest.raises(RuntimeError):
        client.check_user_credentials()
