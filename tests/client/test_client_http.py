"""Unit tests for the termweb client HTTP utilities.

This module tests the HTTP handling layer defined in client/_http.py:

1. Helper Functions:
   - _parse_error_response: Extracting error info from server bodies
   - _raise_for_status: Mapping HTTP status codes to exception types
   - _calculate_backoff: Exponential backoff for retries

2. HTTPClient and AsyncHTTPClient:
   - Request methods and JSON decoding
   - Error mapping
   - Retry logic

Note: These tests use httpx's MockTransport to avoid real network calls.
"""

import httpx
import pytest

from client._http import (
    DEFAULT_RETRY_BACKOFF_BASE,
    DEFAULT_RETRY_BACKOFF_MAX,
    RETRYABLE_STATUS_CODES,
    AsyncHTTPClient,
    HTTPClient,
    _calculate_backoff,
    _parse_error_response,
    _raise_for_status,
)
from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)


VALIDATION_BODY = {
    "error": "Validation Error",
    "detail": "The request data failed validation",
    "validation_errors": [
        {"loc": ["body", "command"], "msg": "Field required", "type": "missing"}
    ],
}


@pytest.fixture
def no_sleep(monkeypatch):
    """Record backoff delays instead of sleeping."""
    delays = []
    monkeypatch.setattr("client._http.time.sleep", delays.append)
    return delays


# =============================================================================
# Helper Function Tests: _parse_error_response
# =============================================================================


class TestParseErrorResponse:
    """Tests for the _parse_error_response helper function."""

    def test_server_validation_body(self) -> None:
        """The server's 422 body yields its detail, error and field errors."""
        response = httpx.Response(status_code=422, json=VALIDATION_BODY)
        message, error_type, details = _parse_error_response(response)

        assert message == "The request data failed validation"
        assert error_type == "Validation Error"
        assert details == {"errors": VALIDATION_BODY["validation_errors"]}

    def test_fastapi_detail_string(self) -> None:
        response = httpx.Response(status_code=404, json={"detail": "Not Found"})
        assert _parse_error_response(response) == ("Not Found", None, None)

    def test_fastapi_detail_list(self) -> None:
        detail = [{"loc": ["body", "command"], "msg": "Field required"}]
        response = httpx.Response(status_code=422, json={"detail": detail})
        message, error_type, details = _parse_error_response(response)

        assert message == "command: Field required"
        assert error_type == "validation_error"
        assert details == {"errors": detail}

    def test_error_key_only(self) -> None:
        response = httpx.Response(
            status_code=500, json={"error": "Runtime Error", "type": "RuntimeError"}
        )
        assert _parse_error_response(response) == ("Runtime Error", "RuntimeError", None)

    def test_plain_text(self) -> None:
        response = httpx.Response(status_code=502, text="Bad Gateway")
        assert _parse_error_response(response) == ("Bad Gateway", None, None)

    def test_empty_body(self) -> None:
        response = httpx.Response(status_code=503)
        assert _parse_error_response(response) == ("HTTP 503 error", None, None)


# =============================================================================
# Helper Function Tests: _raise_for_status
# =============================================================================


class TestRaiseForStatus:
    """Tests for mapping status codes to exceptions."""

    def test_success_does_not_raise(self) -> None:
        _raise_for_status(httpx.Response(status_code=200, json={}))

    def test_422(self) -> None:
        with pytest.raises(ValidationError) as info:
            _raise_for_status(httpx.Response(status_code=422, json=VALIDATION_BODY))
        assert info.value.status_code == 422
        assert info.value.details["errors"][0]["type"] == "missing"
        assert info.value.response_body == VALIDATION_BODY

    def test_404(self) -> None:
        with pytest.raises(NotFoundError):
            _raise_for_status(httpx.Response(status_code=404, json={"detail": "Not Found"}))

    @pytest.mark.parametrize("code", [500, 502, 503])
    def test_5xx(self, code) -> None:
        with pytest.raises(ServerError) as info:
            _raise_for_status(httpx.Response(status_code=code, text="boom"))
        assert info.value.status_code == code

    def test_other_4xx(self) -> None:
        with pytest.raises(APIError) as info:
            _raise_for_status(
                httpx.Response(status_code=405, json={"detail": "Method Not Allowed"})
            )
        assert type(info.value) is APIError
        assert info.value.status_code == 405


# =============================================================================
# Helper Function Tests: _calculate_backoff
# =============================================================================


class TestCalculateBackoff:
    """Tests for exponential backoff."""

    def test_grows_exponentially(self) -> None:
        assert _calculate_backoff(0) == DEFAULT_RETRY_BACKOFF_BASE
        assert _calculate_backoff(1) == DEFAULT_RETRY_BACKOFF_BASE * 2
        assert _calculate_backoff(3) == DEFAULT_RETRY_BACKOFF_BASE * 8

    def test_capped(self) -> None:
        assert _calculate_backoff(20) == DEFAULT_RETRY_BACKOFF_MAX

    def test_retryable_codes(self) -> None:
        assert RETRYABLE_STATUS_CODES == {502, 503, 504}


# =============================================================================
# HTTPClient Tests
# =============================================================================


class TestHTTPClient:
    """Tests for the synchronous HTTPClient."""

    def test_strips_trailing_slash(self) -> None:
        with HTTPClient(base_url="http://test/") as client:
            assert client.base_url == "http://test"

    def test_post_sends_json(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = request.content
            return httpx.Response(200, json={"ok": True})

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            assert client.post("/api/command", json={"command": "pwd"}) == {"ok": True}

        assert seen["method"] == "POST"
        assert seen["path"] == "/api/command"
        assert b'"command"' in seen["body"]

    def test_empty_response_is_none(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(204))
        with HTTPClient("http://test", transport=transport) as client:
            assert client.get("/health") is None

    def test_connect_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ConnectionError) as info:
                client.get("/health")

        assert info.value.url == "http://test/health"
        assert isinstance(info.value.cause, httpx.ConnectError)

    def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with HTTPClient(
            "http://test", timeout=2.5, transport=httpx.MockTransport(handler)
        ) as client:
            with pytest.raises(TimeoutError) as info:
                client.post("/api/command", json={"command": "ls"})

        assert info.value.timeout == 2.5

    def test_no_retry_by_default(self, no_sleep) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503, text="unavailable")

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ServerError):
                client.get("/health")

        assert len(calls) == 1
        assert no_sleep == []

    def test_retries_then_succeeds(self, no_sleep) -> None:
        responses = iter(
            [httpx.Response(502), httpx.Response(504), httpx.Response(200, json={"status": "healthy"})]
        )
        transport = httpx.MockTransport(lambda request: next(responses))

        with HTTPClient(
            "http://test", retry_enabled=True, max_retries=3, transport=transport
        ) as client:
            assert client.get("/health") == {"status": "healthy"}

        assert no_sleep == [_calculate_backoff(0), _calculate_backoff(1)]

    def test_retries_exhausted(self, no_sleep) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("refused", request=request)

        with HTTPClient(
            "http://test",
            retry_enabled=True,
            max_retries=2,
            transport=httpx.MockTransport(handler),
        ) as client:
            with pytest.raises(ConnectionError):
                client.get("/health")

        assert len(calls) == 3
        assert len(no_sleep) == 2

    def test_client_errors_not_retried(self, no_sleep) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(422, json=VALIDATION_BODY)

        with HTTPClient(
            "http://test", retry_enabled=True, transport=httpx.MockTransport(handler)
        ) as client:
            with pytest.raises(ValidationError):
                client.post("/api/command", json={})

        assert len(calls) == 1


# =============================================================================
# AsyncHTTPClient Tests
# =============================================================================


class TestAsyncHTTPClient:
    """Tests for the asynchronous AsyncHTTPClient."""

    async def test_get(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"status": "healthy"})
        )
        async with AsyncHTTPClient("http://test", transport=transport) as client:
            assert await client.get("/health") == {"status": "healthy"}

    async def test_error_mapping(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(404, json={"detail": "Not Found"}))
        async with AsyncHTTPClient("http://test", transport=transport) as client:
            with pytest.raises(NotFoundError):
                await client.post("/api/nothing", json={})

    async def test_retries(self, monkeypatch) -> None:
        delays = []

        async def fake_sleep(seconds):
            delays.append(seconds)

        monkeypatch.setattr("client._http.asyncio.sleep", fake_sleep)
        responses = iter([httpx.Response(503), httpx.Response(200, json={"a": 1})])
        transport = httpx.MockTransport(lambda request: next(responses))

        async with AsyncHTTPClient(
            "http://test", retry_enabled=True, transport=transport
        ) as client:
            assert await client.get("/health") == {"a": 1}

        assert delays == [DEFAULT_RETRY_BACKOFF_BASE]
