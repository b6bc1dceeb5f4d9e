"""Unit tests for the termweb client exception hierarchy."""

import pytest

from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TermwebClientError,
    TimeoutError,
    ValidationError,
)


class TestHierarchy:
    """Every client exception can be caught as TermwebClientError."""

    @pytest.mark.parametrize(
        "exc",
        [
            ConnectionError("down"),
            TimeoutError("slow"),
            APIError("bad", status_code=400),
            ValidationError("invalid"),
            NotFoundError("missing"),
            ServerError("boom"),
        ],
    )
    def test_is_client_error(self, exc):
        assert isinstance(exc, TermwebClientError)

    def test_api_subclasses(self):
        assert issubclass(ValidationError, APIError)
        assert issubclass(NotFoundError, APIError)
        assert issubclass(ServerError, APIError)

    def test_does_not_shadow_builtins_by_inheritance(self):
        assert not issubclass(ConnectionError, OSError)
        assert not issubclass(TimeoutError, OSError)


class TestStringForms:
    """Tests for __str__."""

    def test_base(self):
        assert str(TermwebClientError("oops")) == "oops"

    def test_connection_with_url(self):
        exc = ConnectionError("Failed to connect", url="http://x/health")
        assert str(exc) == "Failed to connect (url: http://x/health)"

    def test_connection_without_url(self):
        assert str(ConnectionError("Failed to connect")) == "Failed to connect"

    def test_timeout(self):
        exc = TimeoutError("Timed out", timeout=5.0, url="http://x")
        assert str(exc) == "Timed out (timeout: 5.0s, url: http://x)"

    def test_api_error_with_type(self):
        exc = APIError("bad", status_code=400, error_type="bad_request")
        assert str(exc) == "[HTTP 400] [bad_request] bad"

    def test_api_error_without_type(self):
        assert str(APIError("bad", status_code=400)) == "[HTTP 400] bad"


class TestStatusCodes:
    """Subclasses fix their status code and type."""

    def test_validation(self):
        exc = ValidationError("invalid", details={"errors": []})
        assert exc.status_code == 422
        assert exc.error_type == "validation_error"
        assert exc.details == {"errors": []}

    def test_not_found(self):
        assert NotFoundError("missing").status_code == 404

    def test_server_default_and_override(self):
        assert ServerError("boom").status_code == 500
        assert ServerError("bad gateway", status_code=502).status_code == 502
