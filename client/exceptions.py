"""Errors raised by the termweb client.

A command that fails inside the shell is not an exception here: ``run``
returns a CommandResponse with ``status="error"`` and the shell's message as
output. These classes cover the cases where no CommandResponse could be
obtained at all.

Exception Hierarchy:
    TermwebClientError (base)
    ├── ConnectionError - the server did not accept the connection
    ├── TimeoutError - no answer within the configured timeout
    └── APIError - the server answered with a non-2xx status
        ├── ValidationError (HTTP 422)
        ├── NotFoundError (HTTP 404)
        └── ServerError (HTTP 5xx)

The terminal catches TermwebClientError as a whole and prints
"Failed to reach the server.".
"""

from typing import Any


class TermwebClientError(Exception):
    """Root of every error the client raises.

    Attributes:
        message: Short description of what went wrong.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConnectionError(TermwebClientError):
    """The termweb server could not be reached.

    Usually the server is not running or the ``--url`` is wrong.

    Attributes:
        url: Full URL of the request that failed.
        cause: The httpx exception behind the failure.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} (url: {self.url})"
        return self.message


class TimeoutError(TermwebClientError):
    """The server accepted the request but did not answer in time.

    Attributes:
        timeout: Seconds the client waited.
        url: Full URL of the request.
    """

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        extras = []
        if self.timeout is not None:
            extras.append(f"timeout: {self.timeout}s")
        if self.url:
            extras.append(f"url: {self.url}")
        if not extras:
            return self.message
        return f"{self.message} ({', '.join(extras)})"


class APIError(TermwebClientError):
    """The server rejected the request with an HTTP error status.

    ``message`` comes from the ``detail`` of the server's ErrorResponse body
    when there is one.

    Attributes:
        status_code: HTTP status of the response.
        error_type: The ErrorResponse ``error`` field, or a fixed code set by
            a subclass.
        details: Field errors, as ``{"errors": [...]}``, for 422 responses.
        response_body: Decoded JSON body, or the raw text.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        if self.error_type:
            return f"[HTTP {self.status_code}] [{self.error_type}] {self.message}"
        return f"[HTTP {self.status_code}] {self.message}"


class ValidationError(APIError):
    """The request body was not a valid CommandRequest (HTTP 422)."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message,
            status_code=422,
            error_type="validation_error",
            details=details,
            response_body=response_body,
        )


class NotFoundError(APIError):
    """No such endpoint (HTTP 404); the base URL points somewhere else."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message,
            status_code=404,
            error_type="not_found",
            details=details,
            response_body=response_body,
        )


class ServerError(APIError):
    """The server failed (HTTP 5xx).

    A 500 whose ``response_body["error"]`` is "Runtime Error" means the
    shell session was not started. 502, 503 and 504 are retried first when the
    client was created with ``retry_enabled=True``.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message,
            status_code=status_code,
            error_type="server_error",
            details=details,
            response_body=response_body,
        )
