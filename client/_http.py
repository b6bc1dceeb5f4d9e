"""Internal HTTP handling utilities for the termweb client.

This module provides the low-level HTTP communication layer used by
ShellClient and AsyncShellClient. It handles:
- Making HTTP requests (sync and async)
- Response parsing and error handling
- Retry logic with exponential backoff

This is an internal module and should not be imported directly by users.
"""

import asyncio
import time
from typing import Any, Literal

import httpx

from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)


# HTTP methods used by the client
HttpMethod = Literal["GET", "POST"]

# Status codes that trigger automatic retry (when retry is enabled)
RETRYABLE_STATUS_CODES = {502, 503, 504}

# Default backoff settings for retry logic
DEFAULT_RETRY_BACKOFF_BASE = 0.5  # seconds
DEFAULT_RETRY_BACKOFF_MAX = 30.0  # seconds


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, dict | None]:
    """Parse an error response to extract message, type, and details.

    Understands the server's ``{"error", "detail", "validation_errors"}``
    bodies as well as FastAPI's default ``{"detail": ...}``. Falls back to
    the raw response text if the body is not JSON.

    Args:
        response: The HTTP response to parse.

    Returns:
        A tuple of (message, error_type, details).
    """
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        if text:
            return text, None, None
        return f"HTTP {response.status_code} error", None, None

    if isinstance(body, dict):
        detail = body.get("detail")
        details = None
        if body.get("validation_errors") is not None:
            details = {"errors": body["validation_errors"]}

        if isinstance(detail, str):
            return detail, body.get("error"), details
        if isinstance(detail, list):
            # FastAPI's default validation error format
            messages = [
                f"{err.get('loc', ['unknown'])[-1]}: {err.get('msg', 'invalid')}"
                for err in detail
            ]
            return "; ".join(messages), "validation_error", {"errors": detail}
        if "error" in body:
            return body["error"], body.get("type"), details

    return str(body), None, None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise an appropriate exception for error status codes.

    Args:
        response: The HTTP response to check.

    Raises:
        ValidationError: For HTTP 422 responses.
        NotFoundError: For HTTP 404 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For other HTTP 4xx responses.
    """
    if response.is_success:
        return

    message, error_type, details = _parse_error_response(response)
    status_code = response.status_code

    try:
        response_body = response.json()
    except ValueError:
        response_body = response.text

    if status_code == 422:
        raise ValidationError(message=message, details=details, response_body=response_body)
    elif status_code == 404:
        raise NotFoundError(message=message, details=details, response_body=response_body)
    elif status_code >= 500:
        raise ServerError(
            message=message,
            status_code=status_code,
            details=details,
            response_body=response_body,
        )
    else:
        raise APIError(
            message=message,
            status_code=status_code,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )


def _calculate_backoff(attempt: int, base: float = DEFAULT_RETRY_BACKOFF_BASE) -> float:
    """Calculate exponential backoff delay for retry attempts.

    Uses base * 2^attempt, capped at DEFAULT_RETRY_BACKOFF_MAX seconds.

    Args:
        attempt: The retry attempt number (0-indexed).
        base: Base delay in seconds.

    Returns:
        The delay in seconds before the next retry.
    """
    delay = base * (2 ** attempt)
    return min(delay, DEFAULT_RETRY_BACKOFF_MAX)


class HTTPClient:
    """Synchronous HTTP client for making API requests.

    Wraps httpx.Client with error handling and retry logic.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: The base URL for all API requests.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry on transient failures.
            max_retries: Maximum number of retry attempts.
            transport: Custom transport (e.g., MockTransport for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: HttpMethod,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an HTTP request and return the parsed JSON response.

        Args:
            method: The HTTP method.
            path: The URL path (appended to base_url).
            json: JSON body to send with the request.

        Returns:
            The parsed JSON response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        url = f"{self.base_url}{path}"
        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            is_last = attempt >= attempts - 1
            try:
                response = self._client.request(method=method, url=path, json=json)
            except httpx.ConnectError as e:
                if is_last:
                    raise ConnectionError(
                        message=f"Failed to connect to {url}", url=url, cause=e
                    ) from e
            except httpx.TimeoutException as e:
                if is_last:
                    raise TimeoutError(
                        message=f"Request to {url} timed out",
                        timeout=self.timeout,
                        url=url,
                    ) from e
            else:
                if not (response.status_code in RETRYABLE_STATUS_CODES and not is_last):
                    _raise_for_status(response)
                    if response.content:
                        return response.json()
                    return None

            time.sleep(_calculate_backoff(attempt))

        raise RuntimeError("Unexpected error in request retry loop")

    def get(self, path: str) -> Any:
        """Make a GET request."""
        return self.request("GET", path)

    def post(self, path: str, json: dict[str, Any] | None = None) -> Any:
        """Make a POST request."""
        return self.request("POST", path, json=json)


class AsyncHTTPClient:
    """Asynchronous HTTP client for making API requests.

    Wraps httpx.AsyncClient with the same error handling and retry logic as
    HTTPClient.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the async HTTP client.

        Args:
            base_url: The base URL for all API requests.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry on transient failures.
            max_retries: Maximum number of retry attempts.
            transport: Custom transport (e.g., ASGITransport for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an async HTTP request and return the parsed JSON response.

        Args:
            method: The HTTP method.
            path: The URL path (appended to base_url).
            json: JSON body to send with the request.

        Returns:
            The parsed JSON response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        url = f"{self.base_url}{path}"
        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            is_last = attempt >= attempts - 1
            try:
                response = await self._client.request(method=method, url=path, json=json)
            except httpx.ConnectError as e:
                if is_last:
                    raise ConnectionError(
                        message=f"Failed to connect to {url}", url=url, cause=e
                    ) from e
            except httpx.TimeoutException as e:
                if is_last:
                    raise TimeoutError(
                        message=f"Request to {url} timed out",
                        timeout=self.timeout,
                        url=url,
                    ) from e
            else:
                if not (response.status_code in RETRYABLE_STATUS_CODES and not is_last):
                    _raise_for_status(response)
                    if response.content:
                        return response.json()
                    return None

            await asyncio.sleep(_calculate_backoff(attempt))

        raise RuntimeError("Unexpected error in request retry loop")

    async def get(self, path: str) -> Any:
        """Make an async GET request."""
        return await self.request("GET", path)

    async def post(self, path: str, json: dict[str, Any] | None = None) -> Any:
        """Make an async POST request."""
        return await self.request("POST", path, json=json)
