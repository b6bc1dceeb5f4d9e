"""termweb API Client Library.

This module provides a Python client for a termweb server, the HTTP service
exposing one shared in-memory shell. It supports both synchronous and
asynchronous usage.

Example:
    Synchronous usage::

        from client import ShellClient

        with ShellClient(base_url="http://localhost:3000") as client:
            result = client.run("ls /")
            print(result.output)

    Asynchronous usage::

        from client import AsyncShellClient

        async with AsyncShellClient() as client:
            result = await client.run("pwd")

Exports:
    ShellClient: Synchronous client.
    AsyncShellClient: Asynchronous client.

    Exceptions:
        TermwebClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        ValidationError: Request validation failed (HTTP 422).
        NotFoundError: Endpoint not found (HTTP 404).
        ServerError: Server-side error (HTTP 5xx).
"""

from client.client import AsyncShellClient, ShellClient
from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TermwebClientError,
    TimeoutError,
    ValidationError,
)
from client.models import (
    CommandRequest,
    CommandResponse,
    ErrorResponse,
    HealthResponse,
    SessionResponse,
)

__all__ = [
    # Clients
    "ShellClient",
    "AsyncShellClient",
    # Models
    "CommandRequest",
    "CommandResponse",
    "ErrorResponse",
    "HealthResponse",
    "SessionResponse",
    # Exceptions
    "TermwebClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "ValidationError",
    "NotFoundError",
    "ServerError",
]
