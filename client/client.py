"""Main termweb client classes.

This module provides the entry points for talking to a termweb server:
- ShellClient: Synchronous client
- AsyncShellClient: Asynchronous client

Example:
    Synchronous usage::

        from client import ShellClient

        with ShellClient(base_url="http://localhost:3000") as client:
            client.run("mkdir docs")
            client.run('echo "hello" > docs/readme')
            print(client.run("cat docs/readme").output)

    Asynchronous usage::

        from client import AsyncShellClient

        async with AsyncShellClient() as client:
            result = await client.run("ls /")
"""

from typing import Any

from client.models import CommandRequest, CommandResponse, HealthResponse, SessionResponse
from client._http import AsyncHTTPClient, HTTPClient


DEFAULT_BASE_URL = "http://localhost:3000"


class ShellClient:
    """Synchronous client for the termweb REST API.

    Attributes:
        base_url: The base URL of the termweb server.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: The base URL of the termweb server.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry on connection errors, timeouts
                and HTTP 502/503/504, with exponential backoff.
            max_retries: Maximum number of retry attempts when retry is
                enabled.
            transport: Custom HTTP transport (e.g., MockTransport for testing).
        """
        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        """Return the base URL of the server."""
        return self._http.base_url

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    def __enter__(self) -> "ShellClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def run(self, command: str) -> CommandResponse:
        """Run one command line on the shared shell.

        Shell errors are not raised; check ``status`` on the response.

        Args:
            command: The raw command line.

        Returns:
            The command's output, cwd, status and clear flag.

        Raises:
            TermwebClientError: If the server could not be reached or
                rejected the request.
        """
        request = CommandRequest(command=command)
        data = self._http.post("/api/command", json=request.model_dump())
        return CommandResponse(**data)

    def session(self) -> SessionResponse:
        """Get a summary of the shared session."""
        data = self._http.get("/api/session")
        return SessionResponse(**data)

    def cwd(self) -> str:
        """Get the current working directory without running a command."""
        return self.session().cwd

    def health(self) -> HealthResponse:
        """Check that the server is up."""
        data = self._http.get("/health")
        return HealthResponse(**data)


class AsyncShellClient:
    """Asynchronous client for the termweb REST API.

    Mirrors ShellClient with awaitable methods.

    Attributes:
        base_url: The base URL of the termweb server.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        """Initialize the async client.

        Args:
            base_url: The base URL of the termweb server.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry transient failures.
            max_retries: Maximum number of retry attempts.
            transport: Custom HTTP transport (e.g., ASGITransport for testing).
        """
        self._http = AsyncHTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        """Return the base URL of the server."""
        return self._http.base_url

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    async def __aenter__(self) -> "AsyncShellClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def run(self, command: str) -> CommandResponse:
        """Run one command line on the shared shell.

        Args:
            command: The raw command line.

        Returns:
            The command's output, cwd, status and clear flag.
        """
        request = CommandRequest(command=command)
        data = await self._http.post("/api/command", json=request.model_dump())
        return CommandResponse(**data)

    async def session(self) -> SessionResponse:
        """Get a summary of the shared session."""
        data = await self._http.get("/api/session")
        return SessionResponse(**data)

    async def cwd(self) -> str:
        """Get the current working directory without running a command."""
        session = await self.session()
        return session.cwd

    async def health(self) -> HealthResponse:
        """Check that the server is up."""
        data = await self._http.get("/health")
        return HealthResponse(**data)
