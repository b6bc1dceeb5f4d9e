"""Dependency injection providers for the FastAPI application.

This module owns the one ShellSession of the process and hands it to route
handlers. Routes receive it explicitly through ``ShellSessionDep`` rather than
reaching for the module global.
"""

import logging
from typing import Annotated

from fastapi import Depends

from models.session import ShellSession

logger = logging.getLogger(__name__)


# The single shared session. Every client talks to this instance.
_shell_session: ShellSession | None = None


def get_shell_session() -> ShellSession:
    """Get the shared ShellSession instance.

    This function is a FastAPI dependency. Tests replace it through
    ``app.dependency_overrides`` to inject a fresh session.

    Returns:
        The shared ShellSession instance.

    Raises:
        RuntimeError: If the session hasn't been initialized yet.

    Example:
        @router.post("/api/command")
        async def run(session: Annotated[ShellSession, Depends(get_shell_session)]):
            return session.run("pwd")
    """
    if _shell_session is None:
        raise RuntimeError(
            "ShellSession not initialized. Call initialize_shell_session() first."
        )

    return _shell_session


def initialize_shell_session() -> ShellSession:
    """Create the shared ShellSession with an empty filesystem.

    Called once when the FastAPI app starts up.

    Returns:
        The newly created ShellSession.
    """
    global _shell_session

    _shell_session = ShellSession()
    logger.info(f"Shell session {_shell_session.session_id} created")

    return _shell_session


def shutdown_shell_session() -> None:
    """Drop the shared ShellSession; its filesystem is not persisted."""
    global _shell_session

    if _shell_session is not None:
        logger.info(
            f"Discarding shell session {_shell_session.session_id} "
            f"after {_shell_session.commands_run} commands"
        )

    _shell_session = None


# Type alias for dependency injection
ShellSessionDep = Annotated[ShellSession, Depends(get_shell_session)]
