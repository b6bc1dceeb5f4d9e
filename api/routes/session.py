"""Shared session inspection endpoint."""

from fastapi import APIRouter

from api.dependencies import ShellSessionDep
from api.models import ErrorResponse, SessionResponse


router = APIRouter(
    prefix="/api",
    tags=["session"],
    responses={
        500: {"model": ErrorResponse, "description": "Session unavailable or server fault"},
    },
)


@router.get("/session", response_model=SessionResponse)
async def get_session(session: ShellSessionDep):
    """Get a summary of the shared session without running a command.

    Args:
        session: The shared ShellSession (injected by FastAPI).

    Returns:
        The session id, current working directory and command count.
    """
    return SessionResponse(**session.summary())
