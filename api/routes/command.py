"""Command execution endpoint.

This is the single entry point through which clients drive the shared shell.
"""

from fastapi import APIRouter

from api.dependencies import ShellSessionDep
from api.models import CommandRequest, CommandResponse, ErrorResponse


router = APIRouter(
    prefix="/api",
    tags=["command"],
    responses={
        422: {"model": ErrorResponse, "description": "Malformed request body"},
        500: {"model": ErrorResponse, "description": "Session unavailable or server fault"},
    },
)


@router.post("/command", response_model=CommandResponse)
async def run_command(request: CommandRequest, session: ShellSessionDep):
    """Run one command line against the shared shell session.

    The session lock is held for the whole command, so concurrent requests
    are applied one after another.

    Args:
        request: Contains the raw command line.
        session: The shared ShellSession (injected by FastAPI).

    Returns:
        The command's output, the working directory after it ran, its status
        and whether the terminal should clear.
    """
    result = session.run(request.command)

    return CommandResponse(
        output=result.output,
        cwd=result.cwd,
        status=result.status.value,
        clear=result.clear,
    )
