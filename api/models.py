"""Request and response models for the termweb API.

These models are the wire contract of the service and are also re-exported
by the client library.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class CommandRequest(BaseModel):
    """Request model for running one shell command.

    Attributes:
        command: The raw command line, exactly as typed.
    """

    command: str = Field(..., description="Raw command line to execute")


class CommandResponse(BaseModel):
    """Response model for a shell command.

    Shell errors (unknown command, missing file, ...) are reported here with
    ``status="error"``; they are not HTTP errors.

    Attributes:
        output: Text output of the command, or the error message.
        cwd: Working directory after the command ran.
        status: "ok" or "error".
        clear: Whether the terminal should clear its screen.
    """

    output: str
    cwd: str
    status: Literal["ok", "error"]
    clear: bool


class SessionResponse(BaseModel):
    """Response model for the shared session summary.

    Attributes:
        session_id: Identifier of the shared session.
        cwd: Current working directory.
        commands_run: Number of commands executed so far.
    """

    session_id: str
    cwd: str
    commands_run: int


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str


class ErrorResponse(BaseModel):
    """Standard error response model.

    Attributes:
        error: Error type or code.
        detail: Human-readable error message.
        type: Exception type name, when there is one.
        validation_errors: Field errors for validation failures.
    """

    error: str
    detail: str
    type: str | None = None
    validation_errors: list[dict[str, Any]] | None = None
