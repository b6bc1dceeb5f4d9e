"""Builtin command dispatcher.

Maps the first token of a command line to one of a closed set of builtins,
runs it against a SessionState and packages the outcome as a CommandResult.
ShellError raised anywhere below this point is turned into an error result
here, so callers only ever see a CommandResult.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable

from pydantic import BaseModel, Field

from models.errors import (
    CommandError,
    CommandErrorKind,
    PathError,
    PathErrorKind,
    ShellError,
)
from models.paths import resolve_path
from models.tokenizer import strip_whitespace, tokenize

if TYPE_CHECKING:
    from models.session import SessionState

logger = logging.getLogger(__name__)


class CommandStatus(str, Enum):
    """Outcome of a command."""

    OK = "ok"
    ERROR = "error"


class CommandResult(BaseModel):
    """What a single command produced.

    Args:
        output: Text to show the user (may be empty).
        cwd: Display form of the working directory after the command ran.
        status: Whether the command succeeded.
        clear: Whether the terminal should clear its screen.
    """

    output: str = Field(default="", description="Text output of the command")
    cwd: str = Field(description="Working directory after the command ran")
    status: CommandStatus = Field(default=CommandStatus.OK, description="ok or error")
    clear: bool = Field(default=False, description="Whether to clear the screen")


class Builtin(str, Enum):
    """The complete set of recognized commands."""

    HELP = "help"
    PWD = "pwd"
    LS = "ls"
    CD = "cd"
    MKDIR = "mkdir"
    TOUCH = "touch"
    CAT = "cat"
    ECHO = "echo"
    CLEAR = "clear"


HELP_TEXT = "\n".join(
    [
        "Available commands:",
        "  pwd",
        "  ls [path]",
        "  cd [path]",
        "  mkdir <name>...",
        "  touch <name>...",
        "  cat <file>...",
        "  echo <text> [> file | >> file]",
        "  clear",
        "  help",
    ]
)

REDIRECT_REPLACE = ">"
REDIRECT_APPEND = ">>"


class _Outcome(BaseModel):
    """Handler return value; the dispatcher adds cwd and status."""

    output: str = ""
    clear: bool = False


# ===== Builtin handlers =====
# Each handler takes the session state and the arguments after the command
# name, and either returns an _Outcome or raises ShellError.


def _help(state: "SessionState", args: list[str]) -> _Outcome:
    return _Outcome(output=HELP_TEXT)


def _pwd(state: "SessionState", args: list[str]) -> _Outcome:
    return _Outcome(output=state.cwd_display)


def _ls(state: "SessionState", args: list[str]) -> _Outcome:
    path = resolve_path(state.cwd, args[0]) if args else list(state.cwd)
    return _Outcome(output=state.fs.list_dir(path))


def _cd(state: "SessionState", args: list[str]) -> _Outcome:
    target = args[0] if args else "/"
    path = resolve_path(state.cwd, target)
    if not state.fs.is_dir(path):
        raise PathError(PathErrorKind.NOT_A_DIRECTORY, path, "Not a directory")
    state.cwd = path
    return _Outcome()


def _require_operands(name: str, args: list[str]) -> None:
    if not args:
        raise CommandError(
            CommandErrorKind.MISSING_OPERAND, f"{name}: missing operand"
        )


def _apply_each(
    name: str,
    state: "SessionState",
    args: list[str],
    operation: Callable[[list[str]], None],
) -> _Outcome:
    """Apply ``operation`` to each argument in order, stopping at the first failure.

    Arguments processed before the failing one stay applied.
    """
    _require_operands(name, args)
    for arg in args:
        try:
            operation(resolve_path(state.cwd, arg))
        except ShellError as e:
            raise _prefixed(name, e) from e
    return _Outcome()


def _mkdir(state: "SessionState", args: list[str]) -> _Outcome:
    return _apply_each(Builtin.MKDIR.value, state, args, state.fs.mkdir)


def _touch(state: "SessionState", args: list[str]) -> _Outcome:
    return _apply_each(Builtin.TOUCH.value, state, args, state.fs.touch)


def _cat(state: "SessionState", args: list[str]) -> _Outcome:
    name = Builtin.CAT.value
    _require_operands(name, args)
    parts = []
    for arg in args:
        try:
            parts.append(state.fs.read_file(resolve_path(state.cwd, arg)))
        except ShellError as e:
            # Collected output is dropped; only the failure is reported.
            raise _prefixed(name, e) from e
    return _Outcome(output="\n".join(parts))


def _echo(state: "SessionState", args: list[str]) -> _Outcome:
    name = Builtin.ECHO.value
    marker_index = next(
        (
            i
            for i, token in enumerate(args)
            if token in (REDIRECT_REPLACE, REDIRECT_APPEND)
        ),
        None,
    )
    if marker_index is None:
        return _Outcome(output=" ".join(args))

    if marker_index + 1 >= len(args):
        raise CommandError(
            CommandErrorKind.MISSING_FILE_OPERAND, f"{name}: missing file operand"
        )

    content = " ".join(args[:marker_index])
    path = resolve_path(state.cwd, args[marker_index + 1])
    append = args[marker_index] == REDIRECT_APPEND
    try:
        state.fs.write_file(path, content, append=append)
    except ShellError as e:
        raise _prefixed(name, e) from e
    return _Outcome()


def _clear(state: "SessionState", args: list[str]) -> _Outcome:
    return _Outcome(clear=True)


def _prefixed(name: str, error: ShellError) -> ShellError:
    """Re-raise-ready copy of ``error`` with its message scoped to ``name``."""
    message = error.for_command(name)
    if isinstance(error, PathError):
        return PathError(error.kind, error.path, message)
    if isinstance(error, CommandError):
        return CommandError(error.kind, message)
    return ShellError(message)


BUILTINS: dict[Builtin, Callable[["SessionState", list[str]], _Outcome]] = {
    Builtin.HELP: _help,
    Builtin.PWD: _pwd,
    Builtin.LS: _ls,
    Builtin.CD: _cd,
    Builtin.MKDIR: _mkdir,
    Builtin.TOUCH: _touch,
    Builtin.CAT: _cat,
    Builtin.ECHO: _echo,
    Builtin.CLEAR: _clear,
}


# ===== Dispatch boundary =====


def execute_command(state: "SessionState", line: str) -> CommandResult:
    """Run one command line against the session state.

    The caller is responsible for serializing access to ``state``; see
    ShellSession.run.

    Args:
        state: The session to read and mutate.
        line: The raw command line.

    Returns:
        The command's result. Shell errors become ``status="error"`` results
        with the error message as output; the state stays usable.
    """
    line = strip_whitespace(line)

    try:
        tokens = tokenize(line)
        if not tokens:
            return CommandResult(cwd=state.cwd_display)

        name, args = tokens[0], tokens[1:]
        try:
            builtin = Builtin(name)
        except ValueError:
            raise CommandError(
                CommandErrorKind.UNKNOWN_COMMAND, f"Unknown command: {name}"
            ) from None

        outcome = BUILTINS[builtin](state, args)
    except ShellError as e:
        logger.info(f"Command {line!r} failed: {e.message}")
        return CommandResult(
            output=e.message,
            cwd=state.cwd_display,
            status=CommandStatus.ERROR,
        )

    return CommandResult(
        output=outcome.output,
        cwd=state.cwd_display,
        clear=outcome.clear,
    )
