"""Shared shell session.

SessionState is the data: one filesystem tree and one working directory.
ShellSession is the handle the server holds. It serializes every command
behind a single lock so commands observe and mutate the state strictly one at
a time, in lock-acquisition order.
"""

import logging
import threading
import uuid

from pydantic import BaseModel, Field

from models.commands import CommandResult, CommandStatus, execute_command
from models.filesystem import FileSystemTree
from models.paths import format_path

logger = logging.getLogger(__name__)


class SessionState(BaseModel):
    """The filesystem and working directory every client shares.

    Args:
        fs: The filesystem tree.
        cwd: Segments of the current working directory; ``[]`` is the root.
            Always names an existing Directory, since nothing can be deleted.
    """

    fs: FileSystemTree = Field(default_factory=FileSystemTree, description="Filesystem tree")
    cwd: list[str] = Field(default_factory=list, description="Current working directory")

    @property
    def cwd_display(self) -> str:
        """Return the working directory as an absolute path string."""
        return format_path(self.cwd)


class ShellSession:
    """Lock-guarded handle around the single SessionState.

    Every call to ``run`` holds the lock for the whole tokenize, resolve and
    execute sequence. No command can see another one half-applied.

    Attributes:
        session_id: Identifier of the current state, changed by ``reset``.
        commands_run: Number of commands executed since the last reset.

    Example:
        >>> session = ShellSession()
        >>> session.run("mkdir docs").status
        <CommandStatus.OK: 'ok'>
        >>> session.run("cd docs").cwd
        '/docs'
    """

    def __init__(self, state: SessionState | None = None) -> None:
        self._state = state if state is not None else SessionState()
        self._lock = threading.Lock()
        self.session_id = str(uuid.uuid4())
        self.commands_run = 0

    def run(self, command: str) -> CommandResult:
        """Execute one command line with exclusive access to the session.

        Args:
            command: The raw command line.

        Returns:
            The CommandResult. Shell errors are reported in the result, never
            raised.
        """
        with self._lock:
            result = execute_command(self._state, command)
            self.commands_run += 1

        if result.status == CommandStatus.ERROR:
            logger.debug(f"Command {command!r} returned error: {result.output}")
        else:
            logger.debug(f"Command {command!r} ok, cwd now {result.cwd}")
        return result

    @property
    def cwd(self) -> str:
        """Return the current working directory display string."""
        with self._lock:
            return self._state.cwd_display

    def summary(self) -> dict:
        """Return the session id, cwd and command count read together.

        Returns:
            Dictionary with ``session_id``, ``cwd`` and ``commands_run``, all
            taken under the lock so they describe the same moment.
        """
        with self._lock:
            return {
                "session_id": self.session_id,
                "cwd": self._state.cwd_display,
                "commands_run": self.commands_run,
            }

    def snapshot(self) -> dict:
        """Return a deep, JSON-ready copy of the whole session state."""
        with self._lock:
            return self._state.model_dump(mode="json")

    def reset(self) -> None:
        """Replace the state with an empty filesystem and a root cwd."""
        with self._lock:
            self._state = SessionState()
            self.session_id = str(uuid.uuid4())
            self.commands_run = 0
        logger.info("Shell session reset to an empty filesystem")
