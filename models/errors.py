"""Shell error taxonomy.

Every failure a command can produce is one of the exceptions below. They are
raised by the tokenizer, the filesystem tree and the command handlers, and are
all recovered at the dispatch boundary (see models.commands.execute_command)
into an error CommandResult. None of them leaves the session unusable.

Exception Hierarchy:
    ShellError (base)
    ├── TokenizeError - the command line could not be split into tokens
    ├── PathError - a path did not name what the operation needed
    └── CommandError - a builtin was misused or its target already exists
"""

from enum import Enum


class TokenizeErrorKind(str, Enum):
    """Reasons a command line fails to tokenize."""

    UNCLOSED_QUOTE = "unclosed_quote"


class PathErrorKind(str, Enum):
    """Reasons a path fails to address a usable node."""

    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    INVALID_PATH = "invalid_path"
    PARENT_NOT_FOUND = "parent_not_found"


class CommandErrorKind(str, Enum):
    """Reasons a builtin rejects its arguments."""

    MISSING_OPERAND = "missing_operand"
    ALREADY_EXISTS = "already_exists"
    MISSING_FILE_OPERAND = "missing_file_operand"
    UNKNOWN_COMMAND = "unknown_command"


class ShellError(Exception):
    """Base exception for all shell-level failures.

    Attributes:
        message: Human-readable reason, shown to the user as command output.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def for_command(self, command: str) -> str:
        """Return the message as reported by the given builtin.

        Args:
            command: Name of the builtin that hit the error.

        Returns:
            The message prefixed with ``"<command>: "``.
        """
        return f"{command}: {self.message}"


class TokenizeError(ShellError):
    """Raised when a command line cannot be split into tokens.

    Attributes:
        kind: Why tokenizing failed.
        message: Human-readable reason.
    """

    def __init__(self, kind: TokenizeErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class PathError(ShellError):
    """Raised when a path does not address a node the operation can use.

    Attributes:
        kind: Which path check failed.
        path: The resolved segment path the operation was given.
        message: Short reason phrase (e.g. "parent not found").
    """

    def __init__(self, kind: PathErrorKind, path: list[str], message: str) -> None:
        self.kind = kind
        self.path = list(path)
        super().__init__(message)


class CommandError(ShellError):
    """Raised when a builtin cannot carry out what was asked of it.

    Attributes:
        kind: Which command check failed.
        message: Short reason phrase (e.g. "missing operand").
    """

    def __init__(self, kind: CommandErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)
