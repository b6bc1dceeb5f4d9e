"""termweb data models package.

This package contains the shell core: the tokenizer, the syntactic path
resolver, the in-memory filesystem tree, the builtin command dispatcher and
the shared session that ties them together.
"""

from models.commands import Builtin, CommandResult, CommandStatus, execute_command
from models.errors import (
    CommandError,
    CommandErrorKind,
    PathError,
    PathErrorKind,
    ShellError,
    TokenizeError,
    TokenizeErrorKind,
)
from models.filesystem import FileSystemTree
from models.node import Directory, File, Node
from models.paths import format_path, resolve_path
from models.session import SessionState, ShellSession
from models.tokenizer import tokenize

__all__ = [
    "Builtin",
    "CommandResult",
    "CommandStatus",
    "execute_command",
    "ShellError",
    "TokenizeError",
    "TokenizeErrorKind",
    "PathError",
    "PathErrorKind",
    "CommandError",
    "CommandErrorKind",
    "FileSystemTree",
    "Directory",
    "File",
    "Node",
    "format_path",
    "resolve_path",
    "SessionState",
    "ShellSession",
    "tokenize",
]
