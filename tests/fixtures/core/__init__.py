"""Core infrastructure fixtures."""

from tests.fixtures.core.filesystems import (
    create_filesystem,
    EMPTY_LAYOUT,
    PROJECT_LAYOUT,
)
from tests.fixtures.core.sessions import (
    create_session_state,
)

__all__ = [
    "create_filesystem",
    "EMPTY_LAYOUT",
    "PROJECT_LAYOUT",
    "create_session_state",
]
