"""Syntactic path resolution.

Paths are handled as lists of name segments from the root. Resolution never
touches the filesystem tree, so it cannot fail; whether the result names
anything is decided later by FileSystemTree.
"""

SEPARATOR = "/"
CURRENT_DIR = "."
PARENT_DIR = ".."


def resolve_path(cwd: list[str], raw: str) -> list[str]:
    """Resolve a raw path string against a working directory.

    Absolute paths (leading ``/``) start from the root, anything else starts
    from ``cwd``. Empty segments and ``.`` are dropped, ``..`` drops the last
    accumulated segment and stops at the root.

    Args:
        cwd: Segments of the current working directory.
        raw: The path as typed by the user.

    Returns:
        A new normalized segment list. ``cwd`` is not modified.

    Example:
        >>> resolve_path(["a", "b"], "../c")
        ['a', 'c']
    """
    parts = [] if raw.startswith(SEPARATOR) else list(cwd)

    for segment in raw.split(SEPARATOR):
        if segment in ("", CURRENT_DIR):
            continue
        if segment == PARENT_DIR:
            if parts:
                parts.pop()
            continue
        parts.append(segment)

    return parts


def format_path(segments: list[str]) -> str:
    """Render a segment path as an absolute path string ("/" for the root)."""
    if not segments:
        return SEPARATOR
    return SEPARATOR + SEPARATOR.join(segments)
