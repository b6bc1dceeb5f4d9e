"""In-memory hierarchical filesystem."""

from typing import Optional

from pydantic import BaseModel, Field

from models.errors import CommandError, CommandErrorKind, PathError, PathErrorKind
from models.node import Directory, File, Node


ENTRY_SEPARATOR = "  "
DIRECTORY_SUFFIX = "/"


class FileSystemTree(BaseModel):
    """A tree of Directory and File nodes rooted at a Directory.

    All operations take an absolute segment path (as produced by
    models.paths.resolve_path) and walk down from the root. A segment that
    is missing, or that would have to descend through a File, makes the path
    absent.

    Every mutating operation either applies completely or raises before
    touching the tree.

    Args:
        root: The root directory. It can never be replaced by a File.

    Example:
        >>> fs = FileSystemTree()
        >>> fs.mkdir(["docs"])
        >>> fs.write_file(["docs", "a.txt"], "hello", append=False)
        >>> fs.list_dir(["docs"])
        'a.txt'
    """

    root: Directory = Field(default_factory=Directory, description="The root directory")

    # ===== Lookup =====

    def lookup(self, path: list[str]) -> Optional[Node]:
        """Return the node at ``path``, or None if nothing is there.

        Args:
            path: Absolute segment path. ``[]`` is the root.

        Returns:
            The Directory or File found, or None.
        """
        current: Node = self.root
        for segment in path:
            if not isinstance(current, Directory):
                return None
            child = current.children.get(segment)
            if child is None:
                return None
            current = child
        return current

    def is_dir(self, path: list[str]) -> bool:
        """Report whether ``path`` names a Directory.

        Returns:
            True for a Directory, False for a File.

        Raises:
            PathError: NOT_FOUND if nothing is at ``path``.
        """
        node = self.lookup(path)
        if node is None:
            raise PathError(PathErrorKind.NOT_FOUND, path, "Path not found")
        return isinstance(node, Directory)

    def list_dir(self, path: list[str]) -> str:
        """Render a listing of ``path``.

        A Directory lists its children sorted by name, directories suffixed
        with ``/``, separated by two spaces. A File lists as its own name.

        Raises:
            PathError: NOT_FOUND if nothing is at ``path``.
        """
        node = self.lookup(path)
        if node is None:
            raise PathError(PathErrorKind.NOT_FOUND, path, "Path not found")
        if isinstance(node, File):
            return path[-1] if path else ""
        return ENTRY_SEPARATOR.join(
            name + DIRECTORY_SUFFIX if isinstance(child, Directory) else name
            for name, child in node.entries()
        )

    def read_file(self, path: list[str]) -> str:
        """Return the content of the File at ``path``.

        Raises:
            PathError: NOT_FOUND if absent, IS_A_DIRECTORY for a Directory.
        """
        node = self.lookup(path)
        if node is None:
            raise PathError(PathErrorKind.NOT_FOUND, path, "file not found")
        if isinstance(node, Directory):
            raise PathError(PathErrorKind.IS_A_DIRECTORY, path, "is a directory")
        return node.content

    # ===== Mutation =====

    def mkdir(self, path: list[str]) -> None:
        """Create one empty Directory at ``path``.

        Only the last segment is created; intermediate directories must
        already exist.

        Raises:
            PathError: INVALID_PATH, PARENT_NOT_FOUND or NOT_A_DIRECTORY
                from the parent checks.
            CommandError: ALREADY_EXISTS if anything already has that name.
        """
        parent, name = self._parent_directory(path)
        if name in parent.children:
            raise CommandError(CommandErrorKind.ALREADY_EXISTS, "already exists")
        parent.children[name] = Directory()

    def touch(self, path: list[str]) -> None:
        """Create an empty File at ``path`` unless a File is already there.

        Raises:
            PathError: parent checks as for mkdir, or IS_A_DIRECTORY if a
                Directory already has that name.
        """
        parent, name = self._parent_directory(path)
        existing = parent.children.get(name)
        if existing is None:
            parent.children[name] = File()
        elif isinstance(existing, Directory):
            raise PathError(PathErrorKind.IS_A_DIRECTORY, path, "is a directory")

    def write_file(self, path: list[str], content: str, append: bool) -> None:
        """Write ``content`` to the File at ``path``, creating it if needed.

        When appending to a File that already has content, a single newline
        is inserted between the old and new text. Without ``append`` the old
        content is replaced.

        Raises:
            PathError: parent checks as for mkdir, or IS_A_DIRECTORY if the
                target is a Directory.
        """
        parent, name = self._parent_directory(path)
        existing = parent.children.get(name)
        if isinstance(existing, Directory):
            raise PathError(PathErrorKind.IS_A_DIRECTORY, path, "target is a directory")
        if existing is None:
            parent.children[name] = File(content=content)
        elif append and existing.content:
            existing.content = existing.content + "\n" + content
        else:
            existing.content = content

    def _parent_directory(self, path: list[str]) -> tuple[Directory, str]:
        """Return the Directory that should hold ``path`` and the child name.

        Raises:
            PathError: INVALID_PATH for the root, PARENT_NOT_FOUND if the
                parent is absent, NOT_A_DIRECTORY if it is a File.
        """
        if not path:
            raise PathError(PathErrorKind.INVALID_PATH, path, "invalid path")
        parent = self.lookup(path[:-1])
        if parent is None:
            raise PathError(PathErrorKind.PARENT_NOT_FOUND, path, "parent not found")
        if not isinstance(parent, Directory):
            raise PathError(
                PathErrorKind.NOT_A_DIRECTORY, path, "parent is not a directory"
            )
        return parent, path[-1]
