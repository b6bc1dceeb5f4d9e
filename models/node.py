"""Filesystem node models.

A node is exactly one of two things, a Directory or a File. The union is
closed and discriminated by ``kind`` so a serialized tree always round-trips
to the same shape.
"""

from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, Field


class File(BaseModel):
    """A regular file holding a text blob.

    Args:
        kind: Discriminator, always "file".
        content: The full text content of the file.
    """

    kind: Literal["file"] = "file"
    content: str = Field(default="", description="Full text content of the file")


class Directory(BaseModel):
    """A directory exclusively owning its children.

    Args:
        kind: Discriminator, always "directory".
        children: Mapping from child name to child node. Names are unique by
            construction; iteration through ``entries()`` is lexicographic.
    """

    kind: Literal["directory"] = "directory"
    children: dict[str, "Node"] = Field(
        default_factory=dict, description="Child nodes keyed by name"
    )

    def entries(self) -> Iterator[tuple[str, "Node"]]:
        """Yield ``(name, node)`` pairs in lexicographic name order."""
        for name in sorted(self.children):
            yield name, self.children[name]


Node = Annotated[Union[Directory, File], Field(discriminator="kind")]

Directory.model_rebuild()
