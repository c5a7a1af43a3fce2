"""An in-memory tree of folders and text files."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

NAME_LIMIT = 49
CONTENT_LIMIT = 199


class NodeKind(Enum):
    FILE = "File"
    FOLDER = "FileFolder"


class FileSystemError(Exception):
    """Raised when an operation on the tree cannot be carried out."""


@dataclass(eq=False)
class Node:
    """A file or folder; children are kept in creation order."""

    name: str
    kind: NodeKind
    parent: Node | None = field(default=None, repr=False)
    children: list[Node] = field(default_factory=list, repr=False)
    content: str = ""

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.FOLDER

    def child(self, name: str) -> Node | None:
        """Return the direct child called ``name``, if any."""
        return next((node for node in self.children if node.name == name), None)

    @property
    def path(self) -> str:
        if self.parent is None:
            return "/"
        parent_path = self.parent.path
        if parent_path == "/":
            return "/" + self.name
        return f"{parent_path}/{self.name}"


def _segments(path: str) -> Iterator[str]:
    return (segment for segment in path.split("/") if segment)


class FileSystem:
    """The tree rooted at ``/`` together with the operations the shell offers."""

    def __init__(self) -> None:
        self.root = Node("root", NodeKind.FOLDER)

    def _add(self, parent: Node, name: str, kind: NodeKind, label: str) -> Node:
        if not name:
            raise FileSystemError("Name must not be empty.")
        if not parent.is_dir:
            raise FileSystemError(f"'{parent.name}' is not a directory.")
        if parent.child(name) is not None:
            raise FileSystemError(f"{label} '{name}' already exists.")
        node = Node(name[:NAME_LIMIT], kind, parent)
        parent.children.append(node)
        return node

    def make_dir(self, parent: Node, name: str) -> Node:
        """Create a folder inside ``parent``."""
        return self._add(parent, name, NodeKind.FOLDER, "Directory")

    def touch(self, parent: Node, name: str) -> Node:
        """Create an empty file inside ``parent``."""
        return self._add(parent, name, NodeKind.FILE, "File")

    def resolve(self, path: str, cwd: Node | None = None) -> Node:
        """Find the node named by an absolute path or one relative to ``cwd``."""
        node = self.root if path.startswith("/") else (cwd or self.root)
        for segment in _segments(path):
            found = node.child(segment)
            if found is None:
                raise FileSystemError(f"No such file or directory: '{path}'")
            node = found
        return node

    def change_dir(self, cwd: Node, path: str) -> Node:
        """Return the folder that ``cd path`` leads to from ``cwd``."""
        if path == "/":
            return self.root
        if path == "..":
            return cwd.parent or cwd
        if path.startswith("/"):
            node = self.root
            for segment in _segments(path):
                found = node.child(segment)
                if found is None or not found.is_dir:
                    raise FileSystemError(
                        f"No such directory or it's a file: '{path}'"
                    )
                node = found
            return node
        found = cwd.child(path)
        if found is None:
            raise FileSystemError(f"No such directory: '{path}'")
        if not found.is_dir:
            raise FileSystemError(f"Cannot 'cd' into a file: '{path}'")
        return found

    def _file(self, path: str, cwd: Node | None) -> Node:
        node = self.resolve(path, cwd)
        if node.is_dir:
            raise FileSystemError(f"'{node.name}' is a directory.")
        return node

    def read(self, path: str, cwd: Node | None = None) -> str:
        """Return the content of the file at ``path``."""
        return self._file(path, cwd).content

    def write(self, path: str, cwd: Node | None, content: str) -> None:
        """Replace the content of the file at ``path``."""
        self._file(path, cwd).content = content[:CONTENT_LIMIT]