"""Tree nodes for an in-memory directory snapshot.

A snapshot is a plain ownership tree: every DirectoryNode owns its files
and subdirectories, and nothing points back up. Nodes are frozen, and a
directory's child maps are complete before the node is constructed, so a
built tree never changes while it is searched.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class FileNode:
    """A non-directory entry: regular file, symlink, device or socket."""

    name: str
    path: str

    @property
    def type(self) -> str:
        return 'file'

    def is_leaf(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Render as a JSON-ready record."""
        return {
            'name': self.name,
            'path': self.path,
            'type': self.type,
        }


@dataclass(frozen=True)
class DirectoryNode:
    """A directory with its files and subdirectories in separate maps.

    Files and subdirectories live in different namespaces, so a file and a
    directory sharing a name never collide.
    """

    name: str
    path: str
    files: Dict[str, FileNode] = field(default_factory=dict)
    directories: Dict[str, 'DirectoryNode'] = field(default_factory=dict)

    @property
    def type(self) -> str:
        return 'directory'

    def is_leaf(self) -> bool:
        """Check if this directory has no children at all."""
        return not self.files and not self.directories

    def count_files(self) -> int:
        """Count file nodes in the whole subtree."""
        return len(self.files) + sum(
            child.count_files() for child in self.directories.values()
        )

    def count_directories(self) -> int:
        """Count directory nodes in the whole subtree, excluding self."""
        return len(self.directories) + sum(
            child.count_directories() for child in self.directories.values()
        )

    def to_dict(self) -> Dict[str, Any]:
        """Render the subtree as nested JSON-ready dictionaries."""
        return {
            'name': self.name,
            'path': self.path,
            'type': self.type,
            'files': {name: f.to_dict() for name, f in self.files.items()},
            'directories': {
                name: d.to_dict() for name, d in self.directories.items()
            },
        }

    def __repr__(self) -> str:
        return (
            f"DirectoryNode({self.path!r}, files={len(self.files)}, "
            f"directories={len(self.directories)})"
        )
