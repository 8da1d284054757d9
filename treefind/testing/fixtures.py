"""Test fixtures for treefind consumers.

Layouts are nested dictionaries: a dict value is a subdirectory, any
other value (usually None or file text) is a file. Insertion order is
kept, which makes traversal-order assertions deterministic for trees built
in memory.

Example:
    layout = {
        'a.txt': None,
        'sub': {'a.txt': None},
    }
    tree = make_tree('/root', layout)
    create_test_tree(tmp_path, layout)
"""

import os
from pathlib import Path
from typing import Any, Dict, Iterator, Union

from ..core.node import DirectoryNode, FileNode

Layout = Dict[str, Any]


def make_tree(root_path: str, layout: Layout) -> DirectoryNode:
    """Build an in-memory snapshot without touching the filesystem.

    Args:
        root_path: Path given to the root node
        layout: Nested layout dictionary

    Returns:
        DirectoryNode whose child maps follow the layout's order
    """
    name = os.path.basename(os.path.normpath(root_path))
    return _make_directory(name, root_path, layout)


def _make_directory(name: str, path: str, layout: Layout) -> DirectoryNode:
    files = {}
    directories = {}
    for child_name, value in layout.items():
        child_path = os.path.join(path, child_name)
        if isinstance(value, dict):
            directories[child_name] = _make_directory(child_name, child_path, value)
        else:
            files[child_name] = FileNode(name=child_name, path=child_path)
    return DirectoryNode(name=name, path=path, files=files, directories=directories)


def create_test_tree(base_dir: Union[str, Path], layout: Layout) -> Path:
    """Materialize a layout on disk under ``base_dir``.

    File values that are strings become the file's content; other values
    create an empty file.

    Returns:
        The base directory as a Path
    """
    base = Path(base_dir)
    base.mkdir(parents=True, exist_ok=True)
    for child_name, value in layout.items():
        child = base / child_name
        if isinstance(value, dict):
            create_test_tree(child, value)
        else:
            child.write_text(value if isinstance(value, str) else "")
    return base


def iter_file_paths(tree: DirectoryNode) -> Iterator[str]:
    """Yield the path of every file node in a snapshot."""
    for file_node in tree.files.values():
        yield file_node.path
    for directory in tree.directories.values():
        yield from iter_file_paths(directory)
