"""Core data model and search algorithms.

Everything here is pure computation over an already-built tree; no I/O.
"""

from .node import DirectoryNode, FileNode
from .search import (
    find_first_recursive,
    find_first_iterative,
    find_all_recursive,
    find_all_iterative,
    select_search,
    search,
)

__all__ = [
    # Nodes
    'DirectoryNode',
    'FileNode',
    # Search
    'find_first_recursive',
    'find_first_iterative',
    'find_all_recursive',
    'find_all_iterative',
    'select_search',
    'search',
]
