"""Core abstractions for async tree building.

The adapter lists directories; the builder turns those listings into a
DirectoryNode snapshot.
"""

from .adapter import AsyncTreeAdapter, DirectoryEntry
from .builder import TreeBuilder, build_tree

__all__ = [
    # Adapter
    'AsyncTreeAdapter',
    'DirectoryEntry',
    # Builder
    'TreeBuilder',
    'build_tree',
]
