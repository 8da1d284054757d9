"""Async tree builder.

Walks a directory depth-first and produces a DirectoryNode snapshot.
Listings happen strictly one at a time: a directory is listed, then each
subdirectory is built to completion before the next one starts.
"""

import logging
import os
from typing import Optional

from ...core.node import DirectoryNode, FileNode
from ..adapters.filesystem import AsyncFileSystemAdapter
from ..error_handling import ErrorHandlingAdapter
from ..error_policies import ContinueOnErrorsPolicy, ErrorPolicy
from .adapter import AsyncTreeAdapter

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds an in-memory snapshot of a directory subtree.

    Listing failures go through the error policy. With the default
    ContinueOnErrorsPolicy a directory that cannot be read (permission
    denied, not a directory, vanished) is kept in the tree with no
    children, and the build carries on with its siblings.

    There is no cycle detection. With ``follow_symlinks=True`` a symlink
    loop can recurse until the interpreter's recursion limit is reached.
    """

    def __init__(
        self,
        adapter: Optional[AsyncTreeAdapter] = None,
        policy: Optional[ErrorPolicy] = None,
        follow_symlinks: bool = False
    ):
        """Initialize the builder.

        Args:
            adapter: Listing adapter (creates AsyncFileSystemAdapter if None)
            policy: Error policy for listing failures
                (defaults to ContinueOnErrorsPolicy)
            follow_symlinks: Passed to the default filesystem adapter
        """
        self.base_adapter = adapter or AsyncFileSystemAdapter(
            follow_symlinks=follow_symlinks
        )
        self.policy = policy or ContinueOnErrorsPolicy()
        self.adapter = ErrorHandlingAdapter(self.base_adapter, self.policy)
        self._reset_stats()

    def _reset_stats(self):
        self.directories_built = 0
        self.files_seen = 0
        self.failed_directories = 0

    def _recorded_errors(self) -> int:
        return len(getattr(self.policy, 'errors', ()))

    async def build(self, root_path: str) -> DirectoryNode:
        """Build the snapshot rooted at ``root_path``.

        Args:
            root_path: Directory to snapshot; kept verbatim as the root's path

        Returns:
            Root DirectoryNode owning the whole subtree
        """
        self._reset_stats()
        errors_before = self._recorded_errors()
        name = os.path.basename(os.path.normpath(root_path))
        tree = await self._build_directory(name, root_path)
        self.failed_directories = self._recorded_errors() - errors_before
        logger.debug(
            "Built tree for %s: %d directories, %d files, %d unreadable",
            root_path, self.directories_built, self.files_seen,
            self.failed_directories
        )
        return tree

    async def _build_directory(self, name: str, path: str) -> DirectoryNode:
        """Recursively build one directory node."""
        self.directories_built += 1
        logger.debug("Listing %s", path)

        files = {}
        directories = {}

        entries = await self.adapter.list_entries(path)

        for entry in entries:
            full_path = os.path.join(path, entry.name)

            if entry.is_dir:
                directories[entry.name] = await self._build_directory(
                    entry.name, full_path
                )
            else:
                files[entry.name] = FileNode(name=entry.name, path=full_path)
                self.files_seen += 1

        return DirectoryNode(
            name=name,
            path=path,
            files=files,
            directories=directories,
        )

    async def get_stats(self) -> dict:
        """Get statistics about the last build.

        Returns:
            Dictionary with directory, file and failure counts
        """
        stats = {
            'directories_built': self.directories_built,
            'files_seen': self.files_seen,
            'failed_directories': self.failed_directories,
        }
        stats.update(await self.base_adapter.get_stats())
        return stats

    async def close(self):
        await self.base_adapter.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


async def build_tree(
    root_path: str,
    *,
    follow_symlinks: bool = False,
    policy: Optional[ErrorPolicy] = None,
    adapter: Optional[AsyncTreeAdapter] = None
) -> DirectoryNode:
    """Build a directory snapshot with a one-off TreeBuilder.

    Args:
        root_path: Directory to snapshot
        follow_symlinks: Descend into symlinked directories
        policy: Error policy for listing failures
        adapter: Custom listing adapter

    Returns:
        Root DirectoryNode
    """
    async with TreeBuilder(
        adapter=adapter, policy=policy, follow_symlinks=follow_symlinks
    ) as builder:
        return await builder.build(root_path)
