"""Async filesystem adapter for tree building.

Lists directories with os.scandir in a worker thread so the event loop is
never blocked on disk I/O. Only names and entry kinds are read; file
contents are never touched.
"""

import asyncio
import os
from typing import List

from ..core.adapter import AsyncTreeAdapter, DirectoryEntry


class AsyncFileSystemAdapter(AsyncTreeAdapter):
    """Async filesystem adapter backed by os.scandir.

    DirEntry objects carry the entry kind from the directory read itself,
    so classifying children costs no extra stat calls on most platforms.
    """

    def __init__(self, follow_symlinks: bool = False):
        """Initialize filesystem adapter.

        Args:
            follow_symlinks: If True, a symlink to a directory is listed as
                a directory and will be descended into. No cycle detection
                is performed.
        """
        self.follow_symlinks = follow_symlinks
        self.directories_listed = 0

    async def list_entries(self, path: str) -> List[DirectoryEntry]:
        """List immediate entries of ``path``.

        Args:
            path: Directory to list

        Returns:
            DirectoryEntry records in scandir order

        Raises:
            OSError: If the directory cannot be read (permission denied,
                not a directory, vanished)
        """
        entries = await asyncio.to_thread(self._scan_directory_sync, path)
        self.directories_listed += 1
        return entries

    def _scan_directory_sync(self, path: str) -> List[DirectoryEntry]:
        """Synchronous scan run in a worker thread."""
        entries = []
        with os.scandir(path) as iterator:
            for entry in iterator:
                entries.append(DirectoryEntry(
                    name=entry.name,
                    is_dir=self._is_dir(entry),
                ))
        return entries

    def _is_dir(self, entry: os.DirEntry) -> bool:
        try:
            return entry.is_dir(follow_symlinks=self.follow_symlinks)
        except OSError:
            # Broken or unreadable entries are reported as files
            return False

    async def get_stats(self) -> dict:
        """Get adapter statistics.

        Returns:
            Statistics dictionary
        """
        stats = await super().get_stats()
        stats.update({
            'follow_symlinks': self.follow_symlinks,
            'directories_listed': self.directories_listed,
        })
        return stats

    def __repr__(self) -> str:
        return f"AsyncFileSystemAdapter(follow_symlinks={self.follow_symlinks})"
