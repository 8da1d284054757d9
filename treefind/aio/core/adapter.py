"""Async tree adapter abstraction.

Defines how a data source is listed for the tree builder. An adapter
answers one question: what are the immediate entries of this directory,
and which of them are directories.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate entry of a listed directory.

    Anything that is not a directory (symlink, device, socket) is reported
    with ``is_dir=False`` and is treated as a file.
    """
    name: str
    is_dir: bool


class AsyncTreeAdapter(ABC):
    """Abstract base class for async listing adapters.

    Adapters bridge between the tree builder and a concrete storage
    layer. Listing is async so that blocking I/O can be moved off the
    event loop.
    """

    @abstractmethod
    async def list_entries(self, path: str) -> List[DirectoryEntry]:
        """List the immediate entries of a directory.

        Args:
            path: Directory path

        Returns:
            Entries in the order the storage layer enumerates them

        Raises:
            OSError: If the directory cannot be listed
        """
        pass

    async def get_stats(self) -> dict:
        """Get adapter statistics.

        Returns:
            Dictionary of statistics
        """
        return {}

    async def close(self):
        """Clean up adapter resources.

        Override if adapter needs cleanup.
        """
        pass

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
