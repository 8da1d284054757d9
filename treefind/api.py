"""High-level synchronous API for treefind.

Thin blocking wrappers around treefind.aio for callers that are not
running an event loop. Do not call these from inside a running loop; use
the ``*_async`` functions there instead.
"""

import asyncio
from typing import Any, List, Optional, Union

from .aio.api import build_tree_async, find_file_async
from .aio.error_policies import ErrorPolicy
from .config import MatchMode, TraversalMode
from .core.node import DirectoryNode, FileNode


def build_tree(
    root: str,
    *,
    follow_symlinks: bool = False,
    policy: Optional[ErrorPolicy] = None
) -> DirectoryNode:
    """Check a root and build its snapshot.

    Raises:
        ForbiddenRootError: If the root is a protected location
    """
    return asyncio.run(
        build_tree_async(root, follow_symlinks=follow_symlinks, policy=policy)
    )


def find_file(
    root: str,
    file_name: str,
    match_mode: Any = MatchMode.FIRST,
    traversal_mode: Any = TraversalMode.RECURSIVE,
    *,
    follow_symlinks: bool = False,
    policy: Optional[ErrorPolicy] = None
) -> Union[Optional[FileNode], List[FileNode]]:
    """Find files named ``file_name`` under ``root``.

    See treefind.aio.find_file_async for argument details.

    Raises:
        ForbiddenRootError: If the root is a protected location
        InvalidSelectionError: If the selector pair is not recognized
    """
    return asyncio.run(
        find_file_async(
            root,
            file_name,
            match_mode,
            traversal_mode,
            follow_symlinks=follow_symlinks,
            policy=policy,
        )
    )
