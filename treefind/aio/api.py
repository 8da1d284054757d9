"""High-level async API for treefind.

This module provides simple async functions that run the whole pipeline:
root check, selector validation, tree build and search.
"""

import logging
from typing import Any, List, Optional, Union

from ..config import MatchMode, TraversalMode, SearchConfig
from ..core.node import DirectoryNode, FileNode
from ..core.search import select_search
from ..guard import check_root
from .core.adapter import AsyncTreeAdapter
from .core.builder import build_tree
from .error_policies import ErrorPolicy

logger = logging.getLogger(__name__)


async def build_tree_async(
    root: str,
    *,
    follow_symlinks: bool = False,
    policy: Optional[ErrorPolicy] = None,
    adapter: Optional[AsyncTreeAdapter] = None
) -> DirectoryNode:
    """Check a root and build its snapshot.

    Args:
        root: Directory to snapshot
        follow_symlinks: Descend into symlinked directories
        policy: Error policy for listing failures
        adapter: Custom listing adapter

    Returns:
        Root DirectoryNode

    Raises:
        ForbiddenRootError: If the root is a protected location
    """
    check_root(root)
    return await build_tree(
        root, follow_symlinks=follow_symlinks, policy=policy, adapter=adapter
    )


async def find_file_async(
    root: str,
    file_name: str,
    match_mode: Any = MatchMode.FIRST,
    traversal_mode: Any = TraversalMode.RECURSIVE,
    *,
    follow_symlinks: bool = False,
    policy: Optional[ErrorPolicy] = None,
    adapter: Optional[AsyncTreeAdapter] = None
) -> Union[Optional[FileNode], List[FileNode]]:
    """Find files named ``file_name`` under ``root``.

    The root is checked first, then the selector pair; the tree is only
    built once both are accepted.

    Args:
        root: Directory to search
        file_name: Exact file name to look for
        match_mode: MatchMode, "first"/"all" or "1"/"2"
        traversal_mode: TraversalMode, "recursive"/"iterative" or "1"/"2"
        follow_symlinks: Descend into symlinked directories
        policy: Error policy for listing failures
        adapter: Custom listing adapter

    Returns:
        FileNode or None for first-match modes, list for all-match modes

    Raises:
        ForbiddenRootError: If the root is a protected location
        InvalidSelectionError: If the selector pair is not recognized

    Example:
        >>> found = await find_file_async('/home/me/project', 'setup.py', 'all')
        >>> [f.path for f in found]
    """
    check_root(root)
    search_fn = select_search(match_mode, traversal_mode)

    logger.info("Searching %s for %r using %s", root, file_name, search_fn.__name__)
    tree = await build_tree(
        root, follow_symlinks=follow_symlinks, policy=policy, adapter=adapter
    )
    result = search_fn(tree, file_name)

    if isinstance(result, list):
        logger.info("Found %d match(es) for %r", len(result), file_name)
    elif result is None:
        logger.info("No match for %r", file_name)
    return result


async def run_search_async(
    config: SearchConfig,
    *,
    policy: Optional[ErrorPolicy] = None,
    adapter: Optional[AsyncTreeAdapter] = None
) -> Union[Optional[FileNode], List[FileNode]]:
    """Run a search described by a SearchConfig."""
    return await find_file_async(
        config.root_path,
        config.file_name,
        config.match_mode,
        config.traversal_mode,
        follow_symlinks=config.follow_symlinks,
        policy=policy,
        adapter=adapter,
    )
