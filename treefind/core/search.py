"""File name search over a built directory snapshot.

Four strategies cover the {first, all} x {recursive, iterative} grid:

- Recursive variants walk pre-order: a directory's own files are checked
  before any subdirectory, subdirectories in mapping order.
- Iterative variants use an explicit LIFO stack. Children are pushed in
  mapping order and popped last-first, so the last subdirectory is
  explored first.

The two orders are different on purpose. With duplicate names in sibling
subtrees, the recursive and iterative "first" searches return different
files, and the "all" searches return the same files in different order.

All functions are read-only over the tree. No match is None or [].
"""

from typing import Callable, Dict, List, Optional, Tuple, Union

from ..config import MatchMode, TraversalMode, parse_selection
from .node import DirectoryNode, FileNode

SearchResult = Union[Optional[FileNode], List[FileNode]]
SearchFunction = Callable[[DirectoryNode, str], SearchResult]


def find_first_recursive(tree: DirectoryNode, name: str) -> Optional[FileNode]:
    """Return the first pre-order match for ``name``, or None."""
    match = tree.files.get(name)
    if match is not None:
        return match

    for directory in tree.directories.values():
        found = find_first_recursive(directory, name)
        if found is not None:
            return found

    return None


def find_first_iterative(tree: DirectoryNode, name: str) -> Optional[FileNode]:
    """Return the first match in explicit-stack order, or None."""
    stack: List[DirectoryNode] = [tree]

    while stack:
        node = stack.pop()

        match = node.files.get(name)
        if match is not None:
            return match

        stack.extend(node.directories.values())

    return None


def find_all_recursive(
    tree: DirectoryNode,
    name: str,
    result: Optional[List[FileNode]] = None
) -> List[FileNode]:
    """Return every match for ``name`` in pre-order.

    Args:
        tree: Directory to search
        name: Exact file name
        result: Accumulator shared across the recursion

    Returns:
        Matches, shallower directories' own files before their subtrees
    """
    if result is None:
        result = []

    match = tree.files.get(name)
    if match is not None:
        result.append(match)

    for directory in tree.directories.values():
        find_all_recursive(directory, name, result)

    return result


def find_all_iterative(tree: DirectoryNode, name: str) -> List[FileNode]:
    """Return every match for ``name`` in explicit-stack order."""
    stack: List[DirectoryNode] = [tree]
    results: List[FileNode] = []

    while stack:
        node = stack.pop()

        match = node.files.get(name)
        if match is not None:
            results.append(match)

        stack.extend(node.directories.values())

    return results


_STRATEGIES: Dict[Tuple[MatchMode, TraversalMode], SearchFunction] = {
    (MatchMode.FIRST, TraversalMode.RECURSIVE): find_first_recursive,
    (MatchMode.FIRST, TraversalMode.ITERATIVE): find_first_iterative,
    (MatchMode.ALL, TraversalMode.RECURSIVE): find_all_recursive,
    (MatchMode.ALL, TraversalMode.ITERATIVE): find_all_iterative,
}


def select_search(match_mode, traversal_mode) -> SearchFunction:
    """Pick the search function for a selector pair.

    Args:
        match_mode: MatchMode, "first"/"all" or "1"/"2"
        traversal_mode: TraversalMode, "recursive"/"iterative" or "1"/"2"

    Returns:
        One of the four search functions

    Raises:
        InvalidSelectionError: If the pair is outside the enumeration
    """
    return _STRATEGIES[parse_selection(match_mode, traversal_mode)]


def search(
    tree: DirectoryNode,
    name: str,
    match_mode=MatchMode.FIRST,
    traversal_mode=TraversalMode.RECURSIVE
) -> SearchResult:
    """Search ``tree`` for ``name`` with the selected strategy.

    The selector pair is validated before the tree is touched.

    Returns:
        FileNode or None for first-match modes, list for all-match modes
    """
    search_fn = select_search(match_mode, traversal_mode)
    return search_fn(tree, name)
