"""treefind - File name search over directory snapshots.

treefind builds an in-memory snapshot of a directory subtree and searches
it by exact file name, with a choice of traversal and match cardinality:

━━━━━━━━━━━━━━━━━━━━━━━━━━
               recursive               iterative
first   find_first_recursive    find_first_iterative
all     find_all_recursive      find_all_iterative
━━━━━━━━━━━━━━━━━━━━━━━━━━

Synchronous:
    from treefind import find_file

Asynchronous:
    from treefind.aio import find_file_async
"""

__version__ = "0.1.0"

from . import aio
from .api import build_tree, find_file
from .config import MatchMode, TraversalMode, SearchConfig
from .core import (
    DirectoryNode,
    FileNode,
    find_first_recursive,
    find_first_iterative,
    find_all_recursive,
    find_all_iterative,
    select_search,
    search,
)
from .errors import TreeFindError, ForbiddenRootError, InvalidSelectionError
from .guard import FORBIDDEN_DIRS, is_forbidden, check_root

__all__ = [
    "__version__",
    "aio",
    # API
    "build_tree",
    "find_file",
    # Config
    "MatchMode",
    "TraversalMode",
    "SearchConfig",
    # Nodes
    "DirectoryNode",
    "FileNode",
    # Search
    "find_first_recursive",
    "find_first_iterative",
    "find_all_recursive",
    "find_all_iterative",
    "select_search",
    "search",
    # Errors
    "TreeFindError",
    "ForbiddenRootError",
    "InvalidSelectionError",
    # Guard
    "FORBIDDEN_DIRS",
    "is_forbidden",
    "check_root",
]
