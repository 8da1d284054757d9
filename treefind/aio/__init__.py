"""Asynchronous implementation of treefind.

Directory listings are awaited one at a time, with the blocking scandir
call moved to a worker thread.
"""

# Core abstractions (imported before adapters, which depend on them)
from .core import (
    AsyncTreeAdapter,
    DirectoryEntry,
    TreeBuilder,
    build_tree,
)

# Adapters
from .adapters import AsyncFileSystemAdapter

# Error handling
from .error_handling import ErrorHandlingAdapter, create_resilient_adapter
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
)

# High-level API
from .api import (
    build_tree_async,
    find_file_async,
    run_search_async,
)

__all__ = [
    # Core abstractions
    'AsyncTreeAdapter',
    'DirectoryEntry',
    'TreeBuilder',
    'build_tree',
    # Adapters
    'AsyncFileSystemAdapter',
    # Error handling
    'ErrorHandlingAdapter',
    'create_resilient_adapter',
    'ErrorPolicy',
    'FailFastPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    # High-level API
    'build_tree_async',
    'find_file_async',
    'run_search_async',
]
