"""
Error handling policies for treefind.

This module decides what happens when a directory cannot be listed while
a tree is being built. The default policy absorbs the failure so the
directory shows up empty and the build carries on.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)

# Methods whose failure is answered with "no entries"
_LISTING_METHODS = ('list_entries',)


def _default_for(method_name: str) -> Any:
    """Return the value that lets a build continue past a failed call."""
    if method_name in _LISTING_METHODS:
        return []
    return None


def _describe(node: Any) -> Any:
    """Extract a path-like description from whatever was being processed."""
    if hasattr(node, 'path'):
        return node.path
    return node


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors raised
    by adapter calls during a build.
    """

    @abstractmethod
    async def handle(self, error: Exception, method_name: str, node: Any, *args, **kwargs) -> Any:
        """
        Handle an error that occurred during an adapter call.

        Args:
            error: The exception that was raised
            method_name: Name of the method that failed (e.g. 'list_entries')
            node: The path or node being processed when the error occurred
            *args: Additional positional arguments from the failed method
            **kwargs: Additional keyword arguments from the failed method

        Returns:
            A default value that lets the build continue, or re-raises.
        """
        pass

    def handle_sync(self, error: Exception, method_name: str, node: Any, *args, **kwargs) -> Any:
        """
        Handle an error raised by a synchronous adapter method.

        The default implementation re-raises; policies that can answer
        without awaiting override this.
        """
        raise error


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the build.

    Useful when a partial tree is not acceptable.
    """

    async def handle(self, error: Exception, method_name: str, node: Any, *args, **kwargs) -> Any:
        """Re-raise the error immediately."""
        raise error


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that silently collects errors and continues.

    Errors are recorded for later inspection, and listing failures are
    answered with an empty listing.
    """

    def __init__(self):
        """Initialize the policy."""
        self.errors = []
        self.skipped_paths = []

    async def handle(self, error: Exception, method_name: str, node: Any, *args, **kwargs) -> Any:
        """Record the error and return a default."""
        return self._handle_common(error, method_name, node)

    def handle_sync(self, error: Exception, method_name: str, node: Any, *args, **kwargs) -> Any:
        """Synchronous version - record the error and return a default."""
        return self._handle_common(error, method_name, node)

    def _handle_common(self, error: Exception, method_name: str, node: Any) -> Any:
        """Common error handling logic for both sync and async."""
        path = _describe(node)

        self.errors.append({
            'path': path,
            'method': method_name,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error)
        })

        if isinstance(error, OSError) and path is not None:
            self.skipped_paths.append(path)

        self._report(error, method_name, path)
        return _default_for(method_name)

    def _report(self, error: Exception, method_name: str, path: Any) -> None:
        pass

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'permission_errors': sum(1 for e in self.errors if e['error_type'] == 'PermissionError'),
            'os_errors': sum(1 for e in self.errors if isinstance(e['error'], OSError)),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors
        }


class ContinueOnErrorsPolicy(CollectErrorsPolicy):
    """
    Policy that logs errors and continues.

    This is the default for tree builds: an unreadable directory becomes
    an empty subtree, a warning is logged, and the error is kept for
    later inspection.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning for each error
        """
        super().__init__()
        self.verbose = verbose

    def _report(self, error: Exception, method_name: str, path: Any) -> None:
        if not self.verbose:
            return
        if isinstance(error, PermissionError):
            logger.warning("Skipping inaccessible path '%s': %s", path, error)
        else:
            logger.warning("Error in %s for '%s': %s", method_name, path, error)
