"""
Error handling adapter for treefind.

This module provides the ErrorHandlingAdapter that wraps a listing
adapter and delegates error handling to a pluggable policy.
"""

import asyncio
import functools
from typing import Any, Optional

from .error_policies import ContinueOnErrorsPolicy, ErrorPolicy, FailFastPolicy


class ErrorHandlingAdapter:
    """
    Adapter that wraps another adapter and handles errors through policies.

    Every method of the wrapped adapter is proxied: exceptions raised by
    the call, or by awaiting its coroutine, are handed to the policy, and
    the policy's answer becomes the call's result.
    """

    def __init__(self, base_adapter: Any, policy: Optional[ErrorPolicy] = None):
        """
        Initialize the error handling adapter.

        Args:
            base_adapter: The adapter to wrap (e.g., AsyncFileSystemAdapter)
            policy: Error handling policy (defaults to ContinueOnErrorsPolicy)
        """
        self._base_adapter = base_adapter
        self._policy = policy or ContinueOnErrorsPolicy()

    async def __aenter__(self):
        """Enter async context manager."""
        if hasattr(self._base_adapter, '__aenter__'):
            await self._base_adapter.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager."""
        if hasattr(self._base_adapter, '__aexit__'):
            return await self._base_adapter.__aexit__(exc_type, exc_val, exc_tb)
        return None

    def __getattr__(self, name: str) -> Any:
        """
        Dynamic proxy that wraps all methods with error handling.

        Args:
            name: The attribute name being accessed

        Returns:
            The attribute from the base adapter, wrapped if it's a method
        """
        attr = getattr(self._base_adapter, name)

        # Properties and plain attributes pass through untouched
        if not callable(attr):
            return attr

        @functools.wraps(attr)
        def wrapper(*args, **kwargs):
            node = args[0] if args else None
            try:
                result = attr(*args, **kwargs)
            except Exception as e:
                return self._policy.handle_sync(e, name, node, *args, **kwargs)

            if asyncio.iscoroutine(result):
                return self._handle_coroutine(result, name, *args, **kwargs)
            return result

        return wrapper

    async def _handle_coroutine(self, coro, method_name: str, *args, **kwargs) -> Any:
        """
        Await an adapter coroutine, routing failures to the policy.

        Args:
            coro: The coroutine to execute
            method_name: Name of the method being called
            *args: Original method arguments
            **kwargs: Original method keyword arguments

        Returns:
            The result from the coroutine, or a default from the policy
        """
        try:
            return await coro
        except Exception as e:
            # First argument is the path being processed
            node = args[0] if args else None
            return await self._policy.handle(e, method_name, node, *args, **kwargs)

    def get_policy(self) -> ErrorPolicy:
        """Get the current error policy."""
        return self._policy

    def set_policy(self, policy: ErrorPolicy) -> None:
        """Change the error policy."""
        self._policy = policy

    def get_base_adapter(self) -> Any:
        """Get the wrapped base adapter."""
        return self._base_adapter

    def __repr__(self) -> str:
        return f"ErrorHandlingAdapter({self._base_adapter!r}, policy={self._policy.__class__.__name__})"


def create_resilient_adapter(base_adapter: Any, strict: bool = False, verbose: bool = True) -> ErrorHandlingAdapter:
    """
    Convenience function to create an error-handling adapter.

    Args:
        base_adapter: The adapter to wrap
        strict: If True, use FailFastPolicy; if False, use ContinueOnErrorsPolicy
        verbose: If True, log warnings for errors (only applies when strict=False)

    Returns:
        An ErrorHandlingAdapter configured appropriately
    """
    if strict:
        policy = FailFastPolicy()
    else:
        policy = ContinueOnErrorsPolicy(verbose=verbose)

    return ErrorHandlingAdapter(base_adapter, policy)
