"""Async listing adapters for concrete storage layers."""

from .filesystem import AsyncFileSystemAdapter

__all__ = [
    'AsyncFileSystemAdapter',
]
