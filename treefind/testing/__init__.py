"""Testing utilities for treefind consumers."""

from .fixtures import create_test_tree, iter_file_paths, make_tree

__all__ = ['create_test_tree', 'iter_file_paths', 'make_tree']
