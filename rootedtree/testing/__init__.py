"""Testing utilities for RootedTree consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
