"""Core abstractions for RootedTree.

This package contains the two classes everything else builds on: the Node
vertex and the Tree coordinator that owns nodes and indexes them by id.
"""

from .node import Node
from .tree import Tree

__all__ = [
    "Node",
    "Tree",
]
