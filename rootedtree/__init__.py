"""RootedTree - In-memory rooted tree with an id index.

RootedTree models hierarchical data (category trees, org charts, file trees)
as labeled nodes under a single root, with O(1) lookup by id and cached
depth/height for every node.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from rootedtree import Node, Tree

    root = Node("root", node_id="r")
    tree = Tree(root)
    tree.add_node(Node("child", node_id="c"), root)
━━━━━━━━━━━━━━━━━━━━━━━━━━

Only Tree changes links between nodes; Node exposes read-only structure.
"""

__version__ = "0.2.0"

from .core import Node, Tree
from .config import IdConfig, TreeConfig
from .exceptions import (
    TreeError,
    AlreadyRootedError,
    UnknownParentError,
    DuplicateIdError,
    UnknownNodeError,
    RootRemovalError,
    NodeAttachedError,
)
from .api import build_tree, get_tree_stats, get_path

__all__ = [
    "__version__",
    # Core
    "Node",
    "Tree",
    # Config
    "IdConfig",
    "TreeConfig",
    # Errors
    "TreeError",
    "AlreadyRootedError",
    "UnknownParentError",
    "DuplicateIdError",
    "UnknownNodeError",
    "RootRemovalError",
    "NodeAttachedError",
    # API
    "build_tree",
    "get_tree_stats",
    "get_path",
]
