"""High-level API for RootedTree.

This module provides simple, functional helpers for common tasks on top of
the Tree/Node classes: building a tree from a list of edges, summarizing
its shape, and reading a node's ancestry.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .config import TreeConfig
from .core.node import Node
from .core.tree import Tree
from .exceptions import UnknownNodeError, UnknownParentError

logger = logging.getLogger(__name__)


def build_tree(
    root: Node,
    edges: Iterable[Tuple[Any, Node]] = (),
    config: Optional[TreeConfig] = None,
) -> Tree:
    """Build a tree from a root and ``(parent_id, node)`` pairs.

    Pairs are applied in order, so every parent must appear (as the root or
    as the node of an earlier pair) before its children.

    Args:
        root: Root node of the new tree
        edges: Iterable of (parent_id, node) pairs
        config: Tree configuration

    Returns:
        The populated Tree

    Raises:
        UnknownParentError: A pair names a parent id not added yet
        DuplicateIdError: Two nodes share an id

    Example:
        >>> root = Node("root", node_id="r")
        >>> tree = build_tree(root, [("r", Node("a", node_id="a"))])
        >>> tree.get_size()
        2
    """
    tree = Tree(root, config=config)
    for parent_id, node in edges:
        parent = tree.get_node(parent_id)
        if parent is None:
            raise UnknownParentError(
                f"Parent {parent_id!r} of node {node.id!r} is not in the tree.",
                node_id=parent_id,
            )
        tree.add_node(node, parent)

    logger.debug(f"Built tree of {tree.get_size()} nodes rooted at {root.id!r}")
    return tree


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Reads cached depth/height values from the index; no traversal.

    Args:
        tree: Tree to summarize

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
        >>> print(f"Leaf nodes: {stats['leaf_nodes']}")
    """
    stats = {
        'total_nodes': tree.get_size(),
        'leaf_nodes': len(tree.get_leaf_nodes()),
        'internal_nodes': len(tree.get_non_leaf_nodes()),
        'height': 0,
        'max_depth': 0,
        'depths': {}
    }

    root = tree.get_root_node()
    if root is not None:
        stats['height'] = root.get_height()

    for node in tree:
        depth = node.get_depth()
        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


def get_path(tree: Tree, node: Node) -> List[Node]:
    """Return the nodes from the root down to ``node`` (inclusive).

    Args:
        tree: Tree holding the node
        node: Node to find the path to

    Returns:
        List starting with the root and ending with node

    Raises:
        UnknownNodeError: node is not in the tree
    """
    current = tree.get_node(node.id)
    if current is None:
        raise UnknownNodeError(node_id=node.id)

    path = []
    while current is not None:
        path.append(current)
        current = current.get_parent()
    path.reverse()
    return path
