"""Tree coordinator for RootedTree.

The Tree owns the root node (and through it every node) and keeps a flat
id -> Node index for O(1) lookup. It is the only place where links between
nodes change: every public mutation validates its arguments first, then
updates the node links and the index together, so callers never observe one
without the other.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from ..config import TreeConfig
from ..exceptions import (
    TreeError,
    AlreadyRootedError,
    UnknownParentError,
    DuplicateIdError,
    UnknownNodeError,
    RootRemovalError,
    NodeAttachedError,
)
from .node import Node

logger = logging.getLogger(__name__)


class Tree:
    """A single-root hierarchy of Nodes with an id index.

    Example:
        >>> root = Node("root", node_id="r")
        >>> tree = Tree(root)
        >>> tree.add_node(Node("a", node_id="a"), root).get_size()
        2
    """

    def __init__(self, root: Optional[Node] = None, config: Optional[TreeConfig] = None):
        """Create an empty tree, or a tree holding just ``root``.

        Args:
            root: Optional initial root node
            config: Tree configuration (defaults to TreeConfig())

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or TreeConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

        self._root: Optional[Node] = None
        self._nodes: Dict[Any, Node] = {}

        if root is not None:
            self.set_root(root)

    # Mutation

    def create_node(self, value: Any = None, node_id: Any = None,
                    parent: Optional[Node] = None) -> Node:
        """Create a node using this tree's id settings and add it.

        Args:
            value: Payload for the new node
            node_id: Explicit id (optional)
            parent: Parent node; None makes the new node the root

        Returns:
            The newly added node
        """
        node = Node(value, node_id=node_id, id_config=self.config.ids)
        self.add_node(node, parent)
        return node

    def set_root(self, root: Node) -> 'Tree':
        """Make ``root`` the root of this empty tree.

        Raises:
            AlreadyRootedError: If the tree already has a root
            NodeAttachedError: If root is linked to other nodes
        """
        if self._root is not None:
            raise self._rejected(AlreadyRootedError(node_id=root.id))
        self._check_standalone(root)

        self._root = root
        self._nodes[root.id] = root

        if self.config.log_mutations:
            logger.debug(f"Set root {root.id!r}")
        self._after_mutation()
        return self

    def add_node(self, node: Node, parent: Optional[Node] = None) -> 'Tree':
        """Add ``node`` under ``parent``, or as the root when parent is None.

        Args:
            node: Standalone node to add
            parent: Node already in this tree

        Returns:
            self, for chaining

        Raises:
            AlreadyRootedError: parent is None and the tree has a root
            UnknownParentError: parent is not in this tree
            DuplicateIdError: a node with node's id is already in this tree
            NodeAttachedError: node is linked to other nodes
        """
        if parent is None:
            return self.set_root(node)

        if not self.has_node(parent.id):
            raise self._rejected(UnknownParentError(node_id=parent.id))
        if node.id in self._nodes:
            raise self._rejected(DuplicateIdError(node_id=node.id))
        self._check_standalone(node)

        parent = self._nodes[parent.id]
        parent._add_child(node)
        self._nodes[node.id] = node

        if self.config.log_mutations:
            logger.debug(f"Added node {node.id!r} under {parent.id!r} at depth {node.depth}")
        self._after_mutation()
        return self

    def remove_node(self, node: Node) -> 'Tree':
        """Remove ``node`` together with its entire subtree.

        The node is detached first, then its subtree is dropped from the
        index. Removed nodes end up standalone and may be added to any tree
        again.

        Returns:
            self, for chaining

        Raises:
            UnknownNodeError: node is not in this tree
            RootRemovalError: node is the root
        """
        if not self.has_node(node.id):
            raise self._rejected(UnknownNodeError(node_id=node.id))
        if self.is_root(node):
            raise self._rejected(RootRemovalError(node_id=node.id))

        removed = self._remove_subtree(self._nodes[node.id])

        if self.config.log_mutations:
            logger.debug(f"Removed node {node.id!r} ({removed} nodes in subtree)")
        self._after_mutation()
        return self

    def remove_children_nodes(self, parent: Node) -> 'Tree':
        """Remove every child of ``parent`` (and their subtrees).

        Raises:
            UnknownNodeError: parent is not in this tree
        """
        if not self.has_node(parent.id):
            raise self._rejected(UnknownNodeError(node_id=parent.id))
        for child in list(self._nodes[parent.id].get_children().values()):
            self.remove_node(child)
        return self

    def _remove_subtree(self, node: Node) -> int:
        # One detach refreshes the ancestor heights; the rest is O(subtree)
        node._unlink()
        removed = 0
        stack = [node]
        while stack:
            current = stack.pop()
            stack.extend(current.get_children().values())
            current._clear_links()
            del self._nodes[current.id]
            removed += 1
        return removed

    # Queries

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def get_root_node(self) -> Optional[Node]:
        return self._root

    def get_node(self, node_id: Any) -> Optional[Node]:
        """Return the node with this id, or None if it is not in the tree."""
        return self._nodes.get(node_id)

    def has_node(self, node_id: Any) -> bool:
        return node_id in self._nodes

    def get_size(self) -> int:
        return len(self._nodes)

    def get_node_list(self) -> Dict[Any, Node]:
        """Return a copy of the id -> Node index."""
        return dict(self._nodes)

    def is_root(self, node: Node) -> bool:
        """Check if node is the current root (False for an empty tree)."""
        return self._root is not None and self._root.equals(node)

    def get_leaf_nodes(self) -> List[Node]:
        """Return childless nodes. The root is never a leaf."""
        return [
            node for node in self._nodes.values()
            if not node.has_children() and not self.is_root(node)
        ]

    def get_non_leaf_nodes(self) -> List[Node]:
        """Return nodes with at least one child."""
        return [node for node in self._nodes.values() if node.has_children()]

    def get_all_nodes(self, depth: Optional[int] = None) -> List[Node]:
        """Return every node, optionally only those at ``depth``.

        Args:
            depth: Cached depth to filter on; 0 selects the root

        Returns:
            Nodes in index (insertion) order
        """
        if depth is None:
            return list(self._nodes.values())
        return [node for node in self._nodes.values() if node.depth == depth]

    def get_depth(self, node: Node) -> int:
        """Return the cached depth of the indexed node with node's id.

        Raises:
            UnknownNodeError: node is not in this tree
        """
        return self._indexed(node).get_depth()

    def get_height(self, node: Node) -> int:
        """Return the cached height of the indexed node with node's id.

        Raises:
            UnknownNodeError: node is not in this tree
        """
        return self._indexed(node).get_height()

    # Validation

    def validate(self) -> List[str]:
        """Check the index and the cached shape against the link structure.

        Walks the tree from the root, so this is O(size). Intended for tests
        and for TreeConfig.check_invariants.

        Returns:
            List of invariant violations (empty if consistent)
        """
        errors = []
        if self._root is None:
            if self._nodes:
                errors.append(f"empty tree indexes {len(self._nodes)} nodes")
            return errors

        if self._root.has_parent():
            errors.append(f"root {self._root.id!r} has a parent")

        reachable: Dict[Any, Node] = {}
        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            if node.id in reachable:
                errors.append(f"id {node.id!r} is reachable twice")
                continue
            reachable[node.id] = node
            if node.depth != depth:
                errors.append(f"node {node.id!r} caches depth {node.depth}, expected {depth}")
            expected_height = 0
            for child_id, child in node.get_children().items():
                if child_id != child.id:
                    errors.append(f"child {child.id!r} is filed under id {child_id!r}")
                if child.get_parent() is not node:
                    errors.append(f"child {child.id!r} does not point back to {node.id!r}")
                expected_height = max(expected_height, child.height + 1)
                stack.append((child, depth + 1))
            if node.height != expected_height:
                errors.append(
                    f"node {node.id!r} caches height {node.height}, expected {expected_height}"
                )

        for node_id in self._nodes.keys() - reachable.keys():
            errors.append(f"indexed id {node_id!r} is not reachable from the root")
        for node_id in reachable.keys() - self._nodes.keys():
            errors.append(f"reachable id {node_id!r} is missing from the index")
        for node_id in self._nodes.keys() & reachable.keys():
            if self._nodes[node_id] is not reachable[node_id]:
                errors.append(f"index entry for {node_id!r} is a different node object")
        return errors

    def _after_mutation(self) -> None:
        if not self.config.check_invariants:
            return
        errors = self.validate()
        if errors:
            for error in errors:
                logger.error(f"Tree invariant violated: {error}")
            raise TreeError(f"Tree invariants violated: {'; '.join(errors)}")

    # Helpers

    def _indexed(self, node: Node) -> Node:
        if not self.has_node(node.id):
            raise self._rejected(UnknownNodeError(node_id=node.id))
        return self._nodes[node.id]

    def _check_standalone(self, node: Node) -> None:
        if node.has_parent() or node.has_children():
            raise self._rejected(NodeAttachedError(node_id=node.id))

    @staticmethod
    def _rejected(error: TreeError) -> TreeError:
        logger.debug(f"Rejected tree operation: {error} (id={error.node_id!r})")
        return error

    # Container protocol

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, item: Any) -> bool:
        """Accept either a Node or an id."""
        if isinstance(item, Node):
            return item.id in self._nodes
        return item in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes.values()))

    def __repr__(self) -> str:
        root_id = self._root.id if self._root is not None else None
        return f"{self.__class__.__name__}(root={root_id!r}, size={len(self._nodes)})"
