"""Node abstraction for RootedTree.

A Node is a single vertex: an id, a payload value, a back-reference to its
parent and the children it owns. It also caches its depth and height so that
structural queries never have to walk the tree.

Read access is public. Link mutation (the underscore-prefixed methods below)
belongs to Tree, which must keep its id index in step with every link change;
calling those methods from anywhere else breaks the index.
"""

from typing import Any, Dict, Optional

from ..config import IdConfig
from ..exceptions import UnknownNodeError


class Node:
    """A single vertex of a rooted tree.

    The id is fixed at construction time:

    - an explicit ``node_id`` wins when it is not None or an empty string
    - otherwise the payload's hash method is used (``get_hash()`` by default)
    - otherwise a fresh process-unique token is generated

    Ids are used as dict keys, both in a parent's children map and in the
    tree index, so they must be hashable and ids that compare equal are the
    same id: ``1``, ``1.0`` and ``True`` collide, as do ``0`` and ``False``.

    Example:
        >>> root = Node("root", node_id="r")
        >>> root.get_id()
        'r'
    """

    def __init__(self, value: Any = None, node_id: Any = None,
                 id_config: Optional[IdConfig] = None):
        """Create a standalone node.

        Args:
            value: Arbitrary payload
            node_id: Explicit id, used verbatim when not empty
            id_config: Id assignment settings (defaults to IdConfig())
        """
        self._value = value
        self._id = self._resolve_id(value, node_id, id_config or IdConfig())
        self._parent: Optional['Node'] = None
        self._children: Dict[Any, 'Node'] = {}
        self._depth = 0
        self._height = 0

    @staticmethod
    def _resolve_id(value: Any, node_id: Any, id_config: IdConfig) -> Any:
        if not _is_empty(node_id):
            return node_id
        payload_id = id_config.payload_hash(value)
        if not _is_empty(payload_id):
            return payload_id
        return id_config.id_factory()

    # Identity and payload

    @property
    def id(self) -> Any:
        """Immutable node id."""
        return self._id

    def get_id(self) -> Any:
        return self._id

    @property
    def value(self) -> Any:
        """Payload stored in this node."""
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = value

    def get_value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> None:
        self._value = value

    # Structure

    def has_parent(self) -> bool:
        return self._parent is not None

    def get_parent(self) -> Optional['Node']:
        return self._parent

    def has_children(self) -> bool:
        return bool(self._children)

    def get_children(self) -> Dict[Any, 'Node']:
        """Return the direct children keyed by id, in insertion order.

        Returns:
            A copy of the children mapping; mutating it does not affect the node
        """
        return dict(self._children)

    def get_child(self, node_id: Any) -> 'Node':
        """Return the direct child with the given id.

        Raises:
            UnknownNodeError: If no direct child has this id
        """
        try:
            return self._children[node_id]
        except KeyError:
            raise UnknownNodeError(
                f"Node {self._id!r} has no child {node_id!r}.", node_id=node_id
            ) from None

    def children_count(self) -> int:
        return len(self._children)

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Tree.get_leaf_nodes additionally excludes the root; this method does
        not know whether the node is a root.
        """
        return not self._children

    # Siblings are the parent's other children

    def has_siblings(self) -> bool:
        return self.siblings_count() > 0

    def get_siblings(self) -> Dict[Any, 'Node']:
        """Return the parent's other children keyed by id.

        Returns:
            Empty dict for a parentless node
        """
        if self._parent is None:
            return {}
        return {
            child_id: child
            for child_id, child in self._parent._children.items()
            if child_id != self._id
        }

    def get_sibling(self, node_id: Any) -> 'Node':
        """Return the sibling with the given id.

        Raises:
            UnknownNodeError: If no sibling has this id
        """
        siblings = self.get_siblings()
        if node_id not in siblings:
            raise UnknownNodeError(
                f"Node {self._id!r} has no sibling {node_id!r}.", node_id=node_id
            )
        return siblings[node_id]

    def siblings_count(self) -> int:
        if self._parent is None:
            return 0
        return len(self._parent._children) - 1

    # Cached shape

    @property
    def depth(self) -> int:
        """Distance from the root (root = 0)."""
        return self._depth

    def get_depth(self) -> int:
        return self._depth

    @property
    def height(self) -> int:
        """Longest downward path to a leaf (leaf = 0)."""
        return self._height

    def get_height(self) -> int:
        return self._height

    # Privileged link mutation, used by Tree only

    def _add_child(self, node: 'Node') -> None:
        """Link node under this node and refresh cached depth/height.

        Depth is re-based for node's whole subtree. Height grows along the
        ancestor chain as far as the new child makes a difference.
        """
        self._children[node._id] = node
        node._parent = self
        node._set_depth(self._depth + 1)
        if node._height + 1 > self._height:
            self._set_height(node._height + 1)

    def _unlink(self) -> None:
        """Detach this node from its parent.

        Children stay attached to this node. The detached node becomes a
        root of its own, so its subtree depths are re-based at 0.
        """
        if self._parent is not None:
            self._parent._remove_child(self)
        self._parent = None
        self._set_depth(0)

    def _clear_links(self) -> None:
        """Drop all links and cached shape without touching other nodes.

        Only valid while discarding a subtree that is already detached from
        the rest of the tree, so no ancestor height needs refreshing.
        """
        self._parent = None
        self._children = {}
        self._depth = 0
        self._height = 0

    def _remove_child(self, node: 'Node') -> None:
        """Drop node from the children map and refresh heights upward."""
        del self._children[node._id]
        self._refresh_height()

    def _set_depth(self, depth: int) -> None:
        """Set this node's depth and re-base every descendant below it."""
        stack = [(self, depth)]
        while stack:
            node, node_depth = stack.pop()
            node._depth = node_depth
            stack.extend((child, node_depth + 1) for child in node._children.values())

    def _set_height(self, height: int) -> None:
        """Set this node's height, then bring every ancestor back in line.

        Each ancestor recomputes its height from all of its children, so a
        taller sibling is never overruled.
        """
        self._height = height
        ancestor = self._parent
        while ancestor is not None:
            ancestor_height = ancestor._height_from_children()
            # Unchanged here means unchanged for every ancestor above too
            if ancestor_height == ancestor._height:
                break
            ancestor._height = ancestor_height
            ancestor = ancestor._parent

    def _refresh_height(self) -> None:
        height = self._height_from_children()
        if height != self._height:
            self._set_height(height)

    def _height_from_children(self) -> int:
        if not self._children:
            return 0
        return 1 + max(child._height for child in self._children.values())

    # Equality by id only

    def equals(self, other: 'Node') -> bool:
        """Check identity equality: same id, regardless of value or shape."""
        return isinstance(other, Node) and self._id == other._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return str(self._id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r}, value={self._value!r})"


def _is_empty(node_id: Any) -> bool:
    return node_id is None or node_id == ""
