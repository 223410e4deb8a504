"""Error taxonomy for RootedTree.

Every error is a caller-input error: the operation that raised it validated
its arguments before touching any node or the tree index, so the tree is left
exactly as it was. Nothing here is transient or worth retrying.
"""

from typing import Any, Optional


class TreeError(Exception):
    """Base class for all errors raised by RootedTree.

    Attributes:
        code: Stable numeric code identifying the error kind
        node_id: Id of the node the failed operation was about (if any)
    """

    code = 1000
    default_message = "Tree operation failed."

    def __init__(self, message: Optional[str] = None, node_id: Any = None):
        self.node_id = node_id
        super().__init__(message or self.default_message)


class AlreadyRootedError(TreeError):
    """Raised when setting a root on a tree that already has one."""

    code = 1002
    default_message = "The root node is already set."


class UnknownParentError(TreeError, LookupError):
    """Raised when the parent given to add_node is not in the tree."""

    code = 1003
    default_message = "The given parent node does not exist in the tree."


class DuplicateIdError(TreeError):
    """Raised when a node with the same id is already in the tree."""

    code = 1004
    default_message = "The given node already exists in the tree."


class UnknownNodeError(TreeError, LookupError):
    """Raised when an id does not name a node in the relevant scope.

    The scope is the tree index for remove_node, the direct children for
    Node.get_child and the siblings for Node.get_sibling.
    """

    code = 1005
    default_message = "The given node does not exist."


class RootRemovalError(TreeError):
    """Raised when remove_node is called on the root."""

    code = 1006
    default_message = "The root node cannot be removed."


class NodeAttachedError(TreeError):
    """Raised when adding a node that is already linked to other nodes.

    Only standalone nodes (no parent, no children) can enter a tree, since
    the descendants of an attached node would never reach the index.
    """

    code = 1007
    default_message = "The given node is already linked to other nodes."


__all__ = [
    'TreeError',
    'AlreadyRootedError',
    'UnknownParentError',
    'DuplicateIdError',
    'UnknownNodeError',
    'RootRemovalError',
    'NodeAttachedError',
]
