"""Unit tests for the Node vertex.

Covers id assignment, payload access, parent/child/sibling queries and
id-based equality. Links are always built through a Tree, the way callers
build them.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from rootedtree import Node, Tree, IdConfig, UnknownNodeError


class HashedPayload:
    """Payload that knows its own identity."""

    def __init__(self, key):
        self.key = key

    def get_hash(self):
        return f"hash-{self.key}"


class TestNodeIdentity(unittest.TestCase):
    """Test how a node picks its id."""

    def test_explicit_id_is_used_verbatim(self):
        node = Node("value", node_id="explicit")
        self.assertEqual(node.get_id(), "explicit")
        self.assertEqual(node.id, "explicit")

    def test_integer_id_is_kept(self):
        self.assertEqual(Node("value", node_id=42).get_id(), 42)
        self.assertEqual(Node("value", node_id=0).get_id(), 0)

    def test_payload_hash_is_used_without_explicit_id(self):
        node = Node(HashedPayload("abc"))
        self.assertEqual(node.get_id(), "hash-abc")

    def test_explicit_id_beats_payload_hash(self):
        node = Node(HashedPayload("abc"), node_id="mine")
        self.assertEqual(node.get_id(), "mine")

    def test_empty_id_falls_back_to_generated_token(self):
        first = Node("same")
        second = Node("same", node_id="")
        self.assertTrue(first.get_id())
        self.assertTrue(second.get_id())
        self.assertNotEqual(first.get_id(), second.get_id())

    def test_custom_hash_method_and_factory(self):
        class Keyed:
            def key(self):
                return "keyed"

        counter = iter(range(100))
        config = IdConfig(hash_method="key", id_factory=lambda: next(counter))
        self.assertEqual(Node(Keyed(), id_config=config).get_id(), "keyed")
        self.assertEqual(Node("plain", id_config=config).get_id(), 0)
        self.assertEqual(Node("plain", id_config=config).get_id(), 1)

    def test_id_does_not_follow_value(self):
        node = Node(HashedPayload("abc"))
        node.set_value(HashedPayload("xyz"))
        self.assertEqual(node.get_id(), "hash-abc")


class TestNodeValue(unittest.TestCase):
    """Test payload accessors."""

    def test_get_and_set_value(self):
        node = Node("before", node_id="n")
        self.assertEqual(node.get_value(), "before")
        node.set_value({"after": True})
        self.assertEqual(node.get_value(), {"after": True})

    def test_value_property(self):
        node = Node(1, node_id="n")
        node.value = 2
        self.assertEqual(node.value, 2)
        self.assertEqual(node.get_value(), 2)


class TestNodeStructure(unittest.TestCase):
    """Test parent, children and sibling queries."""

    def setUp(self):
        """Create a root with two children and one grandchild."""
        self.root = Node("root", node_id="root")
        self.node1 = Node("node1", node_id="node1")
        self.node2 = Node("node2", node_id="node2")
        self.node3 = Node("node3", node_id="node3")
        self.tree = Tree(self.root)
        self.tree.add_node(self.node1, self.root)
        self.tree.add_node(self.node2, self.root)
        self.tree.add_node(self.node3, self.node1)

    def test_standalone_node(self):
        node = Node("alone")
        self.assertFalse(node.has_parent())
        self.assertIsNone(node.get_parent())
        self.assertFalse(node.has_children())
        self.assertEqual(node.get_children(), {})
        self.assertEqual(node.children_count(), 0)
        self.assertEqual(node.get_depth(), 0)
        self.assertEqual(node.get_height(), 0)

    def test_parent(self):
        self.assertFalse(self.root.has_parent())
        self.assertTrue(self.node1.has_parent())
        self.assertIs(self.node1.get_parent(), self.root)
        self.assertIs(self.node3.get_parent(), self.node1)

    def test_children(self):
        self.assertTrue(self.root.has_children())
        self.assertFalse(self.node2.has_children())
        self.assertEqual(list(self.root.get_children()), ["node1", "node2"])
        self.assertEqual(self.root.children_count(), 2)
        self.assertEqual(self.node1.children_count(), 1)

    def test_get_children_returns_copy(self):
        children = self.root.get_children()
        children.clear()
        self.assertEqual(self.root.children_count(), 2)

    def test_get_child(self):
        self.assertIs(self.root.get_child("node1"), self.node1)
        self.assertIs(self.node1.get_child("node3"), self.node3)

    def test_get_child_not_found(self):
        # node3 is a grandchild, not a direct child
        with self.assertRaises(UnknownNodeError) as ctx:
            self.root.get_child("node3")
        self.assertEqual(ctx.exception.node_id, "node3")

        with self.assertRaises(LookupError):
            self.root.get_child("missing")

    def test_is_leaf(self):
        self.assertTrue(self.node2.is_leaf())
        self.assertTrue(self.node3.is_leaf())
        self.assertFalse(self.node1.is_leaf())

    def test_siblings(self):
        self.assertTrue(self.node1.has_siblings())
        self.assertEqual(self.node1.siblings_count(), 1)
        self.assertEqual(list(self.node1.get_siblings()), ["node2"])
        self.assertEqual(list(self.node2.get_siblings()), ["node1"])

    def test_only_child_has_no_siblings(self):
        self.assertFalse(self.node3.has_siblings())
        self.assertEqual(self.node3.siblings_count(), 0)
        self.assertEqual(self.node3.get_siblings(), {})

    def test_root_has_no_siblings(self):
        self.assertFalse(self.root.has_siblings())
        self.assertEqual(self.root.siblings_count(), 0)
        self.assertEqual(self.root.get_siblings(), {})

    def test_get_sibling(self):
        self.assertIs(self.node1.get_sibling("node2"), self.node2)

    def test_get_sibling_not_found(self):
        with self.assertRaises(UnknownNodeError):
            self.node1.get_sibling("node3")
        # A node is not its own sibling
        with self.assertRaises(UnknownNodeError):
            self.node1.get_sibling("node1")
        with self.assertRaises(UnknownNodeError):
            self.root.get_sibling("node1")


class TestNodeEquality(unittest.TestCase):
    """Test id-based equality."""

    def test_equals_by_id_only(self):
        first = Node("one", node_id="same")
        second = Node("two", node_id="same")
        third = Node("one", node_id="other")
        self.assertTrue(first.equals(second))
        self.assertFalse(first.equals(third))
        self.assertEqual(first, second)
        self.assertNotEqual(first, third)

    def test_equals_ignores_structure(self):
        root = Node("root", node_id="r")
        child = Node("child", node_id="c")
        Tree(root).add_node(child, root)
        self.assertTrue(root.equals(Node(None, node_id="r")))

    def test_equals_non_node(self):
        node = Node("value", node_id="n")
        self.assertFalse(node.equals("n"))
        self.assertNotEqual(node, "n")

    def test_hash_follows_id(self):
        nodes = {Node("a", node_id="x"), Node("b", node_id="x"), Node("c", node_id="y")}
        self.assertEqual(len(nodes), 2)

    def test_repr_and_str(self):
        node = Node("value", node_id="n")
        self.assertEqual(str(node), "n")
        self.assertEqual(repr(node), "Node(id='n', value='value')")


if __name__ == "__main__":
    unittest.main()
