"""Test fixtures for RootedTree consumers.

These fixtures recompute a tree's shape from its links alone, so tests can
compare the cached depth/height values and the id index against ground
truth without reaching into private attributes.
"""

from typing import Any, Dict, List, Set

from ..core.tree import Tree


class TreeTestHelper:
    """Public test fixture for tree consistency checks.

    Example:
        tree = build_tree(root, edges)
        helper = TreeTestHelper(tree)

        summary = helper.get_summary()
        assert summary['index_matches_links']
        helper.assert_consistent()
    """

    def __init__(self, tree: Tree):
        """Initialize with the tree under test.

        Args:
            tree: Tree to inspect
        """
        self._tree = tree

    def reachable_ids(self) -> Set[Any]:
        """Return ids of all nodes reachable from the root through child links."""
        return set(self.expected_depths())

    def expected_depths(self) -> Dict[Any, int]:
        """Recompute every reachable node's depth by walking down from the root.

        Returns:
            Mapping id -> depth (empty for an empty tree)
        """
        root = self._tree.get_root_node()
        if root is None:
            return {}
        depths = {}
        stack = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            depths[node.get_id()] = depth
            stack.extend((child, depth + 1) for child in node.get_children().values())
        return depths

    def expected_heights(self) -> Dict[Any, int]:
        """Recompute every reachable node's height bottom-up.

        Returns:
            Mapping id -> height (empty for an empty tree)
        """
        root = self._tree.get_root_node()
        if root is None:
            return {}
        order = []
        stack = [root]
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(node.get_children().values())
        heights = {}
        # Reverse pre-order visits children before their parent
        for node in reversed(order):
            child_heights = [heights[child_id] for child_id in node.get_children()]
            heights[node.get_id()] = 1 + max(child_heights) if child_heights else 0
        return heights

    def mismatches(self) -> List[str]:
        """Describe every cached value that disagrees with the recomputed one."""
        problems = []
        for node_id, depth in self.expected_depths().items():
            node = self._tree.get_node(node_id)
            if node is None:
                problems.append(f"{node_id!r}: reachable but not indexed")
            elif node.get_depth() != depth:
                problems.append(f"{node_id!r}: depth {node.get_depth()} != {depth}")
        for node_id, height in self.expected_heights().items():
            node = self._tree.get_node(node_id)
            if node is not None and node.get_height() != height:
                problems.append(f"{node_id!r}: height {node.get_height()} != {height}")
        for node_id in set(self._tree.get_node_list()) - self.reachable_ids():
            problems.append(f"{node_id!r}: indexed but not reachable")
        return problems

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - indexed: Number of ids in the tree index
            - reachable: Number of nodes reachable from the root
            - index_matches_links: Whether both sets of ids are equal
            - mismatches: Number of stale cached depth/height values
        """
        reachable = self.reachable_ids()
        indexed = set(self._tree.get_node_list())
        return {
            'indexed': len(indexed),
            'reachable': len(reachable),
            'index_matches_links': indexed == reachable,
            'mismatches': len(self.mismatches()),
        }

    def assert_consistent(self) -> None:
        """Fail with a readable message if any cached value or index entry is stale."""
        problems = self.mismatches() + self._tree.validate()
        assert not problems, "Tree is inconsistent:\n  " + "\n  ".join(problems)
