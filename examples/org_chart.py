#!/usr/bin/env python3
"""
Org chart example showing the RootedTree API.

This example demonstrates:
- Building a tree from (parent_id, node) pairs
- Querying depth, height, leaves and siblings
- Removing a whole department (subtree) in one call
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from rootedtree import Node, build_tree, get_tree_stats, get_path


def main():
    """Build an org chart, inspect it, then reorganize it."""
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.INFO)

    tree = build_tree(
        Node("Ada (CEO)", node_id="ceo"),
        [
            ("ceo", Node("Grace (CTO)", node_id="cto")),
            ("ceo", Node("Edsger (CFO)", node_id="cfo")),
            ("cto", Node("Barbara (Platform)", node_id="platform")),
            ("cto", Node("Donald (Research)", node_id="research")),
            ("platform", Node("Ken (SRE)", node_id="sre")),
        ],
    )

    print(f"Org chart: {tree.get_size()} people, {tree.get_height(tree.root)} levels below the CEO")
    print("-" * 50)
    for node in tree:
        indent = "  " * node.get_depth()
        print(f"{indent}{node.get_value()}  (height {node.get_height()})")

    sre = tree.get_node("sre")
    chain = " -> ".join(node.get_id() for node in get_path(tree, sre))
    print(f"\nReporting chain for SRE: {chain}")
    print(f"Platform's peers: {list(tree.get_node('platform').get_siblings())}")
    print(f"Individual contributors: {[node.get_id() for node in tree.get_leaf_nodes()]}")

    # Dissolve the platform group, along with everyone under it
    tree.remove_node(tree.get_node("platform"))
    stats = get_tree_stats(tree)
    print(f"\nAfter reorg: {stats['total_nodes']} people, height {stats['height']}")
    print(f"Headcount per level: {stats['depths']}")


if __name__ == "__main__":
    main()
