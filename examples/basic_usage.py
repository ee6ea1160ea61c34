#!/usr/bin/env python3
"""
Basic example showing the BinTreeLib algorithms and traversals.

This example demonstrates:
- The fixed algorithms on a small tree
- Reading a foreign node type through an adapter
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import (
    AttributeTreeAdapter,
    TreeNode,
    build_post_order_string,
    collect_level_order_values,
    count_internal_nodes,
    find_all_root_to_leaf_paths,
    has_strictly_increasing_path,
    have_same_shape,
    sum_leaf_nodes,
)


class LeetNode:
    def __init__(self, val, left=None, right=None):
        self.val = val
        self.left = left
        self.right = right


def main():
    #         1
    #        / \
    #       2   3
    #      / \   \
    #     4   5   6
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3, None, TreeNode(6)))

    print("Algorithms")
    print("-" * 50)
    print(f"Leaf sum:            {sum_leaf_nodes(root)}")
    print(f"Internal nodes:      {count_internal_nodes(root)}")
    print(f"Post-order string:   {build_post_order_string(root)}")
    print(f"Level order:         {collect_level_order_values(root)}")
    print(f"Increasing path:     {has_strictly_increasing_path(root)}")
    print(f"Root-to-leaf paths:  {find_all_root_to_leaf_paths(root)}")

    print("\nForeign node type")
    print("-" * 50)
    leet_root = LeetNode(5, LeetNode(3), LeetNode(8, LeetNode(7), LeetNode(9)))
    adapter = AttributeTreeAdapter(value_attr="val")
    print(f"Paths: {find_all_root_to_leaf_paths(leet_root, adapter=adapter)}")
    print(f"Same shape as root: {have_same_shape(leet_root, root, adapter=adapter)}")


if __name__ == "__main__":
    main()
