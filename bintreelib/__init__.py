"""BinTreeLib - Binary Tree Traversal Utilities.

BinTreeLib provides small, read-only algorithms over binary trees: leaf sums,
internal-node counts, post-order strings, level-order values, distinct-value
counts, increasing-path checks, shape comparison and root-to-leaf paths.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bintreelib import TreeNode, sum_leaf_nodes, find_all_root_to_leaf_paths

    root = TreeNode(1, TreeNode(2), TreeNode(3))
    sum_leaf_nodes(root)                 # 5
    find_all_root_to_leaf_paths(root)    # [[1, 2], [1, 3]]
━━━━━━━━━━━━━━━━━━━━━━━━━━

Trees are never modified. Foreign node types can be read by passing an
``adapter`` (see AttributeTreeAdapter).
"""

import logging

__version__ = "0.1.0"

# Core components
from .core.node import TreeNode
from .core.adapter import BinaryTreeAdapter, AttributeTreeAdapter, DEFAULT_ADAPTER

# Algorithms
from .algorithms import (
    sum_leaf_nodes,
    count_internal_nodes,
    build_post_order_string,
    collect_level_order_values,
    count_distinct_values,
    has_strictly_increasing_path,
    have_same_shape,
    find_all_root_to_leaf_paths,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    '__version__',
    # Core
    'TreeNode',
    'BinaryTreeAdapter',
    'AttributeTreeAdapter',
    'DEFAULT_ADAPTER',
    # Algorithms
    'sum_leaf_nodes',
    'count_internal_nodes',
    'build_post_order_string',
    'collect_level_order_values',
    'count_distinct_values',
    'has_strictly_increasing_path',
    'have_same_shape',
    'find_all_root_to_leaf_paths',
]
