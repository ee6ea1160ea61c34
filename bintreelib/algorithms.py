"""Binary tree algorithms for BinTreeLib.

Small, independent, read-only routines over a binary tree. Every function
accepts a possibly-absent root (``None``) and handles it as the base case,
and every function reads the tree through a BinaryTreeAdapter so it also
works with foreign node types.

All functions are recursive. Trees deeper than the interpreter's recursion
limit raise ``RecursionError``; cyclic structures are not trees and are not
detected.

Example:
    >>> from bintreelib import TreeNode
    >>> root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)),
    ...                 TreeNode(3, None, TreeNode(6)))
    >>> sum_leaf_nodes(root)
    15
    >>> find_all_root_to_leaf_paths(root)
    [[1, 2, 4], [1, 2, 5], [1, 3, 6]]
"""

import logging
from collections import deque
from typing import Any, Deque, List, Optional, Set, Tuple

from .core.adapter import BinaryTreeAdapter, DEFAULT_ADAPTER

logger = logging.getLogger(__name__)


def sum_leaf_nodes(node: Optional[Any],
                   *,
                   adapter: Optional[BinaryTreeAdapter] = None) -> Any:
    """Return the sum of the values of all leaf nodes.

    Args:
        node: Root of the tree (None for an empty tree)
        adapter: Adapter for reading the tree

    Returns:
        Sum of leaf values, or 0 for an empty tree
    """
    adapter = adapter if adapter is not None else DEFAULT_ADAPTER
    total = _sum_leaves(node, adapter)
    logger.debug("sum_leaf_nodes -> %r", total)
    return total


def _sum_leaves(node: Optional[Any], adapter: BinaryTreeAdapter) -> Any:
    if node is None:
        return 0
    if adapter.is_leaf(node):
        return adapter.value(node)

    left, right = adapter.child_slots(node)
    return _sum_leaves(left, adapter) + _sum_leaves(right, adapter)


def count_internal_nodes(node: Optional[Any],
                         *,
                         adapter: Optional[BinaryTreeAdapter] = None) -> int:
    """Count the nodes that have at least one child.

    Args:
        node: Root of the tree (None for an empty tree)
        adapter: Adapter for reading the tree

    Returns:
        Number of internal nodes; 0 for an empty tree or a lone leaf
    """
    adapter = adapter if adapter is not None else DEFAULT_ADAPTER
    count = _count_internal(node, adapter)
    logger.debug("count_internal_nodes -> %d", count)
    return count


def _count_internal(node: Optional[Any], adapter: BinaryTreeAdapter) -> int:
    if node is None or adapter.is_leaf(node):
        return 0

    left, right = adapter.child_slots(node)
    return 1 + _count_internal(left, adapter) + _count_internal(right, adapter)


def build_post_order_string(node: Optional[Any],
                            *,
                            adapter: Optional[BinaryTreeAdapter] = None) -> str:
    """Concatenate ``str(value)`` of every node in post-order.

    Left subtree, then right subtree, then the node itself, with no
    separators. For a root 1 with leaves 2 and 3 the result is ``"213"``.

    Args:
        node: Root of the tree (None for an empty tree)
        adapter: Adapter for reading the tree

    Returns:
        Post-order string, or "" for an empty tree
    """
    adapter = adapter if adapter is not None else DEFAULT_ADAPTER
    parts: List[str] = []
    _append_post_order(node, parts, adapter)
    logger.debug("build_post_order_string -> %d parts", len(parts))
    return "".join(parts)


def _append_post_order(node: Optional[Any],
                       parts: List[str],
                       adapter: BinaryTreeAdapter) -> None:
    if node is None:
        return
    left, right = adapter.child_slots(node)
    _append_post_order(left, parts, adapter)
    _append_post_order(right, parts, adapter)
    parts.append(str(adapter.value(node)))


def collect_level_order_values(node: Optional[Any],
                               *,
                               adapter: Optional[BinaryTreeAdapter] = None) -> List[Any]:
    """Collect values breadth-first, left to right within each level.

    Both child slots are enqueued, absent ones included; absent slots are
    skipped when dequeued.

    Args:
        node: Root of the tree (None for an empty tree)
        adapter: Adapter for reading the tree

    Returns:
        List of values in level order, or [] for an empty tree
    """
    adapter = adapter if adapter is not None else DEFAULT_ADAPTER
    queue: Deque[Optional[Any]] = deque([node])
    values: List[Any] = []

    while queue:
        current = queue.popleft()
        if current is None:
            continue

        values.append(adapter.value(current))
        queue.extend(adapter.child_slots(current))

    logger.debug("collect_level_order_values -> %d values", len(values))
    return values


def count_distinct_values(node: Optional[Any],
                          *,
                          adapter: Optional[BinaryTreeAdapter] = None) -> int:
    """Count the unique values in the tree.

    Values are compared by equality and must be hashable.

    Args:
        node: Root of the tree (None for an empty tree)
        adapter: Adapter for reading the tree

    Returns:
        Number of distinct values, or 0 for an empty tree

    Raises:
        TypeError: If a value is unhashable
    """
    adapter = adapter if adapter is not None else DEFAULT_ADAPTER
    seen: Set[Any] = set()
    _add_values(node, seen, adapter)
    logger.debug("count_distinct_values -> %d", len(seen))
    return len(seen)


def _add_values(node: Optional[Any], seen: Set[Any], adapter: BinaryTreeAdapter) -> None:
    if node is None:
        return
    seen.add(adapter.value(node))
    left, right = adapter.child_slots(node)
    _add_values(left, seen, adapter)
    _add_values(right, seen, adapter)


def has_strictly_increasing_path(node: Optional[Any],
                                 *,
                                 adapter: Optional[BinaryTreeAdapter] = None) -> bool:
    """Check for a root-to-leaf path whose values strictly increase.

    A path only continues into a child whose value is strictly greater than
    its parent's; a node with a single child is judged by that child alone.
    A lone root is a path of length one and qualifies.

    Args:
        node: Root of the tree (None for an empty tree)
        adapter: Adapter for reading the tree

    Returns:
        True if at least one strictly increasing root-to-leaf path exists,
        False otherwise (including for an empty tree)

    Raises:
        TypeError: If values do not support ``<``
    """
    adapter = adapter if adapter is not None else DEFAULT_ADAPTER
    found = node is not None and _increasing_from(node, adapter)
    logger.debug("has_strictly_increasing_path -> %s", found)
    return found


def _increasing_from(node: Any, adapter: BinaryTreeAdapter) -> bool:
    if adapter.is_leaf(node):
        return True

    value = adapter.value(node)
    for child in adapter.get_children(node):
        if value < adapter.value(child) and _increasing_from(child, adapter):
            return True
    return False


def have_same_shape(node_a: Optional[Any],
                    node_b: Optional[Any],
                    *,
                    adapter: Optional[BinaryTreeAdapter] = None) -> bool:
    """Check whether two trees have identical structure, ignoring values.

    Args:
        node_a: Root of the first tree
        node_b: Root of the second tree
        adapter: Adapter for reading both trees

    Returns:
        True if both trees have the same pattern of present/absent children
    """
    adapter = adapter if adapter is not None else DEFAULT_ADAPTER
    same = _same_shape(node_a, node_b, adapter)
    logger.debug("have_same_shape -> %s", same)
    return same


def _same_shape(node_a: Optional[Any], node_b: Optional[Any], adapter: BinaryTreeAdapter) -> bool:
    if node_a is None and node_b is None:
        return True
    if node_a is None or node_b is None:
        return False

    left_a, right_a = adapter.child_slots(node_a)
    left_b, right_b = adapter.child_slots(node_b)
    return _same_shape(left_a, left_b, adapter) and _same_shape(right_a, right_b, adapter)


def find_all_root_to_leaf_paths(node: Optional[Any],
                                *,
                                adapter: Optional[BinaryTreeAdapter] = None) -> List[List[Any]]:
    """List the values along every root-to-leaf path.

    Paths appear in pre-order discovery order (left before right). Each
    branch gets its own snapshot of the path so far, so values appended in
    one subtree never show up in a sibling's paths.

    Args:
        node: Root of the tree (None for an empty tree)
        adapter: Adapter for reading the tree

    Returns:
        One list of values per leaf, root first; [] for an empty tree
    """
    adapter = adapter if adapter is not None else DEFAULT_ADAPTER
    paths: List[List[Any]] = []
    if node is not None:
        _collect_paths(node, (), paths, adapter)
    logger.debug("find_all_root_to_leaf_paths -> %d paths", len(paths))
    return paths


def _collect_paths(node: Any,
                   path: Tuple[Any, ...],
                   paths: List[List[Any]],
                   adapter: BinaryTreeAdapter) -> None:
    path = path + (adapter.value(node),)

    if adapter.is_leaf(node):
        paths.append(list(path))
        return

    for child in adapter.get_children(node):
        _collect_paths(child, path, paths, adapter)
