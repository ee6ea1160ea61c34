"""Test fixtures for BinTreeLib consumers.

Sample trees for test suites. These build TreeNode instances directly and
are not a tree-construction API.
"""

from typing import Any, Iterable, Optional

from ..core.node import TreeNode


def example_tree() -> TreeNode:
    """Return the standard six-node sample tree.

    Structure::

            1
           / \\
          2   3
         / \\   \\
        4   5   6
    """
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, None, TreeNode(6)),
    )


def three_node_tree(root: Any = 1, left: Any = 2, right: Any = 3) -> TreeNode:
    """Return a root with two leaf children."""
    return TreeNode(root, TreeNode(left), TreeNode(right))


def chain(values: Iterable[Any], side: str = "left") -> Optional[TreeNode]:
    """Return a degenerate tree where every node has one child.

    Args:
        values: Values from root to the single leaf
        side: Which child slot each node uses ("left" or "right")

    Returns:
        Root of the chain, or None if ``values`` is empty
    """
    if side not in ("left", "right"):
        raise ValueError(f"side must be 'left' or 'right', not {side!r}")

    root: Optional[TreeNode] = None
    for value in reversed(list(values)):
        root = TreeNode(value, root, None) if side == "left" else TreeNode(value, None, root)
    return root


def complete_tree(depth: int, start: int = 1) -> Optional[TreeNode]:
    """Return a perfect tree of the given depth with heap-numbered values.

    Depth 0 is a single node. Node ``i`` has children ``2i`` and ``2i + 1``
    when counting from ``start = 1``.
    """
    if depth < 0:
        return None

    def _build(index: int, level: int) -> TreeNode:
        if level == depth:
            return TreeNode(index + start - 1)
        return TreeNode(
            index + start - 1,
            _build(2 * index, level + 1),
            _build(2 * index + 1, level + 1),
        )

    return _build(1, 0)


def uniform_tree(value: Any, node_count: int) -> Optional[TreeNode]:
    """Return a complete tree of ``node_count`` nodes all holding ``value``."""
    if node_count <= 0:
        return None

    nodes = [TreeNode(value) for _ in range(node_count)]
    for i, node in enumerate(nodes):
        left, right = 2 * i + 1, 2 * i + 2
        if left < node_count:
            node.left = nodes[left]
        if right < node_count:
            node.right = nodes[right]
    return nodes[0]
