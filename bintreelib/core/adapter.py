"""BinaryTreeAdapter abstraction for BinTreeLib.

The adapter holds the read contract for binary trees: how to get a node's
value and its left and right children. The algorithms only ever
read a tree through an adapter, which decouples them from the node class.
"""

from typing import Any, Iterator, Optional, Tuple


class BinaryTreeAdapter:
    """Reads binary trees whose nodes expose ``value``, ``left`` and ``right``.

    This is the adapter used for ``TreeNode`` and any duck-typed node with
    the same attribute names. Subclass and override the three accessor
    methods to read other node layouts; everything else is derived from them.

    The adapter never modifies a node.
    """

    def value(self, node: Any) -> Any:
        """Return the value stored in ``node``."""
        return node.value

    def left(self, node: Any) -> Optional[Any]:
        """Return the left child of ``node``, or None if absent."""
        return node.left

    def right(self, node: Any) -> Optional[Any]:
        """Return the right child of ``node``, or None if absent."""
        return node.right

    def child_slots(self, node: Any) -> Tuple[Optional[Any], Optional[Any]]:
        """Return both child slots, absent ones included.

        Breadth-first traversal enqueues both slots and skips the absent ones
        when they are dequeued.

        Args:
            node: The parent node

        Returns:
            (left, right) tuple where either entry may be None
        """
        return self.left(node), self.right(node)

    def get_children(self, node: Any) -> Iterator[Any]:
        """Yield the present children of ``node``, left before right."""
        for child in self.child_slots(node):
            if child is not None:
                yield child

    def is_leaf(self, node: Any) -> bool:
        """Check if ``node`` has no present children."""
        left, right = self.child_slots(node)
        return left is None and right is None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class AttributeTreeAdapter(BinaryTreeAdapter):
    """Adapter for node types with differently named attributes.

    Example:
        >>> class ListNode:  # e.g. LeetCode-style nodes
        ...     def __init__(self, val, left=None, right=None):
        ...         self.val, self.left, self.right = val, left, right
        >>> adapter = AttributeTreeAdapter(value_attr="val")
        >>> adapter.value(ListNode(7))
        7
    """

    def __init__(self,
                 value_attr: str = "value",
                 left_attr: str = "left",
                 right_attr: str = "right"):
        """Initialize with attribute names.

        Args:
            value_attr: Attribute holding the node value
            left_attr: Attribute holding the left child
            right_attr: Attribute holding the right child
        """
        self.value_attr = value_attr
        self.left_attr = left_attr
        self.right_attr = right_attr

    def value(self, node: Any) -> Any:
        return getattr(node, self.value_attr)

    def left(self, node: Any) -> Optional[Any]:
        return getattr(node, self.left_attr)

    def right(self, node: Any) -> Optional[Any]:
        return getattr(node, self.right_attr)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(value_attr={self.value_attr!r}, "
            f"left_attr={self.left_attr!r}, right_attr={self.right_attr!r})"
        )


# Shared default; adapters hold no per-traversal state
DEFAULT_ADAPTER = BinaryTreeAdapter()
