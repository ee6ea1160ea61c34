"""TreeNode container for BinTreeLib.

The TreeNode is intentionally kept simple - it's a data container holding a
value and two optional child references. Reading the tree is delegated to a
BinaryTreeAdapter, so the algorithms also work with foreign node types.
"""

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class TreeNode(Generic[T]):
    """A node in a binary tree.

    Each node exclusively owns its two subtrees. An absent child is ``None``;
    a node is a leaf when both children are absent.

    Nodes compare by identity. Use ``have_same_shape`` for structural
    comparison.

    Example:
        >>> root = TreeNode(1, TreeNode(2), TreeNode(3))
        >>> root.is_leaf()
        False
        >>> [child.value for child in root.children()]
        [2, 3]
    """

    __slots__ = ("value", "left", "right")

    def __init__(self,
                 value: T,
                 left: Optional["TreeNode[T]"] = None,
                 right: Optional["TreeNode[T]"] = None):
        """Initialize a node.

        Args:
            value: Value stored in this node
            left: Root of the left subtree (None if absent)
            right: Root of the right subtree (None if absent)
        """
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def is_internal(self) -> bool:
        """Check if this node has at least one child."""
        return not self.is_leaf()

    def children(self) -> Iterator["TreeNode[T]"]:
        """Yield the present children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(value={self.value!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )
