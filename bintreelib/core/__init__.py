"""Core building blocks: the node container and the adapters that read it."""

from .node import TreeNode
from .adapter import AttributeTreeAdapter, BinaryTreeAdapter, DEFAULT_ADAPTER

__all__ = [
    'TreeNode',
    'BinaryTreeAdapter',
    'AttributeTreeAdapter',
    'DEFAULT_ADAPTER',
]
