"""Testing utilities for BinTreeLib consumers.

This module provides sample trees for use in test suites.
"""

from .fixtures import (
    example_tree,
    three_node_tree,
    chain,
    complete_tree,
    uniform_tree,
)

__all__ = [
    'example_tree',
    'three_node_tree',
    'chain',
    'complete_tree',
    'uniform_tree',
]
