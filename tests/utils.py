"""Utility functions for testing AVL tree invariants."""

from typing import Optional

from avl_trees.avl_tree_base import (
    AVLTreeBase,
    Stats
)
from avl_trees.base import Node

TREE_FLAGS = (
    "is_search_tree",
    "is_balanced",
    "heights_correct",
    "counts_positive",
)

def assert_tree_invariants_tc(tc, t: AVLTreeBase, stats: Stats, msg: str = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False{msg}"
        )

    if t.is_empty():
        tc.assertEqual(stats.node_count, 0)
        tc.assertEqual(stats.height, 0)
        return

    tc.assertGreater(
        stats.node_count, 0,
        f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree{msg}"
    )
    tc.assertGreaterEqual(
        stats.item_count, stats.node_count,
        f"Invariant failed: item_count={stats.item_count} < node_count={stats.node_count}{msg}"
    )
    tc.assertIsNotNone(
        stats.least_key,
        f"Invariant failed: least_key is None for non-empty tree{msg}"
    )
    tc.assertEqual(
        t.get_height(), stats.height,
        f"Invariant failed: cached root height {t.get_height()} ≠ {stats.height}{msg}"
    )
    tc.assertEqual(len(t), stats.node_count)
    tc.assertEqual(t.total_count(), stats.item_count)


def make_node(key: str, left: Optional[Node] = None, right: Optional[Node] = None,
              count: int = 1) -> Node:
    """Hand-build a node with the given children and a correct cached height."""
    node = Node(key, count)
    node.left = left
    node.right = right
    node.update_height()
    return node


def shape(node: Optional[Node]):
    """Nested (key, left, right) tuples describing a subtree's structure."""
    if node is None:
        return None
    return (node.key, shape(node.left), shape(node.right))


def scripted(*answers):
    """
    An input() replacement returning the given answers in order and raising
    EOFError once they run out. Prompts are recorded in `.prompts`.
    """
    it = iter(answers)

    def _input(prompt=""):
        _input.prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None
    _input.prompts = []
    return _input
