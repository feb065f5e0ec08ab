"""
AVL trees - self-balancing binary search trees counting word occurrences.

This package provides a height-balanced multiset of text keys together with
the tokenizers, importer and interactive shell that feed it.
"""

from avl_trees.base import (
    AVLTreeError,
    DeleteMode,
    KeyNotFoundError,
    Node,
    Promotion,
    ResourceExhaustedError,
    SearchResult,
    TraversalEntry,
)
from avl_trees.avl_tree_base import (
    AVLTreeBase,
    Stats,
    avl_tree_stats_,
    rebalance,
    rotate_left,
    rotate_right,
)
from avl_trees.factory import (
    make_avl_tree_class,
    create_avl_tree
)

__all__ = [
    'AVLTreeBase',
    'AVLTreeError',
    'DeleteMode',
    'KeyNotFoundError',
    'Node',
    'Promotion',
    'ResourceExhaustedError',
    'SearchResult',
    'Stats',
    'TraversalEntry',
    'avl_tree_stats_',
    'create_avl_tree',
    'make_avl_tree_class',
    'rebalance',
    'rotate_left',
    'rotate_right',
]
