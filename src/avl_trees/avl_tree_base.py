# -*- coding: utf-8 -*-
# ------------------------------------------------------------------------------
#
#   Copyright 2025 Jannik Hehemann
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
# ------------------------------------------------------------------------------
"""AVL tree base implementation"""

from __future__ import annotations
import logging
import random
from typing import Iterator, List, Optional, Tuple, Type
from dataclasses import dataclass

from avl_trees.base import (
    AbstractMultisetDataStructure,
    DeleteMode,
    KeyNotFoundError,
    Node,
    Promotion,
    ResourceExhaustedError,
    SearchResult,
    TraversalEntry,
    balance_factor,
    height,
    largest_in,
    smallest_in,
)
from avl_trees.profiling import (
    track_operation,
    PerformanceTracker
)
from avl_trees.tokens import validate_key

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    # Prevent propagation to the root logger to avoid duplicate logs
    logger.propagate = False

LINE_SEP = "-----------------------"


def rotate_left(node: Node) -> Node:
    """
    Rotate the subtree rooted at `node` to the left.

         X             Y
        / \\           / \\
       T1  Y   -->   X  T3
          / \\       / \\
         T2 T3     T1 T2

    Returns:
        Node: The new subtree root (Y).

    Raises:
        ValueError: If `node` has no right child.
    """
    pivot = node.right
    if pivot is None:
        raise ValueError(f"rotate_left(): {node.key!r} has no right child")
    node.right = pivot.left
    pivot.left = node
    # X before Y, since Y's height depends on X
    node.update_height()
    pivot.update_height()
    return pivot


def rotate_right(node: Node) -> Node:
    """
    Rotate the subtree rooted at `node` to the right (mirror of rotate_left).

           Y             X
          / \\           / \\
         X  T3   -->   T1  Y
        / \\               / \\
       T1  T2            T2 T3

    Returns:
        Node: The new subtree root (X).

    Raises:
        ValueError: If `node` has no left child.
    """
    pivot = node.left
    if pivot is None:
        raise ValueError(f"rotate_right(): {node.key!r} has no left child")
    node.left = pivot.right
    pivot.right = node
    node.update_height()
    pivot.update_height()
    return pivot


def rebalance(node: Node) -> Node:
    """
    Restore the AVL balance of `node`, whose children are already balanced
    and carry correct heights, and whose own balance factor lies in [-2, 2].

    A child balance factor of exactly 0 is resolved with a single rotation.

    Returns:
        Node: The root of the balanced subtree.
    """
    balance = balance_factor(node)
    if balance > 1:
        if balance_factor(node.left) >= 0:
            logger.debug("Left-Left unbalanced: rotating %r right", node.key)
            return rotate_right(node)
        logger.debug("Left-Right unbalanced at %r: rotating %r left, then %r right",
                     node.key, node.left.key, node.key)
        node.left = rotate_left(node.left)
        return rotate_right(node)
    if balance < -1:
        if balance_factor(node.right) <= 0:
            logger.debug("Right-Right unbalanced: rotating %r left", node.key)
            return rotate_left(node)
        logger.debug("Right-Left unbalanced at %r: rotating %r right, then %r left",
                     node.key, node.right.key, node.key)
        node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


class AVLTreeBase(AbstractMultisetDataStructure):
    """
    A height-balanced binary search tree counting occurrences of text keys.

    Attributes:
        root (Optional[Node]): The node anchoring the tree. None if the tree is empty.
        rng (random.Random): Source of the coin flip between successor and
            predecessor promotion when a node with two children is removed.
    """
    __slots__ = ("root", "rng")

    # Overridden by the factory
    NodeClass: Type[Node] = Node
    PROMOTION: Promotion = Promotion.RANDOM

    def __init__(self, root: Optional[Node] = None, rng: Optional[random.Random] = None):
        self.root: Optional[Node] = root
        self.rng = rng if rng is not None else random.Random()

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return sum(1 for _ in self.traverse())

    def __contains__(self, key) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __iter__(self) -> Iterator[str]:
        return self.in_order()

    def __str__(self):
        return "Empty AVLTree" if self.is_empty() else f"AVLTree(root={self.root})"

    __repr__ = __str__

    # Public API
    @track_operation("insert", lambda node: "new" if node.count == 1 else "repeat")
    def insert(self, key: str) -> Node:
        """
        Public method (O(log n)): Insert one occurrence of `key`.
        A repeated key increments the count of its existing node.

        Args:
            key (str): Non-empty printable text.
        Returns:
            Node: The node holding `key` after insertion.

        Raises:
            TypeError: If key is not a str.
            ValueError: If key is empty or not printable.
            ResourceExhaustedError: If a new node cannot be allocated. The
                tree is left unchanged.
        """
        validate_key(key, "insert")
        self.root, node = self._insert(self.root, key)
        return node

    @track_operation("search", lambda result: "hit" if result.found else "miss")
    def search(self, key: str) -> SearchResult:
        """
        Searches for the node holding `key`.

        Iteratively descends left or right by key comparison (O(log n)).

        Args:
            key (str): The key to search for.

        Returns:
            SearchResult: found_node is the matching node, or None if not found.
        """
        validate_key(key, "search")
        return SearchResult(self._find(key))

    @track_operation("delete", lambda removed: "removed" if removed else "missing")
    def delete(self, key: str, missing_ok: bool = True) -> bool:
        """
        Public method (O(log n)): Remove one occurrence of `key`.
        The node itself is removed once its count reaches zero.

        Args:
            key (str): The key to delete.
            missing_ok (bool): Report an absent key by returning False
                instead of raising.

        Returns:
            bool: True if an occurrence was removed, False if `key` was absent.

        Raises:
            KeyNotFoundError: If `key` is absent and missing_ok is False.
        """
        validate_key(key, "delete")
        try:
            self.root = self._delete(self.root, key, DeleteMode.DECREMENT)
        except KeyNotFoundError:
            logger.debug("%r not found. Unable to delete.", key)
            if not missing_ok:
                raise
            return False
        return True

    def destroy(self) -> None:
        """Unlink every node and leave the tree empty."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.left = node.right = None
        self.root = None

    def traverse(self) -> Iterator[TraversalEntry]:
        """
        Visit right subtree, node, left subtree, i.e. keys in descending order.

        Yields:
            TraversalEntry: (key, count, depth), the root being at depth 0.
        """
        for node, depth in self._iter_nodes():
            yield TraversalEntry(node.key, node.count, depth)

    def in_order(self) -> Iterator[str]:
        """Yield keys in ascending order."""
        stack: List[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def total_count(self) -> int:
        """Number of occurrences over all keys."""
        return sum(entry.count for entry in self.traverse())

    def get_height(self) -> int:
        return height(self.root)

    @classmethod
    def get_performance_report(cls, sort_by: str = 'total_time') -> str:
        return PerformanceTracker.get_instance().report(sort_by)

    @classmethod
    def reset_performance_metrics(cls) -> None:
        PerformanceTracker.get_instance().reset()

    # Private Methods
    def _find(self, key: str) -> Optional[Node]:
        cur = self.root
        while cur is not None:
            if key > cur.key:
                cur = cur.right
            elif key < cur.key:
                cur = cur.left
            else:
                return cur
        return None

    def _new_node(self, key: str) -> Node:
        try:
            return self.NodeClass(key)
        except MemoryError as exc:
            raise ResourceExhaustedError(
                f"insert(): not enough memory to construct a node for {key!r}"
            ) from exc

    def _insert(self, node: Optional[Node], key: str) -> Tuple[Node, Node]:
        """
        Insert `key` below `node` and return (new subtree root, node holding key).
        Heights are refreshed and each ancestor rebalanced while unwinding.
        """
        if node is None:
            new = self._new_node(key)
            return new, new

        if key > node.key:
            node.right, target = self._insert(node.right, key)
        elif key < node.key:
            node.left, target = self._insert(node.left, key)
        else:
            node.count += 1
            target = node

        node.update_height()
        return rebalance(node), target

    def _delete(self, node: Optional[Node], key: str, mode: DeleteMode) -> Optional[Node]:
        """
        Delete `key` below `node` and return the new subtree root.

        Raises KeyNotFoundError on reaching an empty subtree. No link has been
        rewritten at that point, so the whole descent is abandoned unchanged.
        """
        if node is None:
            raise KeyNotFoundError(key)

        if key > node.key:
            node.right = self._delete(node.right, key, mode)
        elif key < node.key:
            node.left = self._delete(node.left, key, mode)
        elif node.count > 1 and mode is DeleteMode.DECREMENT:
            node.count -= 1
            return node
        elif node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            node.left = node.right = None
            return child
        else:
            self._replace_with_neighbour(node)

        node.update_height()
        return rebalance(node)

    def _use_successor(self) -> bool:
        if self.PROMOTION is Promotion.SUCCESSOR:
            return True
        if self.PROMOTION is Promotion.PREDECESSOR:
            return False
        return self.rng.random() < 0.5

    def _replace_with_neighbour(self, node: Node) -> None:
        """
        Copy the in-order successor (or predecessor) into `node`, which has two
        children, then force-remove the original from the subtree it came from.
        """
        if self._use_successor():
            heir = smallest_in(node.right)
            logger.debug("Promoting successor %r into %r", heir.key, node.key)
            node.key, node.count = heir.key, heir.count
            node.right = self._delete(node.right, heir.key, DeleteMode.FORCE_REMOVE)
        else:
            heir = largest_in(node.left)
            logger.debug("Promoting predecessor %r into %r", heir.key, node.key)
            node.key, node.count = heir.key, heir.count
            node.left = self._delete(node.left, heir.key, DeleteMode.FORCE_REMOVE)

    def print_structure(self, verbose: bool = False) -> str:
        """
        Render the tree sideways: right subtree above, left subtree below,
        each node indented by one tab per level of depth.

        Args:
            verbose (bool): Include height, balance factor and child keys of
                every node, followed by the keys in ascending order.
        """
        if self.is_empty():
            return "Empty."

        if not verbose:
            return "\n".join(
                "\t" * e.depth + f"{e.key}({e.count})" for e in self.traverse()
            )

        lines = []
        for node, depth in self._iter_nodes():
            tabs = "\t" * depth
            left = node.left.key if node.left is not None else None
            right = node.right.key if node.right is not None else None
            lines.append(
                f"{tabs}|Node[word={node.key},count={node.count},"
                f"height={node.height},balanceFactor={balance_factor(node)}]"
            )
            lines.append(f"{tabs}|Left: {left}")
            lines.append(f"{tabs}|Right: {right}")
        lines.append(LINE_SEP)
        single = self.root.left is None and self.root.right is None
        label = "word is" if single else "words are"
        lines.append(f"In order, {label}: " + " ".join(self.in_order()))
        return "\n".join(lines)

    def _iter_nodes(self) -> Iterator[Tuple[Node, int]]:
        """Reverse in-order walk yielding (node, depth)."""
        stack: List[Tuple[Node, int]] = []
        node, depth = self.root, 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node, depth = node.right, depth + 1
            node, depth = stack.pop()
            yield node, depth
            node, depth = node.left, depth + 1


@dataclass
class Stats:
    height: int
    node_count: int
    item_count: int
    least_key: Optional[str]
    greatest_key: Optional[str]
    is_search_tree: bool
    is_balanced: bool
    heights_correct: bool
    counts_positive: bool


def avl_tree_stats_(t: Optional[AVLTreeBase]) -> Stats:
    """
    Returns aggregated statistics for an AVL tree in **O(n)** time.

    Heights are recomputed from the structure, so `heights_correct` also
    checks the cached value of every node.
    """
    root = t.root if t is not None else None
    return _subtree_stats(root)


def _subtree_stats(node: Optional[Node]) -> Stats:
    if node is None:
        return Stats(height          = 0,
                     node_count      = 0,
                     item_count      = 0,
                     least_key       = None,
                     greatest_key    = None,
                     is_search_tree  = True,
                     is_balanced     = True,
                     heights_correct = True,
                     counts_positive = True)

    left = _subtree_stats(node.left)
    right = _subtree_stats(node.right)
    key = node.key
    real_height = 1 + max(left.height, right.height)

    is_search_tree = (
        left.is_search_tree and right.is_search_tree
        and (left.greatest_key is None or left.greatest_key < key)
        and (right.least_key is None or right.least_key > key)
    )
    count_ok = isinstance(node.count, int) and node.count >= 1

    return Stats(
        height=real_height,
        node_count=1 + left.node_count + right.node_count,
        item_count=node.count + left.item_count + right.item_count,
        least_key=left.least_key if left.least_key is not None else key,
        greatest_key=right.greatest_key if right.greatest_key is not None else key,
        is_search_tree=is_search_tree,
        is_balanced=(left.is_balanced and right.is_balanced
                     and abs(left.height - right.height) <= 1),
        heights_correct=(left.heights_correct and right.heights_correct
                         and node.height == real_height),
        counts_positive=left.counts_positive and right.counts_positive and count_ok,
    )
