"""Statistics and random workloads for AVL word trees."""
# pylint: skip-file

import logging
import string
import time
from collections import Counter
from statistics import mean
from typing import Dict, List, Optional, Tuple
import numpy as np

from avl_trees.avl_tree_base import AVLTreeBase, Stats, avl_tree_stats_
from avl_trees.factory import create_avl_tree

TREE_FLAGS = (
    "is_search_tree",
    "is_balanced",
    "heights_correct",
    "counts_positive",
)

LETTERS = np.array(list(string.ascii_lowercase))


def assert_invariants(t: AVLTreeBase, stats: Stats) -> None:
    """Check all invariants, but only log ERROR messages on failures."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logging.error("Invariant failed: %s is False", flag)

    if not t.is_empty():
        if stats.node_count <= 0:
            logging.error(
                "Invariant failed: node_count=%d ≤ 0 for non-empty tree",
                stats.node_count
            )
        if stats.item_count < stats.node_count:
            logging.error(
                "Invariant failed: item_count=%d < node_count=%d",
                stats.item_count, stats.node_count
            )


def random_vocabulary(size: int, rng: np.random.Generator,
                      min_len: int = 2, max_len: int = 10) -> List[str]:
    """Draw `size` distinct lowercase words of random length."""
    words = set()
    while len(words) < size:
        length = int(rng.integers(min_len, max_len + 1))
        words.add("".join(rng.choice(LETTERS, size=length)))
    return sorted(words)


def random_words(n: int, vocab_size: int, seed: Optional[int] = None,
                 zipf_a: float = 1.3) -> List[str]:
    """
    Draw `n` word occurrences from a random vocabulary with Zipf distributed
    frequencies, so a few words repeat often and most appear rarely.
    """
    rng = np.random.default_rng(seed)
    vocab = random_vocabulary(vocab_size, rng)
    rng.shuffle(vocab)
    ranks = np.minimum(rng.zipf(zipf_a, size=n), vocab_size) - 1
    return [vocab[int(r)] for r in ranks]


def create_tree(words, seed: Optional[int] = None) -> AVLTreeBase:
    """Build a tree by inserting each word in order."""
    tree = create_avl_tree(seed=seed)
    tree_insert = tree.insert
    for word in words:
        tree_insert(word)
    return tree


def random_avl_tree_of_size(n: int, vocab_size: Optional[int] = None,
                            seed: Optional[int] = None) -> AVLTreeBase:
    """A tree holding `n` occurrences drawn by random_words."""
    if vocab_size is None:
        vocab_size = max(1, n // 4)
    return create_tree(random_words(n, vocab_size, seed), seed)


def check_keys_and_counts(
    tree: AVLTreeBase,
    expected: Optional[Dict[str, int]] = None
) -> Tuple[List[str], bool, bool]:
    """
    Walk the tree in order once and compute two properties:
      1. presence_ok: if `expected` is given, do the keys and counts match it
                      exactly? Otherwise always True.
      2. order_ok:    are the keys strictly ascending?

    Returns:
        (keys, presence_ok, order_ok)
    """
    keys = []
    counts = {}
    order_ok = True
    prev_key = None
    for entry in reversed(list(tree.traverse())):
        if prev_key is not None and entry.key <= prev_key:
            order_ok = False
        keys.append(entry.key)
        counts[entry.key] = entry.count
        prev_key = entry.key

    presence_ok = True
    if expected is not None:
        presence_ok = counts == dict(expected)

    return keys, presence_ok, order_ok


def repeated_experiment(size: int, repetitions: int, vocab_size: int) -> None:
    """
    Build `repetitions` random trees of `size` occurrences, check them and
    log average height against the AVL bound.
    """
    t_all_0 = time.perf_counter()
    heights = []
    bounds = []
    build_times = []
    for i in range(repetitions):
        words = random_words(size, vocab_size, seed=i)
        t0 = time.perf_counter()
        tree = create_tree(words, seed=i)
        build_times.append(time.perf_counter() - t0)

        stats = avl_tree_stats_(tree)
        assert_invariants(tree, stats)
        _, presence_ok, order_ok = check_keys_and_counts(tree, Counter(words))
        if not (presence_ok and order_ok):
            logging.error("Key/count mismatch in repetition %d", i)
        heights.append(stats.height)
        bounds.append(1.44 * np.log2(stats.node_count + 2))

    logging.info("Size %d, %d repetitions: avg height %.2f (AVL bound %.2f)",
                 size, repetitions, mean(heights), mean(bounds))
    logging.info("Avg build time %.6fs, total %.2fs",
                 mean(build_times), time.perf_counter() - t_all_0)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s: [%(levelname)s] %(message)s"
    )
    for size in (10, 100, 1000, 10_000):
        repeated_experiment(size, repetitions=20, vocab_size=max(1, size // 4))
