#!/usr/bin/env python3
"""
Benchmarks for the AVL word tree.

This script measures:
 1. Full tree build times (random_avl_tree_of_size)
 2. Per-search cost in trees of various sizes
 3. Per-insert and per-delete cost in trees of various sizes
 4. A per-operation, per-outcome breakdown from the performance tracker

Usage:
    python benchmarks.py [--sizes 100 1000 10000] [--trials T] [--seed S]
"""
import argparse
import gc
import random
import time
from pprint import pprint
from dataclasses import asdict
from statistics import mean, variance

from stats_avl_tree import random_avl_tree_of_size, random_words
from avl_trees.avl_tree_base import AVLTreeBase, avl_tree_stats_
from avl_trees.profiling import PerformanceTracker


def bench_build(sizes: list[int], seed: int) -> None:
    """Measure random_avl_tree_of_size for various sizes."""
    for n in sizes:
        t0 = time.perf_counter()
        _ = random_avl_tree_of_size(n, seed=seed)
        elapsed = time.perf_counter() - t0
        print(f"[bench] random_avl_tree_of_size({n}): {elapsed:.4f}s")


def bench_tree_stats(n: int, seed: int) -> None:
    """Build a single random tree and print its stats."""
    tree = random_avl_tree_of_size(n, seed=seed)
    stats = avl_tree_stats_(tree)
    print(f"[bench] random_avl_tree_of_size({n}) stats:")
    pprint(asdict(stats))


def _timed(fn, args_list) -> list[float]:
    gc.collect()
    gc.disable()
    try:
        times = []
        for args in args_list:
            t0 = time.perf_counter()
            fn(*args)
            times.append(time.perf_counter() - t0)
    finally:
        gc.enable()
    return times


def measure_single_ops(n: int, trials: int, seed: int) -> dict[str, tuple[float, float]]:
    """
    Measure per-operation cost on a tree of `n` occurrences.
    Returns {op: (mean_time_s, variance_time_s)} for search, insert, delete.
    Variance needs at least two samples, so `trials` must be 2 or more.
    """
    if trials < 2:
        raise ValueError(f"measure_single_ops(): trials must be at least 2, got {trials}")
    tree = random_avl_tree_of_size(n, seed=seed)
    present = list(tree.in_order())
    rng = random.Random(seed)
    fresh = random_words(trials, vocab_size=trials, seed=seed + 1)

    search_keys = [(rng.choice(present),) for _ in range(trials)]
    results = {"search": _timed(tree.search, search_keys)}
    results["insert"] = _timed(tree.insert, [(w,) for w in fresh])
    results["delete"] = _timed(tree.delete, [(w,) for w in fresh])
    return {op: (mean(t), variance(t)) for op, t in results.items()}


def bench_single_ops(sizes: list[int], trials: int, seed: int) -> None:
    for n in sizes:
        for op, (avg, var) in measure_single_ops(n, trials, seed).items():
            print(
                f"[bench] {op.capitalize():<7} on size {n:<7} → avg {avg*1e6:8.2f} µs   σ²={var*1e12:8.2f} µs²"
            )


def trial_count(value: str) -> int:
    """argparse type for --trials: an integer of at least 2."""
    trials = int(value)
    if trials < 2:
        raise argparse.ArgumentTypeError(f"need at least 2 trials, got {trials}")
    return trials


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AVL word tree benchmarks")
    parser.add_argument("--sizes", nargs='+', type=int, default=[100, 1000, 10_000],
                        help="Tree sizes (word occurrences) for single-op benchmarks")
    parser.add_argument("--trials", type=trial_count, default=200,
                        help="Number of operations timed per size")
    parser.add_argument("--seed", type=int, default=0,
                        help="Seed for the random workloads")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    print("\n=== Full Tree Build ===")
    bench_build([10, 100, 1000, 10_000, 100_000], args.seed)

    print("\n=== random_avl_tree_of_size Stats ===")
    bench_tree_stats(100_000, args.seed)

    print("\n=== Single-Operation Benchmarks ===")
    tracker = PerformanceTracker.get_instance()
    tracker.enable()
    bench_single_ops(args.sizes, args.trials, args.seed)

    print("\n=== Per-Outcome Operation Breakdown ===")
    print(AVLTreeBase.get_performance_report())
    AVLTreeBase.reset_performance_metrics()
    tracker.disable()


if __name__ == "__main__":
    main()
