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
"""Latency of tree operations, filed by what each call did."""

import functools
import statistics
import time
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

# (operation, outcome), e.g. ("search", "miss")
SampleKey = Tuple[str, str]


@dataclass
class OperationMetrics:
    """Timing samples for one operation/outcome pair."""
    calls: int = 0
    total_time: float = 0.0
    max_time: float = 0.0
    times: List[float] = field(default_factory=list)

    def record(self, elapsed: float) -> None:
        self.calls += 1
        self.total_time += elapsed
        self.max_time = max(self.max_time, elapsed)
        self.times.append(elapsed)

    @property
    def avg_time(self) -> float:
        return self.total_time / self.calls if self.calls else 0.0

    @property
    def median_time(self) -> float:
        return statistics.median(self.times) if self.times else 0.0


class PerformanceTracker:
    """
    Process-wide collector of operation timings.

    Starts disabled, so tree operations pay one attribute check until a
    benchmark calls enable().
    """

    _instance = None

    @classmethod
    def get_instance(cls) -> 'PerformanceTracker':
        """Singleton accessor."""
        if cls._instance is None:
            cls._instance = PerformanceTracker()
        return cls._instance

    def __init__(self):
        self.metrics: Dict[SampleKey, OperationMetrics] = defaultdict(OperationMetrics)
        self.enabled = False

    def record(self, operation: str, outcome: str, elapsed: float) -> None:
        if self.enabled:
            self.metrics[(operation, outcome)].record(elapsed)

    def reset(self) -> None:
        self.metrics.clear()

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def outcomes(self, operation: str) -> Dict[str, int]:
        """Number of calls per outcome of `operation`."""
        return {
            outcome: m.calls
            for (op, outcome), m in sorted(self.metrics.items())
            if op == operation
        }

    def report(self, sort_by: str = 'total_time') -> str:
        """
        Render one block per operation, its outcomes ordered by `sort_by`
        (any numeric OperationMetrics attribute), with each outcome's share
        of the operation's calls.
        """
        if not isinstance(getattr(OperationMetrics(), sort_by, None), (int, float)):
            raise ValueError(f"report(): cannot sort by {sort_by!r}")
        if not self.metrics:
            return "No performance data collected."

        by_operation: Dict[str, List[Tuple[str, OperationMetrics]]] = defaultdict(list)
        for (operation, outcome), m in self.metrics.items():
            by_operation[operation].append((outcome, m))

        lines = ["Operation Metrics:", "-" * 80]
        lines.append(f"{'Operation':<12} {'Outcome':<20} {'Calls':>8} {'Share':>7} "
                     f"{'Total (s)':>10} {'Avg (s)':>10} {'Median (s)':>10}")
        lines.append("-" * 80)
        for operation in sorted(by_operation):
            rows = sorted(by_operation[operation],
                          key=lambda row: getattr(row[1], sort_by), reverse=True)
            op_calls = sum(m.calls for _, m in rows)
            for outcome, m in rows:
                lines.append(f"{operation:<12} {outcome:<20} {m.calls:>8} "
                             f"{m.calls / op_calls:>7.1%} {m.total_time:>10.6f} "
                             f"{m.avg_time:>10.6f} {m.median_time:>10.6f}")
        return "\n".join(lines)


def track_operation(operation: str, outcome: Callable[[Any], str]) -> Callable:
    """
    Decorator timing a tree operation.

    Args:
        operation: Name the samples are filed under.
        outcome: Maps the call's return value to an outcome label. A call
            that raises is filed under the exception's class name instead.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            tracker = PerformanceTracker.get_instance()
            if not tracker.enabled:
                return func(*args, **kwargs)

            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                tracker.record(operation, type(exc).__name__, time.perf_counter() - start_time)
                raise
            tracker.record(operation, outcome(result), time.perf_counter() - start_time)
            return result
        return wrapper
    return decorator
