"""
Meal metrics - counters and the best in-diet streak.

Pure functions over the ordered list of in-diet flags, so the
computation can be tested without a database.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class MealMetrics:
    total: int
    total_inside: int
    total_outside: int
    best_sequence: int


def best_sequence(flags: Iterable[bool]) -> int:
    """Longest run of consecutive True values; any False resets the run."""
    best = 0
    current = 0
    for is_inside in flags:
        if is_inside:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


def summarize(flags: Iterable[bool]) -> MealMetrics:
    """Build metrics from in-diet flags given in creation order."""
    flags = list(flags)
    total_inside = sum(1 for f in flags if f)
    return MealMetrics(
        total=len(flags),
        total_inside=total_inside,
        total_outside=len(flags) - total_inside,
        best_sequence=best_sequence(flags),
    )
