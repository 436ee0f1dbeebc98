"""Array algorithms: Moore's majority vote and Kadane's maximum subarray."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def find_candidate(values: Sequence[Any]) -> Any:
    """Return the majority candidate found by Moore's voting pass."""
    if not values:
        raise ValueError("cannot find a candidate in an empty sequence")
    candidate = values[0]
    count = 1
    for value in values[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate = value
            count = 1
    return candidate


def majority_element(values: Sequence[Any]) -> Any | None:
    """Return the element occurring more than half the time, or None."""
    if not values:
        return None
    candidate = find_candidate(values)
    occurrences = sum(1 for value in values if value == candidate)
    return candidate if occurrences > len(values) // 2 else None


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run; 0 for no values."""
    if not values:
        return 0
    best = current = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best