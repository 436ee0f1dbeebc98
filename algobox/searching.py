"""Searching in sequences: linear, binary, exponential, Fibonacci and jump search.

Every search returns the index of a matching element, or ``None`` when the
target is absent. All but :func:`linear_search` expect the values in
ascending order.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache
from typing import Any


def _binary_search_range(
    values: Sequence[Any], left: int, right: int, target: Any
) -> int | None:
    while left <= right:
        middle = left + (right - left) // 2
        if values[middle] == target:
            return middle
        if values[middle] > target:
            right = middle - 1
        else:
            left = middle + 1
    return None


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in the sorted values, halving the range each step."""
    return _binary_search_range(values, 0, len(values) - 1, target)


def exponential_search(values: Sequence[Any], target: Any) -> int | None:
    """Find a range by repeated doubling, then binary-search inside it."""
    if not values:
        return None
    if values[0] == target:
        return 0
    size = len(values)
    bound = 1
    while bound < size and values[bound] <= target:
        bound *= 2
    return _binary_search_range(values, bound // 2, min(bound, size - 1), target)


@lru_cache(maxsize=64)
def _fibonacci_numbers(size: int) -> tuple[int, ...]:
    """Fibonacci numbers from F0 up to the first one not below ``size``."""
    numbers = [0, 1]
    while numbers[-1] < size:
        numbers.append(numbers[-1] + numbers[-2])
    return tuple(numbers)


def fibonacci_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` using Fibonacci splitting of the sorted values."""
    size = len(values)
    fibs = _fibonacci_numbers(size)
    k = len(fibs) - 1 if size > 1 else 1
    offset = 0
    while k > 0:
        k -= 1
        index = offset + fibs[k]
        if index >= size or target < values[index]:
            continue
        if target > values[index]:
            offset = index
            k -= 1
        else:
            return index
    return None


def jump_search(values: Sequence[Any], target: Any) -> int | None:
    """Jump ahead in blocks of about the square root of the length, then scan one block."""
    size = len(values)
    if size == 0:
        return None
    block = math.isqrt(size)
    step = block
    previous = 0
    while values[min(step, size) - 1] < target:
        previous = step
        step += block
        if previous >= size:
            return None
    while values[previous] < target:
        previous += 1
        if previous == min(step, size):
            return None
    return previous if values[previous] == target else None


def linear_search(values: Sequence[Any], key: Any) -> int | None:
    """Return the index of the first element equal to ``key``."""
    return next((index for index, value in enumerate(values) if value == key), None)