"""The 0/1 knapsack by dynamic programming and the greedy fractional knapsack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a value and a positive weight."""

    value: int
    weight: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of whole items fitting in ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Return the best value when items may be taken in fractions."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    total = 0.0
    room = capacity
    for item in sorted(items, key=lambda item: item.ratio, reverse=True):
        if room == 0:
            break
        if item.weight <= room:
            room -= item.weight
            total += item.value
        else:
            total += item.value * (room / item.weight)
            room = 0
    return total