"""Classic comparison sorts and a small command-line front end."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with the items sorted by a stable merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    left_iter, right_iter = iter(left), iter(right)
    left_item = next(left_iter, _SENTINEL)
    right_item = next(right_iter, _SENTINEL)
    while left_item is not _SENTINEL and right_item is not _SENTINEL:
        if left_item <= right_item:
            merged.append(left_item)
            left_item = next(left_iter, _SENTINEL)
        else:
            merged.append(right_item)
            right_item = next(right_iter, _SENTINEL)
    if left_item is not _SENTINEL:
        merged.append(left_item)
        merged.extend(left_iter)
    if right_item is not _SENTINEL:
        merged.append(right_item)
        merged.extend(right_iter)
    return merged


_SENTINEL = object()


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i <= high - 1:
            i += 1
        while items[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by quicksort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by selection sort."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by heapsort on a max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by insertion sort."""
    items: list[Any] = []
    for key in values:
        position = len(items)
        while position > 0 and items[position - 1] > key:
            position -= 1
        items.insert(position, key)
    return items


def is_sorted(values: Sequence[Any]) -> bool:
    """Tell whether the items are in ascending order."""
    return all(a <= b for a, b in zip(values, values[1:]))


def format_array(values: Iterable[Any]) -> str:
    """Render items as ``[a, b, c]``."""
    return "[" + ", ".join(str(value) for value in values) + "]"


ALGORITHMS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "merge": merge_sort,
    "quick": quick_sort,
    "selection": selection_sort,
    "bubble": bubble_sort,
    "heap": heap_sort,
    "insertion": insertion_sort,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Sort integers given as arguments, or read from standard input."""
    parser = argparse.ArgumentParser(description="Sort a list of integers.")
    parser.add_argument(
        "-a", "--algorithm", choices=sorted(ALGORITHMS), default="merge"
    )
    parser.add_argument("numbers", nargs="*", type=int)
    args = parser.parse_args(argv)

    numbers = args.numbers
    if not numbers:
        try:
            numbers = [int(token) for token in sys.stdin.read().split()]
        except ValueError:
            parser.error("input must be whitespace-separated integers")

    result = ALGORITHMS[args.algorithm](numbers)
    print(f"Original array: {format_array(numbers)}")
    print(f"Sorted array: {format_array(result)}")
    if is_sorted(result):
        print("Array successfully sorted!")
    else:
        print("Sorting failed!")
    return 0