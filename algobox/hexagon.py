"""Draw a hexagon of asterisks."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def hexagon_lines(size: int) -> list[str]:
    """Return the lines of a hexagon whose top edge has ``size`` stars."""
    widths = [*range(size), *range(size - 2, -1, -1)]
    return [" " * (size - i - 1) + "*" * (size + 2 * i) for i in widths]


def main(argv: Sequence[str] | None = None) -> int:
    """Print a hexagon of the given size."""
    parser = argparse.ArgumentParser(description="Draw a hexagon of asterisks.")
    parser.add_argument("size", nargs="?", type=int)
    args = parser.parse_args(argv)

    size = args.size
    if size is None:
        try:
            size = int(input("Enter size of hexagon (e.g. 4 or 5): ").split()[0])
        except (ValueError, IndexError, EOFError):
            return 1
    for line in hexagon_lines(size):
        print(line)
    return 0