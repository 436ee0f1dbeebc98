"""A backtracking Sudoku solver for 9 by 9 grids, with 0 for empty cells."""

from __future__ import annotations

from collections.abc import Sequence

SIZE = 9
BOX = 3


def is_safe(grid: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Tell whether ``num`` may go at ``(row, col)`` without repeating in row, column or box."""
    if num in grid[row]:
        return False
    if any(grid[r][col] == num for r in range(SIZE)):
        return False
    top, left = row - row % BOX, col - col % BOX
    return all(
        grid[r][c] != num
        for r in range(top, top + BOX)
        for c in range(left, left + BOX)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Return a solved copy of ``grid``, or None if it cannot be completed."""
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("grid must be 9 by 9")
    work = [list(row) for row in grid]
    empty = [(r, c) for r in range(SIZE) for c in range(SIZE) if work[r][c] == 0]

    def fill(index: int) -> bool:
        if index == len(empty):
            return True
        row, col = empty[index]
        for num in range(1, SIZE + 1):
            if is_safe(work, row, col, num):
                work[row][col] = num
                if fill(index + 1):
                    return True
                work[row][col] = 0
        return False

    return work if fill(0) else None


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render the grid as rows of space-separated digits."""
    return "\n".join(" ".join(str(cell) for cell in row) for row in grid)