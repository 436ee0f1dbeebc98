"""Text mazes: random depth-first generation and depth-first solving."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Iterator, Sequence

WALL = "#"
PATH = " "
SOLUTION = "."

# North, south, east, west.
_DIRECTIONS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def _shuffled(rng: random.Random) -> Iterator[tuple[int, int]]:
    directions = list(_DIRECTIONS)
    rng.shuffle(directions)
    return iter(directions)


class Maze:
    """A grid of wall and path cells, entered at the top and left at the bottom."""

    def __init__(self, cells: Iterable[Iterable[str]]) -> None:
        self.cells = [list(row) for row in cells]
        if not self.cells or not self.cells[0]:
            raise ValueError("a maze needs at least one cell")
        if any(len(row) != len(self.cells[0]) for row in self.cells):
            raise ValueError("maze rows must all have the same length")

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    @property
    def entrance(self) -> tuple[int, int]:
        return (0, 1)

    @property
    def exit(self) -> tuple[int, int]:
        return (self.rows - 1, self.cols - 2)

    @classmethod
    def generate(
        cls, rows: int, cols: int, rng: random.Random | None = None
    ) -> Maze:
        """Carve a maze by randomised depth-first search from cell (1, 1)."""
        if rows < 3 or cols < 3:
            raise ValueError("a maze needs at least 3 rows and 3 columns")
        rng = rng if rng is not None else random.Random()
        cells = [[WALL] * cols for _ in range(rows)]
        cells[1][1] = PATH
        stack = [(1, 1, _shuffled(rng))]
        while stack:
            r, c, directions = stack[-1]
            step = next(directions, None)
            if step is None:
                stack.pop()
                continue
            dr, dc = step
            nr, nc = r + 2 * dr, c + 2 * dc
            if 0 < nr < rows - 1 and 0 < nc < cols - 1 and cells[nr][nc] == WALL:
                cells[r + dr][c + dc] = PATH
                cells[nr][nc] = PATH
                stack.append((nr, nc, _shuffled(rng)))
        cells[0][1] = PATH
        cells[rows - 1][cols - 2] = PATH
        return cls(cells)

    def _is_path(self, row: int, col: int) -> bool:
        return (
            0 <= row < self.rows
            and 0 <= col < self.cols
            and self.cells[row][col] == PATH
        )

    def solve(self) -> bool:
        """Mark a route from entrance to exit with ``.``; tell whether one exists."""
        start, end = self.entrance, self.exit
        if start == end:
            return True
        if not self._is_path(*start):
            return False
        self.cells[start[0]][start[1]] = SOLUTION
        stack = [(start, iter(_DIRECTIONS))]
        while stack:
            (r, c), directions = stack[-1]
            step = next(directions, None)
            if step is None:
                self.cells[r][c] = PATH
                stack.pop()
                continue
            nr, nc = r + step[0], c + step[1]
            if (nr, nc) == end:
                return True
            if self._is_path(nr, nc):
                self.cells[nr][nc] = SOLUTION
                stack.append(((nr, nc), iter(_DIRECTIONS)))
        return False

    def render(self) -> str:
        """Return the maze as lines of characters."""
        return "\n".join("".join(row) for row in self.cells)


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a maze, print it, then print it solved."""
    parser = argparse.ArgumentParser(description="Generate and solve a text maze.")
    parser.add_argument("rows", nargs="?", type=int)
    parser.add_argument("cols", nargs="?", type=int)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    rows, cols = args.rows, args.cols
    if rows is None or cols is None:
        try:
            text = input("Enter maze size (rows cols, odd numbers recommended): ")
            rows, cols = (int(token) for token in text.split()[:2])
        except (ValueError, EOFError):
            return 1

    try:
        maze = Maze.generate(rows, cols, random.Random(args.seed))
    except ValueError as error:
        print(f"Error: {error}")
        return 1

    print("\nGenerated Maze:")
    print(maze.render())
    if maze.solve():
        print("\nSolved Maze:")
        print(maze.render())
    else:
        print("No solution found!")
    return 0