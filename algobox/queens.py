"""N-queens solving by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

MAX_N = 20


def format_board(solution: Sequence[int]) -> str:
    """Render a solution (one column per row) with ``Q`` for queens and ``.`` elsewhere."""
    size = len(solution)
    return "\n".join(
        " ".join("Q" if column == col else "." for col in range(size))
        for column in solution
    )


class NQueensSolver:
    """Places ``n`` non-attacking queens on an ``n`` by ``n`` board.

    A solution is a tuple giving the queen's column for each row.
    """

    def __init__(self, n: int) -> None:
        if not 0 <= n <= MAX_N:
            raise ValueError(f"board size must be between 0 and {MAX_N}")
        self.n = n

    def is_safe(self, board: Sequence[int], row: int, col: int) -> bool:
        """Tell whether a queen at ``(row, col)`` is clear of the queens in rows above."""
        return all(
            placed != col and placed - i != col - row and placed + i != col + row
            for i, placed in enumerate(board[:row])
        )

    def solutions(self) -> Iterator[tuple[int, ...]]:
        """Yield every solution, in lexicographic order of columns."""
        board: list[int] = []

        def place(row: int) -> Iterator[tuple[int, ...]]:
            if row == self.n:
                yield tuple(board)
                return
            for col in range(self.n):
                if self.is_safe(board, row, col):
                    board.append(col)
                    yield from place(row + 1)
                    board.pop()

        yield from place(0)

    def solve_all(self) -> list[tuple[int, ...]]:
        """Return every solution."""
        return list(self.solutions())

    def solve_first(self) -> tuple[int, ...] | None:
        """Return the first solution found, or None if there is none."""
        return next(self.solutions(), None)

    def count_solutions(self) -> int:
        """Return the number of solutions."""
        return sum(1 for _ in self.solutions())


def eight_queens() -> tuple[int, ...]:
    """Return the first solution of the eight-queens puzzle."""
    solution = NQueensSolver(8).solve_first()
    assert solution is not None
    return solution