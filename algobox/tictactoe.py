"""Two-player tic-tac-toe on the command line."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

EMPTY = " "
PLAYERS = ("X", "O")


def _winning_lines() -> list[tuple[int, int, int]]:
    lines = []
    for i in range(3):
        lines.append((3 * i, 3 * i + 1, 3 * i + 2))
        lines.append((i, i + 3, i + 6))
    lines.append((0, 4, 8))
    lines.append((2, 4, 6))
    return lines


_LINES = _winning_lines()


class InvalidMoveError(ValueError):
    """Raised for a move outside the board or onto a taken cell."""


class Board:
    """A 3 by 3 board with cells numbered 1 to 9, row by row."""

    def __init__(self) -> None:
        self.cells = [EMPTY] * 9

    def place(self, cell: int, player: str) -> None:
        """Put ``player``'s mark on ``cell``."""
        if player not in PLAYERS:
            raise ValueError(f"unknown player: {player!r}")
        if not 1 <= cell <= 9:
            raise InvalidMoveError("Choose a number between 1 and 9.")
        if self.cells[cell - 1] != EMPTY:
            raise InvalidMoveError("Cell already taken. Choose another.")
        self.cells[cell - 1] = player

    def winner(self) -> str | None:
        """Return the mark holding a full line, or None."""
        for a, b, c in _LINES:
            if self.cells[a] != EMPTY and self.cells[a] == self.cells[b] == self.cells[c]:
                return self.cells[a]
        return None

    def moves_left(self) -> bool:
        """Tell whether any cell is still empty."""
        return EMPTY in self.cells

    def render(self) -> str:
        """Draw the board, showing the number of each empty cell."""
        rows = []
        for start in range(0, 9, 3):
            rows.append(
                "|".join(
                    f" {self.cells[i] if self.cells[i] != EMPTY else i + 1} "
                    for i in range(start, start + 3)
                )
            )
        return "\n---+---+---\n".join(rows)


def _show(board: Board) -> None:
    print("\nCurrent board:")
    print(board.render())
    print()


def _read_move(board: Board, player: str) -> None:
    while True:
        text = input(f"Player {player}, enter your move (1-9): ")
        try:
            cell = int(text.split()[0])
        except (ValueError, IndexError):
            print("Invalid input. Please enter a number 1-9.")
            continue
        try:
            board.place(cell, player)
        except InvalidMoveError as error:
            print(error)
            continue
        return


def _play_round() -> None:
    board = Board()
    player = "X"
    print("Tic-Tac-Toe (CLI)")
    print("Players: X and O")
    print("Enter cell numbers 1-9 as shown on board to place your mark.")
    while board.winner() is None and board.moves_left():
        _show(board)
        _read_move(board, player)
        if board.winner() is not None or not board.moves_left():
            break
        player = "O" if player == "X" else "X"
    _show(board)
    winner = board.winner()
    if winner is None:
        print("It's a draw! 🤝")
    else:
        print(f"Player {winner} wins! 🎉")


def main(argv: Sequence[str] | None = None) -> int:
    """Play rounds until the players decline another."""
    parser = argparse.ArgumentParser(description="Two-player tic-tac-toe.")
    parser.parse_args(argv)
    try:
        while True:
            _play_round()
            answer = input("Play again? (y/n): ").strip()
            if answer[:1] not in ("y", "Y"):
                break
    except EOFError:
        pass
    print("Thanks for playing! Goodbye.")
    return 0