"""Small games: guess the number and rock-paper-scissors."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from enum import Enum

LOWEST = 1
HIGHEST = 100
CHOICES = ("Rock", "Paper", "Scissors")


class GuessResult(Enum):
    """How a guess compares with the secret number."""

    TOO_LOW = "Too low! Try again."
    TOO_HIGH = "Too high! Try again."
    CORRECT = "Correct"


class GuessingGame:
    """A secret number between 1 and 100 and a count of guesses made."""

    def __init__(
        self, number: int | None = None, rng: random.Random | None = None
    ) -> None:
        if number is None:
            number = (rng if rng is not None else random.Random()).randint(
                LOWEST, HIGHEST
            )
        self.number = number
        self.attempts = 0

    def guess(self, value: int) -> GuessResult:
        """Count a guess and say how it compares with the secret number."""
        self.attempts += 1
        if value < self.number:
            return GuessResult.TOO_LOW
        if value > self.number:
            return GuessResult.TOO_HIGH
        return GuessResult.CORRECT


class Outcome(Enum):
    """The result of a round of rock-paper-scissors for the user."""

    TIE = "It's a tie!"
    WIN = "You win!"
    LOSE = "Computer wins!"


_BEATS = {(1, 3), (2, 1), (3, 2)}


def rock_paper_scissors(user_choice: int, computer_choice: int) -> Outcome:
    """Decide a round; choices are 1 for rock, 2 for paper, 3 for scissors."""
    for choice in (user_choice, computer_choice):
        if not 1 <= choice <= 3:
            raise ValueError(f"invalid choice: {choice}")
    if user_choice == computer_choice:
        return Outcome.TIE
    if (user_choice, computer_choice) in _BEATS:
        return Outcome.WIN
    return Outcome.LOSE


def guessing_main(argv: Sequence[str] | None = None) -> int:
    """Play guess-the-number until the player stops."""
    parser = argparse.ArgumentParser(description="Guess a number between 1 and 100.")
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    try:
        while True:
            game = GuessingGame(rng=rng)
            print("Welcome to the Number Guessing Game!")
            print("I have chosen a number between 1 and 100. Try to guess it!")
            while True:
                text = input("Enter your guess: ")
                try:
                    value = int(text.split()[0])
                except (ValueError, IndexError):
                    print("Please enter a whole number.")
                    continue
                result = game.guess(value)
                if result is GuessResult.CORRECT:
                    print(
                        f"Congratulations! You guessed the number {game.number} "
                        f"in {game.attempts} attempts."
                    )
                    break
                print(result.value)
            answer = input("Do you want to play again? (y/n): ").strip()
            if answer[:1] not in ("y", "Y"):
                break
    except EOFError:
        pass
    print("Thanks for playing! Goodbye!")
    return 0


def rps_main(argv: Sequence[str] | None = None) -> int:
    """Play one round of rock-paper-scissors against the computer."""
    parser = argparse.ArgumentParser(description="Rock-paper-scissors.")
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    print("Welcome to Rock-Paper-Scissors!")
    print("1: Rock, 2: Paper, 3: Scissors")
    try:
        user_choice = int(input("Enter your choice: ").split()[0])
    except (ValueError, IndexError, EOFError):
        user_choice = 0
    if not 1 <= user_choice <= 3:
        print("Invalid choice!")
        return 0

    computer_choice = rng.randint(1, 3)
    print(f"You chose: {CHOICES[user_choice - 1]}")
    print(f"Computer chose: {CHOICES[computer_choice - 1]}")
    print(rock_paper_scissors(user_choice, computer_choice).value)
    return 0