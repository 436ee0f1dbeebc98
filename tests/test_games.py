import random

import pytest

from algobox.games import (
    GuessingGame,
    GuessResult,
    Outcome,
    guessing_main,
    rock_paper_scissors,
    rps_main,
)


def test_guess_results_and_attempts():
    game = GuessingGame(number=50)
    assert game.guess(30) is GuessResult.TOO_LOW
    assert game.guess(70) is GuessResult.TOO_HIGH
    assert game.guess(50) is GuessResult.CORRECT
    assert game.attempts == 3


@pytest.mark.parametrize("seed", range(20))
def test_random_number_in_range(seed):
    game = GuessingGame(rng=random.Random(seed))
    assert 1 <= game.number <= 100


def test_same_seed_same_number():
    first = GuessingGame(rng=random.Random(7))
    second = GuessingGame(rng=random.Random(7))
    assert first.number == second.number


@pytest.mark.parametrize("choice", [1, 2, 3])
def test_same_choice_ties(choice):
    assert rock_paper_scissors(choice, choice) is Outcome.TIE


@pytest.mark.parametrize("user, computer", [(1, 3), (2, 1), (3, 2)])
def test_user_wins(user, computer):
    assert rock_paper_scissors(user, computer) is Outcome.WIN
    assert rock_paper_scissors(computer, user) is Outcome.LOSE


@pytest.mark.parametrize("user, computer", [(0, 1), (4, 2), (1, 5)])
def test_invalid_choice(user, computer):
    with pytest.raises(ValueError):
        rock_paper_scissors(user, computer)


def test_rps_main_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "4")
    assert rps_main([]) == 0
    assert "Invalid choice!" in capsys.readouterr().out


def test_rps_main_plays_a_round(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "1")
    assert rps_main(["--seed", "5"]) == 0
    out = capsys.readouterr().out
    assert "You chose: Rock" in out
    assert any(outcome.value in out for outcome in Outcome)


def test_guessing_main_finds_number(monkeypatch, capsys):
    answers = iter([str(n) for n in range(1, 101)] + ["n"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert guessing_main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Congratulations!" in out
    assert "Thanks for playing! Goodbye!" in out