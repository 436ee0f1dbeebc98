"""String puzzles: anagram distance and palindrome checking."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Sequence


def min_steps_to_anagram(s: str, t: str) -> int:
    """Return how many characters of ``t`` must change to make it an anagram of ``s``."""
    if len(s) != len(t):
        raise ValueError("strings must have the same length")
    return sum((Counter(t) - Counter(s)).values())


def is_palindrome(text: str) -> bool:
    """Tell whether the text reads the same both ways, ignoring case."""
    return all(
        a.lower() == b.lower()
        for a, b in zip(text[: len(text) // 2], reversed(text))
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Report whether a word is a palindrome."""
    parser = argparse.ArgumentParser(description="Check whether a word is a palindrome.")
    parser.add_argument("word", nargs="?")
    args = parser.parse_args(argv)

    word = args.word
    if word is None:
        tokens = input("Enter a word to check if it's a palindrome: ").split()
        word = tokens[0] if tokens else ""

    if is_palindrome(word):
        print(f"'{word}' is a palindrome.")
    else:
        print(f"'{word}' is not a palindrome.")
    return 0