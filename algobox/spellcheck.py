"""Spell checking by exact, case-insensitive and vowel-insensitive matching."""

from __future__ import annotations

from collections.abc import Iterable

_VOWELS = frozenset("aeiou")


def devowel(word: str) -> str:
    """Lower-case the word and replace every vowel with ``*``."""
    return "".join("*" if char in _VOWELS else char for char in word.lower())


def spellcheck(wordlist: Iterable[str], queries: Iterable[str]) -> list[str]:
    """Correct each query against the word list.

    An exact match wins; otherwise the first word matching ignoring case;
    otherwise the first word matching ignoring case and vowels; otherwise "".
    """
    words = list(wordlist)
    exact = set(words)
    by_lower: dict[str, str] = {}
    by_vowels: dict[str, str] = {}
    for word in words:
        by_lower.setdefault(word.lower(), word)
        by_vowels.setdefault(devowel(word), word)

    def correct(query: str) -> str:
        if query in exact:
            return query
        match = by_lower.get(query.lower())
        if match is not None:
            return match
        return by_vowels.get(devowel(query), "")

    return [correct(query) for query in queries]