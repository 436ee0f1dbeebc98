from algobox.spellcheck import devowel, spellcheck

WORDLIST = ["KiTe", "kite", "hare", "Hare"]
QUERIES = ["kite", "Kite", "KiTe", "Hare", "HARE", "Hear", "hear", "keti", "keet", "keto"]


def test_devowel():
    assert devowel("KiTe") == "k*t*"


def test_devowel_all_vowels():
    assert devowel("AEIOU") == "*****"


def test_example_queries():
    assert spellcheck(WORDLIST, QUERIES) == [
        "kite",
        "KiTe",
        "KiTe",
        "Hare",
        "hare",
        "",
        "",
        "KiTe",
        "",
        "KiTe",
    ]


def test_exact_words_return_themselves():
    assert spellcheck(WORDLIST, WORDLIST) == WORDLIST


def test_empty_wordlist_gives_no_matches():
    assert spellcheck([], QUERIES) == [""] * len(QUERIES)


def test_output_length_matches_queries():
    assert len(spellcheck(WORDLIST, ["x", "y"])) == 2