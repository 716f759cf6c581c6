import pytest

from jumble.dictionary import WordStore
from jumble.subwords import SubwordGenerator

from conftest import is_subsequence

YELLOW_WORDS = [
    "low", "lowly", "lye", "ole", "owe", "owl", "well", "welly",
    "woe", "yell", "yeow", "yew", "yowl", "yellow",
]


def test_word_equal_to_min_length_yields_itself() -> None:
    assert SubwordGenerator().generate("cat", 3) == {"cat"}


def test_combinations_keep_letter_order() -> None:
    assert SubwordGenerator().generate("cats", 3) == {"cat", "cas", "cts", "ats", "cats"}


@pytest.mark.parametrize("word,min_length", [("ab", 3), (None, 3), ("", 3), ("   ", 3), ("cats", 0)])
def test_degenerate_input_is_empty(word, min_length) -> None:
    assert SubwordGenerator().generate(word, min_length) == set()


def test_repeated_letters_are_deduplicated() -> None:
    assert SubwordGenerator().generate("aab", 2) == {"aa", "ab", "aab"}


def test_results_are_subsequences_within_length_range() -> None:
    result = SubwordGenerator().generate("planet", 3)
    assert "planet" in result
    assert "pet" in result
    assert "tep" not in result
    for s in result:
        assert 3 <= len(s) <= 6
        assert is_subsequence(s, "planet")


def test_anagram_mode_includes_reorderings() -> None:
    result = SubwordGenerator().generate("cat", 3, anagrams=True)
    assert result == {"cat", "cta", "act", "atc", "tac", "tca"}


def test_dictionary_only_filters_against_store() -> None:
    store = WordStore.from_lines(YELLOW_WORDS + ["cat", "lay"])
    generator = SubwordGenerator(store)

    assert generator.generate("yellow", 3, dictionary_only=True, anagrams=True) == set(YELLOW_WORDS)
    # without reordering only in-order picks survive
    assert generator.generate("yellow", 3, dictionary_only=True) == {"low", "yell", "yeow", "yew", "yellow"}


def test_dictionary_only_needs_a_store() -> None:
    with pytest.raises(ValueError):
        SubwordGenerator().generate("cats", 3, dictionary_only=True)


def test_seed_longer_than_bound_is_refused() -> None:
    generator = SubwordGenerator(max_seed_length=5, max_anagram_seed_length=4)
    assert generator.generate("abcdef", 3) == set()
    assert generator.generate("abcde", 3, anagrams=True) == set()
    assert generator.generate("abcde", 5) == {"abcde"}
