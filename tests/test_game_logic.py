import random

import pytest
from pydantic import ValidationError

from jumble.dictionary import WordStore
from jumble.engine import JumbleEngine
from jumble.errors import InvalidArgument, NoWordFound

from conftest import is_subsequence


def test_create_game_state(engine: JumbleEngine) -> None:
    state = engine.create_game_state(6, 3)

    assert len(state.original) == 6
    assert engine.exists(state.original)
    assert state.scrambled != state.original
    assert sorted(state.scrambled) == sorted(state.original)
    assert state.original in state.subWords
    assert state.subWords
    for word, discovered in state.subWords.items():
        assert 3 <= len(word) <= 6
        assert is_subsequence(word, state.original)
        assert discovered is False


def test_default_min_length_comes_from_settings(engine: JumbleEngine) -> None:
    state = engine.create_game_state(5)
    assert min(len(w) for w in state.subWords) == 3


@pytest.mark.parametrize("length,min_length", [(2, 3), (None, 3), (5, 0), (5, -1), (3, 4)])
def test_invalid_arguments(engine: JumbleEngine, length, min_length) -> None:
    with pytest.raises(InvalidArgument):
        engine.create_game_state(length, min_length)


def test_no_word_of_length(engine: JumbleEngine) -> None:
    with pytest.raises(NoWordFound) as excinfo:
        engine.create_game_state(12, 3)
    assert excinfo.value.length == 12


def test_same_seed_same_game(store: WordStore) -> None:
    first = JumbleEngine(store, rng=random.Random(99)).create_game_state(6, 4)
    second = JumbleEngine(store, rng=random.Random(99)).create_game_state(6, 4)
    assert first == second


def test_original_and_scrambled_are_frozen(engine: JumbleEngine) -> None:
    state = engine.create_game_state(5, 3)
    with pytest.raises(ValidationError):
        state.original = "other"
    with pytest.raises(ValidationError):
        state.scrambled = "other"


def test_discover_flags_only(engine: JumbleEngine) -> None:
    state = engine.create_game_state(6, 3)
    total = len(state.subWords)

    assert state.discover(state.original)
    assert state.subWords[state.original] is True
    assert state.remaining == total - 1
    assert not state.discover("zzz")


def test_random_word(engine: JumbleEngine) -> None:
    assert engine.random_word(5) in {"apple", "Angel", "alarm", "arrow", "amber", "camel", "level", "tiger", "press"}
    assert engine.random_word(42) is None
    assert engine.random_word() in engine.store.all_words()
