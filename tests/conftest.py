import random

import pytest

from jumble.dictionary import WordStore
from jumble.engine import JumbleEngine

WORDS = [
    "a",
    "apple",
    "Angel",
    "alarm",
    "arrow",
    "amber",
    "ant",
    "deed",
    "eye",
    "cat",
    "cats",
    "camel",
    "castle",
    "Listen",
    "silent",
    "enlist",
    "prefix",
    "prepare",
    "present",
    "pretty",
    "press",
    "level",
    "noon",
    "Anna",
    "yellow",
    "planet",
    "tiger",
]


@pytest.fixture
def store() -> WordStore:
    return WordStore.from_lines(WORDS)


@pytest.fixture
def engine(store: WordStore) -> JumbleEngine:
    return JumbleEngine(store, rng=random.Random(7))


def is_subsequence(small: str, big: str) -> bool:
    it = iter(big)
    return all(ch in it for ch in small)
