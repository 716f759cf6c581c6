"""Engine facade consumed by the HTTP layer and by library callers.

All inputs are plain strings/ints and all outputs plain lists, sets or the
``GameState`` record.
"""

from __future__ import annotations

import random
from functools import lru_cache
from typing import List, Optional, Set

from . import search as queries
from .config import Settings
from .dictionary import WordStore, get_store
from .game_logic import GameStateFactory
from .schemas import GameState
from .scrambler import Scrambler
from .subwords import SubwordGenerator


class JumbleEngine:
    def __init__(
        self,
        store: WordStore,
        rng: Optional[random.Random] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or Settings()
        self.store = store
        self.rng = rng or random.Random(self.settings.random_seed)
        self.scrambler = Scrambler(self.rng)
        self.subword_generator = SubwordGenerator(
            store,
            max_seed_length=self.settings.max_seed_length,
            max_anagram_seed_length=self.settings.max_anagram_seed_length,
        )
        self.games = GameStateFactory(store, self.scrambler, self.subword_generator, self.rng)

    def scramble(self, word: str) -> str:
        return self.scrambler.scramble(word)

    def palindromes(self) -> List[str]:
        return queries.palindromes(self.store)

    def exists(self, word: Optional[str]) -> bool:
        return queries.exists(self.store, word)

    def words_with_prefix(self, prefix: Optional[str]) -> List[str]:
        return queries.words_with_prefix(self.store, prefix)

    def search(
        self,
        start_char: Optional[str] = None,
        end_char: Optional[str] = None,
        length: Optional[int] = None,
    ) -> List[str]:
        return queries.search(self.store, start_char, end_char, length)

    def subwords(
        self,
        word: Optional[str],
        min_length: Optional[int] = None,
        dictionary_only: bool = False,
        anagrams: bool = False,
    ) -> Set[str]:
        if min_length is None:
            min_length = self.settings.min_subword_length
        return self.subword_generator.generate(
            word, min_length, dictionary_only=dictionary_only, anagrams=anagrams
        )

    def random_word(self, length: Optional[int] = None) -> Optional[str]:
        return self.games.pick_random_word(length)

    def create_game_state(self, length: Optional[int], min_length: Optional[int] = None) -> GameState:
        if min_length is None:
            min_length = self.settings.min_subword_length
        return self.games.create(length, min_length)


@lru_cache(maxsize=1)
def get_engine() -> JumbleEngine:
    """Process-wide engine over the configured dictionary."""
    return JumbleEngine(get_store(), settings=Settings.load())
