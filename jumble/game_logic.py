from __future__ import annotations
import logging
import random
from typing import Optional

from .dictionary import WordStore
from .errors import InvalidArgument, NoWordFound
from .schemas import GameState
from .scrambler import Scrambler
from .subwords import SubwordGenerator

logger = logging.getLogger(__name__)

MIN_GAME_WORD_LENGTH = 3


class GameStateFactory:
    def __init__(
        self,
        store: WordStore,
        scrambler: Scrambler,
        subwords: SubwordGenerator,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.scrambler = scrambler
        self.subwords = subwords
        self.rng = rng or random.Random()

    def pick_random_word(self, length: Optional[int] = None) -> Optional[str]:
        """Uniform pick over the dictionary, or over words of ``length``.

        Returns None when nothing qualifies.
        """
        pool = self.store.all_words() if length is None else self.store.words_of_length(length)
        if not pool:
            return None
        return self.rng.choice(pool)

    def create(self, length: Optional[int], min_length: Optional[int] = 3) -> GameState:
        if min_length is None:
            min_length = 3
        if length is None:
            raise InvalidArgument("length must not be None")
        if min_length <= 0:
            raise InvalidArgument(f"Invalid minLength=[{min_length}], expect positive integer")
        if length < MIN_GAME_WORD_LENGTH:
            raise InvalidArgument(
                f"Invalid length=[{length}], expect greater than or equal to {MIN_GAME_WORD_LENGTH}"
            )
        if min_length > length:
            raise InvalidArgument(f"Expect minLength=[{min_length}] not greater than length=[{length}]")

        original = self.pick_random_word(length)
        if original is None:
            raise NoWordFound(length)
        scrambled = self.scrambler.scramble(original)
        sub_words = {w: False for w in sorted(self.subwords.generate(original, min_length))}
        logger.debug("New game: %s letters, %s sub-words", length, len(sub_words))
        return GameState(original=original, scrambled=scrambled, subWords=sub_words)
