from __future__ import annotations

import random
from typing import Optional


def can_scramble(word: str) -> bool:
    """True when at least one ordering of ``word`` differs from it."""
    return len(set(word)) > 1


class Scrambler:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def scramble(self, word: str) -> str:
        """Return a random permutation of ``word`` that differs from it.

        Words of one letter, or made of a single repeated letter, have no
        differing permutation and are returned unchanged.
        """
        if not can_scramble(word):
            return word
        letters = list(word)
        while True:
            self.rng.shuffle(letters)
            out = "".join(letters)
            if out != word:
                return out
