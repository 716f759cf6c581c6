"""Sub-word enumeration over a seed word's letters.

For a seed of length n there are up to 2**n position subsets, and in
anagram mode up to sum(n!/(n-k)!) orderings, so seed length is capped
(see ``Settings.max_seed_length`` / ``max_anagram_seed_length``).
"""

from __future__ import annotations

import logging
from itertools import combinations, permutations
from typing import Optional, Set

from .config import DEFAULT_MAX_ANAGRAM_SEED_LENGTH, DEFAULT_MAX_SEED_LENGTH
from .dictionary import WordStore

logger = logging.getLogger(__name__)


class SubwordGenerator:
    def __init__(
        self,
        store: Optional[WordStore] = None,
        max_seed_length: int = DEFAULT_MAX_SEED_LENGTH,
        max_anagram_seed_length: int = DEFAULT_MAX_ANAGRAM_SEED_LENGTH,
    ):
        self.store = store
        self.max_seed_length = max_seed_length
        self.max_anagram_seed_length = max_anagram_seed_length

    def generate(
        self,
        word: Optional[str],
        min_length: int = 3,
        dictionary_only: bool = False,
        anagrams: bool = False,
    ) -> Set[str]:
        """All distinct letter combinations of ``word`` with length >= min_length.

        Combinations keep the seed's letter order ("cats" gives "cts" but not
        "tsc"). ``anagrams`` adds every ordering of each combination.
        ``dictionary_only`` keeps only strings present in the word store.
        """
        if not word or not word.strip() or min_length < 1:
            return set()
        word = word.strip()
        n = len(word)
        if n < min_length:
            return set()

        limit = self.max_anagram_seed_length if anagrams else self.max_seed_length
        if n > limit:
            logger.warning("Seed %r longer than %s letters, not enumerating sub-words", word, limit)
            return set()
        if dictionary_only and self.store is None:
            raise ValueError("dictionary_only requires a word store")

        result: Set[str] = set()
        for k in range(min_length, n + 1):
            seen: Set[str] = set()
            for combo in combinations(word, k):
                s = "".join(combo)
                # every ordering of the same letters yields the same anagrams
                key = "".join(sorted(s)) if anagrams else s
                if key in seen:
                    continue
                seen.add(key)
                if anagrams:
                    result.update("".join(p) for p in permutations(s))
                else:
                    result.add(s)

        if dictionary_only:
            result = {s for s in result if self.store.contains(s)}
        return result
