"""Dictionary queries: palindromes, membership, prefix and range search.

Every query treats malformed input as "no results" and returns an empty
list instead of raising.
"""

from __future__ import annotations

import re
from typing import List, Optional

from .dictionary import WordStore

LETTERS_PATTERN = re.compile(r"^[a-zA-Z]+$")


def is_valid_char(ch: Optional[str]) -> bool:
    """True for a single letter a-z, case-insensitive."""
    return isinstance(ch, str) and len(ch) == 1 and "a" <= ch.lower() <= "z"


def is_palindrome(word: str) -> bool:
    return len(word) >= 2 and word == word[::-1]


def palindromes(store: WordStore) -> List[str]:
    return [w for w in store.all_words() if is_palindrome(w)]


def exists(store: WordStore, word: Optional[str]) -> bool:
    return store.contains(word)


def words_with_prefix(store: WordStore, prefix: Optional[str]) -> List[str]:
    if not prefix or not LETTERS_PATTERN.match(prefix):
        return []
    return list(store.words_with_prefix(prefix))


def search(
    store: WordStore,
    start_char: Optional[str] = None,
    end_char: Optional[str] = None,
    length: Optional[int] = None,
) -> List[str]:
    """Words matching every supplied criterion.

    ``start_char`` and ``end_char`` must be single letters, ``length`` a
    positive int. With nothing supplied, or any supplied value invalid, the
    result is empty.
    """
    if start_char is None and end_char is None and length is None:
        return []
    if start_char is not None and not is_valid_char(start_char):
        return []
    if end_char is not None and not is_valid_char(end_char):
        return []
    if length is not None and (isinstance(length, bool) or not isinstance(length, int) or length < 1):
        return []

    # scan the smallest bucket any criterion selects
    buckets = []
    if start_char is not None:
        buckets.append(store.words_starting_with(start_char))
    if end_char is not None:
        buckets.append(store.words_ending_with(end_char))
    if length is not None:
        buckets.append(store.words_of_length(length))
    candidates = min(buckets, key=len)

    start = start_char.lower() if start_char is not None else None
    end = end_char.lower() if end_char is not None else None
    out = []
    for w in candidates:
        lw = w.lower()
        if start is not None and lw[0] != start:
            continue
        if end is not None and lw[-1] != end:
            continue
        if length is not None and len(w) != length:
            continue
        out.append(w)
    return out
