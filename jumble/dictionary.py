from __future__ import annotations

import logging
from collections import defaultdict
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, Optional, Tuple, Union

from .config import Settings
from .errors import ResourceError

logger = logging.getLogger(__name__)

# Word list service backing every engine query.
# Loaded once, never mutated, so concurrent readers need no locking.


class WordStore:
    def __init__(self, words: Iterable[str]):
        kept = []
        for line in words:
            w = line.strip()
            if w:
                kept.append(w)
        self._words: Tuple[str, ...] = tuple(kept)
        self._lower: FrozenSet[str] = frozenset(w.lower() for w in kept)

        by_length: Dict[int, list] = defaultdict(list)
        by_first: Dict[str, list] = defaultdict(list)
        by_last: Dict[str, list] = defaultdict(list)
        for w in kept:
            lw = w.lower()
            by_length[len(w)].append(w)
            by_first[lw[0]].append(w)
            by_last[lw[-1]].append(w)
        self._by_length: Dict[int, Tuple[str, ...]] = {k: tuple(v) for k, v in by_length.items()}
        self._by_first: Dict[str, Tuple[str, ...]] = {k: tuple(v) for k, v in by_first.items()}
        self._by_last: Dict[str, Tuple[str, ...]] = {k: tuple(v) for k, v in by_last.items()}

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "WordStore":
        return cls(lines)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def all_words(self) -> Tuple[str, ...]:
        return self._words

    def contains(self, word: Optional[str]) -> bool:
        if not word or not word.strip():
            return False
        return word.strip().lower() in self._lower

    def words_of_length(self, n: int) -> Tuple[str, ...]:
        return self._by_length.get(n, ())

    def words_starting_with(self, ch: str) -> Tuple[str, ...]:
        return self._by_first.get(ch.lower(), ())

    def words_ending_with(self, ch: str) -> Tuple[str, ...]:
        return self._by_last.get(ch.lower(), ())

    def words_with_prefix(self, prefix: str) -> Tuple[str, ...]:
        p = prefix.lower()
        if not p:
            return self._words
        # first-letter bucket narrows the scan
        return tuple(w for w in self._by_first.get(p[0], ()) if w.lower().startswith(p))


def load(source: Union[str, Path]) -> WordStore:
    """Read a line-delimited UTF-8 word list into a WordStore.

    Raises ResourceError when the file is absent, unreadable or not UTF-8.
    """
    path = Path(source)
    try:
        with path.open("r", encoding="utf-8") as handle:
            store = WordStore(handle)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed loading word list from %s: %s", path, exc)
        raise ResourceError(f"Cannot read word list {path}: {exc}") from exc
    logger.info("Loaded %s words from %s", len(store), path)
    return store


@lru_cache(maxsize=1)
def get_store() -> WordStore:
    """Process-wide dictionary, loaded on first use."""
    return load(Settings.load().words_path)
