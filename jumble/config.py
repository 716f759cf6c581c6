"""Configuration helpers for the jumble engine."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_WORDS_PATH = Path(__file__).parent / "data" / "words.txt"
DEFAULT_MIN_SUBWORD_LENGTH = 3
DEFAULT_MAX_SEED_LENGTH = 20
DEFAULT_MAX_ANAGRAM_SEED_LENGTH = 9


@dataclass(slots=True)
class Settings:
    """Runtime settings with environment overrides."""

    words_path: Path = DEFAULT_WORDS_PATH
    min_subword_length: int = DEFAULT_MIN_SUBWORD_LENGTH
    max_seed_length: int = DEFAULT_MAX_SEED_LENGTH
    max_anagram_seed_length: int = DEFAULT_MAX_ANAGRAM_SEED_LENGTH
    random_seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "Settings":
        """Construct settings from environment variables when available."""

        seed = os.environ.get("JUMBLE_RANDOM_SEED", "").strip()
        return cls(
            words_path=Path(
                os.environ.get("JUMBLE_WORDS_PATH", DEFAULT_WORDS_PATH.as_posix())
            ),
            min_subword_length=int(
                os.environ.get("JUMBLE_MIN_SUBWORD_LENGTH", str(DEFAULT_MIN_SUBWORD_LENGTH))
            ),
            max_seed_length=int(
                os.environ.get("JUMBLE_MAX_SEED_LENGTH", str(DEFAULT_MAX_SEED_LENGTH))
            ),
            max_anagram_seed_length=int(
                os.environ.get(
                    "JUMBLE_MAX_ANAGRAM_SEED_LENGTH", str(DEFAULT_MAX_ANAGRAM_SEED_LENGTH)
                )
            ),
            random_seed=int(seed) if seed else None,
            log_level=os.environ.get("JUMBLE_LOG_LEVEL", "INFO").upper(),
        )


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once per process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


__all__ = ["Settings", "setup_logging", "DEFAULT_WORDS_PATH"]
