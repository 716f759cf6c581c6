"""Dictionary-backed word puzzle engine."""

__version__ = "0.1.0"

from .dictionary import WordStore, get_store, load
from .engine import JumbleEngine, get_engine
from .errors import InvalidArgument, JumbleError, NoWordFound, ResourceError
from .schemas import GameState

__all__ = [
    "GameState",
    "InvalidArgument",
    "JumbleEngine",
    "JumbleError",
    "NoWordFound",
    "ResourceError",
    "WordStore",
    "get_engine",
    "get_store",
    "load",
]
