from __future__ import annotations


class JumbleError(Exception):
    """Base class for engine errors."""


class ResourceError(JumbleError):
    """The dictionary source is missing or unreadable."""


class InvalidArgument(JumbleError, ValueError):
    """Bad length/minLength combination for a game state."""


class NoWordFound(JumbleError, LookupError):
    """No dictionary entry satisfies a length constraint."""

    def __init__(self, length: int):
        super().__init__(f"No word of length {length} in dictionary")
        self.length = length
