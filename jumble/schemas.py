from __future__ import annotations
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GameState(BaseModel):
    # original and scrambled are fixed at creation; only the discovered flags change
    original: str = Field(frozen=True)
    scrambled: str = Field(frozen=True)
    subWords: Dict[str, bool] = {}

    model_config = ConfigDict(validate_assignment=True)

    def discover(self, word: str) -> bool:
        """Flag ``word`` as discovered. Returns False if it is not a sub-word."""
        if word not in self.subWords:
            return False
        self.subWords[word] = True
        return True

    @property
    def remaining(self) -> int:
        return sum(1 for found in self.subWords.values() if not found)


class _Request(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class ScrambleRequest(_Request):
    word: str = Field(..., min_length=3, max_length=30)


class ScrambleResponse(BaseModel):
    word: str
    scramble: str


class WordsResponse(BaseModel):
    words: List[str] = []


class ExistsRequest(_Request):
    word: str = Field(..., min_length=1)


class ExistsResponse(BaseModel):
    word: str
    exists: bool


class PrefixRequest(_Request):
    prefix: str = Field(..., min_length=1)


class PrefixResponse(BaseModel):
    prefix: str
    words: List[str] = []


class SearchRequest(_Request):
    startChar: Optional[str] = Field(None, min_length=1, max_length=1)
    endChar: Optional[str] = Field(None, min_length=1, max_length=1)
    length: Optional[int] = Field(None, ge=1)


class SearchResponse(SearchRequest):
    words: List[str] = []


class SubWordsRequest(_Request):
    word: str = Field(..., min_length=1, max_length=30)
    minLength: Optional[int] = Field(None, ge=1)
    dictionaryOnly: bool = False
    anagrams: bool = False


class SubWordsResponse(BaseModel):
    word: str
    minLength: int
    words: List[str] = []


class RandomWordResponse(BaseModel):
    word: str


class GameRequest(BaseModel):
    length: int
    minLength: Optional[int] = None


class ServiceInfo(BaseModel):
    service: str
    version: str
    timeNow: datetime
    words: int
