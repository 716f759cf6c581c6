from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from jumble import __version__
from jumble.engine import JumbleEngine, get_engine
from jumble.schemas import (
    ExistsRequest, ExistsResponse, GameRequest, GameState, PrefixRequest, PrefixResponse,
    RandomWordResponse, ScrambleRequest, ScrambleResponse, SearchRequest, SearchResponse,
    ServiceInfo, SubWordsRequest, SubWordsResponse, WordsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get('/', response_model=ServiceInfo)
async def index(engine: JumbleEngine = Depends(get_engine)):
    return ServiceInfo(
        service='jumble',
        version=__version__,
        timeNow=datetime.now(timezone.utc),
        words=len(engine.store),
    )


@router.post('/scramble', response_model=ScrambleResponse)
async def scramble(form: ScrambleRequest, engine: JumbleEngine = Depends(get_engine)):
    return ScrambleResponse(word=form.word, scramble=engine.scramble(form.word))


@router.get('/palindrome', response_model=WordsResponse)
async def palindrome(engine: JumbleEngine = Depends(get_engine)):
    return WordsResponse(words=engine.palindromes())


@router.post('/exists', response_model=ExistsResponse)
async def exists(form: ExistsRequest, engine: JumbleEngine = Depends(get_engine)):
    return ExistsResponse(word=form.word, exists=engine.exists(form.word))


@router.post('/prefix', response_model=PrefixResponse)
async def prefix(form: PrefixRequest, engine: JumbleEngine = Depends(get_engine)):
    return PrefixResponse(prefix=form.prefix, words=engine.words_with_prefix(form.prefix))


@router.post('/search', response_model=SearchResponse)
async def search(form: SearchRequest, engine: JumbleEngine = Depends(get_engine)):
    words = engine.search(form.startChar, form.endChar, form.length)
    return SearchResponse(**form.model_dump(), words=words)


@router.post('/subWords', response_model=SubWordsResponse)
async def sub_words(form: SubWordsRequest, engine: JumbleEngine = Depends(get_engine)):
    min_length = form.minLength or engine.settings.min_subword_length
    words = engine.subwords(
        form.word, min_length, dictionary_only=form.dictionaryOnly, anagrams=form.anagrams
    )
    return SubWordsResponse(word=form.word, minLength=min_length, words=sorted(words))


@router.get('/random', response_model=RandomWordResponse)
async def random_word(
    length: Optional[int] = Query(None, ge=1),
    engine: JumbleEngine = Depends(get_engine),
):
    word = engine.random_word(length)
    if word is None:
        raise HTTPException(status_code=404, detail=f'No word of length {length}')
    return RandomWordResponse(word=word)


@router.post('/game', response_model=GameState)
async def new_game(form: GameRequest, engine: JumbleEngine = Depends(get_engine)):
    state = engine.create_game_state(form.length, form.minLength)
    logger.info('Game created: length=%s subWords=%s', len(state.original), len(state.subWords))
    return state
