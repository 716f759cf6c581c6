from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import Settings, setup_logging
from .errors import InvalidArgument, NoWordFound, ResourceError
from .routers.words import router as words_router

settings = Settings.load()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Jumble", version=__version__)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(words_router)


# Engine errors -> HTTP status
@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    return JSONResponse(status_code=400, content={'detail': str(exc)})


@app.exception_handler(NoWordFound)
async def no_word_found_handler(request: Request, exc: NoWordFound):
    return JSONResponse(status_code=404, content={'detail': str(exc)})


@app.exception_handler(ResourceError)
async def resource_error_handler(request: Request, exc: ResourceError):
    logger.error('Dictionary unavailable: %s', exc)
    return JSONResponse(status_code=503, content={'detail': 'Dictionary unavailable'})


# For local running: uvicorn jumble.main:app --reload --host 0.0.0.0 --port 8000
