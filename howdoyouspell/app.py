from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from howdoyouspell.api.schemas import (
    DictionaryStatusResponse,
    ErrorResponse,
    SpellResponse,
    WordInfoResponse,
)
from howdoyouspell.config import EngineSettings, configure_logging
from howdoyouspell.pipeline.corrections import EmptyWordError, build_corrector

logger = logging.getLogger(__name__)

settings = EngineSettings.from_env()
corrector = build_corrector(settings)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging(settings.log_level)
    logger.info("spelling service starting, word list %s", settings.word_list_url)
    yield


app = FastAPI(title="How Do You Spell", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _no_word() -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "No word provided"})


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get(
    "/api/spell",
    response_model=SpellResponse,
    responses={400: {"model": ErrorResponse}},
)
def spell(word: str | None = Query(default=None)):
    if not (word or "").strip():
        return _no_word()
    try:
        result = corrector.resolve(word)
    except EmptyWordError:
        return _no_word()
    return result.to_dict()


@app.get(
    "/api/words/{word}",
    response_model=WordInfoResponse,
    responses={400: {"model": ErrorResponse}},
)
def word_info(word: str):
    try:
        return corrector.describe(word)
    except EmptyWordError:
        return _no_word()


@app.get("/api/dictionary/status", response_model=DictionaryStatusResponse)
def dictionary_status() -> dict:
    return corrector.provider.status()
