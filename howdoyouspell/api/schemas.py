from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class DialectSetModel(BaseModel):
    us: str
    uk: str
    au: str
    nz: str


class SpellResponse(BaseModel):
    word: str
    confidence: Literal["exact", "close", "guess", "none"]
    dialects: DialectSetModel | None = None


class WordInfoResponse(SpellResponse):
    query: str
    misspellings: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str


class DictionaryStatusResponse(BaseModel):
    loaded: bool
    size: int
    baseline_size: int
    used_fallback: bool
