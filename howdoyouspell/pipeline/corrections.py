from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from howdoyouspell.config import EngineSettings
from howdoyouspell.lexicon.dialects import DialectSet, DialectTable, load_dialect_table
from howdoyouspell.lexicon.dictionary import (
    DictionaryProvider,
    HttpWordSource,
    WordSource,
    load_supplementary_words,
)
from howdoyouspell.lexicon.misspellings import MisspellingTable, load_misspelling_table
from howdoyouspell.pipeline.distance import levenshtein


class Confidence(str, Enum):
    EXACT = "exact"
    CLOSE = "close"
    GUESS = "guess"
    NONE = "none"


class EmptyWordError(ValueError):
    def __init__(self) -> None:
        super().__init__("No word provided")


@dataclass(frozen=True)
class CorrectionResult:
    word: str
    confidence: Confidence
    dialects: DialectSet | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "confidence": self.confidence.value,
            "dialects": self.dialects.as_dict() if self.dialects else None,
        }


NO_MATCH = CorrectionResult(word="", confidence=Confidence.NONE, dialects=None)


def normalize_word(raw: str | None) -> str:
    return (raw or "").strip().lower()


def max_distance_for(length: int) -> int:
    return max(2, math.floor(length * 0.4))


class SpellingCorrector:
    """Three-tier resolver: dictionary, known misspellings, then edit distance."""

    def __init__(
        self,
        provider: DictionaryProvider,
        misspellings: MisspellingTable,
        dialects: DialectTable,
        *,
        length_window: int = 3,
    ) -> None:
        self.provider = provider
        self.misspellings = misspellings
        self.dialects = dialects
        self.length_window = length_window

    def resolve(self, raw: str | None) -> CorrectionResult:
        word = normalize_word(raw)
        if not word:
            raise EmptyWordError()

        dictionary = self.provider.load()
        if word in dictionary:
            return CorrectionResult(word=word, confidence=Confidence.EXACT, dialects=self.dialects.lookup(word))

        corrected = self.misspellings.lookup(word)
        if corrected is not None:
            return CorrectionResult(
                word=corrected,
                confidence=Confidence.CLOSE,
                dialects=self.dialects.lookup(corrected),
            )

        limit = max_distance_for(len(word))
        best_word, best_distance = self.closest(word, limit=limit)
        if best_word is None:
            return NO_MATCH
        confidence = Confidence.CLOSE if best_distance <= 1 else Confidence.GUESS
        return CorrectionResult(word=best_word, confidence=confidence, dialects=self.dialects.lookup(best_word))

    def closest(self, word: str, *, limit: int | None = None) -> tuple[str | None, int | None]:
        """Nearest known word by edit distance; ties go to the alphabetically first.

        Only candidates within `length_window` characters of `word` are scanned.
        With `limit`, candidates further away than it are ignored.
        """
        min_len = max(1, len(word) - self.length_window)
        max_len = len(word) + self.length_window
        dictionary = self.provider.load()
        extra = [key for key in self.dialects.keys() if key not in dictionary]

        best_word: str | None = None
        best_distance = limit if limit is not None else math.inf
        for candidate in itertools.chain(dictionary, extra):
            if not min_len <= len(candidate) <= max_len:
                continue
            cutoff = None if best_distance == math.inf else int(best_distance)
            distance = levenshtein(word, candidate, cutoff=cutoff)
            if distance < best_distance or (
                distance == best_distance and (best_word is None or candidate < best_word)
            ):
                best_word = candidate
                best_distance = distance
        if best_word is None:
            return None, None
        return best_word, int(best_distance)

    def describe(self, raw: str | None) -> dict[str, Any]:
        query = normalize_word(raw)
        result = self.resolve(query)
        return {
            "query": query,
            **result.to_dict(),
            "misspellings": self.misspellings.misspellings_for(result.word) if result.word else [],
        }


def build_corrector(settings: EngineSettings, *, source: WordSource | None = None) -> SpellingCorrector:
    misspellings = load_misspelling_table()
    dialects = load_dialect_table()
    supplementary = set(load_supplementary_words())
    # Every correction target must itself resolve as exact.
    supplementary.update(misspellings.targets())
    supplementary.update(dialects.keys())
    provider = DictionaryProvider(
        source or HttpWordSource(settings.word_list_url, timeout=settings.fetch_timeout_sec),
        supplementary=supplementary,
        excluded=misspellings.keys(),
    )
    return SpellingCorrector(
        provider,
        misspellings,
        dialects,
        length_window=settings.fuzzy_length_window,
    )
