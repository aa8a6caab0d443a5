from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Iterable, Protocol

import httpx

from howdoyouspell.config import SUPPLEMENTARY_WORDS_PATH

logger = logging.getLogger(__name__)

FALLBACK_WORDS = frozenset({"the", "and", "for", "are", "but", "not", "you", "all"})


class WordSource(Protocol):
    def fetch(self) -> Iterable[str]:
        ...


class HttpWordSource:
    """Newline-delimited word list served over HTTP."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.transport = transport

    def fetch(self) -> list[str]:
        with httpx.Client(timeout=self.timeout, transport=self.transport, follow_redirects=True) as client:
            resp = client.get(self.url)
            resp.raise_for_status()
        content_type = resp.headers.get("content-type", "")
        if content_type and not content_type.lower().startswith("text/"):
            raise ValueError(f"word list is not text: {content_type}")
        return resp.text.splitlines()


class StaticWordSource:
    def __init__(self, words: Iterable[str]) -> None:
        self.words = list(words)

    def fetch(self) -> list[str]:
        return list(self.words)


class DictionaryProvider:
    """Owns the process-wide set of correctly spelled words.

    The baseline list is fetched from `source` on the first `load()` call and
    merged with the supplementary words. Concurrent first callers share a
    single population; every caller sees the same frozenset afterwards.
    If the fetch fails the baseline is replaced by FALLBACK_WORDS for the rest
    of the process lifetime. There is no retry.

    `excluded` words are removed after merging so that a known misspelling can
    never be reported as correctly spelled.
    """

    def __init__(
        self,
        source: WordSource,
        *,
        supplementary: Iterable[str] = (),
        excluded: Iterable[str] = (),
    ) -> None:
        self.source = source
        self.supplementary = _normalize_words(supplementary)
        self.excluded = _normalize_words(excluded)
        self._lock = threading.Lock()
        self._words: frozenset[str] | None = None
        self._used_fallback = False
        self._baseline_size = 0

    @property
    def loaded(self) -> bool:
        return self._words is not None

    @property
    def used_fallback(self) -> bool:
        return self._used_fallback

    def load(self) -> frozenset[str]:
        words = self._words
        if words is not None:
            return words
        with self._lock:
            if self._words is None:
                self._words = self._populate()
            return self._words

    def status(self) -> dict[str, Any]:
        return {
            "loaded": self.loaded,
            "size": len(self._words) if self._words is not None else 0,
            "baseline_size": self._baseline_size,
            "used_fallback": self._used_fallback,
        }

    def _populate(self) -> frozenset[str]:
        try:
            baseline = _normalize_words(self.source.fetch())
        except Exception as exc:
            logger.warning("word list fetch failed, using fallback dictionary: %s", exc)
            baseline = set(FALLBACK_WORDS)
            self._used_fallback = True
        self._baseline_size = len(baseline)
        words = (baseline | self.supplementary) - self.excluded
        logger.info(
            "dictionary ready: %d words (baseline=%d, fallback=%s)",
            len(words),
            self._baseline_size,
            self._used_fallback,
        )
        return frozenset(words)


def load_supplementary_words(path: Path = SUPPLEMENTARY_WORDS_PATH) -> list[str]:
    words = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(words, list):
        raise ValueError(f"{path.name} must hold a list of words")
    return sorted(_normalize_words(words))


def _normalize_words(words: Iterable[Any]) -> set[str]:
    return {token for token in (str(w).strip().lower() for w in words) if token}
