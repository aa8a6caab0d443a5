from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parent
DATA_DIR = PACKAGE_DIR / "data"
SUPPLEMENTARY_WORDS_PATH = DATA_DIR / "supplementary_words.json"
MISSPELLINGS_PATH = DATA_DIR / "misspellings.json"
DIALECTS_PATH = DATA_DIR / "dialects.json"

WORD_LIST_URL = (
    "https://raw.githubusercontent.com/first20hours/google-10000-english/"
    "master/google-10000-english-usa-no-swears.txt"
)
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class EngineSettings:
    word_list_url: str = WORD_LIST_URL
    fetch_timeout_sec: float = 10.0
    fuzzy_length_window: int = 3
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "EngineSettings":
        url = os.getenv("HOWDOYOUSPELL_WORD_LIST_URL", "").strip() or WORD_LIST_URL
        timeout = max(1.0, float(os.getenv("HOWDOYOUSPELL_FETCH_TIMEOUT_SEC", "10")))
        window = max(0, int(os.getenv("HOWDOYOUSPELL_FUZZY_LENGTH_WINDOW", "3")))
        level = os.getenv("HOWDOYOUSPELL_LOG_LEVEL", "INFO").strip().upper() or "INFO"
        return cls(
            word_list_url=url,
            fetch_timeout_sec=timeout,
            fuzzy_length_window=window,
            log_level=level,
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
