from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import howdoyouspell.app as app_module
from howdoyouspell.config import EngineSettings
from howdoyouspell.lexicon.dictionary import StaticWordSource
from howdoyouspell.pipeline.corrections import build_corrector

BASELINE_WORDS = [
    "the", "and", "for", "are", "but", "not", "you", "all",
    "receive", "believe", "friend", "spelling", "check", "word",
    "water", "house", "happy", "garden", "window", "morning",
]


@pytest.fixture()
def corrector():
    return build_corrector(EngineSettings(), source=StaticWordSource(BASELINE_WORDS))


@pytest.fixture()
def client(corrector, monkeypatch):
    monkeypatch.setattr(app_module, "corrector", corrector)
    with TestClient(app_module.app) as c:
        yield c
