from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Sequence

from howdoyouspell.config import MISSPELLINGS_PATH


class MisspellingTable:
    """Known misspelling -> canonical spelling."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping = dict(mapping)
        self._by_target: dict[str, list[str]] = {}
        for wrong, right in self._mapping.items():
            self._by_target.setdefault(right, []).append(wrong)

    @classmethod
    def from_groups(cls, groups: Mapping[str, Sequence[str]]) -> "MisspellingTable":
        mapping: dict[str, str] = {}
        for correct, misspellings in groups.items():
            right = str(correct).strip().lower()
            if not right:
                raise ValueError("misspelling group has an empty correct word")
            for raw in misspellings:
                wrong = str(raw).strip().lower()
                if not wrong or wrong == right:
                    continue
                existing = mapping.get(wrong)
                if existing is not None and existing != right:
                    raise ValueError(f"misspelling {wrong!r} maps to both {existing!r} and {right!r}")
                mapping[wrong] = right
        return cls(mapping)

    def lookup(self, word: str) -> str | None:
        return self._mapping.get(word.lower())

    def misspellings_for(self, correct: str) -> list[str]:
        return list(self._by_target.get(correct.lower(), []))

    def keys(self) -> list[str]:
        return list(self._mapping)

    def targets(self) -> set[str]:
        return set(self._by_target)

    def items(self) -> list[tuple[str, str]]:
        return list(self._mapping.items())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)


def load_misspelling_table(path: Path = MISSPELLINGS_PATH) -> MisspellingTable:
    groups = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(groups, dict):
        raise ValueError(f"{path.name} must map each correct word to its misspellings")
    return MisspellingTable.from_groups(groups)
