from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable, Mapping

from howdoyouspell.config import DIALECTS_PATH


@dataclass(frozen=True)
class DialectSet:
    us: str
    uk: str
    au: str
    nz: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


class DialectTable:
    """Bidirectional US <-> UK/AU/NZ spelling table.

    Either spelling of a pair maps to the same DialectSet, so looking up
    "color" or "colour" returns identical regional information.
    """

    def __init__(self, entries: Mapping[str, DialectSet]) -> None:
        self._entries = dict(entries)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Mapping[str, str]]) -> "DialectTable":
        entries: dict[str, DialectSet] = {}
        for pair in pairs:
            us = str(pair.get("us") or "").strip().lower()
            uk = str(pair.get("uk") or "").strip().lower()
            if not us or not uk:
                raise ValueError(f"dialect entry needs both us and uk forms: {pair!r}")
            # AU and NZ always follow the UK convention.
            variants = DialectSet(us=us, uk=uk, au=uk, nz=uk)
            entries[us] = variants
            entries[uk] = variants
        return cls(entries)

    def lookup(self, word: str) -> DialectSet | None:
        return self._entries.get(word.lower())

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def load_dialect_table(path: Path = DIALECTS_PATH) -> DialectTable:
    pairs = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(pairs, list):
        raise ValueError(f"{path.name} must hold a list of {{us, uk}} pairs")
    return DialectTable.from_pairs(pairs)
