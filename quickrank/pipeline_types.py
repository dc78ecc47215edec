"""Typed containers shared across ranking modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .config import Item


@dataclass(frozen=True)
class SearchableEntry:
    """Per-query view of a catalog item, rebuilt on every evaluation."""

    id: str
    name: str
    segments: Tuple[str, ...]
    normalized: str
    item: Item


@dataclass(frozen=True)
class FuzzyMatch:
    """Outcome of a successful segment/gap match; lower is better everywhere."""

    start_segment: int
    char_span: int
    gap_count: int


@dataclass(frozen=True)
class ScoredEntry:
    entry: SearchableEntry
    match: FuzzyMatch

    def sort_key(self) -> Tuple[int, int, int, str]:
        return (
            self.match.start_segment,
            self.match.char_span,
            self.match.gap_count,
            self.entry.name.lower(),
        )
