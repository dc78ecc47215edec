from __future__ import annotations

"""
Mutable ranking state owned by the host.

A :class:`RankingContext` holds two things:

* ``learned`` - lowercased query -> {item id -> count}, each count a
  saturating counter in ``[0, MAX_COUNT]``;
* ``history`` - item ids, most recently selected first, at most
  ``MAX_HISTORY_SIZE`` long and without duplicates.

Only :func:`record_selection` mutates a context; ranking only reads it.
Nothing here is synchronised.  A host that ranks and records from several
threads must serialise those calls itself (see ``store.CatalogStore``).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from loguru import logger

from .config import MAX_COUNT, MAX_HISTORY_SIZE


@dataclass
class RankingContext:
    learned: Dict[str, Dict[str, int]] = field(default_factory=dict)
    history: List[str] = field(default_factory=list)

    def history_positions(self) -> Dict[str, int]:
        return {item_id: i for i, item_id in enumerate(self.history)}

    def clear(self) -> None:
        self.learned.clear()
        self.history.clear()

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible snapshot; the host picks the storage format."""
        return {
            "learned": {q: dict(counts) for q, counts in self.learned.items()},
            "history": list(self.history),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RankingContext":
        """
        Rebuild a context from :meth:`to_dict` output.

        Restored data is clamped back into shape: counts into
        ``[0, MAX_COUNT]``, history de-duplicated (first occurrence wins)
        and cut to ``MAX_HISTORY_SIZE``.
        """
        learned: Dict[str, Dict[str, int]] = {}
        for q, counts in dict(data.get("learned") or {}).items():
            learned[str(q).lower()] = {
                str(item_id): max(0, min(MAX_COUNT, int(c))) for item_id, c in dict(counts).items()
            }

        history: List[str] = []
        seen = set()
        for item_id in data.get("history") or []:
            item_id = str(item_id)
            if item_id in seen:
                continue
            seen.add(item_id)
            history.append(item_id)
            if len(history) >= MAX_HISTORY_SIZE:
                break

        return cls(learned=learned, history=history)


def create_ranking_context() -> RankingContext:
    return RankingContext()


def current_winner(counts: Mapping[str, int]) -> Tuple[Optional[str], int]:
    """
    Id with the strictly highest positive count, or ``(None, 0)``.
    On ties the first id in insertion order wins.
    """
    winner_id: Optional[str] = None
    winner_count = 0
    for item_id, count in counts.items():
        if count > winner_count:
            winner_id = item_id
            winner_count = count
    return winner_id, winner_count


def _push_history(history: List[str], item_id: str) -> List[str]:
    return ([item_id] + [h for h in history if h != item_id])[:MAX_HISTORY_SIZE]


def record_selection(context: RankingContext, query: str, item_id: str) -> None:
    """
    Register that the user activated ``item_id`` while ``query`` was typed.

    The item moves to the front of the history.  For a non-empty query the
    selected item's count goes up by one (capped) and, if a different item
    was the current winner for that query, the winner loses one (floored).
    """
    context.history[:] = _push_history(context.history, item_id)

    if not query:
        return

    q = query.lower()
    counts = context.learned.get(q, {})

    winner_id, winner_count = current_winner(counts)
    if winner_id is not None and winner_id != item_id:
        counts[winner_id] = max(0, winner_count - 1)

    counts[item_id] = min(MAX_COUNT, counts.get(item_id, 0) + 1)
    context.learned[q] = counts

    logger.debug(
        "Recorded selection {} for {!r} (count={}, prev winner={})",
        item_id,
        q,
        counts[item_id],
        winner_id,
    )
