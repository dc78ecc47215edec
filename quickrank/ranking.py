"""Public entry point: turn a catalog snapshot plus query into an ordered list."""

from __future__ import annotations

import math
from typing import List, Sequence

from loguru import logger

from .config import Item
from .context import RankingContext
from .matchers import run_matchers
from .segment import to_searchables


def _sort_by_history(items: Sequence[Item], context: RankingContext) -> List[Item]:
    positions = context.history_positions()

    def key(it: Item):
        return (positions.get(it.id, math.inf), it.name.lower())

    return sorted(items, key=key)


def filter_and_sort(items: Sequence[Item], query: str, context: RankingContext) -> List[Item]:
    """
    Empty query: every item, recently selected first, then by name.
    Otherwise: only items matched by the learned or fuzzy matcher, in
    pipeline order.  ``context`` is read, never written.
    """
    q = query.lower()
    if q == "":
        return _sort_by_history(items, context)

    entries = to_searchables(items)
    matched = run_matchers(entries, q, context)
    logger.debug("Query {!r}: {} of {} items matched", q, len(matched), len(entries))
    return [e.item for e in matched]
