from __future__ import annotations

"""
Matcher pipeline.

Matchers run in a fixed priority order over a shared candidate pool.
Whatever a matcher returns is appended to the result and removed from the
pool before the next matcher runs, so an entry appears at most once.
Entries no matcher claims are dropped.
"""

from typing import Callable, List, Sequence

from loguru import logger

from .config import MIN_COUNT_FOR_BOOST
from .context import RankingContext, current_winner
from .fuzzy import match_unified
from .pipeline_types import SearchableEntry

Matcher = Callable[[Sequence[SearchableEntry], str, RankingContext], List[SearchableEntry]]


def match_learned(
    entries: Sequence[SearchableEntry], query: str, context: RankingContext
) -> List[SearchableEntry]:
    """
    The learned winner for ``query`` (lowercased) as a singleton, provided
    its count reached ``MIN_COUNT_FOR_BOOST`` and it is still in the pool.
    """
    counts = context.learned.get(query)
    if not counts:
        return []

    winner_id, winner_count = current_winner(counts)
    if winner_id is None or winner_count < MIN_COUNT_FOR_BOOST:
        return []

    for entry in entries:
        if entry.id == winner_id:
            logger.debug("Learned winner {} pinned for {!r} (count={})", winner_id, query, winner_count)
            return [entry]
    return []


def _match_fuzzy(
    entries: Sequence[SearchableEntry], query: str, context: RankingContext
) -> List[SearchableEntry]:
    return match_unified(entries, query)


MATCHERS: List[Matcher] = [match_learned, _match_fuzzy]


def run_matchers(
    entries: Sequence[SearchableEntry],
    query: str,
    context: RankingContext,
    matchers: Sequence[Matcher] = MATCHERS,
) -> List[SearchableEntry]:
    result: List[SearchableEntry] = []
    pool: List[SearchableEntry] = list(entries)

    for matcher in matchers:
        matched = matcher(pool, query, context)
        if not matched:
            continue
        result.extend(matched)
        taken = {e.id for e in matched}
        pool = [e for e in pool if e.id not in taken]

    return result
