from __future__ import annotations

"""
Host-side catalog store.

Keeps the pieces a launcher UI needs around the ranking engine:

* items per source (apps, files, web search templates, ...), each source
  replaced wholesale whenever its indexer reports,
* the active query and the highlighted row,
* the :class:`RankingContext` fed by selections.

All access goes through one re-entrant lock so selections never race
with ranking reads.
"""

import threading
from typing import Dict, List, Optional, Sequence

from loguru import logger

from .config import Item
from .context import RankingContext, create_ranking_context, record_selection
from .ranking import filter_and_sort


class CatalogStore:
    def __init__(self, context: Optional[RankingContext] = None) -> None:
        self._lock = threading.RLock()
        self._sources: Dict[str, List[Item]] = {}
        self._context = context if context is not None else create_ranking_context()
        self._query = ""
        self._selected_index = 0
        self._last_top_id: Optional[str] = None

    # ---------------------------
    # Sources
    # ---------------------------

    def update_source(self, source_id: str, items: Sequence[Item]) -> None:
        with self._lock:
            self._sources[source_id] = list(items)
        logger.info("Source {} updated with {} items", source_id, len(items))

    def remove_source(self, source_id: str) -> bool:
        with self._lock:
            removed = self._sources.pop(source_id, None) is not None
        if removed:
            logger.info("Source {} removed", source_id)
        return removed

    def all_items(self) -> List[Item]:
        with self._lock:
            return [it for items in self._sources.values() for it in items]

    # ---------------------------
    # Query / selection state
    # ---------------------------

    @property
    def query(self) -> str:
        return self._query

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def context(self) -> RankingContext:
        return self._context

    def set_query(self, text: str) -> None:
        with self._lock:
            self._query = text
            self._selected_index = 0

    def set_selected_index(self, index: int) -> None:
        with self._lock:
            self._selected_index = max(0, index)

    def filtered_items(self) -> List[Item]:
        """
        Ranked items for the current query.  Also clamps the highlighted
        row into range and remembers which item is on top.
        """
        with self._lock:
            items = filter_and_sort(self.all_items(), self._query, self._context)
            self._selected_index = min(self._selected_index, max(0, len(items) - 1))
            self._last_top_id = items[0].id if items else None
            return items

    def search(self, query: str) -> List[Item]:
        """Rank against ``query`` without touching the store's own query state."""
        with self._lock:
            return filter_and_sort(self.all_items(), query, self._context)

    def select(self, item_id: str, query: Optional[str] = None) -> bool:
        """
        Record that ``item_id`` was activated.  ``query`` defaults to the
        store's current query.  Returns True when the top result changed
        as a consequence, in which case the highlight goes back to row 0.
        """
        with self._lock:
            q = self._query if query is None else query
            record_selection(self._context, q, item_id)

            items = filter_and_sort(self.all_items(), self._query, self._context)
            new_top = items[0].id if items else None
            top_changed = new_top != self._last_top_id
            if top_changed:
                self._selected_index = 0
            self._last_top_id = new_top

        logger.info("Selected {} for query {!r} (top changed: {})", item_id, q, top_changed)
        return top_changed

    def reset_context(self) -> None:
        with self._lock:
            self._context.clear()
            self._last_top_id = None
        logger.info("Ranking context reset")
