from __future__ import annotations

"""
Segment/gap fuzzy matching.

The query is consumed left to right against a name's segments.  Inside a
segment characters must match contiguously from the segment's first
character; on a mismatch the scan abandons the segment and resumes at the
start of the next one.  This is what lets ``"gchr"`` hit "Google Chrome"
(``g`` from *google*, ``chr`` from *chrome*) while ``"oogle"`` does not.

Each successful match is scored by a :class:`FuzzyMatch`:

* ``start_segment`` - index of the first segment that started a match,
* ``char_span``     - summed length of every segment that started a match,
* ``gap_count``     - segments between the first and last matched ones that
  did not themselves start a match.

:func:`match_unified` keeps every entry that matches from *some* start
index and orders them by ``(start_segment, char_span, gap_count, name)``.
"""

from typing import List, Optional, Sequence

from loguru import logger

from .pipeline_types import FuzzyMatch, ScoredEntry, SearchableEntry


def match_from(segments: Sequence[str], query: str, start_index: int) -> Optional[FuzzyMatch]:
    """
    Try to consume ``query`` (already lowercased) starting at segment
    ``start_index``.  Returns None when the segments run out first.
    """
    if start_index >= len(segments) or not query:
        return None

    q_pos = 0
    seg_idx = start_index
    offset = 0
    char_span = 0
    first_matched = -1
    last_matched = -1
    matched_count = 0

    while q_pos < len(query):
        if seg_idx >= len(segments):
            return None

        seg = segments[seg_idx]
        if offset < len(seg) and seg[offset] == query[q_pos]:
            if offset == 0:
                if first_matched == -1:
                    first_matched = seg_idx
                last_matched = seg_idx
                matched_count += 1
                char_span += len(seg)
            q_pos += 1
            offset += 1
        else:
            seg_idx += 1
            offset = 0

    gaps = (last_matched - first_matched + 1) - matched_count
    return FuzzyMatch(start_segment=first_matched, char_span=char_span, gap_count=gaps)


def first_match(entry: SearchableEntry, query: str) -> Optional[FuzzyMatch]:
    """
    First start index that yields a match wins, even if a later start
    would score better.
    """
    for start in range(len(entry.segments)):
        m = match_from(entry.segments, query, start)
        if m is not None:
            return m
    return None


def score_entries(entries: Sequence[SearchableEntry], query: str) -> List[ScoredEntry]:
    """Matching entries with their scores, best first."""
    scored: List[ScoredEntry] = []
    for entry in entries:
        m = first_match(entry, query)
        if m is not None:
            scored.append(ScoredEntry(entry=entry, match=m))
    scored.sort(key=ScoredEntry.sort_key)
    return scored


def match_unified(entries: Sequence[SearchableEntry], query: str) -> List[SearchableEntry]:
    scored = score_entries(entries, query)
    logger.debug("Fuzzy matcher kept {}/{} entries for {!r}", len(scored), len(entries), query)
    return [s.entry for s in scored]
