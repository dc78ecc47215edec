from __future__ import annotations

"""
Name segmentation shared by matching and the debug tooling.

A display name is cut into lowercase word fragments ("segments"):

* first on runs of whitespace and hyphens,
* then in front of every uppercase ASCII letter (camel case),

and empty fragments are dropped.  ``"Google Chrome"`` becomes
``["google", "chrome"]`` and ``"OneDrive"`` becomes ``["one", "drive"]``.

Segment order follows the name and is significant: the fuzzy matcher
scores a match by the index of the first segment it starts in.
"""

import re
from typing import List, Sequence

from .config import Item
from .pipeline_types import SearchableEntry

_WORD_SPLIT_RE = re.compile(r"[\s\-]+")
_CAMEL_SPLIT_RE = re.compile(r"(?=[A-Z])")


def segment(name: str) -> List[str]:
    """Split ``name`` into ordered, lowercase, non-empty segments."""
    out: List[str] = []
    for word in _WORD_SPLIT_RE.split(name):
        for frag in _CAMEL_SPLIT_RE.split(word):
            if frag:
                out.append(frag.lower())
    return out


def to_searchable(item: Item) -> SearchableEntry:
    segments = tuple(segment(item.name))
    return SearchableEntry(
        id=item.id,
        name=item.name,
        segments=segments,
        normalized="".join(segments),
        item=item,
    )


def to_searchables(items: Sequence[Item]) -> List[SearchableEntry]:
    return [to_searchable(it) for it in items]
