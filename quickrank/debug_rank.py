from __future__ import annotations
import argparse
from pathlib import Path

from .catalog import load_catalog
from .context import create_ranking_context
from .fuzzy import first_match
from .logging_setup import configure_logging
from .ranking import filter_and_sort
from .segment import to_searchable


def main(args):
    configure_logging(level="DEBUG" if args.verbose else None, log_dir=None)
    items = load_catalog(args.catalog)
    ranked = filter_and_sort(items, args.query, create_ranking_context())
    q = args.query.lower()

    print(f"Catalog items: {len(items)}")
    print(f"Query: {args.query!r} -> {len(ranked)} matches\n")
    for pos, item in enumerate(ranked[: args.top], start=1):
        entry = to_searchable(item)
        m = first_match(entry, q) if q else None
        print(f"{pos:>3}. {item.name}  [{item.id}]")
        print(f"     segments: {list(entry.segments)}")
        if m is not None:
            print(f"     start={m.start_segment} charspan={m.char_span} gaps={m.gap_count}")

if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--catalog", type=Path, required=True)
    ap.add_argument("--query", default="")
    ap.add_argument("--top", type=int, default=10)
    ap.add_argument("--verbose", action="store_true")
    main(ap.parse_args())
