# quickrank/eval.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from .catalog import load_catalog
from .config import Item
from .context import RankingContext, create_ranking_context, record_selection
from .logging_setup import configure_logging
from .ranking import filter_and_sort

# ---------- IO helpers ----------

def _read_log(path: Path) -> pd.DataFrame:
    """
    Selection log: one row per activation, columns ``query`` and ``item_id``
    in the order the user made them.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")
    cols = {c.lower(): c for c in df.columns}
    qcol, icol = cols.get("query"), cols.get("item_id")
    if not qcol or not icol:
        raise ValueError(f"Expected columns 'query' and 'item_id'. Found: {list(df.columns)}")
    return df.rename(columns={qcol: "query", icol: "item_id"})

# ---------- metrics ----------

def rank_of(ranked: Sequence[Item], item_id: str) -> Optional[int]:
    """1-based position of ``item_id`` in ``ranked``; None when absent."""
    for i, it in enumerate(ranked):
        if it.id == item_id:
            return i + 1
    return None


def hit_at_k(ranks: Sequence[Optional[int]], k: int) -> float:
    if not ranks:
        return 0.0
    hits = sum(1 for r in ranks if r is not None and r <= k)
    return hits / float(len(ranks))


def mean_reciprocal_rank(ranks: Sequence[Optional[int]]) -> float:
    if not ranks:
        return 0.0
    return sum(1.0 / r for r in ranks if r is not None) / float(len(ranks))

# ---------- replay ----------

def replay(
    items: Sequence[Item],
    selections: Iterable[Tuple[str, str]],
    context: Optional[RankingContext] = None,
) -> List[Optional[int]]:
    """
    Rank each logged query as the user would have seen it, note where the
    chosen item sat, then record the selection before moving on.
    """
    ctx = context if context is not None else create_ranking_context()
    ranks: List[Optional[int]] = []
    for query, item_id in selections:
        ranked = filter_and_sort(items, query, ctx)
        ranks.append(rank_of(ranked, item_id))
        record_selection(ctx, query, item_id)
    return ranks


def evaluate(ranks: Sequence[Optional[int]], ks=(1, 3, 5)) -> Dict[str, float]:
    scores = {f"hit@{k}": hit_at_k(ranks, k) for k in ks}
    scores["mrr"] = mean_reciprocal_rank(ranks)
    return scores

# ---------- CLI ----------

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--catalog", type=Path, required=True,
                    help="Catalog snapshot (.json, .jsonl or .csv)")
    ap.add_argument("--log", type=Path, required=True,
                    help="Selection log CSV with columns query,item_id")
    ap.add_argument("--k", type=int, nargs="+", default=[1, 3, 5])
    args = ap.parse_args()

    configure_logging(log_dir=None)
    items = load_catalog(args.catalog)
    df = _read_log(args.log)
    ranks = replay(items, zip(df["query"].tolist(), df["item_id"].tolist()))

    scores = evaluate(ranks, ks=args.k)
    print(f"Selections: {len(ranks)}")
    for k in args.k:
        print(f"Hit@{k}: {scores[f'hit@{k}']:.4f}")
    print(f"MRR: {scores['mrr']:.4f}")

if __name__ == "__main__":
    main()
