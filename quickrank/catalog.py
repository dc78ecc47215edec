from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from loguru import logger

from .config import CATALOG_PATH, ID_COLUMNS, NAME_COLUMNS, Item


# ---------------------------
# Reading
# ---------------------------

def _read_any(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    ext = path.suffix.lower()
    if ext == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")
    if ext == ".jsonl":
        return pd.read_json(path, lines=True, dtype=False)
    if ext == ".json":
        return pd.read_json(path, dtype=False)
    raise ValueError(f"Unsupported catalog format '{ext}' for {path} (expected .json, .jsonl or .csv)")


def _pick_column(df: pd.DataFrame, candidates: List[str]) -> Optional[str]:
    for c in candidates:
        if c in df.columns:
            return c
    return None


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and value != value:
        return True
    return isinstance(value, str) and not value.strip()


def _as_text(value: Any) -> str:
    # JSON ids often come back as floats once a column holds a gap
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


# ---------------------------
# Public helpers
# ---------------------------

def items_from_frame(df: pd.DataFrame, source_id: str = "") -> List[Item]:
    """
    Turn a catalog frame into items.  Rows without an id or a name are
    skipped, duplicate ids keep their first row, every other column ends
    up in ``metadata``.
    """
    id_col = _pick_column(df, ID_COLUMNS)
    name_col = _pick_column(df, NAME_COLUMNS)
    if not id_col or not name_col:
        raise ValueError(
            f"Expected an id column ({ID_COLUMNS}) and a name column ({NAME_COLUMNS}). "
            f"Found: {list(df.columns)}"
        )

    extra_cols = [c for c in df.columns if c not in (id_col, name_col)]
    items: List[Item] = []
    seen = set()
    skipped = 0

    for row in df.to_dict(orient="records"):
        raw_id, raw_name = row.get(id_col), row.get(name_col)
        if _is_missing(raw_id) or _is_missing(raw_name):
            skipped += 1
            continue
        item_id = _as_text(raw_id)
        if item_id in seen:
            skipped += 1
            continue
        seen.add(item_id)

        metadata: Dict[str, Any] = {c: row[c] for c in extra_cols if not _is_missing(row.get(c))}
        items.append(Item(id=item_id, name=str(raw_name), source_id=source_id, metadata=metadata))

    if skipped:
        logger.warning("Skipped {} catalog rows (missing id/name or duplicate id)", skipped)
    return items


def load_catalog(path: Path = CATALOG_PATH, source_id: str = "") -> List[Item]:
    """
    Load a flat catalog snapshot from JSON, JSON lines or CSV.
    """
    path = Path(path)
    logger.info("Loading catalog from {}", path)
    df = _read_any(path)
    items = items_from_frame(df, source_id=source_id)
    logger.info("Loaded catalog with {} items", len(items))
    return items
