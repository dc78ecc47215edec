from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# ---------------------------
# Paths
# ---------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "catalog.json"
CATALOG_PATH = Path(os.getenv("QUICKRANK_CATALOG_PATH", str(DEFAULT_CATALOG_PATH)))


# ---------------------------
# Learned preference settings
# ---------------------------

MAX_COUNT = 3              # saturating counter ceiling
MIN_COUNT_FOR_BOOST = 2    # learned winner is pinned on top from this count


# ---------------------------
# History settings
# ---------------------------

MAX_HISTORY_SIZE = 50


# ---------------------------
# Catalog / store
# ---------------------------

CATALOG_SOURCE_ID = "catalog"

# Candidate column spellings accepted by the catalog loader
ID_COLUMNS: List[str] = ["id", "ID", "Id", "item_id", "itemId", "key"]
NAME_COLUMNS: List[str] = ["name", "Name", "title", "Title", "label", "display_name"]


# ---------------------------
# Logging / observability
# ---------------------------

LOG_LEVEL = os.getenv("QUICKRANK_LOG_LEVEL", "INFO").upper()
LOG_DIR = PROJECT_ROOT / "logs"
LOG_ROTATION = "5 MB"


# ---------------------------
# Pydantic models shared around the app
# ---------------------------

class Item(BaseModel):
    """
    A catalog entry as supplied by the host.
    Ranking only ever reads ``id`` and ``name``.
    """

    id: str = Field(min_length=1)
    name: str
    source_id: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """
    Response body for GET /health.
    """

    status: str


class SourceUpdate(BaseModel):
    items: List[Item]


class QueryRequest(BaseModel):
    query: str = ""


class SearchResponse(BaseModel):
    """
    Ordered result list for the active (or given) query.
    """

    query: str
    items: List[Item]
    selected_index: int = Field(default=0, ge=0)


class SelectRequest(BaseModel):
    item_id: str = Field(..., min_length=1)
    # None means "whatever query the store currently holds"
    query: Optional[str] = None


class SelectResponse(BaseModel):
    top_changed: bool
    selected_index: int = Field(ge=0)
