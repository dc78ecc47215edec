from __future__ import annotations

"""
FastAPI application exposing the launcher ranking engine.

- Indexers push whole sources with PUT /sources/{source_id}
- The UI sets the active query and reads ranked rows (POST /query, GET /search)
- Activations are reported with POST /select, which feeds learned
  preferences and recency history
"""

from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ._singletons import get_store
from .catalog import load_catalog
from .config import (
    CATALOG_PATH,
    CATALOG_SOURCE_ID,
    HealthResponse,
    Item,
    QueryRequest,
    SearchResponse,
    SelectRequest,
    SelectResponse,
    SourceUpdate,
)
from .logging_setup import configure_logging


# -----------------------
# FastAPI app + startup
# -----------------------

app = FastAPI()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup_event() -> None:
    configure_logging()
    logger.info("Starting quickrank service...")
    if CATALOG_PATH.exists():
        try:
            items = load_catalog(CATALOG_PATH, source_id=CATALOG_SOURCE_ID)
        except ValueError as e:
            logger.warning("Could not load catalog {}: {}", CATALOG_PATH, e)
        else:
            get_store().update_source(CATALOG_SOURCE_ID, items)
    else:
        logger.info("No catalog snapshot at {}; waiting for sources", CATALOG_PATH)
    logger.info("Startup complete.")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="healthy")


# -----------------------
# Sources
# -----------------------

@app.put("/sources/{source_id}")
def put_source(source_id: str, body: SourceUpdate) -> dict:
    items: List[Item] = [it.model_copy(update={"source_id": source_id}) for it in body.items]
    ids = [it.id for it in items]
    if len(set(ids)) != len(ids):
        raise HTTPException(status_code=422, detail="Item ids must be unique within a source")
    get_store().update_source(source_id, items)
    return {"source_id": source_id, "count": len(items)}


@app.delete("/sources/{source_id}")
def delete_source(source_id: str) -> dict:
    if not get_store().remove_source(source_id):
        raise HTTPException(status_code=404, detail=f"Unknown source: {source_id}")
    return {"source_id": source_id, "removed": True}


# -----------------------
# Ranking
# -----------------------

@app.get("/search", response_model=SearchResponse)
def search(query: str = "") -> SearchResponse:
    items = get_store().search(query)
    return SearchResponse(query=query, items=items, selected_index=0)


@app.post("/query", response_model=SearchResponse)
def set_query(req: QueryRequest) -> SearchResponse:
    store = get_store()
    store.set_query(req.query)
    items = store.filtered_items()
    return SearchResponse(query=store.query, items=items, selected_index=store.selected_index)


@app.post("/select", response_model=SelectResponse)
def select(req: SelectRequest) -> SelectResponse:
    store = get_store()
    top_changed = store.select(req.item_id, req.query)
    return SelectResponse(top_changed=top_changed, selected_index=store.selected_index)


@app.post("/reset")
def reset() -> dict:
    get_store().reset_context()
    return {"status": "reset"}
