# quickrank/_singletons.py
from functools import lru_cache

from .store import CatalogStore


@lru_cache(maxsize=1)
def get_store() -> CatalogStore:
    return CatalogStore()
