"""
FastAPI dependencies — HikeStore singleton, year/query parsing.
"""
from __future__ import annotations

import re
from typing import Optional

from fastapi import HTTPException, Query

from hikelog.config import UNKNOWN
from hikelog.data.store import HikeStore, RecordStore

_YEAR_RE = re.compile(r"[0-9]{4}")

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: HikeStore | None = None


def set_store(store: HikeStore) -> None:
    global _store
    _store = store


def get_store() -> HikeStore:
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


def get_snapshot() -> RecordStore:
    """The current RecordStore; 503 until the first refresh has completed."""
    store = get_store()
    if not store.is_loaded:
        raise HTTPException(503, "Hike log not loaded yet")
    return store.snapshot


# ---------------------------------------------------------------------------
# Query params
# ---------------------------------------------------------------------------

def parse_year(
    year: Optional[str] = Query(None, description="4-digit year, 'Unknown' or 'all'"),
) -> Optional[str]:
    if year is None:
        return None
    year = year.strip()
    if year.lower() == "all" or year == "":
        return None
    if year.lower() == UNKNOWN.lower():
        return UNKNOWN
    if not _YEAR_RE.fullmatch(year):
        raise HTTPException(400, f"Invalid year: {year}")
    return year
