"""
Free-text and year filtering over the hike log.
"""
from __future__ import annotations

from typing import Optional

from hikelog.data.schemas import HikeRecord
from hikelog.data.store import RecordStore

ALL_YEARS = "all"


def _matches(hike: HikeRecord, needle: str) -> bool:
    return (
        needle in hike.location.lower()
        or needle in hike.comments.lower()
        or needle in str(hike.id)
        or needle in hike.date.lower()
    )


def search_hikes(store: RecordStore, query: str = "", year: Optional[str] = None) -> list[HikeRecord]:
    """Hikes matching the year filter AND the query, in Record Store order.

    `year` of None or "all" (any case) disables the year filter; a blank
    query matches everything. The query is a case-insensitive substring of
    location, comments, id or date.
    """
    needle = (query or "").strip().lower()
    year = (year or "").strip()
    filter_year = bool(year) and year.lower() != ALL_YEARS

    results = []
    for hike in store:
        if filter_year and hike.year != year:
            continue
        if needle and not _matches(hike, needle):
            continue
        results.append(hike)
    return results
