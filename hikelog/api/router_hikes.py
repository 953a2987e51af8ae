"""
Hike endpoints — search/filter listing, single-hike lookup, year options.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from hikelog.data.store import RecordStore
from hikelog.api.dependencies import get_snapshot, parse_year
from hikelog.api.response_models import HikesResponse, YearsResponse
from hikelog.analytics.common import sanitize_for_json
from hikelog.analytics.dashboard import available_years
from hikelog.analytics.search import search_hikes

router = APIRouter(prefix="/api", tags=["hikes"])


@router.get("/hikes", response_model=HikesResponse)
def list_hikes(
    q: str = Query("", description="Matches location, comments, id or date"),
    year: Optional[str] = Depends(parse_year),
    snapshot: RecordStore = Depends(get_snapshot),
):
    hikes = search_hikes(snapshot, q, year)
    return {"hikes": sanitize_for_json(hikes), "count": len(hikes)}


@router.get("/hikes/{hike_id}", response_model=HikesResponse)
def get_hike(hike_id: int, snapshot: RecordStore = Depends(get_snapshot)):
    """Every record with this id (the sheet may repeat an id)."""
    hikes = snapshot.get(hike_id)
    if not hikes:
        raise HTTPException(404, f"Hike not found: {hike_id}")
    return {"hikes": sanitize_for_json(hikes), "count": len(hikes)}


@router.get("/years", response_model=YearsResponse)
def list_years(snapshot: RecordStore = Depends(get_snapshot)):
    return YearsResponse(years=available_years(snapshot))
