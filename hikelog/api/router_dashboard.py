"""
Dashboard endpoints — stats, year histogram, milestones, top locations, categories.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from hikelog.config import DEMANDING_LIMIT
from hikelog.data.store import RecordStore
from hikelog.api.dependencies import get_snapshot
from hikelog.api.response_models import (
    Hike,
    LocationCountResponse,
    ScoredHikeResponse,
    StatsResponse,
    YearCountResponse,
)
from hikelog.analytics.common import sanitize_for_json
from hikelog.analytics.categories import CATEGORIES, demanding_hikes
from hikelog.analytics.dashboard import (
    aggregate_stats,
    dashboard_summary,
    milestones,
    top_locations,
    year_histogram,
)

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard")
def dashboard(snapshot: RecordStore = Depends(get_snapshot)):
    """Every derived view in one payload."""
    return dashboard_summary(snapshot)


@router.get("/stats", response_model=StatsResponse)
def stats(snapshot: RecordStore = Depends(get_snapshot)):
    return sanitize_for_json(aggregate_stats(snapshot))


@router.get("/years/histogram", response_model=list[YearCountResponse])
def histogram(snapshot: RecordStore = Depends(get_snapshot)):
    """Hikes per year, oldest first."""
    return sanitize_for_json(year_histogram(snapshot))


@router.get("/milestones", response_model=list[Hike])
def list_milestones(snapshot: RecordStore = Depends(get_snapshot)):
    return sanitize_for_json(milestones(snapshot))


@router.get("/locations/top", response_model=list[LocationCountResponse])
def locations(snapshot: RecordStore = Depends(get_snapshot)):
    return sanitize_for_json(top_locations(snapshot))


@router.get("/categories/demanding", response_model=list[ScoredHikeResponse])
def demanding(
    limit: int = Query(DEMANDING_LIMIT, ge=1, le=1000),
    snapshot: RecordStore = Depends(get_snapshot),
):
    """Hikes ranked by distance, gain and difficulty bonuses."""
    return sanitize_for_json(demanding_hikes(snapshot, limit=limit))


@router.get("/categories/{name}", response_model=list[Hike])
def category(name: str, snapshot: RecordStore = Depends(get_snapshot)):
    """Keyword themes: scenic, weather, food."""
    compute = CATEGORIES.get(name.lower())
    if compute is None:
        raise HTTPException(404, f"Unknown category: {name}. Choose from {sorted(CATEGORIES)}")
    return sanitize_for_json(compute(snapshot))
