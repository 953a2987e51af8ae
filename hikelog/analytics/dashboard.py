"""
Dashboard analytics — aggregate stats, yearly histogram, milestones, top locations.

All functions are pure reads of a RecordStore snapshot.
"""
from __future__ import annotations

from hikelog.config import UNKNOWN
from hikelog.data.schemas import (
    AggregateStats,
    DEFAULT_SCORING,
    HikeRecord,
    LocationCount,
    ScoringConfig,
    YearCount,
)
from hikelog.data.store import RecordStore
from hikelog.analytics.common import safe_divide, sanitize_for_json
from hikelog.analytics.categories import demanding_hikes, scenic_hikes, weather_hikes, food_hikes


# ---------------------------------------------------------------------------
# Years
# ---------------------------------------------------------------------------

def year_histogram(store: RecordStore) -> list[YearCount]:
    """Hike count per known year, year ascending ("Unknown" excluded)."""
    if store.is_empty:
        return []
    df = store.frame
    known = df[df["year"] != UNKNOWN]
    counts = known.groupby("year").size()
    return [YearCount(year=str(y), count=int(c)) for y, c in counts.items()]


def available_years(store: RecordStore) -> list[str]:
    """Distinct known years, most recent first (year-filter options)."""
    return sorted({r.year for r in store if r.year != UNKNOWN}, reverse=True)


# ---------------------------------------------------------------------------
# Aggregate stats
# ---------------------------------------------------------------------------

def aggregate_stats(store: RecordStore) -> AggregateStats:
    """Headline numbers: totals, first year, busiest year, hikes per year."""
    histogram = year_histogram(store)
    hike_count = len(store)

    if store.is_empty:
        total_miles = total_elevation = 0.0
    else:
        total_miles = float(store.frame["miles"].sum())
        total_elevation = float(store.frame["elevation"].sum())

    since = min((int(h.year) for h in histogram), default=None)

    # Stable sort: equal counts keep year-ascending order, so the earliest year wins ties
    busiest = sorted(histogram, key=lambda h: h.count, reverse=True)
    active = busiest[0] if busiest else None

    distinct_years = len(histogram) or 1
    return AggregateStats(
        hike_count=hike_count,
        since=since,
        total_miles=total_miles,
        total_elevation=total_elevation,
        active_year=active.year if active else None,
        active_count=active.count if active else 0,
        average_hikes_per_year=round(safe_divide(hike_count, distinct_years), 1),
    )


# ---------------------------------------------------------------------------
# Milestones & locations
# ---------------------------------------------------------------------------

def milestones(store: RecordStore, scoring: ScoringConfig = DEFAULT_SCORING) -> list[HikeRecord]:
    """Hikes whose id is a round-number milestone, id descending."""
    if store.is_empty:
        return []
    df = store.frame
    hits = df[df["id"].isin(list(scoring.milestone_ids))]
    return store.take(hits.index)


def top_locations(store: RecordStore, scoring: ScoringConfig = DEFAULT_SCORING) -> list[LocationCount]:
    """Most visited places (text before the first comma, uppercased)."""
    if store.is_empty:
        return []
    names = store.frame["location"].str.split(",", n=1).str[0].str.strip().str.upper()
    names = names[(names != "") & (names != UNKNOWN.upper())]
    if names.empty:
        return []

    # sort=False keeps first-seen order, which the stable sort preserves for ties
    counts = names.groupby(names, sort=False).size()
    counts = counts.sort_values(ascending=False, kind="stable").head(scoring.top_locations_limit)
    return [LocationCount(name=str(n), count=int(c)) for n, c in counts.items()]


# ---------------------------------------------------------------------------
# Full dashboard
# ---------------------------------------------------------------------------

def dashboard_summary(store: RecordStore, scoring: ScoringConfig = DEFAULT_SCORING) -> dict:
    """Every derived view in one JSON-ready payload."""
    return sanitize_for_json({
        "stats": aggregate_stats(store),
        "year_histogram": year_histogram(store),
        "years": available_years(store),
        "milestones": milestones(store, scoring),
        "top_locations": top_locations(store, scoring),
        "demanding": demanding_hikes(store, scoring),
        "scenic": scenic_hikes(store, scoring),
        "weather": weather_hikes(store, scoring),
        "food": food_hikes(store, scoring),
    })
