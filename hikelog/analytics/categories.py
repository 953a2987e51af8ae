"""
Thematic categories — demanding-hike ranking and keyword-based hike themes.
"""
from __future__ import annotations

from typing import Iterable

import pandas as pd

from hikelog.data.schemas import DEFAULT_SCORING, HikeRecord, ScoredHike, ScoringConfig
from hikelog.data.store import RecordStore
from hikelog.analytics.common import keyword_mask


# ---------------------------------------------------------------------------
# Demanding hikes
# ---------------------------------------------------------------------------

def demanding_scores(store: RecordStore, scoring: ScoringConfig = DEFAULT_SCORING) -> pd.Series:
    """Demanding score for every record, indexed by frame position.

    miles * mile_weight + elevation * elevation_weight, plus a flat bonus when
    location or comments mention a priority place and a smaller one when the
    comments use a difficulty keyword.
    """
    df = store.frame
    if df.empty:
        return pd.Series(dtype=float)

    score = df["miles"].astype(float) * scoring.mile_weight
    score = score + df["elevation"].astype(float) * scoring.elevation_weight

    priority = keyword_mask(df["location"], scoring.priority_locations) | keyword_mask(
        df["comments"], scoring.priority_locations
    )
    score = score + priority.astype(float) * scoring.priority_bonus

    tough = keyword_mask(df["comments"], scoring.difficulty_keywords)
    score = score + tough.astype(float) * scoring.keyword_bonus
    return score


def demanding_hikes(
    store: RecordStore,
    scoring: ScoringConfig = DEFAULT_SCORING,
    limit: int | None = None,
) -> list[ScoredHike]:
    """Every hike ranked by demanding score (no cutoff), top `limit`.

    Equal scores keep Record Store order (id descending).
    """
    scores = demanding_scores(store, scoring)
    if scores.empty:
        return []
    limit = scoring.demanding_limit if limit is None else limit
    ranked = scores.sort_values(ascending=False, kind="stable").head(limit)
    return [ScoredHike(hike=store.records[int(i)], score=float(s)) for i, s in ranked.items()]


# ---------------------------------------------------------------------------
# Keyword themes
# ---------------------------------------------------------------------------

def hikes_mentioning(
    store: RecordStore,
    keywords: Iterable[str],
    limit: int | None = None,
) -> list[HikeRecord]:
    """Hikes whose comments contain any keyword, in Record Store order, capped at `limit`."""
    df = store.frame
    if df.empty:
        return []
    hits = df[keyword_mask(df["comments"], keywords)]
    if limit is not None:
        hits = hits.head(limit)
    return store.take(hits.index)


def scenic_hikes(store: RecordStore, scoring: ScoringConfig = DEFAULT_SCORING) -> list[HikeRecord]:
    return hikes_mentioning(store, scoring.scenic_keywords, scoring.category_limit)


def weather_hikes(store: RecordStore, scoring: ScoringConfig = DEFAULT_SCORING) -> list[HikeRecord]:
    """Windy, rainy and cold outings."""
    return hikes_mentioning(store, scoring.weather_keywords, scoring.category_limit)


def food_hikes(store: RecordStore, scoring: ScoringConfig = DEFAULT_SCORING) -> list[HikeRecord]:
    """Hikes followed by breakfast, coffee or a diner stop."""
    return hikes_mentioning(store, scoring.food_keywords, scoring.category_limit)


CATEGORIES = {
    "scenic": scenic_hikes,
    "weather": weather_hikes,
    "food": food_hikes,
}
