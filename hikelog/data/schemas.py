"""
Record and derived-view schemas for the hike log.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from hikelog import config


@dataclass(frozen=True)
class HikeRecord:
    """One normalized row of the hike log, keyed by a positive integer id."""
    id: int
    date: str = ""
    year: str = config.UNKNOWN           # 4-digit string or "Unknown"
    comments: str = ""
    direction: str = ""                  # link to the trail / map
    location: str = config.UNKNOWN
    miles: float = 0.0
    elevation: float = 0.0               # feet of gain


@dataclass(frozen=True)
class MeasureColumns:
    """Resolved positions of the two numeric measure columns.

    A position of None means the header was too short to hold the column;
    the measure then defaults to 0 for every row.
    """
    miles: Optional[int]
    elevation: Optional[int]
    miles_fallback: bool = False
    elevation_fallback: bool = False


@dataclass(frozen=True)
class YearCount:
    year: str
    count: int


@dataclass(frozen=True)
class LocationCount:
    name: str
    count: int


@dataclass(frozen=True)
class ScoredHike:
    hike: HikeRecord
    score: float


@dataclass(frozen=True)
class AggregateStats:
    hike_count: int
    since: Optional[int]
    total_miles: float
    total_elevation: float
    active_year: Optional[str]
    active_count: int
    average_hikes_per_year: float


@dataclass(frozen=True)
class ScoringConfig:
    """Weights, keyword tables and caps used by the derivations.

    Defaults come from `hikelog.config`; tests pass their own tables.
    """
    mile_weight: float = config.MILE_WEIGHT
    elevation_weight: float = config.ELEVATION_WEIGHT
    priority_bonus: float = config.PRIORITY_BONUS
    keyword_bonus: float = config.KEYWORD_BONUS
    priority_locations: tuple[str, ...] = tuple(config.PRIORITY_LOCATIONS)
    difficulty_keywords: tuple[str, ...] = tuple(config.DIFFICULTY_KEYWORDS)
    scenic_keywords: tuple[str, ...] = tuple(config.SCENIC_KEYWORDS)
    weather_keywords: tuple[str, ...] = tuple(config.WEATHER_KEYWORDS)
    food_keywords: tuple[str, ...] = tuple(config.FOOD_KEYWORDS)
    milestone_ids: frozenset[int] = field(default=config.MILESTONE_IDS)
    demanding_limit: int = config.DEMANDING_LIMIT
    category_limit: int = config.CATEGORY_LIMIT
    top_locations_limit: int = config.TOP_LOCATIONS_LIMIT


DEFAULT_SCORING = ScoringConfig()
