"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    hikes: int
    source_url: str
    refreshed_at: Optional[str] = None
    last_error: Optional[str] = None


class SourceRequest(BaseModel):
    url: str


class SourceResponse(BaseModel):
    url: str


class Hike(BaseModel):
    id: int
    date: str
    year: str
    comments: str
    direction: str
    location: str
    miles: float
    elevation: float


class ScoredHikeResponse(BaseModel):
    hike: Hike
    score: float


class HikesResponse(BaseModel):
    hikes: list[Hike]
    count: int


class YearsResponse(BaseModel):
    years: list[str]


class YearCountResponse(BaseModel):
    year: str
    count: int


class LocationCountResponse(BaseModel):
    name: str
    count: int


class StatsResponse(BaseModel):
    hike_count: int
    since: Optional[int] = None
    total_miles: float
    total_elevation: float
    active_year: Optional[str] = None
    active_count: int
    average_hikes_per_year: float
