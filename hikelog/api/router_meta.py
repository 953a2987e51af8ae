"""
Meta endpoints: health, source URL settings, reload.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from hikelog.data.loader import FetchError
from hikelog.data.store import HikeStore
from hikelog.api.dependencies import get_store
from hikelog.api.response_models import HealthResponse, SourceRequest, SourceResponse

router = APIRouter(prefix="/api", tags=["meta"])

log = logging.getLogger("hikelog.api")


def _refresh_or_502(store: HikeStore) -> None:
    try:
        store.refresh()
    except FetchError as exc:
        raise HTTPException(502, str(exc))


@router.get("/health", response_model=HealthResponse)
def health(store: HikeStore = Depends(get_store)):
    return HealthResponse(
        status="ok" if store.last_error is None else "stale",
        hikes=store.row_count(),
        source_url=store.source_url,
        refreshed_at=store.refreshed_at.isoformat() if store.refreshed_at else None,
        last_error=store.last_error,
    )


@router.get("/source", response_model=SourceResponse)
def get_source(store: HikeStore = Depends(get_store)):
    return SourceResponse(url=store.source_url)


@router.put("/source", response_model=HealthResponse)
def set_source(body: SourceRequest, store: HikeStore = Depends(get_store)):
    """Point the dashboard at a different published sheet and re-fetch it."""
    log.info("Source URL changed to %s", body.url)
    try:
        store.set_source(body.url)
    except FetchError as exc:
        raise HTTPException(502, str(exc))
    return health(store)


@router.post("/reload", response_model=HealthResponse)
def reload_data(store: HikeStore = Depends(get_store)):
    """Re-fetch the sheet and rebuild every view.

    On failure the previous hikes stay cached and a 502 describes the error.
    """
    _refresh_or_502(store)
    return health(store)
