"""
Hike Log Analytics — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hikelog.data.loader import FetchError
from hikelog.data.store import HikeStore
from hikelog.api.dependencies import set_store
from hikelog.api.router_meta import router as meta_router
from hikelog.api.router_hikes import router as hikes_router
from hikelog.api.router_dashboard import router as dashboard_router

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
log = logging.getLogger("hikelog")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fetch the hike sheet at startup."""
    store = HikeStore()
    set_store(store)
    log.info("HIKELOG_SHEET_URL = %s", store.source_url or "(not set)")

    try:
        await asyncio.to_thread(store.refresh)
    except FetchError:
        log.warning("Starting without hikes; POST /api/reload once the sheet is reachable")
    else:
        log.info("Hike Log Analytics ready — %d hikes", store.row_count())
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Hike Log Analytics API",
        description="Hiking log ingestion — stats, milestones, rankings and themed hike lists",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(hikes_router)
    app.include_router(dashboard_router)
    return app


app = create_app()
