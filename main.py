# main.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ipl_live.cache import SnapshotCache
from ipl_live.config import LOG_LEVEL, SCRAPE_CACHE_TTL_SECONDS, validate_config
from ipl_live.logging_config import setup_logging
from ipl_live.scrape_service import ScrapeService

logger = logging.getLogger(__name__)

# -----------------------
# App
# -----------------------
app = FastAPI(
    title="IPL Live Points Table API",
    version="0.1.0",
    description="Scrapes the IPL points table with a headless browser and serves it through a short-lived cache",
)


@app.on_event("startup")
def on_startup():
    validate_config()
    setup_logging(LOG_LEVEL)


# -----------------------
# Dependencies (process-wide single cache slot + service)
# -----------------------
_service = ScrapeService(SnapshotCache(ttl_seconds=SCRAPE_CACHE_TTL_SECONDS))


def get_scrape_service() -> ScrapeService:
    return _service


@app.get("/health")
def health_check(service: ScrapeService = Depends(get_scrape_service)):
    return {
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "cache": service.cache.debug_snapshot(),
    }


# -----------------------
# Response envelopes
# -----------------------
class ScrapeResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]
    cached: bool
    method: Optional[str] = Field(None, description="browser/http; only set on a fresh scrape")
    degraded: bool = Field(False, description="True when standings came from static fallback data")


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


def _error(message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


# -----------------------
# Scrape endpoint (headless scrape + cache)
# -----------------------
@app.get(
    "/api/scrape",
    response_model=ScrapeResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
def get_scrape(service: ScrapeService = Depends(get_scrape_service)):
    try:
        snapshot, cached = service.get_snapshot()
        return ScrapeResponse(
            data=snapshot.data,
            cached=cached,
            method=None if cached else snapshot.method,
            degraded=snapshot.degraded,
        )
    except Exception:
        logger.exception("GET /api/scrape failed")
        return _error("Failed to fetch IPL data")


@app.post("/api/scrape", response_model=MessageResponse, responses={500: {"model": ErrorResponse}})
def clear_scrape_cache(service: ScrapeService = Depends(get_scrape_service)):
    try:
        service.invalidate()
        return MessageResponse(message="Cache cleared successfully")
    except Exception:
        logger.exception("POST /api/scrape failed")
        return _error("Failed to clear cache")
