# api/routes/scraper.py

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query

from core.models.ingestion import BatchResult, RunResult, ScrapingLogSummary, SourceSummary
from core.sa.database import get_database
from core.services.ingestion_service import IngestionService
from api.schemas.scraper import ScrapeRequest, ScrapeMultipleRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scraper", tags=["scraper"])


def get_ingestion_service() -> IngestionService:
    """Dependency providing the ingestion service"""
    return IngestionService(get_database())


@router.post("/scrape", response_model=RunResult)
def scrape_books(
    request: ScrapeRequest,
    service: IngestionService = Depends(get_ingestion_service)
):
    """
    Scrape books from a single source.

    Failed runs are still returned with status 200; the run status and
    error details describe what went wrong.
    """
    return service.run_single_source(
        request.type,
        request.query,
        request.source_name,
        request.base_url,
        request.selectors
    )


@router.post("/scrape-multiple", response_model=BatchResult)
def scrape_multiple_sources(
    request: ScrapeMultipleRequest,
    service: IngestionService = Depends(get_ingestion_service)
):
    """Scrape several sources one after another."""
    return service.run_multiple_sources(request.sources)


@router.get("/stats", response_model=List[ScrapingLogSummary])
def get_stats(
    limit: int = Query(10, ge=1, le=100, description="Number of recent runs to return"),
    service: IngestionService = Depends(get_ingestion_service)
):
    """Get the most recent scraping runs."""
    try:
        return service.get_recent_logs(limit)
    except Exception as e:
        logger.error(f"Error fetching scraping stats: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/sources", response_model=List[SourceSummary])
def get_sources(service: IngestionService = Depends(get_ingestion_service)):
    """Get all active sources."""
    try:
        return service.get_active_sources()
    except Exception as e:
        logger.error(f"Error fetching sources: {e}")
        raise HTTPException(status_code=500, detail=str(e))
