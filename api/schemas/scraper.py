# api/schemas/scraper.py
from typing import List
from pydantic import BaseModel, Field
from core.models.ingestion import SourceSpec


class ScrapeRequest(SourceSpec):
    """Body of a single-source scrape request"""
    pass


class ScrapeMultipleRequest(BaseModel):
    sources: List[SourceSpec] = Field(min_length=1)
