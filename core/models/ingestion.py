# core/models/ingestion.py

from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .candidate import CandidateBook, CustomSelectors


class ScraperType(str, Enum):
    OPEN_LIBRARY = "openlibrary"    # subject-indexed JSON API
    GOOGLE_BOOKS = "googlebooks"    # keyword-search JSON API
    GUTENBERG = "gutenberg"         # fixed-layout HTML listing
    CUSTOM = "custom"               # selector-configured HTML page


class RunStatus(str, Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class OutcomeStatus(str, Enum):
    ADDED = "added"
    UPDATED = "updated"
    FAILED = "failed"


class ScrapeResult(BaseModel):
    books: List[CandidateBook] = Field(default_factory=list)
    parse_errors: List[str] = Field(default_factory=list)


class CandidateOutcome(BaseModel):
    title: str
    status: OutcomeStatus
    book_id: Optional[int] = None
    error: Optional[str] = None


class SaveResult(BaseModel):
    added: int = 0
    updated: int = 0
    failed: int = 0
    outcomes: List[CandidateOutcome] = Field(default_factory=list)

    def record(self, outcome: CandidateOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.status == OutcomeStatus.ADDED:
            self.added += 1
        elif outcome.status == OutcomeStatus.UPDATED:
            self.updated += 1
        else:
            self.failed += 1

    @property
    def failures(self) -> List[CandidateOutcome]:
        return [o for o in self.outcomes if o.status == OutcomeStatus.FAILED]


class SourceSpec(BaseModel):
    """One entry of a batch run."""
    type: ScraperType
    query: str = Field(min_length=1)
    source_name: str = Field(min_length=1)
    base_url: str = Field(min_length=1)
    selectors: Optional[CustomSelectors] = None

    @model_validator(mode='after')
    def require_selectors_for_custom(self):
        if self.type == ScraperType.CUSTOM and self.selectors is None:
            raise ValueError("selectors are required for custom scraping")
        return self


class RunResult(BaseModel):
    log_id: Optional[int] = None
    source_id: Optional[int] = None
    source_name: Optional[str] = None
    books_added: int = 0
    books_updated: int = 0
    errors: int = 0
    skipped_items: int = 0
    status: RunStatus
    error_details: Optional[str] = None


class BatchResult(BaseModel):
    results: List[RunResult] = Field(default_factory=list)
    total_added: int = 0
    total_updated: int = 0
    total_errors: int = 0
    completed: int = 0
    failed: int = 0

    @classmethod
    def from_results(cls, results: List[RunResult]) -> "BatchResult":
        completed = sum(1 for r in results if r.status == RunStatus.COMPLETED)
        return cls(
            results=results,
            total_added=sum(r.books_added for r in results),
            total_updated=sum(r.books_updated for r in results),
            total_errors=sum(r.errors for r in results),
            completed=completed,
            failed=len(results) - completed
        )


class SourceSummary(BaseModel):
    id: int
    name: str
    base_url: Optional[str] = None
    is_active: bool
    last_scraped: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ScrapingLogSummary(BaseModel):
    id: int
    source_id: int
    source_name: str
    base_url: Optional[str] = None
    started_at: datetime
    completed_at: Optional[datetime] = None
    books_added: int
    books_updated: int
    errors: int
    status: RunStatus
    error_details: Optional[str] = None
