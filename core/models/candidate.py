# core/models/candidate.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

PLACEHOLDER_TITLE = "Unknown Title"


class CandidateBook(BaseModel):
    """A normalized book produced by a scraper, not yet persisted."""
    title: str
    subtitle: Optional[str] = None
    isbn: Optional[str] = None
    publication_year: Optional[int] = None
    publisher: Optional[str] = None
    pages: Optional[int] = None
    language: Optional[str] = None
    description: Optional[str] = None
    cover_image_url: Optional[str] = None
    source_url: Optional[str] = None
    pdf_url: Optional[str] = None
    download_url: Optional[str] = None
    authors: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)

    def has_title(self) -> bool:
        return bool(self.title and self.title.strip()) and self.title != PLACEHOLDER_TITLE


class CustomSelectors(BaseModel):
    """CSS selectors for the configurable HTML scraper.

    Only ``container`` is required. Any other field left unset is simply not
    extracted.
    """
    container: str
    title: Optional[str] = None
    subtitle: Optional[str] = None
    authors: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = Field(default=None, alias='coverImage')
    link: Optional[str] = None
    publisher: Optional[str] = None
    year: Optional[str] = None
    isbn: Optional[str] = None
    categories: Optional[str] = None
    pages: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)
