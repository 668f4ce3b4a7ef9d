# core/scrapers/open_library_scraper.py
from typing import Any, Dict, List, Optional
from urllib.parse import quote
from core.config import settings
from core.models.candidate import CandidateBook
from ..utils.http import Downloader
from ..utils.text import clean_text
from .base_scraper import BaseScraper

COVER_URL = "https://covers.openlibrary.org/b/id/{cover_id}-L.jpg"


class OpenLibraryScraper(BaseScraper):
    """Scraper for the Open Library subjects API."""

    name = 'Open Library'
    response_format = 'json'
    base_url = "https://openlibrary.org"

    def __init__(self, downloader: Optional[Downloader] = None, limit: Optional[int] = None):
        """
        Args:
            downloader: HTTP downloader
            limit: Number of works to request (defaults to FETCH_LIMIT)
        """
        super().__init__(downloader=downloader)
        self.limit = limit or settings.FETCH_LIMIT

    def get_url(self, subject: str) -> str:
        """Get URL for a subject listing"""
        return self.build_url(
            f"{self.base_url}/subjects/{quote(subject.strip())}.json",
            {'limit': self.limit}
        )

    def extract_items(self, data: Dict[str, Any], subject: str) -> List[Dict[str, Any]]:
        works = data.get('works') or []
        self.logger.info(f"Found {len(works)} works")
        return works

    def parse_item(self, work: Dict[str, Any], subject: str, url: str) -> Optional[CandidateBook]:
        title = clean_text(work.get('title'))
        if not title:
            return None

        cover_id = work.get('cover_id')
        key = work.get('key')
        return CandidateBook(
            title=title,
            publication_year=work.get('first_publish_year'),
            description=clean_text(self._extract_description(work.get('description'))),
            cover_image_url=COVER_URL.format(cover_id=cover_id) if cover_id else None,
            source_url=f"{self.base_url}{key}" if key else None,
            language='English',
            authors=self._extract_authors(work.get('authors')),
            categories=[subject],
            pdf_url=work.get('pdf_url'),
            download_url=work.get('download_url')
        )

    def _extract_description(self, description: Any) -> Optional[str]:
        """The description is either a plain string or an object with a 'value'"""
        if isinstance(description, str):
            return description
        if isinstance(description, dict):
            return description.get('value')
        return None

    def _extract_authors(self, authors: Optional[List[Any]]) -> List[str]:
        """Names of the nested author objects; entries that are not objects are skipped"""
        names = []
        for author in authors or []:
            if not isinstance(author, dict):
                continue
            name = clean_text(author.get('name'))
            if name:
                names.append(name)
        return names
