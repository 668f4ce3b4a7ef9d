# core/scrapers/google_books_scraper.py
from typing import Any, Dict, List, Optional
from core.config import settings
from core.models.candidate import CandidateBook
from ..utils.http import Downloader
from ..utils.text import clean_text, extract_year
from .base_scraper import BaseScraper


class GoogleBooksScraper(BaseScraper):
    """Scraper for the Google Books volumes search API."""

    name = 'Google Books'
    response_format = 'json'
    api_url = "https://www.googleapis.com/books/v1/volumes"
    default_language = 'en'

    def __init__(
        self,
        downloader: Optional[Downloader] = None,
        max_results: Optional[int] = None,
        api_key: Optional[str] = None
    ):
        super().__init__(downloader=downloader)
        self.page_size = max_results or settings.FETCH_LIMIT
        self.api_key = api_key or settings.GOOGLE_BOOKS_API_KEY

    def get_url(self, query: str) -> str:
        """Get URL for a keyword search"""
        return self.build_url(self.api_url, {
            'q': query,
            'maxResults': self.page_size,
            'key': self.api_key
        })

    def extract_items(self, data: Dict[str, Any], query: str) -> List[Dict[str, Any]]:
        items = data.get('items') or []
        self.logger.info(f"Found {data.get('totalItems') or 0} total items, processing {len(items)}")
        return items

    def parse_item(self, item: Dict[str, Any], query: str, url: str) -> Optional[CandidateBook]:
        info = item.get('volumeInfo') or {}
        title = clean_text(info.get('title'))
        if not title:
            return None

        image_links = info.get('imageLinks') or {}
        return CandidateBook(
            title=title,
            subtitle=clean_text(info.get('subtitle')),
            isbn=self._extract_isbn(info.get('industryIdentifiers')),
            publication_year=extract_year(info.get('publishedDate')),
            publisher=clean_text(info.get('publisher')),
            pages=info.get('pageCount'),
            language=info.get('language') or self.default_language,
            description=clean_text(info.get('description')),
            cover_image_url=image_links.get('thumbnail') or image_links.get('smallThumbnail'),
            source_url=(
                info.get('canonicalVolumeLink')
                or info.get('previewLink')
                or info.get('infoLink')
            ),
            authors=self._clean_list(info.get('authors')),
            categories=self._clean_list(info.get('categories'))
        )

    def _extract_isbn(self, identifiers: Optional[List[Dict[str, str]]]) -> Optional[str]:
        """Prefer the 13-digit ISBN over the 10-digit one"""
        by_type = {i.get('type'): i.get('identifier') for i in identifiers or []}
        return by_type.get('ISBN_13') or by_type.get('ISBN_10')

    def _clean_list(self, values: Optional[List[str]]) -> List[str]:
        return [v for v in (clean_text(value) for value in values or []) if v]
