# core/scrapers/custom_scraper.py
from bs4 import BeautifulSoup, Tag
from typing import List, Optional
from core.models.candidate import CandidateBook, CustomSelectors
from ..utils.http import Downloader
from ..utils.text import absolute_url, clean_text, extract_number, extract_year
from .base_scraper import BaseScraper


class CustomScraper(BaseScraper):
    """Scraper for arbitrary listing pages described by CSS selectors.

    The query is the URL of the page. Every field except the container is
    optional; a field without a selector is left empty.
    """

    name = 'Custom website'

    def __init__(self, selectors: CustomSelectors, downloader: Optional[Downloader] = None):
        super().__init__(downloader=downloader)
        self.selectors = selectors

    def get_url(self, url: str) -> str:
        return url.strip()

    def extract_items(self, soup: BeautifulSoup, url: str) -> List[Tag]:
        self.logger.info(f"Looking for elements: {self.selectors.container}")
        return soup.select(self.selectors.container)

    def parse_item(self, item: Tag, query: str, url: str) -> Optional[CandidateBook]:
        s = self.selectors
        title = self._text(item, s.title)
        if not title:
            return None

        return CandidateBook(
            title=title,
            subtitle=self._text(item, s.subtitle),
            description=self._text(item, s.description),
            cover_image_url=absolute_url(self._attr(item, s.cover_image, 'src'), url),
            source_url=absolute_url(self._attr(item, s.link, 'href'), url),
            publisher=self._text(item, s.publisher),
            publication_year=extract_year(self._raw_text(item, s.year)),
            isbn=self._text(item, s.isbn),
            pages=extract_number(self._raw_text(item, s.pages)),
            language='English',
            authors=self._texts(item, s.authors),
            categories=self._texts(item, s.categories)
        )

    def _raw_text(self, item: Tag, selector: Optional[str]) -> Optional[str]:
        """Concatenated text of every element matching the selector"""
        if not selector:
            return None
        return ''.join(el.get_text() for el in item.select(selector))

    def _text(self, item: Tag, selector: Optional[str]) -> Optional[str]:
        return clean_text(self._raw_text(item, selector))

    def _texts(self, item: Tag, selector: Optional[str]) -> List[str]:
        if not selector:
            return []
        return [t for t in (clean_text(el.get_text()) for el in item.select(selector)) if t]

    def _attr(self, item: Tag, selector: Optional[str], attribute: str) -> Optional[str]:
        """Attribute of the first matching element"""
        if not selector:
            return None
        element = item.select_one(selector)
        return element.get(attribute) if element else None
