# core/scrapers/gutenberg_scraper.py
from bs4 import BeautifulSoup, Tag
from typing import List, Optional
from core.models.candidate import CandidateBook
from ..utils.text import absolute_url, clean_text, strip_byline
from .base_scraper import BaseScraper


class GutenbergScraper(BaseScraper):
    """Scraper for Project Gutenberg search result pages."""

    name = 'Project Gutenberg'
    search_url = "https://www.gutenberg.org/ebooks/search/"
    max_results = 20

    def get_url(self, search_term: str) -> str:
        """Get URL for a search results page"""
        return self.build_url(self.search_url, {'query': search_term})

    def extract_items(self, soup: BeautifulSoup, search_term: str) -> List[Tag]:
        entries = soup.select('.booklink')
        if not entries:
            self.logger.warning(f"No book entries found for: {search_term}")
        return entries

    def parse_item(self, entry: Tag, search_term: str, url: str) -> Optional[CandidateBook]:
        title_el = entry.select_one('.title')
        title = clean_text(title_el.get_text()) if title_el else None
        if not title:
            return None

        link = entry.select_one('a.link')
        byline = entry.select_one('.subtitle')
        author = strip_byline(byline.get_text()) if byline else None

        return CandidateBook(
            title=title,
            source_url=absolute_url(link.get('href'), url) if link else None,
            language='English',
            authors=[author] if author else [],
            categories=[search_term]
        )
