# core/scrapers/base_scraper.py

from bs4 import BeautifulSoup
import logging
from typing import Any, Dict, Iterable, Optional
from abc import ABC, abstractmethod
from urllib.parse import urlencode
import requests
from core.exceptions import ScraperError
from core.models.candidate import CandidateBook
from core.models.ingestion import ScrapeResult
from ..utils.http import Downloader


class BaseScraper(ABC):
    """Base class for all scrapers providing common functionality."""

    # Human readable name used in logs and error messages
    name = 'Base'
    # 'json' payloads are decoded, 'html' payloads are parsed with BeautifulSoup
    response_format = 'html'
    # Maximum number of candidates returned from one fetch, None for no cap
    max_results: Optional[int] = None

    def __init__(self, downloader: Optional[Downloader] = None):
        """
        Initialize the base scraper.

        Args:
            downloader: HTTP downloader to use, a default one is created when omitted
        """
        self.downloader = downloader or Downloader()
        self._setup_logging()

    def _setup_logging(self):
        """Get the per-class scraper logger; handlers and level come from the caller."""
        self.logger = logging.getLogger(self.__class__.__name__)

    def build_url(self, base: str, params: Dict[str, Any]) -> str:
        """
        Construct a URL with query parameters.

        Args:
            base: The base URL.
            params: Dictionary of query parameters, None values are dropped.

        Returns:
            The constructed URL as a string.
        """
        params = {k: v for k, v in params.items() if v is not None}
        return f"{base}?{urlencode(params)}" if params else base

    def parse_html(self, html: str) -> BeautifulSoup:
        """
        Parse HTML content into a BeautifulSoup object.

        Args:
            html: The HTML content to parse.

        Returns:
            A BeautifulSoup object.
        """
        return BeautifulSoup(html or '', 'html.parser')

    def fetch(self, url: str) -> Any:
        """
        Fetch and decode the payload for a URL.

        Raises:
            ScraperError: On network errors, timeouts, non-2xx responses or
                payloads that cannot be decoded.
        """
        self.logger.info(f"Scraping {self.name}: {url}")
        try:
            if self.response_format == 'json':
                return self.downloader.get_json(url)
            return self.parse_html(self.downloader.get_text(url))
        except requests.RequestException as e:
            self.logger.error(f"Error scraping {self.name}: {e}")
            raise ScraperError(self.name, e) from e

    @abstractmethod
    def get_url(self, query: str) -> str:
        """
        Get the URL to fetch for a query.
        Must be implemented by derived classes.
        """
        pass

    @abstractmethod
    def extract_items(self, payload: Any, query: str) -> Iterable[Any]:
        """
        Split a fetched payload into raw items.
        Must be implemented by derived classes.
        """
        pass

    @abstractmethod
    def parse_item(self, item: Any, query: str, url: str) -> Optional[CandidateBook]:
        """
        Turn one raw item into a candidate book.
        Must be implemented by derived classes.

        Args:
            item: One raw item from extract_items
            query: The query being scraped
            url: The URL the payload was fetched from, for resolving relative links

        Returns:
            A CandidateBook, or None when the item has no usable title
        """
        pass

    def scrape(self, query: str) -> ScrapeResult:
        """
        Main scraping method that coordinates the scraping process.

        A malformed item is logged and skipped; it never stops later items
        from being parsed.

        Args:
            query: Subject, search term or page URL, depending on the scraper.

        Returns:
            The candidate books together with per-item parse errors.

        Raises:
            ScraperError: If the fetch itself fails.
        """
        url = self.get_url(query)
        payload = self.fetch(url)

        try:
            items = list(self.extract_items(payload, query) or [])
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            self.logger.error(f"Unexpected payload from {self.name}: {e}")
            raise ScraperError(self.name, e) from e

        result = ScrapeResult()
        for index, item in enumerate(items):
            try:
                book = self.parse_item(item, query, url)
            except Exception as e:
                self.logger.error(f"  Error parsing {self.name} item {index}: {e}")
                result.parse_errors.append(f"item {index}: {e}")
                continue

            if book is None or not book.has_title():
                continue
            result.books.append(book)
            self.logger.info(f"  {book.title} ({', '.join(book.authors)})")

            if self.max_results is not None and len(result.books) >= self.max_results:
                break

        self.logger.info(f"Successfully scraped {len(result.books)} books from {self.name}")
        return result
