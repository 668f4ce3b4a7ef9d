# tests/test_scrapers/test_custom_scraper.py
import pytest
from unittest.mock import Mock
from core.models.candidate import CustomSelectors
from core.scrapers.custom_scraper import CustomScraper
from core.utils.http import Downloader

PAGE_URL = "https://library.example.com/catalog/list.html"

HTML = """
<html><body>
  <div class="book">
    <h2 class="name">  The   Pragmatic Programmer </h2>
    <span class="author">Andrew Hunt</span>
    <span class="author">David Thomas</span>
    <span class="year">Published 1999</span>
    <span class="pages">352 pages</span>
    <span class="isbn">9780201616224</span>
    <span class="tag">Programming</span>
    <img class="cover" src="/covers/pragmatic.jpg">
    <a class="more" href="pragmatic.html">Details</a>
  </div>
  <div class="book">
    <h2 class="name">Refactoring</h2>
    <span class="author">Martin Fowler</span>
    <a class="more" href="https://elsewhere.example.org/refactoring">Details</a>
  </div>
  <div class="book">
    <span class="author">No Title Here</span>
  </div>
</body></html>
"""

@pytest.fixture
def downloader():
    return Mock(spec=Downloader)

@pytest.fixture
def selectors():
    return CustomSelectors(
        container=".book",
        title=".name",
        authors=".author",
        year=".year",
        pages=".pages",
        isbn=".isbn",
        categories=".tag",
        coverImage="img.cover",
        link="a.more"
    )

def test_selectors_accept_field_name_for_cover_image():
    assert CustomSelectors(container=".x", cover_image="img").cover_image == "img"

def test_scrape_configured_page(selectors, downloader):
    downloader.get_text.return_value = HTML
    scraper = CustomScraper(selectors, downloader=downloader)

    result = scraper.scrape(PAGE_URL)

    downloader.get_text.assert_called_once_with(PAGE_URL)
    assert [b.title for b in result.books] == ["The Pragmatic Programmer", "Refactoring"]

    pragmatic, refactoring = result.books
    assert pragmatic.authors == ["Andrew Hunt", "David Thomas"]
    assert pragmatic.publication_year == 1999
    assert pragmatic.pages == 352
    assert pragmatic.isbn == "9780201616224"
    assert pragmatic.categories == ["Programming"]
    assert pragmatic.cover_image_url == "https://library.example.com/covers/pragmatic.jpg"
    assert pragmatic.source_url == "https://library.example.com/catalog/pragmatic.html"
    assert pragmatic.subtitle is None
    assert pragmatic.publisher is None

    assert refactoring.source_url == "https://elsewhere.example.org/refactoring"
    assert refactoring.cover_image_url is None
    assert refactoring.publication_year is None
    assert refactoring.pages is None

def test_container_matching_nothing_yields_no_books(selectors, downloader):
    downloader.get_text.return_value = "<html><body><p>Empty</p></body></html>"
    scraper = CustomScraper(selectors, downloader=downloader)

    result = scraper.scrape(PAGE_URL)

    assert result.books == []
    assert result.parse_errors == []

def test_only_container_and_title(downloader):
    downloader.get_text.return_value = HTML
    scraper = CustomScraper(CustomSelectors(container=".book", title=".name"), downloader=downloader)

    books = scraper.scrape(PAGE_URL).books

    assert len(books) == 2
    assert books[0].authors == []
    assert books[0].isbn is None

def test_without_title_selector_nothing_is_kept(downloader):
    downloader.get_text.return_value = HTML
    scraper = CustomScraper(CustomSelectors(container=".book"), downloader=downloader)
    assert scraper.scrape(PAGE_URL).books == []
