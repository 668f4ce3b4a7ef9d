# tests/test_scrapers/test_open_library_scraper.py
import logging
import pytest
import requests
from unittest.mock import Mock
from core.exceptions import ScraperError
from core.scrapers.open_library_scraper import OpenLibraryScraper
from core.utils.http import Downloader


@pytest.fixture
def downloader():
    return Mock(spec=Downloader)

@pytest.fixture
def scraper(downloader):
    return OpenLibraryScraper(downloader=downloader, limit=20)

def test_get_url(scraper):
    assert scraper.get_url("science fiction") == \
        "https://openlibrary.org/subjects/science%20fiction.json?limit=20"

def test_scrape_subject(scraper, downloader):
    downloader.get_json.return_value = {
        "works": [
            {
                "key": "/works/OL893415W",
                "title": "Dune",
                "first_publish_year": 1965,
                "cover_id": 11481354,
                "authors": [{"name": "Frank Herbert"}],
                "description": {"type": "/type/text", "value": "Desert planet."}
            },
            {
                "key": "/works/OL1W",
                "title": "  Foundation  ",
                "description": "Psychohistory.",
                "authors": [{"name": "Isaac Asimov"}, {"name": " "}]
            }
        ]
    }

    result = scraper.scrape("science")

    assert result.parse_errors == []
    assert len(result.books) == 2
    dune, foundation = result.books
    assert dune.title == "Dune"
    assert dune.publication_year == 1965
    assert dune.authors == ["Frank Herbert"]
    assert dune.categories == ["science"]
    assert dune.description == "Desert planet."
    assert dune.cover_image_url == "https://covers.openlibrary.org/b/id/11481354-L.jpg"
    assert dune.source_url == "https://openlibrary.org/works/OL893415W"
    assert dune.language == "English"
    assert foundation.title == "Foundation"
    assert foundation.description == "Psychohistory."
    assert foundation.authors == ["Isaac Asimov"]
    assert foundation.cover_image_url is None

def test_scrape_skips_untitled_and_placeholder_works(scraper, downloader):
    downloader.get_json.return_value = {
        "works": [{"title": ""}, {"title": "Unknown Title"}, {"key": "/works/x"}, {"title": "Real"}]
    }

    result = scraper.scrape("history")

    assert [b.title for b in result.books] == ["Real"]

def test_scrape_without_works(scraper, downloader):
    downloader.get_json.return_value = {"name": "nothing"}
    assert scraper.scrape("nothing").books == []

def test_malformed_work_does_not_stop_the_rest(scraper, downloader):
    downloader.get_json.return_value = {
        "works": ["not a dict", {"title": "Survivor"}]
    }

    result = scraper.scrape("science")

    assert [b.title for b in result.books] == ["Survivor"]
    assert len(result.parse_errors) == 1
    assert result.parse_errors[0].startswith("item 0:")

def test_network_error_raises_scraper_error(scraper, downloader):
    downloader.get_json.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(ScraperError) as exc_info:
        scraper.scrape("science")

    assert "Open Library" in str(exc_info.value)
    assert "connection refused" in str(exc_info.value)

def test_unexpected_payload_raises_scraper_error(scraper, downloader):
    downloader.get_json.return_value = ["not", "an", "object"]

    with pytest.raises(ScraperError):
        scraper.scrape("science")

def test_author_entries_that_are_not_objects_are_skipped(scraper, downloader):
    downloader.get_json.return_value = {
        "works": [{"title": "Dune", "authors": ["Frank Herbert", None, {"name": "Brian Herbert"}]}]
    }

    result = scraper.scrape("science")

    assert result.parse_errors == []
    assert [b.title for b in result.books] == ["Dune"]
    assert result.books[0].authors == ["Brian Herbert"]

def test_scraper_logger_defers_to_application_logging(scraper):
    assert scraper.logger.name == "OpenLibraryScraper"
    assert scraper.logger.handlers == []
    assert scraper.logger.level == logging.NOTSET
    assert scraper.logger.propagate is True
