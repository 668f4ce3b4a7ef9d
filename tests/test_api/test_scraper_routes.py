# tests/test_api/test_scraper_routes.py
import pytest
import requests
from unittest.mock import Mock, patch
from fastapi.testclient import TestClient
from api.main import app
from api.routes.scraper import get_ingestion_service
from core.services.ingestion_service import IngestionService
from core.utils.http import Downloader

OPEN_LIBRARY_PAYLOAD = {
    "works": [{"key": "/works/1", "title": "Dune", "authors": [{"name": "Frank Herbert"}]}]
}

@pytest.fixture
def downloader():
    return Mock(spec=Downloader)

@pytest.fixture
def client(database, downloader):
    service = IngestionService(database, downloader=downloader, batch_delay=0)
    app.dependency_overrides[get_ingestion_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()

def test_scrape_single_source(client, downloader):
    downloader.get_json.return_value = OPEN_LIBRARY_PAYLOAD

    response = client.post("/scraper/scrape", json={
        "type": "openlibrary",
        "query": "science",
        "source_name": "Open Library",
        "base_url": "https://openlibrary.org"
    })

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "completed"
    assert data["books_added"] == 1
    assert data["log_id"] is not None

def test_failed_run_is_reported_in_body(client, downloader):
    downloader.get_json.side_effect = requests.ConnectionError("unreachable")

    response = client.post("/scraper/scrape", json={
        "type": "googlebooks",
        "query": "python",
        "source_name": "Google Books",
        "base_url": "https://books.google.com"
    })

    assert response.status_code == 200
    assert response.json()["status"] == "failed"
    assert "unreachable" in response.json()["error_details"]

def test_custom_without_selectors_is_rejected(client):
    response = client.post("/scraper/scrape", json={
        "type": "custom",
        "query": "https://shop.example.com",
        "source_name": "Shop",
        "base_url": "https://shop.example.com"
    })
    assert response.status_code == 422

def test_unknown_type_is_rejected(client):
    response = client.post("/scraper/scrape", json={
        "type": "librarything", "query": "x", "source_name": "X", "base_url": "https://x.example.com"
    })
    assert response.status_code == 422

def test_scrape_custom_source_with_camel_case_selector(client, downloader):
    downloader.get_text.return_value = (
        '<div class="item"><h3>Clean Code</h3><img src="/c.jpg"></div>'
    )

    response = client.post("/scraper/scrape", json={
        "type": "custom",
        "query": "https://shop.example.com/books",
        "source_name": "Shop",
        "base_url": "https://shop.example.com",
        "selectors": {"container": ".item", "title": "h3", "coverImage": "img"}
    })

    assert response.status_code == 200
    assert response.json()["books_added"] == 1

def test_scrape_multiple_sources(client, downloader):
    downloader.get_json.return_value = OPEN_LIBRARY_PAYLOAD
    downloader.get_text.return_value = "<html></html>"

    response = client.post("/scraper/scrape-multiple", json={"sources": [
        {"type": "openlibrary", "query": "sf", "source_name": "Open Library",
         "base_url": "https://openlibrary.org"},
        {"type": "gutenberg", "query": "sf", "source_name": "Project Gutenberg",
         "base_url": "https://www.gutenberg.org"},
    ]})

    assert response.status_code == 200
    data = response.json()
    assert len(data["results"]) == 2
    assert data["completed"] == 2
    assert data["total_added"] == 1

def test_scrape_multiple_requires_sources(client):
    response = client.post("/scraper/scrape-multiple", json={"sources": []})
    assert response.status_code == 422

def test_stats_and_sources(client, downloader):
    downloader.get_json.return_value = OPEN_LIBRARY_PAYLOAD
    client.post("/scraper/scrape", json={
        "type": "openlibrary", "query": "sf", "source_name": "Open Library",
        "base_url": "https://openlibrary.org"
    })

    stats = client.get("/scraper/stats", params={"limit": 5})
    assert stats.status_code == 200
    assert len(stats.json()) == 1
    assert stats.json()[0]["source_name"] == "Open Library"
    assert stats.json()[0]["status"] == "completed"

    sources = client.get("/scraper/sources")
    assert sources.status_code == 200
    assert [s["name"] for s in sources.json()] == ["Open Library"]

def test_stats_limit_is_validated(client):
    assert client.get("/scraper/stats", params={"limit": 0}).status_code == 422

def test_health(client, database):
    with patch('api.main.get_database', return_value=database):
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
