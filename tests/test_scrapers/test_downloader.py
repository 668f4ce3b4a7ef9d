# tests/test_scrapers/test_downloader.py
import pytest
import requests
from unittest.mock import Mock, patch
from core.utils.http import Downloader


@patch('core.utils.http.requests.get')
def test_get_json_sends_headers_and_timeout(mock_get):
    response = Mock()
    response.json.return_value = {"works": []}
    mock_get.return_value = response

    downloader = Downloader(timeout=5, user_agent="academix-test")
    data = downloader.get_json("https://example.com/api", params={"q": "x"})

    assert data == {"works": []}
    mock_get.assert_called_once_with(
        "https://example.com/api",
        params={"q": "x"},
        headers={"User-Agent": "academix-test"},
        timeout=5
    )
    response.raise_for_status.assert_called_once()

@patch('core.utils.http.requests.get')
def test_get_text(mock_get):
    mock_get.return_value = Mock(text="<html></html>")
    assert Downloader().get_text("https://example.com") == "<html></html>"

@patch('core.utils.http.requests.get')
def test_non_2xx_status_raises(mock_get):
    response = Mock()
    response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
    mock_get.return_value = response

    with pytest.raises(requests.HTTPError):
        Downloader().get_text("https://example.com/missing")
