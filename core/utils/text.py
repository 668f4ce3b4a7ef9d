# core/utils/text.py
import re
from typing import Optional
from urllib.parse import urljoin

_WHITESPACE = re.compile(r'\s+')
_YEAR = re.compile(r'\d{4}')
_NUMBER = re.compile(r'\d+')
_BYLINE = re.compile(r'^by(?:\s+|$)', re.IGNORECASE)


def clean_text(text: Optional[str]) -> Optional[str]:
    """Trim text and collapse internal whitespace runs to a single space.

    Returns None for missing input or input that is only whitespace.
    """
    if not text:
        return None
    cleaned = _WHITESPACE.sub(' ', text.strip())
    return cleaned or None


def extract_year(text: Optional[str]) -> Optional[int]:
    """Return the first run of four digits as an integer.

    Any four digits qualify, so a year-like run inside an ISBN or a page
    count is picked up as well.
    """
    if not text:
        return None
    match = _YEAR.search(str(text))
    return int(match.group(0)) if match else None


def extract_number(text: Optional[str]) -> Optional[int]:
    """Return the first run of digits as an integer"""
    if not text:
        return None
    match = _NUMBER.search(str(text))
    return int(match.group(0)) if match else None


def strip_byline(text: Optional[str]) -> Optional[str]:
    """Remove a leading 'by ' from an author byline"""
    cleaned = clean_text(text)
    if not cleaned:
        return None
    return _BYLINE.sub('', cleaned).strip() or None


def absolute_url(href: Optional[str], page_url: str) -> Optional[str]:
    """Resolve a possibly relative link against the page it was found on"""
    if not href:
        return None
    href = href.strip()
    if href.startswith('http'):
        return href
    return urljoin(page_url, href)
