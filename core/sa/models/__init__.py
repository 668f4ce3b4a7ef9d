# core/sa/models/__init__.py
from .base import Base
from .source import Source
from .author import Author
from .category import Category
from .book import Book, BookAuthor, BookCategory, DEFAULT_LANGUAGE
from .scraping_log import ScrapingLog

__all__ = [
    'Base',
    'Source',
    'Author',
    'Category',
    'Book',
    'BookAuthor',
    'BookCategory',
    'ScrapingLog',
    'DEFAULT_LANGUAGE'
]
