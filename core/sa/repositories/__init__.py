# core/sa/repositories/__init__.py
from .source import SourceRepository
from .author import AuthorRepository
from .category import CategoryRepository
from .book import BookRepository
from .scraping_log import ScrapingLogRepository

__all__ = [
    'SourceRepository',
    'AuthorRepository',
    'CategoryRepository',
    'BookRepository',
    'ScrapingLogRepository'
]
