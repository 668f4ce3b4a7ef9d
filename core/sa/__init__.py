# core/sa/__init__.py
from .database import Database, get_database
from .models import (
    Base, Source, Book, Author, Category,
    BookAuthor, BookCategory, ScrapingLog
)

__all__ = [
    'Database',
    'get_database',
    'Base',
    'Source',
    'Book',
    'Author',
    'Category',
    'BookAuthor',
    'BookCategory',
    'ScrapingLog'
]
