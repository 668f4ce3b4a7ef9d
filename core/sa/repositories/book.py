# core/sa/repositories/book.py
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from core.models.candidate import CandidateBook
from ..models import Book, BookAuthor, BookCategory, DEFAULT_LANGUAGE
from ..models.base import utcnow
from .author import AuthorRepository
from .category import CategoryRepository

# Fields an incoming candidate may overwrite on an existing book, when it supplies a value
MERGE_FIELDS = ('subtitle', 'publisher', 'pages', 'description', 'cover_image_url', 'isbn')


class BookRepository:
    def __init__(self, session: Session):
        self.session = session
        self.authors = AuthorRepository(session)
        self.categories = CategoryRepository(session)

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by id"""
        return self.session.get(Book, book_id)

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        return (
            self.session.query(Book)
            .filter(Book.isbn == isbn)
            .order_by(Book.id)
            .first()
        )

    def find_book_id(self, candidate: CandidateBook) -> Optional[int]:
        """Find the existing book a candidate refers to.

        Rules are tried in order and the first match wins:
          1. exact ISBN (only when the candidate has one)
          2. exact title and publication year (only when the candidate has a year)
          3. exact title

        Args:
            candidate: The scraped book to match

        Returns:
            The id of the matching book, or None
        """
        if candidate.isbn:
            book = self.get_by_isbn(candidate.isbn)
            if book:
                return book.id

        if candidate.title and candidate.publication_year:
            book = (
                self.session.query(Book)
                .filter(
                    Book.title == candidate.title,
                    Book.publication_year == candidate.publication_year
                )
                .order_by(Book.id)
                .first()
            )
            if book:
                return book.id

        if candidate.title:
            book = (
                self.session.query(Book)
                .filter(Book.title == candidate.title)
                .order_by(Book.id)
                .first()
            )
            if book:
                return book.id

        return None

    def insert_book(self, candidate: CandidateBook, source_id: int) -> int:
        """Insert a new book from a candidate and return its id"""
        now = utcnow()
        book = Book(
            title=candidate.title,
            subtitle=candidate.subtitle,
            isbn=candidate.isbn,
            publication_year=candidate.publication_year,
            publisher=candidate.publisher,
            pages=candidate.pages,
            language=candidate.language or DEFAULT_LANGUAGE,
            description=candidate.description,
            cover_image_url=candidate.cover_image_url,
            source_id=source_id,
            source_url=candidate.source_url,
            pdf_url=candidate.pdf_url,
            download_url=candidate.download_url,
            scraped_at=now,
            last_updated=now
        )
        self.session.add(book)
        self.session.flush()
        return book.id

    def update_book(self, book_id: int, candidate: CandidateBook) -> Book:
        """Merge a candidate into an existing book.

        Only fields the candidate actually supplies overwrite stored values, so
        existing data is never erased by a missing field.

        Raises:
            ValueError: If no book with this id exists
        """
        book = self.get_by_id(book_id)
        if book is None:
            raise ValueError(f"Book {book_id} does not exist")

        for field in MERGE_FIELDS:
            value = getattr(candidate, field)
            if value is not None:
                setattr(book, field, value)
        book.last_updated = utcnow()
        self.session.flush()
        return book

    def relink_authors(self, book_id: int, author_names: List[str]) -> None:
        """Replace a book's authors with the given names, in order.

        Positions are 1-based indexes into ``author_names``. Blank names are
        skipped, and a name listed twice keeps its later position.
        """
        for link in self.session.query(BookAuthor).filter(BookAuthor.book_id == book_id).all():
            self.session.delete(link)
        self.session.flush()

        links: Dict[int, BookAuthor] = {}
        for position, name in enumerate(author_names, start=1):
            if not name or not name.strip():
                continue
            author_id = self.authors.get_or_create_author(name.strip())
            if author_id in links:
                links[author_id].position = position
                continue
            link = BookAuthor(book_id=book_id, author_id=author_id, position=position)
            self.session.add(link)
            links[author_id] = link
        self.session.flush()

    def relink_categories(self, book_id: int, category_names: List[str]) -> None:
        """Link a book to the given categories, keeping links it already has"""
        for name in category_names:
            if not name or not name.strip():
                continue
            category_id = self.categories.get_or_create_category(name.strip())
            existing = (
                self.session.query(BookCategory)
                .filter(
                    BookCategory.book_id == book_id,
                    BookCategory.category_id == category_id
                )
                .first()
            )
            if not existing:
                self.session.add(BookCategory(book_id=book_id, category_id=category_id))
                self.session.flush()
