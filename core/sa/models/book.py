# core/sa/models/book.py
from datetime import datetime
from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, utcnow

DEFAULT_LANGUAGE = 'English'


class BookAuthor(Base):
    __tablename__ = 'book_author'

    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), primary_key=True)
    author_id: Mapped[int] = mapped_column(ForeignKey('author.id'), primary_key=True)
    position: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 1-based author order

    # Relationships
    book = relationship('Book', back_populates='book_authors')
    author = relationship('Author', back_populates='book_authors')


class BookCategory(Base):
    __tablename__ = 'book_category'

    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), primary_key=True)
    category_id: Mapped[int] = mapped_column(ForeignKey('category.id'), primary_key=True)

    # Relationships
    book = relationship('Book', back_populates='book_categories')
    category = relationship('Category', back_populates='book_categories')


class Book(Base):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    subtitle: Mapped[str | None] = mapped_column(String(500), nullable=True)
    isbn: Mapped[str | None] = mapped_column(String(255), nullable=True)
    publication_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    publisher: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pages: Mapped[int | None] = mapped_column(Integer, nullable=True)
    language: Mapped[str] = mapped_column(String(50), nullable=False, default=DEFAULT_LANGUAGE)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    pdf_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    download_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    source_id: Mapped[int] = mapped_column(ForeignKey('source.id'), nullable=False)
    source_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    scraped_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    source = relationship('Source', back_populates='books')
    book_authors = relationship('BookAuthor', back_populates='book', order_by='BookAuthor.position')
    book_categories = relationship('BookCategory', back_populates='book')

    # Convenience relationships
    authors = relationship('Author', secondary='book_author', viewonly=True, order_by='BookAuthor.position')
    categories = relationship('Category', secondary='book_category', viewonly=True)

    __table_args__ = (
        CheckConstraint("length(title) > 0", name='ck_book_title_not_empty'),
        CheckConstraint("pages IS NULL OR pages >= 0", name='ck_book_pages_non_negative'),

        # Match cascade indexes
        Index('idx_book_isbn', 'isbn'),
        Index('idx_book_title_year', 'title', 'publication_year'),
    )
